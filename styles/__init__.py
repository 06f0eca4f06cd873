"""Shared style constants for muse."""

COLORS = {
    "primary": "#ff8c00",
    "muted": "#888888",
}

COLOR_PRIMARY = COLORS["primary"]
COLOR_MUTED = COLORS["muted"]
