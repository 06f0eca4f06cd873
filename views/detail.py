from textual.widgets import Static


class DetailPane(Static):
    """Empty block under the library, reserved for track details."""
    
    DEFAULT_CSS = """
    DetailPane {
        background: #1a1a1a;
        height: 1fr;
    }
    """
