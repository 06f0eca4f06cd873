class MuseError(Exception):
    """Base exception for muse."""
    pass


class MetadataError(MuseError):
    """Tag metadata could not be read from an audio file."""

    def __init__(self, path, reason):
        super().__init__(f"Could not read tags from {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigurationError(MuseError):
    """Configuration related errors."""
    pass
