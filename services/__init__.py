from .activation import ActivationHandler, SelectionRecorder
from .errors import ConfigurationError, MetadataError, MuseError
from .metadata import MetadataExtractor
from .music_library import MusicLibrary
from .scanner import ScanEntry, Scanner

__all__ = [
    'ActivationHandler',
    'SelectionRecorder',
    'ConfigurationError',
    'MetadataError',
    'MuseError',
    'MetadataExtractor',
    'MusicLibrary',
    'ScanEntry',
    'Scanner',
]
