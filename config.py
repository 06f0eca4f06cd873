"""
Configuration for muse.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from services.errors import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
SPLIT_MIN = 10
SPLIT_MAX = 90


@dataclass
class MuseConfig:
    """Application configuration settings."""
    
    # Directory scanned at startup
    root_path: str = "test_dir"
    
    # Height of the library table as a percentage of the screen
    split_percent: int = 50
    
    # Abort startup on the first unreadable file
    strict: bool = False
    
    log_level: str = "INFO"
    
    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MuseConfig":
        """Build a configuration from MUSE_* environment variables."""
        environ = os.environ if environ is None else environ
        config = cls()
        
        if environ.get("MUSE_ROOT"):
            config.root_path = environ["MUSE_ROOT"]
        if environ.get("MUSE_SPLIT"):
            try:
                config.split_percent = int(environ["MUSE_SPLIT"])
            except ValueError as e:
                raise ConfigurationError(f"MUSE_SPLIT must be an integer, got {environ['MUSE_SPLIT']!r}") from e
        if environ.get("MUSE_STRICT"):
            config.strict = environ["MUSE_STRICT"].strip().lower() in ("1", "true", "yes", "on")
        if environ.get("MUSE_LOG_LEVEL"):
            config.log_level = environ["MUSE_LOG_LEVEL"].upper()
        
        config.validate()
        return config
    
    def validate(self) -> None:
        """Raise ConfigurationError for out-of-range values."""
        if not (SPLIT_MIN <= self.split_percent <= SPLIT_MAX):
            raise ConfigurationError(
                f"Split must be {SPLIT_MIN}-{SPLIT_MAX}, got {self.split_percent}"
            )
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.log_level}")
        if not self.root_path:
            raise ConfigurationError("Root path must not be empty")
