"""Hook invoked when the user activates a catalog row."""

import logging
from typing import Optional, Protocol

from models.catalog import CatalogEntry

logger = logging.getLogger(__name__)


class ActivationHandler(Protocol):
    """Anything that can receive the entry chosen with Enter."""

    def __call__(self, entry: CatalogEntry) -> None:
        ...


class SelectionRecorder:
    """Default handler: remembers the last chosen entry."""

    def __init__(self):
        self.chosen: Optional[CatalogEntry] = None

    def __call__(self, entry: CatalogEntry) -> None:
        self.chosen = entry
        logger.info(f"Selected track: {entry.title} - {entry.artist}")
