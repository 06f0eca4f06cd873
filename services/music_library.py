import logging
from pathlib import Path
from typing import List, Optional

from models.catalog import Catalog, CatalogEntry
from services.errors import MetadataError
from services.metadata import MetadataExtractor
from services.scanner import Scanner

logger = logging.getLogger(__name__)


class MusicLibrary:
    """Service for discovering music files and building the catalog."""
    
    def __init__(
        self,
        music_dir: Path,
        strict: bool = False,
        scanner: Optional[Scanner] = None,
        extractor: Optional[MetadataExtractor] = None,
    ):
        """Initialize MusicLibrary for a music directory.
        
        Args:
            music_dir: Path to music directory.
            strict: Abort the scan on the first file whose tags cannot be read
                instead of skipping it.
            scanner: Scanner to walk the directory with.
            extractor: Extractor to read tags with.
        """
        self.music_dir = Path(music_dir)
        self.strict = strict
        self.scanner = scanner or Scanner(self.music_dir)
        self.extractor = extractor or MetadataExtractor()
    
    def scan(self) -> Catalog:
        """Scan music directory for mp3 files and build the catalog.
        
        Returns:
            Catalog with one entry per readable file, in discovery order.
            
        Raises:
            MetadataError: In strict mode, for the first unreadable file.
        """
        logger.info(f"Scanning {self.music_dir} (strict={self.strict})")
        entries: List[CatalogEntry] = []
        skipped: List[str] = []
        
        for file_path in self.scanner.candidates():
            try:
                entries.append(self.extractor.extract(file_path))
            except MetadataError as e:
                if self.strict:
                    logger.error(f"Aborting scan: {e}")
                    raise
                logger.warning(f"Skipping {file_path}: {e.reason}")
                skipped.append(str(file_path))
        
        logger.info(f"Scan finished: {len(entries)} tracks, {len(skipped)} skipped")
        return Catalog(root=str(self.music_dir), entries=tuple(entries), skipped=tuple(skipped))
