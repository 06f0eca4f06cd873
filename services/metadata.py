from pathlib import Path

from mutagen import MutagenError
from mutagen.easyid3 import EasyID3
from mutagen.id3 import ID3NoHeaderError

from models.catalog import CatalogEntry
from services.errors import MetadataError

UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_ALBUM = "Unknown Album"


class MetadataExtractor:
    """Reads title, artist and album from a file's ID3 tag."""

    def extract(self, file_path: Path) -> CatalogEntry:
        """Extract tag metadata from an audio file using mutagen.

        Args:
            file_path: Path to audio file.

        Returns:
            CatalogEntry built from the tag. Missing fields fall back to the
            file name (title) or an "Unknown" placeholder, and a file with no
            ID3 tag at all yields an entry made only of fallbacks.

        Raises:
            MetadataError: If the tag is corrupted or the file cannot be read.
        """
        file_path = Path(file_path)
        try:
            tags = EasyID3(str(file_path))
        except ID3NoHeaderError:
            tags = {}
        except (MutagenError, OSError) as e:
            raise MetadataError(file_path, e) from e

        return CatalogEntry(
            title=self._field(tags, 'title') or file_path.stem,
            artist=self._field(tags, 'artist') or UNKNOWN_ARTIST,
            album=self._field(tags, 'album') or UNKNOWN_ALBUM,
            file_path=str(file_path),
        )

    @staticmethod
    def _field(tags, key: str) -> str:
        values = tags.get(key)
        if not values:
            return ""
        if isinstance(values, list):
            return "/".join(str(v) for v in values if v)
        return str(values)
