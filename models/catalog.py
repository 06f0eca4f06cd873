from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(frozen=True)
class CatalogEntry:
    """Represents one discovered audio file and its tag metadata."""
    title: str
    artist: str
    album: str
    file_path: str = ""

    @property
    def cells(self) -> tuple[str, str, str]:
        """Column values in display order: Track, Artist, Album."""
        return (self.title, self.artist, self.album)


@dataclass(frozen=True)
class Catalog:
    """Ordered, read-only result of a library scan.

    Entries keep the order in which the walk discovered their files.
    """
    root: str
    entries: tuple[CatalogEntry, ...] = ()
    skipped: tuple[str, ...] = field(default=(), compare=False)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> CatalogEntry:
        return self.entries[index]

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def get(self, index: Optional[int]) -> Optional[CatalogEntry]:
        """Return the entry at ``index`` or None when it is out of range."""
        if index is not None and 0 <= index < len(self.entries):
            return self.entries[index]
        return None
