"""Recursive discovery of candidate audio files under a root directory."""

import logging
import os
from pathlib import Path
from typing import Iterator, NamedTuple

logger = logging.getLogger(__name__)

CANDIDATE_EXTENSION = ".mp3"


class ScanEntry(NamedTuple):
    """A file-system entry reached by the walk."""
    path: Path
    name: str
    is_file: bool


class Scanner:
    """Walks a directory tree depth-first without following symlinks."""

    def __init__(self, root: Path):
        """Initialize Scanner.

        Args:
            root: Directory to walk. A missing root yields no entries.
        """
        self.root = Path(root)

    def walk(self) -> Iterator[ScanEntry]:
        """Yield every entry below the root.

        Entries of each directory are visited in file-name order, descending
        into a directory right after yielding it. Directories that cannot be
        listed are skipped and the walk carries on.
        """
        stack = [self._list_dir(self.root)]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                continue

            try:
                is_file = child.is_file(follow_symlinks=False)
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError as e:
                logger.debug(f"Skipping unreadable entry {child.path}: {e}")
                continue

            yield ScanEntry(Path(child.path), child.name, is_file)

            if is_dir:
                stack.append(self._list_dir(Path(child.path)))

    def candidates(self) -> Iterator[Path]:
        """Yield paths of the walked entries that pass the extension filter."""
        for entry in self.walk():
            if self.is_candidate(entry):
                yield entry.path

    @staticmethod
    def is_candidate(entry: ScanEntry) -> bool:
        """Regular files whose name ends with ``.mp3``, ignoring case."""
        return entry.is_file and entry.name.lower().endswith(CANDIDATE_EXTENSION)

    @staticmethod
    def _list_dir(directory: Path) -> Iterator[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                children = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            return iter(())
        return iter(children)
