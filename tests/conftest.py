import sys

import pytest
from pathlib import Path

from mutagen.easyid3 import EasyID3


def write_tags(path: Path, **fields) -> Path:
    """Write an ID3 tag holding ``fields`` to ``path``, creating the file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tags = EasyID3()
    for key, value in fields.items():
        tags[key] = value
    tags.save(str(path))
    return path


@pytest.hookimpl(wrapper=True, tryfirst=True)
def pytest_sessionfinish():
    """Let pytest's recursive tmp_path cleanup remove very deep test trees."""
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(limit, 10000))
    try:
        return (yield)
    finally:
        sys.setrecursionlimit(limit)


@pytest.fixture
def tagged_mp3():
    """Factory for mp3 files carrying an ID3 tag."""
    return write_tags


@pytest.fixture
def music_dir(tmp_path):
    """Create the two-track library used by the browsing scenario."""
    root = tmp_path / "test_dir"
    write_tags(root / "a.mp3", title="Alpha", artist="X", album="Y")
    write_tags(root / "b.mp3", title="Beta", artist="X", album="Z")
    yield root


@pytest.fixture
def corrupt_mp3(tmp_path):
    """An mp3 whose ID3 header announces an unsupported version."""
    path = tmp_path / "broken" / "bad.mp3"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"ID3\x09\x00\x00\x00\x00\x00\x00" + b"\x00" * 32)
    yield path
