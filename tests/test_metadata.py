import pytest

from services.errors import MetadataError
from services.metadata import MetadataExtractor, UNKNOWN_ALBUM, UNKNOWN_ARTIST


class TestMetadataExtractor:
    """Tests for MetadataExtractor.extract()."""

    def test_reads_all_fields(self, tmp_path, tagged_mp3):
        path = tagged_mp3(tmp_path / "a.mp3", title="Alpha", artist="X", album="Y")

        entry = MetadataExtractor().extract(path)

        assert (entry.title, entry.artist, entry.album) == ("Alpha", "X", "Y")
        assert entry.file_path == str(path)

    def test_missing_fields_use_placeholders(self, tmp_path, tagged_mp3):
        path = tagged_mp3(tmp_path / "Intro.mp3", artist="X")

        entry = MetadataExtractor().extract(path)

        assert entry.title == "Intro"
        assert entry.artist == "X"
        assert entry.album == UNKNOWN_ALBUM

    def test_file_without_tag_is_degraded_not_fatal(self, tmp_path):
        path = tmp_path / "untagged.mp3"
        path.touch()

        entry = MetadataExtractor().extract(path)

        assert entry.title == "untagged"
        assert entry.artist == UNKNOWN_ARTIST
        assert entry.album == UNKNOWN_ALBUM

    def test_multiple_values_are_joined(self, tmp_path, tagged_mp3):
        path = tagged_mp3(tmp_path / "duet.mp3", title="Duet", artist=["A", "B"], album="Z")

        entry = MetadataExtractor().extract(path)

        assert entry.artist == "A/B"

    def test_corrupt_tag_raises(self, corrupt_mp3):
        with pytest.raises(MetadataError) as exc_info:
            MetadataExtractor().extract(corrupt_mp3)

        assert exc_info.value.path == corrupt_mp3
        assert "bad.mp3" in str(exc_info.value)

    def test_entries_are_immutable(self, tmp_path, tagged_mp3):
        path = tagged_mp3(tmp_path / "a.mp3", title="Alpha", artist="X", album="Y")
        entry = MetadataExtractor().extract(path)

        with pytest.raises(AttributeError):
            entry.title = "Other"
