"""
Tests for gigsheets.layout.composer

Test Coverage:
- parse_reference(): "nickname#variant" splitting
- compose_entry(): Song/variant lookup, image override, load errors
- compose_document(): Set and entry order
- all_songs_gig()
"""
from pathlib import Path

import pytest

from gigsheets.core.models import ErrorEntry, ImageEntry
from gigsheets.images import ImageDecodeError, ImageNotFoundError, ImageProvider
from gigsheets.layout import all_songs_gig, compose_document, compose_entry, parse_reference
from gigsheets.loading import Gig, GigSet


class RecordingProvider(ImageProvider):
    """Provider returning fixed-size entries and recording requested paths."""

    def __init__(self, failures=None):
        self.paths = []
        self.failures = failures or {}

    def load(self, path: Path, source_ref: str) -> ImageEntry:
        self.paths.append(path)
        if path.name in self.failures:
            raise self.failures[path.name](f"Image file not found: {path}")
        return ImageEntry(source_ref=source_ref, natural_width=10, natural_height=10)


@pytest.fixture
def song_map():
    return {
        "ballad": {"default": "ballad.png"},
        "rocker": {"default": "rocker.png", "acoustic": "rocker-acoustic.png"},
        "abs": {"default": "/library/abs.png"},
    }


@pytest.fixture
def provider():
    return RecordingProvider()


@pytest.mark.parametrize("reference, expected", [
    ("ballad", ("ballad", "default")),
    ("ballad#acoustic", ("ballad", "acoustic")),
    ("ballad#", ("ballad", "")),
])
def test_parse_reference(reference, expected):
    assert parse_reference(reference) == expected


class TestComposeEntry:
    """Tests for single reference resolution."""

    def test_default_variant_resolves_against_images_dir(self, song_map, provider):
        # Act
        entry = compose_entry("ballad", song_map, provider, images_dir=Path("/imgs"))

        # Assert
        assert isinstance(entry, ImageEntry)
        assert entry.source_ref == "ballad"
        assert provider.paths == [Path("/imgs/ballad.png")]

    def test_named_variant(self, song_map, provider):
        compose_entry("rocker#acoustic", song_map, provider, images_dir=Path("/imgs"))

        assert provider.paths == [Path("/imgs/rocker-acoustic.png")]

    def test_absolute_path_is_used_as_is(self, song_map, provider):
        compose_entry("abs", song_map, provider, images_dir=Path("/imgs"))

        assert provider.paths == [Path("/library/abs.png")]

    def test_unknown_song_becomes_error(self, song_map, provider):
        entry = compose_entry("missing", song_map, provider, images_dir=Path("/imgs"))

        assert entry == ErrorEntry("No configuration found for song 'missing'")
        assert provider.paths == []

    def test_unknown_variant_becomes_error(self, song_map, provider):
        """Requesting a variant the song lacks yields a visible error."""
        entry = compose_entry("ballad#acoustic", song_map, provider, images_dir=Path("/imgs"))

        assert entry == ErrorEntry("No image 'acoustic' found for song 'ballad'")

    def test_override_replaces_variant_when_available(self, song_map, provider):
        compose_entry("rocker", song_map, provider, images_dir=Path("/imgs"), image_override="acoustic")

        assert provider.paths == [Path("/imgs/rocker-acoustic.png")]

    def test_override_ignored_when_song_lacks_it(self, song_map, provider):
        compose_entry("ballad", song_map, provider, images_dir=Path("/imgs"), image_override="acoustic")

        assert provider.paths == [Path("/imgs/ballad.png")]

    def test_override_rescues_missing_gig_variant(self, song_map, provider):
        entry = compose_entry(
            "rocker#live", song_map, provider, images_dir=Path("/imgs"), image_override="acoustic"
        )

        assert isinstance(entry, ImageEntry)
        assert provider.paths == [Path("/imgs/rocker-acoustic.png")]

    @pytest.mark.parametrize("error_type", [ImageNotFoundError, ImageDecodeError])
    def test_load_failure_becomes_error(self, song_map, error_type, caplog):
        # Arrange
        provider = RecordingProvider(failures={"ballad.png": error_type})

        # Act
        entry = compose_entry(
            "ballad", song_map, provider, images_dir=Path("/imgs"), source_label="friday.yaml"
        )

        # Assert
        assert isinstance(entry, ErrorEntry)
        assert entry.message == f"Image file not found: {Path('/imgs/ballad.png')}"
        assert "friday.yaml: Image file not found" in caplog.text


class TestComposeDocument:
    """Tests for whole-gig composition."""

    def test_sets_and_order_are_preserved(self, song_map, provider):
        # Arrange
        gig = Gig(
            name="Friday",
            sets=(
                GigSet("Set 1", ("ballad", "nope", "rocker#acoustic")),
                GigSet("Set 2", ("rocker",)),
            ),
        )

        # Act
        doc = compose_document(gig, song_map, images_dir=Path("/imgs"), provider=provider)

        # Assert
        assert doc.name == "Friday"
        assert [s.name for s in doc.sets] == ["Set 1", "Set 2"]
        first = doc.sets[0].entries
        assert [type(e) for e in first] == [ImageEntry, ErrorEntry, ImageEntry]
        assert first[2].source_ref == "rocker#acoustic"
        assert doc.error_count == 1

    def test_all_songs_gig_lists_every_song_once(self, song_map, provider):
        gig = all_songs_gig(list(song_map))

        doc = compose_document(gig, song_map, images_dir=Path("/imgs"), provider=provider)

        assert doc.name == "All Songs"
        assert len(doc.sets) == 1
        assert [e.source_ref for e in doc.sets[0].entries] == ["ballad", "rocker", "abs"]
