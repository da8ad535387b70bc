"""
Tests for gigsheets.config

Test Coverage:
- GenerateOptions validation and derived file names
"""
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from gigsheets.config import GenerateOptions


def test_defaults():
    options = GenerateOptions()

    assert options.config_path == Path("config.yaml")
    assert options.spacing is None
    assert options.all_songs is False


def test_options_are_immutable():
    options = GenerateOptions()

    with pytest.raises(FrozenInstanceError):
        options.spacing = 3.0


def test_negative_spacing_raises():
    with pytest.raises(ValueError, match="spacing must be non-negative"):
        GenerateOptions(spacing=-0.5)


@pytest.mark.parametrize("override, expected", [
    (None, "_all.pdf"),
    ("acoustic", "_all_acoustic.pdf"),
])
def test_all_songs_filename(override, expected):
    assert GenerateOptions(image_override=override).all_songs_filename == expected
