"""
Tests for gigsheets.schema

Test Coverage:
- song_completions(): Nicknames and variant references
- generate_schema(): Draft-07 structure
- write_schema(): File output
"""
import json
from pathlib import Path

from gigsheets.loading import AppConfig, SongConfig, load_config
from gigsheets.schema import generate_schema, song_completions, write_schema


def _songs_items(schema):
    return schema["properties"]["sets"]["items"]["properties"]["songs"]["items"]


def test_completions_include_non_default_variants(project):
    config = load_config(project / "config.yaml")

    assert song_completions(config) == ["ballad", "rocker", "rocker#acoustic"]


def test_single_variant_images_map_lists_nickname_only():
    config = AppConfig(path=Path("config.yaml"), songs=(
        SongConfig("solo", images={"live": "solo-live.png"}),
    ))

    assert song_completions(config) == ["solo"]


def test_schema_structure(project):
    # Act
    schema = generate_schema(load_config(project / "config.yaml"))

    # Assert
    assert schema["$schema"] == "http://json-schema.org/draft-07/schema#"
    assert schema["required"] == ["name", "sets"]
    assert schema["properties"]["sets"]["items"]["required"] == ["name", "songs"]
    assert _songs_items(schema)["enum"] == ["ballad", "rocker", "rocker#acoustic"]


def test_examples_are_limited_to_ten():
    config = AppConfig(
        path=Path("config.yaml"),
        songs=tuple(SongConfig(f"song{i:02d}", image=f"{i}.png") for i in range(15)),
    )

    items = _songs_items(generate_schema(config))

    assert len(items["enum"]) == 15
    assert items["examples"] == [f"song{i:02d}" for i in range(10)]


def test_write_schema_creates_folders(project, tmp_path):
    # Arrange
    schema = generate_schema(load_config(project / "config.yaml"))
    target = tmp_path / "schemas" / "gig-schema.json"

    # Act
    write_schema(schema, target)

    # Assert
    assert json.loads(target.read_text(encoding="utf-8")) == schema
