"""
Module: schema

Purpose:
    Generate a JSON Schema for gig files so editors can autocomplete
    song nicknames and image variants from the config.

Key Functions:
    - generate_schema(): Schema dict for a config
    - song_completions(): Allowed song references
    - write_schema(): Write the schema as indented JSON

Dependencies:
    - json (std)
    - gigsheets.loading: AppConfig

Used By:
    - cli: generate-schema command
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .loading import DEFAULT_VARIANT, AppConfig, LoaderError

logger = logging.getLogger(__name__)

SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"
MAX_EXAMPLES = 10


def song_completions(config: AppConfig) -> List[str]:
    """
    List every valid song reference.

    Each nickname is listed, followed by "nickname#variant" for the
    non-default variants of songs with more than one image.
    """
    completions: List[str] = []
    for song in config.songs:
        completions.append(song.nickname)
        if len(song.images) > 1:
            completions.extend(
                f"{song.nickname}#{variant}"
                for variant in song.images
                if variant != DEFAULT_VARIANT
            )
    return completions


def generate_schema(config: AppConfig) -> Dict[str, Any]:
    """
    Build the gig-file JSON Schema for a config.

    Example:
        >>> schema = generate_schema(config)
        >>> schema["properties"]["sets"]["items"]["properties"]["songs"]["items"]["enum"]
        ['ballad', 'rocker', 'rocker#acoustic']
    """
    completions = song_completions(config)
    return {
        "$schema": SCHEMA_DRAFT,
        "title": "Gig Configuration Schema",
        "description": "Schema for gigsheets gig YAML files with autocomplete for songs and image variants",
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "Name of the gig",
            },
            "sets": {
                "type": "array",
                "description": "List of sets in the gig",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": {
                            "type": "string",
                            "description": "Name of the set",
                        },
                        "songs": {
                            "type": "array",
                            "description": "List of songs in the set",
                            "items": {
                                "type": "string",
                                "description": "Song nickname, optionally with image variant (e.g., 'song1' or 'song1#v2')",
                                "enum": completions,
                                "examples": completions[:MAX_EXAMPLES],
                            },
                        },
                    },
                    "required": ["name", "songs"],
                },
            },
        },
        "required": ["name", "sets"],
    }


def write_schema(schema: Dict[str, Any], path: Path) -> Path:
    """
    Write a schema as indented JSON, creating parent folders.

    Raises:
        LoaderError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(schema, indent=2), encoding="utf-8")
    except OSError as e:
        raise LoaderError(f"failed to write schema file {path}: {e}") from e
    logger.info(f"Successfully generated JSON Schema: {path}")
    return path
