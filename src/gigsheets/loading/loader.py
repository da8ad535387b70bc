"""
Module: loading.loader

Purpose:
    Read and validate the config file and gig files (YAML).

Key Functions:
    - load_config(): Parse config.yaml into AppConfig
    - load_gig(): Parse one gig file into Gig
    - discover_gigs(): Find gig files in lexicographic order
    - write_config(): Serialize AppConfig back to YAML

Key Classes:
    - LoaderError: Exception for unreadable or malformed files

Dependencies:
    - yaml (PyYAML): YAML parsing
    - loading.models: AppConfig, Gig

Used By:
    - controller: Batch generation
    - validation, schema: Config tooling
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .models import AppConfig, Gig, GigSet, SongConfig

logger = logging.getLogger(__name__)

GIG_PATTERNS = ("*.yaml", "*.yml")


class LoaderError(Exception):
    """Error loading a config or gig file."""
    pass


def _read_yaml(path: Path, kind: str) -> Dict[str, Any]:
    """Read a YAML mapping, raising LoaderError on any failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"failed to read {kind} file {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LoaderError(f"failed to parse {kind} YAML {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LoaderError(f"{kind} file {path} must contain a mapping")
    return data


def _require_str(value: Any, field_name: str, path: Path) -> str:
    if not isinstance(value, str):
        raise LoaderError(f"{path}: '{field_name}' must be a string, got {type(value).__name__}")
    return value


def _parse_song(raw: Any, index: int, path: Path) -> SongConfig:
    """Parse one entry of the songs list."""
    if not isinstance(raw, dict):
        raise LoaderError(f"{path}: songs[{index}] must be a mapping")

    nickname = raw.get("nickname")
    if not nickname:
        raise LoaderError(f"{path}: songs[{index}] is missing 'nickname'")
    nickname = _require_str(nickname, f"songs[{index}].nickname", path)

    image = raw.get("image")
    if image is not None:
        image = _require_str(image, f"songs[{index}].image", path)

    images = raw.get("images") or {}
    if not isinstance(images, dict):
        raise LoaderError(f"{path}: songs[{index}].images must be a mapping")
    images = {
        str(variant): _require_str(img, f"songs[{index}].images.{variant}", path)
        for variant, img in images.items()
    }

    return SongConfig(nickname=nickname, image=image or None, images=images)


def load_config(path: Path) -> AppConfig:
    """
    Parse a config file.

    Args:
        path: Path to config.yaml

    Returns:
        AppConfig with songs in file order

    Raises:
        LoaderError: If the file is missing, not YAML, or malformed

    Example:
        >>> config = load_config(Path("config.yaml"))
        >>> config.song_map()["ballad"]
        {'default': 'ballad.png'}
    """
    path = Path(path)
    data = _read_yaml(path, "config")

    spacing = data.get("spacing")
    if spacing is not None:
        if isinstance(spacing, bool) or not isinstance(spacing, (int, float)):
            raise LoaderError(f"{path}: 'spacing' must be a number")
        spacing = float(spacing)

    songs_raw = data.get("songs") or []
    if not isinstance(songs_raw, list):
        raise LoaderError(f"{path}: 'songs' must be a list")

    songs = tuple(_parse_song(raw, i, path) for i, raw in enumerate(songs_raw))

    config = AppConfig(
        path=path,
        image_folder=_require_str(data.get("imageFolder", ""), "imageFolder", path),
        gigs_folder=_require_str(data.get("gigsFolder", ""), "gigsFolder", path),
        output_folder=_require_str(data.get("outputFolder", ""), "outputFolder", path),
        spacing=spacing,
        songs=songs,
    )
    logger.debug(f"Loaded config {path} with {len(songs)} songs")
    return config


def load_gig(path: Path) -> Gig:
    """
    Parse a gig file.

    Song references are kept as strings; resolution against the song
    catalogue happens in the composer so unknown songs become visible
    errors instead of load failures.

    Raises:
        LoaderError: If the file is missing, not YAML, or malformed
    """
    path = Path(path)
    data = _read_yaml(path, "gig")

    name = data.get("name")
    name = path.stem if name is None else _require_str(name, "name", path)

    sets_raw = data.get("sets") or []
    if not isinstance(sets_raw, list):
        raise LoaderError(f"{path}: 'sets' must be a list")

    sets: List[GigSet] = []
    for i, raw in enumerate(sets_raw):
        if not isinstance(raw, dict):
            raise LoaderError(f"{path}: sets[{i}] must be a mapping")
        songs = raw.get("songs") or []
        if not isinstance(songs, list):
            raise LoaderError(f"{path}: sets[{i}].songs must be a list")
        sets.append(GigSet(
            name=str(raw.get("name") or f"Set {i + 1}"),
            songs=tuple(str(s) for s in songs),
        ))

    return Gig(name=name, sets=tuple(sets), source=path)


def discover_gigs(gigs_dir: Path) -> List[Path]:
    """
    Find gig files (*.yaml, *.yml) in lexicographic filename order.

    Returns an empty list when the folder does not exist.
    """
    if not gigs_dir.is_dir():
        logger.warning(f"Gigs folder not found: {gigs_dir}")
        return []

    found = {p for pattern in GIG_PATTERNS for p in gigs_dir.glob(pattern) if p.is_file()}
    return sorted(found, key=lambda p: p.name)


def write_config(config: AppConfig, path: Optional[Path] = None) -> Path:
    """
    Write a config back to YAML.

    Args:
        config: Config to serialize
        path: Destination (defaults to config.path)

    Returns:
        Path written

    Raises:
        LoaderError: If the file cannot be written
    """
    target = Path(path) if path is not None else config.path
    text = yaml.safe_dump(config.to_dict(), sort_keys=False, allow_unicode=True)
    try:
        target.write_text(text, encoding="utf-8")
    except OSError as e:
        raise LoaderError(f"failed to write config file {target}: {e}") from e
    return target
