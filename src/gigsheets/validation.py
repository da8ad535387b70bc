"""
Module: validation

Purpose:
    Check that every image referenced by the config exists, and
    optionally repair the config: add unreferenced images from the
    image folder as new songs, and sort songs by nickname.

Key Functions:
    - validate_config(): Validate (and optionally update) a config file
    - group_new_images(): Group image files into songs with variants

Key Classes:
    - ValidationReport: Outcome of a validation run

Dependencies:
    - gigsheets.loading: Config loading and writing

Used By:
    - cli: validate-config command
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, Iterable, List, Set

from .loading import DEFAULT_VARIANT, AppConfig, LoaderError, SongConfig, load_config, write_config

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".png", ".jpg", ".jpeg"}


@dataclass
class ValidationReport:
    """
    Outcome of validating a config file.

    Attributes:
        valid: Descriptions of images that exist
        missing: Descriptions of images that do not exist
        added: Songs added from the image folder
        sorted_songs: Whether songs were re-ordered
        written: Whether the config file was rewritten
    """

    valid: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    added: List[SongConfig] = field(default_factory=list)
    sorted_songs: bool = False
    written: bool = False

    @property
    def ok(self) -> bool:
        """True when every referenced image exists."""
        return not self.missing


def _describe(song: SongConfig, variant: str, image: str, single: bool) -> str:
    if single:
        return f"Song '{song.nickname}': {image}"
    return f"Song '{song.nickname}' variant '{variant}': {image}"


def check_images(config: AppConfig, report: ValidationReport) -> None:
    """Record every configured image as valid or missing."""
    images_dir = config.images_dir
    for song in config.songs:
        refs = []
        if song.image:
            refs.append((DEFAULT_VARIANT, song.image, True))
        refs.extend((variant, image, False) for variant, image in song.images.items())

        for variant, image, single in refs:
            description = _describe(song, variant, image, single)
            if (images_dir / image).exists():
                report.valid.append(description)
            else:
                report.missing.append(description)


def _referenced_images(songs: Iterable[SongConfig]) -> Set[str]:
    names: Set[str] = set()
    for song in songs:
        if song.image:
            names.add(song.image)
        names.update(song.images.values())
    return names


def group_new_images(file_names: Iterable[str]) -> List[SongConfig]:
    """
    Group image files into songs.

    Files are processed in name order. A file "base.png" starts a song
    "base"; any later "base-suffix.ext" joins it as variant "suffix".
    A song with only its default image uses the single "image" form.

    Example:
        >>> [s.nickname for s in group_new_images(["a.png", "a-live.png", "b.jpg"])]
        ['a', 'b']
    """
    stems = sorted(((Path(name).stem, name) for name in file_names), key=lambda item: item[0])
    used: Set[int] = set()
    songs: List[SongConfig] = []

    for i, (base, file_name) in enumerate(stems):
        if i in used:
            continue
        used.add(i)
        variants: Dict[str, str] = {DEFAULT_VARIANT: file_name}

        for j, (other, other_file) in enumerate(stems):
            if j in used:
                continue
            if other.startswith(base + "-"):
                suffix = other[len(base) + 1:]
                if suffix:
                    variants[suffix] = other_file
                    used.add(j)

        if len(variants) == 1:
            songs.append(SongConfig(nickname=base, image=file_name))
        else:
            songs.append(SongConfig(nickname=base, images=variants))

    return songs


def find_new_images(config: AppConfig) -> List[SongConfig]:
    """Songs for supported image files the config does not reference yet."""
    referenced = _referenced_images(config.songs)
    candidates = [
        p.name
        for p in sorted(config.images_dir.iterdir())
        if p.is_file()
        and p.suffix.lower() in SUPPORTED_EXTENSIONS
        and p.name not in referenced
    ]
    return group_new_images(candidates)


def validate_config(
    config_path: Path,
    *,
    add_missing: bool = False,
    sort: bool = False,
) -> ValidationReport:
    """
    Validate the images referenced by a config file.

    Args:
        config_path: Path to config.yaml
        add_missing: Add unreferenced images from the image folder
        sort: Sort songs alphabetically (case-insensitive) by nickname

    Returns:
        ValidationReport; the config file is rewritten when songs were
        added or re-ordered

    Raises:
        LoaderError: If the config cannot be read/written or the image
            folder does not exist
    """
    config = load_config(config_path)
    if not config.images_dir.is_dir():
        raise LoaderError(f"Image folder does not exist: {config.images_dir}")

    report = ValidationReport()
    check_images(config, report)
    songs = list(config.songs)

    if add_missing:
        report.added = find_new_images(config)
        if report.added:
            logger.info(f"Adding {len(report.added)} new songs to config")
            songs.extend(report.added)
        else:
            logger.info("No new images found to add.")

    if sort:
        ordered = sorted(songs, key=lambda s: s.nickname.lower())
        if ordered != songs:
            logger.info("Sorting songs alphabetically by nickname...")
            songs = ordered
            report.sorted_songs = True
        else:
            logger.info("Songs are already sorted alphabetically.")

    if report.added or report.sorted_songs:
        write_config(replace(config, songs=tuple(songs)), config.path)
        report.written = True
        logger.info(f"Successfully updated config file: {config.path}")

    return report
