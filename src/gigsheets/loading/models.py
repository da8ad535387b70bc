"""
Module: loading.models

Purpose:
    Parsed contents of the config file (song catalogue and folders)
    and of gig files (named sets of song references).

Key Classes:
    - SongConfig: One song with its image variants
    - AppConfig: Parsed config.yaml
    - GigSet: One set in a gig
    - Gig: Parsed gig file

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - loading.loader: Construction from YAML
    - layout.composer: Song map lookups
    - validation, schema: Config tooling
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

DEFAULT_VARIANT = "default"

# nickname -> {variant -> image path}
SongMap = Mapping[str, Mapping[str, str]]


@dataclass(frozen=True)
class SongConfig:
    """
    A song in the catalogue.

    Attributes:
        nickname: Name used in gig files
        image: Single image path (stored as the "default" variant)
        images: Named image variants

    Example:
        >>> song = SongConfig("rocker", images={"default": "r.png", "acoustic": "ra.png"})
        >>> song.variants()["acoustic"]
        'ra.png'
    """

    nickname: str
    image: Optional[str] = None
    images: Dict[str, str] = field(default_factory=dict)

    def variants(self) -> Dict[str, str]:
        """Map of variant name -> image path, merging both forms."""
        result: Dict[str, str] = {}
        if self.image:
            result[DEFAULT_VARIANT] = self.image
        result.update(self.images)
        return result

    def to_dict(self) -> dict:
        """Serialize for YAML output."""
        d: dict = {"nickname": self.nickname}
        if self.image:
            d["image"] = self.image
        if self.images:
            d["images"] = dict(self.images)
        return d


@dataclass(frozen=True)
class AppConfig:
    """
    Parsed config.yaml.

    Folder paths are stored as written and resolved against the
    directory holding the config file.

    Attributes:
        path: Location of the config file
        image_folder: Folder holding song images
        gigs_folder: Folder holding gig files
        output_folder: Folder receiving generated PDFs
        spacing: Optional spacing between images (mm)
        songs: Song catalogue in file order
    """

    path: Path
    image_folder: str = ""
    gigs_folder: str = ""
    output_folder: str = ""
    spacing: Optional[float] = None
    songs: Tuple[SongConfig, ...] = ()

    @property
    def base_dir(self) -> Path:
        """Directory relative paths are resolved against."""
        return self.path.parent

    @property
    def images_dir(self) -> Path:
        return self.base_dir / self.image_folder

    @property
    def gigs_dir(self) -> Path:
        return self.base_dir / self.gigs_folder

    def output_dir(self, override: Optional[str] = None) -> Path:
        """
        Resolve the output folder.

        An override replaces the configured folder; relative overrides
        are resolved against the config directory.
        """
        if override:
            override_path = Path(override)
            if override_path.is_absolute():
                return override_path
            return self.base_dir / override_path
        return self.base_dir / self.output_folder

    def song_map(self) -> Dict[str, Dict[str, str]]:
        """Map of nickname -> {variant -> image path}."""
        return {song.nickname: song.variants() for song in self.songs}

    @property
    def nicknames(self) -> List[str]:
        return [song.nickname for song in self.songs]

    def to_dict(self) -> dict:
        """Serialize for YAML output, using the file's camelCase keys."""
        d: dict = {
            "imageFolder": self.image_folder,
            "gigsFolder": self.gigs_folder,
            "outputFolder": self.output_folder,
        }
        if self.spacing is not None:
            d["spacing"] = self.spacing
        d["songs"] = [song.to_dict() for song in self.songs]
        return d


@dataclass(frozen=True)
class GigSet:
    """A named set of song references ("nickname" or "nickname#variant")."""

    name: str
    songs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Gig:
    """
    Parsed gig file.

    Attributes:
        name: Display name used in page footers
        sets: Sets in performance order
        source: File the gig was read from, if any
    """

    name: str
    sets: Tuple[GigSet, ...] = ()
    source: Optional[Path] = None

    @property
    def song_count(self) -> int:
        return sum(len(s.songs) for s in self.sets)
