"""
Module: config

Purpose:
    Per-run options for generation. Replaces process-wide flags with an
    immutable object handed to the controller.

Key Classes:
    - GenerateOptions: Options for one batch generation

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - controller: Batch generation
    - cli: Argument mapping
    - watch: Regeneration loop
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_CONFIG_FILE = "config.yaml"


@dataclass(frozen=True)
class GenerateOptions:
    """
    Options for one generation run (immutable).

    Attributes:
        config_path: Path to config.yaml
        spacing: Spacing override in mm (None = use config or default)
        image_override: Variant to prefer for every song when it exists
        output_override: Output folder replacing the configured one
        all_songs: Also generate _all.pdf with every configured song
        debug: Enable debug logging

    Example:
        >>> options = GenerateOptions(config_path=Path("config.yaml"), spacing=3.0)
    """

    config_path: Path = Path(DEFAULT_CONFIG_FILE)
    spacing: Optional[float] = None
    image_override: Optional[str] = None
    output_override: Optional[str] = None
    all_songs: bool = False
    debug: bool = False

    def __post_init__(self) -> None:
        """Validate options on construction."""
        if self.spacing is not None and self.spacing < 0:
            raise ValueError(f"spacing must be non-negative: {self.spacing}")

    @property
    def all_songs_filename(self) -> str:
        """File name for the all-songs document."""
        if self.image_override:
            return f"_all_{self.image_override}.pdf"
        return "_all.pdf"
