"""
Module: loading

Purpose:
    Load the song catalogue (config.yaml) and gig files.

Key Functions:
    - load_config(), load_gig(), discover_gigs(), write_config()

Key Classes:
    - AppConfig, SongConfig, Gig, GigSet
    - LoaderError

Dependencies:
    - yaml (PyYAML)
"""

from .loader import LoaderError, discover_gigs, load_config, load_gig, write_config
from .models import DEFAULT_VARIANT, AppConfig, Gig, GigSet, SongConfig, SongMap

__all__ = [
    "AppConfig",
    "SongConfig",
    "Gig",
    "GigSet",
    "SongMap",
    "DEFAULT_VARIANT",
    "LoaderError",
    "load_config",
    "load_gig",
    "discover_gigs",
    "write_config",
]
