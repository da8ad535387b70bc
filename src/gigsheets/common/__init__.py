"""Common utilities shared across gigsheets."""

from __future__ import annotations

from .thresholds import (
    IMAGE_THRESHOLDS,
    LAYOUT_THRESHOLDS,
    RENDER_THRESHOLDS,
    WATCH_THRESHOLDS,
)

__all__ = [
    "IMAGE_THRESHOLDS",
    "LAYOUT_THRESHOLDS",
    "RENDER_THRESHOLDS",
    "WATCH_THRESHOLDS",
]
