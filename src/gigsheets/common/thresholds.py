"""Centralized threshold and magic number configuration.

This module contains the hardcoded thresholds and layout constants used
throughout cropping, planning, rendering and watch mode.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ImageProcessingThresholds:
    """Thresholds for image processing and encoding."""

    # Background detection
    min_white_threshold: int = 240  # r, g and b all >= this count as background
    transparent_alpha: int = 0  # Alpha value considered fully transparent

    # Re-encoding
    jpeg_quality: int = 90


@dataclass
class LayoutThresholds:
    """Page geometry defaults, in millimetres."""

    page_width_mm: float = 210.0  # A4
    page_height_mm: float = 297.0  # A4
    margin_mm: float = 10.0
    footer_height_mm: float = 15.0
    default_spacing_mm: float = 5.0
    error_block_height_mm: float = 10.0

    # Source scan resolution; mm = px * 25.4 / image_dpi (about 204 dpi)
    image_dpi: float = 72.0 * 72.0 / 25.4


@dataclass
class RenderThresholds:
    """Font and colour settings for the PDF emitter."""

    footer_font: str = "Helvetica"
    footer_font_size: int = 8
    footer_cell_height_mm: float = 5.0
    error_font: str = "Helvetica-Bold"
    error_font_size: int = 12
    error_color_rgb: tuple = (1.0, 0.0, 0.0)


@dataclass
class WatchThresholds:
    """Timing for watch mode."""

    debounce_seconds: float = 0.5
    poll_interval_seconds: float = 0.25


# Global instances for easy import
IMAGE_THRESHOLDS = ImageProcessingThresholds()
LAYOUT_THRESHOLDS = LayoutThresholds()
RENDER_THRESHOLDS = RenderThresholds()
WATCH_THRESHOLDS = WatchThresholds()
