"""
Module: layout.config

Purpose:
    Configuration for the placement planner and PDF emitter.
    Defines page dimensions, margins, spacing and the pixel-to-mm scale.

Key Classes:
    - LayoutConstants: Immutable layout configuration

Key Functions:
    - resolve_spacing(): Pick spacing from override, config, or default

Dependencies:
    - dataclasses (std)

Used By:
    - layout.planner: Page arrangement
    - output.renderer: Page size and footer position
    - controller: Per-run layout construction
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gigsheets.common.thresholds import LAYOUT_THRESHOLDS

MM_PER_INCH = 25.4


@dataclass(frozen=True)
class LayoutConstants:
    """
    Configuration for page layout (immutable).

    All lengths are in millimetres, measured from the top-left corner
    of the page.

    Attributes:
        page_width: Page width
        page_height: Page height
        margin: Left, right and top margin
        footer_height: Band reserved above the bottom edge for the footer
        spacing: Vertical gap after every placed block
        image_dpi: Resolution used to convert image pixels to mm
        error_block_height: Height reserved for an error message

    Example:
        >>> layout = LayoutConstants()
        >>> layout.available_width
        190.0
    """

    page_width: float = LAYOUT_THRESHOLDS.page_width_mm
    page_height: float = LAYOUT_THRESHOLDS.page_height_mm
    margin: float = LAYOUT_THRESHOLDS.margin_mm
    footer_height: float = LAYOUT_THRESHOLDS.footer_height_mm
    spacing: float = LAYOUT_THRESHOLDS.default_spacing_mm
    image_dpi: float = LAYOUT_THRESHOLDS.image_dpi
    error_block_height: float = LAYOUT_THRESHOLDS.error_block_height_mm

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.margin < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        if self.footer_height < 0:
            raise ValueError(f"footer_height must be non-negative: {self.footer_height}")
        if self.spacing < 0:
            raise ValueError(f"spacing must be non-negative: {self.spacing}")
        if self.image_dpi <= 0:
            raise ValueError(f"image_dpi must be positive: {self.image_dpi}")
        if self.error_block_height <= 0:
            raise ValueError(f"error_block_height must be positive: {self.error_block_height}")
        if self.available_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.available_height <= 0:
            raise ValueError("Margins and footer exceed page height")

    @property
    def available_width(self) -> float:
        """Width available for content (excluding margins)."""
        return self.page_width - 2 * self.margin

    @property
    def available_height(self) -> float:
        """Height of an empty page's content area."""
        return self.page_height - self.footer_height - 2 * self.margin

    def px_to_mm(self, px: float) -> float:
        """Convert image pixels to page millimetres."""
        return px * MM_PER_INCH / self.image_dpi


def resolve_spacing(
    override: Optional[float] = None,
    configured: Optional[float] = None,
) -> float:
    """
    Determine the spacing between images.

    Priority:
    1. Explicit per-run override (command line)
    2. Value from the config file
    3. Default (5.0 mm)

    Example:
        >>> resolve_spacing(None, 8.0)
        8.0
    """
    if override is not None:
        return override
    if configured is not None:
        return configured
    return LAYOUT_THRESHOLDS.default_spacing_mm
