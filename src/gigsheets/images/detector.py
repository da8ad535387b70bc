"""
Module: images.detector

Purpose:
    Find the tightest rectangle holding non-background content in a
    song image. Background is anything fully transparent or near-white.

Algorithm:
    Build a boolean foreground mask, then run four independent
    directional scans as per-axis reductions:
    1. left   - first column (left to right) with any foreground pixel
    2. top    - first row (top to bottom) with any foreground pixel
    3. bottom - one past the first foreground row scanning bottom-up
    4. right  - one past the first foreground column scanning right-left
    A direction with no foreground keeps the original image edge.

Key Functions:
    - detect_content_bounds(): ContentBounds for an image
    - needs_crop(): False when bounds span the whole image
    - foreground_mask(): Boolean mask of content pixels

Dependencies:
    - numpy: Mask reductions
    - PIL: Image access
    - gigsheets.core.models.bounds: ContentBounds

Used By:
    - images.provider: Auto-cropping during entry loading
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from PIL import Image

from gigsheets.common.thresholds import IMAGE_THRESHOLDS
from gigsheets.core.models import ContentBounds


def foreground_mask(
    image: Image.Image,
    *,
    threshold: int = IMAGE_THRESHOLDS.min_white_threshold,
) -> np.ndarray:
    """
    Classify every pixel as content (True) or background (False).

    A pixel is background if its alpha is 0, or if red, green and blue
    are all >= threshold. Raw channel values are compared; nothing is
    composited against a canvas colour.

    Args:
        image: Source image in any mode Pillow can convert to RGBA
        threshold: Minimum channel value counted as white

    Returns:
        Boolean array of shape (height, width)
    """
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    arr = np.asarray(rgba)

    r, g, b, a = arr[..., 0], arr[..., 1], arr[..., 2], arr[..., 3]
    transparent = a == IMAGE_THRESHOLDS.transparent_alpha
    white = (r >= threshold) & (g >= threshold) & (b >= threshold)

    return ~(transparent | white)


def _first_hit(flags: np.ndarray) -> Optional[int]:
    """Index of the first True value, or None if there is none."""
    if flags.size == 0:
        return None
    idx = int(np.argmax(flags))
    return idx if flags[idx] else None


def _last_hit_exclusive(flags: np.ndarray) -> Optional[int]:
    """One past the index of the last True value, or None."""
    hit = _first_hit(flags[::-1])
    if hit is None:
        return None
    return flags.size - hit


def detect_content_bounds(image: Image.Image) -> ContentBounds:
    """
    Detect the content rectangle of an image.

    Each side is found by its own scan, so a side with no foreground
    pixels falls back to the image edge without affecting the others.

    Args:
        image: Decoded PIL image

    Returns:
        ContentBounds with exclusive right/bottom. Equal to the full
        image extent when nothing needs cropping (including images
        that are entirely background).

    Example:
        >>> img = Image.new("RGB", (100, 50), "white")
        >>> detect_content_bounds(img)
        ContentBounds(0, 0, 100, 50)
    """
    width, height = image.size
    mask = foreground_mask(image)

    columns = mask.any(axis=0)
    rows = mask.any(axis=1)

    left = _first_hit(columns)
    top = _first_hit(rows)
    bottom = _last_hit_exclusive(rows)
    right = _last_hit_exclusive(columns)

    return ContentBounds(
        left=0 if left is None else left,
        top=0 if top is None else top,
        right=width if right is None else right,
        bottom=height if bottom is None else bottom,
    )


def needs_crop(bounds: ContentBounds, size: Tuple[int, int]) -> bool:
    """
    Check whether bounds remove anything from an image of this size.

    Args:
        bounds: Detected content bounds
        size: (width, height) of the source image

    Returns:
        False when bounds already span the whole image
    """
    width, height = size
    return not bounds.covers(width, height)
