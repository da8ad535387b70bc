"""
Module: images.normalizer

Purpose:
    Apply detected content bounds to an image and re-encode the result
    into bytes suitable for embedding in a PDF.

Key Functions:
    - normalize(): Crop an image to its content bounds
    - encode_image(): Encode to PNG/JPEG bytes
    - format_for_path(): Infer the Pillow format from a file extension

Dependencies:
    - PIL: Image manipulation
    - gigsheets.core.models.bounds: ContentBounds

Used By:
    - images.provider: Entry loading
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image

from gigsheets.common.thresholds import IMAGE_THRESHOLDS
from gigsheets.core.models import ContentBounds

# Formats that can be round-tripped; anything else is written as PNG
EXTENSION_FORMATS = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
}
FALLBACK_FORMAT = "PNG"


def format_for_path(path: Union[str, Path]) -> Optional[str]:
    """
    Map a file extension to a Pillow format name.

    Returns:
        "PNG", "JPEG", or None when the extension is not recognised
        (generic decode, PNG output).
    """
    return EXTENSION_FORMATS.get(Path(path).suffix.lower())


def normalize(image: Image.Image, bounds: ContentBounds) -> Image.Image:
    """
    Crop an image to its content bounds.

    Degenerate bounds (zero or negative width/height) never produce an
    empty image: the input is returned unchanged.

    Args:
        image: Source image
        bounds: Region to keep, [left, right) x [top, bottom)

    Returns:
        New image of size (bounds.width, bounds.height) with the source
        mode preserved, or the original image for degenerate bounds.

    Example:
        >>> cropped = normalize(img, ContentBounds(10, 10, 60, 30))
        >>> cropped.size
        (50, 20)
    """
    if bounds.is_degenerate:
        return image

    cropped = image.crop(bounds.as_box())
    cropped.load()
    return cropped


def encode_image(
    image: Image.Image,
    source_format: Optional[str],
) -> Tuple[bytes, str]:
    """
    Encode an image for embedding.

    PNG input stays PNG (lossless), JPEG input is re-encoded as JPEG,
    anything else falls back to PNG.

    Args:
        image: Image to encode
        source_format: Pillow format of the source file, if known

    Returns:
        Tuple of (encoded bytes, format used)

    Raises:
        OSError: If Pillow cannot write the image in the chosen format
    """
    fmt = source_format if source_format in EXTENSION_FORMATS.values() else FALLBACK_FORMAT

    buf = io.BytesIO()
    if fmt == "JPEG":
        # JPEG has no alpha channel
        if image.mode not in ("RGB", "L", "CMYK"):
            image = image.convert("RGB")
        image.save(buf, format="JPEG", quality=IMAGE_THRESHOLDS.jpeg_quality)
    else:
        image.save(buf, format="PNG")

    return buf.getvalue(), fmt
