"""
Module: images

Purpose:
    Image access for gigsheets: content-bounds detection, cropping,
    re-encoding, and loading song images as placeable entries.

Key Classes:
    - ImageProvider: Abstract interface for image loading
    - FileImageProvider: Standard disk-backed provider

Key Functions:
    - detect_content_bounds(): Find the content rectangle
    - normalize(): Crop to content bounds
    - encode_image(): Encode for embedding

Dependencies:
    - PIL: Image manipulation
    - numpy: Pixel masks

Used By:
    - layout.composer: Entry resolution
"""

from .detector import detect_content_bounds, foreground_mask, needs_crop
from .normalizer import encode_image, format_for_path, normalize
from .provider import (
    FileImageProvider,
    ImageDecodeError,
    ImageLoadError,
    ImageNotFoundError,
    ImageProvider,
    decode_image,
)

__all__ = [
    "ImageProvider",
    "FileImageProvider",
    "ImageLoadError",
    "ImageNotFoundError",
    "ImageDecodeError",
    "decode_image",
    "detect_content_bounds",
    "foreground_mask",
    "needs_crop",
    "normalize",
    "encode_image",
    "format_for_path",
]
