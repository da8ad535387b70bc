"""
Module: images.provider

Purpose:
    Turn an image file into a placeable ImageEntry: decode by file
    extension, detect content bounds, crop, and re-encode.

Key Classes:
    - ImageProvider: Abstract interface for loading song images
    - FileImageProvider: Standard provider reading from disk
    - ImageLoadError: Base exception for unusable images
    - ImageNotFoundError: Image file does not exist
    - ImageDecodeError: Image bytes could not be decoded

Dependencies:
    - PIL: Image decoding
    - images.detector: Content bounds
    - images.normalizer: Cropping and encoding

Used By:
    - layout.composer: Entry resolution
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from PIL import Image

from gigsheets.core.models import ContentBounds, ImageEntry

from .detector import detect_content_bounds, needs_crop
from .normalizer import encode_image, format_for_path, normalize

logger = logging.getLogger(__name__)


class ImageLoadError(Exception):
    """Image could not be turned into an entry."""
    pass


class ImageNotFoundError(ImageLoadError):
    """Image file does not exist."""
    pass


class ImageDecodeError(ImageLoadError):
    """Image file exists but cannot be decoded."""
    pass


def decode_image(path: Path) -> Image.Image:
    """
    Decode an image file into memory.

    The decoder is picked from the extension (PNG, JPEG); other
    extensions let Pillow identify the format itself.

    Args:
        path: Image file

    Returns:
        Fully loaded PIL image (file handle already closed)

    Raises:
        ImageDecodeError: If the bytes are corrupt or unsupported
    """
    fmt = format_for_path(path)
    formats = [fmt] if fmt else None
    try:
        with Image.open(path, formats=formats) as img:
            img.load()
            decoded = img.copy()
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageDecodeError(f"Could not decode image: {path}") from e
    return decoded


class ImageProvider(ABC):
    """
    Abstract interface for loading song images.

    Implementations return a ready-to-place ImageEntry or raise
    ImageLoadError, which the composer turns into an ErrorEntry.
    """

    @abstractmethod
    def load(self, path: Path, source_ref: str) -> ImageEntry:
        """
        Load the image for a song reference.

        Args:
            path: Resolved image path
            source_ref: Reference as written in the gig

        Returns:
            ImageEntry with encoded data

        Raises:
            ImageLoadError: If the image is missing or undecodable
        """


class FileImageProvider(ImageProvider):
    """
    Provider that reads images from disk and auto-crops them.

    Attributes:
        crop: Whether to detect and remove whitespace margins

    Example:
        >>> provider = FileImageProvider()
        >>> entry = provider.load(Path("images/ballad.png"), "ballad")
        >>> entry.natural_width
        1654
    """

    def __init__(self, *, crop: bool = True) -> None:
        self.crop = crop

    def load(self, path: Path, source_ref: str) -> ImageEntry:
        """Decode, crop and encode one image file."""
        if not path.is_file():
            raise ImageNotFoundError(f"Image file not found: {path}")

        image = decode_image(path)
        source_format = format_for_path(path)

        bounds = self._detect(image, path) if self.crop else None
        if bounds is None or not needs_crop(bounds, image.size):
            logger.debug(
                f"Image '{source_ref}' - no cropping needed: "
                f"{image.width}x{image.height}"
            )
            return self._uncropped_entry(image, path, source_ref, source_format)

        cropped = normalize(image, bounds)
        if cropped is image:
            logger.debug(f"Image '{source_ref}' - invalid crop dimensions, using original")
            return self._uncropped_entry(image, path, source_ref, source_format)

        logger.debug(
            f"Image '{source_ref}' - cropping: original={image.width}x{image.height}, "
            f"cropped={cropped.width}x{cropped.height}, removed: "
            f"left={bounds.left}, top={bounds.top}, "
            f"right={image.width - bounds.right}, bottom={image.height - bounds.bottom}"
        )

        try:
            data, fmt = encode_image(cropped, source_format)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not encode cropped image {path}: {e}")
            return self._uncropped_entry(image, path, source_ref, source_format)

        return ImageEntry(
            source_ref=source_ref,
            natural_width=cropped.width,
            natural_height=cropped.height,
            data=data,
            image_format=fmt,
            source_path=str(path),
        )

    def _detect(self, image: Image.Image, path: Path) -> Optional[ContentBounds]:
        """Detect content bounds; None means use the image uncropped."""
        try:
            return detect_content_bounds(image)
        except (ValueError, TypeError) as e:
            logger.warning(f"Could not crop image {path}: {e}")
            return None

    def _uncropped_entry(
        self,
        image: Image.Image,
        path: Path,
        source_ref: str,
        source_format: Optional[str],
    ) -> ImageEntry:
        """Entry for the image as stored on disk."""
        if source_format is not None:
            # PNG/JPEG files embed as-is; no re-encoding needed
            data, fmt = path.read_bytes(), source_format
        else:
            try:
                data, fmt = encode_image(image, source_format)
            except (OSError, ValueError) as e:
                raise ImageDecodeError(f"Could not decode image: {path}") from e

        return ImageEntry(
            source_ref=source_ref,
            natural_width=image.width,
            natural_height=image.height,
            data=data,
            image_format=fmt,
            source_path=str(path),
        )
