"""
Module: entries

Purpose:
    Line items placed by the planner. An Entry is either an ImageEntry
    (a resolved, normalized song image) or an ErrorEntry (a visible
    placeholder for a song that could not be resolved or loaded).
    Entries are grouped into SongSets, which make up a Document.

Key Classes:
    - ImageEntry: Encoded raster with its pixel dimensions
    - ErrorEntry: Message shown in place of a missing song
    - SongSet: Named, ordered group of entries
    - Document: Display name plus ordered sets

Dependencies:
    - dataclasses (std)

Used By:
    - layout.composer: Builds entries from gig references
    - layout.planner: Places entries on pages
    - output.renderer: Embeds image data
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class ImageEntry:
    """
    A song image ready for placement (immutable).

    Attributes:
        source_ref: Reference as written in the gig ("song" or "song#variant")
        natural_width: Width of the encoded raster in pixels
        natural_height: Height of the encoded raster in pixels
        data: Encoded image bytes embedded into the PDF
        image_format: Pillow format name of data ("PNG" or "JPEG")
        source_path: File the image was read from
    """

    source_ref: str
    natural_width: int
    natural_height: int
    data: bytes = field(default=b"", repr=False, compare=False)
    image_format: str = "PNG"
    source_path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.natural_width <= 0 or self.natural_height <= 0:
            raise ValueError(
                f"image dimensions must be positive: "
                f"{self.natural_width}x{self.natural_height}"
            )


@dataclass(frozen=True)
class ErrorEntry:
    """Placeholder rendered as error text in place of a song."""

    message: str


Entry = Union[ImageEntry, ErrorEntry]


@dataclass(frozen=True)
class SongSet:
    """
    Named, ordered group of entries.

    A set prefers to start on a fresh page: the planner breaks the page
    at every set boundary unless the current page is still empty.
    """

    name: str
    entries: tuple[Entry, ...] = ()

    @property
    def error_count(self) -> int:
        return sum(1 for e in self.entries if isinstance(e, ErrorEntry))


@dataclass(frozen=True)
class Document:
    """
    A gig ready for planning.

    Attributes:
        name: Display name used in page footers
        sets: Ordered song sets
    """

    name: str
    sets: tuple[SongSet, ...] = ()

    @property
    def entry_count(self) -> int:
        """Total entries across all sets."""
        return sum(len(s.entries) for s in self.sets)

    @property
    def error_count(self) -> int:
        """Number of error placeholders across all sets."""
        return sum(s.error_count for s in self.sets)
