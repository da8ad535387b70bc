"""
Module: bounds

Purpose:
    Provides the ContentBounds dataclass - the pixel rectangle that holds
    the non-background content of a song image. Produced by the content
    detector and consumed by the normalizer.

Key Functions:
    - ContentBounds.full(width, height): Bounds covering a whole image
    - ContentBounds.covers(width, height): Check for "no crop needed"
    - ContentBounds.as_box(): (left, top, right, bottom) tuple for PIL

Dependencies:
    - dataclasses (std)

Used By:
    - images.detector
    - images.normalizer
    - images.provider
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ContentBounds:
    """
    Image region in pixels.

    The region is defined as [left, right) x [top, bottom):
    - left and top are inclusive
    - right and bottom are exclusive

    Attributes:
        left: X-coordinate of the first content column
        top: Y-coordinate of the first content row
        right: One past the last content column
        bottom: One past the last content row

    Invariants:
        - all offsets >= 0
        - left <= right
        - top <= bottom

    Example:
        >>> bounds = ContentBounds(left=10, top=5, right=110, bottom=55)
        >>> bounds.width, bounds.height
        (100, 50)
    """

    left: int
    top: int
    right: int
    bottom: int

    def __post_init__(self) -> None:
        """Validate bounds on construction."""
        if self.left < 0 or self.top < 0:
            raise ValueError(f"offsets must be >= 0: left={self.left}, top={self.top}")
        if self.right < self.left:
            raise ValueError(f"right must be >= left: {self.right} < {self.left}")
        if self.bottom < self.top:
            raise ValueError(f"bottom must be >= top: {self.bottom} < {self.top}")

    @classmethod
    def full(cls, width: int, height: int) -> ContentBounds:
        """Bounds covering an entire width x height image."""
        return cls(left=0, top=0, right=width, bottom=height)

    @property
    def width(self) -> int:
        """Width of the region in pixels."""
        return self.right - self.left

    @property
    def height(self) -> int:
        """Height of the region in pixels."""
        return self.bottom - self.top

    @property
    def is_degenerate(self) -> bool:
        """True when the region has zero area."""
        return self.width <= 0 or self.height <= 0

    def covers(self, width: int, height: int) -> bool:
        """
        Check whether these bounds span a whole width x height image.

        When True the image needs no cropping and the caller can skip
        re-encoding.
        """
        return (
            self.left <= 0
            and self.top <= 0
            and self.right >= width
            and self.bottom >= height
        )

    def as_box(self) -> tuple[int, int, int, int]:
        """Get as (left, top, right, bottom) tuple for PIL."""
        return (self.left, self.top, self.right, self.bottom)

    def __repr__(self) -> str:
        return f"ContentBounds({self.left}, {self.top}, {self.right}, {self.bottom})"
