"""
Module: layout.models

Purpose:
    Data models for page planning: the PageOp directives emitted by the
    planner and the PageCursor it threads through a single plan.

Key Classes:
    - StartPage, Footer, PlaceImage, PlaceError: PageOp variants
    - PageCursor: Mutable page position owned by one plan() call

Dependencies:
    - dataclasses (std)
    - gigsheets.core.models: ImageEntry

Used By:
    - layout.planner: Creates PageOps
    - output.renderer: Consumes PageOps
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from gigsheets.core.models import ImageEntry


@dataclass(frozen=True)
class StartPage:
    """Open a new page."""

    page_number: int


@dataclass(frozen=True)
class Footer:
    """Write the footer of the page just opened."""

    page_number: int
    text: str


@dataclass(frozen=True)
class PlaceImage:
    """
    Draw an image at a rectangle (mm, top-left origin).

    Example:
        >>> op = PlaceImage(entry, x=10, y=10, width=190, height=63.3)
        >>> op.bottom
        73.3
    """

    entry: ImageEntry
    x: float
    y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        """Bottom Y coordinate (y + height)."""
        return self.y + self.height


@dataclass(frozen=True)
class PlaceError:
    """Draw an error message in the block at (x, y)."""

    message: str
    x: float
    y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        """Bottom Y coordinate (y + height)."""
        return self.y + self.height


PageOp = Union[StartPage, Footer, PlaceImage, PlaceError]


@dataclass
class PageCursor:
    """
    Current position while planning.

    Attributes:
        page_number: Number of the page being filled (0 before the first page)
        y: Offset of the next block from the top of the page
        top: Offset of the first block on a fresh page (the top margin)
    """

    top: float
    page_number: int = 0
    y: float = 0.0

    @property
    def is_page_empty(self) -> bool:
        """True while nothing has been placed on the current page."""
        return self.y <= self.top

    def new_page(self) -> int:
        """Advance to the next page and return its number."""
        self.page_number += 1
        self.y = self.top
        return self.page_number

    def advance(self, height: float) -> None:
        """Move past a placed block."""
        self.y += height


def page_count(ops: Iterable[PageOp]) -> int:
    """Number of pages in a plan."""
    return sum(1 for op in ops if isinstance(op, StartPage))
