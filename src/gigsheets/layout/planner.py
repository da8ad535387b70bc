"""
Module: layout.planner

Purpose:
    Arrange entries onto pages with greedy, single-pass vertical
    placement and emit the result as a stream of PageOps.

Algorithm:
    1. Open page 1 (StartPage + Footer)
    2. At every set boundary after the first, start a new page unless
       the current page is still empty
    3. For each entry, compute its block height; start a new page if
       the remaining space is strictly less than height + spacing
    4. Place the block at the cursor and advance by height + spacing

    No lookahead or reordering: ops follow input order exactly.

Key Functions:
    - plan(): Main planning function
    - image_size(): Display size of an image entry

Dependencies:
    - layout.models: PageOps, PageCursor
    - layout.config: LayoutConstants

Used By:
    - controller: Document generation
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from gigsheets.core.models import Document, Entry, ErrorEntry, ImageEntry

from .config import LayoutConstants
from .models import Footer, PageCursor, PageOp, PlaceError, PlaceImage, StartPage

logger = logging.getLogger(__name__)


def footer_text(document_name: str, page_number: int) -> str:
    """Footer line for a page."""
    return f"{document_name} - Page {page_number}"


def image_size(entry: ImageEntry, layout: LayoutConstants) -> Tuple[float, float]:
    """
    Compute the displayed size of an image in mm.

    Images keep their natural size unless strictly wider than the
    available width, in which case both dimensions shrink so the width
    exactly fills it. Images are never scaled up.

    Args:
        entry: Image entry with pixel dimensions
        layout: Layout configuration

    Returns:
        Tuple of (width, height) in mm

    Example:
        >>> image_size(entry_300x100mm, LayoutConstants())
        (190.0, 63.333...)
    """
    width = layout.px_to_mm(entry.natural_width)
    height = layout.px_to_mm(entry.natural_height)

    if width > layout.available_width:
        scale = layout.available_width / width
        logger.debug(
            f"Image '{entry.source_ref}' - scaling: original="
            f"{entry.natural_width}x{entry.natural_height} ({width:.2f}mm x {height:.2f}mm), "
            f"scale={scale:.4f}, final={layout.available_width:.2f}mm x {height * scale:.2f}mm"
        )
        return layout.available_width, height * scale

    logger.debug(
        f"Image '{entry.source_ref}' - no scaling needed: "
        f"{entry.natural_width}x{entry.natural_height} ({width:.2f}mm x {height:.2f}mm), "
        f"available width: {layout.available_width:.2f}mm"
    )
    return width, height


def plan(document: Document, layout: LayoutConstants) -> List[PageOp]:
    """
    Plan the pages of a document.

    Rules:
    1. Page 1 is always opened, even for an empty document.
    2. Sets after the first start on a new page unless the current
       page is empty (sets may share an empty page).
    3. A block moves to a new page when the remaining space is strictly
       less than its height plus spacing; an exact fit stays.
    4. Every StartPage is immediately followed by its Footer.

    Args:
        document: Document with sets of entries
        layout: Layout configuration

    Returns:
        List of PageOps in placement order
    """
    ops: List[PageOp] = []
    cursor = PageCursor(top=layout.margin)

    _start_page(ops, cursor, document.name)

    for set_index, song_set in enumerate(document.sets):
        if set_index > 0 and not cursor.is_page_empty:
            logger.debug(f"Set '{song_set.name}' starts on a new page")
            _start_page(ops, cursor, document.name)

        for entry in song_set.entries:
            _place_entry(ops, cursor, entry, document.name, layout)

    logger.info(
        f"Planned {document.entry_count} entries onto {cursor.page_number} pages "
        f"for '{document.name}'"
    )
    return ops


def _start_page(ops: List[PageOp], cursor: PageCursor, document_name: str) -> None:
    """Open a new page and write its footer."""
    page_number = cursor.new_page()
    ops.append(StartPage(page_number))
    ops.append(Footer(page_number, footer_text(document_name, page_number)))


def _remaining_height(cursor: PageCursor, layout: LayoutConstants) -> float:
    """Vertical space left above the footer band on the current page."""
    return layout.page_height - layout.footer_height - layout.margin - cursor.y


def _place_entry(
    ops: List[PageOp],
    cursor: PageCursor,
    entry: Entry,
    document_name: str,
    layout: LayoutConstants,
) -> None:
    """Position one entry, breaking the page first if it does not fit."""
    if isinstance(entry, ImageEntry):
        width, height = image_size(entry, layout)
    elif isinstance(entry, ErrorEntry):
        width, height = layout.available_width, layout.error_block_height
    else:
        raise TypeError(f"Unknown entry type: {type(entry).__name__}")

    needed = height + layout.spacing
    if _remaining_height(cursor, layout) < needed:
        if cursor.is_page_empty:
            logger.warning(
                f"Block taller than a page on page {cursor.page_number}: "
                f"{needed:.2f}mm needed, {_remaining_height(cursor, layout):.2f}mm available"
            )
        _start_page(ops, cursor, document_name)

    if isinstance(entry, ImageEntry):
        ops.append(PlaceImage(entry, x=layout.margin, y=cursor.y, width=width, height=height))
    else:
        ops.append(PlaceError(entry.message, x=layout.margin, y=cursor.y, width=width, height=height))

    cursor.advance(needed)
