"""
Module: output.renderer

Purpose:
    Render a PageOp stream to PDF using ReportLab.
    Every position comes from the planner; the renderer only converts
    top-down millimetres into ReportLab's bottom-up points.

Key Functions:
    - render_to_pdf(): Main rendering function

Key Classes:
    - RenderError: Output could not be written

Dependencies:
    - reportlab: PDF generation
    - layout.models: PageOps
    - layout.config: LayoutConstants

Used By:
    - controller: Document generation
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterable, Union

from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfgen import canvas

from gigsheets.common.thresholds import RENDER_THRESHOLDS
from gigsheets.core.models import ImageEntry
from gigsheets.layout.config import LayoutConstants
from gigsheets.layout.models import Footer, PageOp, PlaceError, PlaceImage, StartPage

logger = logging.getLogger(__name__)

ERROR_PREFIX = "ERROR: "

Output = Union[str, Path, BinaryIO]


class RenderError(Exception):
    """PDF could not be written."""
    pass


def render_to_pdf(
    ops: Iterable[PageOp],
    layout: LayoutConstants,
    output: Output,
) -> int:
    """
    Render a page plan to a PDF file.

    Args:
        ops: PageOps from the planner
        layout: Layout configuration (page size, footer band)
        output: Path to write, or a writable binary file object

    Returns:
        Number of pages written

    Raises:
        RenderError: If the PDF cannot be written or an image cannot be embedded

    Example:
        >>> render_to_pdf(plan(document, layout), layout, Path("output/gig.pdf"))
        3
    """
    if isinstance(output, (str, Path)):
        output = Path(output)
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RenderError(f"failed to create output directory {output.parent}: {e}") from e
        target = str(output)
    else:
        target = output

    page_size = (layout.page_width * mm, layout.page_height * mm)
    c = canvas.Canvas(target, pagesize=page_size)

    pages = 0
    for op in ops:
        if isinstance(op, StartPage):
            if pages > 0:
                c.showPage()
            pages += 1
        elif isinstance(op, Footer):
            _draw_footer(c, op.text, layout)
        elif isinstance(op, PlaceImage):
            _draw_image(c, op, layout)
        elif isinstance(op, PlaceError):
            _draw_error(c, op, layout)
        else:
            raise TypeError(f"Unknown page op: {type(op).__name__}")

    try:
        c.save()
    except OSError as e:
        raise RenderError(f"failed to save PDF: {e}") from e

    logger.info(f"Rendered {pages} pages to {output}")
    return pages


def _to_pdf_y(layout: LayoutConstants, y_mm: float, height_mm: float = 0.0) -> float:
    """
    Convert a top-down mm coordinate to bottom-up PDF points.

    Args:
        layout: Layout configuration (page height)
        y_mm: Distance of the element's top edge from the page top
        height_mm: Element height

    Returns:
        Y of the element's bottom edge from the page bottom, in points
    """
    return (layout.page_height - y_mm - height_mm) * mm


def _draw_footer(c: canvas.Canvas, text: str, layout: LayoutConstants) -> None:
    """
    Draw the page footer at the top of the footer band.

    Text sits in a 5mm cell starting footer_height above the page
    bottom, left-aligned with the content margin.
    """
    font_size = RENDER_THRESHOLDS.footer_font_size
    cell_height = RENDER_THRESHOLDS.footer_cell_height_mm

    # Baseline vertically centred in the cell
    baseline_mm = layout.page_height - layout.footer_height + cell_height / 2
    baseline_pt = _to_pdf_y(layout, baseline_mm) - font_size * 0.35

    c.saveState()
    c.setFont(RENDER_THRESHOLDS.footer_font, font_size)
    c.setFillColorRGB(0, 0, 0)
    c.drawString(layout.margin * mm, baseline_pt, text)
    c.restoreState()


def _draw_image(c: canvas.Canvas, op: PlaceImage, layout: LayoutConstants) -> None:
    """Embed an image entry at its planned rectangle."""
    try:
        reader = _entry_to_reader(op.entry)
        c.drawImage(
            reader,
            op.x * mm,
            _to_pdf_y(layout, op.y, op.height),
            width=op.width * mm,
            height=op.height * mm,
            mask="auto",
        )
    except (OSError, ValueError) as e:
        raise RenderError(f"failed to embed image '{op.entry.source_ref}': {e}") from e


def _draw_error(c: canvas.Canvas, op: PlaceError, layout: LayoutConstants) -> None:
    """
    Draw an error message in bold red.

    Long messages wrap to the block width; each line gets a block-high
    row like a multi-line cell.
    """
    font = RENDER_THRESHOLDS.error_font
    font_size = RENDER_THRESHOLDS.error_font_size
    text = f"{ERROR_PREFIX}{op.message}"

    lines = simpleSplit(text, font, font_size, op.width * mm) or [text]

    c.saveState()
    c.setFont(font, font_size)
    c.setFillColorRGB(*RENDER_THRESHOLDS.error_color_rgb)
    for i, line in enumerate(lines):
        row_top = op.y + i * op.height
        baseline_pt = _to_pdf_y(layout, row_top + op.height / 2) - font_size * 0.35
        c.drawString(op.x * mm, baseline_pt, line)
    c.restoreState()


def _entry_to_reader(entry: ImageEntry) -> ImageReader:
    """
    Wrap an entry's encoded bytes for ReportLab.

    Args:
        entry: Image entry with PNG or JPEG data

    Returns:
        ImageReader for use with ReportLab
    """
    return ImageReader(io.BytesIO(entry.data))
