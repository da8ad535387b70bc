"""
Module: output

Purpose:
    PDF rendering for gigsheets.
    Converts PageOp streams to PDF files using ReportLab.

Key Functions:
    - render_to_pdf(): Render a page plan to PDF

Dependencies:
    - reportlab: PDF generation
    - layout.models: PageOps
"""

from .renderer import RenderError, render_to_pdf

__all__ = [
    "render_to_pdf",
    "RenderError",
]
