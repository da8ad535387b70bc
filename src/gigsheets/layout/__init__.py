"""
Module: layout

Purpose:
    Entry composition and page planning.
    Converts gigs into documents and documents into PageOp streams.

Key Functions:
    - compose_document(): Resolve a gig into a Document
    - plan(): Arrange a Document onto pages

Key Classes:
    - LayoutConstants: Page geometry and spacing
    - StartPage, Footer, PlaceImage, PlaceError: PageOps

Dependencies:
    - gigsheets.images: ImageProvider
    - gigsheets.core.models: Document, entries

Used By:
    - controller: Document generation
"""

from .config import LayoutConstants, resolve_spacing
from .models import Footer, PageCursor, PageOp, PlaceError, PlaceImage, StartPage, page_count
from .composer import all_songs_gig, compose_document, compose_entry, parse_reference
from .planner import footer_text, image_size, plan

__all__ = [
    # Config
    "LayoutConstants",
    "resolve_spacing",
    # Models
    "PageOp",
    "StartPage",
    "Footer",
    "PlaceImage",
    "PlaceError",
    "PageCursor",
    "page_count",
    # Functions
    "compose_document",
    "compose_entry",
    "parse_reference",
    "all_songs_gig",
    "plan",
    "image_size",
    "footer_text",
]
