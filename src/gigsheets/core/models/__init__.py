"""
Core data models for gigsheets.

Exports:
    - ContentBounds: Pixel rectangle of image content
    - ImageEntry, ErrorEntry, Entry: Placeable line items
    - SongSet, Document: Grouping of entries
"""

from .bounds import ContentBounds
from .entries import Document, Entry, ErrorEntry, ImageEntry, SongSet

__all__ = [
    "ContentBounds",
    "Document",
    "Entry",
    "ErrorEntry",
    "ImageEntry",
    "SongSet",
]
