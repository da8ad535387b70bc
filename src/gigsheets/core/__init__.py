"""
gigsheets Core Package

Shared data models for every layer of the pipeline. All models are
frozen dataclasses; new instances are created for any change.

1. **ContentBounds** - pixel rectangle of non-background content
2. **Entry** - tagged union of ImageEntry | ErrorEntry
3. **SongSet / Document** - ordered grouping handed to the planner
"""

from .models import ContentBounds, Document, Entry, ErrorEntry, ImageEntry, SongSet

__all__ = [
    "ContentBounds",
    "Document",
    "Entry",
    "ErrorEntry",
    "ImageEntry",
    "SongSet",
]
