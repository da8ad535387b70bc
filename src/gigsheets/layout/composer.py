"""
Module: layout.composer

Purpose:
    Resolve the song references of a gig into placeable entries.
    Each reference becomes an ImageEntry (loaded and auto-cropped) or
    an ErrorEntry whose message is shown in the PDF.

Key Functions:
    - compose_document(): Build a Document from a Gig
    - compose_entry(): Resolve a single song reference
    - parse_reference(): Split "nickname#variant"
    - all_songs_gig(): Gig listing every configured song

Dependencies:
    - gigsheets.loading.models: Gig, DEFAULT_VARIANT
    - gigsheets.images: ImageProvider

Used By:
    - controller: Document generation
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from gigsheets.core.models import Document, Entry, ErrorEntry, SongSet
from gigsheets.images import FileImageProvider, ImageLoadError, ImageProvider
from gigsheets.loading.models import DEFAULT_VARIANT, Gig, GigSet, SongMap

logger = logging.getLogger(__name__)

ALL_SONGS_NAME = "All Songs"


def parse_reference(reference: str) -> Tuple[str, str]:
    """
    Split a song reference into (nickname, variant).

    Example:
        >>> parse_reference("ballad#acoustic")
        ('ballad', 'acoustic')
        >>> parse_reference("ballad")
        ('ballad', 'default')
    """
    parts = reference.split("#")
    nickname = parts[0]
    variant = parts[1] if len(parts) > 1 else DEFAULT_VARIANT
    return nickname, variant


def compose_entry(
    reference: str,
    song_map: SongMap,
    provider: ImageProvider,
    *,
    images_dir: Path,
    image_override: Optional[str] = None,
    source_label: str = "",
) -> Entry:
    """
    Resolve one song reference.

    Lookup order:
    1. Song nickname must exist in the song map
    2. If image_override names a variant the song has, it replaces
       the requested variant; otherwise the gig's variant is kept
    3. The variant must exist for the song
    4. The image is loaded (relative paths resolve against images_dir)

    Any failure yields an ErrorEntry and a logged warning.

    Args:
        reference: "nickname" or "nickname#variant"
        song_map: nickname -> {variant -> image path}
        provider: Image loader
        images_dir: Base folder for relative image paths
        image_override: Variant to prefer for every song
        source_label: Prefix for log messages (usually the gig file)

    Returns:
        ImageEntry or ErrorEntry
    """
    nickname, variant = parse_reference(reference)

    variants = song_map.get(nickname)
    if variants is None:
        return _error(f"No configuration found for song '{nickname}'", source_label)

    if image_override and image_override in variants:
        variant = image_override

    image_path = variants.get(variant)
    if image_path is None:
        return _error(f"No image '{variant}' found for song '{nickname}'", source_label)

    path = Path(image_path)
    if not path.is_absolute():
        path = images_dir / path

    try:
        return provider.load(path, reference)
    except ImageLoadError as e:
        return _error(str(e), source_label)


def compose_document(
    gig: Gig,
    song_map: SongMap,
    *,
    images_dir: Path,
    image_override: Optional[str] = None,
    provider: Optional[ImageProvider] = None,
) -> Document:
    """
    Create the document for a gig.

    Entries keep the gig's order; unresolved songs stay in place as
    ErrorEntries so the gap is visible in the output.

    Args:
        gig: Parsed gig
        song_map: nickname -> {variant -> image path}
        images_dir: Base folder for relative image paths
        image_override: Variant to prefer for every song
        provider: Image loader (defaults to FileImageProvider)

    Returns:
        Document ready for planning

    Example:
        >>> doc = compose_document(gig, config.song_map(), images_dir=config.images_dir)
        >>> doc.entry_count
        12
    """
    provider = provider or FileImageProvider()
    source_label = gig.source.name if gig.source is not None else gig.name

    sets = []
    for gig_set in gig.sets:
        entries = tuple(
            compose_entry(
                reference,
                song_map,
                provider,
                images_dir=images_dir,
                image_override=image_override,
                source_label=source_label,
            )
            for reference in gig_set.songs
        )
        sets.append(SongSet(name=gig_set.name, entries=entries))

    document = Document(name=gig.name, sets=tuple(sets))
    logger.info(
        f"Composed {document.entry_count} entries for '{gig.name}' "
        f"({document.error_count} errors)"
    )
    return document


def all_songs_gig(nicknames: List[str]) -> Gig:
    """
    Build an in-memory gig holding every configured song once.

    Uses each song's default variant; an image override still applies
    at composition time.
    """
    return Gig(
        name=ALL_SONGS_NAME,
        sets=(GigSet(name=ALL_SONGS_NAME, songs=tuple(nicknames)),),
    )


def _error(message: str, source_label: str) -> ErrorEntry:
    """Log and build an ErrorEntry."""
    prefix = f"{source_label}: " if source_label else ""
    logger.warning(f"{prefix}{message}")
    return ErrorEntry(message)
