"""
Module: controller

Purpose:
    Orchestrate document generation.
    Load → Compose → Plan → Render, for one gig or a whole gigs folder.

Key Functions:
    - generate_document(): Plan and render a composed Document
    - generate_gig(): Compose, plan and render one gig
    - generate_all(): Batch generation driven by the config file

Key Classes:
    - GenerationResult: Outcome for one document
    - BatchResult: Outcomes for a batch
    - GenerationError: Batch could not start

Dependencies:
    - gigsheets.loading: Config and gig files
    - gigsheets.layout: Composition and planning
    - gigsheets.output: PDF rendering

Used By:
    - cli: generate command
    - watch: Regeneration
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from gigsheets.core.models import Document
from gigsheets.images import ImageProvider

from .config import GenerateOptions
from .layout import (
    LayoutConstants,
    all_songs_gig,
    compose_document,
    plan,
    resolve_spacing,
)
from .loading import AppConfig, Gig, LoaderError, SongMap, discover_gigs, load_config, load_gig
from .output import RenderError, render_to_pdf
from .output.renderer import Output

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Batch generation could not start."""
    pass


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of generating one document (immutable).

    Attributes:
        name: Document or gig file name
        output: Where the PDF was (or would have been) written
        success: Whether the PDF was written
        page_count: Pages written (0 on failure)
        error_entries: Entries rendered as errors
        error: Failure message when success is False
    """

    name: str
    output: Optional[str]
    success: bool
    page_count: int = 0
    error_entries: int = 0
    error: Optional[str] = None


@dataclass
class BatchResult:
    """Outcomes of a batch run, in processing order."""

    results: List[GenerationResult] = field(default_factory=list)

    @property
    def succeeded(self) -> List[GenerationResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> List[GenerationResult]:
        return [r for r in self.results if not r.success]

    @property
    def ok(self) -> bool:
        """True when every document was written."""
        return not self.failed


def generate_document(
    document: Document,
    layout: LayoutConstants,
    output: Output,
) -> GenerationResult:
    """
    Plan and render a composed document.

    Sink failures are reported in the result instead of raised, so a
    batch can continue with the next document.

    Args:
        document: Composed document
        layout: Layout configuration
        output: Path or writable binary file object

    Returns:
        GenerationResult
    """
    output_label = str(output) if isinstance(output, (str, Path)) else None
    ops = plan(document, layout)

    try:
        pages = render_to_pdf(ops, layout, output)
    except RenderError as e:
        logger.error(f"Error generating PDF for {document.name}: {e}")
        return GenerationResult(
            name=document.name,
            output=output_label,
            success=False,
            error_entries=document.error_count,
            error=str(e),
        )

    return GenerationResult(
        name=document.name,
        output=output_label,
        success=True,
        page_count=pages,
        error_entries=document.error_count,
    )


def generate_gig(
    gig: Gig,
    song_map: SongMap,
    layout: LayoutConstants,
    output: Output,
    *,
    images_dir: Path,
    image_override: Optional[str] = None,
    provider: Optional[ImageProvider] = None,
) -> GenerationResult:
    """
    Generate the PDF for one gig.

    Unresolvable songs and unreadable images become visible error
    entries; only output failures fail the document.

    Args:
        gig: Parsed gig
        song_map: nickname -> {variant -> image path}
        layout: Layout configuration
        output: Path or writable binary file object
        images_dir: Base folder for relative image paths
        image_override: Variant to prefer for every song
        provider: Image loader (defaults to FileImageProvider)

    Returns:
        GenerationResult

    Example:
        >>> result = generate_gig(gig, config.song_map(), LayoutConstants(),
        ...                       Path("out/friday.pdf"), images_dir=config.images_dir)
        >>> result.success
        True
    """
    document = compose_document(
        gig,
        song_map,
        images_dir=images_dir,
        image_override=image_override,
        provider=provider,
    )
    return generate_document(document, layout, output)


def build_layout(config: AppConfig, options: GenerateOptions) -> LayoutConstants:
    """Layout for a run, with spacing resolved override > config > default."""
    spacing = resolve_spacing(options.spacing, config.spacing)
    return LayoutConstants(spacing=spacing)


def generate_all(
    options: GenerateOptions,
    *,
    provider: Optional[ImageProvider] = None,
) -> BatchResult:
    """
    Generate PDFs for every gig in the configured gigs folder.

    Pipeline:
    1. Load the config file
    2. Resolve spacing and the output folder
    3. For each gig file (lexicographic order): load, compose, plan, render
    4. (Optional) Generate the all-songs document

    A gig that fails to load or render is logged and skipped.

    Args:
        options: Run options
        provider: Image loader (defaults to FileImageProvider)

    Returns:
        BatchResult with one entry per attempted document

    Raises:
        GenerationError: If the config cannot be loaded or the output
            folder cannot be created
    """
    start_time = time.perf_counter()

    try:
        config = load_config(options.config_path)
    except LoaderError as e:
        raise GenerationError(f"error loading config file: {e}") from e

    layout = build_layout(config, options)
    output_dir = config.output_dir(options.output_override)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise GenerationError(f"error creating output directory: {e}") from e

    song_map = config.song_map()
    batch = BatchResult()

    gig_files = discover_gigs(config.gigs_dir)
    if not gig_files:
        logger.warning(f"No gig files found in {config.gigs_dir}")
    else:
        logger.info(f"Found {len(gig_files)} gig file(s) in {config.gigs_dir}")

    for gig_file in gig_files:
        try:
            gig = load_gig(gig_file)
        except LoaderError as e:
            logger.error(f"Error loading gig file {gig_file}: {e}")
            batch.results.append(GenerationResult(
                name=gig_file.name, output=None, success=False, error=str(e),
            ))
            continue

        output_file = output_dir / f"{gig_file.stem}.pdf"
        result = generate_gig(
            gig,
            song_map,
            layout,
            output_file,
            images_dir=config.images_dir,
            image_override=options.image_override,
            provider=provider,
        )
        batch.results.append(result)
        if result.success:
            logger.info(f"Successfully generated PDF: {output_file}")

    if options.all_songs:
        output_file = output_dir / options.all_songs_filename
        result = generate_gig(
            all_songs_gig(config.nicknames),
            song_map,
            layout,
            output_file,
            images_dir=config.images_dir,
            image_override=options.image_override,
            provider=provider,
        )
        batch.results.append(result)
        if result.success:
            logger.info(f"Successfully generated PDF: {output_file}")

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Generated {len(batch.succeeded)}/{len(batch.results)} PDFs in {elapsed:.2f}s"
    )
    return batch
