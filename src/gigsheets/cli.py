"""
Module: cli

Purpose:
    Command line entry point. Maps arguments onto GenerateOptions and
    the generation, validation and schema functions.

Commands:
    generate         Generate one PDF per gig (optionally watch for changes)
    validate-config  Check configured images exist (optionally repair config)
    generate-schema  Write a JSON Schema for gig files
    version          Print the version

Dependencies:
    - argparse (std)
    - logging (std)

Used By:
    - gigsheets console script
    - python -m gigsheets
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import DEFAULT_CONFIG_FILE, GenerateOptions
from .controller import GenerationError, generate_all
from .loading import LoaderError, load_config
from .schema import generate_schema, write_schema
from .validation import validate_config
from .watch import run_generate_watch, watch_paths

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_FILE = "gig-schema.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gigsheets",
        description="Build printable gig sheets (PDF) from song images and YAML set lists",
    )
    subparsers = parser.add_subparsers(dest="command")

    gen = subparsers.add_parser("generate", help="Generate PDFs for all gigs")
    gen.add_argument("-c", "--config", type=Path, default=Path(DEFAULT_CONFIG_FILE), help="Path to config file")
    gen.add_argument("-w", "--watch", action="store_true", help="Watch for changes and regenerate automatically")
    gen.add_argument("-s", "--spacing", type=float, default=None, help="Vertical spacing between images in mm")
    gen.add_argument("-i", "--image", default=None, help="Image variant to use for every song when available")
    gen.add_argument("-o", "--output", default=None, help="Output folder (overrides config)")
    gen.add_argument("-a", "--all", dest="all_songs", action="store_true", help="Also generate _all.pdf with every song")
    gen.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    val = subparsers.add_parser("validate-config", help="Check that all configured images exist")
    val.add_argument("-c", "--config", type=Path, default=Path(DEFAULT_CONFIG_FILE), help="Path to config file")
    val.add_argument("-a", "--add-missing", action="store_true", help="Add images in the image folder that are not in the config")
    val.add_argument("-s", "--sort", action="store_true", help="Sort songs alphabetically by nickname")

    sch = subparsers.add_parser("generate-schema", help="Generate a JSON Schema for gig files")
    sch.add_argument("-c", "--config", type=Path, default=Path(DEFAULT_CONFIG_FILE), help="Path to config file")
    sch.add_argument("-o", "--output", type=Path, default=Path(DEFAULT_SCHEMA_FILE), help="Output schema file")
    sch.add_argument("-w", "--watch", action="store_true", help="Regenerate when the config file changes")

    subparsers.add_parser("version", help="Print the version")
    return parser


def configure_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)


def cmd_generate(args: argparse.Namespace) -> int:
    try:
        options = GenerateOptions(
            config_path=args.config,
            spacing=args.spacing,
            image_override=args.image,
            output_override=args.output,
            all_songs=args.all_songs,
            debug=args.debug,
        )
    except ValueError as e:
        logger.error(f"Invalid options: {e}")
        return 1

    configure_logging(options.debug)

    if not args.watch:
        try:
            batch = generate_all(options)
        except GenerationError as e:
            logger.error(f"Error generating PDFs: {e}")
            return 1
        logger.info(f"Generated {len(batch.succeeded)} PDF(s), {len(batch.failed)} failed")
        return 0

    try:
        config = load_config(options.config_path)
    except LoaderError as e:
        logger.error(f"Error loading config file: {e}")
        return 1

    def _regenerate() -> None:
        try:
            batch = generate_all(options)
        except GenerationError as e:
            logger.error(f"Error generating PDFs: {e}")
            return
        if batch.ok:
            logger.info("PDFs regenerated successfully")

    try:
        run_generate_watch(options.config_path, config.gigs_dir, _regenerate)
    except KeyboardInterrupt:
        logger.info("\nStopped watching.")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    try:
        report = validate_config(args.config, add_missing=args.add_missing, sort=args.sort)
    except LoaderError as e:
        logger.error(f"Error validating config: {e}")
        return 1

    logger.info("Validation Results:")
    logger.info("==================")
    if report.valid:
        logger.info(f"\nValid images ({len(report.valid)}):")
        for line in report.valid:
            logger.info(f"  ✓ {line}")
    if report.missing:
        logger.info(f"\nMissing images ({len(report.missing)}):")
        for line in report.missing:
            logger.info(f"  ✗ {line}")
    for song in report.added:
        target = song.image if song.image else song.images
        logger.info(f"  + {song.nickname} -> {target}")

    if report.missing and not args.add_missing:
        logger.info(f"\nValidation failed: {len(report.missing)} missing images")
        logger.info("Use --add-missing flag to automatically add missing images from the image folder.")
        return 1
    if report.ok:
        logger.info("\n✓ All images in config exist!")
    return 0


def _write_schema(config_path: Path, output: Path) -> None:
    config = load_config(config_path)
    write_schema(generate_schema(config), output)


def cmd_generate_schema(args: argparse.Namespace) -> int:
    try:
        _write_schema(args.config, args.output)
    except LoaderError as e:
        logger.error(f"Error generating schema: {e}")
        return 1

    if not args.watch:
        logger.info("\nTo use in VS Code, add this to your settings.json:")
        logger.info(f'"yaml.schemas": {{\n  "./{args.output}": "gigs/*.yaml"\n}}')
        return 0

    def _regenerate() -> None:
        logger.info(f"\nDetected change in {args.config}, regenerating schema...")
        try:
            _write_schema(args.config, args.output)
        except LoaderError as e:
            logger.error(f"Error regenerating schema: {e}")

    logger.info(f"Watching {args.config.resolve()} for changes... (press Ctrl+C to stop)")
    try:
        watch_paths([args.config], _regenerate)
    except KeyboardInterrupt:
        logger.info("\nStopped watching.")
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    logger.info(f"gigsheets {__version__}")
    return 0


COMMANDS = {
    "generate": cmd_generate,
    "validate-config": cmd_validate,
    "generate-schema": cmd_generate_schema,
    "version": cmd_version,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging()
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
