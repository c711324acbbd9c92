"""Command-line entry point: validate a document JSON file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from vectorlint.config import settings
from vectorlint.engine.config import PRESETS, ValidationSuiteConfig
from vectorlint.engine.suite import create_suite
from vectorlint.errors import UnknownPresetError
from vectorlint.models.svg_document import SvgDocument

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_INPUT_ERROR = 2


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vectorlint",
        description="Validate and score a declarative SVG document",
    )
    parser.add_argument("file", type=Path, help="Document JSON file")
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=None,
        help=f"Validation preset (default: {settings.default_preset})",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--quick", action="store_true", help="Structural admission check only")
    mode.add_argument("--auto-fix", action="store_true", help="Apply automatable fixes and print the fixed document")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_document(path: Path) -> SvgDocument:
    return SvgDocument.model_validate_json(path.read_text(encoding="utf-8"))


def _emit(result: BaseModel) -> None:
    sys.stdout.write(result.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        document = load_document(args.file)
    except OSError as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return EXIT_INPUT_ERROR
    except ValidationError as e:
        logger.error("%s is not a valid document: %s", args.file, e)
        return EXIT_INPUT_ERROR

    suite = create_suite()
    preset = args.preset or settings.default_preset

    try:
        if args.quick:
            quick = suite.quick_validate(document)
            _emit(quick)
            return EXIT_VALID if quick.valid else EXIT_INVALID

        if args.auto_fix:
            fixed = suite.validate_with_auto_fix(document, preset)
            _emit(fixed)
            return EXIT_VALID if fixed.validation_result.overall.valid else EXIT_INVALID

        result = suite.validate_document(document, ValidationSuiteConfig(preset=preset))
    except UnknownPresetError as e:
        logger.error("%s", e)
        return EXIT_INPUT_ERROR

    _emit(result)
    return EXIT_VALID if result.overall.valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
