"""Command-line interface: ``colocale check`` and ``colocale codegen``.

Usage:
    colocale check locales/                 # base dir with one subdir per locale
    colocale check locales/en locales/ja    # individual locale directories
    colocale check locales/ --format json --reference ja
    colocale codegen locales/en message_keys.py

Exit status of ``check`` is 0 when every result is valid and 1 otherwise
(including load failures).

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from colocale import __version__
from colocale.catalog.loading import find_locale_directories, load_catalog, load_namespace_directory
from colocale.codegen import generate_key_types
from colocale.diagnostics import CatalogLoadError, OutputFormat, ValidationFormatter, ValidationResult
from colocale.validation import CatalogValidator, ValidationConfig, validate_cross_locale

logger = logging.getLogger(__name__)

__all__ = ["build_parser", "main"]

EXIT_OK = 0
EXIT_FAILURE = 1

_RULE = "=" * 50


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``colocale`` program."""
    parser = argparse.ArgumentParser(
        prog="colocale",
        description="Validate message catalogs and generate key types",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser(
        "check", help="Validate catalog files for consistency and correctness"
    )
    check.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Base directory of locale subdirectories, or locale directories",
    )
    check.add_argument(
        "--reference",
        metavar="LOCALE",
        help="Reference locale for the cross-locale check (default: first locale)",
    )
    check.add_argument(
        "--require-plural-one",
        action="store_true",
        help="Require a _one sibling in every plural family",
    )
    check.add_argument(
        "--format",
        choices=[str(fmt) for fmt in OutputFormat],
        default=str(OutputFormat.TEXT),
        help="Report format (default: text)",
    )
    check.add_argument("--color", action="store_true", help="Colorize text output")

    codegen = subparsers.add_parser(
        "codegen", help="Generate Python key type aliases from a locale directory"
    )
    codegen.add_argument("path", type=Path, help="Locale directory with <namespace>.json files")
    codegen.add_argument(
        "output",
        nargs="?",
        type=Path,
        default=Path("message_keys.py"),
        help="Output file (default: message_keys.py)",
    )
    return parser


def _run_check(args: argparse.Namespace) -> int:
    formatter = ValidationFormatter(output_format=OutputFormat(args.format), color=args.color)
    validator = CatalogValidator(ValidationConfig(require_plural_one=args.require_plural_one))
    text_output = formatter.output_format is OutputFormat.TEXT

    has_errors = False
    checked: list[str] = []
    logger.debug("Checking %d path(s): %s", len(args.paths), ", ".join(map(str, args.paths)))

    try:
        base = args.paths[0]
        if find_locale_directories(base):
            # Multi-locale mode: per-locale checks, then cross-locale consistency
            catalogs = load_catalog(base)
            if text_output:
                print(f"Found {len(catalogs)} locale(s) in {base}\n")

            reference = args.reference if args.reference is not None else next(iter(catalogs), None)
            reference_catalog = catalogs.get(reference) if len(catalogs) > 1 else None
            for locale, catalog in catalogs.items():
                result = validator.validate(
                    catalog,
                    locale=locale,
                    reference_catalog=reference_catalog if locale != reference else None,
                )
                print(formatter.format_result(locale, result))
                checked.append(locale)
                has_errors = has_errors or not result.is_valid

            if len(catalogs) > 1:
                cross_result: ValidationResult = validate_cross_locale(
                    catalogs, reference_locale=args.reference
                )
                if text_output:
                    print(f"\n{_RULE}\nCross-locale consistency check\n")
                print(formatter.format_result("cross-locale", cross_result))
                has_errors = has_errors or not cross_result.is_valid
        else:
            # Single-locale mode: each path is one locale directory
            for path in args.paths:
                catalog = load_namespace_directory(path)
                locale = path.resolve().name
                result = validator.validate(catalog, locale=locale)
                print(formatter.format_result(locale, result))
                checked.append(locale)
                has_errors = has_errors or not result.is_valid
    except CatalogLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except ValueError as e:
        # Unknown --reference locale
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if text_output:
        print(f"\n{_RULE}")
    print(formatter.format_summary(has_errors=has_errors, locale_count=len(checked)))
    return EXIT_FAILURE if has_errors else EXIT_OK


def _run_codegen(args: argparse.Namespace) -> int:
    try:
        catalog = load_namespace_directory(args.path)
    except CatalogLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    source = generate_key_types(catalog)
    try:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(source, encoding="utf-8")
    except OSError as e:
        print(f"error: cannot write {args.output}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print(f"Generated key types for {len(catalog)} namespace(s): {args.output}")
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``colocale`` program.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "check":
            return _run_check(args)
        case "codegen":
            return _run_codegen(args)
    return EXIT_FAILURE  # pragma: no cover - argparse rejects unknown commands
