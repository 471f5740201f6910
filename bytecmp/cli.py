"""Main CLI entry point - parses arguments and runs one comparison."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .compare import BytecodeReadError, CompareConfig, CompareController, ConfigError
from .display.base import Display
from .display.context import add_display_argument, get_display
from .error_messages import config_error, file_read_error
from .logging_config import get_logger, setup_logging
from .report import render_header, report_comparison
from .utils import get_package_version

logger = get_logger("cli")

EXIT_IDENTICAL = 0
# Differences and usage errors share status 1; only a usage error prints help
EXIT_DIFFERENT = 1
EXIT_USAGE = 1
EXIT_ERROR = 2

EPILOG = """
Example:
  bytecmp --ignore-hash --ignore-cbor bytecode1.hex bytecode2.hex
"""


class UsageError(Exception):
    """Raised instead of exiting when argparse rejects the command line."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; help is handled by ``main`` so it can exit non-zero."""
    parser = _ArgumentParser(
        prog="bytecmp",
        description="Bytecode Comparison Tool - compare two hex bytecode files position by position",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="First and second bytecode file")
    parser.add_argument("--ignore-hash", action="store_true", help="Ignore bytecode hash differences")
    parser.add_argument(
        "--ignore-cbor",
        "--ignore-metadata",
        dest="ignore_cbor",
        action="store_true",
        help="Ignore CBOR metadata differences",
    )
    parser.add_argument("--hash-pattern", metavar="REGEX", help="Override the bytecode hash pattern")
    parser.add_argument("--cbor-pattern", metavar="REGEX", help="Override the CBOR metadata pattern")
    parser.add_argument("--config", type=Path, metavar="FILE", help="JSON config file with a 'compare' section")
    add_display_argument(parser)
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message")
    return parser


def _apply_overrides(config: CompareConfig, args: argparse.Namespace) -> CompareConfig:
    """Command-line flags on top of the config file values."""
    overrides = {}
    if args.ignore_hash:
        overrides["ignore_hash"] = True
    if args.ignore_cbor:
        overrides["ignore_cbor"] = True
    if args.hash_pattern is not None:
        overrides["hash_pattern"] = args.hash_pattern
    if args.cbor_pattern is not None:
        overrides["cbor_pattern"] = args.cbor_pattern

    return dataclasses.replace(config, **overrides) if overrides else config


def _build_config(args: argparse.Namespace, display: Display) -> Optional[CompareConfig]:
    """Config file values, then command-line overrides; None after reporting a bad value."""
    source = str(args.config) if args.config else "defaults"
    try:
        config = CompareConfig.load(args.config) if args.config else CompareConfig()
        source = "command line"
        return _apply_overrides(config, args)
    except ConfigError as e:
        config_error(e.errors, source=source)
        if args.display == "json":
            display.error("Invalid configuration", details=e.errors, source=source)
        return None


def run(args: argparse.Namespace) -> int:
    """Compare the two files named in ``args`` and report."""
    file1, file2 = args.files[:2]
    if len(args.files) > 2:
        logger.warning("Ignoring extra arguments: %s", " ".join(args.files[2:]))

    display = get_display(args.display)
    config = _build_config(args, display)
    if config is None:
        return EXIT_ERROR

    if args.display == "cli":
        display.info(render_header(config))

    try:
        comparison = CompareController(config).compare(Path(file1), Path(file2))
    except BytecodeReadError as e:
        file_read_error(e.path, e.cause)
        if args.display == "json":
            display.error("Cannot read bytecode file", details=str(e.cause), path=str(e.path))
        return EXIT_ERROR

    if args.display == "json":
        display.json_output(comparison.to_dict())
    else:
        report_comparison(comparison, display)

    return EXIT_IDENTICAL if comparison.identical else EXIT_DIFFERENT


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        0 when the masked bytecodes are identical, 1 when they differ or the
        command line is unusable, 2 when a file or config cannot be read.
        Status 1 is shared: a usage error prints help instead of a report.
        Scripts that must tell them apart can use ``--display json``, where
        a difference has ``result.identical`` set to false.
    """
    parser = build_parser()
    try:
        args, unknown = parser.parse_known_intermixed_args(argv)
    except UsageError as e:
        print(f"Usage error: {e}", file=sys.stderr)
        parser.print_help()
        return EXIT_USAGE

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.version:
        print(f"bytecmp {get_package_version()}")
        return 0

    if unknown:
        print(f"Usage error: unrecognized arguments: {' '.join(unknown)}", file=sys.stderr)
        parser.print_help()
        return EXIT_USAGE

    if args.help or len(args.files or []) < 2:
        parser.print_help()
        return EXIT_USAGE

    try:
        return run(args)
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        print(f"Unhandled error: {e}", file=sys.stderr)
        return 1
