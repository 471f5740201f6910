"""Helpful error messages for common bytecmp failure modes."""

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def _emit_error(*lines: str) -> None:
    """Write error message lines to STDERR."""
    for line in lines:
        sys.stderr.write(line + "\n")


def file_read_error(file_path: Path, original_error: Exception) -> None:
    """Log and display helpful message when a bytecode file cannot be read.

    Args:
        file_path: Path to the file that could not be read
        original_error: The underlying OSError or UnicodeDecodeError
    """
    logger.error(f"Error comparing bytecode files: cannot read {file_path} - {original_error}")
    hints = [
        "\nPossible solutions:",
        "  1. Check the path is spelled correctly and the file exists:",
        f"     ls -la '{file_path}'",
    ]
    if isinstance(original_error, PermissionError):
        hints += [
            "\n  2. Grant read permission:",
            f"     chmod u+r '{file_path}'",
        ]
    elif isinstance(original_error, UnicodeDecodeError):
        hints += [
            "\n  2. The file must be UTF-8 (or ASCII) hex text, not raw binary:",
            f"     xxd -p '{file_path}' > '{file_path}.hex'",
        ]
    _emit_error(
        "",
        "=" * 70,
        "ERROR COMPARING BYTECODE FILES",
        "=" * 70,
        f"\nCouldn't read: {file_path}",
        f"\nOriginal error: {original_error}",
        *hints,
        "=" * 70,
        "",
    )


def config_error(errors: list[str], source: str = "command line") -> None:
    """Log and display every configuration problem at once.

    Args:
        errors: Validation messages collected by CompareConfig
        source: Where the configuration came from (file path or "command line")
    """
    logger.error(f"Invalid configuration from {source}: {'; '.join(errors)}")
    _emit_error(
        "",
        "=" * 70,
        "INVALID CONFIGURATION",
        "=" * 70,
        f"\nSource: {source}",
        "\nProblems:",
        *[f"  - {error}" for error in errors],
        "\nExample config file:",
        '  { "compare": { "ignore_hash": true, "ignore_cbor": true, "context_size": 16 } }',
        "=" * 70,
        "",
    )
