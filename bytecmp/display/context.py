"""Display factory for CLI vs JSON output."""

from typing import Literal, Optional

from .base import Display
from .cli import CLIDisplay
from .json_display import JSONDisplay

DisplayMode = Literal["cli", "json"]

DISPLAY_MODES = ("cli", "json")


def get_display(mode: Optional[DisplayMode] = None) -> Display:
    """Get appropriate display implementation.

    Args:
        mode: Explicit display mode ("cli" or "json"); None means "cli"

    Returns:
        Display implementation (CLIDisplay or JSONDisplay)
    """
    if mode is None or mode == "cli":
        return CLIDisplay()
    elif mode == "json":
        return JSONDisplay()
    else:
        raise ValueError(f"Invalid display mode: {mode}. Must be 'cli' or 'json'")


def add_display_argument(parser) -> None:
    """Add --display argument to an argparse parser.

    Args:
        parser: argparse.ArgumentParser instance
    """
    parser.add_argument(
        "--display",
        choices=DISPLAY_MODES,
        default="cli",
        help="Output display format (default: cli)",
    )
