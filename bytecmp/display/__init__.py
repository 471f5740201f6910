"""Display layer for bytecmp - CLI and JSON output formatting."""

from .base import Display
from .cli import CLIDisplay
from .context import get_display
from .json_display import JSONDisplay

__all__ = [
    "Display",
    "CLIDisplay",
    "JSONDisplay",
    "get_display",
]
