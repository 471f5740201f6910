"""CLI display implementation using Rich library."""

import json
import shutil
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from ..constants import MAX_DISPLAY_WIDTH
from .base import Display


class CLIDisplay(Display):
    """Terminal display using Rich.

    Message text is escaped before printing, so bracketed placeholders such as
    ``[BYTECODE_HASH]`` and context markers are shown verbatim instead of being
    parsed as Rich markup. Lines are soft-wrapped so long hex strings stay on
    one line.
    """

    def __init__(self, force_terminal: Optional[bool] = None):
        detected_width = shutil.get_terminal_size(fallback=(MAX_DISPLAY_WIDTH, 24)).columns
        console_width = min(detected_width, MAX_DISPLAY_WIDTH)
        self.console = Console(
            force_terminal=force_terminal,
            width=console_width,
            highlight=False,
            emoji=False,
        )

    def _print(self, prefix: str, message: str) -> None:
        self.console.print(f"{prefix}{escape(message)}", soft_wrap=True)

    def success(self, message: str, **kwargs) -> None:
        """Display a success message in green."""
        self._print("[green]✓[/green] ", message)

    def error(self, message: str, **kwargs) -> None:
        """Display an error message in red."""
        self._print("[red]✗[/red] ", message)
        details = kwargs.get("details", "")
        if details:
            self.console.print(f"  [dim]{escape(str(details))}[/dim]", soft_wrap=True)

    def info(self, message: str, **kwargs) -> None:
        """Display an informational message."""
        self._print("", message)

    def json_output(self, data: Any, **kwargs) -> None:
        """Output JSON with syntax highlighting."""
        indent = kwargs.get("indent", 2)
        json_str = json.dumps(data, indent=indent)
        syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False, word_wrap=True)
        self.console.print(syntax)
