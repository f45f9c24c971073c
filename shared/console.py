"""
elfpeek Console Interface
==========================

Rich-powered console abstraction for human-facing status lines.

The class wraps :class:`rich.console.Console` bound to stderr so that
status and fatal error messages never interleave with a report written
to standard output.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

_TOOL_THEME = Theme(
    {
        "tool.success": "bold green",
        "tool.warning": "bold yellow",
        "tool.error": "bold red",
        "tool.dim": "dim white",
    }
)


class ToolConsole:
    """Status console for elfpeek commands.

    Usage::

        con = ToolConsole()
        con.error("Not an ELF file")
        con.success("Report saved: header.txt")
    """

    def __init__(self) -> None:
        self._console = Console(
            theme=_TOOL_THEME,
            stderr=True,
            highlight=False,
        )

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[tool.success]SUCCESS:[/tool.success] {escape(message)}",
            soft_wrap=True,
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(
            f"[tool.warning]WARNING:[/tool.warning] {escape(message)}",
            soft_wrap=True,
        )

    def error(self, message: str) -> None:
        """Print an error message.

        Messages are escaped, so paths containing ``[`` are shown verbatim.
        """
        self._console.print(
            f"[tool.error]ERROR:[/tool.error] {escape(message)}",
            soft_wrap=True,
        )

