"""Rich Console factory and theme for white-label output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

WL_THEME = Theme(
    {
        "wl.ok": "bold green",
        "wl.error": "bold red",
        "wl.warning": "bold yellow",
        "wl.op": "bold cyan",
        "wl.key": "dim",
        "wl.brand": "bold magenta",
        "wl.pattern": "cyan",
        "wl.path": "dim",
        "wl.kind.string": "green",
        "wl.kind.integer": "blue",
        "wl.kind.float": "blue",
        "wl.kind.boolean": "yellow",
        "wl.kind.char": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=WL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a literal kind."""
    return f"wl.kind.{kind}" if kind else ""
