"""Rich console used by the renderers.

Output is drawn into an in-memory buffer and returned as a string, so the
caller decides whether it goes to stdout or stderr. Rich drops colors by
itself when the buffer is not a terminal, which keeps CliRunner output plain.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

QS_THEME = Theme(
    {
        "qs.ok": "bold green",
        "qs.error": "bold red",
        "qs.warning": "bold yellow",
        "qs.op": "bold cyan",
        "qs.key": "dim",
        "qs.id": "bold blue",
        "qs.path": "dim",
        "qs.name": "bold",
        "qs.active": "green",
        "qs.inactive": "yellow",
        "qs.default": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Buffered console with the quickstand theme.

    *width* fixes the wrap column so tables render the same everywhere.
    """
    buffer = StringIO()
    return Console(
        file=buffer,
        theme=QS_THEME,
        width=width or DEFAULT_WIDTH,
        no_color=no_color,
        highlight=False,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("console was not created by create_console()")
    return buffer.getvalue()
