"""Rich Console factory and theme for agecalc output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.

The dark theme variant mirrors the persisted UI theme preference.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

_BASE_STYLES: dict[str, str] = {
    "age.ok": "bold green",
    "age.error": "bold red",
    "age.warning": "bold yellow",
    "age.op": "bold cyan",
    "age.key": "dim",
    "age.field": "bold",
    "age.unit": "dim",
    "age.placeholder": "dim",
    "age.clock": "dim",
}

LIGHT_THEME = Theme({**_BASE_STYLES, "age.value": "bold blue", "age.name": "bold"})
DARK_THEME = Theme({**_BASE_STYLES, "age.value": "bold bright_magenta", "age.name": "bold white"})


def create_console(
    *,
    no_color: bool = False,
    width: int | None = None,
    dark: bool = False,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
        dark: Use the dark-theme palette.
    """
    return Console(
        file=StringIO(),
        theme=DARK_THEME if dark else LIGHT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
