"""Command group: persisted light/dark theme preference."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agecalc.commands._base import AgeGroup

if TYPE_CHECKING:
    from agecalc.commands._context import AppContext

_THEME_EXAMPLES = """\
  agecalc theme show
  agecalc theme set dark
  agecalc theme toggle"""


@click.group(cls=AgeGroup, examples=_THEME_EXAMPLES)
def theme() -> None:
    """Show or change the colour theme."""


@theme.command(examples="  agecalc theme show\n  agecalc --json theme show")
@click.pass_obj
def show(app: AppContext) -> None:
    """Print the stored theme (light when unset)."""
    from agecalc.services.theme import ThemeService

    app.emit(ThemeService(app.runtime).show())


@theme.command(name="set", examples="  agecalc theme set dark\n  agecalc theme set light")
@click.argument("value")
@click.pass_obj
def set_theme(app: AppContext, value: str) -> None:
    """Store VALUE (light or dark) as the theme."""
    from agecalc.services.theme import ThemeService

    app.emit(ThemeService(app.runtime).set(value))


@theme.command(examples="  agecalc theme toggle")
@click.pass_obj
def toggle(app: AppContext) -> None:
    """Switch between light and dark."""
    from agecalc.services.theme import ThemeService

    app.emit(ThemeService(app.runtime).toggle())
