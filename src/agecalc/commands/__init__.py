"""Subcommand modules for agecalc.

Provides register_commands() which uses deferred imports to keep
``agecalc --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the theme group and the standalone commands on the root group."""
    # --- Groups ---
    from agecalc.commands.theme import theme

    cli.add_command(theme)

    # --- Standalone commands ---
    from agecalc.commands.calc import calc
    from agecalc.commands.clock import clock
    from agecalc.commands.form import form
    from agecalc.commands.validate import validate

    cli.add_command(calc)
    cli.add_command(validate)
    cli.add_command(clock)
    cli.add_command(form)
