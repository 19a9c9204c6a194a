"""Command: fill the form, submit it, and show the age."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agecalc.commands._base import AgeCommand, form_field_options

if TYPE_CHECKING:
    from agecalc.commands._context import AppContext


@click.command(
    cls=AgeCommand,
    examples="""\
  agecalc calc --first-name Ana --last-name Souza --email ana@mail.com \\
      --day 15 --month 5 --year 1990
  agecalc --json calc --day 29 --month 2 --year 2024
  agecalc -q calc --day 1 --month 1 --year 2000""",
)
@form_field_options
@click.pass_obj
def calc(app: AppContext, **fields: str | None) -> None:
    """Submit the form and print years, months and days since the birth date.

    Exits with status 1 when any field is invalid or the date is
    impossible or in the future.
    """
    from agecalc.services.form import FormService

    svc = FormService(app.runtime)
    svc.fill(**fields)
    app.emit(svc.submit())
