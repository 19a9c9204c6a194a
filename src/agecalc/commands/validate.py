"""Command: run the field validators without submitting."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agecalc.commands._base import AgeCommand, form_field_options

if TYPE_CHECKING:
    from agecalc.commands._context import AppContext


@click.command(
    cls=AgeCommand,
    examples="""\
  agecalc validate --day 31 --month 4 --year 2020
  agecalc --json validate --email not-an-email""",
)
@form_field_options
@click.pass_obj
def validate(app: AppContext, **fields: str | None) -> None:
    """Check every field and list the errors."""
    from agecalc.services.form import FormService

    svc = FormService(app.runtime)
    svc.fill(**fields)
    app.emit(svc.validate())
