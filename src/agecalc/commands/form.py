"""Command: interactive form session in the terminal.

Prompts each field in order, validating it as soon as it is answered
(the terminal equivalent of validate-on-blur), then submits. The clock
refreshes in the background for the whole session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agecalc.commands._base import AgeCommand
from agecalc.domain import messages
from agecalc.domain.types import FormField

if TYPE_CHECKING:
    from agecalc.commands._context import AppContext
    from agecalc.services.form import FormService

_AGAIN = "c"
_CLEAR = "l"
_QUIT = "s"


def _ask_fields(svc: FormService) -> None:
    for name in FormField:
        current = svc.snapshot().values.get(name)
        value = click.prompt(
            messages.LABELS[name],
            default=current,
            show_default=bool(current),
        )
        svc.change(name, value)
        error = svc.blur(name).data["errors"].get(name.value)
        if error:
            click.echo(f"  {error}")


@click.command(
    cls=AgeCommand,
    examples="""\
  agecalc form
  agecalc -v form""",
)
@click.pass_obj
def form(app: AppContext) -> None:
    """Fill in the form interactively and see the age."""
    if app.settings.no_interact:
        raise click.UsageError("'form' is interactive; use 'agecalc calc' with --no-interact.")

    from agecalc.services.form import FormService

    svc = FormService(app.runtime)
    app.runtime.start_ticker(svc.update_clock)
    try:
        while True:
            _ask_fields(svc)
            click.echo(app.render(svc.submit()))
            choice = click.prompt(
                "[c] calcular de novo  [l] limpar  [s] sair",
                type=click.Choice([_AGAIN, _CLEAR, _QUIT]),
                default=_QUIT,
                show_choices=False,
            )
            if choice == _QUIT:
                break
            if choice == _CLEAR:
                click.echo(app.render(svc.reset()))
    finally:
        app.close()
