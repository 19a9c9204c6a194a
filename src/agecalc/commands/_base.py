"""Custom Click base classes with --examples support.

Provides AgeCommand and AgeGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
Also home to the shared form-field options used by ``calc`` and ``validate``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

from agecalc.domain.types import FormField

_F = TypeVar("_F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class AgeCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class AgeGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = AgeCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = AgeCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


_FIELD_HELP: dict[FormField, str] = {
    FormField.FIRST_NAME: "First name.",
    FormField.LAST_NAME: "Last name.",
    FormField.EMAIL: "Email address.",
    FormField.DAY: "Birth day (DD).",
    FormField.MONTH: "Birth month (MM).",
    FormField.YEAR: "Birth year (YYYY).",
}


def form_field_options(func: _F) -> _F:
    """Add one ``--<field>`` string option per form field.

    Values are passed through raw; validation happens in the service.
    """
    for name in reversed(FormField):
        flag = "--" + name.value.replace("_", "-")
        func = click.option(flag, name.value, default=None, help=_FIELD_HELP[name])(func)
    return func
