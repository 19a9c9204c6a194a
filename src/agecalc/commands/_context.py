"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Runtime initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agecalc.domain.types import Theme
from agecalc.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from agecalc.config.settings import AgeSettings
    from agecalc.infrastructure.runtime import Runtime
    from agecalc.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The runtime is lazily
    initialized on first use so ``--help`` and ``--version`` never touch
    the clock or the preference file.
    """

    def __init__(self, settings: AgeSettings) -> None:
        self.settings = settings
        self._runtime: Runtime | None = None

        from agecalc.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def runtime(self) -> Runtime:
        """The runtime instance (created lazily on first access)."""
        if self._runtime is None:
            from agecalc.infrastructure.runtime import Runtime

            self._runtime = Runtime(self.settings)
        return self._runtime

    def close(self) -> None:
        """Stop background work started through the runtime."""
        if self._runtime is not None:
            self._runtime.close()

    def _output_settings(self) -> OutputSettings:
        dark = False
        if not (self.settings.json_output or self.settings.quiet):
            from agecalc.infrastructure.preferences import read_theme

            theme = read_theme(self.runtime.preferences, default=self.settings.theme.default)
            dark = theme is Theme.DARK
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            dark=dark,
        )

    def render(self, result: ServiceResult) -> str:
        """Format a ServiceResult without any exit semantics."""
        return format_result(result, settings=self._output_settings())

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = self.render(result)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
