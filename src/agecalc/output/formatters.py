"""Adapt a ServiceResult to the requested output mode.

Humans get Rich output (tables, colors), scripts get ``--json``, and
``--quiet`` prints a single line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from agecalc.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from agecalc.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output-mode flags resolved from the global CLI options."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    dark: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the Rich renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, dark=settings.dark)
