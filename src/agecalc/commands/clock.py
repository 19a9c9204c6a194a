"""Command: current time in the reference timezone."""

from __future__ import annotations

import queue
from typing import TYPE_CHECKING

import click

from agecalc.commands._base import AgeCommand

if TYPE_CHECKING:
    from agecalc.commands._context import AppContext
    from agecalc.infrastructure.clock import ClockReading


@click.command(
    cls=AgeCommand,
    examples="""\
  agecalc clock
  agecalc clock --ticks 5
  agecalc --json clock""",
)
@click.option(
    "--ticks",
    type=click.IntRange(min=0),
    default=0,
    help="Keep running for N refresh ticks after the first reading.",
)
@click.option(
    "--interval",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Refresh interval in seconds (default: clock.refresh_seconds).",
)
@click.pass_obj
def clock(app: AppContext, ticks: int, interval: float | None) -> None:
    """Print the current date and HH:MM, optionally refreshing."""
    from agecalc.services.clock import ClockService

    svc = ClockService(app.runtime)
    app.emit(svc.read())
    if not ticks:
        return

    readings: queue.Queue[ClockReading] = queue.Queue()
    app.runtime.start_ticker(readings.put, interval=interval)
    try:
        for _ in range(ticks):
            app.emit(svc.as_result(readings.get()))
    finally:
        app.close()
