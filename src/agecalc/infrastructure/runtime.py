"""Runtime — the single dependency injected into every service.

Owns the reference-timezone clock and the preference store, both built
from settings. Background refresh (the clock ticker) is started by
whoever needs it and must be stopped on teardown; :meth:`close` stops
any ticker created through :meth:`start_ticker`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from agecalc.infrastructure.clock import ClockReading, ClockSource, ClockTicker
from agecalc.infrastructure.preferences import PreferenceStore

if TYPE_CHECKING:
    from agecalc.config.settings import AgeSettings

logger = logging.getLogger(__name__)


class Runtime:
    """Clock, refresh ticker, and preference storage for one session."""

    def __init__(
        self,
        settings: AgeSettings,
        *,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self.settings = settings
        self.clock = ClockSource(settings.clock.timezone, now=now)
        self.preferences = PreferenceStore(settings.theme.state_dir)
        self._tickers: list[ClockTicker] = []

    def start_ticker(
        self,
        on_tick: Callable[[ClockReading], None],
        *,
        interval: float | None = None,
    ) -> ClockTicker:
        """Start refreshing the clock every *interval* (default ``clock.refresh_seconds``)."""
        seconds = interval if interval is not None else self.settings.clock.refresh_seconds
        ticker = ClockTicker(self.clock, on_tick, interval=seconds)
        ticker.start()
        self._tickers.append(ticker)
        logger.debug("Started clock ticker (%ss)", seconds)
        return ticker

    def close(self) -> None:
        """Stop every ticker started through this runtime."""
        while self._tickers:
            self._tickers.pop().stop()
