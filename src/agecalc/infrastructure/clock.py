"""Wall clock in the reference timezone, plus the periodic refresh task.

Readings are derived by converting the current UTC instant with
:mod:`zoneinfo`, so DST transitions need no manual offset arithmetic.
Seconds and sub-second precision are discarded.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any
from zoneinfo import ZoneInfo

from agecalc.domain.calendar import CalendarDate

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "America/Sao_Paulo"
DEFAULT_REFRESH_SECONDS = 60.0


@dataclass(frozen=True)
class ClockReading:
    """Current date and HH:MM in the reference timezone."""

    date: CalendarDate
    hour: int
    minute: int
    timezone: str = DEFAULT_TIMEZONE

    @property
    def hhmm(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def as_dict(self) -> dict[str, Any]:
        return {
            "date": str(self.date),
            "hour": self.hour,
            "minute": self.minute,
            "time": self.hhmm,
            "timezone": self.timezone,
        }


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ClockSource:
    """Produces a fresh :class:`ClockReading` on every call.

    Parameters:
        timezone: IANA zone name for the reading's local fields.
        now: Returns the current aware instant. Defaults to UTC wall time.
    """

    def __init__(
        self,
        timezone: str = DEFAULT_TIMEZONE,
        *,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self.timezone = timezone
        self._zone = ZoneInfo(timezone)
        self._now = now

    def read(self) -> ClockReading:
        instant = self._now() if self._now is not None else _utc_now()
        local = instant.astimezone(self._zone)
        return ClockReading(
            date=CalendarDate(year=local.year, month=local.month, day=local.day),
            hour=local.hour,
            minute=local.minute,
            timezone=self.timezone,
        )


class RepeatingTask:
    """Run *callback* every *interval* seconds on one daemon thread.

    Ticks run sequentially, so a slow callback delays the next tick
    instead of overlapping it. Once :meth:`stop` returns, the callback
    never fires again.
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[], None],
        *,
        name: str = "agecalc-repeating-task",
    ) -> None:
        if interval <= 0:
            msg = f"Interval must be positive: {interval}"
            raise ValueError(msg)
        self._interval = interval
        self._callback = callback
        self._name = name
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and not self._stopped.is_set()

    def start(self) -> None:
        if self._thread is not None:
            msg = "RepeatingTask already started"
            raise RuntimeError(msg)
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Cancel future ticks and wait for an in-flight tick to finish."""
        self._stopped.set()
        thread = self._thread
        # A tick may call stop() on itself; the loop exits after it returns.
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def _run(self) -> None:
        while not self._stopped.wait(self._interval):
            try:
                self._callback()
            except Exception:
                logger.exception("Repeating task %s tick failed", self._name)

    def __enter__(self) -> RepeatingTask:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


class ClockTicker:
    """Publish a fresh clock reading to *on_tick* on every refresh."""

    def __init__(
        self,
        source: ClockSource,
        on_tick: Callable[[ClockReading], None],
        *,
        interval: float = DEFAULT_REFRESH_SECONDS,
    ) -> None:
        self._source = source
        self._on_tick = on_tick
        self._task = RepeatingTask(interval, self._tick, name="agecalc-clock")

    def _tick(self) -> None:
        reading = self._source.read()
        logger.debug("Clock tick %s %s", reading.date, reading.hhmm)
        self._on_tick(reading)

    def start(self) -> None:
        self._task.start()

    def stop(self) -> None:
        self._task.stop()

    def __enter__(self) -> ClockTicker:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
