"""ClockService — the current time in the reference timezone."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agecalc.services.base import BaseService
from agecalc.services.result import ServiceResult

if TYPE_CHECKING:
    from agecalc.infrastructure.clock import ClockReading


class ClockService(BaseService):
    def read(self) -> ServiceResult:
        """Take a fresh reading from the runtime clock."""
        return self.as_result(self._runtime.clock.read())

    def as_result(self, reading: ClockReading) -> ServiceResult:
        """Wrap an existing reading (e.g. one published by a ticker)."""
        return ServiceResult(
            ok=True,
            op="clock",
            data={"label": self._runtime.settings.clock.label, **reading.as_dict()},
        )
