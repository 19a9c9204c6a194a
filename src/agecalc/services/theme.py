"""ThemeService — read, set and toggle the persisted colour theme."""

from __future__ import annotations

import structlog

from agecalc.domain.types import Theme
from agecalc.infrastructure.preferences import read_theme, write_theme
from agecalc.services.base import BaseService
from agecalc.services.result import ErrorCode, ServiceResult

log = structlog.get_logger(__name__)


class ThemeService(BaseService):
    """Theme preference, read at startup and written on every change."""

    def _current(self) -> Theme:
        return read_theme(
            self._runtime.preferences,
            default=self._runtime.settings.theme.default,
        )

    def _payload(self, theme: Theme, **extra: object) -> dict[str, object]:
        return {
            "theme": str(theme),
            "path": str(self._runtime.preferences.path),
            **extra,
        }

    def show(self) -> ServiceResult:
        return ServiceResult(ok=True, op="theme_show", data=self._payload(self._current()))

    def set(self, value: str) -> ServiceResult:
        try:
            theme = Theme(value)
        except ValueError:
            allowed = ", ".join(t.value for t in Theme)
            return self._failure(
                "theme_set",
                ErrorCode.INVALID_THEME,
                f"Unknown theme {value!r} (expected one of: {allowed})",
                value=value,
            )
        previous = self._current()
        write_theme(self._runtime.preferences, theme)
        log.debug("theme.set", previous=str(previous), theme=str(theme))
        return ServiceResult(
            ok=True,
            op="theme_set",
            data=self._payload(theme, previous=str(previous)),
        )

    def toggle(self) -> ServiceResult:
        previous = self._current()
        theme = previous.toggled()
        write_theme(self._runtime.preferences, theme)
        log.debug("theme.toggle", previous=str(previous), theme=str(theme))
        return ServiceResult(
            ok=True,
            op="theme_toggle",
            data=self._payload(theme, previous=str(previous)),
        )
