"""BaseService — foundation for all agecalc services.

Every service receives a :class:`Runtime` at construction time. The
runtime provides the reference-timezone clock, the preference store and
the settings the session was started with.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from agecalc.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from agecalc.infrastructure.runtime import Runtime


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ThemeService(BaseService):
            def show(self) -> ServiceResult:
                theme = read_theme(self._runtime.preferences)
                ...
    """

    def __init__(self, runtime: Runtime) -> None:
        self._runtime = runtime

    @staticmethod
    def _failure(
        op: str,
        code: str,
        message: str,
        *,
        data: dict[str, object] | None = None,
        **detail: object,
    ) -> ServiceResult:
        """Build a failed ServiceResult with a structured error."""
        return ServiceResult(
            ok=False,
            op=op,
            data=data or {},
            error=ServiceError(code=code, message=message, detail=detail),
        )
