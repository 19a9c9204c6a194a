"""FormService — owns the birth-date form and drives its lifecycle.

The service holds the raw field values, the per-field errors, the root
(submit-time) error and the submit status. Every event handler returns a
ServiceResult whose ``data`` is a fresh :class:`FormSnapshot` dump, so
front ends never read mutable state directly.

Event semantics:

- ``change``: store a value. Once the form has been submitted at least
  once, the changed field is revalidated immediately.
- ``blur``: validate one field and replace its error. Revalidating month
  or year also refreshes the day, whose limit depends on both.
- ``submit``: clear the root error, validate every field, then build the
  birth date and compare it with today's date in the reference zone.
- ``reset``: empty every field and clear all errors and submit state.
- ``update_clock``: a tick that crosses into a new year refreshes the
  year error.

The age result is derived from the current values on every snapshot,
independent of submit. The success sentence is only produced after a
successful submit.

INVARIANT: Handlers are serialized by one lock, so the clock ticker
thread never interleaves with a user event.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

from agecalc.domain import messages
from agecalc.domain.calendar import CalendarDate, DateDifference, difference_ymd
from agecalc.domain.lifecycle import (
    FORM_TRANSITIONS,
    FormStatus,
    is_valid_transition,
    status_after_submit,
)
from agecalc.domain.types import FormField
from agecalc.domain.validators import (
    FieldError,
    FormValues,
    ValidationContext,
    validate_field,
    validate_form,
)
from agecalc.services.base import BaseService
from agecalc.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from agecalc.infrastructure.clock import ClockReading
    from agecalc.infrastructure.runtime import Runtime

log = structlog.get_logger(__name__)


def full_name(values: FormValues) -> str:
    """Trimmed "first last", or the generic placeholder when both are blank."""
    name = f"{values.first_name.strip()} {values.last_name.strip()}".strip()
    return name or messages.PERSON_FALLBACK


@dataclass(frozen=True)
class FormSnapshot:
    """Immutable view of the form after an event."""

    values: FormValues
    errors: dict[str, str]
    root_error: ServiceError | None
    status: FormStatus
    submit_count: int
    birth_date: CalendarDate | None
    result: DateDifference | None
    full_name: str
    clock: ClockReading
    clock_label: str = ""

    @property
    def summary(self) -> str | None:
        if self.status != FormStatus.SUBMITTED or self.result is None:
            return None
        r = self.result
        return messages.summary(self.full_name, r.years, r.months, r.days)

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": str(self.status),
            "submit_count": self.submit_count,
            "values": self.values.model_dump(),
            "errors": dict(self.errors),
            "root_error": self.root_error.message if self.root_error else None,
            "birth_date": str(self.birth_date) if self.birth_date else None,
            "result": self.result.as_dict() if self.result else None,
            "full_name": self.full_name,
            "summary": self.summary,
            "clock": {"label": self.clock_label, **self.clock.as_dict()},
        }


class FormService(BaseService):
    """Stateful orchestrator for one form session."""

    def __init__(self, runtime: Runtime) -> None:
        super().__init__(runtime)
        self._lock = threading.RLock()
        self._values = FormValues()
        self._errors: dict[str, FieldError] = {}
        self._root_error: ServiceError | None = None
        self._status = FormStatus.EDITING
        self._submit_count = 0
        self._clock = runtime.clock.read()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def snapshot(self) -> FormSnapshot:
        with self._lock:
            birth = self._birth_date()
            today = self._clock.date
            result = None
            if birth is not None and birth <= today:
                result = difference_ymd(birth, today)
            return FormSnapshot(
                values=self._values,
                errors={name: err.message for name, err in self._errors.items()},
                root_error=self._root_error,
                status=self._status,
                submit_count=self._submit_count,
                birth_date=birth,
                result=result,
                full_name=full_name(self._values),
                clock=self._clock,
                clock_label=self._runtime.settings.clock.label,
            )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def change(self, field: str, value: str) -> ServiceResult:
        """Store a new raw value for *field*."""
        with self._lock:
            name = FormField(field)
            self._values = self._values.with_value(name, value)
            if self._submit_count:
                self._revalidate(name)
            return self._ok("change")

    def fill(self, **values: str | None) -> ServiceResult:
        """Set several fields at once; ``None`` leaves a field untouched."""
        with self._lock:
            for field, value in values.items():
                if value is not None:
                    self._values = self._values.with_value(FormField(field), value)
            if self._submit_count:
                for name in values:
                    self._revalidate(FormField(name))
            return self._ok("fill")

    def blur(self, field: str) -> ServiceResult:
        """Validate *field* as the user leaves it."""
        with self._lock:
            self._revalidate(FormField(field))
            return self._ok("blur")

    def validate(self) -> ServiceResult:
        """Validate every field without attempting a submit."""
        with self._lock:
            self._errors = validate_form(self._values, self._validation_context())
            if self._errors:
                return self._failure(
                    "validate",
                    ErrorCode.INVALID_FIELDS,
                    f"{len(self._errors)} field(s) invalid",
                    data=self.snapshot().as_dict(),
                    fields=sorted(self._errors),
                )
            return self._ok("validate")

    def submit(self) -> ServiceResult:
        """Attempt to submit the form."""
        with self._lock:
            self._root_error = None
            self._errors = validate_form(self._values, self._validation_context())

            birth = self._birth_date()
            if birth is None:
                self._root_error = ServiceError(
                    code=ErrorCode.INVALID_DATE,
                    message=messages.INVALID_DATE,
                )
            elif birth > self._clock.date:
                self._root_error = ServiceError(
                    code=ErrorCode.FUTURE_DATE,
                    message=messages.FUTURE_DATE,
                    detail={"birth_date": str(birth), "today": str(self._clock.date)},
                )

            self._transition(
                status_after_submit(
                    has_root_error=self._root_error is not None,
                    has_field_errors=bool(self._errors),
                )
            )
            self._submit_count += 1
            log.debug(
                "form.submit",
                status=str(self._status),
                field_errors=sorted(self._errors),
                root_error=self._root_error.code if self._root_error else None,
            )

            snapshot = self.snapshot().as_dict()
            if self._root_error is not None:
                return ServiceResult(ok=False, op="submit", data=snapshot, error=self._root_error)
            if self._errors:
                return self._failure(
                    "submit",
                    ErrorCode.INVALID_FIELDS,
                    f"{len(self._errors)} field(s) invalid",
                    data=snapshot,
                    fields=sorted(self._errors),
                )
            return ServiceResult(ok=True, op="submit", data=snapshot)

    def reset(self) -> ServiceResult:
        """Clear every field, error and the submit state."""
        with self._lock:
            self._values = FormValues()
            self._errors = {}
            self._root_error = None
            self._transition(FormStatus.EDITING)
            self._submit_count = 0
            log.debug("form.reset")
            return self._ok("reset")

    def update_clock(self, reading: ClockReading) -> ServiceResult:
        """Replace the current clock reading (called on every refresh tick)."""
        with self._lock:
            year_changed = reading.date.year != self._clock.date.year
            self._clock = reading
            if year_changed and (self._submit_count or str(FormField.YEAR) in self._errors):
                self._revalidate(FormField.YEAR)
            return self._ok("clock_tick")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ok(self, op: str) -> ServiceResult:
        return ServiceResult(ok=True, op=op, data=self.snapshot().as_dict())

    def _validation_context(self) -> ValidationContext:
        return ValidationContext(
            current_year=self._clock.date.year,
            min_year=self._runtime.settings.form.min_year,
        )

    def _revalidate(self, name: FormField) -> None:
        error = validate_field(name, self._values, self._validation_context())
        if error is None:
            self._errors.pop(str(name), None)
        else:
            self._errors[str(name)] = error
        # The day limit depends on month and year.
        if name in (FormField.MONTH, FormField.YEAR) and (
            self._submit_count or str(FormField.DAY) in self._errors
        ):
            self._revalidate(FormField.DAY)

    def _birth_date(self) -> CalendarDate | None:
        v = self._values
        return CalendarDate.from_parts(v.day, v.month, v.year)

    def _transition(self, target: str) -> None:
        if not is_valid_transition(str(self._status), str(target), FORM_TRANSITIONS):
            msg = f"Invalid form transition: {self._status} -> {target}"
            raise RuntimeError(msg)
        self._status = FormStatus(target)
