"""Form submission lifecycle.

The form starts in ``editing``. A submit attempt moves it to
``submitted`` (all checks passed) or ``submit_failed``; any later submit
re-evaluates from scratch. Reset always returns to ``editing``.

The result rows are not part of this lifecycle: they are derived from
the current field values whether or not submit was pressed.
"""

from __future__ import annotations

from enum import StrEnum


class FormStatus(StrEnum):
    """Submit status of the form."""

    EDITING = "editing"
    SUBMITTED = "submitted"
    SUBMIT_FAILED = "submit_failed"


FORM_TRANSITIONS: dict[str, list[str]] = {
    "editing": ["submitted", "submit_failed", "editing"],
    "submitted": ["submitted", "submit_failed", "editing"],
    "submit_failed": ["submitted", "submit_failed", "editing"],
}


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]],
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed


def status_after_submit(*, has_root_error: bool, has_field_errors: bool) -> str:
    """Compute the status a submit attempt lands in."""
    if has_root_error or has_field_errors:
        return str(FormStatus.SUBMIT_FAILED)
    return str(FormStatus.SUBMITTED)
