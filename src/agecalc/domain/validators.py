"""Field-level validation rules for the birth-date form.

Each field has an ordered rule list; the first failing rule wins and its
message becomes the field's error. Rules receive the whole
:class:`FormValues` so the day rule can consult month and year.

INVARIANT: Validation only classifies values. It never mutates them.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel

from agecalc.domain import messages
from agecalc.domain.calendar import max_days_in_month, parse_int
from agecalc.domain.types import FormField

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
DAY_MONTH_PATTERN = re.compile(r"[0-9]{1,2}")
YEAR_PATTERN = re.compile(r"[0-9]{4}")

MIN_NAME_LENGTH = 2
DEFAULT_MIN_YEAR = 1900


class FormValues(BaseModel):
    """Raw field values as typed by the user."""

    model_config = {"frozen": True}

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    day: str = ""
    month: str = ""
    year: str = ""

    def get(self, field: str) -> str:
        return str(getattr(self, FormField(field).value))

    def with_value(self, field: str, value: str) -> FormValues:
        return self.model_copy(update={FormField(field).value: value})


@dataclass(frozen=True)
class FieldError:
    """A validation failure attached to exactly one field."""

    field: str
    message: str


@dataclass(frozen=True)
class ValidationContext:
    """Inputs to the rules that do not come from the form itself."""

    current_year: int
    min_year: int = DEFAULT_MIN_YEAR


Rule = Callable[[FormValues, ValidationContext], str | None]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _name_rule(field: FormField) -> Rule:
    def check(values: FormValues, _ctx: ValidationContext) -> str | None:
        trimmed = values.get(field).strip()
        if not trimmed:
            return messages.REQUIRED[field]
        if len(trimmed) < MIN_NAME_LENGTH:
            return messages.MIN_NAME_LENGTH
        return None

    return check


def _email_rule(values: FormValues, _ctx: ValidationContext) -> str | None:
    if not values.email.strip():
        return messages.REQUIRED[FormField.EMAIL]
    if not EMAIL_PATTERN.fullmatch(values.email):
        return messages.INVALID_EMAIL
    return None


def _day_rule(values: FormValues, _ctx: ValidationContext) -> str | None:
    raw = values.day
    if not raw.strip():
        return messages.REQUIRED[FormField.DAY]
    if not DAY_MONTH_PATTERN.fullmatch(raw):
        return messages.DIGITS_ONLY
    day = int(raw)
    if not 1 <= day <= 31:
        return messages.INVALID_DAY
    month = parse_int(values.month)
    year = parse_int(values.year)
    if month is not None and year is not None and 1 <= month <= 12:
        limit = max_days_in_month(month, year)
        if day > limit:
            return messages.max_days(limit)
    return None


def _month_rule(values: FormValues, _ctx: ValidationContext) -> str | None:
    raw = values.month
    if not raw.strip():
        return messages.REQUIRED[FormField.MONTH]
    if not DAY_MONTH_PATTERN.fullmatch(raw):
        return messages.DIGITS_ONLY
    if not 1 <= int(raw) <= 12:
        return messages.INVALID_MONTH
    return None


def _year_rule(values: FormValues, ctx: ValidationContext) -> str | None:
    raw = values.year
    if not raw.strip():
        return messages.REQUIRED[FormField.YEAR]
    if not YEAR_PATTERN.fullmatch(raw):
        return messages.FOUR_DIGIT_YEAR
    year = int(raw)
    if year < ctx.min_year:
        return messages.YEAR_TOO_OLD
    if year > ctx.current_year:
        return messages.FUTURE_YEAR
    return None


FIELD_RULES: dict[str, Rule] = {
    FormField.FIRST_NAME: _name_rule(FormField.FIRST_NAME),
    FormField.LAST_NAME: _name_rule(FormField.LAST_NAME),
    FormField.EMAIL: _email_rule,
    FormField.DAY: _day_rule,
    FormField.MONTH: _month_rule,
    FormField.YEAR: _year_rule,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_field(
    field: str,
    values: FormValues,
    ctx: ValidationContext,
) -> FieldError | None:
    """Run the rule for one field. Returns None when the value is valid."""
    name = FormField(field)
    message = FIELD_RULES[name](values, ctx)
    if message is None:
        return None
    return FieldError(field=str(name), message=message)


def validate_form(values: FormValues, ctx: ValidationContext) -> dict[str, FieldError]:
    """Validate every field independently, keyed by field name."""
    errors: dict[str, FieldError] = {}
    for name in FormField:
        error = validate_field(name, values, ctx)
        if error is not None:
            errors[str(name)] = error
    return errors
