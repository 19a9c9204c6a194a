"""Test helpers shared across test modules."""

from __future__ import annotations

from datetime import UTC, datetime

from agecalc.services.form import FormService

# 2024-05-15 12:30 in São Paulo (UTC-3).
FIXED_NOW = datetime(2024, 5, 15, 15, 30, 42, tzinfo=UTC)


def fill_valid(form: FormService, **overrides: str) -> None:
    """Fill the form with a valid person born 1990-05-15, plus *overrides*."""
    values = {
        "first_name": "Ana",
        "last_name": "Souza",
        "email": "ana@mail.com",
        "day": "15",
        "month": "5",
        "year": "1990",
    }
    values.update(overrides)
    form.fill(**values)
