"""Form field names and theme values."""

from __future__ import annotations

from enum import StrEnum


class FormField(StrEnum):
    """Fields of the birth-date form, in display order."""

    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class Theme(StrEnum):
    """UI colour theme preference."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Theme:
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK
