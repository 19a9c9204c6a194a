"""Calendar arithmetic on plain year/month/day values.

Proleptic Gregorian rules for every non-negative year; no historical
calendar reform handling.

INVARIANT: A CalendarDate always names a day that exists. Construction
rejects day 31 in a 30-day month, February 29 in a common year, etc.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_DIGITS = re.compile(r"[0-9]+")

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


class InvalidDateError(ValueError):
    """Raised when year/month/day components do not name a real day."""


def parse_int(text: str | None) -> int | None:
    """Parse a non-empty run of ASCII digits, ignoring surrounding whitespace.

    Returns None for empty, signed, fractional or otherwise non-numeric
    input. Never raises.

    Examples:
        >>> parse_int("07")
        7
        >>> parse_int(" 12 ")
        12
        >>> parse_int("1e3") is None
        True
    """
    if text is None:
        return None
    stripped = text.strip()
    if not _DIGITS.fullmatch(stripped):
        return None
    return int(stripped)


def is_leap_year(year: int) -> bool:
    """Gregorian leap year: divisible by 4, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def max_days_in_month(month: int, year: int) -> int:
    """Number of days in *month* (1-12) of *year*."""
    if not 1 <= month <= 12:
        msg = f"Month out of range: {month}"
        raise ValueError(msg)
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


@dataclass(frozen=True, order=True)
class CalendarDate:
    """An immutable calendar day. Ordered by (year, month, day)."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if self.year < 0:
            raise InvalidDateError(f"Year out of range: {self.year}")
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"Month out of range: {self.month}")
        limit = max_days_in_month(self.month, self.year)
        if not 1 <= self.day <= limit:
            raise InvalidDateError(
                f"Day out of range: {self.day} (month {self.month} has {limit} days)"
            )

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @classmethod
    def from_parts(cls, day: str, month: str, year: str) -> CalendarDate | None:
        """Build a date from raw form strings.

        Returns None when any part is missing or non-numeric, or when the
        combination does not name a real day.
        """
        d = parse_int(day)
        m = parse_int(month)
        y = parse_int(year)
        if d is None or m is None or y is None:
            return None
        try:
            return cls(year=y, month=m, day=d)
        except InvalidDateError:
            return None


@dataclass(frozen=True)
class DateDifference:
    """Elapsed whole years, months and days between two calendar dates."""

    years: int
    months: int
    days: int

    def as_dict(self) -> dict[str, int]:
        return {"years": self.years, "months": self.months, "days": self.days}


def _previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def difference_ymd(from_: CalendarDate, to: CalendarDate) -> DateDifference:
    """Calendar-aware difference from *from_* to *to* (``from_ <= to``).

    Negative day deltas borrow the length of the month preceding *to*'s
    month; negative month deltas borrow a year. When the start day does
    not exist in the borrowed month (e.g. the 31st against February) it
    is clamped to that month's last day, so ``days`` never goes negative.

    Examples:
        >>> difference_ymd(CalendarDate(2000, 1, 31), CalendarDate(2000, 3, 1))
        DateDifference(years=0, months=1, days=1)
    """
    if from_ > to:
        msg = f"Start date {from_} is after end date {to}"
        raise ValueError(msg)

    years = to.year - from_.year
    months = to.month - from_.month
    days = to.day - from_.day

    if days < 0:
        prev_year, prev_month = _previous_month(to.year, to.month)
        borrowed = max_days_in_month(prev_month, prev_year)
        days = to.day + max(borrowed - from_.day, 0)
        months -= 1

    if months < 0:
        months += 12
        years -= 1

    return DateDifference(years=years, months=months, days=days)


def add_ymd(start: CalendarDate, years: int, months: int, days: int) -> CalendarDate:
    """Add a year/month/day offset to *start*.

    Years and months are applied first, clamping the day to the target
    month's length (Jan 31 + 1 month = Feb 28/29); days are then added
    one calendar day at a time. Offsets must be non-negative.
    """
    if years < 0 or months < 0 or days < 0:
        msg = f"Offsets must be non-negative: {years}y {months}m {days}d"
        raise ValueError(msg)

    total_months = start.month - 1 + months
    year = start.year + years + total_months // 12
    month = total_months % 12 + 1
    day = min(start.day, max_days_in_month(month, year))

    while days > 0:
        remaining = max_days_in_month(month, year) - day
        if days <= remaining:
            day += days
            break
        days -= remaining + 1
        day = 1
        if month == 12:
            year, month = year + 1, 1
        else:
            month += 1

    return CalendarDate(year=year, month=month, day=day)
