"""Pure date arithmetic behind allowance, promotion and retirement reminders.

Every function here is deterministic: the caller passes "today" explicitly, so
results only depend on the arguments.

Days that do not exist in the target month roll over into the next one, as a
calendar counts them: an anniversary of February 29 falls on March 1 in common
years, and January 31 plus one month is March 3 (March 2 in leap years).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from .errors import DateComputationError

DEFAULT_PROMOTION_CYCLE_YEARS = 4


@dataclass(frozen=True)
class DueWindow:
    """Inclusive range of dates for which a reminder is issued."""

    start: date
    end: date

    def contains(self, value: date) -> bool:
        return is_date_within_range(value, self.start, self.end)


@dataclass(frozen=True)
class DueWindows:
    """Look-ahead windows for every entitlement kind on a given day."""

    today: date
    allowance: DueWindow
    promotion: DueWindow
    retirement: DueWindow


def parse_calendar_date(value: date | datetime | str | None, *, field: str = "date") -> date:
    """Return ``value`` as a :class:`date` or raise :class:`DateComputationError`."""

    if value is None:
        raise DateComputationError(f"{field} is missing")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError as exc:
            raise DateComputationError(f"{field} {value!r} is not a valid date") from exc
    raise DateComputationError(f"{field} has unsupported type {type(value).__name__}")


def _roll_over(month_start: date, day: int) -> date:
    # Day offsets past the month's end continue into the following month.
    return month_start + timedelta(days=day - 1)


def add_months(value: date, months: int) -> date:
    """Return ``value`` shifted by ``months`` calendar months."""

    return _roll_over(value.replace(day=1) + relativedelta(months=months), value.day)


def _anniversary(origin: date, year: int) -> date:
    return _roll_over(date(year, origin.month, 1), origin.day)


def next_allowance_date(hiring_date: date | datetime | str | None, today: date) -> date:
    """Return the next yearly allowance date on or after ``today``.

    A due date equal to ``today`` is still upcoming and is not rolled over.
    """

    hired = parse_calendar_date(hiring_date, field="hiring_date")
    candidate = _anniversary(hired, today.year)
    if candidate < today:
        candidate = _anniversary(hired, today.year + 1)
    return candidate


def next_promotion_date(
    hiring_date: date | datetime | str | None,
    today: date,
    *,
    cycle_years: int = DEFAULT_PROMOTION_CYCLE_YEARS,
) -> date:
    """Return the next promotion anniversary counted in ``cycle_years`` steps.

    Only the hiring date is considered; neither the current grade nor the
    last processed promotion shifts the cycle.
    """

    if cycle_years <= 0:
        raise DateComputationError("cycle_years must be positive")
    hired = parse_calendar_date(hiring_date, field="hiring_date")
    years_since_hiring = today.year - hired.year
    next_period = math.ceil((years_since_hiring + 1) / cycle_years) * cycle_years
    return _anniversary(hired, hired.year + next_period)


def next_retirement_date(retirement_date: date | datetime | str | None) -> date | None:
    """Return the stored retirement date, or ``None`` when none is recorded."""

    if retirement_date is None or retirement_date == "":
        return None
    return parse_calendar_date(retirement_date, field="retirement_date")


def is_date_within_range(value: date, start: date, end: date) -> bool:
    """Return ``True`` when ``start <= value <= end``."""

    return start <= value <= end


def build_due_windows(
    today: date,
    *,
    allowance_months: int = 1,
    promotion_months: int = 2,
    retirement_months: int = 3,
) -> DueWindows:
    """Compute the look-ahead windows that start on ``today``."""

    return DueWindows(
        today=today,
        allowance=DueWindow(today, add_months(today, allowance_months)),
        promotion=DueWindow(today, add_months(today, promotion_months)),
        retirement=DueWindow(today, add_months(today, retirement_months)),
    )


__all__ = [
    "DEFAULT_PROMOTION_CYCLE_YEARS",
    "DueWindow",
    "DueWindows",
    "add_months",
    "build_due_windows",
    "is_date_within_range",
    "next_allowance_date",
    "next_promotion_date",
    "next_retirement_date",
    "parse_calendar_date",
]
