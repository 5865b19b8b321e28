# pyorrery/calendar.py

"""
Terrax calendar: 13 months followed by a short remainder block.

A normal year has 10 short months (39 d), 3 long months (40 d) and 3
remainder days (513 d); every leap year drops one remainder day (512 d).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .bodies import CalendarDefinition, terrax_calendar

REMAINDER_MONTH = -1  # sentinel month id for the remainder block

_DEFAULT_CALENDAR = terrax_calendar()


@dataclass(frozen=True)
class CalendarDate:
    month: int  # 1-based month id, or REMAINDER_MONTH
    day_in_month: int  # 1-based
    is_remainder: bool = False


@dataclass(frozen=True)
class DeepDate:
    year: int  # 1-based
    day_of_year: int  # 1-based
    leap_year: bool
    date: CalendarDate


def _cal(calendar: CalendarDefinition | None) -> CalendarDefinition:
    return calendar if calendar is not None else _DEFAULT_CALENDAR


def days_in_year(leap_year: bool = False, calendar: CalendarDefinition | None = None) -> int:
    return _cal(calendar).total_days(leap_year)


def remainder_days(leap_year: bool = False, calendar: CalendarDefinition | None = None) -> int:
    return _cal(calendar).remainder(leap_year)


def date_from_day(day, leap_year: bool = False, calendar: CalendarDefinition | None = None) -> CalendarDate:
    """
    Maps a 1-based global day of year to (month, day-in-month).

    Fractional days are floored and days below 1 read as day 1. Days past the
    end of the year clamp to the last remainder day instead of raising.
    """
    cal = _cal(calendar)
    remaining = max(1, int(math.floor(day)))
    for month in cal.months:
        if remaining <= month.days:
            return CalendarDate(month=month.id, day_in_month=remaining)
        remaining -= month.days

    active = cal.remainder(leap_year)
    return CalendarDate(month=REMAINDER_MONTH, day_in_month=min(remaining, active), is_remainder=True)


def month_start_day(month_index: int, calendar: CalendarDefinition | None = None) -> int:
    """
    Global start offset of a month (0-based index): the sum of the previous
    months' lengths. The month's first day is month_start_day(i) + 1.
    """
    cal = _cal(calendar)
    if not 0 <= month_index <= len(cal.months):
        raise IndexError(f"month index {month_index} out of range")
    return sum(m.days for m in cal.months[:month_index])


def remainder_start_day(leap_year: bool = False, calendar: CalendarDefinition | None = None) -> int:
    """First global day of the remainder block."""
    cal = _cal(calendar)
    return cal.total_days(leap_year) - cal.remainder(leap_year) + 1


def is_leap_year(year: int, calendar: CalendarDefinition | None = None) -> bool:
    """Every leap_year_interval-th year (1-based) is a leap year."""
    return year > 0 and year % _cal(calendar).leap_year_interval == 0


def date_from_deep_day(deep_day, calendar: CalendarDefinition | None = None) -> DeepDate:
    """
    Decomposes a monotonic 1-based day count into year / day-of-year,
    honouring leap years. Used for the deep-time clock.
    """
    cal = _cal(calendar)
    remaining = max(1, int(math.floor(deep_day)))
    interval = cal.leap_year_interval
    normal = cal.total_days(False)
    leap = cal.total_days(True)

    # Skip whole leap cycles first so large day counts stay O(1)
    cycle_len = normal * (interval - 1) + leap
    cycles = (remaining - 1) // cycle_len
    remaining -= cycles * cycle_len
    year = cycles * interval + 1

    while True:
        leap_year = is_leap_year(year, cal)
        total = leap if leap_year else normal
        if remaining <= total:
            break
        remaining -= total
        year += 1

    return DeepDate(
        year=year,
        day_of_year=remaining,
        leap_year=leap_year,
        date=date_from_day(remaining, leap_year, cal),
    )
