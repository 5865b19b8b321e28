from __future__ import annotations

from dataclasses import dataclass

from pyorrery import constants
from pyorrery.calendar import is_leap_year


@dataclass
class SimulationClock:
    """
    Externally driven simulation time.

    calendar_day wraps at the end of the year and may be paused or scrubbed;
    deep_day only ever increases, for bodies whose motion must stay continuous
    across calendar wraps and pauses. Only the TimeDriver mutates a clock.
    """

    calendar_day: float = 1.0  # [1, days_in_year]
    deep_day: float = 0.0  # monotonic
    time_of_day_hours: float = 0.0  # [0, rotation_hours)
    year: int = 1
    paused: bool = False
    leap_year: bool = False

    def copy(self) -> SimulationClock:
        return SimulationClock(
            calendar_day=self.calendar_day,
            deep_day=self.deep_day,
            time_of_day_hours=self.time_of_day_hours,
            year=self.year,
            paused=self.paused,
            leap_year=self.leap_year,
        )

    @property
    def whole_day(self) -> int:
        return int(self.calendar_day)


def clock_at(day: float, *, deep_day: float | None = None, year: int = 1,
             time_of_day_hours: float = 0.0) -> SimulationClock:
    """Construct a clock positioned at a calendar day (deep time defaults to the same day)."""
    return SimulationClock(
        calendar_day=float(day),
        deep_day=float(day if deep_day is None else deep_day),
        time_of_day_hours=float(time_of_day_hours) % constants.PLANET_ROTATION_HOURS,
        year=year,
        leap_year=is_leap_year(year),
    )
