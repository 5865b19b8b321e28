"""
Cooperative time driver for the simulation clock.

A single periodic tick measures elapsed real time, scales it by a speed
multiplier (simulated days per real second) and advances the two clocks:
- calendar clock: wraps at the end of the year, can be paused or scrubbed;
- deep-time clock: advances on every tick regardless of pause or wrap.

run() is a plain loop with one suspension point per tick (sleep); cancel()
stops it before the next tick. Every core computation is recomputed from the
clock values, so stopping mid-run leaves nothing to roll back.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from pyorrery import constants
from pyorrery.bodies import CalendarDefinition, terrax_calendar
from pyorrery.calendar import is_leap_year

from .state import SimulationClock

logger = logging.getLogger(__name__)


class TimeDriver:
    def __init__(
        self,
        clock: SimulationClock | None = None,
        *,
        speed_days_per_sec: float = 1.0,
        rotation_hours: float = constants.PLANET_ROTATION_HOURS,
        calendar: CalendarDefinition | None = None,
        time_source: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.clock = clock or SimulationClock()
        self.speed = float(speed_days_per_sec)
        self.rotation_hours = float(rotation_hours)
        self.calendar = calendar or terrax_calendar()
        self._time_source = time_source
        self._sleep = sleep
        self._last: float | None = None
        self._cancelled = False
        self.ticks = 0

    # --- clock queries ---

    @property
    def days_in_year(self) -> int:
        return self.calendar.total_days(self.clock.leap_year)

    # --- controls ---

    def pause(self) -> None:
        self.clock.paused = True

    def resume(self, now: float | None = None) -> SimulationClock:
        """
        Leave pause. The interval since the last tick is flushed while still
        paused, so it reaches the deep-time clock but not the calendar.
        """
        if self.clock.paused:
            self.tick(now)
        self.clock.paused = False
        return self.clock

    def set_speed(self, speed_days_per_sec: float) -> None:
        self.speed = float(speed_days_per_sec)

    def scrub(self, day: float) -> SimulationClock:
        """Jump the calendar clock to `day`, clamped to [1, days_in_year]. Deep time is untouched."""
        self.clock.calendar_day = min(max(float(day), 1.0), float(self.days_in_year))
        return self.clock

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    # --- advancing ---

    def advance(self, days: float) -> SimulationClock:
        """Advance both clocks by a simulated interval in local days."""
        if days <= 0.0:
            return self.clock
        clk = self.clock
        clk.deep_day += days
        if clk.paused:
            return clk

        clk.time_of_day_hours = (clk.time_of_day_hours + days * self.rotation_hours) % self.rotation_hours
        clk.calendar_day += days
        # Fractional days in [total, total + 1) still belong to the last day
        while clk.calendar_day >= self.days_in_year + 1:
            clk.calendar_day -= self.days_in_year
            clk.year += 1
            clk.leap_year = is_leap_year(clk.year, self.calendar)
            logger.debug("[Clock] year wrap -> year %d (leap=%s)", clk.year, clk.leap_year)
        return clk

    def tick(self, now: float | None = None) -> SimulationClock:
        """
        One frame: elapsed real seconds since the previous tick times speed.
        The first tick only establishes the time baseline.
        """
        now = self._time_source() if now is None else float(now)
        if self._last is None:
            self._last = now
            return self.clock
        elapsed = max(0.0, now - self._last)
        self._last = now
        self.ticks += 1
        return self.advance(elapsed * self.speed)

    def run(
        self,
        n_ticks: int | None = None,
        interval: float = 1.0 / 60.0,
        on_tick: Callable[[SimulationClock], None] | None = None,
    ) -> SimulationClock:
        """
        Cooperative loop: tick, notify, sleep. Stops after n_ticks or when
        cancel() is called (from on_tick or elsewhere).
        """
        self._cancelled = False
        count = 0
        self.tick()
        while not self._cancelled and (n_ticks is None or count < n_ticks):
            self._sleep(interval)
            if self._cancelled:
                break
            clk = self.tick()
            count += 1
            if on_tick is not None:
                on_tick(clk)
        logger.debug("[Clock] run stopped after %d ticks at day %.3f", count, self.clock.calendar_day)
        return self.clock
