"""
Terrax world façade: configuration, clock ownership and per-frame snapshots.

TerraxWorld wires the pure core (orbital, calendar, seasons, solar, moons,
tides, observation) to an explicit SimulationClock owned by a TimeDriver.
The core never stores time; snapshot() recomputes everything from the clock.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from pyorrery import constants
from pyorrery.bodies import TerraxSystem, default_system
from pyorrery.calendar import date_from_day
from pyorrery.moons import PhaseModel, moon_phase
from pyorrery.observation import observe_neighbors
from pyorrery.orbital import OrbitalSystem, OrbitModel
from pyorrery.seasons import classify_season
from pyorrery.solar import solar_elevation, solar_state
from pyorrery.tides import next_resonance_day, tide_magnitude

from .driver import TimeDriver
from .ports import BodyPosition, HomeReadout, MoonReadout, NeighborReadout, Snapshot
from .state import SimulationClock, clock_at

logger = logging.getLogger(__name__)


# ---------------------------
# Configuration
# ---------------------------


@dataclass(frozen=True)
class SimConfig:
    """Simulation configuration (env-driven)."""

    start_day: float = 1.0
    speed_days_per_sec: float = 1.0
    tick_seconds: float = 1.0 / 60.0
    latitude_deg: float = 0.0
    leap_year: bool = False
    orbit_model: OrbitModel = OrbitModel.KEPLERIAN
    phase_model: PhaseModel = PhaseModel.TRUE_ANOMALY
    plot_dir: str = "output/plots"
    almanac_nc: str = "output/almanac.nc"

    @classmethod
    def from_env(cls) -> SimConfig:
        def _ibool(name: str, default: str = "1") -> bool:
            try:
                return int(os.getenv(name, default)) == 1
            except Exception:
                return default == "1"

        def _float(name: str, default: str) -> float:
            try:
                return float(os.getenv(name, default))
            except Exception:
                return float(default)

        lat = min(max(_float("TX_LATITUDE_DEG", "0"), -90.0), 90.0)
        return cls(
            start_day=max(1.0, _float("TX_START_DAY", "1")),
            speed_days_per_sec=_float("TX_SPEED_DAYS_PER_SEC", "1"),
            tick_seconds=max(1e-3, _float("TX_TICK_SECONDS", str(1.0 / 60.0))),
            latitude_deg=lat,
            leap_year=_ibool("TX_LEAP_YEAR", "0"),
            orbit_model=OrbitModel.parse(os.getenv("TX_ORBIT_MODEL", "keplerian")),
            phase_model=PhaseModel.parse(os.getenv("TX_PHASE_MODEL", "true_anomaly")),
            plot_dir=os.getenv("TX_PLOT_DIR", "output/plots"),
            almanac_nc=os.getenv("TX_ALMANAC_NC", "output/almanac.nc"),
        )


# ----------------
# Terrax World
# ----------------


class TerraxWorld:
    """
    Façade over the orrery core.
    - Supports DI via constructor keyword args (system, clock, driver).
    - create_default() assembles from env + the Terrax reference data.
    """

    def __init__(
        self,
        config: SimConfig,
        system: TerraxSystem | None = None,
        *,
        clock: SimulationClock | None = None,
        driver: TimeDriver | None = None,
    ) -> None:
        self.config = config
        self.system = system or default_system()
        self.orbital = OrbitalSystem(self.system, model=config.orbit_model)
        if driver is None:
            if clock is not None:
                clk = clock.copy()
            else:
                # Leap-year runs start in the first leap year of the cycle
                year = self.system.calendar.leap_year_interval if config.leap_year else 1
                clk = clock_at(config.start_day, year=year)
            driver = TimeDriver(
                clk,
                speed_days_per_sec=config.speed_days_per_sec,
                rotation_hours=self.system.planet.rotation_period_hours,
                calendar=self.system.calendar,
            )
        self.driver = driver

    @property
    def clock(self) -> SimulationClock:
        return self.driver.clock

    @classmethod
    def create_default(cls) -> TerraxWorld:
        return cls(SimConfig.from_env())

    def local_to_earth_days(self, local_days: float) -> float:
        planet = self.system.planet
        return local_days * planet.rotation_period_hours / constants.EARTH_DAY_HOURS

    def step(self) -> SimulationClock:
        """Advance the clocks by one tick interval (tick_seconds * speed)."""
        return self.driver.advance(self.config.tick_seconds * self.driver.speed)

    def snapshot(self, clock: SimulationClock | None = None) -> Snapshot:
        """
        Everything the renderer needs for one frame.

        Calendar, season and solar geometry follow the calendar clock; body
        positions, moon phases and tides follow the deep-time clock so they
        stay continuous across year wraps and pauses.
        """
        clk = clock or self.clock
        sys_ = self.system
        planet = sys_.planet
        day = clk.calendar_day
        deep = clk.deep_day
        total = sys_.calendar.total_days(clk.leap_year)

        date = date_from_day(day, clk.leap_year, sys_.calendar)
        sol = solar_state(day, self.config.latitude_deg, planet)
        elevation = solar_elevation(
            day,
            clk.time_of_day_hours,
            self.config.latitude_deg,
            planet.axial_tilt_deg,
            planet.rotation_period_hours,
            year_length=planet.orbital_period_local_days,
            e=planet.orbital_eccentricity,
            periapsis_deg=planet.periapsis_longitude_deg,
        )
        p1 = sys_.moons[0].orbital_period_days
        p2 = sys_.moons[1].orbital_period_days if len(sys_.moons) > 1 else p1
        home = HomeReadout(
            day=day,
            month=date.month,
            day_in_month=date.day_in_month,
            is_remainder=date.is_remainder,
            leap_year=clk.leap_year,
            season=classify_season(day, total).value,
            declination_deg=sol.declination_deg,
            daylight_hours=sol.daylight_hours,
            solar_elevation_deg=float(elevation),
            tide=tide_magnitude(deep, p1, p2),
            next_resonance_day=next_resonance_day(deep),
        )

        earth_days = self.local_to_earth_days(deep)
        bodies = []
        st = self.orbital.planet_state(earth_days)
        bodies.append(BodyPosition(planet.name, float(st.x), float(st.y), "star", self.orbital.ellipse(planet)))
        for nb in sys_.neighbors:
            st = self.orbital.neighbor_state(nb, earth_days)
            bodies.append(BodyPosition(nb.name, float(st.x), float(st.y), "star", self.orbital.ellipse(nb)))

        moons = []
        for moon in sys_.moons:
            st = self.orbital.moon_state(moon, deep)
            bodies.append(BodyPosition(moon.name, float(st.x), float(st.y), "planet", self.orbital.ellipse(moon)))
            ph = moon_phase(moon, deep, self.config.phase_model)
            moons.append(
                MoonReadout(
                    name=moon.name,
                    phase=ph.phase,
                    illumination_pct=ph.illumination_pct,
                    phase_name=ph.phase_name,
                    x=float(st.x),
                    y=float(st.y),
                )
            )

        observations = observe_neighbors(earth_days, sys_, self.config.orbit_model)
        neighbors = [
            NeighborReadout(
                name=obs.name,
                distance_au=obs.distance_au,
                illumination_pct=obs.illumination_pct,
                brightness_rank=rank,
                status=obs.status.value,
            )
            for rank, obs in enumerate(observations, start=1)
        ]

        return Snapshot(
            calendar_day=day,
            deep_day=deep,
            time_of_day_hours=clk.time_of_day_hours,
            year=clk.year,
            home=home,
            bodies=bodies,
            moons=moons,
            neighbors=neighbors,
        )

    def run(self, n_ticks: int | None = None, on_frame=None) -> SimulationClock:
        """Drive the clock in real time, emitting a snapshot per tick to on_frame."""

        def _frame(clk: SimulationClock) -> None:
            if on_frame is not None:
                on_frame(self.snapshot(clk))

        logger.info("[World] running %s ticks at %.3f d/s", n_ticks, self.driver.speed)
        return self.driver.run(n_ticks=n_ticks, interval=self.config.tick_seconds, on_tick=_frame)


__all__ = [
    "SimConfig",
    "SimulationClock",
    "TerraxWorld",
    "TimeDriver",
]
