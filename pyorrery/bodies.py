"""
Static reference data for the Terrax system.

Bodies, orbital elements and the calendar definition are frozen dataclasses:
they are assembled once by default_system() and never mutated by the core.
Configuration invariants (e < 1, period > 0, calendar totals) are checked at
construction so that the numeric functions downstream can stay unguarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from . import constants as const


# ---------------------------
# Orbital elements
# ---------------------------


@dataclass(frozen=True)
class OrbitalElements:
    """Keplerian elements; units of semi_major_axis are consistent per body class."""

    semi_major_axis: float
    period: float  # days
    eccentricity: float = 0.0
    periapsis_argument_deg: float = 0.0

    def __post_init__(self) -> None:
        if not (0.0 <= self.eccentricity < 1.0):
            raise ValueError(f"eccentricity must be in [0, 1), got {self.eccentricity}")
        if not self.period > 0.0:
            raise ValueError(f"period must be positive, got {self.period}")
        if not self.semi_major_axis > 0.0:
            raise ValueError(f"semi_major_axis must be positive, got {self.semi_major_axis}")


# ---------------------------
# Bodies
# ---------------------------


@dataclass(frozen=True)
class CelestialBody:
    name: str
    radius_km: float
    albedo: float  # 0..1 reflectivity
    color: str = "#ffffff"
    mass_kg: float | None = None


@dataclass(frozen=True)
class Star(CelestialBody):
    spectral_type: str = "G"
    temperature_k: float = 5778.0
    age_gyr: float = 4.6
    luminosity: float = 1.0  # relative to Sol


@dataclass(frozen=True)
class Atmosphere:
    pressure_atm: float
    composition: tuple[tuple[str, float], ...] = ()  # (gas, percent)


@dataclass(frozen=True)
class Planet(CelestialBody):
    """Home planet configuration. Declination and day length are derived, never stored."""

    semi_major_axis_au: float = 1.0
    rotation_period_hours: float = 24.0
    orbital_period_local_days: float = 365.25
    axial_tilt_deg: float = 0.0
    gravity_g: float = 1.0
    atmosphere: Atmosphere | None = None
    orbital_eccentricity: float = 0.0
    periapsis_longitude_deg: float = 0.0

    @property
    def orbital_period_earth_days(self) -> float:
        """Year length in Earth days (local days scaled by the rotation period)."""
        return self.orbital_period_local_days * (self.rotation_period_hours / const.EARTH_DAY_HOURS)

    @property
    def elements(self) -> OrbitalElements:
        return OrbitalElements(
            semi_major_axis=self.semi_major_axis_au,
            period=self.orbital_period_earth_days,
            eccentricity=self.orbital_eccentricity,
            periapsis_argument_deg=self.periapsis_longitude_deg,
        )


@dataclass(frozen=True)
class Moon(CelestialBody):
    semi_major_axis_km: float = 1.0
    orbital_period_days: float = 1.0  # synodic
    eccentricity: float = 0.0
    periapsis_argument_deg: float = 0.0
    radius_relative: float = 1.0  # relative to Luna
    is_locked: bool = True

    @property
    def elements(self) -> OrbitalElements:
        return OrbitalElements(
            semi_major_axis=self.semi_major_axis_km,
            period=self.orbital_period_days,
            eccentricity=self.eccentricity,
            periapsis_argument_deg=self.periapsis_argument_deg,
        )


@dataclass(frozen=True)
class NeighborPlanet(CelestialBody):
    semi_major_axis_au: float = 1.0
    orbital_period_days: float = 365.25  # Earth days
    kind: str = "Rocky"  # Rocky | Gas Giant | Ice Giant
    eccentricity: float = 0.0
    periapsis_argument_deg: float = 0.0

    @property
    def short_name(self) -> str:
        return self.name.split(" ")[0]

    @property
    def elements(self) -> OrbitalElements:
        return OrbitalElements(
            semi_major_axis=self.semi_major_axis_au,
            period=self.orbital_period_days,
            eccentricity=self.eccentricity,
            periapsis_argument_deg=self.periapsis_argument_deg,
        )


# ---------------------------
# Calendar
# ---------------------------


@dataclass(frozen=True)
class CalendarMonth:
    id: int  # 1-based
    name: str
    days: int
    is_long: bool = False


@dataclass(frozen=True)
class CalendarDefinition:
    months: tuple[CalendarMonth, ...]
    remainder_days: int = const.REMAINDER_DAYS
    leap_remainder_days: int = const.LEAP_REMAINDER_DAYS
    leap_year_interval: int = const.LEAP_YEAR_INTERVAL

    def __post_init__(self) -> None:
        if not self.months:
            raise ValueError("calendar needs at least one month")
        if self.remainder_days < 0 or self.leap_remainder_days < 0:
            raise ValueError("remainder day counts must be non-negative")
        if self.leap_year_interval <= 0:
            raise ValueError("leap_year_interval must be positive")

    @property
    def month_days_total(self) -> int:
        return sum(m.days for m in self.months)

    def remainder(self, leap_year: bool = False) -> int:
        return self.leap_remainder_days if leap_year else self.remainder_days

    def total_days(self, leap_year: bool = False) -> int:
        return self.month_days_total + self.remainder(leap_year)


def terrax_calendar() -> CalendarDefinition:
    """13 months (4, 8 and 13 are long), then the remainder block."""
    months = []
    for num in range(1, const.CALENDAR_MONTHS + 1):
        is_long = num in const.LONG_MONTHS
        months.append(
            CalendarMonth(
                id=num,
                name=f"Month {num}",
                days=const.LONG_MONTH_DAYS if is_long else const.SHORT_MONTH_DAYS,
                is_long=is_long,
            )
        )
    cal = CalendarDefinition(months=tuple(months))
    if cal.total_days(False) != const.DAYS_PER_YEAR or cal.total_days(True) != const.DAYS_PER_LEAP_YEAR:
        raise ValueError(
            f"calendar totals {cal.total_days(False)}/{cal.total_days(True)} do not match "
            f"{const.DAYS_PER_YEAR}/{const.DAYS_PER_LEAP_YEAR}"
        )
    return cal


# ---------------------------
# System aggregate
# ---------------------------


@dataclass(frozen=True)
class TerraxSystem:
    star: Star
    planet: Planet
    moons: tuple[Moon, ...]
    neighbors: tuple[NeighborPlanet, ...]
    calendar: CalendarDefinition = field(default_factory=terrax_calendar)

    def moon(self, name: str) -> Moon:
        for m in self.moons:
            if m.name == name:
                return m
        raise KeyError(name)


def default_system() -> TerraxSystem:
    """Assemble the canonical Terrax reference data."""
    star = Star(
        name="Sol (Host)",
        radius_km=const.STAR_RADIUS_KM,
        albedo=0.0,  # stars emit light
        color="#fff4ea",
        mass_kg=const.STAR_MASS,
        spectral_type="G0.7V",
        temperature_k=const.STAR_TEMPERATURE_K,
        age_gyr=const.STAR_AGE_GYR,
        luminosity=const.STAR_LUMINOSITY,
    )
    planet = Planet(
        name="Terrax",
        radius_km=const.PLANET_RADIUS_KM,
        albedo=const.PLANET_ALBEDO,
        color="#45a29e",
        mass_kg=const.PLANET_MASS,
        semi_major_axis_au=const.PLANET_A_AU,
        rotation_period_hours=const.PLANET_ROTATION_HOURS,
        orbital_period_local_days=const.PLANET_YEAR_LOCAL_DAYS,
        axial_tilt_deg=const.PLANET_AXIAL_TILT,
        gravity_g=const.PLANET_GRAVITY_G,
        atmosphere=Atmosphere(
            pressure_atm=const.PLANET_PRESSURE_ATM,
            composition=(("N2", 76.97), ("O2", 22.0), ("Ar", 0.93), ("CO2", 0.1)),
        ),
        orbital_eccentricity=const.PLANET_ECCENTRICITY,
        periapsis_longitude_deg=const.PLANET_PERIAPSIS_LONGITUDE,
    )
    moons = (
        Moon(
            name="Luna",
            radius_km=2415.20,
            albedo=0.12,
            color="#e0e0e0",
            mass_kg=2.205e23,
            semi_major_axis_km=const.LUNA_A_KM,
            orbital_period_days=const.LUNA_PERIOD_DAYS,
            eccentricity=const.LUNA_ECCENTRICITY,
            periapsis_argument_deg=const.LUNA_PERIAPSIS_ARG,
            radius_relative=1.0,
        ),
        Moon(
            name="Echo",
            radius_km=888.18,
            albedo=0.09,
            color="#a3a3a3",
            mass_kg=9.555e21,
            semi_major_axis_km=const.ECHO_A_KM,
            orbital_period_days=const.ECHO_PERIOD_DAYS,
            eccentricity=const.ECHO_ECCENTRICITY,
            periapsis_argument_deg=const.ECHO_PERIAPSIS_ARG,
            radius_relative=0.24,
        ),
    )
    neighbors = (
        NeighborPlanet("Pyroeis (Mercury-A)", 2439.0, 0.148, "#a1a1aa",
                       semi_major_axis_au=0.39, orbital_period_days=88.0, kind="Rocky"),
        NeighborPlanet("Cytherea (Venus-A)", 6051.0, 0.631, "#fbbf24",
                       semi_major_axis_au=0.72, orbital_period_days=225.0, kind="Rocky"),
        # Terrax sits here at 1.34 AU
        NeighborPlanet("Areus (Mars-A)", 3389.0, 0.158, "#ef4444",
                       semi_major_axis_au=1.88, orbital_period_days=687.0, kind="Rocky"),
        NeighborPlanet("Jove (Jupiter-A)", 69911.0, 0.487, "#d97706",
                       semi_major_axis_au=5.2, orbital_period_days=4333.0, kind="Gas Giant"),
        NeighborPlanet("Saturnus (Saturn-A)", 58232.0, 0.521, "#fde047",
                       semi_major_axis_au=9.5, orbital_period_days=10759.0, kind="Gas Giant"),
        NeighborPlanet("Neptunus (Neptune-A)", 24622.0, 0.422, "#3b82f6",
                       semi_major_axis_au=30.1, orbital_period_days=60190.0, kind="Ice Giant"),
    )
    return TerraxSystem(star=star, planet=planet, moons=moons, neighbors=neighbors)
