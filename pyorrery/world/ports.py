"""
Typed output ports from the orrery core to a scene renderer.

Goal
- Give the renderer one explicit structure per frame instead of ad-hoc dicts.
- Keep the core pure: TerraxWorld.snapshot() assembles these from the clock
  and static system data; nothing here holds logic.

Notes
- Planet and neighbor positions are in AU around the star; moon positions
  are in km around Terrax.
- Percentages are rounded integers for display; the raw fractions are kept
  alongside.

Examples
--------
snap = world.snapshot()
for body in snap.bodies:
    draw(body.name, body.x, body.y, body.orbit)
label(snap.home.season, snap.home.month, snap.home.day_in_month)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pyorrery.kepler import OrbitEllipse

# ------------------------------
# Bodies (core -> renderer)
# ------------------------------


@dataclass
class BodyPosition:
    name: str
    x: float
    y: float
    frame: str  # "star" | "planet"
    orbit: OrbitEllipse | None = None


# ------------------------------
# Readouts
# ------------------------------


@dataclass
class HomeReadout:
    day: float  # calendar day
    month: int  # 1-based, or REMAINDER_MONTH
    day_in_month: int
    is_remainder: bool
    leap_year: bool
    season: str
    declination_deg: float
    daylight_hours: float
    solar_elevation_deg: float
    tide: float  # deep-time clock
    next_resonance_day: float  # deep-time clock


@dataclass
class MoonReadout:
    name: str
    phase: float
    illumination_pct: int
    phase_name: str
    x: float
    y: float


@dataclass
class NeighborReadout:
    name: str
    distance_au: float
    illumination_pct: int
    brightness_rank: int  # 1 = brightest
    status: str


@dataclass
class Snapshot:
    calendar_day: float
    deep_day: float
    time_of_day_hours: float
    year: int
    home: HomeReadout
    bodies: list[BodyPosition] = field(default_factory=list)
    moons: list[MoonReadout] = field(default_factory=list)
    neighbors: list[NeighborReadout] = field(default_factory=list)
