# pyorrery/observation.py

"""
Sky view of the neighbor planets from Terrax.

For every neighbor: line-of-sight distance, phase illumination (law of
cosines), a relative brightness score and an alignment status. The score is
albedo * (R/1000)^2 / (r^2 d^2) * illumination, a monotonic proxy for
apparent magnitude rather than a calibrated magnitude.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from . import constants as const
from .bodies import TerraxSystem, default_system
from .orbital import OrbitModel, orbit_state


class Visibility(str, Enum):
    VISIBLE = "Visible"
    INFERIOR_CONJUNCTION = "Inferior Conj."  # between Terrax and the star
    SUPERIOR_CONJUNCTION = "Superior Conj."  # behind the star
    CONJUNCTION = "Conjunction"
    OPPOSITION = "Opposition"


@dataclass(frozen=True)
class NeighborObservation:
    name: str
    distance_au: float
    illumination: float  # [0, 1]
    brightness: float
    status: Visibility
    separation_rad: float  # |angle_n - angle_h| mod 2 pi
    albedo: float = 0.0

    @property
    def illumination_pct(self) -> int:
        return int(round(self.illumination * 100.0))


def phase_illumination(r_neighbor, r_home, distance):
    """
    (1 + cos phi) / 2 with cos phi = (r_n^2 + d^2 - r_h^2) / (2 r_n d), clamped.
    A neighbor sharing the observer's position reads as fully lit.
    """
    if distance <= 0.0:
        return 1.0
    cos_phi = (r_neighbor**2 + distance**2 - r_home**2) / (2.0 * r_neighbor * distance)
    return (1.0 + float(np.clip(cos_phi, -1.0, 1.0))) / 2.0


def brightness_score(albedo, radius_km, r_neighbor, distance, lit):
    """albedo * (R/1000)^2 / (r^2 d^2) * lit; 0 for a neighbor at zero distance."""
    if distance <= 0.0:
        return 0.0
    return albedo * (radius_km / 1000.0) ** 2 / (r_neighbor**2 * distance**2) * lit


def classify_alignment(separation, r_neighbor, r_home, threshold=const.ALIGNMENT_THRESHOLD_RAD) -> Visibility:
    """
    Within `threshold` of 0 or 2 pi the neighbor is aligned with the star;
    interior planets are in inferior/superior conjunction by the sign of
    cos(separation), exterior ones in conjunction/opposition.
    """
    aligned = separation < threshold or separation > (2.0 * np.pi - threshold)
    if not aligned:
        return Visibility.VISIBLE
    near_side = np.cos(separation) > 0
    if r_neighbor < r_home:
        return Visibility.INFERIOR_CONJUNCTION if near_side else Visibility.SUPERIOR_CONJUNCTION
    return Visibility.CONJUNCTION if near_side else Visibility.OPPOSITION


def observe_neighbors(day, system: TerraxSystem | None = None,
                      model: OrbitModel = OrbitModel.KEPLERIAN) -> list[NeighborObservation]:
    """
    Observations of every neighbor at `day` (Earth days), brightest first.
    The sort is stable, so equal scores keep their catalogue order.
    """
    system = system or default_system()
    home = orbit_state(system.planet.elements, day, model)
    hx, hy, r_h = float(home.x), float(home.y), float(home.radius)

    out = []
    for nb in system.neighbors:
        st = orbit_state(nb.elements, day, model)
        nx, ny, r_n = float(st.x), float(st.y), float(st.radius)
        dist = float(np.hypot(nx - hx, ny - hy))
        lit = phase_illumination(r_n, r_h, dist)
        score = brightness_score(nb.albedo, nb.radius_km, r_n, dist, lit)
        separation = float(np.mod(abs(float(st.angle) - float(home.angle)), 2.0 * np.pi))
        out.append(
            NeighborObservation(
                name=nb.short_name,
                distance_au=dist,
                illumination=lit,
                brightness=score,
                status=classify_alignment(separation, r_n, r_h),
                separation_rad=separation,
                albedo=nb.albedo,
            )
        )
    return sorted(out, key=lambda o: o.brightness, reverse=True)
