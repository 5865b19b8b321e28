# pyorrery/orbital.py

"""
Calculates the orbital positions of the bodies in the Terrax system.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from . import kepler
from .bodies import Moon, NeighborPlanet, OrbitalElements, TerraxSystem, default_system


class OrbitModel(str, Enum):
    """Orbit-rendering fidelity level."""

    CIRCULAR = "circular"
    KEPLERIAN = "keplerian"

    @classmethod
    def parse(cls, value, default=None):
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return default if default is not None else cls.KEPLERIAN


@dataclass(frozen=True)
class OrbitState:
    """Orbital state of a body at one instant (scalars or equally shaped arrays)."""

    x: object
    y: object
    mean_anomaly: object
    eccentric_anomaly: object
    true_anomaly: object
    radius: object
    angle: object  # world polar angle of the body, radians


def orbit_state(elements: OrbitalElements, t, model: OrbitModel = OrbitModel.KEPLERIAN,
                one_based: bool = False) -> OrbitState:
    """
    Single dispatch point for both orbit strategies.

    Args:
        elements (OrbitalElements): Orbit of the body.
        t (float or np.ndarray): Time in the period's unit (days).
        model (OrbitModel): CIRCULAR ignores eccentricity and periapsis.
        one_based (bool): Treat t as a 1-based day index (Keplerian only).

    Returns:
        OrbitState
    """
    a = elements.semi_major_axis
    P = elements.period
    if model is OrbitModel.CIRCULAR:
        x, y = kepler.circular_position(a, P, t)
        M = kepler.mean_anomaly(t, P)
        angle = np.asarray(M) - np.pi / 2.0
        return OrbitState(
            x=x, y=y,
            mean_anomaly=M,
            eccentric_anomaly=M,
            true_anomaly=M,
            radius=np.full_like(np.asarray(M), a) if np.ndim(M) else float(a),
            angle=angle if np.ndim(angle) else float(angle),
        )

    e = elements.eccentricity
    M = kepler.mean_anomaly(t, P, one_based=one_based)
    E = kepler.solve_kepler(M, e)
    nu = kepler.true_anomaly(E, e)
    x, y = kepler.position_from_anomaly(a, e, elements.periapsis_argument_deg, E)
    r = np.hypot(x, y)
    angle = np.arctan2(y, x)
    if np.ndim(r) == 0:
        r, angle = float(r), float(angle)
    return OrbitState(x=x, y=y, mean_anomaly=M, eccentric_anomaly=E, true_anomaly=nu,
                      radius=r, angle=angle)


class OrbitalSystem:
    """
    Handles the calculation of planet, moon and neighbor positions in the
    Terrax system. Holds only static reference data; time is always an argument.
    """

    def __init__(self, system: TerraxSystem | None = None, model: OrbitModel = OrbitModel.KEPLERIAN):
        """
        Initializes the orbital system.

        Args:
            system (TerraxSystem): Static system data; defaults to the Terrax reference.
            model (OrbitModel): Default orbit strategy for position queries.
        """
        self.system = system or default_system()
        self.model = model

        # Planet orbital period (Earth days) and angular velocity
        self.T_planet = self.system.planet.orbital_period_earth_days
        self.omega_planet = 2 * np.pi / self.T_planet

    def planet_state(self, t, model: OrbitModel | None = None) -> OrbitState:
        """Terrax around the star; t in Earth days."""
        return orbit_state(self.system.planet.elements, t, model or self.model)

    def moon_state(self, moon: Moon, t, model: OrbitModel | None = None) -> OrbitState:
        """A moon around Terrax; t in local days."""
        return orbit_state(moon.elements, t, model or self.model)

    def neighbor_state(self, neighbor: NeighborPlanet, t, model: OrbitModel | None = None) -> OrbitState:
        return orbit_state(neighbor.elements, t, model or self.model)

    def calculate_positions(self, t, model: OrbitModel | None = None) -> dict:
        """
        Calculates (x, y) for every body at time t.

        Returns:
            dict: name -> (x, y). Planet and neighbors in AU around the star,
                  moons in km around Terrax.
        """
        out = {}
        st = self.planet_state(t, model)
        out[self.system.planet.name] = (st.x, st.y)
        for moon in self.system.moons:
            st = self.moon_state(moon, t, model)
            out[moon.name] = (st.x, st.y)
        for nb in self.system.neighbors:
            st = self.neighbor_state(nb, t, model)
            out[nb.name] = (st.x, st.y)
        return out

    def orbit_tracks(self, bodies, n_points: int = 256, model: OrbitModel | None = None) -> dict:
        """Sampled closed tracks over one period for each body (for plotting)."""
        tracks = {}
        for body in bodies:
            el = body.elements
            t = np.linspace(0.0, el.period, n_points)
            st = orbit_state(el, t, model or self.model)
            tracks[body.name] = (np.asarray(st.x), np.asarray(st.y))
        return tracks

    def ellipse(self, body) -> kepler.OrbitEllipse:
        el = body.elements
        if self.model is OrbitModel.CIRCULAR:
            return kepler.orbit_ellipse(el.semi_major_axis, 0.0, 0.0)
        return kepler.orbit_ellipse(el.semi_major_axis, el.eccentricity, el.periapsis_argument_deg)
