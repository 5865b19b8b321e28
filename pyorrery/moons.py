# pyorrery/moons.py

"""
Moon phase and illumination for Luna and Echo.

Two phase conventions are available. TRUE_ANOMALY (the default) reads the
moon's position on its Keplerian orbit relative to a fixed sun direction;
SYNODIC is the older cycle approximation that ignores eccentricity and
periapsis. The two diverge once the orbit is eccentric.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from . import constants as const
from . import kepler
from .bodies import Moon


class PhaseModel(str, Enum):
    TRUE_ANOMALY = "true_anomaly"
    SYNODIC = "synodic"

    @classmethod
    def parse(cls, value, default=None):
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return default if default is not None else cls.TRUE_ANOMALY


# Upper bounds of each named bucket; anything above 0.95 wraps to New Moon.
PHASE_NAMES = (
    (0.05, "New Moon"),
    (0.20, "Waxing Crescent"),
    (0.30, "First Quarter"),
    (0.45, "Waxing Gibbous"),
    (0.55, "Full Moon"),
    (0.70, "Waning Gibbous"),
    (0.80, "Last Quarter"),
    (0.95, "Waning Crescent"),
)


def synodic_phase(day, period):
    """phase = (day / period + 0.5) mod 1; 0 = new, 0.5 = full."""
    phase = np.mod(np.asarray(day, dtype=float) / period + 0.5, 1.0)
    return phase if np.ndim(phase) else float(phase)


def true_anomaly_phase(nu, periapsis_deg, sun_reference=const.SUN_REFERENCE_ANGLE):
    """
    Phase from the moon's ecliptic angle theta = nu + omega measured against
    the fixed sun direction: phase = ((theta - sun_ref) mod 2pi) / 2pi.
    """
    theta = np.asarray(nu, dtype=float) + np.deg2rad(periapsis_deg)
    phase = np.mod(theta - sun_reference, 2.0 * np.pi) / (2.0 * np.pi)
    # mod can round up to exactly 1.0 for tiny negative inputs
    phase = np.where(phase >= 1.0, 0.0, phase)
    return phase if np.ndim(phase) else float(phase)


def illumination(phase):
    """Lit fraction: 2*phase while waxing (phase <= 0.5), 2*(1-phase) while waning."""
    p = np.asarray(phase, dtype=float)
    lit = np.clip(np.where(p <= 0.5, 2.0 * p, 2.0 * (1.0 - p)), 0.0, 1.0)
    return lit if np.ndim(lit) else float(lit)


def phase_name(phase: float) -> str:
    p = float(phase)
    if p < 0.05 or p > 0.95:
        return "New Moon"
    for upper, name in PHASE_NAMES[1:]:
        if p < upper:
            return name
    return "Waning Crescent"


@dataclass(frozen=True)
class MoonPhase:
    name: str  # moon name
    phase: float  # [0, 1)
    illumination: float  # [0, 1]
    phase_name: str
    is_waxing: bool

    @property
    def illumination_pct(self) -> int:
        return int(round(self.illumination * 100.0))


def moon_phase_fraction(moon: Moon, day, model: PhaseModel = PhaseModel.TRUE_ANOMALY):
    """Phase fraction of a moon at the given day (scalar or array)."""
    if model is PhaseModel.SYNODIC:
        return synodic_phase(day, moon.orbital_period_days)
    e = moon.eccentricity
    M = kepler.mean_anomaly(day, moon.orbital_period_days)
    nu = kepler.true_anomaly(kepler.solve_kepler(M, e), e)
    return true_anomaly_phase(nu, moon.periapsis_argument_deg)


def moon_phase(moon: Moon, day: float, model: PhaseModel = PhaseModel.TRUE_ANOMALY) -> MoonPhase:
    phase = float(moon_phase_fraction(moon, float(day), model))
    return MoonPhase(
        name=moon.name,
        phase=phase,
        illumination=illumination(phase),
        phase_name=phase_name(phase),
        is_waxing=phase <= 0.5,
    )
