# pyorrery/tides.py

"""
Two-moon tidal superposition and the Luna/Echo resonance window.
"""

import numpy as np

from . import constants as const


def tide_magnitude(day, period_1=const.LUNA_PERIOD_DAYS, period_2=const.ECHO_PERIOD_DAYS,
                   weights=const.TIDE_WEIGHTS):
    """
    Relative tide |w1 cos(2 pi d / P1) + w2 cos(2 pi d / P2)|.

    Not clipped: the only bound is w1 + w2 (1.0 for the default weights).

    Args:
        day (float or np.ndarray): Simulation day.
        period_1, period_2 (float): Moon periods in days.
        weights (tuple): (w1, w2) relative tidal dominance.
    """
    w1, w2 = weights
    d = np.asarray(day, dtype=float)
    tide = np.abs(w1 * np.cos(2.0 * np.pi * d / period_1) + w2 * np.cos(2.0 * np.pi * d / period_2))
    return tide if np.ndim(tide) else float(tide)


def next_resonance_day(day, cycle=const.RESONANCE_CYCLE_DAYS):
    """First resonance-alignment day at or after `day` (cycle multiples, day 0 aligned)."""
    return float(np.ceil(float(day) / cycle) * cycle)


def days_until_resonance(day, cycle=const.RESONANCE_CYCLE_DAYS):
    return next_resonance_day(day, cycle) - float(day)
