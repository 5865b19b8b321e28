# pyorrery/seasons.py

"""
Season bands of the Terrax year.
"""

from enum import Enum

import numpy as np

from . import constants as const


class Season(str, Enum):
    SPRING = "Spring"
    SUMMER = "Summer"
    AUTUMN = "Autumn"
    WINTER = "Winter"


_ORDER = (Season.SPRING, Season.SUMMER, Season.AUTUMN, Season.WINTER)


def season_boundaries(total_days=const.DAYS_PER_YEAR):
    """Quarter boundaries of the year: (128, 256, 384) for 513 days."""
    quarter = total_days / 4.0
    return tuple(int(np.floor(quarter * k)) for k in (1, 2, 3))


def season_index(day, total_days=const.DAYS_PER_YEAR):
    """0..3 band index; vectorized over day."""
    idx = np.searchsorted(np.asarray(season_boundaries(total_days)), np.asarray(day, dtype=float), side="right")
    return idx if np.ndim(idx) else int(idx)


def classify_season(day, total_days=const.DAYS_PER_YEAR) -> Season:
    """
    Buckets a day of year: [0, q1) Spring, [q1, q2) Summer, [q2, q3) Autumn,
    q3 onwards Winter.
    """
    return _ORDER[season_index(float(day), total_days)]
