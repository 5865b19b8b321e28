# pyorrery/solar.py

"""
Calculates the solar geometry of Terrax: solar longitude, declination,
hour angle and daylight hours at a given latitude.
"""

from dataclasses import dataclass

import numpy as np

from . import constants as const


def solar_longitude(day, year_length=const.PLANET_YEAR_LOCAL_DAYS, e=const.PLANET_ECCENTRICITY,
                    periapsis_deg=const.PLANET_PERIAPSIS_LONGITUDE):
    """
    Solar ecliptic longitude lambda = nu + omega (radians), with the true
    anomaly from the equation-of-centre series:
        nu = M + (2e - e^3/4) sin M + 1.25 e^2 sin 2M,  M = 2 pi (d - 1) / P

    Args:
        day (float or np.ndarray): 1-based day of year.
        year_length (float): Year length P in local days.
        e (float): Orbital eccentricity.
        periapsis_deg (float): Longitude of periapsis in degrees.
    """
    M = 2.0 * np.pi * (np.asarray(day, dtype=float) - 1.0) / year_length
    nu = M + (2.0 * e - e**3 / 4.0) * np.sin(M) + 1.25 * e**2 * np.sin(2.0 * M)
    return nu + np.deg2rad(periapsis_deg)


def declination(day, axial_tilt_deg=const.PLANET_AXIAL_TILT, **orbit):
    """Solar declination delta = asin(sin(tilt) sin(lambda)), radians."""
    lam = solar_longitude(day, **orbit)
    return np.arcsin(np.clip(np.sin(np.deg2rad(axial_tilt_deg)) * np.sin(lam), -1.0, 1.0))


def hour_angle(latitude_deg, delta):
    """
    Half the daylight arc, H = acos(-tan(phi) tan(delta)).
    The argument is clamped so polar day gives pi and polar night gives 0.
    """
    phi = np.deg2rad(np.asarray(latitude_deg, dtype=float))
    cos_h = np.clip(-np.tan(phi) * np.tan(delta), -1.0, 1.0)
    return np.arccos(cos_h)


def daylight_hours(day, latitude_deg, axial_tilt_deg=const.PLANET_AXIAL_TILT,
                   rotation_hours=const.PLANET_ROTATION_HOURS, **orbit):
    """
    Hours of daylight, always within [0, rotation_hours].

    Args:
        day (float or np.ndarray): 1-based day of year.
        latitude_deg (float or np.ndarray): Observer latitude in [-90, 90].
        axial_tilt_deg (float): Axial tilt.
        rotation_hours (float): Length of one local day.
        **orbit: year_length, e, periapsis_deg forwarded to solar_longitude.
    """
    delta = declination(day, axial_tilt_deg, **orbit)
    return hour_angle(latitude_deg, delta) / np.pi * rotation_hours


@dataclass(frozen=True)
class SolarState:
    solar_longitude: float  # radians
    declination: float  # radians
    hour_angle: float  # radians
    daylight_hours: float

    @property
    def declination_deg(self) -> float:
        return float(np.rad2deg(self.declination))


def solar_state(day, latitude_deg, planet=None) -> SolarState:
    """Bundles the solar outputs for one day and latitude, using the planet's parameters."""
    if planet is None:
        orbit = {}
        tilt = const.PLANET_AXIAL_TILT
        rot = const.PLANET_ROTATION_HOURS
    else:
        orbit = dict(
            year_length=planet.orbital_period_local_days,
            e=planet.orbital_eccentricity,
            periapsis_deg=planet.periapsis_longitude_deg,
        )
        tilt = planet.axial_tilt_deg
        rot = planet.rotation_period_hours
    lam = solar_longitude(day, **orbit)
    delta = declination(day, tilt, **orbit)
    H = hour_angle(latitude_deg, delta)
    return SolarState(
        solar_longitude=float(lam),
        declination=float(delta),
        hour_angle=float(H),
        daylight_hours=float(H / np.pi * rot),
    )


def subsolar_latitude_simple(day, axial_tilt_deg=const.PLANET_AXIAL_TILT,
                             year_length=const.PLANET_YEAR_LOCAL_DAYS):
    """Sinusoidal subsolar latitude in degrees: tilt * sin(2 pi d / P)."""
    return axial_tilt_deg * np.sin(2.0 * np.pi * np.asarray(day, dtype=float) / year_length)


def solar_elevation(day, time_of_day_hours, latitude_deg, axial_tilt_deg=const.PLANET_AXIAL_TILT,
                    rotation_hours=const.PLANET_ROTATION_HOURS, **orbit):
    """
    Solar altitude angle in degrees for a local time of day:
        sin(alt) = sin(phi) sin(delta) + cos(phi) cos(delta) cos(h)
    with local hour angle h = 2 pi (t / rotation) - pi, so local noon sits at
    half the rotation period. Negative values are below the horizon.
    """
    delta = declination(day, axial_tilt_deg, **orbit)
    h = 2.0 * np.pi * (np.asarray(time_of_day_hours, dtype=float) / rotation_hours) - np.pi
    phi = np.deg2rad(np.asarray(latitude_deg, dtype=float))
    sin_alt = np.sin(phi) * np.sin(delta) + np.cos(phi) * np.cos(delta) * np.cos(h)
    return np.rad2deg(np.arcsin(np.clip(sin_alt, -1.0, 1.0)))
