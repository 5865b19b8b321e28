# pyorrery/almanac.py

"""
Year almanac: the core outputs sampled over every day of a Terrax year,
as numpy arrays, with a NetCDF writer for offline inspection.
"""

import os

import numpy as np

from .bodies import TerraxSystem, default_system
from .calendar import REMAINDER_MONTH, date_from_day
from .moons import PhaseModel, illumination, moon_phase_fraction
from .seasons import season_index
from .solar import daylight_hours, declination
from .tides import tide_magnitude


def compute_almanac(system: TerraxSystem | None = None, latitude_deg: float = 0.0, leap_year: bool = False,
                    phase_model: PhaseModel = PhaseModel.TRUE_ANOMALY) -> dict:
    """
    Samples one calendar year at integer days.

    Returns:
        dict of 1-D np.ndarray keyed by variable name, all of length
        days_in_year: day, month, day_in_month, season, declination_deg,
        daylight_hours, tide, plus <moon>_phase and <moon>_illumination.
    """
    system = system or default_system()
    planet = system.planet
    total = system.calendar.total_days(leap_year)
    day = np.arange(1, total + 1, dtype=float)
    orbit = dict(
        year_length=planet.orbital_period_local_days,
        e=planet.orbital_eccentricity,
        periapsis_deg=planet.periapsis_longitude_deg,
    )

    dates = [date_from_day(d, leap_year, system.calendar) for d in day]
    out = {
        "day": day,
        "month": np.array([d.month for d in dates], dtype=np.int32),
        "day_in_month": np.array([d.day_in_month for d in dates], dtype=np.int32),
        "season": np.asarray(season_index(day, total), dtype=np.int32),
        "declination_deg": np.rad2deg(declination(day, planet.axial_tilt_deg, **orbit)),
        "daylight_hours": daylight_hours(day, latitude_deg, planet.axial_tilt_deg,
                                         planet.rotation_period_hours, **orbit),
    }
    if len(system.moons) >= 2:
        out["tide"] = tide_magnitude(day, system.moons[0].orbital_period_days, system.moons[1].orbital_period_days)
    for moon in system.moons:
        phase = np.asarray(moon_phase_fraction(moon, day, phase_model))
        key = moon.name.lower()
        out[f"{key}_phase"] = phase
        out[f"{key}_illumination"] = np.asarray(illumination(phase))
    return out


def save_almanac(path: str, almanac: dict, latitude_deg: float = 0.0, leap_year: bool = False) -> None:
    """
    Write an almanac dict to NetCDF:
      - dimension day
      - one variable per almanac key (int32 for calendar fields, f4 otherwise)
      - attributes: title, latitude_deg, leap_year, remainder_month
    """
    # Lazy import to keep the core runnable without netCDF4 present
    try:
        from netCDF4 import Dataset
    except Exception as e:
        raise RuntimeError("netCDF4 is required for almanac export. Please install 'netCDF4' and retry.") from e

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with Dataset(path, "w") as ds:
        n = len(almanac["day"])
        ds.createDimension("day", n)
        for name, data in almanac.items():
            arr = np.asarray(data)
            dtype = "i4" if np.issubdtype(arr.dtype, np.integer) else "f4"
            var = ds.createVariable(name, dtype, ("day",))
            var[:] = arr.astype(np.int32 if dtype == "i4" else np.float32)
        ds.setncattr("title", "Terrax Almanac")
        ds.setncattr("source", "pyorrery/almanac.py")
        ds.setncattr("latitude_deg", float(latitude_deg))
        ds.setncattr("leap_year", int(bool(leap_year)))
        ds.setncattr("remainder_month", int(REMAINDER_MONTH))


def load_almanac(path: str) -> dict:
    """Read an almanac NetCDF back into a dict of arrays."""
    try:
        from netCDF4 import Dataset
    except Exception as e:
        raise RuntimeError("netCDF4 is required to load an almanac. Please install 'netCDF4'.") from e

    out = {}
    with Dataset(path, "r") as ds:
        for name, var in ds.variables.items():
            out[name] = np.asarray(var[:])
    return out
