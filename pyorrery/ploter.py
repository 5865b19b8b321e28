from __future__ import annotations

import os
from typing import Optional, Sequence

import numpy as np

try:
    import matplotlib.pyplot as plt  # type: ignore
except Exception as e:
    plt = None

from .orbital import OrbitalSystem, orbit_state
from .seasons import season_boundaries
from .solar import daylight_hours


def _require_matplotlib():
    if plt is None:
        raise RuntimeError("matplotlib is required for plotting. Please install 'matplotlib'.")


def _save(fig, save_path: Optional[str]) -> None:
    if save_path is None:
        return
    try:
        os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
    except Exception:
        pass
    fig.savefig(save_path, dpi=140)


def plot_orbit_tracks(
    orbital: OrbitalSystem,
    bodies: Sequence,
    t: float,
    *,
    unit: str = "AU",
    save_path: Optional[str] = None,
    title: Optional[str] = None,
):
    """
    Orbit tracks over one period plus the body positions at time t.
    The primary (star or planet) sits at the origin.

    Returns:
      (fig, ax)
    """
    _require_matplotlib()
    tracks = orbital.orbit_tracks(bodies)
    fig, ax = plt.subplots(figsize=(8, 8))
    for body in bodies:
        x, y = tracks[body.name]
        color = getattr(body, "color", None)
        ax.plot(x, y, linestyle="--", linewidth=1, color=color, alpha=0.6)
        st = orbit_state(body.elements, t, orbital.model)
        ax.plot(float(st.x), float(st.y), "o", color=color, label=body.name)
    ax.plot(0, 0, "k+", markersize=10)
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel(f"X ({unit})")
    ax.set_ylabel(f"Y ({unit})")
    ax.set_title(title or f"Orbits at t = {t:.1f} d ({orbital.model.value})")
    ax.grid(True)
    ax.legend(fontsize=8)
    fig.tight_layout()
    _save(fig, save_path)
    return fig, ax


def plot_annual_cycles(almanac: dict, *, save_path: Optional[str] = None, title: Optional[str] = None):
    """
    Four stacked panels over one year: daylight hours, solar declination,
    tide magnitude and moon illumination. Season boundaries are marked.

    Returns:
      (fig, axes)
    """
    _require_matplotlib()
    day = np.asarray(almanac["day"])
    fig, axes = plt.subplots(nrows=4, ncols=1, figsize=(12, 10), sharex=True, constrained_layout=True)

    axes[0].plot(day, almanac["daylight_hours"], color="goldenrod")
    axes[0].set_ylabel("Daylight (h)")
    axes[1].plot(day, almanac["declination_deg"], color="crimson")
    axes[1].set_ylabel("Declination (°)")
    if "tide" in almanac:
        axes[2].plot(day, almanac["tide"], color="royalblue")
    axes[2].set_ylabel("Tide (rel.)")
    for key, values in almanac.items():
        if key.endswith("_illumination"):
            axes[3].plot(day, np.asarray(values) * 100.0, label=key.split("_")[0].title())
    axes[3].set_ylabel("Illumination (%)")
    axes[3].set_xlabel("Day of year")
    axes[3].legend(fontsize=8)

    for b in season_boundaries(len(day)):
        for ax in axes:
            ax.axvline(b, color="gray", linestyle=":", linewidth=1)
    for ax in axes:
        ax.grid(True)
    fig.suptitle(title or "Terrax annual cycles", fontsize=14)
    _save(fig, save_path)
    return fig, axes


def plot_daylight_by_latitude(
    year_length: float,
    *,
    latitudes: Sequence[float] = (0.0, 30.0, 60.0, 80.0),
    save_path: Optional[str] = None,
    **solar_kwargs,
):
    """Daylight hours through the year for several latitudes."""
    _require_matplotlib()
    day = np.arange(1, int(np.floor(year_length)) + 1, dtype=float)
    fig, ax = plt.subplots(figsize=(12, 5))
    for lat in latitudes:
        ax.plot(day, daylight_hours(day, lat, year_length=year_length, **solar_kwargs), label=f"{lat:+.0f}°")
    ax.set_xlabel("Day of year")
    ax.set_ylabel("Daylight (h)")
    ax.set_title("Daylight hours by latitude")
    ax.grid(True)
    ax.legend()
    fig.tight_layout()
    _save(fig, save_path)
    return fig, ax


__all__ = [
    "plot_annual_cycles",
    "plot_daylight_by_latitude",
    "plot_orbit_tracks",
]
