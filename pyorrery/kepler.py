# pyorrery/kepler.py

"""
Kepler's equation and 2-D positions on elliptical and circular orbits.

All functions accept a float or an np.ndarray for the time/angle argument and
return matching shapes, so a whole year can be sampled in one call.
"""

from dataclasses import dataclass

import numpy as np
from scipy.optimize import newton

# Fixed iteration count of the display solver. Accurate to ~1e-3 rad for
# e <= 0.2; this is a precision ceiling, not a general-purpose solver.
KEPLER_ITERATIONS = 4


def solve_kepler(M, e):
    """
    Solves E = M + e*sin(E) by fixed-point iteration.

    Args:
        M (float or np.ndarray): Mean anomaly in radians.
        e (float): Eccentricity in [0, 1). Not validated.

    Returns:
        float or np.ndarray: Eccentric anomaly in radians.
    """
    M = np.asarray(M, dtype=float)
    E = M
    for _ in range(KEPLER_ITERATIONS):
        E = M + e * np.sin(E)
    return E if E.ndim else float(E)


def solve_kepler_newton(M, e, tol=1e-12, maxiter=50):
    """
    Convergence-checked reference solver (Newton-Raphson via scipy).
    Used to measure the precision of solve_kepler, not for display.
    """
    M = np.asarray(M, dtype=float)
    x0 = M + e * np.sin(M)
    E = newton(
        lambda E: E - e * np.sin(E) - M,
        x0,
        fprime=lambda E: 1.0 - e * np.cos(E),
        tol=tol,
        maxiter=maxiter,
    )
    E = np.asarray(E, dtype=float)
    return E if E.ndim else float(E)


def mean_anomaly(t, period, one_based=False):
    """M = 2*pi*(t/P); with one_based=True day 1 maps to M = 0."""
    t = np.asarray(t, dtype=float)
    if one_based:
        t = t - 1.0
    M = 2.0 * np.pi * (t / period)
    return M if M.ndim else float(M)


def true_anomaly(E, e):
    """nu = 2*atan2(sqrt(1+e)*sin(E/2), sqrt(1-e)*cos(E/2))."""
    E = np.asarray(E, dtype=float)
    nu = 2.0 * np.arctan2(np.sqrt(1.0 + e) * np.sin(E / 2.0), np.sqrt(1.0 - e) * np.cos(E / 2.0))
    return nu if nu.ndim else float(nu)


def rotate(x, y, omega_deg):
    """Rotates orbital-plane coordinates by the periapsis argument."""
    w = np.deg2rad(omega_deg)
    return x * np.cos(w) - y * np.sin(w), x * np.sin(w) + y * np.cos(w)


def keplerian_position(a, period, e, omega_deg, t, one_based=False):
    """
    Position of a body on its Keplerian ellipse, star (or planet) at the focus.

    Args:
        a (float): Semi-major axis.
        period (float): Orbital period, same time unit as t. Must be non-zero.
        e (float): Eccentricity in [0, 1).
        omega_deg (float): Argument of periapsis in degrees.
        t (float or np.ndarray): Time.
        one_based (bool): Treat t as a 1-based day index.

    Returns:
        tuple: (x, y) world coordinates.
    """
    M = mean_anomaly(t, period, one_based=one_based)
    return position_from_anomaly(a, e, omega_deg, solve_kepler(M, e))


def position_from_anomaly(a, e, omega_deg, E):
    """(x, y) on the rotated ellipse for an eccentric anomaly E already solved."""
    E = np.asarray(E, dtype=float)
    b = a * np.sqrt(1.0 - e * e)
    x_orb = a * (np.cos(E) - e)
    y_orb = b * np.sin(E)
    x, y = rotate(x_orb, y_orb, omega_deg)
    if np.ndim(x) == 0:
        return float(x), float(y)
    return x, y


def circular_position(r, period, t):
    """
    Circular-orbit fallback: angle = (t/P)*2*pi - pi/2, so every body
    starts at the top of the display (-y) at t = 0.
    """
    angle = (np.asarray(t, dtype=float) / period) * 2.0 * np.pi - np.pi / 2.0
    x = r * np.cos(angle)
    y = r * np.sin(angle)
    if np.ndim(x) == 0:
        return float(x), float(y)
    return x, y


@dataclass(frozen=True)
class OrbitEllipse:
    """Drawing parameters for an orbit track, relative to the focus."""

    rx: float  # semi-major axis
    ry: float  # semi-minor axis
    center_x: float  # geometric centre (rotated)
    center_y: float
    periapsis_x: float
    periapsis_y: float
    apoapsis_x: float
    apoapsis_y: float
    rotation_deg: float


def orbit_ellipse(a, e, omega_deg):
    """Ellipse geometry for the renderer. The focus sits at (0, 0)."""
    b = a * np.sqrt(1.0 - e * e)
    c = a * e  # centre-to-focus distance
    cx, cy = rotate(-c, 0.0, omega_deg)
    px, py = rotate(a - c, 0.0, omega_deg)
    ax, ay = rotate(-a - c, 0.0, omega_deg)
    return OrbitEllipse(
        rx=float(a),
        ry=float(b),
        center_x=float(cx),
        center_y=float(cy),
        periapsis_x=float(px),
        periapsis_y=float(py),
        apoapsis_x=float(ax),
        apoapsis_y=float(ay),
        rotation_deg=float(omega_deg),
    )
