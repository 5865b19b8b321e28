# scripts/verify_calculation.py

"""
Precision check of the fixed-iteration Kepler solver against the
convergence-checked Newton solver, over the eccentricities in use.
"""

import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from pyorrery.bodies import default_system
from pyorrery.kepler import KEPLER_ITERATIONS, solve_kepler, solve_kepler_newton


def kepler_error_table(eccentricities, n=2000):
    """Max |E_fixed - E_newton| and max Kepler residual per eccentricity."""
    M = np.linspace(0.0, 2.0 * np.pi, n)
    rows = []
    for e in eccentricities:
        E_fixed = solve_kepler(M, e)
        E_ref = solve_kepler_newton(M, e)
        err = float(np.max(np.abs(E_fixed - E_ref)))
        resid = float(np.max(np.abs(E_fixed - e * np.sin(E_fixed) - M)))
        rows.append((float(e), err, resid))
    return rows


def main():
    system = default_system()
    ecc = sorted({0.0, 0.05, 0.1, 0.2, *(m.eccentricity for m in system.moons)})

    print(f"Kepler solver: {KEPLER_ITERATIONS} fixed-point iterations")
    print(f"{'e':>6} {'max |dE| (rad)':>16} {'max residual':>14}")
    for e, err, resid in kepler_error_table(ecc):
        print(f"{e:6.3f} {err:16.3e} {resid:14.3e}")


if __name__ == "__main__":
    main()
