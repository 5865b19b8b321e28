import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib
matplotlib.use(os.getenv("MPLBACKEND", "Agg"))
import matplotlib.pyplot as plt

from pyorrery import constants as c
from pyorrery.almanac import compute_almanac
from pyorrery.bodies import default_system
from pyorrery.orbital import OrbitalSystem, OrbitModel
from pyorrery.ploter import plot_annual_cycles, plot_daylight_by_latitude, plot_orbit_tracks


def main():
    output_dir = os.getenv("TX_PLOT_DIR", "output/plots")
    day = float(os.getenv("TX_START_DAY", "1"))
    system = default_system()
    planet = system.planet

    # --- 1. Moons around Terrax (Keplerian ellipses) ---
    orb = OrbitalSystem(system, model=OrbitModel.KEPLERIAN)
    path = os.path.join(output_dir, "moon-orbits.png")
    plot_orbit_tracks(orb, system.moons, day, unit="km", save_path=path, title="Luna and Echo around Terrax")
    print(f"Saved plot to {path}")

    # --- 2. Inner system, circular vs Keplerian ---
    inner = [planet] + [nb for nb in system.neighbors if nb.semi_major_axis_au < 2.0]
    t_earth = day * planet.rotation_period_hours / c.EARTH_DAY_HOURS
    for model in (OrbitModel.CIRCULAR, OrbitModel.KEPLERIAN):
        path = os.path.join(output_dir, f"inner-system-{model.value}.png")
        plot_orbit_tracks(OrbitalSystem(system, model=model), inner, t_earth, save_path=path)
        print(f"Saved plot to {path}")

    # --- 3. Annual cycles ---
    alm = compute_almanac(system)
    path = os.path.join(output_dir, "annual-cycles.png")
    plot_annual_cycles(alm, save_path=path)
    print(f"Saved plot to {path}")

    path = os.path.join(output_dir, "daylight-by-latitude.png")
    plot_daylight_by_latitude(
        planet.orbital_period_local_days,
        save_path=path,
        axial_tilt_deg=planet.axial_tilt_deg,
        rotation_hours=planet.rotation_period_hours,
        e=planet.orbital_eccentricity,
        periapsis_deg=planet.periapsis_longitude_deg,
    )
    print(f"Saved plot to {path}")

    plt.close('all')
    print("Successfully generated and saved all plots.")


if __name__ == "__main__":
    main()
