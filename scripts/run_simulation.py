# scripts/run_simulation.py

"""
Headless Terrax orrery run: drives the simulation clock in real time and
prints a readout every few ticks.

Environment:
  TX_RUN_TICKS         number of ticks to run (default 120)
  TX_PRINT_EVERY       print a readout every N ticks (default 30)
  TX_ALMANAC_ENABLE    1 = also write the year almanac NetCDF (default 0)
  plus the TX_* variables read by pyorrery.world.SimConfig.from_env()
"""

import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pyorrery.almanac import compute_almanac, save_almanac
from pyorrery.calendar import REMAINDER_MONTH
from pyorrery.world import TerraxWorld


def format_readout(snap) -> str:
    home = snap.home
    if home.month == REMAINDER_MONTH:
        date = f"Remainder {home.day_in_month}"
    else:
        date = f"M{home.month} D{home.day_in_month}"
    moons = ", ".join(f"{m.name} {m.phase_name} {m.illumination_pct}%" for m in snap.moons)
    brightest = snap.neighbors[0] if snap.neighbors else None
    sky = f"{brightest.name} ({brightest.status})" if brightest is not None else "-"
    return (
        f"[Clock] Y{snap.year} day {snap.calendar_day:7.2f} ({date}, {home.season}) "
        f"daylight={home.daylight_hours:5.2f} h tide={home.tide:.3f} | {moons} | brightest: {sky}"
    )


def main():
    """
    Main function to run the orrery.
    """
    print("--- Initializing Terrax Orrery ---")
    try:
        n_ticks = int(os.getenv("TX_RUN_TICKS", "120"))
        every = max(1, int(os.getenv("TX_PRINT_EVERY", "30")))
    except Exception:
        n_ticks, every = 120, 30

    world = TerraxWorld.create_default()
    cfg = world.config
    print(
        f"[Config] start_day={cfg.start_day} speed={cfg.speed_days_per_sec} d/s "
        f"lat={cfg.latitude_deg}° orbit={cfg.orbit_model.value} phase={cfg.phase_model.value}"
    )
    print(format_readout(world.snapshot()))

    def _on_frame(snap):
        if world.driver.ticks % every == 0:
            print(format_readout(snap))

    world.run(n_ticks=n_ticks, on_frame=_on_frame)
    print(format_readout(world.snapshot()))

    if int(os.getenv("TX_ALMANAC_ENABLE", "0")) == 1:
        try:
            alm = compute_almanac(world.system, cfg.latitude_deg, world.clock.leap_year, cfg.phase_model)
            save_almanac(cfg.almanac_nc, alm, cfg.latitude_deg, world.clock.leap_year)
            print(f"[Almanac] Saved {len(alm['day'])} days to '{cfg.almanac_nc}'")
        except Exception as e:
            print(f"[Almanac] Save failed: {e}")

    print("--- Run complete ---")


if __name__ == "__main__":
    main()
