import os

import pytest

pytest.importorskip("matplotlib")


def test_orbit_tracks_plot(tmp_path):
    import matplotlib.pyplot as plt

    from pyorrery.bodies import default_system
    from pyorrery.orbital import OrbitalSystem
    from pyorrery.ploter import plot_orbit_tracks

    system = default_system()
    path = tmp_path / "moons.png"
    fig, ax = plot_orbit_tracks(OrbitalSystem(system), system.moons, 10.0, unit="km", save_path=str(path))
    assert os.path.exists(path)
    assert "(km)" in ax.get_xlabel()
    plt.close(fig)


def test_annual_cycles_plot(tmp_path):
    import matplotlib.pyplot as plt

    from pyorrery.almanac import compute_almanac
    from pyorrery.ploter import plot_annual_cycles

    path = tmp_path / "plots" / "annual.png"
    fig, axes = plot_annual_cycles(compute_almanac(latitude_deg=50.0), save_path=str(path))
    assert len(axes) == 4
    assert os.path.exists(path)
    plt.close(fig)


def test_daylight_by_latitude_plot(tmp_path):
    import matplotlib.pyplot as plt

    from pyorrery.ploter import plot_daylight_by_latitude

    path = tmp_path / "daylight.png"
    fig, ax = plot_daylight_by_latitude(512.833, latitudes=(0.0, 45.0), save_path=str(path))
    assert len(ax.get_lines()) == 2
    assert os.path.exists(path)
    plt.close(fig)


def test_generate_orbit_plots_script(tmp_path, monkeypatch):
    import importlib

    monkeypatch.setenv("TX_PLOT_DIR", str(tmp_path))
    mod = importlib.import_module("scripts.generate_orbit_plots")
    mod.main()
    for name in ("moon-orbits.png", "inner-system-circular.png", "inner-system-keplerian.png",
                 "annual-cycles.png", "daylight-by-latitude.png"):
        assert (tmp_path / name).exists()
