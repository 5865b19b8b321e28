import numpy as np
import pytest

SHORT_NAMES = {"Pyroeis", "Cytherea", "Areus", "Jove", "Saturnus", "Neptunus"}


def test_observe_all_neighbors_brightest_first():
    from pyorrery.observation import observe_neighbors

    obs = observe_neighbors(100.0)
    assert len(obs) == 6
    assert {o.name for o in obs} == SHORT_NAMES
    scores = [o.brightness for o in obs]
    assert scores == sorted(scores, reverse=True)
    for o in obs:
        assert o.distance_au > 0.0
        assert 0.0 <= o.illumination <= 1.0
        assert o.brightness > 0.0
        assert 0 <= o.illumination_pct <= 100
        assert 0.0 <= o.separation_rad < 2.0 * np.pi


def test_circular_epoch_is_a_line_up():
    from pyorrery.observation import Visibility, observe_neighbors
    from pyorrery.orbital import OrbitModel

    obs = {o.name: o for o in observe_neighbors(0.0, model=OrbitModel.CIRCULAR)}
    # every body starts at the top of its circle, so inner planets sit
    # between Terrax and the star with their dark side facing us
    for name in ("Pyroeis", "Cytherea"):
        assert obs[name].status is Visibility.INFERIOR_CONJUNCTION
        assert obs[name].illumination == pytest.approx(0.0, abs=1e-9)
        assert obs[name].brightness == pytest.approx(0.0, abs=1e-12)
    for name in ("Areus", "Jove", "Saturnus", "Neptunus"):
        assert obs[name].status is Visibility.CONJUNCTION
        assert obs[name].illumination == pytest.approx(1.0)
    assert obs["Cytherea"].distance_au == pytest.approx(1.34 - 0.72)


def test_stable_sort_keeps_catalogue_order_for_ties():
    from dataclasses import replace

    from pyorrery.bodies import default_system
    from pyorrery.observation import observe_neighbors

    base = default_system()
    areus = base.neighbors[2]
    twins = (replace(areus, name="Twin (Areus-B)"), areus)
    obs = observe_neighbors(250.0, replace(base, neighbors=twins))
    assert obs[0].brightness == obs[1].brightness
    assert [o.name for o in obs] == ["Twin", "Areus"]


@pytest.mark.parametrize(
    "separation, r_n, expected",
    [
        (0.1, 0.5, "Inferior Conj."),
        (2.0 * np.pi - 0.05, 0.5, "Inferior Conj."),
        (0.1, 5.0, "Conjunction"),
        (0.5, 0.5, "Visible"),
        (np.pi, 5.0, "Visible"),
    ],
)
def test_classify_alignment(separation, r_n, expected):
    from pyorrery.observation import classify_alignment

    assert classify_alignment(separation, r_n, 1.34).value == expected


def test_phase_illumination_geometry():
    from pyorrery.observation import phase_illumination

    # neighbor directly behind the star: fully lit
    assert phase_illumination(0.72, 1.34, 0.72 + 1.34) == pytest.approx(1.0)
    # neighbor directly between: dark
    assert phase_illumination(0.72, 1.34, 1.34 - 0.72) == pytest.approx(0.0, abs=1e-12)
    # quadrature-ish geometry is partially lit
    d = float(np.hypot(1.34, 0.72))
    assert 0.0 < phase_illumination(0.72, 1.34, d) < 1.0


def test_brightness_score_scales_with_albedo_and_distance():
    from pyorrery.observation import brightness_score

    base = brightness_score(0.5, 6000.0, 1.0, 2.0, 1.0)
    assert brightness_score(1.0, 6000.0, 1.0, 2.0, 1.0) == pytest.approx(2.0 * base)
    assert brightness_score(0.5, 6000.0, 1.0, 4.0, 1.0) == pytest.approx(base / 4.0)
    assert brightness_score(0.5, 6000.0, 1.0, 2.0, 0.0) == 0.0


def _twin_system():
    from dataclasses import replace

    from pyorrery.bodies import NeighborPlanet, default_system

    base = default_system()
    planet = base.planet
    twin = NeighborPlanet(
        "Gemina (Terrax-B)", 3000.0, 0.3, "#ffffff",
        semi_major_axis_au=planet.semi_major_axis_au,
        orbital_period_days=planet.orbital_period_earth_days,
        eccentricity=planet.orbital_eccentricity,
        periapsis_argument_deg=planet.periapsis_longitude_deg,
    )
    return replace(base, neighbors=(twin,) + base.neighbors)


def test_neighbor_sharing_home_orbit_stays_finite():
    from pyorrery.observation import observe_neighbors

    obs = {o.name: o for o in observe_neighbors(100.0, _twin_system())}
    assert len(obs) == 7
    twin = obs["Gemina"]
    assert twin.distance_au == 0.0
    assert twin.illumination == 1.0
    assert twin.brightness == 0.0
    for o in obs.values():
        assert np.isfinite(o.brightness) and np.isfinite(o.illumination)


def test_zero_distance_helpers():
    from pyorrery.observation import brightness_score, phase_illumination

    assert phase_illumination(1.34, 1.34, 0.0) == 1.0
    assert brightness_score(0.3, 3000.0, 1.34, 0.0, 1.0) == 0.0


def test_snapshot_with_neighbor_on_home_orbit():
    from pyorrery.world import SimConfig, TerraxWorld

    snap = TerraxWorld(SimConfig(start_day=100.0), _twin_system()).snapshot()
    assert len(snap.neighbors) == 7
    assert [n.brightness_rank for n in snap.neighbors] == list(range(1, 8))
    assert snap.neighbors[-1].name == "Gemina"
