import numpy as np
import pytest


def test_zero_eccentricity_returns_mean_anomaly_exactly():
    from pyorrery.kepler import solve_kepler

    M = np.linspace(-10.0, 10.0, 1001)
    E = solve_kepler(M, 0.0)
    assert np.array_equal(E, M)
    assert solve_kepler(1.2345, 0.0) == 1.2345


@pytest.mark.parametrize("e", [0.0, 0.055, 0.12, 0.2])
def test_fixed_iteration_residual_below_ceiling(e):
    from pyorrery.kepler import solve_kepler

    M = np.linspace(0.0, 2.0 * np.pi, 2001)
    E = solve_kepler(M, e)
    assert np.max(np.abs(E - e * np.sin(E) - M)) < 1e-3


def test_fixed_iteration_close_to_newton_reference():
    from pyorrery.kepler import solve_kepler, solve_kepler_newton

    M = np.linspace(0.0, 2.0 * np.pi, 257)
    for e in (0.055, 0.12):
        E_ref = solve_kepler_newton(M, e)
        assert np.max(np.abs(E_ref - e * np.sin(E_ref) - M)) < 1e-10
        assert np.max(np.abs(solve_kepler(M, e) - E_ref)) < 1e-3


def test_newton_scalar_input():
    from pyorrery.kepler import solve_kepler_newton

    E = solve_kepler_newton(1.0, 0.1)
    assert isinstance(E, float)
    assert abs(E - 0.1 * np.sin(E) - 1.0) < 1e-10


def test_exactly_four_iterations():
    from pyorrery.kepler import KEPLER_ITERATIONS, solve_kepler

    M, e = 2.0, 0.5
    E = M
    for _ in range(KEPLER_ITERATIONS):
        E = M + e * np.sin(E)
    assert KEPLER_ITERATIONS == 4
    assert solve_kepler(M, e) == pytest.approx(E, abs=0.0)


def test_true_anomaly_quadrants():
    from pyorrery.kepler import true_anomaly

    assert true_anomaly(0.0, 0.1) == pytest.approx(0.0)
    assert abs(true_anomaly(np.pi, 0.1)) == pytest.approx(np.pi)
    # eccentric orbits run ahead of the eccentric anomaly after periapsis
    assert true_anomaly(np.pi / 2.0, 0.1) > np.pi / 2.0


def test_elements_validation():
    from pyorrery.bodies import OrbitalElements

    with pytest.raises(ValueError):
        OrbitalElements(semi_major_axis=1.0, period=10.0, eccentricity=1.0)
    with pytest.raises(ValueError):
        OrbitalElements(semi_major_axis=1.0, period=0.0)
    with pytest.raises(ValueError):
        OrbitalElements(semi_major_axis=0.0, period=10.0)


def test_verify_calculation_table():
    import importlib

    mod = importlib.import_module("scripts.verify_calculation")
    rows = mod.kepler_error_table([0.0, 0.12], n=200)
    assert [r[0] for r in rows] == [0.0, 0.12]
    assert rows[0][1] < 1e-12 and rows[0][2] < 1e-12
    assert rows[1][1] < 1e-3 and rows[1][2] < 1e-3
