import numpy as np
import pytest


def test_almanac_covers_one_year():
    from pyorrery.almanac import compute_almanac

    alm = compute_almanac()
    n = 513
    for key in ("day", "month", "day_in_month", "season", "declination_deg", "daylight_hours", "tide",
                "luna_phase", "luna_illumination", "echo_phase", "echo_illumination"):
        assert key in alm
        assert len(alm[key]) == n
    assert alm["day"][0] == 1.0 and alm["day"][-1] == 513.0
    assert alm["month"][0] == 1
    assert alm["month"][-1] == -1
    assert alm["day_in_month"][-1] == 3
    assert np.all(np.diff(alm["season"]) >= 0)
    assert np.allclose(alm["daylight_hours"], 13.0)


def test_leap_year_almanac_is_one_day_shorter():
    from pyorrery.almanac import compute_almanac

    alm = compute_almanac(latitude_deg=60.0, leap_year=True)
    assert len(alm["day"]) == 512
    assert alm["day_in_month"][-1] == 2
    assert np.all((alm["daylight_hours"] >= 0.0) & (alm["daylight_hours"] <= 26.0))


def test_almanac_netcdf_roundtrip(tmp_path):
    pytest.importorskip("netCDF4")
    from pyorrery.almanac import compute_almanac, load_almanac, save_almanac

    alm = compute_almanac(latitude_deg=45.0)
    path = str(tmp_path / "sub" / "almanac.nc")
    save_almanac(path, alm, latitude_deg=45.0)
    back = load_almanac(path)

    assert set(back) == set(alm)
    assert np.array_equal(back["month"], alm["month"])
    assert np.allclose(back["daylight_hours"], alm["daylight_hours"], atol=1e-4)

    from netCDF4 import Dataset

    with Dataset(path) as ds:
        assert ds.getncattr("latitude_deg") == 45.0
        assert ds.getncattr("remainder_month") == -1
