"""
pytest configuration

Goals:
- keep tests fast and deterministic
- avoid interactive plotting and file output during imports or quick runs
- pin the TX_* environment so SimConfig.from_env() sees known defaults
"""

import os
import sys

import pytest

# Ensure project root on sys.path for 'pyorrery' and 'scripts' imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(autouse=True)
def _tx_env(monkeypatch):
    # Force non-interactive backend for matplotlib (avoid display requirements)
    monkeypatch.setenv("MPLBACKEND", os.getenv("MPLBACKEND", "Agg"))
    # Known clock/config defaults unless a test overrides explicitly
    for name in (
        "TX_START_DAY",
        "TX_SPEED_DAYS_PER_SEC",
        "TX_TICK_SECONDS",
        "TX_LATITUDE_DEG",
        "TX_LEAP_YEAR",
        "TX_ORBIT_MODEL",
        "TX_PHASE_MODEL",
    ):
        monkeypatch.delenv(name, raising=False)
    # Short headless runs, no almanac output by default
    monkeypatch.setenv("TX_RUN_TICKS", os.getenv("TX_RUN_TICKS", "3"))
    monkeypatch.setenv("TX_ALMANAC_ENABLE", os.getenv("TX_ALMANAC_ENABLE", "0"))
    yield
