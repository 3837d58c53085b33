"""
pytest configuration and shared fixtures for libdeltat tests.
"""

import pytest
import libdeltat as dt
from libdeltat import state


# ============================================================================
# TEST DATA FIXTURES
# ============================================================================


@pytest.fixture
def standard_jd():
    """Standard Julian Day for testing (J2000.0)."""
    return 2451545.0  # 2000-01-01 12:00:00 TT


@pytest.fixture
def test_dates():
    """Collection of test dates spanning different eras."""
    return [
        (2000, 1, 1, 12.0, "J2000"),
        (1980, 5, 20, 0.0, "Past"),
        (2024, 11, 5, 18.0, "Recent"),
        (1950, 10, 15, 6.0, "Mid-century"),
    ]


@pytest.fixture
def leap_second_dates():
    """(year, month, day, TAI - UTC in force from that day)."""
    return [
        (1972, 1, 1, 10.0),
        (1972, 7, 1, 11.0),
        (1980, 1, 1, 19.0),
        (1999, 1, 1, 32.0),
        (2006, 1, 1, 33.0),
        (2012, 7, 1, 35.0),
        (2015, 7, 1, 36.0),
        (2017, 1, 1, 37.0),
    ]


@pytest.fixture
def data_dir(tmp_path):
    """A data directory holding small tables in the raw IERS formats."""
    (tmp_path / "deltat.data").write_text(
        " 1973  2  1  43.4724\n"
        " 1973  3  1  43.5648\n"
        " 1973  4  1  43.6737\n"
    )
    (tmp_path / "tai-utc.dat").write_text(
        " 1961 JAN  1 =JD 2437300.5  TAI-UTC=   1.4228180 S + (MJD - 37300.) X 0.001296 S\n"
        " 1972 JAN  1 =JD 2441317.5  TAI-UTC=  10.0       S + (MJD - 41317.) X 0.0      S\n"
        " 1972 JUL  1 =JD 2441499.5  TAI-UTC=  11.0       S + (MJD - 41317.) X 0.0      S\n"
    )
    return tmp_path


# ============================================================================
# TOLERANCE FIXTURES
# ============================================================================


@pytest.fixture
def default_tolerances():
    """Default tolerance values for comparisons."""
    return {
        "jd": 1e-8,  # days (~1 ms)
        "utc_roundtrip": 1e-9,  # days (~0.1 ms)
        "delta_t": 1e-6,  # seconds, against table values
        "delta_t_skyfield": 0.1,  # seconds, observed span
        "delta_t_swisseph": 1.0,  # seconds, different source tables
        "leap_seconds": 1e-3,  # seconds
    }


# ============================================================================
# SETUP/TEARDOWN
# ============================================================================


@pytest.fixture(autouse=True)
def reset_table_state(monkeypatch):
    """Run every test against the bundled tables."""
    monkeypatch.delenv(state.DATA_PATH_ENV, raising=False)
    dt.set_data_path(None)

    yield

    dt.set_deltat_file("deltat.dat")
    dt.set_leap_second_file("leapsec.dat")
    dt.set_data_path(None)


# ============================================================================
# MARKERS
# ============================================================================


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")
