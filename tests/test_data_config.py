"""
Tests for data table configuration.

Tests the set_data_path(), set_deltat_file() and set_leap_second_file()
functions to ensure users can point the library at updated IERS files.
"""

import pytest
import libdeltat as dt
from libdeltat import state


def test_default_is_bundled_data():
    """Test that the bundled tables are used by default"""
    assert dt.get_data_path() is None
    assert dt.get_deltat_table().source == "libdeltat.data/deltat.dat"
    assert dt.get_leap_second_table().source == "libdeltat.data/leapsec.dat"


def test_tables_are_cached():
    """Test that repeated queries reuse one loaded table"""
    assert dt.get_deltat_table() is dt.get_deltat_table()
    assert dt.get_leap_second_table() is dt.get_leap_second_table()


def test_set_data_path_clears_cache(data_dir):
    """Test that set_data_path() drops the cached tables"""
    _ = dt.get_deltat_table()
    assert state._DELTAT_TABLE is not None

    dt.set_data_path(str(data_dir))

    assert state._DELTAT_TABLE is None
    assert state._LEAP_SECOND_TABLE is None
    assert dt.get_data_path() == str(data_dir)


def test_custom_iers_files(data_dir):
    """Test that raw IERS files in the data path replace the bundled tables"""
    dt.set_data_path(str(data_dir))
    dt.set_deltat_file("deltat.data")
    dt.set_leap_second_file("tai-utc.dat")

    assert len(dt.get_deltat_table()) == 3
    assert len(dt.get_leap_second_table()) == 3

    # 1973-02-15 is inside the small table
    assert dt.delta_t(2441728.5) == pytest.approx(43.4724 + 0.5 * (43.5648 - 43.4724))
    # after 1972-07-01 the small table has 11 s, not 37 s
    assert dt.cumulative_leap_seconds(2457754.5) == 11.0


def test_handed_out_table_unchanged(data_dir):
    """Test that reconfiguring never modifies a table already in use"""
    table = dt.get_deltat_table()
    size = len(table)

    dt.set_data_path(str(data_dir))
    dt.set_deltat_file("deltat.data")
    _ = dt.get_deltat_table()

    assert len(table) == size
    assert table is not dt.get_deltat_table()


def test_environment_variable(data_dir, monkeypatch):
    """Test that LIBDELTAT_DATA_PATH supplies the default data path"""
    monkeypatch.setenv(state.DATA_PATH_ENV, str(data_dir))
    dt.set_data_path(None)
    assert dt.get_data_path() == str(data_dir)

    dt.set_deltat_file("deltat.data")
    assert len(dt.get_deltat_table()) == 3


def test_missing_custom_file(tmp_path):
    """Test that a data path without the expected file raises on first use"""
    dt.set_data_path(str(tmp_path))
    with pytest.raises(FileNotFoundError):
        dt.get_deltat_table()


def test_unbundled_file_name_without_path():
    """Test that a custom file name needs a data path"""
    dt.set_deltat_file("deltat.data")
    with pytest.raises(FileNotFoundError):
        dt.get_deltat_table()


def test_malformed_custom_file(tmp_path):
    """Test that a malformed file raises TableError"""
    (tmp_path / "deltat.dat").write_text("2441742.5 43.5\n2441714.5 43.4\n")
    dt.set_data_path(str(tmp_path))
    with pytest.raises(dt.TableError):
        dt.get_deltat_table()


def test_context_tables_reload_after_reconfiguration(tmp_path):
    """Test that rewritten files reach new contexts once the configuration changes"""
    deltat_file = tmp_path / "deltat.dat"
    (tmp_path / "leapsec.dat").write_text("2441317.5 10.0 41317.0 0.0\n")
    deltat_file.write_text("2441714.5 40.0\n2441742.5 40.0\n")

    first = dt.TimeScaleContext(str(tmp_path))
    deltat_file.write_text("2441714.5 50.0\n2441742.5 50.0\n")

    # same directory, cached tables
    cached = dt.TimeScaleContext(str(tmp_path))
    assert cached.deltat_table is first.deltat_table
    assert cached.delta_t(2441720.5) == 40.0

    dt.set_data_path(None)

    reloaded = dt.TimeScaleContext(str(tmp_path))
    assert reloaded.delta_t(2441720.5) == 50.0
    assert first.delta_t(2441720.5) == 40.0
