"""
Unit tests for time scale conversions (TT, TAI, UT1, UTC).
"""

import pytest
import libdeltat as dt
from libdeltat.constants import *
from libdeltat.state import get_timescale


JD_2017 = 2457754.5  # 2017-01-01 00:00


@pytest.mark.unit
class TestUT1:
    """Tests for TT <-> UT1."""

    def test_tt2ut1_j2000(self, standard_jd):
        expected = standard_jd - dt.delta_t(standard_jd) / SECONDS_PER_DAY
        assert dt.tt2ut1(standard_jd) == expected
        assert dt.tt2ut1(standard_jd) < standard_jd

    def test_ut12tt_j2000(self, standard_jd):
        expected = standard_jd + dt.delta_t(standard_jd) / SECONDS_PER_DAY
        assert dt.ut12tt(standard_jd) == expected

    def test_roundtrip(self, default_tolerances):
        for jd in (2415100.5, 2441714.5, 2451545.0, 2460000.5, 2470000.5):
            assert dt.tt2ut1(dt.ut12tt(jd)) == pytest.approx(
                jd, abs=default_tolerances["jd"]
            )


@pytest.mark.unit
class TestTAI:
    """Tests for TT <-> TAI."""

    def test_fixed_offset(self, standard_jd):
        assert dt.tt2tai(standard_jd) == standard_jd - 32.184 / 86400.0
        assert dt.tai2tt(standard_jd) == standard_jd + 32.184 / 86400.0

    def test_roundtrip(self, standard_jd, default_tolerances):
        assert dt.tai2tt(dt.tt2tai(standard_jd)) == pytest.approx(
            standard_jd, abs=default_tolerances["jd"]
        )


@pytest.mark.unit
class TestUTC:
    """Tests for TT <-> UTC inside the leap second window."""

    def test_tt2utc_2017(self, default_tolerances):
        """TT - UTC = 37 + 32.184 s from 2017 on."""
        assert dt.tt2utc(JD_2017) == pytest.approx(
            JD_2017 - 69.184 / SECONDS_PER_DAY, abs=default_tolerances["jd"]
        )

    def test_utc2tt_2017(self, default_tolerances):
        assert dt.utc2tt(JD_2017) == pytest.approx(
            JD_2017 + 69.184 / SECONDS_PER_DAY, abs=default_tolerances["jd"]
        )

    def test_mutual_inverse_2017(self):
        """UTC -> TT -> UTC at the 2017 leap second returns the input."""
        assert dt.tt2utc(dt.utc2tt(JD_2017)) == pytest.approx(JD_2017, abs=1e-6)

    def test_roundtrip(self, default_tolerances):
        """Away from a leap second UTC2TT inverts TT2UTC across the window."""
        leap_table = dt.get_leap_second_table()
        start, end = leap_table.window
        steps = [e.jd for e in leap_table] + [end]

        # noon of every table row; rows and steps both fall on midnights
        samples = [e.jd + 0.5 for e in dt.get_deltat_table()]
        samples += [jd + 0.5 for jd in steps[:-1]]
        samples += [(a + b) / 2 for a, b in zip(steps, steps[1:])]
        samples = [jd for jd in samples if start <= jd <= end]
        assert len(samples) > 500

        for jd in samples:
            assert dt.utc2tt(dt.tt2utc(jd)) == pytest.approx(
                jd, abs=default_tolerances["utc_roundtrip"]
            ), jd

    def test_pre_1972_drift(self, default_tolerances):
        """In the 1960s TT - UTC includes the fractional drifting offset."""
        jd = 2439000.5
        leap = 3.74013 + 239 * 0.001296
        assert dt.tt2utc(jd) == pytest.approx(
            jd - (leap + TT_MINUS_TAI) / SECONDS_PER_DAY, abs=default_tolerances["jd"]
        )

    def test_matches_skyfield(self, default_tolerances):
        """UTC -> TT agrees with skyfield's own leap second handling."""
        ts = get_timescale()
        for year in (1975, 1990, 2000, 2010, 2017):
            jd_utc = dt.julday(year, 3, 1, 6.0)
            t = ts.utc(year, 3, 1, 6)
            assert dt.utc2tt(jd_utc) == pytest.approx(
                t.tt, abs=default_tolerances["jd"]
            ), f"Failed for {year}"


@pytest.mark.unit
class TestUTCFallback:
    """Tests for the UT1 fallback outside the leap second window."""

    @pytest.mark.parametrize("year", [1000, 1900, 1960, 2200])
    def test_tt2utc_equals_tt2ut1(self, year):
        jd = dt.julday(year, 6, 1, 0.0, SE_GREG_CAL if year > 1582 else SE_JUL_CAL)
        assert dt.tt2utc(jd) == dt.tt2ut1(jd)
        assert dt.utc2tt(jd) == dt.ut12tt(jd)

    def test_window_bounds(self):
        table = dt.get_leap_second_table()
        start, end = table.window
        assert start == 2437300.5
        assert end == 2457754.5 + 500

        # inside: leap seconds applied
        assert dt.tt2utc(start) != dt.tt2ut1(start)
        assert dt.tt2utc(end) != dt.tt2ut1(end)
        # outside: UT1 used
        assert dt.tt2utc(start - 0.1) == dt.tt2ut1(start - 0.1)
        assert dt.tt2utc(end + 0.1) == dt.tt2ut1(end + 0.1)

    def test_recent_dates_fall_back(self):
        """More than 500 days after the 2017 leap second UTC is taken as UT1."""
        jd = dt.julday(2025, 1, 1)
        assert dt.tt2utc(jd) == dt.tt2ut1(jd)


@pytest.mark.unit
class TestUT1MinusUTC:
    """Tests for UT1 - UTC."""

    def test_j2000(self, standard_jd):
        """UT1 - UTC at J2000 is about +0.355 s."""
        expected = -(dt.delta_t(standard_jd) - 32.0 - TT_MINUS_TAI)
        value = dt.ut1_minus_utc(standard_jd)
        assert value == pytest.approx(expected, abs=1e-4)
        assert 0.3 < value < 0.4

    def test_formula(self):
        """Input is used directly as the lookup epoch for both tables."""
        jd = 2455000.5
        expected = -(
            dt.delta_t(jd) - dt.cumulative_leap_seconds(jd) - TT_MINUS_TAI
        )
        assert dt.ut1_minus_utc(jd) == pytest.approx(expected, abs=1e-4)

    def test_within_leap_second_tolerance(self):
        """While leap seconds were kept, |UT1 - UTC| stays below 0.9 s."""
        for entry in dt.get_deltat_table():
            if entry.predicted:
                continue
            assert abs(dt.ut1_minus_utc(entry.jd)) < 0.95, entry


@pytest.mark.integration
class TestSkyfieldTime:
    """Tests for handing converted times to skyfield."""

    def test_tt(self, standard_jd, default_tolerances):
        t = dt.skyfield_time(standard_jd)
        assert t.tt == pytest.approx(standard_jd, abs=default_tolerances["jd"])

    def test_scales(self, standard_jd, default_tolerances):
        tol = default_tolerances["jd"]
        assert dt.skyfield_time(standard_jd, "tai").tt == pytest.approx(
            dt.tai2tt(standard_jd), abs=tol
        )
        assert dt.skyfield_time(standard_jd, "UT1").tt == pytest.approx(
            dt.ut12tt(standard_jd), abs=tol
        )
        assert dt.skyfield_time(standard_jd, "utc").tt == pytest.approx(
            dt.utc2tt(standard_jd), abs=tol
        )

    def test_unknown_scale(self, standard_jd):
        with pytest.raises(ValueError) as exc_info:
            dt.skyfield_time(standard_jd, "tcb")
        assert "Unknown time scale" in str(exc_info.value)

    def test_delta_t_vs_skyfield(self, default_tolerances):
        """Observed Delta T agrees with skyfield's IERS-based values."""
        ts = get_timescale()
        for year in range(1975, 2019, 4):
            jd = dt.julday(year, 7, 1)
            assert abs(dt.delta_t(jd) - ts.tt_jd(jd).delta_t) < default_tolerances[
                "delta_t_skyfield"
            ], f"Failed for {year}"
