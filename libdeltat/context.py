"""
Self-contained time scale context for libdeltat.

A TimeScaleContext binds one Delta T table and one leap second table and
exposes every conversion as a method. Use it to work with a data set other
than the process default (set_data_path) without touching global state,
e.g. comparing two IERS releases side by side from different threads.

Contexts opened on the same data directory share the loaded tables
until the process configuration is next changed.
"""

import os
from typing import Optional

from skyfield.timelib import Time

from . import conversions
from .deltat import DeltaTSource, delta_t, delta_t_source
from .leapseconds import cumulative_leap_seconds
from .state import _tables_for, get_deltat_table, get_leap_second_table
from .tables import (
    DELTAT_FILE,
    LEAP_SECOND_FILE,
    DeltaTTable,
    LeapSecondTable,
)


class TimeScaleContext:
    """
    Time scale conversions over a fixed pair of tables.

    Args:
        data_path: Directory with the data files; None for the process
                   default tables
        deltat_file: Delta T file name inside data_path
        leap_second_file: Leap second file name inside data_path
        deltat_table: Explicit Delta T table (overrides data_path)
        leap_table: Explicit leap second table (overrides data_path)

    Tables loaded from data_path are cached per directory and file names.
    Files rewritten in place are picked up after the next set_data_path(),
    set_deltat_file() or set_leap_second_file() call; contexts created
    before that keep the tables they were given.

    Example:
        >>> ctx = TimeScaleContext()
        >>> round(ctx.delta_t(2451545.0), 2)
        63.83
    """

    def __init__(
        self,
        data_path: Optional[str] = None,
        deltat_file: str = DELTAT_FILE,
        leap_second_file: str = LEAP_SECOND_FILE,
        *,
        deltat_table: Optional[DeltaTTable] = None,
        leap_table: Optional[LeapSecondTable] = None,
    ):
        if data_path is not None and (deltat_table is None or leap_table is None):
            loaded = _tables_for(os.path.abspath(data_path), deltat_file, leap_second_file)
            if deltat_table is None:
                deltat_table = loaded[0]
            if leap_table is None:
                leap_table = loaded[1]

        if deltat_table is None:
            deltat_table = get_deltat_table()
        if leap_table is None:
            leap_table = get_leap_second_table()

        self.deltat_table = deltat_table
        self.leap_table = leap_table

    def __repr__(self) -> str:
        return (
            f"TimeScaleContext(deltat={self.deltat_table.source!r}, "
            f"leap_seconds={self.leap_table.source!r})"
        )

    # =========================================================================
    # ESTIMATORS
    # =========================================================================

    def delta_t(self, jd: float) -> float:
        """Delta T (TT - UT1) in seconds."""
        return delta_t(jd, deltat_table=self.deltat_table)

    def delta_t_source(self, jd: float) -> DeltaTSource:
        """Which data delta_t(jd) is computed from."""
        return delta_t_source(jd, deltat_table=self.deltat_table)

    def cumulative_leap_seconds(self, jd: float) -> float:
        """TAI - UTC in seconds."""
        return cumulative_leap_seconds(jd, leap_table=self.leap_table)

    # =========================================================================
    # CONVERSIONS
    # =========================================================================

    def tt2ut1(self, jd: float) -> float:
        return conversions.tt2ut1(jd, deltat_table=self.deltat_table)

    def ut12tt(self, jd: float) -> float:
        return conversions.ut12tt(jd, deltat_table=self.deltat_table)

    def tt2utc(self, jd: float) -> float:
        return conversions.tt2utc(
            jd, deltat_table=self.deltat_table, leap_table=self.leap_table
        )

    def utc2tt(self, jd: float) -> float:
        return conversions.utc2tt(
            jd, deltat_table=self.deltat_table, leap_table=self.leap_table
        )

    def tt2tai(self, jd: float) -> float:
        return conversions.tt2tai(jd)

    def tai2tt(self, jd: float) -> float:
        return conversions.tai2tt(jd)

    def ut1_minus_utc(self, jd: float) -> float:
        return conversions.ut1_minus_utc(
            jd, deltat_table=self.deltat_table, leap_table=self.leap_table
        )

    def skyfield_time(self, jd: float, scale: str = "tt") -> Time:
        return conversions.skyfield_time(
            jd, scale, deltat_table=self.deltat_table, leap_table=self.leap_table
        )
