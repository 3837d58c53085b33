"""
Leap second accounting (TAI - UTC) for libdeltat.

From 1961 to 1972 UTC ran at a rate offset from TAI, so TAI - UTC drifted
linearly between occasional steps. Since 1 January 1972 TAI - UTC only
changes by whole leap seconds. Both regimes are expressed by the same
table row: TAI - UTC = leap_seconds + (MJD - base_mjd) * coefficient.
"""

from typing import Optional

from .constants import MJD_EPOCH
from .state import get_leap_second_table
from .tables import LeapSecondTable


def cumulative_leap_seconds(
    jd: float, *, leap_table: Optional[LeapSecondTable] = None
) -> float:
    """
    Total leap seconds (TAI - UTC) in force at a Julian Day.

    Args:
        jd: Julian Day number
        leap_table: Table to read from (default: the process table)

    Returns:
        float: TAI - UTC in seconds; 0.0 before 1 January 1961

    Note:
        Past the last row the last row's coefficients are extrapolated,
        which is a constant for the post-1972 rows (37.0 s since 2017).
    """
    table = leap_table if leap_table is not None else get_leap_second_table()
    if jd < table.first_jd:
        return 0.0

    index = table.search(jd)
    assert 0 < index <= len(table), f"no leap second row for JD {jd}"

    entry = table[index - 1]
    return entry.leap_seconds + (jd - MJD_EPOCH - entry.base_mjd) * entry.coefficient
