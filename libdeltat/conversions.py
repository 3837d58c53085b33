"""
Time scale conversions for libdeltat.

Converts Julian Days between:
- TT  (Terrestrial Time): uniform scale used by ephemerides
- TAI (International Atomic Time): TT - 32.184 s
- UT1 (Universal Time): Earth rotation angle, TT - Delta T
- UTC (Coordinated Universal Time): TAI - leap seconds

Every function accepts any Julian Day and never raises. UTC is only
defined from 1 January 1961; before that, and from 500 days after the
last known leap second on, the UTC functions use UT1 instead.
"""

import logging
from typing import Optional

from skyfield.timelib import Time

from .constants import SECONDS_PER_DAY, TT_MINUS_TAI
from .deltat import delta_t
from .leapseconds import cumulative_leap_seconds
from .state import get_leap_second_table, get_timescale
from .tables import DeltaTTable, LeapSecondTable

logger = logging.getLogger(__name__)


def tt2ut1(jd: float, *, deltat_table: Optional[DeltaTTable] = None) -> float:
    """Convert a TT Julian Day to UT1 (subtract Delta T)."""
    return jd - delta_t(jd, deltat_table=deltat_table) / SECONDS_PER_DAY


def ut12tt(jd: float, *, deltat_table: Optional[DeltaTTable] = None) -> float:
    """Convert a UT1 Julian Day to TT (add Delta T)."""
    return jd + delta_t(jd, deltat_table=deltat_table) / SECONDS_PER_DAY


def tt2tai(jd: float) -> float:
    """Convert a TT Julian Day to TAI."""
    return jd - TT_MINUS_TAI / SECONDS_PER_DAY


def tai2tt(jd: float) -> float:
    """Convert a TAI Julian Day to TT."""
    return jd + TT_MINUS_TAI / SECONDS_PER_DAY


def _in_utc_window(jd: float, leap_table: Optional[LeapSecondTable]) -> bool:
    table = leap_table if leap_table is not None else get_leap_second_table()
    start, end = table.window
    return start <= jd <= end


def tt2utc(
    jd: float,
    *,
    deltat_table: Optional[DeltaTTable] = None,
    leap_table: Optional[LeapSecondTable] = None,
) -> float:
    """
    Convert a TT Julian Day to UTC.

    Args:
        jd: Julian Day (TT)
        deltat_table: Delta T table (default: the process table)
        leap_table: Leap second table (default: the process table)

    Returns:
        float: Julian Day (UTC)

    Note:
        Outside the leap second window (before 1961-01-01, or more than
        500 days after the last leap second) this returns tt2ut1(jd).
    """
    if not _in_utc_window(jd, leap_table):
        logger.debug("JD %s outside leap second window, using UT1 for UTC", jd)
        return tt2ut1(jd, deltat_table=deltat_table)

    dt = delta_t(jd, deltat_table=deltat_table)
    ut1 = jd - dt / SECONDS_PER_DAY
    leap_seconds = cumulative_leap_seconds(jd, leap_table=leap_table)
    return ut1 + (dt - leap_seconds - TT_MINUS_TAI) / SECONDS_PER_DAY


def utc2tt(
    jd: float,
    *,
    deltat_table: Optional[DeltaTTable] = None,
    leap_table: Optional[LeapSecondTable] = None,
) -> float:
    """
    Convert a UTC Julian Day to TT.

    Args:
        jd: Julian Day (UTC)
        deltat_table: Delta T table (default: the process table)
        leap_table: Leap second table (default: the process table)

    Returns:
        float: Julian Day (TT)

    Note:
        Outside the leap second window this returns ut12tt(jd).
    """
    if not _in_utc_window(jd, leap_table):
        logger.debug("JD %s outside leap second window, using UT1 for UTC", jd)
        return ut12tt(jd, deltat_table=deltat_table)

    dt = delta_t(jd, deltat_table=deltat_table)
    leap_seconds = cumulative_leap_seconds(jd, leap_table=leap_table)
    ut1 = jd - (dt - leap_seconds - TT_MINUS_TAI) / SECONDS_PER_DAY
    return ut1 + dt / SECONDS_PER_DAY


def ut1_minus_utc(
    jd: float,
    *,
    deltat_table: Optional[DeltaTTable] = None,
    leap_table: Optional[LeapSecondTable] = None,
) -> float:
    """
    Calculate UT1 - UTC in seconds.

    Args:
        jd: Julian Day, taken as UT1
        deltat_table: Delta T table (default: the process table)
        leap_table: Leap second table (default: the process table)

    Returns:
        float: UT1 - UTC in seconds (within +-0.9 s while leap seconds are kept)

    Note:
        Delta T and the leap seconds are looked up at jd itself although
        both tables are indexed by TT; the ~1 minute offset is below the
        resolution of either table except right at a leap second.
    """
    dt = delta_t(jd, deltat_table=deltat_table)
    leap_seconds = cumulative_leap_seconds(jd, leap_table=leap_table)
    jd_utc = jd + (dt - leap_seconds - TT_MINUS_TAI) / SECONDS_PER_DAY
    return (jd - jd_utc) * SECONDS_PER_DAY


_TO_TT = {
    "tt": lambda jd, deltat_table, leap_table: jd,
    "tai": lambda jd, deltat_table, leap_table: tai2tt(jd),
    "ut1": lambda jd, deltat_table, leap_table: ut12tt(jd, deltat_table=deltat_table),
    "utc": lambda jd, deltat_table, leap_table: utc2tt(
        jd, deltat_table=deltat_table, leap_table=leap_table
    ),
}


def skyfield_time(
    jd: float,
    scale: str = "tt",
    *,
    deltat_table: Optional[DeltaTTable] = None,
    leap_table: Optional[LeapSecondTable] = None,
) -> Time:
    """
    Build a skyfield Time from a Julian Day on any supported scale.

    Args:
        jd: Julian Day
        scale: "tt", "tai", "ut1" or "utc"
        deltat_table: Delta T table (default: the process table)
        leap_table: Leap second table (default: the process table)

    Returns:
        Time: skyfield Time at the equivalent TT instant, converted with
        this library's Delta T and leap seconds

    Raises:
        ValueError: If the scale is unknown
    """
    try:
        to_tt = _TO_TT[scale.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown time scale: {scale!r} (expected one of {', '.join(_TO_TT)})"
        ) from None
    return get_timescale().tt_jd(to_tt(jd, deltat_table, leap_table))
