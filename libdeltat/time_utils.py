"""
Calendar utilities for libdeltat.

Implements the calendar side of the time scale conversions:
- Calendar dates to Julian Day numbers and back
- Gregorian and Julian calendar systems
- Julian Day to fractional calendar year (used to select Delta T polynomials)

All algorithms follow Meeus "Astronomical Algorithms" (1998), chapter 7,
with floor division so that dates before JD 0 (year -4712) work as well.
"""

import math
from typing import Optional

from .constants import SE_GREG_CAL, SE_JUL_CAL, GREGORIAN_REFORM_JD


def julday(
    year: int, month: int, day: int, hour: float = 0.0, gregflag: int = SE_GREG_CAL
) -> float:
    """
    Convert calendar date to Julian Day number.

    Args:
        year: Astronomical year (0 = 1 BCE, -1 = 2 BCE, ...)
        month: Month (1-12)
        day: Day of month (1-31)
        hour: Decimal hour (0.0-23.999...)
        gregflag: SE_GREG_CAL (1) for Gregorian, SE_JUL_CAL (0) for Julian

    Returns:
        float: Julian Day number (days since JD 0.0 = noon Jan 1, 4713 BCE)

    Note:
        Transition date: Oct 15, 1582 (Gregorian) = Oct 5, 1582 (Julian)
        JD 2451545.0 = Jan 1, 2000 12:00 (J2000.0 epoch)
    """
    if month <= 2:
        year -= 1
        month += 12

    if gregflag == SE_GREG_CAL:
        a = math.floor(year / 100)
        b = 2 - a + math.floor(a / 4)
    else:
        b = 0

    jd = (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + hour / 24.0
        + b
        - 1524.5
    )
    return jd


def after_papal_reform(jd: float) -> bool:
    """True if the Julian Day falls on or after 15 October 1582 (Gregorian)."""
    return jd >= GREGORIAN_REFORM_JD


def is_leap_year(year: int, gregorian: bool = True) -> bool:
    """
    Leap year rule for the Gregorian or the Julian calendar.

    The Julian calendar has a leap day every fourth year; the Gregorian
    calendar drops it in century years not divisible by 400.
    """
    if gregorian:
        if year % 100 == 0:
            return year % 400 == 0
        return year % 4 == 0
    return year % 4 == 0


def revjul(
    jd: float, gregflag: Optional[int] = None
) -> tuple[int, int, int, float]:
    """
    Convert Julian Day number to calendar date.

    Args:
        jd: Julian Day number
        gregflag: SE_GREG_CAL (1) for Gregorian, SE_JUL_CAL (0) for Julian,
                  None to use the calendar in force on that day

    Returns:
        tuple: (year, month, day, hour) where:
            - year: Astronomical year
            - month: Month (1-12)
            - day: Integer day of month
            - hour: Decimal hour (0.0-23.999...)
    """
    if gregflag is None:
        gregorian = after_papal_reform(jd)
    else:
        gregorian = gregflag == SE_GREG_CAL

    jd = jd + 0.5
    z = math.floor(jd)
    f = jd - z

    if gregorian:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)
    else:
        a = z

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e) + f
    if e < 14:
        month = e - 1
    else:
        month = e - 13

    if month > 2:
        year = c - 4716
    else:
        year = c - 4715

    d_int = math.floor(day)
    hour = (day - d_int) * 24.0

    return year, month, d_int, hour


def fractional_year(jd: float) -> float:
    """
    Convert a Julian Day to a calendar year with a fractional part.

    Args:
        jd: Julian Day number

    Returns:
        float: e.g. 2000.0 for 2000-01-01 00:00, ~2000.5 in early July 2000

    Note:
        The date is read in the calendar in force on that day (Julian before
        the 1582 reform, Gregorian after). The fraction is the time elapsed
        since 1 January of that year divided by the length of the year
        (365 or 366 days).
    """
    gregorian = after_papal_reform(jd)
    year = revjul(jd, SE_GREG_CAL if gregorian else SE_JUL_CAL)[0]

    jan1 = julday(year, 1, 1, 0.0, SE_GREG_CAL if year > 1582 else SE_JUL_CAL)
    days_in_year = 366 if is_leap_year(year, gregorian) else 365

    return year + (jd - jan1) / days_in_year
