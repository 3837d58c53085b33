"""
Delta T (TT - UT1) estimation for libdeltat.

Delta T cannot be computed from theory: it follows the irregular rotation
of the Earth. It is estimated two ways:
- Inside the tabulated span (1973 to the end of the IERS predictions):
  linear interpolation between the two bracketing table rows
- Outside it: the Espenak & Meeus (2006) polynomial fit, evaluated on the
  fractional calendar year

References:
- Espenak & Meeus, "Five Millennium Canon of Solar Eclipses" (NASA TP-2006-214141)
  http://eclipse.gsfc.nasa.gov/SEcat5/deltatpoly.html
- IERS Rapid Service/Prediction Center, deltat.data and deltat.preds
"""

import enum
from typing import Optional

from .state import get_deltat_table
from .tables import DeltaTTable
from .time_utils import fractional_year


class DeltaTSource(enum.Enum):
    """Where a Delta T value comes from, in decreasing order of accuracy."""

    OBSERVED = "observed"
    PREDICTED = "predicted"
    POLYNOMIAL = "polynomial"


def polynomial_delta_t(y: float) -> float:
    """
    Delta T from the Espenak & Meeus (2006) polynomials.

    Args:
        y: Fractional calendar year (e.g. 1900.5)

    Returns:
        float: Delta T in seconds

    Note:
        Each range is half-open: a year exactly on a boundary uses the
        later range. The fit is not continuous across all boundaries;
        the small jumps are part of the published expressions.
    """
    if y < -500:
        u = (y - 1820) / 100.0
        return -20 + 32 * u * u
    elif y < 500:
        u = y / 100.0
        return (
            10583.6
            - 1014.41 * u
            + 33.78311 * u**2
            - 5.952053 * u**3
            - 0.1798452 * u**4
            + 0.022174192 * u**5
            + 0.0090316521 * u**6
        )
    elif y < 1600:
        u = (y - 1000) / 100.0
        return (
            1574.2
            - 556.01 * u
            + 71.23472 * u**2
            + 0.319781 * u**3
            - 0.8503463 * u**4
            - 0.005050998 * u**5
            + 0.0083572073 * u**6
        )
    elif y < 1700:
        u = (y - 1600) / 100.0
        return 120 - 98.08 * u - 153.2 * u**2 + u**3 / 0.007129
    elif y < 1800:
        u = (y - 1700) / 100.0
        return 8.83 + 16.03 * u - 59.285 * u**2 + 133.36 * u**3 - u**4 / 0.01174
    elif y < 1860:
        u = (y - 1800) / 100.0
        return (
            13.72
            - 33.2447 * u
            + 68.612 * u**2
            + 4111.6 * u**3
            - 37436 * u**4
            + 121272 * u**5
            - 169900 * u**6
            + 87500 * u**7
        )
    elif y < 1900:
        u = (y - 1860) / 100.0
        return (
            7.62
            + 57.37 * u
            - 2517.54 * u**2
            + 16806.68 * u**3
            - 44736.24 * u**4
            + u**5 / 0.0000233174
        )
    elif y < 1920:
        u = (y - 1900) / 100.0
        return -2.79 + 149.4119 * u - 598.939 * u**2 + 6196.6 * u**3 - 19700 * u**4
    elif y < 1941:
        u = (y - 1920) / 100.0
        return 21.20 + 84.493 * u - 761.00 * u**2 + 2093.6 * u**3
    elif y < 1961:
        u = (y - 1950) / 100.0
        return 29.07 + 40.7 * u - u**2 / 0.0233 + u**3 / 0.002547
    elif y < 1986:
        u = (y - 1975) / 100.0
        return 45.45 + 106.7 * u - u**2 / 0.026 - u**3 / 0.000718
    elif y < 2005:
        u = (y - 2000) / 100.0
        return (
            63.86
            + 33.45 * u
            - 603.74 * u**2
            + 1727.5 * u**3
            + 65181.4 * u**4
            + 237359.9 * u**5
        )
    elif y < 2050:
        u = (y - 2000) / 100.0
        return 62.92 + 32.217 * u + 55.89 * u**2
    elif y < 2150:
        u = (y - 1820) / 100.0
        return -205.72 + 56.28 * u + 32 * u**2
    else:
        u = (y - 1820) / 100.0
        return -20 + 32 * u * u


def _interpolate(table: DeltaTTable, jd: float) -> float:
    index = table.search(jd)
    assert 0 < index < len(table), f"no bracketing Delta T rows for JD {jd}"

    lo, hi = table[index - 1], table[index]
    return (jd - lo.jd) / (hi.jd - lo.jd) * (hi.delta_t - lo.delta_t) + lo.delta_t


def delta_t(jd: float, *, deltat_table: Optional[DeltaTTable] = None) -> float:
    """
    Calculate Delta T (TT - UT1) for a given Julian Day.

    Args:
        jd: Julian Day number
        deltat_table: Table to interpolate from (default: the process table)

    Returns:
        float: Delta T in seconds

    Note:
        Never raises for a finite Julian Day. Accuracy degrades from
        observed table rows (milliseconds) to predicted rows (up to a few
        seconds at the table end) to the polynomial fit (seconds to hours
        for ancient dates); see delta_t_source().

        J2000.0: ~63.83 seconds
        There is a jump of several seconds where the table hands over to
        the polynomial at its last row.
    """
    table = deltat_table if deltat_table is not None else get_deltat_table()
    if table.covers(jd):
        return _interpolate(table, jd)
    return polynomial_delta_t(fractional_year(jd))


def delta_t_source(
    jd: float, *, deltat_table: Optional[DeltaTTable] = None
) -> DeltaTSource:
    """
    Report which data delta_t(jd) is computed from.

    Args:
        jd: Julian Day number
        deltat_table: Table to inspect (default: the process table)

    Returns:
        DeltaTSource: OBSERVED or PREDICTED for table interpolation (by the
        later of the two bracketing rows), POLYNOMIAL otherwise
    """
    table = deltat_table if deltat_table is not None else get_deltat_table()
    if not table.covers(jd):
        return DeltaTSource.POLYNOMIAL
    if table[table.search(jd)].predicted:
        return DeltaTSource.PREDICTED
    return DeltaTSource.OBSERVED
