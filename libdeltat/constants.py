"""
Constants for libdeltat.

Physical offsets between time scales, Julian Day epochs and the
calendar flags shared with the Swiss Ephemeris style calendar functions.
"""

# =============================================================================
# TIME SCALE OFFSETS
# =============================================================================

TT_MINUS_TAI = 32.184  # seconds, fixed by definition of TT
SECONDS_PER_DAY = 86400.0

# =============================================================================
# EPOCHS (Julian Day)
# =============================================================================

J2000 = 2451545.0  # 2000-01-01 12:00 TT
MJD_EPOCH = 2400000.5  # MJD = JD - MJD_EPOCH
GREGORIAN_REFORM_JD = 2299160.5  # 1582-10-15 00:00 (Gregorian)

# UTC is modelled with leap seconds from the first tai-utc row until this
# many days after the last one; outside that window UTC is taken as UT1.
LEAP_SECOND_MARGIN_DAYS = 500.0

# =============================================================================
# CALENDAR FLAGS
# =============================================================================

SE_JUL_CAL = 0
SE_GREG_CAL = 1
