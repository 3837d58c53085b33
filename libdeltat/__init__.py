from .constants import *
from .time_utils import (
    julday,
    revjul,
    fractional_year,
    is_leap_year,
    after_papal_reform,
)
from .tables import (
    DeltaTEntry,
    DeltaTTable,
    LeapSecondEntry,
    LeapSecondTable,
    TableError,
    load_deltat_table,
    load_leap_second_table,
    parse_deltat_table,
    parse_leap_second_table,
)
from .deltat import DeltaTSource, delta_t, delta_t_source, polynomial_delta_t
from .leapseconds import cumulative_leap_seconds
from .conversions import (
    tt2utc,
    utc2tt,
    tt2ut1,
    ut12tt,
    tt2tai,
    tai2tt,
    ut1_minus_utc,
    skyfield_time,
)
from .state import (
    set_data_path,
    get_data_path,
    set_deltat_file,
    set_leap_second_file,
    get_deltat_table,
    get_leap_second_table,
    get_timescale,
)
from .context import TimeScaleContext  # Independent table sets


__version__ = "0.1.0"
__license__ = "LGPL-3.0"

__all__ = [
    # Context API
    "TimeScaleContext",
    # Delta T
    "delta_t",
    "delta_t_source",
    "polynomial_delta_t",
    "DeltaTSource",
    # Leap seconds
    "cumulative_leap_seconds",
    # Conversions
    "tt2utc",
    "utc2tt",
    "tt2ut1",
    "ut12tt",
    "tt2tai",
    "tai2tt",
    "ut1_minus_utc",
    "skyfield_time",
    # Calendar
    "julday",
    "revjul",
    "fractional_year",
    "is_leap_year",
    "after_papal_reform",
    # Tables
    "DeltaTEntry",
    "DeltaTTable",
    "LeapSecondEntry",
    "LeapSecondTable",
    "TableError",
    "load_deltat_table",
    "load_leap_second_table",
    "parse_deltat_table",
    "parse_leap_second_table",
    # Configuration
    "set_data_path",
    "get_data_path",
    "set_deltat_file",
    "set_leap_second_file",
    "get_deltat_table",
    "get_leap_second_table",
    "get_timescale",
    # Constants
    "TT_MINUS_TAI",
    "SECONDS_PER_DAY",
    "J2000",
    "MJD_EPOCH",
    "GREGORIAN_REFORM_JD",
    "LEAP_SECOND_MARGIN_DAYS",
    "SE_GREG_CAL",
    "SE_JUL_CAL",
]
