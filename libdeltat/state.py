"""
Global state management for libdeltat.

This module maintains the library's process-wide state:
- Delta T table (TT - UT1 samples)
- Leap second table (TAI - UTC coefficients)
- Data directory and file names the tables are read from
- Skyfield timescale (for handing converted times to skyfield)

Tables are loaded lazily on first use and are immutable afterwards.
Changing the data path or a file name drops the cached tables so the next
query loads fresh ones; a table already handed out is never modified,
which keeps concurrent queries safe without locking the query path.
"""

import logging
import os
import threading
from functools import lru_cache
from typing import Optional

from skyfield.api import Loader
from skyfield.timelib import Timescale

from .tables import (
    DELTAT_FILE,
    LEAP_SECOND_FILE,
    DeltaTTable,
    LeapSecondTable,
    load_deltat_table,
    load_leap_second_table,
)

logger = logging.getLogger(__name__)

DATA_PATH_ENV = "LIBDELTAT_DATA_PATH"

# =============================================================================
# GLOBAL STATE VARIABLES
# =============================================================================

_DATA_PATH: Optional[str] = None  # Custom data directory
_DELTAT_FILE: str = DELTAT_FILE  # Delta T file name inside the data directory
_LEAP_SECOND_FILE: str = LEAP_SECOND_FILE  # Leap second file name
_DELTAT_TABLE: Optional[DeltaTTable] = None  # Loaded Delta T table
_LEAP_SECOND_TABLE: Optional[LeapSecondTable] = None  # Loaded leap second table
_TS: Optional[Timescale] = None  # Skyfield timescale
_LOCK = threading.Lock()


def get_data_path() -> Optional[str]:
    """
    Get the directory data tables are read from.

    Returns:
        Optional[str]: Path set by set_data_path(), else the value of the
        LIBDELTAT_DATA_PATH environment variable, else None (bundled data)
    """
    if _DATA_PATH is not None:
        return _DATA_PATH
    return os.environ.get(DATA_PATH_ENV) or None


def _resolve(filename: str, bundled_name: str) -> Optional[str]:
    data_path = get_data_path()
    if data_path is None:
        if filename != bundled_name:
            raise FileNotFoundError(
                f"{filename} is not bundled with libdeltat; set a data path first"
            )
        return None
    return os.path.join(data_path, filename)


@lru_cache(maxsize=None)
def _tables_for(
    data_path: str, deltat_file: str, leap_second_file: str
) -> tuple[DeltaTTable, LeapSecondTable]:
    """Tables of one data directory, shared by every context opened on it."""
    return (
        load_deltat_table(os.path.join(data_path, deltat_file)),
        load_leap_second_table(os.path.join(data_path, leap_second_file)),
    )


def get_deltat_table() -> DeltaTTable:
    """
    Get or load the Delta T table.

    Returns:
        DeltaTTable: Table from the configured data path, or the bundled one

    Raises:
        FileNotFoundError: If the configured file does not exist
        TableError: If the file is malformed
    """
    global _DELTAT_TABLE
    table = _DELTAT_TABLE
    if table is None:
        with _LOCK:
            if _DELTAT_TABLE is None:
                _DELTAT_TABLE = load_deltat_table(_resolve(_DELTAT_FILE, DELTAT_FILE))
            table = _DELTAT_TABLE
    return table


def get_leap_second_table() -> LeapSecondTable:
    """
    Get or load the leap second table.

    Returns:
        LeapSecondTable: Table from the configured data path, or the bundled one

    Raises:
        FileNotFoundError: If the configured file does not exist
        TableError: If the file is malformed
    """
    global _LEAP_SECOND_TABLE
    table = _LEAP_SECOND_TABLE
    if table is None:
        with _LOCK:
            if _LEAP_SECOND_TABLE is None:
                _LEAP_SECOND_TABLE = load_leap_second_table(
                    _resolve(_LEAP_SECOND_FILE, LEAP_SECOND_FILE)
                )
            table = _LEAP_SECOND_TABLE
    return table


def _clear_tables() -> None:
    global _DELTAT_TABLE, _LEAP_SECOND_TABLE
    with _LOCK:
        _DELTAT_TABLE = None
        _LEAP_SECOND_TABLE = None
    _tables_for.cache_clear()


def set_data_path(path: Optional[str]) -> None:
    """
    Set the directory holding the data tables.

    Args:
        path: Directory containing the Delta T and leap second files,
              or None to go back to the bundled tables

    Note:
        The files are looked up under the names set by set_deltat_file()
        and set_leap_second_file() (default: deltat.dat, leapsec.dat).
        Both raw IERS files (deltat.data, tai-utc.dat) and the bundled
        column format are accepted. Tables are reloaded on next use.
    """
    global _DATA_PATH
    _DATA_PATH = path
    logger.debug("Data path set to %s", path)
    _clear_tables()


def set_deltat_file(filename: str) -> None:
    """
    Set the Delta T file name looked up in the data path.

    Args:
        filename: File name, e.g. "deltat.dat" or "deltat.data"
    """
    global _DELTAT_FILE
    _DELTAT_FILE = filename
    _clear_tables()


def set_leap_second_file(filename: str) -> None:
    """
    Set the leap second file name looked up in the data path.

    Args:
        filename: File name, e.g. "leapsec.dat" or "tai-utc.dat"
    """
    global _LEAP_SECOND_FILE
    _LEAP_SECOND_FILE = filename
    _clear_tables()


def get_timescale() -> Timescale:
    """
    Get or create the Skyfield timescale object.

    Returns:
        Timescale: Skyfield timescale built from the data files shipped with
        skyfield (no download)
    """
    global _TS
    if _TS is None:
        _TS = Loader(os.path.join(os.path.dirname(__file__), "..")).timescale(
            builtin=True
        )
    return _TS
