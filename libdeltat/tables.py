"""
Reference data tables for libdeltat.

Two immutable tables back the time scale conversions:
- Delta T table: (JD, TT - UT1 seconds) rows, observed then predicted,
  from the IERS Rapid Service/Prediction Center
- Leap second table: TAI - UTC coefficients from the IERS tai-utc.dat series

Tables are read once from text files (the bundled copies live in
libdeltat/data) and never modified afterwards. Besides the bundled column
format the readers accept the raw IERS files (deltat.data, tai-utc.dat),
so that an updated download can be dropped in via set_data_path().
"""

import logging
import os
import re
from bisect import bisect_right
from dataclasses import dataclass, field
from importlib.resources import files
from typing import Iterable, Iterator, Optional, Union

from .constants import LEAP_SECOND_MARGIN_DAYS
from .time_utils import julday

logger = logging.getLogger(__name__)

DELTAT_FILE = "deltat.dat"
LEAP_SECOND_FILE = "leapsec.dat"

PathLike = Union[str, "os.PathLike[str]"]


class TableError(ValueError):
    """Raised when a data table is malformed or breaks its ordering rules."""


# =============================================================================
# ROW TYPES
# =============================================================================


@dataclass(frozen=True)
class DeltaTEntry:
    """One Delta T sample: TT - UT1 in seconds at a Julian Day."""

    jd: float
    delta_t: float
    predicted: bool = False


@dataclass(frozen=True)
class LeapSecondEntry:
    """
    One TAI - UTC coefficient row, in force from `jd` until the next row.

    TAI - UTC = leap_seconds + (JD - 2400000.5 - base_mjd) * coefficient

    Rows before 1972 drift linearly (coefficient != 0); from 1972 on the
    coefficient is zero and each row adds one whole leap second.
    """

    jd: float
    leap_seconds: float
    base_mjd: float
    coefficient: float


# =============================================================================
# TABLES
# =============================================================================


@dataclass(frozen=True)
class _Table:
    entries: tuple = field(repr=False)
    source: str = "<memory>"
    _jds: tuple = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "_jds", tuple(e.jd for e in self.entries))
        self._validate()

    def _validate(self) -> None:
        if not self.entries:
            raise TableError(f"{self.source}: table is empty")
        for previous, current in zip(self._jds, self._jds[1:]):
            if not current > previous:
                raise TableError(
                    f"{self.source}: Julian Days must be strictly increasing "
                    f"({previous} followed by {current})"
                )

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator:
        return iter(self.entries)

    def __getitem__(self, index: int):
        return self.entries[index]

    @property
    def first_jd(self) -> float:
        return self._jds[0]

    @property
    def last_jd(self) -> float:
        return self._jds[-1]

    def search(self, jd: float) -> int:
        """
        Index of the first entry whose Julian Day is strictly greater than jd.

        Returns len(self) when no such entry exists. Equivalent to scanning
        the table upwards and stopping at the first row past jd.
        """
        return bisect_right(self._jds, jd)


class DeltaTTable(_Table):
    """Ordered, immutable sequence of DeltaTEntry rows."""

    def _validate(self) -> None:
        super()._validate()
        if len(self.entries) < 2:
            raise TableError(f"{self.source}: need at least two Delta T rows")

    def covers(self, jd: float) -> bool:
        """True if jd can be interpolated from the table: first_jd <= jd < last_jd."""
        return self.first_jd <= jd < self.last_jd


class LeapSecondTable(_Table):
    """Ordered, immutable sequence of LeapSecondEntry rows."""

    def _validate(self) -> None:
        super()._validate()
        step_rows = [e for e in self.entries if e.coefficient == 0.0]
        for previous, current in zip(step_rows, step_rows[1:]):
            step = current.leap_seconds - previous.leap_seconds
            if step <= 0 or step != round(step):
                raise TableError(
                    f"{self.source}: leap seconds must grow in whole seconds "
                    f"(JD {previous.jd}: {previous.leap_seconds}, "
                    f"JD {current.jd}: {current.leap_seconds})"
                )

    @property
    def window(self) -> tuple[float, float]:
        """(first, last) JD of the interval in which UTC is modelled with leap seconds."""
        return self.first_jd, self.last_jd + LEAP_SECOND_MARGIN_DAYS


# =============================================================================
# PARSING
# =============================================================================

# 1961 JAN  1 =JD 2437300.5  TAI-UTC=   1.4228180 S + (MJD - 37300.) X 0.001296 S
_TAI_UTC_RE = re.compile(
    r"=JD\s*(?P<jd>[\d.]+)\s+TAI-UTC=\s*(?P<leap>[-\d.]+)\s*S"
    r"\s*\+\s*\(MJD\s*-\s*(?P<mjd>[\d.]+)\s*\)\s*X\s*(?P<coef>[-\d.]+)\s*S"
)


def _data_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    for number, line in enumerate(lines, start=1):
        line = line.split("#", 1)[0].strip()
        if line:
            yield number, line


def parse_deltat_table(lines: Iterable[str], source: str = "<memory>") -> DeltaTTable:
    """
    Build a DeltaTTable from text lines.

    Accepted row formats:
        2441714.5   43.4724            JD, Delta T
        2441714.5   43.4724    O       JD, Delta T, O(bserved) / P(redicted)
        1973  2  1  43.4724            IERS deltat.data (year month day Delta T)
    """
    entries = []
    for number, line in _data_lines(lines):
        fields = line.split()
        try:
            if len(fields) == 2:
                entry = DeltaTEntry(float(fields[0]), float(fields[1]))
            elif len(fields) == 3:
                status = fields[2].upper()
                if status not in ("O", "P"):
                    raise ValueError(f"unknown status {fields[2]!r}")
                entry = DeltaTEntry(float(fields[0]), float(fields[1]), status == "P")
            elif len(fields) == 4:
                year, month, day = (int(f) for f in fields[:3])
                entry = DeltaTEntry(julday(year, month, day), float(fields[3]))
            else:
                raise ValueError(f"expected 2 to 4 columns, got {len(fields)}")
        except ValueError as e:
            raise TableError(f"{source}, line {number}: {e}") from e
        entries.append(entry)

    return DeltaTTable(tuple(entries), source)


def parse_leap_second_table(
    lines: Iterable[str], source: str = "<memory>"
) -> LeapSecondTable:
    """
    Build a LeapSecondTable from text lines.

    Accepted row formats:
        2437300.5   1.4228180   37300   0.001296     JD, TAI-UTC, base MJD, drift
        1961 JAN  1 =JD 2437300.5  TAI-UTC=   1.4228180 S + (MJD - 37300.) X 0.001296 S
    """
    entries = []
    for number, line in _data_lines(lines):
        try:
            match = _TAI_UTC_RE.search(line)
            if match:
                values = [float(match.group(g)) for g in ("jd", "leap", "mjd", "coef")]
            else:
                fields = line.split()
                if len(fields) != 4:
                    raise ValueError(f"expected 4 columns, got {len(fields)}")
                values = [float(f) for f in fields]
        except ValueError as e:
            raise TableError(f"{source}, line {number}: {e}") from e
        entries.append(LeapSecondEntry(*values))

    return LeapSecondTable(tuple(entries), source)


# =============================================================================
# LOADING
# =============================================================================


def _read_lines(path: Optional[PathLike], bundled_name: str) -> tuple[list[str], str]:
    if path is None:
        resource = files("libdeltat.data").joinpath(bundled_name)
        with resource.open("r", encoding="ascii") as fp:
            return fp.readlines(), f"libdeltat.data/{bundled_name}"

    with open(path, "r", encoding="ascii") as fp:
        return fp.readlines(), os.fspath(path)


def load_deltat_table(path: Optional[PathLike] = None) -> DeltaTTable:
    """
    Load a Delta T table from a file.

    Args:
        path: File to read, or None for the bundled table

    Raises:
        FileNotFoundError: If the file does not exist
        TableError: If the file is malformed or not strictly ordered
    """
    lines, source = _read_lines(path, DELTAT_FILE)
    table = parse_deltat_table(lines, source)
    logger.info(
        "Loaded %d Delta T rows (JD %.2f - %.2f) from %s",
        len(table), table.first_jd, table.last_jd, source,
    )
    return table


def load_leap_second_table(path: Optional[PathLike] = None) -> LeapSecondTable:
    """
    Load a leap second table from a file.

    Args:
        path: File to read, or None for the bundled table

    Raises:
        FileNotFoundError: If the file does not exist
        TableError: If the file is malformed or breaks the leap second rules
    """
    lines, source = _read_lines(path, LEAP_SECOND_FILE)
    table = parse_leap_second_table(lines, source)
    logger.info(
        "Loaded %d leap second rows (JD %.2f - %.2f) from %s",
        len(table), table.first_jd, table.last_jd, source,
    )
    return table
