"""
Shared utilities for comparison scripts.

This module provides common classes, functions, and constants used across
all comparison scripts in the suite.
"""

from typing import List

# ============================================================================
# TOLERANCE THRESHOLDS
# ============================================================================


class Tolerances:
    """Tolerance thresholds for different comparison types."""

    # Delta T tolerances (seconds)
    # Observed values come from IERS on both sides
    DELTA_T_OBSERVED = 0.1
    # Predictions and polynomial fits differ between libraries
    DELTA_T_PREDICTED = 2.0
    DELTA_T_POLYNOMIAL = 20.0

    # TAI - UTC (seconds)
    LEAP_SECONDS = 0.001

    # UTC -> TT (seconds)
    UTC_TT = 0.001


# ============================================================================
# TEST EPOCHS
# ============================================================================

# Format: (Name, Year, Month, Day, Hour)
TABLE_EPOCHS = [
    ("Table start", 1973, 2, 1, 0.0),
    ("1980 observed", 1980, 5, 20, 14.5),
    ("1990 observed", 1990, 1, 15, 12.0),
    ("Standard J2000", 2000, 1, 1, 12.0),
    ("2005 observed", 2005, 6, 21, 0.0),
    ("2015 observed", 2015, 7, 1, 0.0),
    ("2017 observed", 2017, 1, 1, 0.0),
]

PREDICTED_EPOCHS = [
    ("2024 predicted", 2024, 11, 5, 9.0),
    ("2028 predicted", 2028, 1, 1, 0.0),
]

POLYNOMIAL_EPOCHS = [
    ("1600 polynomial", 1600, 1, 1, 12.0),
    ("1800 polynomial", 1800, 1, 1, 12.0),
    ("1950 polynomial", 1950, 10, 15, 22.0),
    ("2100 polynomial", 2100, 1, 1, 0.0),
]

ALL_EPOCHS = TABLE_EPOCHS + PREDICTED_EPOCHS + POLYNOMIAL_EPOCHS

# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================


def format_value(value: float, decimals: int = 6, width: int = 12) -> str:
    """Format a value in seconds with consistent width."""
    return f"{value:{width}.{decimals}f}"


def format_diff(value: float, decimals: int = 6, width: int = 10) -> str:
    """Format difference value with consistent width."""
    return f"{value:{width}.{decimals}f}"


def format_status(passed: bool) -> str:
    """Format pass/fail status."""
    return "✓" if passed else "✗"


# ============================================================================
# SUMMARY STATISTICS
# ============================================================================


class TestStatistics:
    """Tracks and reports test statistics."""

    def __init__(self):
        self.total = 0
        self.passed = 0
        self.failed = 0
        self.errors = 0
        self.max_diff = 0.0
        self.diff_sum = 0.0

    def add_result(self, passed: bool, diff: float = 0.0, error: bool = False):
        """Add a test result."""
        self.total += 1
        if error:
            self.errors += 1
        elif passed:
            self.passed += 1
        else:
            self.failed += 1

        if not error:
            self.max_diff = max(self.max_diff, diff)
            self.diff_sum += diff

    def avg_diff(self) -> float:
        """Calculate average difference (excluding errors)."""
        count = self.total - self.errors
        return self.diff_sum / count if count > 0 else 0.0

    def pass_rate(self) -> float:
        """Calculate pass rate (excluding errors)."""
        count = self.total - self.errors
        return (self.passed / count * 100) if count > 0 else 0.0

    def print_summary(self, title: str = "SUMMARY"):
        """Print formatted summary."""
        print()
        print("=" * 80)
        print(title)
        print("=" * 80)
        print(f"Total tests:   {self.total}")
        print(f"Passed:        {self.passed} ✓")
        print(f"Failed:        {self.failed} ✗")
        print(f"Errors:        {self.errors}")
        if self.total > self.errors:
            print(f"Pass rate:     {self.pass_rate():.1f}%")
            print(f"Max diff:      {self.max_diff:.6f}")
            print(f"Avg diff:      {self.avg_diff():.6f}")
        print("=" * 80)


# ============================================================================
# COMMAND LINE HELPERS
# ============================================================================


def parse_args(args: List[str]) -> dict:
    """Parse common command line arguments."""
    return {
        "verbose": "--verbose" in args or "-v" in args,
        "quiet": "--quiet" in args or "-q" in args,
        "help": "--help" in args or "-h" in args,
    }


def print_header(title: str):
    """Print formatted header."""
    print("=" * 80)
    print(title)
    print("=" * 80)
    print()
