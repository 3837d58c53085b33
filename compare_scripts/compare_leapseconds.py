"""
Leap Seconds Comparison Script

Compares TAI - UTC and UTC -> TT between libdeltat and skyfield, on both
sides of every leap second in the table.
"""

import sys

import libdeltat as dt
from libdeltat.constants import *
from comparison_utils import (
    format_value,
    format_diff,
    format_status,
    TestStatistics,
    print_header,
    parse_args,
    Tolerances,
)

# ============================================================================
# COMPARISON FUNCTIONS
# ============================================================================


def compare_epoch(label: str, jd_utc: float, ts, verbose: bool = False) -> tuple:
    """
    Compare TAI - UTC and UTC -> TT at one UTC epoch.

    Returns:
        (passed, max_diff, error_occurred)
    """
    year, month, day, hour = dt.revjul(jd_utc)
    t = ts.utc(year, month, day, hour)

    leap_sky = (t.tai - jd_utc) * SECONDS_PER_DAY
    leap_py = dt.cumulative_leap_seconds(jd_utc)
    diff_leap = abs(leap_py - leap_sky)

    diff_tt = abs(dt.utc2tt(jd_utc) - t.tt) * SECONDS_PER_DAY

    passed = diff_leap < Tolerances.LEAP_SECONDS and diff_tt < Tolerances.UTC_TT
    max_diff = max(diff_leap, diff_tt)

    if verbose or not passed:
        print(
            f"[{label}] [{year}-{month:02d}-{day:02d} {hour:5.2f}h] "
            f"PY={format_value(leap_py, 6, 10)} SKY={format_value(leap_sky, 6, 10)} "
            f"DiffLeap={format_diff(diff_leap)} DiffTT={format_diff(diff_tt)} "
            f"{format_status(passed)}"
        )

    return passed, max_diff, False


# ============================================================================
# MAIN COMPARISON RUNNER
# ============================================================================


def run_all_comparisons(verbose: bool = False) -> tuple:
    """
    Run leap second comparisons around every table row.

    Returns:
        (passed_count, total_count)
    """
    print_header("LEAP SECONDS COMPARISON")

    ts = dt.get_timescale()
    table = dt.get_leap_second_table()
    stats = TestStatistics()

    # skyfield models UTC from 1972 on, without the drifting 1960s offsets
    step_rows = [e for e in table if e.coefficient == 0.0]
    start = step_rows[0].jd

    for entry in step_rows:
        # half a day either side of the row keeps clear of the step itself
        for offset, label in ((-0.5, "before"), (0.5, "after")):
            jd = entry.jd + offset
            if jd < start:
                continue
            passed, diff, error = compare_epoch(
                f"{label:<6}", jd, ts, verbose=verbose
            )
            stats.add_result(passed, diff, error)

    stats.print_summary("LEAP SECONDS COMPARISON SUMMARY")

    return stats.passed, stats.total


# ============================================================================
# COMMAND LINE INTERFACE
# ============================================================================


def print_help():
    """Print usage help."""
    print("Usage: python compare_leapseconds.py [OPTIONS]")
    print()
    print("Options:")
    print("  -v, --verbose       Show every epoch, not only failures")
    print("  -h, --help          Show this help message")
    print()


def main():
    """Main entry point."""
    args = parse_args(sys.argv)

    if args["help"]:
        print_help()
        sys.exit(0)

    passed, total = run_all_comparisons(verbose=args["verbose"])

    sys.exit(0 if passed == total else 1)


if __name__ == "__main__":
    main()
