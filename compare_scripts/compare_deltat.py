"""
Delta T Comparison Script

Compares Delta T (TT - UT1) between libdeltat, pyswisseph and skyfield.
Tests observed, predicted and polynomial epochs.
"""

import sys

import swisseph as swe
import libdeltat as dt
from libdeltat import DeltaTSource
from libdeltat.constants import *
from comparison_utils import (
    format_value,
    format_diff,
    format_status,
    TestStatistics,
    print_header,
    parse_args,
    TABLE_EPOCHS,
    PREDICTED_EPOCHS,
    POLYNOMIAL_EPOCHS,
    Tolerances,
)

TOLERANCE = {
    DeltaTSource.OBSERVED: Tolerances.DELTA_T_OBSERVED,
    DeltaTSource.PREDICTED: Tolerances.DELTA_T_PREDICTED,
    DeltaTSource.POLYNOMIAL: Tolerances.DELTA_T_POLYNOMIAL,
}

# ============================================================================
# COMPARISON FUNCTIONS
# ============================================================================


def compare_deltat(
    name: str, date_str: str, jd: float, ts, verbose: bool = False
) -> tuple:
    """
    Compare Delta T for one epoch.

    Returns:
        (passed, max_diff, error_occurred)
    """
    try:
        dt_swe = swe.deltat(jd) * SECONDS_PER_DAY
    except Exception as e:
        if verbose:
            print(f"[{name}] [{date_str}]: SWE ERROR {e}")
        return False, 0.0, True

    dt_sky = ts.tt_jd(jd).delta_t
    dt_py = dt.delta_t(jd)
    source = dt.delta_t_source(jd)

    diff_swe = abs(dt_py - dt_swe)
    diff_sky = abs(dt_py - dt_sky)
    max_diff = max(diff_swe, diff_sky)
    passed = max_diff < TOLERANCE[source]

    if verbose:
        print(f"\n{'=' * 80}")
        print(f"{name} - {date_str} - {source.value}")
        print(f"{'=' * 80}")
        print(f"  libdeltat: {format_value(dt_py)} s")
        print(f"  SWE:       {format_value(dt_swe)} s  Diff={format_diff(diff_swe)}")
        print(f"  skyfield:  {format_value(dt_sky)} s  Diff={format_diff(diff_sky)}")
        print(f"\nStatus: {'PASSED ✓' if passed else 'FAILED ✗'}")
    else:
        print(
            f"[{name}] [{date_str}] [{source.value:<10}] "
            f"PY={format_value(dt_py, 4, 10)} SWE={format_value(dt_swe, 4, 10)} "
            f"SKY={format_value(dt_sky, 4, 10)} "
            f"MaxDiff={format_diff(max_diff, 4, 8)} {format_status(passed)}"
        )

    return passed, max_diff, False


# ============================================================================
# MAIN COMPARISON RUNNER
# ============================================================================


def run_all_comparisons(verbose: bool = False, epochs_filter: str = "all") -> tuple:
    """
    Run all Delta T comparison tests.

    Args:
        verbose: If True, print detailed output
        epochs_filter: 'all', 'table', 'predicted', or 'polynomial'

    Returns:
        (passed_count, total_count)
    """
    print_header("DELTA T COMPARISON")

    if epochs_filter == "table":
        epochs = TABLE_EPOCHS
    elif epochs_filter == "predicted":
        epochs = PREDICTED_EPOCHS
    elif epochs_filter == "polynomial":
        epochs = POLYNOMIAL_EPOCHS
    else:  # 'all'
        epochs = TABLE_EPOCHS + PREDICTED_EPOCHS + POLYNOMIAL_EPOCHS

    ts = dt.get_timescale()
    stats = TestStatistics()

    for name, year, month, day, hour in epochs:
        gregflag = SE_GREG_CAL if year > 1582 else SE_JUL_CAL
        jd = dt.julday(year, month, day, hour, gregflag)
        date_str = f"{year}-{month:02d}-{day:02d}"

        passed, diff, error = compare_deltat(name, date_str, jd, ts, verbose)
        stats.add_result(passed, diff, error)

    stats.print_summary("DELTA T COMPARISON SUMMARY")

    return stats.passed, stats.total


# ============================================================================
# COMMAND LINE INTERFACE
# ============================================================================


def print_help():
    """Print usage help."""
    print("Usage: python compare_deltat.py [OPTIONS]")
    print()
    print("Options:")
    print("  -v, --verbose       Show detailed output for each test")
    print("  --table             Test only observed table epochs")
    print("  --predicted         Test only predicted epochs")
    print("  --polynomial        Test only polynomial epochs")
    print("  -h, --help          Show this help message")
    print()


def main():
    """Main entry point."""
    args = parse_args(sys.argv)

    if args["help"]:
        print_help()
        sys.exit(0)

    if "--table" in sys.argv:
        epochs_filter = "table"
    elif "--predicted" in sys.argv:
        epochs_filter = "predicted"
    elif "--polynomial" in sys.argv:
        epochs_filter = "polynomial"
    else:
        epochs_filter = "all"

    passed, total = run_all_comparisons(
        verbose=args["verbose"], epochs_filter=epochs_filter
    )

    sys.exit(0 if passed == total else 1)


if __name__ == "__main__":
    main()
