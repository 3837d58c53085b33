"""
Run every comparison script and report the combined result.
"""

import sys

import compare_deltat
import compare_leapseconds
from comparison_utils import parse_args, print_header


def main():
    args = parse_args(sys.argv)

    results = {
        "Delta T": compare_deltat.run_all_comparisons(verbose=args["verbose"]),
        "Leap seconds": compare_leapseconds.run_all_comparisons(
            verbose=args["verbose"]
        ),
    }

    print()
    print_header("OVERALL")
    for name, (passed, total) in results.items():
        print(f"{name:<15} {passed}/{total}")

    sys.exit(0 if all(p == t for p, t in results.values()) else 1)


if __name__ == "__main__":
    main()
