"""Command line entry point: print the entropy of a heart dataset."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .heart import HeartDataSet


def main(argv: Sequence[str] | None = None) -> int:
    """Load the dataset and print its entropy."""
    parser = argparse.ArgumentParser(
        prog="corazones",
        description="Print the entropy of the output column of a heart dataset.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=HeartDataSet.DEFAULT_PATH,
        help="CSV file to read (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    try:
        dataset = HeartDataSet.load(args.path)
    except OSError as error:
        print(f"corazones: cannot read {args.path}: {error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"corazones: invalid data in {args.path}: {error}", file=sys.stderr)
        return 1

    print(f"The entropy of the loaded DataSet is: {dataset.entropy():g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())