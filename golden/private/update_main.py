#!/usr/bin/env python3
"""Updates golden files next to a test from the latest test outputs."""

import argparse
import os
import sys

from golden.comparator import LocalFileComparator
from golden.errors import ComparatorError
from golden.path_style import PathStyle


def main(argv=None):
    parser = argparse.ArgumentParser(description="Write test outputs over their golden files.")
    parser.add_argument("--test-file", required=True, help="Test file owning the goldens, relative to the workspace.")
    parser.add_argument(
        "--path-style",
        choices=["native", "posix", "windows"],
        default="native",
        help="Path convention used to resolve locators.",
    )
    parser.add_argument("pairs", nargs="+", metavar="PATH", help="Output file and golden locator pairs.")
    args = parser.parse_args(argv)
    if len(args.pairs) % 2:
        parser.error("expected OUTPUT GOLDEN pairs, got an odd number of paths")

    workspace = _resolve_workspace()
    comparator = LocalFileComparator(
        os.path.join(workspace, args.test_file),
        path_style=PathStyle.from_name(args.path_style),
    )

    failures = []
    for output, golden in zip(args.pairs[::2], args.pairs[1::2]):
        try:
            _update_golden(comparator, output, golden)
        except ComparatorError as exc:
            print(str(exc), file=sys.stderr)
            failures.append(golden)

    if failures:
        sys.exit("Failed to update: {}".format(", ".join(failures)))
    return 0


def _resolve_workspace():
    return os.environ.get("BUILD_WORKSPACE_DIRECTORY") or os.getcwd()


def _update_golden(comparator, output, golden):
    if not os.path.isfile(output):
        print("Skipping {}: output {} not available; run the test first".format(golden, output), file=sys.stderr)
        return
    with open(output, "rb") as handle:
        data = handle.read()
    comparator.update(golden, data)
    print(comparator.resolve(golden))


if __name__ == "__main__":
    sys.exit(main())
