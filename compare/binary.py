#!/usr/bin/env python3
"""Binary comparator that checks output bytes against a golden file."""

import argparse
import os
import sys

try:
    from python.runfiles import runfiles
except ImportError:
    from runfiles import runfiles

from golden.comparator import LocalFileComparator, first_mismatch
from golden.errors import ComparatorError
from golden.path_style import PathStyle


def read_bytes(path):
    with open(path, "rb") as handle:
        return handle.read()


def resolve_test_file(locator):
    if os.path.isabs(locator) or locator.startswith("file:"):
        return locator
    runfiles_ctx = runfiles.Create()
    if runfiles_ctx is not None:
        location = runfiles_ctx.Rlocation(locator)
        if location and os.path.exists(location):
            return location
    return os.path.abspath(locator)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compare binary output against a golden file.")
    parser.add_argument("output", help="Path to the produced output file.")
    parser.add_argument("golden", help="Golden file locator, relative to the test file when --test-file is set.")
    parser.add_argument("--test-file", help="Test file (path, file: URI or runfiles key) owning the golden.")
    parser.add_argument(
        "--path-style",
        choices=["native", "posix", "windows"],
        default="native",
        help="Path convention used to resolve locators.",
    )
    args = parser.parse_args(argv)

    if args.test_file:
        test_file = resolve_test_file(args.test_file)
        golden = args.golden
    else:
        golden = os.path.abspath(args.golden)
        test_file = golden
    comparator = LocalFileComparator(test_file, path_style=PathStyle.from_name(args.path_style))

    actual = read_bytes(args.output)
    print("[golden] compare {} against {}".format(args.output, comparator.resolve(golden)))
    try:
        if comparator.compare(actual, golden):
            return 0
    except ComparatorError as exc:
        print("[golden] {}".format(exc), file=sys.stderr)
        return 2

    expected = read_bytes(comparator.resolve(golden))
    print(
        "Binary golden mismatch at byte {} (golden size={}, output size={})".format(
            first_mismatch(expected, actual),
            len(expected),
            len(actual),
        ),
        file=sys.stderr,
    )
    return 1


if __name__ == "__main__":
    sys.exit(main())
