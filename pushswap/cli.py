"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .algorithm import push_swap
from .parsing import InputError, parse_arguments


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers in ``argv`` and print one operation per line.

    Invalid input prints ``Error``.  The exit status is always 0.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        stacks = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 0
    moves = push_swap(stacks)
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())