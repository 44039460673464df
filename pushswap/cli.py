"""Command-line entry points: the sorter and the instruction checker."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from pushswap.args import ERROR_EXIT_CODE, ERROR_MSG, ArgumentError, parse_arguments
from pushswap.solver import solve
from pushswap.stacks import Stacks, parse_operation


def _instructions(lines: Iterable[str]) -> Iterator[str]:
    """Yield each line with surrounding newline characters removed."""
    for line in lines:
        yield line.strip("\n")


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply the instructions in ``lines`` to ``values``; True if the result is sorted.

    Raises ValueError at the first line that is not a valid instruction.
    """
    stacks = Stacks(values)
    for instruction in _instructions(lines):
        stacks.apply(parse_operation(instruction))
    return stacks.is_solved()


def _read_numbers(argv: Sequence[str], err: TextIO) -> Optional[list]:
    try:
        return parse_arguments(argv)
    except ArgumentError:
        print(ERROR_MSG, file=err)
        return None


def push_swap_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    numbers = _read_numbers(args, sys.stderr)
    if numbers is None:
        return ERROR_EXIT_CODE
    for operation in solve(numbers):
        print(operation.value, file=sys.stdout)
    return 0


def checker_main(argv: Optional[Sequence[str]] = None) -> int:
    """Read instructions from standard input and report OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    numbers = _read_numbers(args, sys.stderr)
    if numbers is None:
        return ERROR_EXIT_CODE
    try:
        solved = run_checker(numbers, sys.stdin)
    except ValueError:
        print(ERROR_MSG, file=sys.stderr)
        return ERROR_EXIT_CODE
    print("OK" if solved else "KO", file=sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(push_swap_main())