"""The two stacks of the puzzle and the eleven operations that act on them."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List


class Operation(str, Enum):
    """An instruction, spelled as it is printed and read."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def parse_operation(text: str) -> Operation:
    """Return the operation spelled exactly as ``text``; raise ValueError otherwise."""
    try:
        return Operation(text)
    except ValueError:
        raise ValueError(f"unknown operation: {text!r}") from None


@dataclass
class Element:
    """A stack entry: the original number and its rank among all numbers."""

    value: int
    index: int = -1


def rank_values(values: Iterable[int]) -> List[int]:
    """Give each value the count of values strictly smaller than it."""
    vals = list(values)
    ordered = sorted(vals)
    return [bisect_left(ordered, value) for value in vals]


def is_sorted(values: Iterable[int]) -> bool:
    """True when the sequence is non-empty and never decreases."""
    vals = list(values)
    if not vals:
        return False
    return all(left <= right for left, right in zip(vals, vals[1:]))


def is_partly_sorted(values: Iterable[int]) -> bool:
    """True when the sequence is a rotation of a sorted one (at least two items)."""
    vals = list(values)
    if len(vals) < 2:
        return False
    breaks = sum(left > right for left, right in zip(vals, vals[1:]))
    if vals[-1] > vals[0]:
        breaks += 1
    return breaks <= 1


def _swap(stack: List[Element]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: List[Element]) -> None:
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: List[Element]) -> None:
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


def _push(source: List[Element], target: List[Element]) -> None:
    if source:
        target.insert(0, source.pop(0))


class Stacks:
    """Stack ``a`` filled with the given values (top first) and an empty stack ``b``."""

    def __init__(self, values: Iterable[int]) -> None:
        vals = list(values)
        self.a: List[Element] = [
            Element(value, index) for value, index in zip(vals, rank_values(vals))
        ]
        self.b: List[Element] = []
        self._handlers: dict[Operation, Callable[[], None]] = {
            Operation.SA: lambda: _swap(self.a),
            Operation.SB: lambda: _swap(self.b),
            Operation.SS: lambda: (_swap(self.a), _swap(self.b)),
            Operation.PA: lambda: _push(self.b, self.a),
            Operation.PB: lambda: _push(self.a, self.b),
            Operation.RA: lambda: _rotate(self.a),
            Operation.RB: lambda: _rotate(self.b),
            Operation.RR: lambda: (_rotate(self.a), _rotate(self.b)),
            Operation.RRA: lambda: _reverse_rotate(self.a),
            Operation.RRB: lambda: _reverse_rotate(self.b),
            Operation.RRR: lambda: (_reverse_rotate(self.a), _reverse_rotate(self.b)),
        }

    def apply(self, op: Operation | str) -> None:
        """Carry out one operation; operations on too few elements do nothing."""
        operation = op if isinstance(op, Operation) else parse_operation(op)
        self._handlers[operation]()

    def is_solved(self) -> bool:
        """True when ``a`` is sorted ascending and ``b`` is empty."""
        return is_sorted(element.value for element in self.a) and not self.b