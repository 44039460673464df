"""Sorting strategy: pick the cheapest element to move, move it, repeat."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterable, List, Sequence

from pushswap.stacks import Element, Operation, Stacks, is_partly_sorted, is_sorted


class Mode(Enum):
    """Direction in which elements are moved between the stacks."""

    B_TO_A = 1
    A_TO_B = 2


def position_of(stack: Sequence[Element], index: int) -> int:
    """Zero-based position of the element with ``index``, or -1 when absent."""
    for position, element in enumerate(stack):
        if element.index == index:
            return position
    return -1


def biggest_smaller_index(stack: Sequence[Element], index: int) -> int:
    """Largest rank in ``stack`` below ``index``, or -1 when there is none."""
    return max((e.index for e in stack if e.index < index), default=-1)


def smallest_bigger_index(stack: Sequence[Element], index: int) -> int:
    """Smallest rank in ``stack`` above ``index``, or -1 when there is none."""
    return min((e.index for e in stack if e.index > index), default=-1)


def smallest_index(stack: Sequence[Element]) -> int:
    """Lowest rank in ``stack``; raise ValueError if it is empty."""
    if not stack:
        raise ValueError("stack is empty")
    return min(e.index for e in stack)


def biggest_index(stack: Sequence[Element]) -> int:
    """Highest rank in ``stack``; raise ValueError if it is empty."""
    if not stack:
        raise ValueError("stack is empty")
    return max(e.index for e in stack)


@dataclass
class Way:
    """How many times each operation is needed to move one element."""

    pa: int = 0
    pb: int = 0
    sa: int = 0
    sb: int = 0
    ss: int = 0
    ra: int = 0
    rb: int = 0
    rr: int = 0
    rra: int = 0
    rrb: int = 0
    rrr: int = 0

    def minimize(self) -> None:
        """Merge paired single-stack rotations into combined ones."""
        both = min(self.ra, self.rb)
        self.ra -= both
        self.rb -= both
        self.rr += both
        both = min(self.rra, self.rrb)
        self.rra -= both
        self.rrb -= both
        self.rrr += both

    def total(self) -> int:
        """Number of operations this way takes."""
        return sum(getattr(self, f.name) for f in fields(self))


# Order in which a way's operations are carried out.
_EXECUTION_ORDER = (
    ("rb", Operation.RB),
    ("rra", Operation.RRA),
    ("rrb", Operation.RRB),
    ("ra", Operation.RA),
    ("rr", Operation.RR),
    ("rrr", Operation.RRR),
    ("pa", Operation.PA),
    ("pb", Operation.PB),
)


def _rotation_cost(position: int, size: int) -> tuple[int, int]:
    """Forward and reverse rotations needed to bring ``position`` to the top."""
    if position <= size // 2:
        return position, 0
    return 0, size - position


class Solver:
    """Sorts a list of numbers and records every operation it performs."""

    def __init__(self, values: Iterable[int]) -> None:
        self.stacks = Stacks(values)
        self.operations: List[Operation] = []

    @property
    def a(self) -> List[Element]:
        return self.stacks.a

    @property
    def b(self) -> List[Element]:
        return self.stacks.b

    def _do(self, op: Operation) -> None:
        self.stacks.apply(op)
        self.operations.append(op)

    def fill_way(self, index: int, mode: Mode) -> Way:
        """Cost of moving the element ranked ``index`` in the given direction."""
        way = Way()
        if mode is Mode.A_TO_B:
            pos_a = position_of(self.a, index)
            pos_b = position_of(self.b, biggest_smaller_index(self.b, index))
            if pos_b == -1:
                pos_b = position_of(self.b, biggest_index(self.b))
            way.pb = 1
        else:
            pos_a = position_of(self.a, smallest_bigger_index(self.a, index))
            pos_b = position_of(self.b, index)
            if pos_a == -1:
                pos_a = position_of(self.a, smallest_index(self.a))
            way.pa = 1
        way.ra, way.rra = _rotation_cost(pos_a, len(self.a))
        way.rb, way.rrb = _rotation_cost(pos_b, len(self.b))
        way.minimize()
        return way

    def best_way(self, mode: Mode) -> Way:
        """The first cheapest way among all elements of the source stack."""
        source = self.a if mode is Mode.A_TO_B else self.b
        if not source:
            raise ValueError("no element to move")
        best: Way | None = None
        for element in source:
            candidate = self.fill_way(element.index, mode)
            if best is None or best.total() > candidate.total():
                best = candidate
        assert best is not None
        return best

    def execute_way(self, way: Way) -> None:
        """Carry out every operation the way asks for."""
        for name, op in _EXECUTION_ORDER:
            for _ in range(getattr(way, name)):
                self._do(op)

    def _a_values(self) -> List[int]:
        return [e.value for e in self.a]

    def _sort_two_asc(self) -> None:
        if len(self.a) >= 2 and self.a[0].value > self.a[1].value:
            self._do(Operation.SA)

    def _sort_two_desc(self) -> None:
        if len(self.b) >= 2 and self.b[0].value < self.b[1].value:
            self._do(Operation.SB)

    def _sort_three(self) -> None:
        first, second, third = (e.value for e in self.a[:3])
        if first > second and second < third and first < third:
            self._do(Operation.SA)
        elif first > second and second > third:
            self._do(Operation.SA)
            self._do(Operation.RRA)
        elif first > second and second < third and first > third:
            self._do(Operation.RA)
        elif first < second and second > third and first < third:
            self._do(Operation.SA)
            self._do(Operation.RA)
        elif first < second and second > third and first > third:
            self._do(Operation.RRA)

    def _sort_main(self) -> None:
        size = len(self.a)
        if size == 2:
            self._sort_two_asc()
        elif size == 3:
            self._sort_three()
        elif size >= 4:
            self._sort_default()

    def _sort_default(self) -> None:
        self._do(Operation.PB)
        self._do(Operation.PB)
        self._sort_two_desc()
        size_a = len(self.a)
        while size_a > 3 and not is_partly_sorted(self._a_values()):
            self.execute_way(self.best_way(Mode.A_TO_B))
        if not is_partly_sorted(self._a_values()):
            self._sort_main()
        while self.b:
            self.execute_way(self.best_way(Mode.B_TO_A))
        if not is_sorted(self._a_values()):
            self._final_rotation()

    def _final_rotation(self) -> None:
        pos = position_of(self.a, smallest_index(self.a))
        forward, backward = _rotation_cost(pos, len(self.a))
        for _ in range(forward):
            self._do(Operation.RA)
        for _ in range(backward):
            self._do(Operation.RRA)

    def run(self) -> List[Operation]:
        """Sort stack ``a`` unless it already is; return the operations used."""
        if not is_sorted(self._a_values()):
            self._sort_main()
        return list(self.operations)


def solve(values: Iterable[int]) -> List[Operation]:
    """Operations that sort ``values`` from stack ``a`` into ascending order."""
    return Solver(values).run()