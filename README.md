# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small fixed set
of operations, printing the operations that sort the list. A companion
checker reads a sequence of operations and reports whether it sorts the list.

## Operations

| Name  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up: the top goes to the bottom      |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate `a` down: the bottom goes to the top    |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` together                       |

An operation on a stack with too few elements does nothing.

## Installation

```
pip install .
```

## Command line

Print the operations that sort the numbers, one per line:

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The numbers may be given as separate arguments, as one quoted string, or as a
mix of both; everything is joined with spaces and split on spaces again. The
first number is the top of stack `a`. Nothing is printed when the input is
already sorted, and nothing at all happens when no arguments are given.

Check a sequence of operations read from standard input:

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

Each input line is one operation name; newline characters around it are
removed. The checker prints `OK` when the operations leave `a` sorted in
ascending order and `b` empty, and `KO` otherwise.

Both commands print `Error` to standard error and exit with status 255 when:

- an argument is empty or consists only of spaces;
- a number is longer than 11 characters, is not an optional `+` or `-`
  followed by digits, or lies outside the 32-bit signed range;
- a number is written exactly the same way as an earlier one (the comparison
  is textual, so `1` and `+1` are not treated as repeats).

The checker does the same at the first line that is not a known operation,
including an empty line.

`python -m pushswap.cli` runs the same as `push-swap`.

## Library

```python
from pushswap.solver import solve
from pushswap.stacks import Stacks, parse_operation

values = [3, 2, 5, 1, 4]
ops = solve(values)          # list of pushswap.stacks.Operation

stacks = Stacks(values)
for op in ops:
    stacks.apply(op)
assert stacks.is_solved()

stacks.apply(parse_operation("pb"))
stacks.apply("pa")           # names are accepted as well
```

- `pushswap.stacks`: `Operation` (the eleven operations), `Element` (a value
  and its rank), `Stacks` (stacks `a` and `b` with `apply` and `is_solved`),
  `parse_operation`, `rank_values`, `is_sorted` and `is_partly_sorted`.
  `parse_operation` raises `ValueError` for an unknown name.
- `pushswap.solver`: `solve(values)` returns the operations that sort the
  values; `Solver` exposes the steps (`fill_way`, `best_way`, `execute_way`,
  `run`) and records what it did in `operations`. `Way` counts the operations
  needed to move one element, and `Mode` names the direction of a move.
- `pushswap.args`: `parse_arguments(argv)` turns command-line arguments into a
  list of integers and raises `ArgumentError` for bad input; `atoi`,
  `has_blank_argument`, `split_arguments` and `validate_tokens` are the steps
  it uses.
- `pushswap.cli`: `run_checker(values, lines)` applies the operation lines to
  the values and returns `True` when the result is sorted; it raises
  `ValueError` at the first unknown operation. `push_swap_main` and
  `checker_main` are the two commands and return their exit status.

## Running the tests

```
pip install ".[test]"
pytest
```