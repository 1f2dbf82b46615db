# puzzlekit

Solvers for six small puzzles. Each reads its input from a text file and
prints the answer. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Commands

Each command takes the path of a puzzle input file as its single argument.
Without one it exits with `Need a file argument!`. Progress is logged at
INFO level to standard error; malformed input raises `ValueError`.

| Command | What it computes |
| --- | --- |
| `puzzlekit-rotator FILE` | Spins a 100-position dial, starting at 50, by one `R<n>` (right) or `L<n>` (left) move per line, ignoring lines that start with anything else, and prints `Zero count: N`, the number of times the dial lands on or passes zero. |
| `puzzlekit-digitpattern FILE` | Reads comma-separated `low-high` ranges (up to the first newline) and prints `sum is: N`, the sum of numbers in those ranges whose digits are one block repeated at least twice. |
| `puzzlekit-joltage FILE` | Reads equal-width rows of digits 1–9 and prints `Max joltage is N`, the sum over rows of the largest 12-digit number that can be picked from the row keeping digit order. |
| `puzzlekit-forklift FILE` | Reads a grid of `@` and `.` and prints how many `@` cells can be cleared, sweep after sweep, while they have fewer than 4 occupied neighbours. |
| `puzzlekit-foodb FILE` | Reads `low-high` ranges, a blank line, then one id per line. Prints the range count before and after merging, how many ids fall in a range (`sum N`) and how many values the merged ranges cover (`Range count N`). |
| `puzzlekit-postfix FILE` | Reads rows of numbers followed by a row of `+` / `*` operators, one per column, and prints the width and height, each column's result and their sum. |

Each module can also be run directly, e.g. `python -m puzzlekit.rotator FILE`.

## Library use

```python
from puzzlekit.digitpattern import add_invalid_in_ranges, check_int
from puzzlekit.foodb import ClosedInterval, merge_intervals
from puzzlekit.forklift import FloorMap

print(add_invalid_in_ranges("11-22,95-115"))
print(check_int(1212))  # True

merged = merge_intervals([ClosedInterval.parse("3-5"), ClosedInterval.parse("4-9")])

grid = FloorMap.from_lines(["..@@", "@@@.", ".@@@"])
print(grid.count_free(4), grid.remove_until_stable(4))
```

Other entry points:

- `puzzlekit.rotator`: `Dial` (with `spin`), `parse_line`, `count_zero_crossings`.
- `puzzlekit.digitpattern`: `parse_ranges`, `make_pattern_num`, `check_seq`,
  `count_digits`, `check_int_pair`, `add_in_range`.
- `puzzlekit.joltage`: `argmax`, `BatteryBank` (`from_lines`, `from_file`,
  `bank`, `max_joltage`, `sum_max_joltages`).
- `puzzlekit.forklift`: `FloorMap` (`from_file`, `occupied`, `clear`,
  `count_neighbors`, `count_free`, `remove_free`, `remove_until_stable`).
- `puzzlekit.foodb`: `parse_u64`, `ClosedInterval` (`parse`, `merge`, `length`,
  `contains`; raising `InvalidIntervalError` or `UnmergeableError`),
  `bruteforce_contains`, `merge_intervals`, `FoodbProblem`.
- `puzzlekit.postfix`: `MathOp`, `LineType`, `parse_leading_int`, `get_op`,
  `classify_line`, `MathProblems` (`from_lines`, `from_file`, `solve`).

Line-based constructors accept `str` or `bytes` lines; `from_file` ignores a
final trailing newline.

## Tests

```
pip install .[test]
pytest
```