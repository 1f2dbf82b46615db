"""Find paper rolls on a floor map that a forklift can reach and remove."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

logger = logging.getLogger(__name__)

Line = Union[str, bytes]

_CELLS = {"@": True, ".": False}


def _split_lines(data: bytes) -> list[bytes]:
    if not data:
        return []
    parts = data.split(b"\n")
    if data.endswith(b"\n"):
        parts.pop()
    return parts


def _parse_row(line: Line) -> list[bool]:
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    try:
        return [_CELLS[char] for char in line]
    except KeyError as exc:
        raise ValueError(f"Unexpected input {exc.args[0]!r}") from None


@dataclass
class FloorMap:
    """A rectangular grid where ``True`` marks an occupied cell."""

    grid: list[list[bool]]

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @classmethod
    def from_lines(cls, lines: Iterable[Line]) -> "FloorMap":
        """Build from lines of ``@`` and ``.``; a final empty line is ignored."""
        rows = list(lines)
        if not rows:
            raise ValueError("No lines to read!")
        first = _parse_row(rows[0])
        width = len(first)
        grid = [first]
        for position, line in enumerate(rows[1:], start=2):
            row = _parse_row(line)
            if not row and position == len(rows):
                break
            if len(row) != width:
                raise ValueError(f"Mismatched line width {len(row)}, expected {width}")
            grid.append(row)
        return cls(grid)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "FloorMap":
        return cls.from_lines(_split_lines(Path(path).read_bytes()))

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def occupied(self, x: int, y: int) -> bool:
        """Tell whether a cell is occupied; cells off the map are empty."""
        return self._in_bounds(x, y) and self.grid[y][x]

    def clear(self, x: int, y: int) -> None:
        """Mark a cell as empty."""
        if not self._in_bounds(x, y):
            raise IndexError("out of bounds!")
        self.grid[y][x] = False

    def count_neighbors(self, x: int, y: int) -> int:
        """Count the occupied cells among the eight around ``(x, y)``."""
        if x < 0:
            raise IndexError(f"width {x} below 0!")
        if y < 0:
            raise IndexError(f"height {y} below 0!")
        if x >= self.width:
            raise IndexError(f"width {x} exceeded width of map in FloorMap! {self.width}")
        if y >= self.height:
            raise IndexError(f"height {y} exceeded # height of FloorMap! {self.height}")
        return sum(
            self.occupied(x + dx, y + dy)
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            if dx or dy
        )

    def _cells(self):
        for x in range(self.width):
            for y in range(self.height):
                yield x, y

    def count_free(self, threshold: int) -> int:
        """Count occupied cells with fewer than ``threshold`` neighbours."""
        return sum(
            1
            for x, y in self._cells()
            if self.occupied(x, y) and self.count_neighbors(x, y) < threshold
        )

    def remove_free(self, threshold: int) -> int:
        """Clear reachable cells in one sweep and return how many were cleared."""
        removed = 0
        for x, y in self._cells():
            if self.occupied(x, y) and self.count_neighbors(x, y) < threshold:
                self.clear(x, y)
                removed += 1
        return removed

    def remove_until_stable(self, threshold: int) -> int:
        """Sweep until nothing more can be cleared; return the total cleared."""
        total = 0
        while removed := self.remove_free(threshold):
            total += removed
        return total


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(prog="forklift")
    parser.add_argument("file", nargs="?")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.file is None:
        raise SystemExit("Need a file argument!")
    floor = FloorMap.from_file(args.file)
    print(floor.remove_until_stable(4))
    return 0


if __name__ == "__main__":
    sys.exit(main())