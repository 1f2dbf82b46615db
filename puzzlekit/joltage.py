"""Pick the largest joltage obtainable from rows of battery digits."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

logger = logging.getLogger(__name__)

Line = Union[str, bytes]


def argmax(values: Sequence[int]) -> int:
    """Return the index of the first largest value."""
    if not values:
        raise ValueError("Empty slice")
    return max(range(len(values)), key=values.__getitem__)


def _split_lines(data: bytes) -> list[bytes]:
    if not data:
        return []
    parts = data.split(b"\n")
    if data.endswith(b"\n"):
        parts.pop()
    return parts


def _parse_row(line: Line) -> tuple[int, ...]:
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    digits = []
    for char in line:
        if not "1" <= char <= "9":
            raise ValueError(f"Expected digit in [1-9], got {char!r}")
        digits.append(int(char))
    return tuple(digits)


@dataclass
class BatteryBank:
    """Equal-width rows of battery joltage digits."""

    banks: list[tuple[int, ...]]

    @property
    def width(self) -> int:
        return len(self.banks[0]) if self.banks else 0

    @classmethod
    def from_lines(cls, lines: Iterable[Line]) -> "BatteryBank":
        """Build from lines of digits 1-9; a final empty line is ignored."""
        rows = list(lines)
        if not rows:
            raise ValueError("No lines to read!")
        first = _parse_row(rows[0])
        width = len(first)
        banks = [first]
        for position, line in enumerate(rows[1:], start=2):
            row = _parse_row(line)
            if not row and position == len(rows):
                break
            if len(row) != width:
                raise ValueError(f"Mismatched line width {len(row)}, expected {width}")
            banks.append(row)
        return cls(banks)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "BatteryBank":
        return cls.from_lines(_split_lines(Path(path).read_bytes()))

    def bank(self, index: int) -> tuple[int, ...]:
        if not 0 <= index < len(self.banks):
            raise IndexError(
                f"Bank # {index} exceeded # of banks in BatteryBank! {len(self.banks)}"
            )
        return self.banks[index]

    def max_joltage(self, index: int, digits: int) -> int:
        """Largest number formed by ``digits`` digits of a bank, kept in order."""
        if digits < 1:
            raise ValueError("Digits must be > 0!")
        joltages = self.bank(index)
        if digits > len(joltages):
            raise ValueError(f"Bank has only {len(joltages)} digits, need {digits}")
        result = 0
        start = 0
        for remaining in range(digits - 1, -1, -1):
            pos = start + argmax(joltages[start:len(joltages) - remaining])
            result = result * 10 + joltages[pos]
            start = pos + 1
        return result

    def sum_max_joltages(self, digits: int) -> int:
        return sum(self.max_joltage(i, digits) for i in range(len(self.banks)))


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(prog="joltage")
    parser.add_argument("file", nargs="?")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.file is None:
        raise SystemExit("Need a file argument!")
    bank = BatteryBank.from_file(args.file)
    print(f"Max joltage is {bank.sum_max_joltages(12)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())