"""Solve column-wise arithmetic problems written as rows of numbers."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Union

logger = logging.getLogger(__name__)

Line = Union[str, bytes]


class MathOp(Enum):
    SUM = "+"
    PRODUCT = "*"


class LineType(Enum):
    NUMBERS = "numbers"
    OPS = "ops"
    EMPTY = "empty"


class UnknownLineTypeError(ValueError):
    """A line is neither numbers, operators nor empty."""


class InvalidMathOpError(ValueError):
    """A character is not a known operator."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid operator {char!r}")
        self.char = char


def parse_leading_int(text: str) -> tuple[int, int]:
    """Parse the digits at the start of ``text``; return ``(value, length)``."""
    end = 0
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    if end == 0:
        raise ValueError(f"No number at start of {text!r}")
    return int(text[:end]), end


def get_op(char: str) -> MathOp:
    try:
        return MathOp(char)
    except ValueError:
        raise InvalidMathOpError(char) from None


def _decode(line: Line) -> str:
    return line.decode("utf-8") if isinstance(line, bytes) else line


def classify_line(line: Line) -> LineType:
    stripped = _decode(line).lstrip(" ")
    if not stripped:
        return LineType.EMPTY
    first = stripped[0]
    if "0" <= first <= "9":
        return LineType.NUMBERS
    if first in ("+", "*"):
        return LineType.OPS
    raise UnknownLineTypeError(f"Unknown line type: {_decode(line)!r}")


def _check_width(count: int, expected: Optional[int]) -> None:
    if expected is not None and count > expected:
        raise ValueError(f"Line exceeded expected width {expected}")


def _parse_numbers(line: str, expected: Optional[int]) -> list[int]:
    numbers: list[int] = []
    pos = 0
    while pos < len(line):
        while pos < len(line) and line[pos] == " ":
            pos += 1
        try:
            value, length = parse_leading_int(line[pos:])
        except ValueError:
            break
        numbers.append(value)
        pos += length
        _check_width(len(numbers), expected)
    return numbers


def _parse_ops(line: str, expected: Optional[int]) -> list[MathOp]:
    ops: list[MathOp] = []
    for token in line.split(" "):
        if not token:
            continue
        try:
            ops.append(get_op(token[0]))
        except InvalidMathOpError:
            break
        _check_width(len(ops), expected)
        if len(token) > 1:
            try:
                get_op(token[1])
            except InvalidMathOpError:
                break
            # Adjacent operators without spaces are separate operators.
            for char in token[1:]:
                try:
                    ops.append(get_op(char))
                except InvalidMathOpError:
                    return ops
                _check_width(len(ops), expected)
    return ops


def _split_lines(data: bytes) -> list[bytes]:
    if not data:
        return []
    parts = data.split(b"\n")
    if data.endswith(b"\n"):
        parts.pop()
    return parts


@dataclass
class MathProblems:
    """Columns of numbers, each combined by its operator."""

    rows: list[list[int]]
    operators: list[MathOp]

    @property
    def width(self) -> int:
        return len(self.operators)

    @property
    def height(self) -> int:
        return len(self.rows)

    @classmethod
    def from_lines(cls, lines: Iterable[Line]) -> "MathProblems":
        """Parse rows of numbers followed by one row of operators."""
        texts = [_decode(line) for line in lines]
        if not texts:
            raise ValueError("No lines to read!")
        kind = classify_line(texts[0])
        if kind is LineType.OPS:
            raise ValueError("Got an ops line as first line!")
        if kind is LineType.EMPTY:
            raise ValueError("Got an empty line as first line!")
        first = _parse_numbers(texts[0], None)
        width = len(first)
        rows = [first]
        ops: list[MathOp] = []
        for position, text in enumerate(texts[1:], start=2):
            kind = classify_line(text)
            if kind is LineType.EMPTY:
                if position != len(texts) or len(ops) != width:
                    raise ValueError("Unexpected empty line")
                break
            if kind is LineType.NUMBERS:
                row = _parse_numbers(text, width)
                if len(row) != width:
                    raise ValueError(f"Mismatched line width {len(row)}, expected {width}")
                rows.append(row)
            else:
                line_ops = _parse_ops(text, width)
                if len(line_ops) != width:
                    raise ValueError(
                        f"Mismatched line width {len(line_ops)}, expected {width}"
                    )
                ops.extend(line_ops)
        if len(ops) != width:
            raise ValueError(f"Expected {width} operators, got {len(ops)}")
        return cls(rows, ops)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "MathProblems":
        return cls.from_lines(_split_lines(Path(path).read_bytes()))

    def solve(self) -> list[int]:
        """Combine each column with its operator."""
        results = []
        for column, op in enumerate(self.operators):
            values = [row[column] for row in self.rows]
            results.append(sum(values) if op is MathOp.SUM else math.prod(values))
        return results


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(prog="postfix")
    parser.add_argument("file", nargs="?")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.file is None:
        raise SystemExit("Need a file argument!")
    problems = MathProblems.from_file(args.file)
    print(f"width: {problems.width} height: {problems.height}")
    results = problems.solve()
    for index, value in enumerate(results):
        print(f"{index}: {value}")
    print(f"Sum: {sum(results)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())