"""Check ingredient IDs against fresh-ID ranges and merge the ranges."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

logger = logging.getLogger(__name__)

Line = Union[str, bytes]


def _decode(text: Line) -> str:
    return text.decode("utf-8") if isinstance(text, bytes) else text


def parse_u64(text: Line) -> int:
    """Parse a run of ASCII digits; an empty run is zero.

    Raises ``ValueError`` on any character that is not a digit.
    """
    text = _decode(text)
    if any(not "0" <= char <= "9" for char in text):
        raise ValueError(f"Invalid unsigned number: {text!r}")
    return int(text) if text else 0


class InvalidIntervalError(ValueError):
    """An interval's bounds are missing, malformed or reversed."""


class UnmergeOrder(Enum):
    BEFORE = "before"
    AFTER = "after"


class UnmergeableError(ValueError):
    """Two intervals neither overlap nor touch."""

    def __init__(self, order: UnmergeOrder) -> None:
        super().__init__(f"Intervals cannot be merged: {order.value}")
        self.order = order

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnmergeableError):
            return NotImplemented
        return self.order is other.order

    def __hash__(self) -> int:
        return hash(self.order)


@dataclass(frozen=True)
class ClosedInterval:
    """The integers ``low..=high``; ordering compares the low bound only."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise InvalidIntervalError(f"low {self.low} exceeds high {self.high}")

    @classmethod
    def parse(cls, text: Line) -> "ClosedInterval":
        """Parse ``low-high``."""
        text = _decode(text)
        low_text, dash, high_text = text.partition("-")
        if not dash:
            raise InvalidIntervalError(f"Missing '-' in {text!r}")
        try:
            low = parse_u64(low_text)
            high = parse_u64(high_text)
        except ValueError:
            raise InvalidIntervalError(f"Invalid interval {text!r}") from None
        return cls(low, high)

    def merge(self, other: "ClosedInterval") -> "ClosedInterval":
        """Join two overlapping or adjacent intervals."""
        if self.high + 1 < other.low:
            raise UnmergeableError(UnmergeOrder.BEFORE)
        if other.high + 1 < self.low:
            raise UnmergeableError(UnmergeOrder.AFTER)
        return ClosedInterval(min(self.low, other.low), max(self.high, other.high))

    def length(self) -> int:
        return self.high - self.low + 1

    def contains(self, num: int) -> bool:
        return self.low <= num <= self.high

    def __lt__(self, other: "ClosedInterval") -> bool:
        if not isinstance(other, ClosedInterval):
            return NotImplemented
        return self.low < other.low

    def __le__(self, other: "ClosedInterval") -> bool:
        if not isinstance(other, ClosedInterval):
            return NotImplemented
        return self.low <= other.low

    def __gt__(self, other: "ClosedInterval") -> bool:
        if not isinstance(other, ClosedInterval):
            return NotImplemented
        return self.low > other.low

    def __ge__(self, other: "ClosedInterval") -> bool:
        if not isinstance(other, ClosedInterval):
            return NotImplemented
        return self.low >= other.low


def bruteforce_contains(value: int, intervals: Iterable[ClosedInterval]) -> bool:
    """Tell whether any interval holds ``value``."""
    return any(interval.contains(value) for interval in intervals)


def merge_intervals(intervals: Iterable[ClosedInterval]) -> list[ClosedInterval]:
    """Sort by low bound and join overlapping or adjacent intervals."""
    merged: list[ClosedInterval] = []
    for interval in sorted(intervals):
        if merged:
            logger.info("%r, %r", merged[-1], interval)
            try:
                merged[-1] = merged[-1].merge(interval)
                logger.info("merged %r", merged[-1])
                continue
            except UnmergeableError:
                logger.info("unmerged")
        merged.append(interval)
    return merged


def _split_lines(data: bytes) -> list[bytes]:
    if not data:
        return []
    parts = data.split(b"\n")
    if data.endswith(b"\n"):
        parts.pop()
    return parts


@dataclass
class FoodbProblem:
    """Fresh-ID intervals (sorted by low bound) and the IDs to check."""

    intervals: list[ClosedInterval] = field(default_factory=list)
    to_check: list[int] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: Iterable[Line]) -> "FoodbProblem":
        """Parse interval lines, a blank line, then one ID per line."""
        texts = [_decode(line) for line in lines]
        pos = 0
        intervals = []
        while pos < len(texts):
            text = texts[pos]
            pos += 1
            if not text:
                break
            try:
                intervals.append(ClosedInterval.parse(text))
            except InvalidIntervalError:
                raise ValueError(f"Couldn't parse {text} as interval") from None

        ids = []
        while pos < len(texts):
            text = texts[pos]
            pos += 1
            if not text:
                if pos == len(texts):
                    break
                raise ValueError("Unexpected end of while parsing!")
            try:
                ids.append(parse_u64(text))
            except ValueError:
                raise ValueError(f"Couldn't parse {text} as id") from None

        intervals.sort()
        return cls(intervals, ids)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "FoodbProblem":
        return cls.from_lines(_split_lines(Path(path).read_bytes()))


def _count_fresh(ids: Iterable[int], intervals: Sequence[ClosedInterval]) -> int:
    return sum(bruteforce_contains(value, intervals) for value in ids)


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(prog="foodb")
    parser.add_argument("file", nargs="?")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.file is None:
        raise SystemExit("Need a file argument!")
    problem = FoodbProblem.from_file(args.file)
    print(f"pre-merge len {len(problem.intervals)}")
    original = list(problem.intervals)
    merged = merge_intervals(problem.intervals)
    print(f"post-merge len {len(merged)}")
    for value in problem.to_check:
        if bruteforce_contains(value, merged) != bruteforce_contains(value, original):
            raise RuntimeError(f"Merged intervals disagree on {value}")
    print(f"sum {_count_fresh(problem.to_check, merged)}")
    print(f"Range count {sum(interval.length() for interval in merged)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())