"""Sum numbers in ranges whose digits are a repeated pattern."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Optional, Union

logger = logging.getLogger(__name__)

_RANGE = re.compile(r"([0-9]+)-([0-9]+)")


def parse_ranges(text: Union[str, bytes]) -> list[tuple[int, int]]:
    """Parse a comma-separated list of ``low-high`` ranges.

    Parsing stops at the end of the text or at the first newline.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    ranges = []
    pos = 0
    while True:
        match = _RANGE.match(text, pos)
        if match is None:
            raise ValueError(f"Expected a range at position {pos}")
        ranges.append((int(match[1]), int(match[2])))
        pos = match.end()
        if pos == len(text) or text[pos] == "\n":
            return ranges
        if text[pos] != ",":
            raise ValueError(f"Expected comma, got {text[pos]!r}")
        pos += 1


def make_pattern_num(prefix: int, seq_len: int, ntimes: int) -> int:
    """Repeat ``prefix`` (a ``seq_len``-digit block) ``ntimes`` times."""
    if seq_len <= 0 or ntimes <= 0:
        raise ValueError("seq_len and ntimes must be positive")
    return sum(prefix * 10 ** (seq_len * t) for t in range(ntimes))


def check_seq(num: int, ndigits: int, seq_len: int) -> bool:
    """Tell whether ``num`` is its leading ``seq_len`` digits repeated."""
    if ndigits % seq_len != 0:
        return False
    ntimes = ndigits // seq_len
    prefix = num // 10 ** (ndigits - seq_len)
    return num == make_pattern_num(prefix, seq_len, ntimes)


def count_digits(num: int) -> int:
    """Count digits the way the range checker expects.

    Zero has no digits, and an exact power of ten counts one digit fewer.
    """
    if num == 0:
        return 0
    log10 = len(str(num)) - 1
    return log10 + 1 if 10**log10 < num else log10


def check_int(num: int) -> bool:
    """Tell whether ``num`` is any block of digits repeated at least twice."""
    ndigits = count_digits(num)
    return any(check_seq(num, ndigits, sl) for sl in range(1, ndigits // 2 + 1))


def check_int_pair(num: int) -> bool:
    """Tell whether ``num`` is a block of digits repeated exactly twice."""
    ndigits = count_digits(num)
    if ndigits % 2 == 1:
        return False
    return check_seq(num, ndigits, ndigits // 2)


def add_in_range(low: int, high: int) -> int:
    """Sum the repeated-pattern numbers in ``low..=high``."""
    total = 0
    for n in range(low, high + 1):
        if check_int(n):
            logger.info("%d is invalid", n)
            total += n
    return total


def add_invalid_in_ranges(text: Union[str, bytes]) -> int:
    """Sum the repeated-pattern numbers over every range in ``text``."""
    total = 0
    for low, high in parse_ranges(text):
        value = add_in_range(low, high)
        total += value
        logger.info("[%d-%d] -> %d (%d)", low, high, high - low, value)
    return total


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(prog="digitpattern")
    parser.add_argument("file", nargs="?")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.file is None:
        raise SystemExit("Need a file argument!")
    with open(args.file, "rb") as handle:
        data = handle.read()
    print(f"sum is: {add_invalid_in_ranges(data)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())