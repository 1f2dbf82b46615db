"""Count how often a 100-position dial passes through zero."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from dataclasses import dataclass
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

SIZE = 100
_NUMBER = re.compile(r"[+-]?[0-9]+")


def parse_line(line: str) -> Optional[int]:
    """Parse an ``R<n>``/``L<n>`` instruction into a signed step count.

    Returns ``None`` for lines that do not start with ``R`` or ``L``;
    raises ``ValueError`` when the rest of the line is not a number.
    """
    if not line:
        return None
    sign = {"R": 1, "L": -1}.get(line[0])
    if sign is None:
        return None
    rest = line[1:]
    if not _NUMBER.fullmatch(rest):
        raise ValueError(f"Not a number: {rest!r}")
    return sign * int(rest)


@dataclass
class Dial:
    """A dial with positions 0..99 that counts passes through zero."""

    state: int = 50
    zero_count: int = 0

    def spin(self, n: int) -> None:
        """Turn the dial by ``n`` positions (negative turns left)."""
        div = abs(n) // SIZE * (1 if n >= 0 else -1)
        remainder = n - div * SIZE
        unmod = self.state + remainder
        old_state = self.state
        self.state = unmod % SIZE

        cross = abs(div)
        if self.state == 0 and n != 0:
            cross += 1
        elif old_state > 0 and unmod < 0:
            cross += 1
        elif unmod >= SIZE:
            cross += 1
        logger.info(
            "state: %d, n: %d, div: %d, unmod: %d, state': %d, cross: %d",
            old_state, n, div, unmod, self.state, cross,
        )
        self.zero_count += cross


def count_zero_crossings(lines: Iterable[str]) -> int:
    """Spin a fresh dial by every parsable line and return its zero count."""
    dial = Dial()
    for line in lines:
        step = parse_line(line)
        if step is not None:
            dial.spin(step)
    return dial.zero_count


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(prog="rotator")
    parser.add_argument("file", nargs="?")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.file is None:
        raise SystemExit("Need a file argument!")
    logger.info("Opening %s", args.file)
    with open(args.file, encoding="utf-8", newline="") as handle:
        lines = (line.removesuffix("\n").removesuffix("\r") for line in handle)
        count = count_zero_crossings(lines)
    print(f"Zero count: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())