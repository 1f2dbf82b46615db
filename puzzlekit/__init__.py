"""Solvers for six small puzzles: dial, digit patterns, joltage, forklift, intervals and column arithmetic."""

__version__ = "0.1.0"
__all__ = ["rotator", "digitpattern", "joltage", "forklift", "foodb", "postfix"]