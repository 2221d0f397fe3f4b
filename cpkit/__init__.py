"""Classic algorithms, competitive-programming problem solutions and a driver command."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "contest_a",
    "contest_b",
    "graphs",
    "numtheory",
    "practice_a",
    "practice_b",
    "searching",
    "sorting",
    "structures",
]