"""Square type and coordinate helpers.

Board layout (rows from Black's back rank down):
    row 0 = rank 8, ..., row 7 = rank 1
    file 0 = a, ..., file 7 = h

So ``a8`` is ``(0, 0)``, ``e4`` is ``(4, 4)`` and ``h1`` is ``(7, 7)``.
"""

from __future__ import annotations

from typing import NamedTuple

FILES = "abcdefgh"
RANKS = "12345678"


class Square(NamedTuple):
    """A ``(row, file)`` board coordinate."""

    row: int
    file: int

    def __str__(self) -> str:
        return square_name(self)


def make_square(row: int, file: int) -> Square:
    """Create square from row (0-7) and file (0-7)."""
    return Square(row, file)


def row_of_rank(rank_char: str) -> int:
    """Board row for a rank digit, e.g. '8' -> 0, '1' -> 7."""
    if len(rank_char) != 1 or rank_char not in RANKS:
        raise ValueError(f"Invalid rank: {rank_char!r}")
    return 7 - RANKS.index(rank_char)


def file_of_letter(file_char: str) -> int:
    """File index for a file letter, e.g. 'a' -> 0."""
    if len(file_char) != 1 or file_char not in FILES:
        raise ValueError(f"Invalid file: {file_char!r}")
    return FILES.index(file_char)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (4, 4) -> 'e4'."""
    row, file = sq
    return FILES[file] + RANKS[7 - row]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' -> (4, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(row_of_rank(name[1]), file_of_letter(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, file) for row in range(8) for file in range(8)
)
