"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessview.core.enums import PieceType
from chessview.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Structural move: origin, destination and optional promotion.

    The side to move is supplied by the caller, never stored here.
    """

    origin: Square
    destination: Square
    promotion: PieceType | None = None

    def __str__(self) -> str:
        base = f"{square_name(self.origin)}{square_name(self.destination)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def file_delta(self) -> int:
        return self.destination.file - self.origin.file
