"""Board - piece placement on an 8x8 grid plus move application."""

from __future__ import annotations

from collections.abc import Iterator

from chessview.core.enums import Color, PieceType
from chessview.core.move import Move
from chessview.core.piece import Piece
from chessview.core.types import ALL_SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 board; the grid is the only record of where pieces are."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, file = sq
        return self._grid[row][file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, file = sq
        self._grid[row][file] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        """Read-only snapshot of the grid, row 0 (rank 8) first."""
        return tuple(tuple(row) for row in self._grid)

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in rank-major, file-minor order."""
        for sq in ALL_SQUARES:
            piece = self[sq]
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*, in scan order."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == target]

    def king_square(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or ``None`` if there is none."""
        kings = self.pieces(color, PieceType.KING)
        return kings[0] if kings else None

    # -- Mutation / copying -------------------------------------------------

    def clone(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    copy = clone

    def clear(self) -> None:
        self._grid = [[None] * 8 for _ in range(8)]

    def reset(self) -> None:
        """Set up the standard starting position."""
        self.clear()
        for color in Color:
            home = color.home_row
            pawn_row = home + color.forward
            for file, piece_type in enumerate(_BACK_RANK):
                self._grid[home][file] = Piece(color, piece_type)
                self._grid[pawn_row][file] = Piece(color, PieceType.PAWN)

    def apply(self, move: Move, color: Color) -> None:
        """Play *move* for *color* without re-checking legality.

        Handles the en passant capture, promotion and the rook hop of a
        castling king. An empty origin leaves the board untouched.
        """
        piece = self[move.origin]
        if piece is None:
            return

        if (
            piece.piece_type == PieceType.PAWN
            and abs(move.file_delta) == 1
            and self.is_empty(move.destination)
        ):
            # The captured pawn sits beside the mover, on the destination file.
            self[Square(move.origin.row, move.destination.file)] = None

        if move.promotion is not None:
            self[move.destination] = Piece(color, move.promotion)
        else:
            self[move.destination] = piece
        self[move.origin] = None

        if piece.piece_type == PieceType.KING and abs(move.file_delta) == 2:
            kingside = move.file_delta > 0
            rook_from = Square(move.origin.row, 7 if kingside else 0)
            rook_to = Square(move.origin.row, 5 if kingside else 3)
            self[rook_to] = Piece(color, PieceType.ROOK)
            self[rook_from] = None

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        lines: list[str] = []
        for row_idx, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            lines.append(f"{8 - row_idx} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
