"""Pseudo-legal movement rules and check detection.

These are pure functions over a :class:`Board` snapshot. They answer
"can this piece get there" and "is this king attacked"; they do not know
whose turn it is, castling rights or move history.
"""

from __future__ import annotations

from chessview.core.board import Board
from chessview.core.enums import Color, PieceType
from chessview.core.piece import Piece
from chessview.core.types import Square

KNIGHT_OFFSETS: frozenset[tuple[int, int]] = frozenset(
    {(-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1)}
)

# Board row of a pawn that may capture en passant (rank 5 for White, 4 for Black).
_EN_PASSANT_ROW: dict[Color, int] = {Color.WHITE: 3, Color.BLACK: 4}


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def clear_path(board: Board, origin: Square, destination: Square) -> bool:
    """Whether every square strictly between two aligned squares is empty.

    Only meaningful for rank, file and diagonal lines.
    """
    dr = _sign(destination.row - origin.row)
    df = _sign(destination.file - origin.file)
    steps = max(abs(destination.row - origin.row), abs(destination.file - origin.file))
    for i in range(1, steps):
        if board[Square(origin.row + i * dr, origin.file + i * df)] is not None:
            return False
    return True


def _pawn_geometry(
    board: Board,
    piece: Piece,
    origin: Square,
    destination: Square,
    capture: bool,
) -> tuple[bool, bool]:
    """Return ``(movement_valid, en_passant)`` for a pawn."""
    forward = piece.color.forward
    row_step = destination.row - origin.row
    file_step = abs(destination.file - origin.file)

    if file_step == 0:
        if capture or not board.is_empty(destination):
            return False, False
        if row_step == forward:
            return True, False
        start_row = piece.color.home_row + forward
        if row_step == 2 * forward and origin.row == start_row:
            return clear_path(board, origin, destination), False
        return False, False

    if file_step != 1 or row_step != forward or not capture:
        return False, False

    target = board[destination]
    if target is not None:
        return target.is_enemy_of(piece.color), False

    if origin.row != _EN_PASSANT_ROW[piece.color]:
        return False, False
    beside = board[Square(origin.row, destination.file)]
    en_passant = beside == Piece(piece.color.opposite, PieceType.PAWN)
    return en_passant, en_passant


def is_pseudo_legal(
    board: Board,
    piece: Piece,
    origin: Square,
    destination: Square,
    capture: bool,
) -> bool:
    """Whether *piece* on *origin* may move to *destination*.

    *capture* states whether the move is meant to take something. A capture
    is legal only onto an enemy piece (or as a pawn's en passant); a quiet
    move only onto an empty square. King-safety is not considered.
    """
    dr = abs(destination.row - origin.row)
    df = abs(destination.file - origin.file)
    en_passant = False

    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        movement_valid, en_passant = _pawn_geometry(
            board, piece, origin, destination, capture
        )
    elif ptype == PieceType.KNIGHT:
        movement_valid = (dr, df) in KNIGHT_OFFSETS
    elif ptype == PieceType.BISHOP:
        movement_valid = dr == df and dr > 0 and clear_path(board, origin, destination)
    elif ptype == PieceType.ROOK:
        movement_valid = (
            (dr == 0 or df == 0)
            and dr + df > 0
            and clear_path(board, origin, destination)
        )
    elif ptype == PieceType.QUEEN:
        movement_valid = (
            (dr == df or dr == 0 or df == 0)
            and dr + df > 0
            and clear_path(board, origin, destination)
        )
    else:
        movement_valid = dr <= 1 and df <= 1 and dr + df > 0

    if not movement_valid:
        return False

    target = board[destination]
    if capture:
        return (target is not None and target.is_enemy_of(piece.color)) or en_passant
    return target is None


def is_in_check(board: Board, color: Color) -> bool:
    """Whether *color*'s king is attacked by any enemy piece.

    A board without that king reports ``False``.
    """
    king_sq = board.king_square(color)
    if king_sq is None:
        return False

    enemy = color.opposite
    for sq, piece in board.occupied():
        if piece.color != enemy:
            continue
        if is_pseudo_legal(board, piece, sq, king_sq, capture=True):
            return True
    return False
