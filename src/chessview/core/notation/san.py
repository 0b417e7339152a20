"""SAN (Standard Algebraic Notation) parsing against a board snapshot."""

from __future__ import annotations

import logging

from chessview.core.board import Board
from chessview.core.enums import Color, PieceType
from chessview.core.move import Move
from chessview.core.piece import Piece
from chessview.core.rules import is_in_check, is_pseudo_legal
from chessview.core.types import FILES, RANKS, Square, parse_square, row_of_rank

_LOGGER = logging.getLogger(__name__)

_SAN_PIECE_REV: dict[str, PieceType] = {
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}
_PROMOTION_TYPES = frozenset(
    {PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN}
)
_KINGSIDE = frozenset({"O-O", "0-0"})
_QUEENSIDE = frozenset({"O-O-O", "0-0-0"})


class SanParseError(ValueError):
    """A SAN token does not resolve to exactly one playable move."""

    def __init__(self, san: str, reason: str) -> None:
        super().__init__(f"{reason}: {san}")
        self.san = san
        self.reason = reason


def _parse_hint(san: str, hint: str) -> tuple[int | None, int | None]:
    """Split a disambiguation hint into ``(row, file)`` filters."""
    if not hint:
        return None, None
    if len(hint) == 1 and hint in FILES:
        return None, FILES.index(hint)
    if len(hint) == 1 and hint in RANKS:
        return row_of_rank(hint), None
    try:
        sq = parse_square(hint)
    except ValueError:
        raise SanParseError(san, "Bad disambiguation") from None
    return sq.row, sq.file


def parse_san(san: str, side_to_move: Color, board: Board) -> Move:
    """Resolve *san* for *side_to_move* on *board* into a :class:`Move`.

    Castling maps to a fixed king move on the home row without looking at
    the board. Other moves are matched against every piece of the named
    type; when several can reach the destination, the first one (in
    rank-major order) that does not leave its own king in check wins.

    *board* is not modified. Raises :class:`SanParseError` on failure.
    """
    clean = san.rstrip("!?").rstrip("+#")

    if clean in _KINGSIDE or clean in _QUEENSIDE:
        home = Square(side_to_move.home_row, 4)
        to_file = 6 if clean in _KINGSIDE else 2
        return Move(home, Square(home.row, to_file))

    promotion: PieceType | None = None
    if "=" in clean:
        clean, _, promo = clean.partition("=")
        promotion = _SAN_PIECE_REV.get(promo)
        if promotion not in _PROMOTION_TYPES:
            raise SanParseError(san, "Bad promotion")

    if len(clean) < 2:
        raise SanParseError(san, "Too short")
    try:
        destination = parse_square(clean[-2:])
    except ValueError:
        raise SanParseError(san, "Bad destination") from None

    body = clean[:-2]
    piece_type = PieceType.PAWN
    if body and body[0] in _SAN_PIECE_REV:
        piece_type = _SAN_PIECE_REV[body[0]]
        body = body[1:]

    capture = "x" in body
    hint_row, hint_file = _parse_hint(san, body.partition("x")[0])

    mover = Piece(side_to_move, piece_type)
    candidates = [
        sq
        for sq in board.pieces(side_to_move, piece_type)
        if (hint_row is None or sq.row == hint_row)
        and (hint_file is None or sq.file == hint_file)
        and is_pseudo_legal(board, mover, sq, destination, capture)
    ]

    if not candidates:
        raise SanParseError(san, "Illegal move")
    if len(candidates) == 1:
        return Move(candidates[0], destination, promotion)

    _LOGGER.debug("Disambiguating %s between %s", san, candidates)
    for origin in candidates:
        move = Move(origin, destination, promotion)
        trial = board.clone()
        trial.apply(move, side_to_move)
        if not is_in_check(trial, side_to_move):
            return move

    raise SanParseError(san, "No safe candidate")
