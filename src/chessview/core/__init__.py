"""Core domain layer - pure chess rules with zero external dependencies.

Quick start::

    from chessview.core import Board, Color, parse_san, tokenize

    board = Board.initial()
    side = Color.WHITE
    for san in tokenize("1. e4 e5 2. Nf3 Nc6 *").tokens:
        board.apply(parse_san(san, side, board), side)
        side = side.opposite
"""

from chessview.core.board import Board
from chessview.core.enums import Color, PieceType
from chessview.core.move import Move
from chessview.core.notation import (
    Movetext,
    SanParseError,
    parse_san,
    tokenize,
)
from chessview.core.piece import Piece
from chessview.core.rules import clear_path, is_in_check, is_pseudo_legal
from chessview.core.types import Square, make_square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    # Rules
    "clear_path",
    "is_in_check",
    "is_pseudo_legal",
    # Notation
    "Movetext",
    "SanParseError",
    "parse_san",
    "tokenize",
]
