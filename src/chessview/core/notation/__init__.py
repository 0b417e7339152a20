"""Notation package: SAN parsing and PGN movetext tokenization."""

from chessview.core.notation.models import Movetext
from chessview.core.notation.pgn import (
    PGN_RESULT_TOKENS,
    clean_line,
    clean_movetext,
    extract_san_token,
    is_draw_result,
    is_result_token,
    loser_from_result,
    resolve_result,
    tokenize,
)
from chessview.core.notation.san import SanParseError, parse_san

__all__ = [
    "Movetext",
    "PGN_RESULT_TOKENS",
    "SanParseError",
    "clean_line",
    "clean_movetext",
    "extract_san_token",
    "is_draw_result",
    "is_result_token",
    "loser_from_result",
    "parse_san",
    "resolve_result",
    "tokenize",
]
