"""GameReplay - ply-by-ply playback of one game's movetext."""

from __future__ import annotations

import logging
from enum import IntEnum, auto

from chessview.core.board import Board
from chessview.core.enums import Color
from chessview.core.move import Move
from chessview.core.notation import (
    SanParseError,
    is_draw_result,
    loser_from_result,
    parse_san,
    resolve_result,
    tokenize,
)
from chessview.core.rules import is_in_check

_LOGGER = logging.getLogger(__name__)


class KingPose(IntEnum):
    """How a king is presented once the game is over."""

    UPRIGHT = auto()
    TOPPLED = auto()  # loser of a decisive game
    TILTED = auto()  # both kings in a drawn game


class GameReplay:
    """Owns the board of one game and advances it one SAN token at a time.

    A token that fails to parse halts the game: :attr:`is_finished` turns
    true and :attr:`failed_token` records the offender.
    """

    __slots__ = (
        "_board",
        "_tokens",
        "_result",
        "_ply",
        "_last_move",
        "_checked_color",
        "_failed_token",
    )

    def __init__(self, movetext: str, header_result: str | None = None) -> None:
        parsed = tokenize(movetext)
        self._tokens: tuple[str, ...] = tuple(parsed.tokens)
        self._result = resolve_result(parsed.result, header_result)
        self._board = Board.initial()
        self._ply = 0
        self._last_move: Move | None = None
        self._checked_color: Color | None = None
        self._failed_token: str | None = None

    # -- Properties ---------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def tokens(self) -> tuple[str, ...]:
        return self._tokens

    @property
    def result(self) -> str | None:
        return self._result

    @property
    def ply(self) -> int:
        """Number of tokens applied so far."""
        return self._ply

    @property
    def side_to_move(self) -> Color:
        return Color.WHITE if self._ply % 2 == 0 else Color.BLACK

    @property
    def last_move(self) -> Move | None:
        return self._last_move

    @property
    def checked_color(self) -> Color | None:
        """Side whose king is attacked after the last move, if any."""
        return self._checked_color

    @property
    def failed_token(self) -> str | None:
        return self._failed_token

    @property
    def is_finished(self) -> bool:
        return self._failed_token is not None or self._ply >= len(self._tokens)

    @property
    def at_final_position(self) -> bool:
        """Whether every token has been played without a failure."""
        return self._failed_token is None and self._ply == len(self._tokens)

    # -- Playback -----------------------------------------------------------

    def reset(self) -> None:
        self._board.reset()
        self._ply = 0
        self._last_move = None
        self._checked_color = None
        self._failed_token = None

    def step(self) -> Move | None:
        """Play the next token; ``None`` once the game is over or halted."""
        if self.is_finished:
            return None

        san = self._tokens[self._ply]
        color = self.side_to_move
        try:
            move = parse_san(san, color, self._board)
        except SanParseError as exc:
            _LOGGER.warning("Failed to parse move %d (%s): %s", self._ply + 1, san, exc)
            self._failed_token = san
            return None

        self._board.apply(move, color)
        self._ply += 1
        self._last_move = move
        opponent = color.opposite
        self._checked_color = opponent if is_in_check(self._board, opponent) else None
        return move

    def seek(self, index: int) -> None:
        """Rebuild the position after the first *index* plies."""
        self.reset()
        limit = max(0, min(index, len(self._tokens)))
        while self._ply < limit:
            if self.step() is None:
                break

    # -- Game over presentation ----------------------------------------------

    def king_pose(self, color: Color) -> KingPose:
        """Pose of *color*'s king; only changes at the final position."""
        if not self.at_final_position:
            return KingPose.UPRIGHT
        if loser_from_result(self._result) == color:
            return KingPose.TOPPLED
        if is_draw_result(self._result):
            return KingPose.TILTED
        return KingPose.UPRIGHT
