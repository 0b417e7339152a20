"""Replay layer - PGN library, playback session and Qt timer driver.

Quick start::

    from chessview.replay import GameReplay

    replay = GameReplay("1. e4 e5 2. Qh5 Nc6 3. Bc4 Nf6 4. Qxf7# 1-0")
    while replay.step() is not None:
        print(replay.board)
"""

from chessview.replay.library import (
    EmptyLibraryError,
    GameRecord,
    choose_game,
    last_name,
    list_pgn_files,
    load_games,
    load_pgn_file,
)
from chessview.replay.session import GameReplay, KingPose
from chessview.replay.settings import ReplaySettings

__all__ = [
    "EmptyLibraryError",
    "GameRecord",
    "GameReplay",
    "KingPose",
    "ReplaySettings",
    "choose_game",
    "last_name",
    "list_pgn_files",
    "load_games",
    "load_pgn_file",
]
