"""Application entry point: replay random PGN games in the terminal."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from chessview.core.board import Board
from chessview.core.enums import Color
from chessview.core.move import Move
from chessview.replay.library import (
    EmptyLibraryError,
    GameRecord,
    choose_game,
    last_name,
)
from chessview.replay.session import GameReplay, KingPose
from chessview.replay.settings import ReplaySettings

_LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> ReplaySettings:
    defaults = ReplaySettings()
    parser = argparse.ArgumentParser(
        prog="chessview", description="Replay games from a directory of PGN files."
    )
    parser.add_argument(
        "--games-dir", type=Path, default=defaults.games_dir, help="PGN directory"
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=defaults.move_delay_ms,
        help="pause between moves",
    )
    parser.add_argument(
        "--pause-ms",
        type=int,
        default=defaults.game_over_pause_ms,
        help="pause after the final position",
    )
    parser.add_argument(
        "--retry-ms",
        type=int,
        default=defaults.retry_ms,
        help="wait before picking another file when one has no games",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--once", action="store_true", help="stop after a single game"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return ReplaySettings(
        games_dir=args.games_dir,
        move_delay_ms=args.delay_ms,
        game_over_pause_ms=args.pause_ms,
        retry_ms=args.retry_ms,
        loop=not args.once,
        seed=args.seed,
    )


def _title(game: GameRecord) -> str:
    white = last_name(game.white) or game.white
    black = last_name(game.black) or game.black
    year = f" ({game.year})" if game.year else ""
    return f"{white} - {black}{year}"


def run_application(argv: list[str] | None = None) -> int:
    """Create the Qt event loop and play games until the library is exhausted."""
    from PyQt6.QtCore import QCoreApplication, QTimer

    from chessview.replay.qt_bridge import ReplayPlayer

    settings = _parse_args(argv)
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("chessview")

    rng = random.Random(settings.seed)
    player = ReplayPlayer(settings)

    def _on_move(ply: int, move: Move, gives_check: bool) -> None:
        suffix = " check" if gives_check else ""
        print(f"{ply // 2 + 1}{'.' if ply % 2 == 0 else '...'} {move}{suffix}")

    def _on_position(board: Board) -> None:
        print(board, end="\n\n")

    def _on_finished(result: str) -> None:
        replay = player.replay
        print(f"Result: {result or '?'}")
        if replay is not None:
            for color in Color:
                pose = replay.king_pose(color)
                if pose != KingPose.UPRIGHT:
                    print(f"{color} king: {pose.name.lower()}")
        if settings.loop:
            QTimer.singleShot(settings.game_over_pause_ms, _next_game)
        else:
            app.quit()

    def _next_game() -> None:
        try:
            game = choose_game(settings.games_dir, rng)
        except EmptyLibraryError as exc:
            _LOGGER.error("%s", exc)
            app.exit(1)
            return
        except OSError as exc:
            _LOGGER.error("Failed to read PGN directory %s: %s", settings.games_dir, exc)
            app.exit(1)
            return
        if game is None:
            QTimer.singleShot(settings.retry_ms, _next_game)
            return
        print(_title(game))
        player.load(GameReplay(game.movetext, game.result))
        player.start()

    player.move_played.connect(_on_move)
    player.position_changed.connect(_on_position)
    player.game_finished.connect(_on_finished)

    QTimer.singleShot(0, _next_game)
    return app.exec()


def main() -> None:
    """Launch the chessview replayer."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
