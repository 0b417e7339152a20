"""Qt driver that plays a :class:`GameReplay` on a timer."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from chessview.replay.session import GameReplay
from chessview.replay.settings import ReplaySettings


class ReplayPlayer(QObject):
    """Advances one ply per timer tick and reports each step as a signal.

    Manual stepping (forward and back) is only honoured while paused, and
    stepping back rebuilds the position from the start of the game.
    """

    move_played = pyqtSignal(int, object, bool)  # ply, move, gives check
    move_failed = pyqtSignal(int, str)  # ply, san
    position_changed = pyqtSignal(object)  # board
    paused_changed = pyqtSignal(bool)
    game_finished = pyqtSignal(str)  # result token, "" when unknown

    __slots__ = ("_settings", "_timer", "_replay", "_paused", "_finished_emitted")

    def __init__(
        self,
        settings: ReplaySettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or ReplaySettings()
        self._timer = QTimer(self)
        self._timer.setInterval(self._settings.move_delay_ms)
        self._timer.timeout.connect(self.advance)
        self._replay: GameReplay | None = None
        self._paused = False
        self._finished_emitted = False

    # -- Properties ---------------------------------------------------------

    @property
    def replay(self) -> GameReplay | None:
        return self._replay

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    # -- Slots --------------------------------------------------------------

    @pyqtSlot(object)
    def load(self, replay_obj: object) -> None:
        """Replace the current game and show its starting position."""
        if not isinstance(replay_obj, GameReplay):
            raise TypeError("ReplayPlayer.load expects a GameReplay")
        self.stop()
        self._replay = replay_obj
        self._paused = False
        self._finished_emitted = False
        self.position_changed.emit(replay_obj.board)

    @pyqtSlot()
    def start(self) -> None:
        if self._replay is not None:
            self._timer.start()

    @pyqtSlot()
    def stop(self) -> None:
        self._timer.stop()

    @pyqtSlot()
    def toggle_pause(self) -> None:
        self._paused = not self._paused
        self.paused_changed.emit(self._paused)

    @pyqtSlot()
    def advance(self) -> None:
        """Timer tick: play the next ply unless paused."""
        if self._paused:
            return
        self._play_next()

    @pyqtSlot()
    def step_forward(self) -> None:
        replay = self._replay
        if not self._paused or replay is None or replay.is_finished:
            return
        self._play_next()

    @pyqtSlot()
    def step_back(self) -> None:
        replay = self._replay
        if not self._paused or replay is None or replay.ply == 0:
            return
        replay.seek(replay.ply - 1)
        if not replay.is_finished:
            self._finished_emitted = False
        self.position_changed.emit(replay.board)

    # -- Internal -----------------------------------------------------------

    def _play_next(self) -> None:
        replay = self._replay
        if replay is None:
            return

        if not replay.is_finished:
            ply = replay.ply
            move = replay.step()
            if move is None:
                self.move_failed.emit(ply, replay.failed_token or "")
            else:
                self.move_played.emit(ply, move, replay.checked_color is not None)
                self.position_changed.emit(replay.board)

        if replay.is_finished and not self._finished_emitted:
            self._finished_emitted = True
            self._timer.stop()
            self.game_finished.emit(replay.result or "")
