"""Tests for the console entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from chessview.app import run_application

pytestmark = pytest.mark.usefixtures("qapp")

_FAST = ["--delay-ms", "1", "--pause-ms", "0", "--retry-ms", "1", "--once"]


class TestRunApplication:
    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_retries_past_files_without_games(
        self, tmp_path: Path, seed: int, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "a_empty.pgn").write_text("", encoding="utf-8")
        (tmp_path / "b_good.pgn").write_text(
            '[Event "x"]\n[White "Morphy, Paul"]\n[Black "Duke"]\n\n1. e4 e5 1-0\n',
            encoding="utf-8",
        )
        code = run_application(["--games-dir", str(tmp_path), "--seed", str(seed), *_FAST])
        out = capsys.readouterr().out
        assert code == 0
        assert "Morphy - Duke" in out
        assert "Result: 1-0" in out

    def test_exits_when_directory_has_no_pgn_files(self, tmp_path: Path) -> None:
        assert run_application(["--games-dir", str(tmp_path), *_FAST]) == 1

    def test_exits_when_directory_is_missing(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing"
        assert run_application(["--games-dir", str(missing), *_FAST]) == 1
