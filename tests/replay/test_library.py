"""Tests for PGN file discovery and game loading."""

import random
from pathlib import Path

import pytest

from chessview.core.notation import tokenize
from chessview.replay.library import (
    EmptyLibraryError,
    choose_game,
    extract_year,
    has_pgn_extension,
    last_name,
    list_pgn_files,
    load_games,
    load_pgn_file,
    parse_tag_line,
)


class TestHelpers:
    @pytest.mark.parametrize("name", ["games.pgn", "GAMES.PGN", "a.b.Pgn"])
    def test_pgn_extension(self, name: str) -> None:
        assert has_pgn_extension(name)

    @pytest.mark.parametrize("name", ["games.txt", "pgn", "games.pgnx", "games."])
    def test_not_pgn_extension(self, name: str) -> None:
        assert not has_pgn_extension(name)

    def test_parse_tag_line(self) -> None:
        assert parse_tag_line('[White "Tal, Mikhail"]') == ("White", "Tal, Mikhail")
        assert parse_tag_line('[Event "A \\"quoted\\" name"]') == (
            "Event",
            'A "quoted" name',
        )
        assert parse_tag_line("1. e4 e5") is None

    def test_extract_year(self) -> None:
        assert extract_year("1851.06.21") == "1851"
        assert extract_year("????.??.??") == ""
        assert extract_year("85") == ""

    def test_last_name(self) -> None:
        assert last_name("Anderssen, Adolf") == "Anderssen"
        assert last_name("Magnus Carlsen") == "Carlsen"
        assert last_name("  Morphy ") == "Morphy"
        assert last_name("") == ""


class TestLoadGames:
    def test_splits_games_and_reads_tags(self, sample_pgn: str) -> None:
        games = load_games(sample_pgn)
        assert len(games) == 2

        first = games[0]
        assert first.white == "Anderssen, Adolf"
        assert first.black == "Kieseritzky, Lionel"
        assert first.year == "1851"
        assert first.result == "1-0"
        assert first.headers["Site"] == "London"
        assert "1. e4 e5" in first.movetext

    def test_defaults_for_missing_tags(self, sample_pgn: str) -> None:
        second = load_games(sample_pgn)[1]
        assert second.white == "Player One"
        assert second.black == "Black"
        assert second.year == ""
        assert second.result == "1/2-1/2"

    def test_games_without_movetext_dropped(self) -> None:
        text = '[Event "Empty"]\n[Result "*"]\n\n[Event "Real"]\n\n1. e4 *\n'
        games = load_games(text)
        assert len(games) == 1
        assert games[0].headers["Event"] == "Real"

    def test_text_before_first_event_ignored(self) -> None:
        assert load_games("1. e4 e5 *\n") == []

    def test_movetext_keeps_line_breaks(self) -> None:
        text = '[Event "x"]\n\n1. e4 ; comment\ne5 *\n'
        assert load_games(text)[0].movetext == "1. e4 ; comment\ne5 *"

    def test_bracket_line_inside_comment_is_movetext(self) -> None:
        text = '[Event "x"]\n\n1. e4 {long note\n[see ref] } e5 2. Nf3 1-0\n'
        game = load_games(text)[0]
        assert game.movetext == "1. e4 {long note\n[see ref] } e5 2. Nf3 1-0"
        parsed = tokenize(game.movetext)
        assert parsed.tokens == ["e4", "e5", "Nf3"]
        assert parsed.result == "1-0"

    def test_next_event_still_starts_a_game(self) -> None:
        text = '[Event "a"]\n\n1. e4 *\n[Event "b"]\n[White "Second"]\n\n1. d4 *\n'
        games = load_games(text)
        assert [g.headers["Event"] for g in games] == ["a", "b"]
        assert games[1].white == "Second"


class TestDirectory:
    def test_list_pgn_files(self, tmp_path: Path) -> None:
        (tmp_path / "b.pgn").write_text("", encoding="utf-8")
        (tmp_path / "a.PGN").write_text("", encoding="utf-8")
        (tmp_path / ".hidden.pgn").write_text("", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("", encoding="utf-8")
        (tmp_path / "dir.pgn").mkdir()
        assert [p.name for p in list_pgn_files(tmp_path)] == ["a.PGN", "b.pgn"]

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            list_pgn_files(tmp_path / "missing")

    def test_load_pgn_file(self, tmp_path: Path, sample_pgn: str) -> None:
        path = tmp_path / "games.pgn"
        path.write_text(sample_pgn, encoding="utf-8")
        assert len(load_pgn_file(path)) == 2

    def test_choose_game(self, tmp_path: Path, sample_pgn: str) -> None:
        (tmp_path / "games.pgn").write_text(sample_pgn, encoding="utf-8")
        game = choose_game(tmp_path, random.Random(3))
        assert game is not None
        assert game.white in ("Anderssen, Adolf", "Player One")

    def test_choose_game_empty_directory(self, tmp_path: Path) -> None:
        (tmp_path / "notes.txt").write_text("", encoding="utf-8")
        with pytest.raises(EmptyLibraryError):
            choose_game(tmp_path)

    def test_choose_game_file_without_games(self, tmp_path: Path) -> None:
        (tmp_path / "empty.pgn").write_text("", encoding="utf-8")
        assert choose_game(tmp_path) is None

    def test_choose_game_skips_to_other_files(self, tmp_path: Path) -> None:
        (tmp_path / "a_empty.pgn").write_text("", encoding="utf-8")
        (tmp_path / "b_good.pgn").write_text(
            '[Event "x"]\n[White "Good"]\n\n1. e4 e5 1-0\n', encoding="utf-8"
        )
        picks = [choose_game(tmp_path, random.Random(seed)) for seed in range(20)]
        found = [game for game in picks if game is not None]
        assert found
        assert all(game.white == "Good" for game in found)
