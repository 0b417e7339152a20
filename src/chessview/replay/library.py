"""PGN file discovery and multi-game loading."""

from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass, field
from pathlib import Path

_LOGGER = logging.getLogger(__name__)

_TAG_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')


class EmptyLibraryError(LookupError):
    """The games directory holds no PGN files at all."""

    def __init__(self, directory: Path) -> None:
        super().__init__(f"No PGN files found in {directory}")
        self.directory = directory


@dataclass(slots=True)
class GameRecord:
    """One game from a PGN file: raw movetext plus the tags the viewer shows."""

    movetext: str
    white: str = "White"
    black: str = "Black"
    year: str = ""
    result: str = ""
    headers: dict[str, str] = field(default_factory=dict)


def has_pgn_extension(name: str) -> bool:
    return Path(name).suffix.lower() == ".pgn"


def list_pgn_files(directory: Path) -> list[Path]:
    """Non-hidden ``.pgn`` files directly inside *directory*, sorted by name.

    Raises :class:`OSError` if the directory cannot be read.
    """
    files = [
        entry
        for entry in directory.iterdir()
        if not entry.name.startswith(".")
        and entry.is_file()
        and has_pgn_extension(entry.name)
    ]
    return sorted(files, key=lambda p: p.name)


def parse_tag_line(line: str) -> tuple[str, str] | None:
    """``[White "Tal, Mikhail"]`` -> ``("White", "Tal, Mikhail")``."""
    match = _TAG_RE.match(line.strip())
    if match is None:
        return None
    name, raw_value = match.groups()
    return name, raw_value.replace('\\"', '"').replace("\\\\", "\\")


def extract_year(date: str) -> str:
    """Leading four-digit year of a PGN date, or ``""``."""
    year = date[:4]
    if len(year) == 4 and year.isdigit():
        return year
    return ""


def last_name(full: str) -> str:
    """Surname for display: text before a comma, else the last word."""
    name = full.strip()
    if not name:
        return ""
    if "," in name:
        return name.split(",", 1)[0].rstrip()
    return name.split()[-1]


def _make_record(movetext: list[str], headers: dict[str, str]) -> GameRecord:
    return GameRecord(
        movetext="\n".join(movetext),
        white=headers.get("White") or "White",
        black=headers.get("Black") or "Black",
        year=extract_year(headers.get("Date", "")),
        result=headers.get("Result", ""),
        headers=headers,
    )


def load_games(text: str) -> list[GameRecord]:
    """Split a PGN document into games.

    An ``[Event`` tag starts a new game. Text before the first one is
    ignored, as are games without any movetext. Tag lines are only read
    until the first movetext line of a game; after that every line up to
    the next ``[Event`` is movetext, even one that opens with ``[`` inside
    a wrapped comment. Movetext lines are kept verbatim (newlines
    included) so comments can be stripped later by
    :func:`~chessview.core.notation.tokenize`.
    """
    games: list[GameRecord] = []
    headers: dict[str, str] = {}
    movetext: list[str] = []
    in_game = False

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line.startswith("[Event"):
            if in_game and movetext:
                games.append(_make_record(movetext, headers))
            headers = {}
            movetext = []
            in_game = True
        if not in_game or not line:
            continue
        if not movetext and line.startswith("["):
            tag = parse_tag_line(line)
            if tag is not None:
                headers[tag[0]] = tag[1]
            continue
        movetext.append(line)

    if in_game and movetext:
        games.append(_make_record(movetext, headers))
    return games


def load_pgn_file(path: Path) -> list[GameRecord]:
    return load_games(path.read_text(encoding="utf-8", errors="replace"))


def choose_game(directory: Path, rng: random.Random | None = None) -> GameRecord | None:
    """Pick a random game from a random PGN file in *directory*.

    Returns ``None`` when the chosen file holds no playable game; another
    call may pick a different file. Raises :class:`EmptyLibraryError` when
    the directory has no PGN files, and :class:`OSError` when it cannot be
    read.
    """
    rng = rng or random.Random()
    files = list_pgn_files(directory)
    if not files:
        raise EmptyLibraryError(directory)

    path = rng.choice(files)
    try:
        games = load_pgn_file(path)
    except OSError as exc:
        _LOGGER.warning("Failed to open %s: %s", path, exc)
        return None
    if not games:
        _LOGGER.warning("No games in %s", path)
        return None
    return rng.choice(games)
