"""PGN movetext cleaning, tokenization and result helpers."""

from __future__ import annotations

import re

from chessview.core.enums import Color
from chessview.core.notation.models import Movetext

PGN_RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})

_MOVE_NUMBER_RE = re.compile(r"^\d+\.+")
_NAG_RE = re.compile(r"^\$\d+$")


def clean_movetext(text: str) -> str:
    """Drop ``{...}`` comments, ``(...)`` variations and ``;`` line comments.

    Comment and variation suppression are independent flags, not nesting
    counters: the first closing marker ends the mode. Both carry over line
    breaks; a ``;`` comment runs to the end of its line.
    """
    out: list[str] = []
    in_comment = False
    in_variation = False
    in_line_comment = False

    for ch in text:
        if in_line_comment:
            if ch == "\n":
                in_line_comment = False
                out.append(ch)
            continue
        if ch == "{":
            in_comment = True
        elif ch == "}":
            in_comment = False
        elif ch == "(":
            in_variation = True
        elif ch == ")":
            in_variation = False
        elif in_comment or in_variation:
            continue
        elif ch == ";":
            in_line_comment = True
        else:
            out.append(ch)
    return "".join(out)


def clean_line(line: str) -> str:
    """Clean a single line of movetext (see :func:`clean_movetext`)."""
    return clean_movetext(line)


def extract_san_token(raw: str) -> str | None:
    """Strip a move-number prefix and annotation glyphs from *raw*.

    ``"12.Nf3!?"`` -> ``"Nf3"``, ``"3..."`` -> ``None``.
    """
    match = _MOVE_NUMBER_RE.match(raw)
    token = raw[match.end() :] if match else raw.lstrip(".")
    if _NAG_RE.match(token):
        return None
    token = re.split(r"[!?]", token, maxsplit=1)[0]
    return token or None


def is_result_token(token: str) -> bool:
    return token in PGN_RESULT_TOKENS


def tokenize(buffer: str) -> Movetext:
    """Split a movetext buffer into SAN tokens, stopping at a result token."""
    movetext = Movetext()
    for raw in clean_movetext(buffer).split():
        token = extract_san_token(raw)
        if token is None:
            continue
        if is_result_token(token):
            movetext.result = token
            break
        movetext.tokens.append(token)
    return movetext


def resolve_result(movetext_result: str | None, header_result: str | None) -> str | None:
    """Prefer the result written in the movetext over the ``Result`` tag."""
    if movetext_result:
        return movetext_result
    return header_result or None


def loser_from_result(result: str | None) -> Color | None:
    """Color that lost a decisive game, or ``None``."""
    if result == "1-0":
        return Color.BLACK
    if result == "0-1":
        return Color.WHITE
    return None


def is_draw_result(result: str | None) -> bool:
    return result == "1/2-1/2"
