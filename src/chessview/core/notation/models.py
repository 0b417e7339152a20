"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Movetext:
    """Mainline SAN tokens of one game plus the result token that ended them."""

    tokens: list[str] = field(default_factory=list)
    result: str | None = None

    def __len__(self) -> int:
        return len(self.tokens)
