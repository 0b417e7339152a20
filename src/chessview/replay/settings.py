"""Replay configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ReplaySettings:
    """All user-configurable playback settings."""

    # Library
    games_dir: Path = Path("games")

    # Timing (milliseconds)
    move_delay_ms: int = 5000
    game_over_pause_ms: int = 10000
    retry_ms: int = 500

    # Playback
    loop: bool = True
    seed: int | None = None
