"""Configuration dataclasses and enumerations shared across the game.

Frozen dataclasses validate their ranges eagerly so that the simulation core
can treat every value it receives as already normalized.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from lightcycles.config.constants import (
    MAX_PLAYERS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPEED,
)

__all__ = [
    "GameConfig",
    "HeadlessConfig",
    "Heading",
    "Rotation",
    "RoundStatus",
]


class Heading(IntEnum):
    """Cycle heading; the integer order is the rotation order."""

    DOWN = 0
    RIGHT = 1
    UP = 2
    LEFT = 3


class Rotation(Enum):
    """Turn command: step the heading forward or backward in cyclic order."""

    INCREASE = 1
    DECREASE = -1


class RoundStatus(Enum):
    """Round controller state."""

    RUNNING = "running"
    ENDED = "ended"


def _validate_field(width: int, height: int) -> None:
    if width < 1:
        raise ValueError("width must be >= 1")
    if height < 1:
        raise ValueError("height must be >= 1")


def _validate_player_count(player_count: int) -> None:
    if not 1 <= player_count <= MAX_PLAYERS:
        raise ValueError(f"player_count must be in [1, {MAX_PLAYERS}]")


@dataclass(frozen=True)
class GameConfig:
    """Field dimensions and pacing for one controller lifetime."""

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    speed: int = SPEED
    player_count: int = MAX_PLAYERS
    seed: int | None = None

    def __post_init__(self) -> None:
        _validate_field(self.width, self.height)
        if self.speed < 1:
            raise ValueError("speed must be >= 1")
        _validate_player_count(self.player_count)


@dataclass(frozen=True)
class HeadlessConfig:
    """Parameters for seeded, input-free batches of recorded rounds."""

    rounds: int = 1
    max_frames: int = 2_000
    base_seed: int = 0
    player_count: int = MAX_PLAYERS
    speed: int = SPEED
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT

    def __post_init__(self) -> None:
        if self.rounds < 1:
            raise ValueError("rounds must be >= 1")
        if self.max_frames < 1:
            raise ValueError("max_frames must be >= 1")
        GameConfig(
            width=self.width,
            height=self.height,
            speed=self.speed,
            player_count=self.player_count,
        )

    def game_config(self, round_index: int) -> GameConfig:
        """Return the per-round game config, seeded from ``base_seed``."""
        return GameConfig(
            width=self.width,
            height=self.height,
            speed=self.speed,
            player_count=self.player_count,
            seed=self.base_seed + round_index,
        )
