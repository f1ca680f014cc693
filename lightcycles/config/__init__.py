"""Configuration layer: constants, typed config dataclasses, and enums."""

from lightcycles.config.constants import (
    FLUSH_THRESHOLD,
    FRAME_INTERVAL,
    MAX_PLAYERS,
    PLAYER_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPEED,
    TEXT_SIZE,
    WINDOW_TITLE,
)
from lightcycles.config.types import (
    GameConfig,
    HeadlessConfig,
    Heading,
    Rotation,
    RoundStatus,
)

__all__ = [
    "FLUSH_THRESHOLD",
    "FRAME_INTERVAL",
    "GameConfig",
    "HeadlessConfig",
    "Heading",
    "MAX_PLAYERS",
    "PLAYER_WIDTH",
    "Rotation",
    "RoundStatus",
    "SCREEN_HEIGHT",
    "SCREEN_WIDTH",
    "SPEED",
    "TEXT_SIZE",
    "WINDOW_TITLE",
]
