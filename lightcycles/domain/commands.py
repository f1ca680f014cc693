"""Discrete input commands consumed by the round controller.

Each command is a small frozen value; an input source emits one per key
press and the controller applies each exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from lightcycles.config.constants import MAX_PLAYERS
from lightcycles.config.types import Rotation


@dataclass(frozen=True)
class Turn:
    """Rotate one player's heading by a single step."""

    player: int
    rotation: Rotation

    def __post_init__(self) -> None:
        if not 0 <= self.player < MAX_PLAYERS:
            raise ValueError(f"player must be in [0, {MAX_PLAYERS - 1}]")


@dataclass(frozen=True)
class ResetRound:
    """Start a fresh round regardless of the current state."""


@dataclass(frozen=True)
class Quit:
    """Leave the frame loop."""


@dataclass(frozen=True)
class SetPlayerCount:
    """Change how many leading slots participate, from the next step on."""

    count: int

    def __post_init__(self) -> None:
        if not 1 <= self.count <= MAX_PLAYERS:
            raise ValueError(f"count must be in [1, {MAX_PLAYERS}]")


Command: TypeAlias = Turn | ResetRound | Quit | SetPlayerCount
