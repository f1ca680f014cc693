"""Explicit game state and the read-only per-frame view handed to renderers."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from random import Random

from lightcycles.config.constants import MAX_PLAYERS
from lightcycles.config.types import GameConfig
from lightcycles.domain.grid import OccupancyGrid
from lightcycles.domain.player import Player

# Raylib-style red, green, blue, yellow.
PLAYER_COLORS: tuple[str, ...] = ("#E62937", "#00E430", "#0079F1", "#FDF900")


@dataclass(frozen=True)
class TrailPoint:
    """A drawable cell: one trail entry or one live head."""

    x: int
    y: int
    color: str
    player: int


@dataclass(frozen=True)
class FrameView:
    """Everything a renderer needs for one frame, in draw order."""

    width: int
    height: int
    trail: tuple[TrailPoint, ...]
    heads: tuple[TrailPoint, ...]
    banner: str | None


@dataclass
class GameState:
    """All mutable round state, owned by a single round controller."""

    width: int
    height: int
    grid: OccupancyGrid
    players: list[Player]
    player_count: int
    trail: list[TrailPoint] = field(default_factory=list)
    running: bool = True
    winner: int | None = None
    winner_resolved: bool = False
    reset_requested: bool = False
    frame: int = 0
    round_index: int = 0

    @classmethod
    def create(
        cls,
        config: GameConfig,
        rng: Random,
        colors: Sequence[str] = PLAYER_COLORS,
    ) -> GameState:
        """Build a fresh state with every slot spawned at random."""
        if len(colors) != MAX_PLAYERS:
            raise ValueError(f"expected {MAX_PLAYERS} player colors, got {len(colors)}")
        players = [Player.spawn(color, rng, config.width, config.height) for color in colors]
        return cls(
            width=config.width,
            height=config.height,
            grid=OccupancyGrid(config.width, config.height),
            players=players,
            player_count=config.player_count,
        )

    def participants(self) -> Iterator[tuple[int, Player]]:
        """Yield (slot, player) for the participating slots, in slot order."""
        for index in range(self.player_count):
            yield index, self.players[index]

    def alive_count(self) -> int:
        return sum(1 for _, player in self.participants() if player.alive)
