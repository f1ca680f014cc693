"""Local multiplayer lightcycles: grid simulation, round control, and display."""

from lightcycles.config import GameConfig, Heading, Rotation, RoundStatus
from lightcycles.domain import OccupancyGrid, Player
from lightcycles.simulation import FrameView, GameState, RoundController, TrailPoint

__all__ = [
    "FrameView",
    "GameConfig",
    "GameState",
    "Heading",
    "OccupancyGrid",
    "Player",
    "Rotation",
    "RoundController",
    "RoundStatus",
    "TrailPoint",
]
