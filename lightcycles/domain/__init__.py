"""Domain layer: occupancy grid, player entity, and input commands."""

from lightcycles.domain.commands import Command, Quit, ResetRound, SetPlayerCount, Turn
from lightcycles.domain.grid import OccupancyGrid
from lightcycles.domain.player import HEADING_VECTORS, NUM_HEADINGS, Player

__all__ = [
    "Command",
    "HEADING_VECTORS",
    "NUM_HEADINGS",
    "OccupancyGrid",
    "Player",
    "Quit",
    "ResetRound",
    "SetPlayerCount",
    "Turn",
]
