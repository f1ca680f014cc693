"""Lightcycle player entity: position, heading, and wraparound movement."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random

from lightcycles.config.types import Heading, Rotation

# Movement per heading as (dx, dy); y grows downward.
HEADING_VECTORS: dict[Heading, tuple[int, int]] = {
    Heading.DOWN: (0, 1),
    Heading.RIGHT: (1, 0),
    Heading.UP: (0, -1),
    Heading.LEFT: (-1, 0),
}

NUM_HEADINGS = len(Heading)


@dataclass
class Player:
    """One cycle slot. ``color`` identifies the slot and survives resets."""

    x: int
    y: int
    heading: Heading
    color: str
    alive: bool = True

    @classmethod
    def spawn(cls, color: str, rng: Random, width: int, height: int) -> Player:
        """Create a player at a random in-bounds cell with a random heading."""
        player = cls(x=0, y=0, heading=Heading.DOWN, color=color)
        player.reset(rng, width, height)
        return player

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def tick(self, width: int, height: int) -> None:
        """Advance one cell along the heading, wrapping each axis independently."""
        dx, dy = HEADING_VECTORS[self.heading]
        self.x += dx
        self.y += dy

        if self.x >= width:
            self.x = 0
        if self.x < 0:
            self.x = width - 1
        if self.y >= height:
            self.y = 0
        if self.y < 0:
            self.y = height - 1

    def change_heading(self, rotation: Rotation) -> None:
        self.heading = Heading((self.heading + rotation.value) % NUM_HEADINGS)

    def reset(self, rng: Random, width: int, height: int) -> None:
        """Re-randomize position and heading in place and revive the player."""
        self.x = rng.randrange(width)
        self.y = rng.randrange(height)
        self.heading = Heading(rng.randrange(NUM_HEADINGS))
        self.alive = True
