"""Per-frame simulation: movement, collision, elimination, and trail claims.

Slot order is significant throughout: every pass walks participating slots
from 0 upward, so identical inputs always produce identical rounds.
"""

from __future__ import annotations

from dataclasses import dataclass

from lightcycles.simulation.state import GameState, TrailPoint


@dataclass(frozen=True)
class StepOutcome:
    """What one frame of simulation did."""

    substeps: int
    eliminated: tuple[int, ...]
    running: bool


def tick_participants(state: GameState) -> None:
    for _, player in state.participants():
        if player.alive:
            player.tick(state.width, state.height)


def collision_pass(state: GameState) -> list[int]:
    """Eliminate every alive participant whose cell is already claimed.

    Reads the grid as left by the previous sub-step; claims of the current
    sub-step happen later in ``claim_pass``.
    """
    eliminated: list[int] = []
    for index, player in state.participants():
        if player.alive and state.grid.is_claimed(player.x, player.y):
            player.alive = False
            eliminated.append(index)
    return eliminated


def claim_pass(state: GameState) -> int:
    """Claim the cell under each alive participant; return new claim count."""
    claimed = 0
    for index, player in state.participants():
        if not player.alive:
            continue
        if state.grid.claim(player.x, player.y):
            state.trail.append(TrailPoint(player.x, player.y, player.color, index))
            claimed += 1
    return claimed


def advance_substep(state: GameState) -> list[int]:
    """Run one sub-step and return the slots eliminated during it."""
    tick_participants(state)
    eliminated = collision_pass(state)
    if state.alive_count() <= 1:
        state.running = False
    claim_pass(state)
    return eliminated


def advance_frame(state: GameState, speed: int) -> StepOutcome:
    """Run up to ``speed`` sub-steps, stopping as soon as the round ends."""
    substeps = 0
    eliminated: list[int] = []
    while state.running and substeps < speed:
        eliminated.extend(advance_substep(state))
        substeps += 1
    return StepOutcome(substeps=substeps, eliminated=tuple(eliminated), running=state.running)
