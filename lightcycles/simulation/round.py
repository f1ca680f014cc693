"""Round controller: command handling, winner resolution, and round resets.

State machine:

- ``RUNNING`` while more than one participant is alive after a sub-step.
- ``ENDED`` from the frame the simulation reports the round over. The winner
  is resolved once, in that frame, and cached until the next reset.
- A reset returns to ``RUNNING`` from either state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from random import Random

from lightcycles.config.types import GameConfig, RoundStatus
from lightcycles.domain.commands import Command, Quit, ResetRound, SetPlayerCount, Turn
from lightcycles.simulation.state import PLAYER_COLORS, FrameView, GameState, TrailPoint
from lightcycles.simulation.step import StepOutcome, advance_frame

logger = logging.getLogger(__name__)


def winner_message(winner: int | None) -> str:
    """Banner text for a finished round; ``winner`` is a 0-based slot."""
    if winner is None:
        return "Draw"
    return f"Player {winner + 1} wins"


class RoundController:
    """Owns the game state and drives it one frame at a time."""

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: Random | None = None,
        colors: Sequence[str] = PLAYER_COLORS,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else Random(self.config.seed)
        self.state = GameState.create(self.config, self.rng, colors)
        logger.info(
            "Round 0 started on %dx%d field with %d players",
            self.state.width,
            self.state.height,
            self.state.player_count,
        )

    @property
    def status(self) -> RoundStatus:
        return RoundStatus.RUNNING if self.state.running else RoundStatus.ENDED

    @property
    def winner(self) -> int | None:
        return self.state.winner

    def apply(self, command: Command) -> None:
        """Apply one input command immediately."""
        if isinstance(command, Turn):
            self.state.players[command.player].change_heading(command.rotation)
        elif isinstance(command, ResetRound):
            self.state.reset_requested = True
        elif isinstance(command, SetPlayerCount):
            logger.debug("Player count %d -> %d", self.state.player_count, command.count)
            self.state.player_count = command.count
        elif isinstance(command, Quit):
            # Quitting is the frame loop's concern.
            pass
        else:
            raise TypeError(f"Unsupported command: {command!r}")

    def apply_all(self, commands: Iterable[Command]) -> None:
        for command in commands:
            self.apply(command)

    def reset_round(self) -> None:
        """Clear the field and respawn all slots, whatever the current state."""
        state = self.state
        state.grid.clear()
        state.trail.clear()
        for player in state.players:
            player.reset(self.rng, state.width, state.height)
        state.running = True
        state.winner = None
        state.winner_resolved = False
        state.reset_requested = False
        state.frame = 0
        state.round_index += 1
        logger.info("Round %d started with %d players", state.round_index, state.player_count)

    def step_frame(self, commands: Iterable[Command] = ()) -> StepOutcome:
        """Process one frame: input, pending reset, simulation, winner resolution."""
        self.apply_all(commands)
        if self.state.reset_requested:
            self.reset_round()
        outcome = advance_frame(self.state, self.config.speed)
        self.state.frame += 1
        if not self.state.running and not self.state.winner_resolved:
            self._resolve_winner()
        return outcome

    def _resolve_winner(self) -> None:
        state = self.state
        state.winner = next(
            (index for index, player in state.participants() if player.alive), None
        )
        state.winner_resolved = True
        logger.info(
            "Round %d ended after %d frames: %s",
            state.round_index,
            state.frame,
            winner_message(state.winner),
        )

    def winner_message(self) -> str | None:
        """Banner text once the round has ended, else None."""
        if self.state.running:
            return None
        return winner_message(self.state.winner)

    def frame_view(self) -> FrameView:
        state = self.state
        heads = tuple(
            TrailPoint(player.x, player.y, player.color, index)
            for index, player in state.participants()
            if player.alive
        )
        return FrameView(
            width=state.width,
            height=state.height,
            trail=tuple(state.trail),
            heads=heads,
            banner=self.winner_message(),
        )
