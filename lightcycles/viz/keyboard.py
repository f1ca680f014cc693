"""Keyboard input adapter: matplotlib key events to game commands.

Presses are edge-triggered. A key that is still held is ignored until its
release event arrives, so auto-repeat never produces extra turns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import matplotlib.pyplot as plt
from matplotlib.backend_bases import KeyEvent
from matplotlib.figure import Figure

from lightcycles.config.types import Rotation
from lightcycles.domain.commands import Command, Quit, ResetRound, SetPlayerCount, Turn

logger = logging.getLogger(__name__)


def _default_turn_keys() -> dict[str, tuple[int, Rotation]]:
    pairs = [("x", "c"), ("left", "right"), ("a", "q"), ("6", "9")]
    keys: dict[str, tuple[int, Rotation]] = {}
    for player, (increase, decrease) in enumerate(pairs):
        keys[increase] = (player, Rotation.INCREASE)
        keys[decrease] = (player, Rotation.DECREASE)
    return keys


@dataclass(frozen=True)
class KeyBindings:
    """Key names, as matplotlib reports them, mapped to commands."""

    turns: dict[str, tuple[int, Rotation]] = field(default_factory=_default_turn_keys)
    player_counts: dict[str, int] = field(
        default_factory=lambda: {"f1": 1, "f2": 2, "f3": 3, "f4": 4}
    )
    reset: str = "r"
    quit: str = "escape"

    def command_for(self, key: str) -> Command | None:
        """Return the command bound to ``key``, or None for unbound keys."""
        if key in self.turns:
            player, rotation = self.turns[key]
            return Turn(player, rotation)
        if key in self.player_counts:
            return SetPlayerCount(self.player_counts[key])
        if key == self.reset:
            return ResetRound()
        if key == self.quit:
            return Quit()
        return None


DEFAULT_BINDINGS = KeyBindings()


def disable_default_keymaps() -> None:
    """Unbind matplotlib's navigation shortcuts so game keys reach the game."""
    for name in list(plt.rcParams.keys()):
        if name.startswith("keymap."):
            plt.rcParams[name] = []


class KeyboardInput:
    """Queues commands from figure key events until the next poll."""

    def __init__(self, figure: Figure, bindings: KeyBindings = DEFAULT_BINDINGS) -> None:
        self.bindings = bindings
        self._queue: list[Command] = []
        self._held: set[str] = set()
        figure.canvas.mpl_connect("key_press_event", self.on_press)
        figure.canvas.mpl_connect("key_release_event", self.on_release)

    def on_press(self, event: KeyEvent) -> None:
        key = event.key
        if key is None or key in self._held:
            return
        self._held.add(key)
        command = self.bindings.command_for(key)
        if command is None:
            return
        logger.debug("Key %r -> %r", key, command)
        self._queue.append(command)

    def on_release(self, event: KeyEvent) -> None:
        if event.key is not None:
            self._held.discard(event.key)

    def poll_commands(self) -> list[Command]:
        commands, self._queue = self._queue, []
        return commands
