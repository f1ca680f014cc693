"""Simulation engine: game state, frame stepping, round control, and recording."""

from lightcycles.simulation.engine import (
    InputSource,
    Renderer,
    ScriptedInput,
    run_game,
    run_headless_rounds,
)
from lightcycles.simulation.persistence import flush_trail_columns
from lightcycles.simulation.round import RoundController, winner_message
from lightcycles.simulation.state import PLAYER_COLORS, FrameView, GameState, TrailPoint
from lightcycles.simulation.step import StepOutcome, advance_frame, advance_substep

__all__ = [
    "FrameView",
    "GameState",
    "InputSource",
    "PLAYER_COLORS",
    "Renderer",
    "RoundController",
    "ScriptedInput",
    "StepOutcome",
    "TrailPoint",
    "advance_frame",
    "advance_substep",
    "flush_trail_columns",
    "run_game",
    "run_headless_rounds",
    "winner_message",
]
