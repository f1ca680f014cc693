"""Frame loop and seeded headless runner.

``run_game`` is the single cooperative loop of the interactive game: poll
input, step one frame, hand the frame to the renderer, then yield to it.
``run_headless_rounds`` drives the same controller without a display and
records each round to Parquet.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

import pyarrow as pa
import pyarrow.parquet as pq

from lightcycles.config.constants import FLUSH_THRESHOLD
from lightcycles.config.types import GameConfig, HeadlessConfig
from lightcycles.domain.commands import Command, Quit
from lightcycles.io.paths import logs_dir, round_summary_path, trail_log_path
from lightcycles.io.schemas import ROUND_SUMMARY_SCHEMA, TRAIL_LOG_SCHEMA
from lightcycles.simulation.persistence import flush_trail_columns, new_trail_columns
from lightcycles.simulation.round import RoundController
from lightcycles.simulation.state import FrameView

logger = logging.getLogger(__name__)


class InputSource(Protocol):
    def poll_commands(self) -> list[Command]:
        """Return commands received since the previous poll, oldest first."""
        ...


class Renderer(Protocol):
    def draw(self, view: FrameView) -> None: ...

    def wait(self) -> None:
        """Yield to the display until the next frame is due."""
        ...

    def is_open(self) -> bool: ...


class ScriptedInput:
    """Input source replaying a fixed command script keyed by poll index."""

    def __init__(self, script: Mapping[int, Sequence[Command]] | None = None) -> None:
        self.script = dict(script or {})
        self.polls = 0

    def poll_commands(self) -> list[Command]:
        commands = list(self.script.get(self.polls, ()))
        self.polls += 1
        return commands


def run_game(
    controller: RoundController,
    source: InputSource,
    renderer: Renderer,
    max_frames: int | None = None,
) -> int:
    """Run the frame loop until quit, window close, or ``max_frames``.

    Returns the number of frames simulated.
    """
    frames = 0
    while renderer.is_open() and (max_frames is None or frames < max_frames):
        commands = source.poll_commands()
        if any(isinstance(command, Quit) for command in commands):
            logger.info("Quit requested after %d frames", frames)
            break
        controller.step_frame(commands)
        renderer.draw(controller.frame_view())
        renderer.wait()
        frames += 1
    return frames


def _deterministic_round_id(round_index: int, seed: int) -> str:
    """Build reproducible round ID stable across runs for identical seeds."""
    return f"round{round_index:04d}_seed{seed}"


def _round_summary(
    round_id: str,
    seed: int,
    config: GameConfig,
    player_count: int,
    frames: int,
    ended: bool,
    winner: int | None,
    trail_length: int,
) -> dict[str, Any]:
    return {
        "round_id": round_id,
        "seed": seed,
        "player_count": player_count,
        "width": config.width,
        "height": config.height,
        "frames": frames,
        "ended": ended,
        "winner": winner,
        "trail_length": trail_length,
    }


def run_headless_rounds(
    config: HeadlessConfig,
    out_dir: Path,
    script: Mapping[int, Sequence[Command]] | None = None,
) -> list[dict[str, Any]]:
    """Play seeded rounds without a display and persist trail logs.

    Each round gets a fresh controller seeded with ``base_seed + index`` and
    the same optional command script. A round stops when it ends or after
    ``max_frames`` frames. A scripted reset closes the current round and
    records the rest under ``<round_id>_reset<k>`` with its own frame count
    and summary row. Writes ``logs/trail_log.parquet`` and
    ``logs/round_summary.parquet`` under ``out_dir`` and returns the summary
    rows.
    """
    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    log_path = trail_log_path(out_dir)

    trail_writer: pq.ParquetWriter | None = None
    trail_columns = new_trail_columns()
    summaries: list[dict[str, Any]] = []

    try:
        for round_index in range(config.rounds):
            game_config = config.game_config(round_index)
            seed = config.base_seed + round_index
            base_id = _deterministic_round_id(round_index, seed)
            controller = RoundController(game_config)
            state = controller.state
            source = ScriptedInput(script)

            round_id = base_id
            recorded = 0
            frame = 0
            total_frames = 0
            round_marker = state.round_index
            while state.running and total_frames < config.max_frames:
                before = (state.player_count, not state.running, controller.winner)
                controller.step_frame(source.poll_commands())
                total_frames += 1
                if state.round_index != round_marker:
                    player_count, ended, winner = before
                    summaries.append(
                        _round_summary(
                            round_id,
                            seed,
                            game_config,
                            player_count,
                            frame,
                            ended,
                            winner,
                            recorded,
                        )
                    )
                    logger.info("Round %s reset after %d frames", round_id, frame)
                    round_marker = state.round_index
                    round_id = f"{base_id}_reset{round_marker}"
                    recorded = 0
                    frame = 0
                trail = state.trail
                for order in range(recorded, len(trail)):
                    point = trail[order]
                    trail_columns["round_id"].append(round_id)
                    trail_columns["frame"].append(frame)
                    trail_columns["order"].append(order)
                    trail_columns["player"].append(point.player)
                    trail_columns["x"].append(point.x)
                    trail_columns["y"].append(point.y)
                recorded = len(trail)
                frame += 1
                if len(trail_columns["round_id"]) >= FLUSH_THRESHOLD:
                    trail_writer = flush_trail_columns(trail_columns, log_path, trail_writer)

            summaries.append(
                _round_summary(
                    round_id,
                    seed,
                    game_config,
                    state.player_count,
                    frame,
                    not state.running,
                    controller.winner,
                    recorded,
                )
            )
            logger.info("Recorded %s: %d frames, %d trail cells", round_id, frame, recorded)

        trail_writer = flush_trail_columns(trail_columns, log_path, trail_writer)
        if trail_writer is None:
            pq.write_table(TRAIL_LOG_SCHEMA.empty_table(), log_path)
    finally:
        if trail_writer is not None:
            trail_writer.close()

    pq.write_table(
        pa.Table.from_pylist(summaries, schema=ROUND_SUMMARY_SCHEMA),
        round_summary_path(out_dir),
    )
    return summaries
