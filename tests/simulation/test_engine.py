"""Tests for the frame loop and the headless recorder."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq

from lightcycles.config.types import GameConfig, HeadlessConfig, Heading, Rotation
from lightcycles.domain.commands import Quit, ResetRound, Turn
from lightcycles.io.schemas import ROUND_SUMMARY_SCHEMA, TRAIL_LOG_SCHEMA
from lightcycles.simulation.engine import ScriptedInput, run_game, run_headless_rounds
from lightcycles.simulation.round import RoundController
from lightcycles.simulation.state import FrameView


class FakeRenderer:
    def __init__(self, close_after: int | None = None) -> None:
        self.views: list[FrameView] = []
        self.waits = 0
        self.close_after = close_after

    def draw(self, view: FrameView) -> None:
        self.views.append(view)

    def wait(self) -> None:
        self.waits += 1

    def is_open(self) -> bool:
        return self.close_after is None or len(self.views) < self.close_after


def _controller(player_count: int = 2) -> RoundController:
    controller = RoundController(GameConfig(width=30, height=30, player_count=player_count))
    state = controller.state
    state.players[0].x, state.players[0].y, state.players[0].heading = 0, 0, Heading.RIGHT
    state.players[1].x, state.players[1].y, state.players[1].heading = 0, 10, Heading.RIGHT
    return controller


class TestScriptedInput:
    def test_replays_by_poll_index(self) -> None:
        turn = Turn(0, Rotation.INCREASE)
        source = ScriptedInput({1: [turn]})
        assert source.poll_commands() == []
        assert source.poll_commands() == [turn]
        assert source.poll_commands() == []

    def test_empty_script(self) -> None:
        assert ScriptedInput().poll_commands() == []


class TestRunGame:
    def test_stops_at_max_frames(self) -> None:
        renderer = FakeRenderer()
        frames = run_game(_controller(), ScriptedInput(), renderer, max_frames=3)
        assert frames == 3
        assert len(renderer.views) == 3
        assert renderer.waits == 3

    def test_quit_exits_before_simulating(self) -> None:
        controller = _controller()
        renderer = FakeRenderer()
        frames = run_game(controller, ScriptedInput({2: [Quit()]}), renderer, max_frames=10)
        assert frames == 2
        assert controller.state.frame == 2
        assert controller.state.players[0].position == (8, 0)

    def test_closed_window_ends_loop(self) -> None:
        renderer = FakeRenderer(close_after=4)
        frames = run_game(_controller(), ScriptedInput(), renderer)
        assert frames == 4

    def test_commands_applied_before_step(self) -> None:
        controller = _controller()
        renderer = FakeRenderer()
        run_game(
            controller,
            ScriptedInput({0: [Turn(0, Rotation.INCREASE)]}),
            renderer,
            max_frames=1,
        )
        assert controller.state.players[0].position == (0, 26)

    def test_renderer_sees_banner_after_end(self) -> None:
        controller = _controller(player_count=1)
        renderer = FakeRenderer()
        run_game(controller, ScriptedInput(), renderer, max_frames=2)
        assert [v.banner for v in renderer.views] == ["Player 1 wins", "Player 1 wins"]


class TestRunHeadlessRounds:
    def _config(self, rounds: int = 2) -> HeadlessConfig:
        return HeadlessConfig(
            rounds=rounds, max_frames=200, base_seed=4, player_count=2, width=8, height=8
        )

    def test_writes_logs_with_schema_columns(self, tmp_path: Path) -> None:
        run_headless_rounds(self._config(), out_dir=tmp_path)
        trail = pq.read_table(tmp_path / "logs" / "trail_log.parquet")
        summary = pq.read_table(tmp_path / "logs" / "round_summary.parquet")
        assert trail.schema.names == TRAIL_LOG_SCHEMA.names
        assert summary.schema.names == ROUND_SUMMARY_SCHEMA.names
        assert summary.num_rows == 2

    def test_straight_runs_end_on_small_field(self, tmp_path: Path) -> None:
        results = run_headless_rounds(self._config(), out_dir=tmp_path)
        assert [r["round_id"] for r in results] == ["round0000_seed4", "round0001_seed5"]
        assert all(r["ended"] for r in results)
        assert all(r["winner"] in (None, 0, 1) for r in results)

    def test_trail_rows_match_summary(self, tmp_path: Path) -> None:
        results = run_headless_rounds(self._config(), out_dir=tmp_path)
        rows = pq.read_table(tmp_path / "logs" / "trail_log.parquet").to_pylist()
        for result in results:
            mine = [row for row in rows if row["round_id"] == result["round_id"]]
            assert len(mine) == result["trail_length"]
            assert [row["order"] for row in mine] == list(range(len(mine)))
            assert all(0 <= row["frame"] < result["frames"] for row in mine)

    def test_deterministic_for_same_seed(self, tmp_path: Path) -> None:
        first = run_headless_rounds(self._config(), out_dir=tmp_path / "a")
        second = run_headless_rounds(self._config(), out_dir=tmp_path / "b")
        assert first == second
        a = pq.read_table(tmp_path / "a" / "logs" / "trail_log.parquet")
        b = pq.read_table(tmp_path / "b" / "logs" / "trail_log.parquet")
        assert a.equals(b)

    def test_max_frames_cuts_round(self, tmp_path: Path) -> None:
        config = HeadlessConfig(
            rounds=1, max_frames=1, base_seed=0, player_count=2, width=300, height=300
        )
        (result,) = run_headless_rounds(config, out_dir=tmp_path)
        assert result["frames"] == 1
        assert result["ended"] is False
        assert result["winner"] is None

    def test_script_is_replayed_each_round(self, tmp_path: Path) -> None:
        script = {0: [Turn(0, Rotation.INCREASE)]}
        scripted = run_headless_rounds(self._config(), out_dir=tmp_path / "turned", script=script)
        plain = run_headless_rounds(self._config(), out_dir=tmp_path / "plain")
        assert [r["round_id"] for r in scripted] == [r["round_id"] for r in plain]

        def first_cells(out_dir: Path) -> dict[str, tuple[int, int]]:
            rows = pq.read_table(out_dir / "logs" / "trail_log.parquet").to_pylist()
            cells: dict[str, tuple[int, int]] = {}
            for row in rows:
                if row["player"] == 0:
                    cells.setdefault(row["round_id"], (row["x"], row["y"]))
            return cells

        turned = first_cells(tmp_path / "turned")
        straight = first_cells(tmp_path / "plain")
        assert set(turned) == {r["round_id"] for r in scripted}
        for round_id, cell in turned.items():
            assert cell != straight[round_id]

    def test_reset_starts_a_new_recorded_round(self, tmp_path: Path) -> None:
        config = HeadlessConfig(
            rounds=1, max_frames=20, base_seed=3, player_count=2, width=200, height=200
        )
        results = run_headless_rounds(config, out_dir=tmp_path, script={2: [ResetRound()]})
        assert [r["round_id"] for r in results] == [
            "round0000_seed3",
            "round0000_seed3_reset1",
        ]
        assert [r["frames"] for r in results] == [2, 18]
        assert [r["trail_length"] for r in results] == [16, 144]
        assert results[0]["ended"] is False

        rows = pq.read_table(tmp_path / "logs" / "trail_log.parquet").to_pylist()
        keys = [(row["round_id"], row["order"]) for row in rows]
        assert len(keys) == len(set(keys))
        for result in results:
            mine = [row for row in rows if row["round_id"] == result["round_id"]]
            assert len(mine) == result["trail_length"]
            assert [row["order"] for row in mine] == list(range(len(mine)))
            assert all(0 <= row["frame"] < result["frames"] for row in mine)
