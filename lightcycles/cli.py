from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from pathlib import Path

from lightcycles.config.constants import MAX_PLAYERS, SCREEN_HEIGHT, SCREEN_WIDTH, SPEED
from lightcycles.config.types import GameConfig, HeadlessConfig
from lightcycles.simulation.engine import run_game, run_headless_rounds
from lightcycles.simulation.round import RoundController
from lightcycles.viz.keyboard import KeyboardInput, disable_default_keymaps
from lightcycles.viz.render import MatplotlibRenderer, render_round_animation
from lightcycles.viz.theme import get_theme

logger = logging.getLogger(__name__)


def _add_field_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--width", type=int, default=SCREEN_WIDTH)
    p.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    p.add_argument("--players", type=int, default=MAX_PLAYERS, choices=range(1, MAX_PLAYERS + 1))
    p.add_argument("--speed", type=int, default=SPEED)
    p.add_argument("--seed", type=int, default=None)


def _build_play_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("play", help="Open the game window")
    p.set_defaults(func=_handle_play)
    _add_field_arguments(p)
    p.add_argument("--max-frames", type=int, default=None)


def _build_simulate_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("simulate", help="Record seeded rounds without a display")
    p.set_defaults(func=_handle_simulate)
    _add_field_arguments(p)
    p.add_argument("--out-dir", type=Path, required=True)
    p.add_argument("--rounds", type=int, default=1)
    p.add_argument("--max-frames", type=int, default=2_000)


def _build_replay_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("replay", help="Render a recorded round as an animation")
    p.set_defaults(func=_handle_replay)
    p.add_argument("--trail-log", type=Path, required=True)
    p.add_argument("--round-id", type=str, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--round-summary", type=Path, default=None)
    p.add_argument("--fps", type=int, default=8)
    p.add_argument("--frame-stride", type=int, default=1)
    p.add_argument("--base-dir", type=Path, default=Path("."))
    p.add_argument("--grid-width", type=int, default=None)
    p.add_argument("--grid-height", type=int, default=None)


def _handle_play(args: argparse.Namespace) -> None:
    theme = get_theme(args.theme)
    config = GameConfig(
        width=args.width,
        height=args.height,
        speed=args.speed,
        player_count=args.players,
        seed=args.seed,
    )
    disable_default_keymaps()
    renderer = MatplotlibRenderer(config.width, config.height, theme=theme)
    keyboard = KeyboardInput(renderer.fig)
    controller = RoundController(config, colors=theme.player_colors)
    try:
        run_game(controller, keyboard, renderer, max_frames=args.max_frames)
    finally:
        renderer.close()


def _handle_simulate(args: argparse.Namespace) -> None:
    config = HeadlessConfig(
        rounds=args.rounds,
        max_frames=args.max_frames,
        base_seed=0 if args.seed is None else args.seed,
        player_count=args.players,
        speed=args.speed,
        width=args.width,
        height=args.height,
    )
    results = run_headless_rounds(config, out_dir=args.out_dir)
    wins = Counter(r["winner"] + 1 for r in results if r["ended"] and r["winner"] is not None)
    summary = {
        "total_rounds": len(results),
        "ended": sum(1 for r in results if r["ended"]),
        "draws": sum(1 for r in results if r["ended"] and r["winner"] is None),
        "wins_by_player": {str(player): count for player, count in sorted(wins.items())},
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


def _handle_replay(args: argparse.Namespace) -> None:
    render_round_animation(
        trail_log_path=args.trail_log,
        round_id=args.round_id,
        output_path=args.output,
        fps=args.fps,
        frame_stride=args.frame_stride,
        base_dir=args.base_dir,
        grid_width=args.grid_width,
        grid_height=args.grid_height,
        round_summary_path=args.round_summary,
        theme=get_theme(args.theme),
    )


def main() -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Local multiplayer lightcycles")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help="Theme preset name (default, neon)",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)
    _build_play_parser(sub)
    _build_simulate_parser(sub)
    _build_replay_parser(sub)
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Running %s", args.command)
    args.func(args)


if __name__ == "__main__":
    main()
