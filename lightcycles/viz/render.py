"""Matplotlib-based rendering: the interactive game window and round replays."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
import pyarrow.parquet as pq
from matplotlib import animation
from matplotlib.colors import to_rgb

from lightcycles.config.constants import FRAME_INTERVAL, WINDOW_TITLE
from lightcycles.io.paths import resolve_within_base as _resolve_within_base
from lightcycles.simulation.round import winner_message
from lightcycles.simulation.state import FrameView, TrailPoint
from lightcycles.viz.theme import DEFAULT_THEME, Theme

_DPI = 100


@lru_cache(maxsize=None)
def _rgb(color: str) -> np.ndarray:
    """Return a matplotlib color spec as a uint8 RGB triple."""
    return np.array([round(c * 255) for c in to_rgb(color)], dtype=np.uint8)


def blank_canvas(width: int, height: int, theme: Theme = DEFAULT_THEME) -> np.ndarray:
    """Return an (H, W, 3) uint8 canvas filled with the background color."""
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:, :] = _rgb(theme.background_color)
    return canvas


def paint_points(
    canvas: np.ndarray, points: Iterable[TrailPoint], cell_pixels: int
) -> None:
    """Fill a ``cell_pixels`` square anchored at each point's cell.

    Squares are clipped at the right and bottom edges of the canvas.
    """
    for point in points:
        canvas[point.y : point.y + cell_pixels, point.x : point.x + cell_pixels] = _rgb(
            point.color
        )


def rasterize_frame(view: FrameView, theme: Theme = DEFAULT_THEME) -> np.ndarray:
    """Draw trails, then live heads on top, into a fresh canvas."""
    canvas = blank_canvas(view.width, view.height, theme)
    paint_points(canvas, view.trail, theme.cell_pixels)
    paint_points(canvas, view.heads, theme.cell_pixels)
    return canvas


def _field_axes(width: int, height: int, theme: Theme) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(figsize=(width / _DPI, height / _DPI), dpi=_DPI)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_axis_off()
    fig.patch.set_facecolor(theme.background_color)
    return fig, ax


def _banner(ax: plt.Axes, width: int, height: int, theme: Theme) -> Any:
    return ax.text(
        width / 2,
        height / 2,
        "",
        ha="center",
        va="center",
        fontsize=theme.banner_size,
        color=theme.text_color,
        visible=False,
    )


class MatplotlibRenderer:
    """Interactive game window backed by a single ``imshow`` image.

    Trail entries are append-only within a round, so only entries added since
    the previous frame are painted onto the persistent trail canvas. A
    shorter trail than last frame means a reset and repaints from scratch.
    """

    def __init__(
        self,
        width: int,
        height: int,
        theme: Theme = DEFAULT_THEME,
        interval: float = FRAME_INTERVAL,
        title: str = WINDOW_TITLE,
    ) -> None:
        self.width = width
        self.height = height
        self.theme = theme
        self.interval = interval
        self.fig, self.ax = _field_axes(width, height, theme)
        manager = self.fig.canvas.manager
        if manager is not None:
            manager.set_window_title(title)
        self.trail_canvas = blank_canvas(width, height, theme)
        self.image = self.ax.imshow(
            self.trail_canvas, origin="upper", interpolation="nearest", aspect="equal"
        )
        self.ax.set_xlim(-0.5, width - 0.5)
        self.ax.set_ylim(height - 0.5, -0.5)
        self.banner = _banner(self.ax, width, height, theme)
        self._painted = 0

    def draw(self, view: FrameView) -> None:
        if len(view.trail) < self._painted:
            self.trail_canvas = blank_canvas(self.width, self.height, self.theme)
            self._painted = 0
        paint_points(self.trail_canvas, view.trail[self._painted :], self.theme.cell_pixels)
        self._painted = len(view.trail)

        frame = self.trail_canvas.copy()
        paint_points(frame, view.heads, self.theme.cell_pixels)
        self.image.set_data(frame)

        if view.banner is None:
            self.banner.set_visible(False)
        else:
            self.banner.set_text(view.banner)
            self.banner.set_visible(True)

    def wait(self) -> None:
        plt.pause(self.interval)

    def is_open(self) -> bool:
        return plt.fignum_exists(self.fig.number)

    def close(self) -> None:
        plt.close(self.fig)


def _resolve_dimension(
    explicit: int | None,
    summary: dict[str, Any] | None,
    summary_key: str,
    rows: list[dict[str, Any]],
    axis_key: str,
) -> int:
    """Resolve field dimension from explicit arg, round summary, then row maxima."""
    if explicit is not None:
        return explicit
    if summary is not None and isinstance(summary.get(summary_key), int):
        return int(summary[summary_key])
    return max(int(row[axis_key]) for row in rows) + 1


def render_round_animation(
    trail_log_path: Path,
    round_id: str,
    output_path: Path,
    fps: int = 8,
    frame_stride: int = 1,
    base_dir: Path | None = None,
    grid_width: int | None = None,
    grid_height: int | None = None,
    round_summary_path: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render one recorded round's trail growth as an animation.

    Every ``frame_stride``-th simulation frame becomes one animation frame;
    the last recorded frame is always included. When a round summary is
    given and the round ended, the final frame carries the result banner.
    """
    if frame_stride < 1:
        raise ValueError("frame_stride must be >= 1")
    if base_dir is None:
        trail_log_path = Path(trail_log_path).resolve()
        output_path = Path(output_path).resolve()
        if round_summary_path is not None:
            round_summary_path = Path(round_summary_path).resolve()
    else:
        base_dir = Path(base_dir).resolve()
        trail_log_path = _resolve_within_base(Path(trail_log_path), base_dir)
        output_path = _resolve_within_base(Path(output_path), base_dir)
        if round_summary_path is not None:
            round_summary_path = _resolve_within_base(Path(round_summary_path), base_dir)

    rows = pq.read_table(trail_log_path, filters=[("round_id", "=", round_id)]).to_pylist()
    if not rows:
        raise ValueError(f"No trail rows found for round_id={round_id}")
    rows.sort(key=lambda row: (int(row["frame"]), int(row["order"])))

    summary: dict[str, Any] | None = None
    if round_summary_path is not None:
        matches = pq.read_table(
            round_summary_path, filters=[("round_id", "=", round_id)]
        ).to_pylist()
        summary = matches[0] if matches else None

    width = _resolve_dimension(grid_width, summary, "width", rows, "x")
    height = _resolve_dimension(grid_height, summary, "height", rows, "y")
    if width < 1 or height < 1:
        raise ValueError("grid dimensions must be >= 1")

    frames = sorted({int(row["frame"]) for row in rows})
    shown = frames[::frame_stride]
    if shown[-1] != frames[-1]:
        shown.append(frames[-1])

    colors = theme.player_colors
    points = [
        TrailPoint(
            x=int(row["x"]),
            y=int(row["y"]),
            color=colors[int(row["player"]) % len(colors)],
            player=int(row["player"]),
        )
        for row in rows
    ]
    point_frames = [int(row["frame"]) for row in rows]

    final_banner: str | None = None
    if summary is not None and summary.get("ended"):
        final_banner = winner_message(summary.get("winner"))

    fig, ax = _field_axes(width, height, theme)
    canvas = blank_canvas(width, height, theme)
    img = ax.imshow(canvas, origin="upper", interpolation="nearest", aspect="equal")
    banner = _banner(ax, width, height, theme)
    cursor = 0

    def update(frame_index: int) -> tuple[Any, ...]:
        nonlocal canvas, cursor
        if frame_index == 0:
            canvas = blank_canvas(width, height, theme)
            cursor = 0
        limit = shown[frame_index]
        start = cursor
        while cursor < len(points) and point_frames[cursor] <= limit:
            cursor += 1
        paint_points(canvas, points[start:cursor], theme.cell_pixels)
        img.set_data(canvas)
        is_last = frame_index == len(shown) - 1
        banner.set_text(final_banner or "")
        banner.set_visible(is_last and final_banner is not None)
        return (img, banner)

    anim = animation.FuncAnimation(
        fig, update, frames=len(shown), interval=max(1, int(1000 / fps)), blit=False
    )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    writer: animation.PillowWriter | animation.FFMpegWriter
    if output_path.suffix.lower() == ".gif":
        writer = animation.PillowWriter(fps=fps)
    else:
        writer = animation.FFMpegWriter(fps=fps)
    anim.save(output_path, writer=writer)
    plt.close(fig)
