"""Visualization layer: themes, interactive renderer, keyboard input, replays."""

from lightcycles.viz.keyboard import (
    DEFAULT_BINDINGS,
    KeyBindings,
    KeyboardInput,
    disable_default_keymaps,
)
from lightcycles.viz.render import (
    MatplotlibRenderer,
    blank_canvas,
    paint_points,
    rasterize_frame,
    render_round_animation,
)
from lightcycles.viz.theme import (
    DEFAULT_THEME,
    NEON_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_BINDINGS",
    "DEFAULT_THEME",
    "KeyBindings",
    "KeyboardInput",
    "MatplotlibRenderer",
    "NEON_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "blank_canvas",
    "disable_default_keymaps",
    "get_theme",
    "paint_points",
    "rasterize_frame",
    "render_round_animation",
]
