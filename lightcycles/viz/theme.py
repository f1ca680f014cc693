"""Visualization theme presets for the game renderers.

Themes are frozen dataclasses that group all styling constants together, so
the interactive window and replay animations can swap palettes via the
``--theme`` CLI argument.
"""

from __future__ import annotations

from dataclasses import dataclass

from lightcycles.config.constants import PLAYER_WIDTH, TEXT_SIZE
from lightcycles.simulation.state import PLAYER_COLORS


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    player_colors: tuple[str, ...] = PLAYER_COLORS
    background_color: str = "#000000"
    text_color: str = "#FFFFFF"
    cell_pixels: int = PLAYER_WIDTH
    banner_size: int = TEXT_SIZE


DEFAULT_THEME = Theme()

NEON_THEME = Theme(
    player_colors=("#FF2E88", "#39FF14", "#00E5FF", "#FFB000"),
    background_color="#05060F",
    text_color="#E0F7FF",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "neon": NEON_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
