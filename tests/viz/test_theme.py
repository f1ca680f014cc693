from __future__ import annotations

import pytest

from lightcycles.config.constants import MAX_PLAYERS
from lightcycles.viz.theme import DEFAULT_THEME, NEON_THEME, REGISTERED_THEMES, get_theme


def test_get_theme_is_case_insensitive() -> None:
    assert get_theme("Neon") is NEON_THEME
    assert get_theme("default") is DEFAULT_THEME


def test_get_theme_unknown_lists_available() -> None:
    with pytest.raises(ValueError, match="default, neon"):
        get_theme("sepia")


@pytest.mark.parametrize("name", sorted(REGISTERED_THEMES))
def test_every_theme_colors_all_slots(name: str) -> None:
    assert len(REGISTERED_THEMES[name].player_colors) == MAX_PLAYERS
