"""Tests for lightcycles.domain.player module."""

from __future__ import annotations

from random import Random

import pytest

from lightcycles.config.types import Heading, Rotation
from lightcycles.domain.player import Player


def _player(x: int, y: int, heading: Heading) -> Player:
    return Player(x=x, y=y, heading=heading, color="#FFFFFF")


class TestTick:
    @pytest.mark.parametrize(
        "heading,expected",
        [
            (Heading.DOWN, (2, 3)),
            (Heading.RIGHT, (3, 2)),
            (Heading.UP, (2, 1)),
            (Heading.LEFT, (1, 2)),
        ],
    )
    def test_moves_one_cell_along_heading(
        self, heading: Heading, expected: tuple[int, int]
    ) -> None:
        player = _player(2, 2, heading)
        player.tick(10, 10)
        assert player.position == expected

    def test_right_edge_wraps_to_zero(self) -> None:
        player = _player(9, 4, Heading.RIGHT)
        player.tick(10, 8)
        assert player.position == (0, 4)

    def test_left_edge_wraps_to_last_column(self) -> None:
        player = _player(0, 4, Heading.LEFT)
        player.tick(10, 8)
        assert player.position == (9, 4)

    def test_bottom_edge_wraps_to_zero(self) -> None:
        player = _player(3, 7, Heading.DOWN)
        player.tick(10, 8)
        assert player.position == (3, 0)

    def test_top_edge_wraps_to_last_row(self) -> None:
        player = _player(3, 0, Heading.UP)
        player.tick(10, 8)
        assert player.position == (3, 7)

    def test_every_position_and_heading_stays_in_bounds(self) -> None:
        width, height = 4, 3
        for x in range(width):
            for y in range(height):
                for heading in Heading:
                    player = _player(x, y, heading)
                    player.tick(width, height)
                    assert 0 <= player.x < width
                    assert 0 <= player.y < height

    def test_single_cell_field(self) -> None:
        player = _player(0, 0, Heading.LEFT)
        player.tick(1, 1)
        assert player.position == (0, 0)


class TestChangeHeading:
    def test_increase_follows_cyclic_order(self) -> None:
        player = _player(0, 0, Heading.DOWN)
        seen = []
        for _ in range(4):
            player.change_heading(Rotation.INCREASE)
            seen.append(player.heading)
        assert seen == [Heading.RIGHT, Heading.UP, Heading.LEFT, Heading.DOWN]

    def test_decrease_wraps_below_zero(self) -> None:
        player = _player(0, 0, Heading.DOWN)
        player.change_heading(Rotation.DECREASE)
        assert player.heading is Heading.LEFT

    @pytest.mark.parametrize("heading", list(Heading))
    def test_four_increases_is_identity(self, heading: Heading) -> None:
        player = _player(0, 0, heading)
        for _ in range(4):
            player.change_heading(Rotation.INCREASE)
        assert player.heading is heading

    @pytest.mark.parametrize("heading", list(Heading))
    def test_increase_then_decrease_is_identity(self, heading: Heading) -> None:
        player = _player(0, 0, heading)
        player.change_heading(Rotation.INCREASE)
        player.change_heading(Rotation.DECREASE)
        assert player.heading is heading

    def test_does_not_move_player(self) -> None:
        player = _player(5, 6, Heading.UP)
        player.change_heading(Rotation.INCREASE)
        assert player.position == (5, 6)


class TestReset:
    def test_revives_and_stays_in_bounds(self) -> None:
        player = _player(0, 0, Heading.DOWN)
        player.alive = False
        player.reset(Random(0), 7, 5)
        assert player.alive
        assert 0 <= player.x < 7
        assert 0 <= player.y < 5
        assert isinstance(player.heading, Heading)

    def test_covers_every_cell_and_heading(self) -> None:
        player = _player(0, 0, Heading.DOWN)
        rng = Random(3)
        cells: set[tuple[int, int]] = set()
        headings: set[Heading] = set()
        for _ in range(500):
            player.reset(rng, 3, 2)
            cells.add(player.position)
            headings.add(player.heading)
        assert cells == {(x, y) for x in range(3) for y in range(2)}
        assert headings == set(Heading)

    def test_keeps_color(self) -> None:
        player = Player(x=0, y=0, heading=Heading.UP, color="#E62937")
        player.reset(Random(1), 10, 10)
        assert player.color == "#E62937"

    def test_same_seed_same_spawn(self) -> None:
        a = Player.spawn("#000000", Random(42), 50, 40)
        b = Player.spawn("#000000", Random(42), 50, 40)
        assert (a.position, a.heading) == (b.position, b.heading)
