"""Tests for lightcycles.domain.grid module."""

from __future__ import annotations

import pytest

from lightcycles.domain.grid import OccupancyGrid


class TestOccupancyGrid:
    def test_starts_free(self) -> None:
        grid = OccupancyGrid(5, 4)
        assert grid.cells.shape == (4, 5)
        assert grid.claimed_count() == 0
        assert not grid.is_claimed(4, 3)

    def test_claim_reports_first_claim_only(self) -> None:
        grid = OccupancyGrid(5, 4)
        assert grid.claim(2, 1) is True
        assert grid.claim(2, 1) is False
        assert grid.is_claimed(2, 1)
        assert grid.claimed_count() == 1

    def test_indexing_is_x_then_y(self) -> None:
        grid = OccupancyGrid(5, 4)
        grid.claim(4, 0)
        assert grid.cells[0, 4]
        assert not grid.is_claimed(0, 3)

    def test_clear_frees_every_cell(self) -> None:
        grid = OccupancyGrid(3, 3)
        for x in range(3):
            for y in range(3):
                grid.claim(x, y)
        grid.clear()
        assert grid.claimed_count() == 0

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 4)])
    def test_out_of_bounds_lookup_raises(self, x: int, y: int) -> None:
        grid = OccupancyGrid(5, 4)
        with pytest.raises(IndexError):
            grid.is_claimed(x, y)
        with pytest.raises(IndexError):
            grid.claim(x, y)

    def test_rejects_empty_dimensions(self) -> None:
        with pytest.raises(ValueError):
            OccupancyGrid(0, 3)
