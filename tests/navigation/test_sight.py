"""Tests for grid line of sight."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from isobot.navigation.geometry import Position
from isobot.navigation.grid import CollisionGrid
from isobot.navigation.sight import has_line_of_sight


@given(st.integers(-20, 40), st.integers(-20, 40))
def test_same_point_always_visible(x, y):
    grid = CollisionGrid.from_strings(["#####", "#.#.#", "#####"])
    assert has_line_of_sight(grid, Position(x, y), Position(x, y))


def test_open_row():
    grid = CollisionGrid.open(10, 1)
    assert has_line_of_sight(grid, Position(0, 0), Position(9, 0))
    assert has_line_of_sight(grid, Position(9, 0), Position(0, 0))


def test_single_blocked_cell_between():
    grid = CollisionGrid.from_strings([".....", "..#..", "....."])
    assert not has_line_of_sight(grid, Position(0, 1), Position(4, 1))
    assert not has_line_of_sight(grid, Position(2, 0), Position(2, 2))
    # Rows above and below the pillar are clear
    assert has_line_of_sight(grid, Position(0, 0), Position(4, 0))


def test_blocked_destination():
    grid = CollisionGrid.from_strings(["...#"])
    assert not has_line_of_sight(grid, Position(0, 0), Position(3, 0))


def test_origin_is_not_tested():
    grid = CollisionGrid.from_strings(["#..."])
    assert has_line_of_sight(grid, Position(0, 0), Position(3, 0))


def test_diagonal():
    grid = CollisionGrid.open(6, 6)
    assert has_line_of_sight(grid, Position(0, 0), Position(5, 5))
    blocked = CollisionGrid.from_strings(["......", "......", "..#...", "......", "......", "......"])
    assert not has_line_of_sight(blocked, Position(0, 0), Position(5, 5))


def test_leaving_the_grid_is_blocked():
    grid = CollisionGrid.open(3, 3)
    assert not has_line_of_sight(grid, Position(1, 1), Position(5, 1))
