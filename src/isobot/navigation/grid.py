# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Walkability grid for one game area."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from isobot.navigation.geometry import Position

WALKABLE_CHAR = "."
BLOCKED_CHAR = "#"


class CollisionGrid:
    """Read-only walkable/blocked flags with a world-space origin offset.

    Cell ``cells[row][col]`` covers world position
    ``(offset_x + col, offset_y + row)``. Anything outside the rectangle is
    blocked.
    """

    __slots__ = ("_cells", "offset_x", "offset_y", "width", "height")

    def __init__(self, cells: Sequence[Sequence[bool]], offset_x: int = 0, offset_y: int = 0):
        rows = tuple(tuple(bool(c) for c in row) for row in cells)
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise ValueError(f"collision grid rows have mixed widths: {sorted(widths)}")
        self._cells = rows
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.height = len(rows)
        self.width = widths.pop() if widths else 0

    @classmethod
    def from_strings(cls, rows: Iterable[str], offset_x: int = 0, offset_y: int = 0) -> CollisionGrid:
        """Build a grid from text rows where ``#`` is blocked and anything else walkable."""
        return cls([[ch != BLOCKED_CHAR for ch in row] for row in rows], offset_x, offset_y)

    @classmethod
    def open(cls, width: int, height: int, offset_x: int = 0, offset_y: int = 0) -> CollisionGrid:
        return cls([[True] * width for _ in range(height)], offset_x, offset_y)

    def in_bounds(self, pos: Position) -> bool:
        col = pos.x - self.offset_x
        row = pos.y - self.offset_y
        return 0 <= row < self.height and 0 <= col < self.width

    def is_walkable(self, pos: Position) -> bool:
        if not self.in_bounds(pos):
            return False
        return self._cells[pos.y - self.offset_y][pos.x - self.offset_x]

    def is_walkable_xy(self, x: int, y: int) -> bool:
        col = x - self.offset_x
        row = y - self.offset_y
        if 0 <= row < self.height and 0 <= col < self.width:
            return self._cells[row][col]
        return False

    def edge_distance(self, pos: Position) -> int:
        """Distance from ``pos`` to the nearest edge of the area rectangle."""
        return min(
            pos.x - self.offset_x,
            (self.offset_x + self.width) - pos.x,
            pos.y - self.offset_y,
            (self.offset_y + self.height) - pos.y,
        )

    def to_strings(self) -> list[str]:
        return ["".join(WALKABLE_CHAR if c else BLOCKED_CHAR for c in row) for row in self._cells]

    def __repr__(self) -> str:
        return f"CollisionGrid({self.width}x{self.height} @ {self.offset_x},{self.offset_y})"
