# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Grid line of sight (Bresenham raster walk)."""

from __future__ import annotations

from isobot.navigation.geometry import Position
from isobot.navigation.grid import CollisionGrid


def has_line_of_sight(grid: CollisionGrid, origin: Position, destination: Position) -> bool:
    """True when every cell between origin and destination is walkable.

    The origin is the observer's own cell and is not tested; the destination
    is. Stops at the first blocked cell.
    """
    dx = abs(destination.x - origin.x)
    dy = abs(destination.y - origin.y)
    sx = -1 if origin.x > destination.x else 1
    sy = -1 if origin.y > destination.y else 1
    err = dx - dy
    x, y = origin.x, origin.y

    while True:
        if (x, y) != (origin.x, origin.y) and not grid.is_walkable_xy(x, y):
            return False
        if x == destination.x and y == destination.y:
            return True
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
