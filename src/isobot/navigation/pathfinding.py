# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""A* path search on the collision grid.

Search is 8-directional with the octile heuristic (admissible and consistent
for step costs 1 and sqrt(2)). A diagonal step is only allowed when both
orthogonal cells it passes between are walkable, so paths never clip wall
corners.

Ties on f-cost go to the lower heuristic (the node closer to the goal), then
to whichever node was pushed first. Neighbours are always expanded in the same
order, so a given grid and query always produce the same path.

No route is a normal result: ``find_path`` returns an empty path and
``False``. Every cell is closed at most once, so the search is bounded by the
grid size even when origin and destination are in disconnected regions.

Public API
----------
``find_path(grid, origin, destination)`` -> ``(Path, found)``
``path_or_none(grid, origin, destination)`` -> ``Path | None``
"""

from __future__ import annotations

import heapq
import itertools
import math
from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from isobot.logging import get_logger
from isobot.navigation.geometry import Position, float_distance
from isobot.navigation.grid import CollisionGrid

logger = get_logger(__name__)

SQRT2 = math.sqrt(2)

_DIRS = (
    (0, -1), (1, 0), (0, 1), (-1, 0),     # cardinal
    (1, -1), (1, 1), (-1, 1), (-1, -1),   # diagonal
)
_COSTS = (1.0, 1.0, 1.0, 1.0, SQRT2, SQRT2, SQRT2, SQRT2)


class Path(Sequence[Position]):
    """Ordered positions from origin (index 0) to destination, inclusive."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Position] = ()):
        self._points = tuple(points)

    @overload
    def __getitem__(self, index: int) -> Position: ...
    @overload
    def __getitem__(self, index: slice) -> Path: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Path(self._points[index])
        return self._points[index]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._points == other._points
        if isinstance(other, (list, tuple)):
            return list(self._points) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        if not self._points:
            return "Path([])"
        return f"Path({self.origin} -> {self.destination}, {len(self)} points)"

    @property
    def origin(self) -> Position:
        return self._points[0]

    @property
    def destination(self) -> Position:
        return self._points[-1]

    @property
    def distance(self) -> int:
        """Number of steps from origin to destination."""
        return max(len(self._points) - 1, 0)

    def intersects(self, position: Position, radius: float) -> bool:
        """Does the path pass within ``radius`` world units of ``position``?"""
        return any(float_distance(p, position) <= radius for p in self._points)


def octile(ax: int, ay: int, bx: int, by: int) -> float:
    dx = abs(ax - bx)
    dy = abs(ay - by)
    return (dx + dy) + (SQRT2 - 2) * min(dx, dy)


def find_path(grid: CollisionGrid, origin: Position, destination: Position) -> tuple[Path, bool]:
    """Shortest walkable route from ``origin`` to ``destination``.

    Args:
        grid: Collision grid of the current area
        origin: Start position (world coordinates)
        destination: Goal position (world coordinates)

    Returns:
        ``(path, True)`` with the inclusive route, or ``(Path(), False)``
    """
    if not grid.is_walkable(destination):
        logger.debug("path_destination_blocked", destination=str(destination))
        return Path(), False
    if not grid.is_walkable(origin):
        logger.debug("path_origin_blocked", origin=str(origin))
        return Path(), False
    if origin == destination:
        return Path([origin]), True

    gx, gy = destination.x, destination.y
    start = (origin.x, origin.y)
    counter = itertools.count()

    h0 = octile(origin.x, origin.y, gx, gy)
    # (f, h, order, x, y)
    open_set: list[tuple[float, float, int, int, int]] = [(h0, h0, next(counter), origin.x, origin.y)]
    g_score: dict[tuple[int, int], float] = {start: 0.0}
    came_from: dict[tuple[int, int], tuple[int, int]] = {}
    closed: set[tuple[int, int]] = set()
    walkable = grid.is_walkable_xy

    while open_set:
        _f, _h, _order, x, y = heapq.heappop(open_set)
        node = (x, y)
        if node in closed:
            continue
        closed.add(node)

        if x == gx and y == gy:
            points = [Position(x, y)]
            while node in came_from:
                node = came_from[node]
                points.append(Position(*node))
            points.reverse()
            logger.debug("path_found", origin=str(origin), destination=str(destination), length=len(points),
                         expanded=len(closed))
            return Path(points), True

        base = g_score[node]
        for (dx, dy), step in zip(_DIRS, _COSTS):
            nx, ny = x + dx, y + dy
            if (nx, ny) in closed or not walkable(nx, ny):
                continue
            if dx and dy and not (walkable(x + dx, y) and walkable(x, y + dy)):
                continue
            new_g = base + step
            if new_g < g_score.get((nx, ny), math.inf):
                g_score[(nx, ny)] = new_g
                came_from[(nx, ny)] = node
                h = octile(nx, ny, gx, gy)
                heapq.heappush(open_set, (new_g + h, h, next(counter), nx, ny))

    logger.debug("path_not_found", origin=str(origin), destination=str(destination), expanded=len(closed))
    return Path(), False


def path_or_none(grid: CollisionGrid, origin: Position, destination: Position) -> Path | None:
    path, found = find_path(grid, origin, destination)
    return path if found else None
