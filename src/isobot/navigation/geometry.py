# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""World-space geometry primitives."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Integer world coordinate."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def float_distance(a: Position, b: Position) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def distance(a: Position, b: Position) -> int:
    """Euclidean distance truncated to whole world units."""
    return int(float_distance(a, b))


def beyond_position(start: Position, target: Position, dist: int) -> Position:
    """Point ``dist`` units past ``target`` on the ray from ``start``.

    Identical start/target has no direction; +x is used instead.
    """
    dx = float(target.x - start.x)
    dy = float(target.y - start.y)
    length = math.hypot(dx, dy)
    if length == 0:
        dx, dy = 1.0, 0.0
    else:
        dx, dy = dx / length, dy / length
    return Position(target.x + int(dx * dist), target.y + int(dy * dist))
