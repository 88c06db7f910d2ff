# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Room traversal ordering.

Clearing a level means visiting each of its rooms once. Time spent inside a
room dominates the walk between rooms, so a greedy nearest-neighbour tour is
good enough; ``RoomOrderer`` keeps the heuristic swappable (e.g. for a 2-opt
pass) without touching callers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from isobot.logging import get_logger
from isobot.navigation.geometry import Position, distance

logger = get_logger(__name__)


class Room(BaseModel):
    """Named rectangular sub-area of a level."""

    name: str
    x: int
    y: int
    width: int
    height: int

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def center(self) -> Position:
        return Position(self.x + self.width // 2, self.y + self.height // 2)

    def contains(self, pos: Position) -> bool:
        return self.x <= pos.x < self.x + self.width and self.y <= pos.y < self.y + self.height


class RoomOrderer(ABC):
    """Strategy interface for choosing the order rooms are visited in."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this heuristic."""
        ...

    @abstractmethod
    def order(self, rooms: Sequence[Room], player: Position) -> list[Room]:
        """Return every room exactly once, starting with the player's room."""
        ...


def _starting_index(rooms: Sequence[Room], player: Position) -> int:
    start = 0
    for i, room in enumerate(rooms):
        if room.contains(player):
            # Overlapping rooms: the last one listed wins
            start = i
    return start


class NearestNeighborOrderer(RoomOrderer):
    """Greedy tour: always walk to the closest room not yet visited."""

    @property
    def name(self) -> str:
        return "nearest_neighbor"

    def order(self, rooms: Sequence[Room], player: Position) -> list[Room]:
        if not rooms:
            return []

        count = len(rooms)
        centers = [room.center for room in rooms]
        matrix = [[distance(centers[i], centers[j]) if i != j else 0 for j in range(count)] for i in range(count)]

        current = _starting_index(rooms, player)
        visited = [False] * count
        visited[current] = True
        order = [current]

        while len(order) < count:
            best: int | None = None
            best_dist = 0
            for candidate in range(count):
                if visited[candidate]:
                    continue
                d = matrix[current][candidate]
                # Strict < keeps the earliest room on ties
                if best is None or d < best_dist:
                    best, best_dist = candidate, d
            assert best is not None
            visited[best] = True
            order.append(best)
            current = best

        logger.debug("rooms_ordered", heuristic=self.name, count=count, start=rooms[order[0]].name)
        return [rooms[i] for i in order]


def order_rooms(rooms: Sequence[Room], player: Position, orderer: RoomOrderer | None = None) -> list[Room]:
    """Visitation order for ``rooms`` starting from the room the player is in."""
    return (orderer or NearestNeighborOrderer()).order(rooms, player)
