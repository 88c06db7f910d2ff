# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Queries over interactive objects: doors, chests, destructibles."""

from __future__ import annotations

from collections.abc import Callable

from isobot.logging import get_logger
from isobot.navigation.geometry import Position, float_distance
from isobot.navigation.pathfinding import Path, find_path
from isobot.navigation.sight import has_line_of_sight
from isobot.navigation.snapshot import GameObject, ObjectKind, WorldSnapshot

logger = get_logger(__name__)

DOOR_VICINITY = 5.0
DOOR_PATH_TOLERANCE = 4
DESTRUCTIBLE_VICINITY = 2.0
CHEST_VICINITY = 20.0


def _closest(
    snapshot: WorldSnapshot,
    position: Position,
    radius: float,
    accept: Callable[[GameObject], bool],
) -> GameObject | None:
    closest: GameObject | None = None
    best = radius
    for obj in snapshot.objects:
        if not obj.selectable or not accept(obj):
            continue
        d = float_distance(position, obj.position)
        if d < best:
            best = d
            closest = obj
    return closest


def closest_door(snapshot: WorldSnapshot, position: Position) -> GameObject | None:
    """Nearest selectable door strictly within 5 units of ``position``."""
    return _closest(snapshot, position, DOOR_VICINITY, GameObject.is_door)


def closest_destructible(snapshot: WorldSnapshot, position: Position) -> GameObject | None:
    """Barrel, urn or crate immediately next to ``position`` (within 2 units)."""
    return _closest(snapshot, position, DESTRUCTIBLE_VICINITY, lambda o: o.kind == ObjectKind.DESTRUCTIBLE)


def closest_chest(snapshot: WorldSnapshot, position: Position, los_check: bool = False) -> GameObject | None:
    """Nearest chest within 20 units, optionally only ones in line of sight."""
    grid = snapshot.grid

    def accept(obj: GameObject) -> bool:
        if not obj.is_chest():
            return False
        if los_check:
            return grid is not None and has_line_of_sight(grid, position, obj.position)
        return True

    return _closest(snapshot, position, CHEST_VICINITY, accept)


def has_door_between(
    snapshot: WorldSnapshot,
    origin: Position,
    destination: Position,
) -> tuple[bool, GameObject | None]:
    """Is a door blocking the way from ``origin`` to ``destination``?

    Without a route (or without a grid to route on), the closest door to the
    origin is the likely blocker.
    With a route, the first selectable door the route passes next to is
    reported.
    """
    path, found = Path(), False
    if snapshot.grid is not None:
        path, found = find_path(snapshot.grid, origin, destination)
    if not found:
        door = closest_door(snapshot, origin)
        if door is not None:
            logger.debug("door_blocks_unreachable", door=door.name, position=str(door.position))
            return True, door
        return False, None

    for door in snapshot.selectable_doors():
        if path.intersects(door.position, DOOR_PATH_TOLERANCE):
            logger.debug("door_on_path", door=door.name, position=str(door.position))
            return True, door

    return False, None
