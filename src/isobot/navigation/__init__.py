# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Navigation core: path search, projection, recovery and movement planning."""

from isobot.navigation.commands import (
    KeyPress,
    MovementCommand,
    MovementStrategy,
    ProtocolTeleport,
    ScreenClick,
)
from isobot.navigation.config import NavigationConfig, load_config
from isobot.navigation.geometry import Position, beyond_position, distance
from isobot.navigation.grid import CollisionGrid
from isobot.navigation.objects import closest_chest, closest_destructible, closest_door, has_door_between
from isobot.navigation.pathfinding import Path, find_path, path_or_none
from isobot.navigation.planner import MovementPlanner, select_strategy
from isobot.navigation.projection import Viewport, world_to_screen
from isobot.navigation.rooms import NearestNeighborOrderer, Room, RoomOrderer, order_rooms
from isobot.navigation.sight import has_line_of_sight
from isobot.navigation.snapshot import GameObject, KeyBinding, KeyBindings, ObjectKind, WorldSnapshot

__all__ = [
    # Geometry
    "Position",
    "distance",
    "beyond_position",
    "CollisionGrid",
    "Viewport",
    "world_to_screen",
    "has_line_of_sight",
    # Search
    "Path",
    "find_path",
    "path_or_none",
    "Room",
    "RoomOrderer",
    "NearestNeighborOrderer",
    "order_rooms",
    # Snapshot
    "WorldSnapshot",
    "GameObject",
    "ObjectKind",
    "KeyBinding",
    "KeyBindings",
    # Queries
    "has_door_between",
    "closest_door",
    "closest_chest",
    "closest_destructible",
    # Planning
    "MovementPlanner",
    "MovementStrategy",
    "select_strategy",
    "MovementCommand",
    "ScreenClick",
    "KeyPress",
    "ProtocolTeleport",
    "NavigationConfig",
    "load_config",
]
