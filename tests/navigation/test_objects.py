# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for door, chest and destructible queries."""

from __future__ import annotations

from isobot.navigation.geometry import Position
from isobot.navigation.grid import CollisionGrid
from isobot.navigation.objects import closest_chest, closest_destructible, closest_door, has_door_between
from isobot.navigation.snapshot import GameObject, ObjectKind, WorldSnapshot

PLAYER = Position(150, 150)


def _obj(kind: ObjectKind, x: int, y: int, name: str = "", selectable: bool = True) -> GameObject:
    return GameObject(name=name or str(kind), kind=kind, position=Position(x, y), selectable=selectable)


class TestClosest:
    def test_closest_door_within_radius(self, make_snapshot):
        near = _obj(ObjectKind.DOOR, 153, 150, "near")
        nearer = _obj(ObjectKind.DOOR, 151, 151, "nearer")
        far = _obj(ObjectKind.DOOR, 155, 150, "far")
        snapshot = make_snapshot(objects=(near, far, nearer))
        assert closest_door(snapshot, PLAYER) == nearer

    def test_door_radius_is_exclusive(self, make_snapshot):
        snapshot = make_snapshot(objects=(_obj(ObjectKind.DOOR, 155, 150),))
        assert closest_door(snapshot, PLAYER) is None

    def test_unselectable_ignored(self, make_snapshot):
        snapshot = make_snapshot(objects=(_obj(ObjectKind.DOOR, 151, 150, selectable=False),))
        assert closest_door(snapshot, PLAYER) is None

    def test_destructible(self, make_snapshot):
        barrel = _obj(ObjectKind.DESTRUCTIBLE, 151, 150)
        snapshot = make_snapshot(objects=(barrel, _obj(ObjectKind.DESTRUCTIBLE, 153, 150)))
        assert closest_destructible(snapshot, PLAYER) == barrel
        assert closest_destructible(snapshot, Position(160, 160)) is None

    def test_chest_kinds(self, make_snapshot):
        chest = _obj(ObjectKind.SUPER_CHEST, 165, 150)
        snapshot = make_snapshot(objects=(_obj(ObjectKind.DOOR, 151, 150), chest))
        assert closest_chest(snapshot, PLAYER) == chest

    def test_chest_line_of_sight(self, make_snapshot):
        # Wall at x=155 between the player and the chest
        rows = ["." * 30 for _ in range(30)]
        rows = [row[:15] + "#" + row[16:] for row in rows]
        grid = CollisionGrid.from_strings(rows, offset_x=140, offset_y=140)
        chest = _obj(ObjectKind.CHEST, 160, 150)
        snapshot = make_snapshot(grid=grid, objects=(chest,))

        assert closest_chest(snapshot, PLAYER) == chest
        assert closest_chest(snapshot, PLAYER, los_check=True) is None

    def test_chest_line_of_sight_without_grid(self, make_snapshot):
        snapshot = make_snapshot(grid=None, objects=(_obj(ObjectKind.CHEST, 152, 150),))
        assert closest_chest(snapshot, PLAYER, los_check=True) is None


class TestDoorBetween:
    def test_no_grid_reports_closest_door(self, make_snapshot):
        door = _obj(ObjectKind.DOOR, 152, 150, "gate")
        snapshot = make_snapshot(grid=None, objects=(door,))
        assert has_door_between(snapshot, PLAYER, Position(180, 180)) == (True, door)

    def test_no_grid_without_door_nearby(self, make_snapshot):
        snapshot = make_snapshot(grid=None, objects=(_obj(ObjectKind.DOOR, 160, 150),))
        assert has_door_between(snapshot, PLAYER, Position(180, 180)) == (False, None)

    def test_door_on_route(self, make_snapshot):
        door = _obj(ObjectKind.DOOR, 155, 152, "gate")
        snapshot = make_snapshot(objects=(door,))
        assert has_door_between(snapshot, PLAYER, Position(160, 150)) == (True, door)

    def test_door_off_route(self, make_snapshot):
        snapshot = make_snapshot(objects=(_obj(ObjectKind.DOOR, 155, 160),))
        assert has_door_between(snapshot, PLAYER, Position(160, 150)) == (False, None)

    def test_unreachable_reports_closest_door(self):
        # Player boxed in on the left, the closed door is the blocker
        grid = CollisionGrid.from_strings(["..#..", "..#..", "..#.."])
        door = _obj(ObjectKind.DOOR, 2, 1, "door")
        snapshot = WorldSnapshot(player=Position(1, 1), grid=grid, objects=(door,))
        assert has_door_between(snapshot, Position(1, 1), Position(4, 1)) == (True, door)

    def test_unreachable_without_door(self):
        grid = CollisionGrid.from_strings(["..#..", "..#..", "..#.."])
        snapshot = WorldSnapshot(player=Position(1, 1), grid=grid)
        assert has_door_between(snapshot, Position(1, 1), Position(4, 1)) == (False, None)
