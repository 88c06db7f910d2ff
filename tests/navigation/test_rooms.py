# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for room visitation ordering."""

from __future__ import annotations

from collections.abc import Sequence

from hypothesis import given, settings
from hypothesis import strategies as st

from isobot.navigation.geometry import Position
from isobot.navigation.rooms import NearestNeighborOrderer, Room, RoomOrderer, order_rooms


def _room(name: str, x: int, y: int = 0, size: int = 10) -> Room:
    return Room(name=name, x=x, y=y, width=size, height=size)


def _names(rooms: list[Room]) -> list[str]:
    return [r.name for r in rooms]


class TestNearestNeighbor:
    def test_starts_in_player_room_then_greedy(self):
        rooms = [_room("A", 0), _room("B", 100), _room("C", 20), _room("D", 50)]
        assert _names(order_rooms(rooms, Position(105, 5))) == ["B", "D", "C", "A"]

    def test_ties_go_to_earliest_listed(self):
        a, b, c = _room("A", 0), _room("B", 10), _room("C", -10)
        assert _names(order_rooms([a, b, c], Position(5, 5))) == ["A", "B", "C"]
        assert _names(order_rooms([a, c, b], Position(5, 5))) == ["A", "C", "B"]

    def test_player_outside_every_room_starts_at_first(self):
        rooms = [_room("A", 0), _room("B", 100), _room("C", 20)]
        assert _names(order_rooms(rooms, Position(500, 500))) == ["A", "C", "B"]

    def test_overlapping_rooms_last_listed_wins(self):
        big = Room(name="big", x=0, y=0, width=50, height=50)
        small = _room("small", 0)
        assert order_rooms([big, small], Position(2, 2))[0] == small
        assert order_rooms([small, big], Position(2, 2))[0] == big

    def test_empty(self):
        assert order_rooms([], Position(0, 0)) == []

    def test_single_room(self):
        only = _room("only", 0)
        assert order_rooms([only], Position(-100, -100)) == [only]


class TestRoom:
    def test_center_and_contains(self):
        room = Room(name="r", x=10, y=20, width=5, height=4)
        assert room.center == Position(12, 22)
        assert room.contains(Position(10, 20))
        assert room.contains(Position(14, 23))
        assert not room.contains(Position(15, 20))
        assert not room.contains(Position(10, 24))


room_lists = st.lists(
    st.builds(
        Room,
        name=st.text(min_size=1, max_size=4),
        x=st.integers(-200, 200),
        y=st.integers(-200, 200),
        width=st.integers(1, 40),
        height=st.integers(1, 40),
    ),
    max_size=12,
)


@given(room_lists, st.integers(-250, 250), st.integers(-250, 250))
@settings(max_examples=200, deadline=None)
def test_every_room_visited_once(rooms, px, py):
    player = Position(px, py)
    result = order_rooms(rooms, player)

    assert sorted(map(id, result)) == sorted(map(id, rooms))
    containing = [r for r in rooms if r.contains(player)]
    if containing:
        assert result[0] is containing[-1]
    elif rooms:
        assert result[0] is rooms[0]


def test_custom_orderer():
    class AsListed(RoomOrderer):
        @property
        def name(self) -> str:
            return "as_listed"

        def order(self, rooms: Sequence[Room], player: Position) -> list[Room]:
            return list(rooms)

    rooms = [_room("A", 100), _room("B", 0)]
    assert _names(order_rooms(rooms, Position(5, 5), AsListed())) == ["A", "B"]
    assert NearestNeighborOrderer().name == "nearest_neighbor"
