# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for stuck recovery."""

from __future__ import annotations

import random

from isobot.input.base import MouseButton
from isobot.input.recording import RecordingDispatcher
from isobot.navigation.commands import MovementStrategy
from isobot.navigation.config import NavigationConfig
from isobot.navigation.fallback import COMPASS, directional_target, random_target
from isobot.navigation.geometry import Position
from isobot.navigation.grid import CollisionGrid
from isobot.navigation.planner import MovementPlanner
from isobot.navigation.projection import Viewport, project

PLAYER = Position(150, 150)


def _ring(viewport: Viewport, radius: int) -> set[tuple[int, int]]:
    return {project(PLAYER, PLAYER.offset(dx * radius, dy * radius), viewport) for dx, dy in COMPASS}


def _grid_blocking(cells: set[tuple[int, int]]) -> CollisionGrid:
    return CollisionGrid([[(x, y) not in cells for x in range(300)] for y in range(300)])


class TestDirectionalTarget:
    def test_no_grid(self, make_snapshot, viewport):
        snapshot = make_snapshot(grid=None)
        assert directional_target(snapshot, viewport, NavigationConfig(), random.Random(1)) is None

    def test_short_radius_first(self, make_snapshot, viewport):
        target = directional_target(make_snapshot(), viewport, NavigationConfig(), random.Random(1))
        assert target in _ring(viewport, 5)

    def test_doubled_radius_when_short_ring_blocked(self, make_snapshot, viewport):
        ring = {(PLAYER.x + dx * 5, PLAYER.y + dy * 5) for dx, dy in COMPASS}
        snapshot = make_snapshot(grid=_grid_blocking(ring))
        target = directional_target(snapshot, viewport, NavigationConfig(), random.Random(1))
        assert target in _ring(viewport, 10)

    def test_ignores_walkability_as_last_resort(self, make_snapshot, viewport):
        snapshot = make_snapshot(grid=CollisionGrid([[False] * 300 for _ in range(300)]))
        target = directional_target(snapshot, viewport, NavigationConfig(), random.Random(1))
        assert target in _ring(viewport, 5)

    def test_targets_respect_screen_margin(self, make_snapshot):
        # Tiny window: every candidate is inside the 50 px margin
        viewport = Viewport(100, 100)
        assert directional_target(make_snapshot(), viewport, NavigationConfig(), random.Random(1)) is None

    def test_seeded_choice_is_repeatable(self, make_snapshot, viewport):
        config = NavigationConfig()
        picks = {directional_target(make_snapshot(), viewport, config, random.Random(42)) for _ in range(5)}
        assert len(picks) == 1


def test_random_target_inner_half():
    viewport = Viewport(100, 100)
    rng = random.Random(3)
    for _ in range(200):
        x, y = random_target(viewport, rng)
        assert 25 <= x <= 74
        assert 25 <= y <= 74


class TestPlannerRecovery:
    def test_directional_movement(self, make_snapshot, make_planner, dispatcher, sleeps, viewport):
        assert make_planner().directional_movement(make_snapshot())

        clicks = dispatcher.clicks()
        assert len(clicks) == 1
        _, button, x, y, _ = clicks[0]
        # Field: default force-move is bound to the left mouse button
        assert button == MouseButton.LEFT
        assert (x, y) in _ring(viewport, 5)
        assert sleeps == [0.15]

    def test_directional_movement_without_grid(self, make_snapshot, make_planner, dispatcher, sleeps):
        assert not make_planner().directional_movement(make_snapshot(grid=None))
        assert dispatcher.events == []
        assert sleeps == []

    def test_random_movement_prefers_directional(self, make_snapshot, make_planner, sleeps, viewport):
        command = make_planner().random_movement(make_snapshot(is_town=True))
        assert (command.x, command.y) in _ring(viewport, 5)
        assert command.button == MouseButton.LEFT
        assert sleeps == [0.15]

    def test_random_movement_when_directional_exhausted(self, make_snapshot):
        dispatcher = RecordingDispatcher()
        sleeps: list[float] = []
        planner = MovementPlanner(
            Viewport(100, 100),
            NavigationConfig(),
            dispatcher,
            sleep=sleeps.append,
            rng=random.Random(5),
        )
        command = planner.random_movement(make_snapshot())

        assert 25 <= command.x <= 74
        assert 25 <= command.y <= 74
        assert dispatcher.clicks() == [("click", MouseButton.LEFT, command.x, command.y, None)]
        assert sleeps == [0.1]

    def test_recover_reports_directional(self, make_snapshot, make_planner):
        strategy, command = make_planner().recover(make_snapshot())
        assert strategy == MovementStrategy.DIRECTIONAL_FALLBACK
        assert command.kind == "screen_click"

    def test_recover_reports_random(self, make_snapshot, make_planner, sleeps):
        strategy, command = make_planner().recover(make_snapshot(grid=None))
        assert strategy == MovementStrategy.RANDOM_FALLBACK
        assert command.kind == "screen_click"
        assert sleeps == [0.1]

