# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import Any

import pytest
import structlog

from isobot.input.recording import RecordingDispatcher, RecordingSender
from isobot.navigation.config import NavigationConfig
from isobot.navigation.geometry import Position
from isobot.navigation.grid import CollisionGrid
from isobot.navigation.planner import MovementPlanner
from isobot.navigation.projection import Viewport
from isobot.navigation.snapshot import WorldSnapshot


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI tests point structlog at a temporary stream; undo that after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def viewport() -> Viewport:
    """1280x720 game area: centre (640, 360), HUD line at y=605."""
    return Viewport(1280, 720)


@pytest.fixture
def open_grid() -> CollisionGrid:
    """300x300 fully walkable area at the world origin."""
    return CollisionGrid.open(300, 300)


@pytest.fixture
def make_snapshot(open_grid: CollisionGrid) -> Callable[..., WorldSnapshot]:
    def _make(player: Position = Position(150, 150), **kwargs: Any) -> WorldSnapshot:
        kwargs.setdefault("grid", open_grid)
        kwargs.setdefault("area", "BloodMoor")
        return WorldSnapshot(player=player, **kwargs)

    return _make


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def sleeps() -> list[float]:
    """Seconds passed to the planner's sleep, in call order."""
    return []


@pytest.fixture
def make_planner(
    viewport: Viewport,
    dispatcher: RecordingDispatcher,
    sleeps: list[float],
) -> Callable[..., MovementPlanner]:
    def _make(
        config: NavigationConfig | None = None,
        sender: RecordingSender | None = None,
        seed: int = 7,
    ) -> MovementPlanner:
        return MovementPlanner(
            viewport,
            config or NavigationConfig(),
            dispatcher,
            sender,
            sleep=sleeps.append,
            rng=random.Random(seed),
        )

    return _make
