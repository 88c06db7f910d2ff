# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Stuck recovery: where to click when following a path is not possible.

These functions only choose a screen point; ``MovementPlanner`` turns the
point into input. Directional recovery tries the eight compass directions
around the player in three passes:

1. short radius, walkable targets only
2. doubled radius, walkable targets only
3. short radius, any target (the player may be standing on a tile the grid
   marks as blocked, in which case nothing nearby looks reachable)

Random recovery picks any point in the inner half of the game area.
"""

from __future__ import annotations

import random

from isobot.logging import get_logger
from isobot.navigation.config import NavigationConfig
from isobot.navigation.geometry import Position
from isobot.navigation.projection import Viewport, project
from isobot.navigation.snapshot import WorldSnapshot

logger = get_logger(__name__)

# N, NE, E, SE, S, SW, W, NW as unit steps
COMPASS: tuple[tuple[int, int], ...] = (
    (0, -1), (1, -1), (1, 0), (1, 1),
    (0, 1), (-1, 1), (-1, 0), (-1, -1),
)


def directional_target(
    snapshot: WorldSnapshot,
    viewport: Viewport,
    config: NavigationConfig,
    rng: random.Random,
) -> tuple[int, int] | None:
    """Screen point of the first usable compass neighbour, or None.

    Returns None without looking at anything when the snapshot has no grid.
    """
    grid = snapshot.grid
    if grid is None:
        logger.debug("directional_no_grid", area=snapshot.area)
        return None

    directions = list(COMPASS)
    rng.shuffle(directions)

    radius = config.fallback.short_radius
    margin = config.fallback.screen_margin
    hud_line = viewport.hud_line(config.hud_fraction)
    player = snapshot.player

    passes = (
        (radius, True),
        (radius * config.fallback.long_radius_factor, True),
        (radius, False),
    )
    for pass_no, (r, check_walkable) in enumerate(passes, start=1):
        for dx, dy in directions:
            target = Position(player.x + dx * r, player.y + dy * r)
            if check_walkable and not grid.is_walkable(target):
                continue
            sx, sy = project(player, target, viewport)
            if not viewport.within_margin(sx, sy, margin, hud_line):
                continue
            logger.debug("directional_target", pass_no=pass_no, target=str(target), screen=(sx, sy))
            return sx, sy

    logger.debug("directional_exhausted", player=str(player))
    return None


def random_target(viewport: Viewport, rng: random.Random) -> tuple[int, int]:
    """Random point in the inner half of the game area."""
    mid_x = viewport.width // 2
    mid_y = viewport.height // 2
    x = mid_x + rng.randrange(max(mid_x, 1)) - mid_x // 2
    y = mid_y + rng.randrange(max(mid_y, 1)) - mid_y // 2
    return x, y
