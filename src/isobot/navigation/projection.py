# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""World to screen projection for the fixed isometric camera.

The camera is always centred on the player, so a world point is projected
from its offset to the player:

    screen_x = (dx - dy) * 19.8 + width / 2
    screen_y = (dx + dy) * 9.9  + height / 2

Only the forward direction is needed; nothing clicks on the screen and asks
where in the world that was.
"""

from __future__ import annotations

from dataclasses import dataclass

from isobot.navigation.geometry import Position

ISO_SCALE_X = 19.8
ISO_SCALE_Y = 9.9

# Bottom of the game area is covered by the HUD; points below
# height * HUD_FRACTION are never clicked.
DEFAULT_HUD_FRACTION = 1 / 1.19


@dataclass(frozen=True)
class Viewport:
    """Size in pixels of the game render area."""

    width: int
    height: int

    @property
    def center(self) -> tuple[int, int]:
        return self.width // 2, self.height // 2

    def hud_line(self, fraction: float = DEFAULT_HUD_FRACTION) -> int:
        return int(self.height * fraction)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x <= self.width and 0 <= y <= self.height

    def within_margin(self, x: int, y: int, margin: int, hud_line: int) -> bool:
        """Strict check used for recovery clicks: away from every edge and above the HUD."""
        return margin < x < self.width - margin and margin < y < hud_line


def world_to_screen(
    player_x: int,
    player_y: int,
    target_x: int,
    target_y: int,
    viewport: Viewport,
) -> tuple[int, int]:
    dx = target_x - player_x
    dy = target_y - player_y
    cx, cy = viewport.center
    screen_x = int((dx - dy) * ISO_SCALE_X + cx)
    screen_y = int((dx + dy) * ISO_SCALE_Y + cy)
    return screen_x, screen_y


def project(origin: Position, target: Position, viewport: Viewport) -> tuple[int, int]:
    """``world_to_screen`` for Position arguments."""
    return world_to_screen(origin.x, origin.y, target.x, target.y, viewport)
