# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""isobot - navigation core for an isometric game-playing agent.

Turns a per-tick world snapshot into exactly one movement command:
a screen click, a bound key press, or a protocol-level teleport.

Usage:
    from isobot.navigation import MovementPlanner, NavigationConfig, Viewport

    planner = MovementPlanner(Viewport(1280, 720), NavigationConfig(), dispatcher)
    planner.move_to(snapshot, destination, walk_duration=1.0)
"""

__version__ = "0.1.0"
