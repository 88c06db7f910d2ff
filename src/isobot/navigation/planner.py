# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Movement planner: one tick in, one movement command out.

The planner is called once per control tick with a fresh snapshot. It picks a
strategy from the snapshot's capabilities and the configuration (nothing is
remembered between ticks), chooses a screen point along the path and issues
exactly one command through the dispatcher or protocol sender.

Strategies
----------
walk_click / walk_force
    Furthest path point reachable this tick that is still on screen and above
    the HUD. Town uses a plain left click; the field uses force-move so a
    monster standing on the target is never attacked by accident.
teleport_input / teleport_protocol
    Furthest path point on screen (scanned from the destination backwards),
    cast with a right click or, where safe, with a protocol command.
directional_fallback / random_fallback
    Stuck recovery, see ``isobot.navigation.fallback``.
"""

from __future__ import annotations

import random
import time
from typing import TYPE_CHECKING

from isobot.errors import ProtocolCommandError
from isobot.input.base import MouseButton
from isobot.input.timing import Sleeper, sleep_ms
from isobot.logging import get_logger
from isobot.navigation.commands import (
    KeyPress,
    MovementCommand,
    MovementStrategy,
    ProtocolTeleport,
    ScreenClick,
)
from isobot.navigation.config import NavigationConfig
from isobot.navigation.fallback import directional_target, random_target
from isobot.navigation.pathfinding import Path, find_path
from isobot.navigation.projection import Viewport, project

if TYPE_CHECKING:
    from isobot.input.base import InputDispatcher, ProtocolSender
    from isobot.navigation.geometry import Position
    from isobot.navigation.snapshot import WorldSnapshot

logger = get_logger(__name__)


def select_strategy(
    snapshot: WorldSnapshot,
    config: NavigationConfig,
    has_sender: bool = False,
) -> MovementStrategy:
    """Path-following strategy for this tick.

    Pure function of the snapshot capabilities and configuration. The
    per-point protocol safety checks happen later, in teleport planning.
    """
    if snapshot.can_teleport:
        if config.packet_casting.use_for_teleport and has_sender:
            return MovementStrategy.TELEPORT_PROTOCOL
        return MovementStrategy.TELEPORT_INPUT
    if snapshot.is_town:
        return MovementStrategy.WALK_CLICK
    return MovementStrategy.WALK_FORCE


class MovementPlanner:
    """Turns paths and destinations into movement input for one agent."""

    def __init__(
        self,
        viewport: Viewport,
        config: NavigationConfig | None = None,
        dispatcher: InputDispatcher | None = None,
        sender: ProtocolSender | None = None,
        *,
        sleep: Sleeper = time.sleep,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the planner.

        Args:
            viewport: Size of the game render area
            config: Navigation configuration (defaults if None)
            dispatcher: Simulated-input dispatcher; required for anything
                that moves, planning alone works without one
            sender: Optional protocol sender; absent means protocol casting
                is disabled
            sleep: Blocking sleep used for settle delays
            rng: Random source for recovery moves
        """
        self.viewport = viewport
        self.config = config or NavigationConfig()
        self.dispatcher = dispatcher
        self.sender = sender
        self._sleep = sleep
        self._rng = rng or random.Random()

    # -- strategy & planning ---------------------------------------------

    @property
    def hud_line(self) -> int:
        return self.viewport.hud_line(self.config.hud_fraction)

    def select_strategy(self, snapshot: WorldSnapshot) -> MovementStrategy:
        return select_strategy(snapshot, self.config, self.sender is not None)

    def plan_path_move(
        self,
        snapshot: WorldSnapshot,
        path: Path,
        walk_duration: float = 0.0,
    ) -> MovementCommand | None:
        """Command that advances along ``path`` this tick, without sending it.

        Args:
            snapshot: Current world snapshot
            path: Route whose first point is the player position
            walk_duration: Seconds of walking this tick covers (0 = no limit)

        Returns:
            The command, or None when no path point can be targeted
        """
        if not path:
            return None

        strategy = self.select_strategy(snapshot)
        if strategy in (MovementStrategy.TELEPORT_INPUT, MovementStrategy.TELEPORT_PROTOCOL):
            return self._plan_teleport(snapshot, path, strategy)
        return self._plan_walk(snapshot, path, walk_duration, strategy)

    def _plan_walk(
        self,
        snapshot: WorldSnapshot,
        path: Path,
        walk_duration: float,
        strategy: MovementStrategy,
    ) -> MovementCommand | None:
        max_distance = int(self.config.walk_speed * walk_duration)
        hud_line = self.hud_line
        origin = path.origin

        target: tuple[int, int] | None = None
        for index, pos in enumerate(path):
            if max_distance > 0 and index > max_distance:
                break
            sx, sy = project(origin, pos, self.viewport)
            if sy > hud_line:
                break
            if not self.viewport.contains(sx, sy):
                break
            target = (sx, sy)

        if target is None:
            logger.debug("walk_no_target", path=repr(path))
            return None

        x, y = target
        if strategy == MovementStrategy.WALK_CLICK:
            return ScreenClick(button=MouseButton.LEFT, x=x, y=y)
        return self._force_move(snapshot, x, y)

    def _plan_teleport(
        self,
        snapshot: WorldSnapshot,
        path: Path,
        strategy: MovementStrategy,
    ) -> MovementCommand | None:
        index = self.last_path_index_on_screen(path, default=None)
        if index is None:
            logger.debug("teleport_no_target", path=repr(path))
            return None

        pos = path[index]
        x, y = project(path.origin, pos, self.viewport)
        if strategy == MovementStrategy.TELEPORT_PROTOCOL and self._protocol_safe(snapshot, pos):
            return self._protocol_teleport(snapshot, pos, x, y)
        return ScreenClick(button=MouseButton.RIGHT, x=x, y=y)

    def _protocol_teleport(self, snapshot: WorldSnapshot, pos: Position, x: int, y: int) -> ProtocolTeleport:
        select = None
        if (
            self.config.packet_casting.use_for_skill_selection
            and snapshot.right_skill != self.config.teleport_skill
        ):
            select = self.config.teleport_skill
        return ProtocolTeleport(position=pos, x=x, y=y, select_skill=select)

    def last_path_index_on_screen(self, path: Path, default: int | None = 0) -> int | None:
        """Index of the furthest path point inside the window and above the HUD."""
        hud_line = self.hud_line
        origin = path.origin if path else None
        for index in range(len(path) - 1, -1, -1):
            sx, sy = project(origin, path[index], self.viewport)
            if sy > hud_line:
                continue
            if self.viewport.contains(sx, sy):
                return index
        return default

    def _protocol_safe(self, snapshot: WorldSnapshot, pos: Position) -> bool:
        if snapshot.area in self.config.packet_casting.mouse_only_areas:
            logger.debug("teleport_mouse_only_area", area=snapshot.area)
            return False
        if self.is_near_area_boundary(snapshot, pos):
            logger.debug("teleport_near_boundary", x=pos.x, y=pos.y, threshold=self.config.boundary_threshold)
            return False
        return True

    def is_near_area_boundary(self, snapshot: WorldSnapshot, pos: Position, threshold: int | None = None) -> bool:
        if snapshot.grid is None:
            return False
        if threshold is None:
            threshold = self.config.boundary_threshold
        return snapshot.grid.edge_distance(pos) <= threshold

    def _force_move(self, snapshot: WorldSnapshot, x: int, y: int) -> MovementCommand:
        binding = snapshot.key_bindings.force_move
        # Mouse-bound force-move cannot be sent as a key event
        if binding.is_mouse_button() or not binding.is_bound():
            return ScreenClick(button=MouseButton.LEFT, x=x, y=y)
        return KeyPress(binding=binding, x=x, y=y)

    def _move_click(self, snapshot: WorldSnapshot, x: int, y: int) -> MovementCommand:
        if snapshot.is_town:
            return ScreenClick(button=MouseButton.LEFT, x=x, y=y)
        return self._force_move(snapshot, x, y)

    # -- movement ----------------------------------------------------------

    def move_through_path(
        self,
        snapshot: WorldSnapshot,
        path: Path,
        walk_duration: float = 0.0,
    ) -> MovementCommand | None:
        """Plan and send one movement along ``path``.

        Returns:
            The command actually delivered, or None if nothing was sent
        """
        command = self.plan_path_move(snapshot, path, walk_duration)
        if command is None:
            return None
        delivered = self.dispatch(command, snapshot)
        if not snapshot.can_teleport:
            sleep_ms(self.config.settle.walk_ms, self._sleep)
        return delivered

    def move_to(
        self,
        snapshot: WorldSnapshot,
        destination: Position,
        walk_duration: float = 0.0,
        recover: bool = False,
    ) -> MovementCommand | None:
        """Path to ``destination`` and take one step along the route.

        Args:
            snapshot: Current world snapshot
            destination: Target world position
            walk_duration: Seconds of walking this tick covers (0 = no limit)
            recover: Fall back to random recovery when there is no route

        Returns:
            The command delivered, or None when there is no route (and no
            recovery was requested) or nothing could be targeted
        """
        if snapshot.grid is None:
            logger.debug("move_no_grid", area=snapshot.area)
            return self.random_movement(snapshot) if recover else None

        path, found = find_path(snapshot.grid, snapshot.player, destination)
        if not found:
            logger.debug("move_no_route", player=str(snapshot.player), destination=str(destination))
            return self.random_movement(snapshot) if recover else None
        return self.move_through_path(snapshot, path, walk_duration)

    def move_character(self, snapshot: WorldSnapshot, x: int, y: int, position: Position | None = None) -> MovementCommand:
        """Move towards a screen point with the snapshot's default mechanism.

        Teleport-capable agents cast (protocol when ``position`` is given and
        protocol casting is enabled); everyone else walks.
        """
        command: MovementCommand
        if snapshot.can_teleport:
            strategy = self.select_strategy(snapshot)
            if position is not None and strategy == MovementStrategy.TELEPORT_PROTOCOL:
                command = self._protocol_teleport(snapshot, position, x, y)
            else:
                command = ScreenClick(button=MouseButton.RIGHT, x=x, y=y)
            return self.dispatch(command, snapshot)

        delivered = self.dispatch(self._move_click(snapshot, x, y), snapshot)
        sleep_ms(self.config.settle.walk_ms, self._sleep)
        return delivered

    def directional_movement(self, snapshot: WorldSnapshot) -> bool:
        """Step a short distance in some compass direction.

        Returns:
            True if a movement was issued
        """
        return self._directional(snapshot) is not None

    def _directional(self, snapshot: WorldSnapshot) -> MovementCommand | None:
        target = directional_target(snapshot, self.viewport, self.config, self._rng)
        if target is None:
            return None
        x, y = target
        delivered = self.dispatch(self._move_click(snapshot, x, y), snapshot)
        sleep_ms(self.config.settle.directional_ms, self._sleep)
        return delivered

    def recover(self, snapshot: WorldSnapshot) -> tuple[MovementStrategy, MovementCommand]:
        """Stuck recovery: directional first, a random click if that finds nothing.

        Returns:
            The fallback strategy that moved the agent and the command it
            delivered
        """
        command = self._directional(snapshot)
        if command is not None:
            return MovementStrategy.DIRECTIONAL_FALLBACK, command
        x, y = random_target(self.viewport, self._rng)
        logger.debug("random_movement", x=x, y=y, town=snapshot.is_town)
        delivered = self.dispatch(self._move_click(snapshot, x, y), snapshot)
        sleep_ms(self.config.settle.random_ms, self._sleep)
        return MovementStrategy.RANDOM_FALLBACK, delivered

    def random_movement(self, snapshot: WorldSnapshot) -> MovementCommand:
        """``recover`` without the strategy."""
        return self.recover(snapshot)[1]

    # -- dispatch ------------------------------------------------------------

    def dispatch(self, command: MovementCommand, snapshot: WorldSnapshot | None = None) -> MovementCommand:
        """Send ``command`` and return what was actually delivered.

        A rejected protocol teleport is replaced by a right click at the same
        screen point, so the delivered command can differ from the input.
        """
        match command:
            case ScreenClick(button=button, x=x, y=y):
                dispatcher = self._require_dispatcher()
                dispatcher.move_pointer(x, y)
                dispatcher.click(button, x, y)
                return command
            case KeyPress(binding=binding, x=x, y=y):
                dispatcher = self._require_dispatcher()
                dispatcher.move_pointer(x, y)
                dispatcher.press_key_binding(binding)
                return command
            case ProtocolTeleport():
                return self._dispatch_protocol_teleport(command, snapshot)
            case _:
                raise TypeError(f"unknown movement command: {command!r}")

    def _require_dispatcher(self) -> InputDispatcher:
        if self.dispatcher is None:
            raise RuntimeError("MovementPlanner has no input dispatcher")
        return self.dispatcher

    def _dispatch_protocol_teleport(
        self,
        command: ProtocolTeleport,
        snapshot: WorldSnapshot | None,
    ) -> MovementCommand:
        fallback = ScreenClick(button=MouseButton.RIGHT, x=command.x, y=command.y)
        if self.sender is None:
            return self.dispatch(fallback, snapshot)

        if command.select_skill is not None:
            try:
                if self.sender.select_skill(command.select_skill) is not False:
                    sleep_ms(self.config.settle.skill_select_ms, self._sleep)
                else:
                    logger.warning("skill_select_failed", skill=command.select_skill)
            except ProtocolCommandError as e:
                logger.warning("skill_select_failed", skill=command.select_skill, error=str(e))

        try:
            ok = self.sender.teleport(command.position) is not False
            error = None
        except ProtocolCommandError as e:
            ok = False
            error = str(e)

        if not ok:
            logger.warning(
                "protocol_teleport_failed",
                x=command.position.x,
                y=command.position.y,
                error=error,
                fallback="right_click",
            )
            return self.dispatch(fallback, snapshot)

        if snapshot is not None and snapshot.cast_duration > 0:
            self._sleep(snapshot.cast_duration)
        return command
