# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory dispatcher and sender.

Used for dry runs (``isobot plan``) and tests: every call is appended to
``events`` instead of reaching a game window.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any

from isobot.errors import ProtocolCommandError
from isobot.input.base import ModifierKey, MouseButton
from isobot.input.timing import Sleeper, humanized_pause

if TYPE_CHECKING:
    from isobot.navigation.geometry import Position
    from isobot.navigation.snapshot import KeyBinding


def _no_sleep(_seconds: float) -> None:
    return None


class RecordingDispatcher:
    def __init__(self, *, seed: int = 1, sleep: Sleeper = _no_sleep) -> None:
        self.events: list[tuple[Any, ...]] = []
        self._rng = random.Random(int(seed))
        self._sleep = sleep

    def move_pointer(self, x: int, y: int) -> None:
        self.events.append(("move_pointer", x, y))

    def click(self, button: MouseButton, x: int, y: int, modifier: ModifierKey | None = None) -> None:
        humanized_pause(self._rng, self._sleep)
        self.events.append(("click", MouseButton(button), x, y, modifier))

    def key_down(self, binding: KeyBinding) -> None:
        self.events.append(("key_down", binding.key))

    def key_up(self, binding: KeyBinding) -> None:
        self.events.append(("key_up", binding.key))

    def press_key_binding(self, binding: KeyBinding) -> None:
        humanized_pause(self._rng, self._sleep)
        self.events.append(("press_key", binding.key, binding.modifier))

    def clicks(self) -> list[tuple[Any, ...]]:
        return [e for e in self.events if e[0] == "click"]

    def clear(self) -> None:
        self.events.clear()


class RecordingSender:
    """Protocol sender that records calls and can be told to fail."""

    def __init__(self, *, fail_teleport: bool = False, fail_select: bool = False) -> None:
        self.fail_teleport = fail_teleport
        self.fail_select = fail_select
        self.teleports: list[Position] = []
        self.selected: list[str] = []

    def teleport(self, position: Position) -> bool:
        if self.fail_teleport:
            raise ProtocolCommandError(f"teleport to {position} rejected")
        self.teleports.append(position)
        return True

    def select_skill(self, skill: str) -> bool:
        if self.fail_select:
            raise ProtocolCommandError(f"select {skill} rejected")
        self.selected.append(skill)
        return True
