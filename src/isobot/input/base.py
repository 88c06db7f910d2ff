# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Interfaces to the game client.

The planner never talks to the OS or the network itself. It drives an
``InputDispatcher`` (simulated mouse/keyboard) and, when available, a
``ProtocolSender`` that injects commands below the input layer.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from isobot.navigation.geometry import Position
    from isobot.navigation.snapshot import KeyBinding


class MouseButton(StrEnum):
    LEFT = "left"
    RIGHT = "right"


class ModifierKey(IntEnum):
    SHIFT = 0x10
    CTRL = 0x11
    ALT = 0x12


class InputDispatcher(Protocol):
    """Protocol for simulated device input.

    Implementations embed their own short randomized delays in ``click`` and
    ``press_key_binding`` (see ``isobot.input.timing``); from the planner's
    side every call is fire-and-forget.
    """

    def move_pointer(self, x: int, y: int) -> None:
        """Move the cursor to a game-area pixel."""
        ...

    def click(self, button: MouseButton, x: int, y: int, modifier: ModifierKey | None = None) -> None:
        """Click ``button`` at a game-area pixel, optionally holding a modifier."""
        ...

    def key_down(self, binding: KeyBinding) -> None:
        ...

    def key_up(self, binding: KeyBinding) -> None:
        ...

    def press_key_binding(self, binding: KeyBinding) -> None:
        """Press and release the key bound to an action."""
        ...


class ProtocolSender(Protocol):
    """Protocol for commands sent outside of simulated input.

    Either method signals failure by raising ``ProtocolCommandError`` or by
    returning ``False``; ``None`` and ``True`` both mean success.
    """

    def teleport(self, position: Position) -> bool | None:
        """Cast teleport to a world position."""
        ...

    def select_skill(self, skill: str) -> bool | None:
        """Select ``skill`` as the right-hand skill."""
        ...
