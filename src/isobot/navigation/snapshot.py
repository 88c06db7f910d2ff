# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-tick world snapshot consumed by the planner.

The state reader builds one of these every control tick. The navigation core
only reads it; models are frozen so a snapshot stays a point-in-time copy.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from isobot.navigation.geometry import Position
from isobot.navigation.grid import CollisionGrid
from isobot.navigation.rooms import Room

# Virtual-key codes that are mouse buttons: VK_LBUTTON, VK_RBUTTON,
# VK_MBUTTON, VK_XBUTTON1, VK_XBUTTON2 (3 is VK_CANCEL).
MOUSE_BUTTON_KEYS = frozenset({1, 2, 4, 5, 6})
UNBOUND_KEYS = frozenset({0, 255})


class ObjectKind(StrEnum):
    DOOR = "door"
    CHEST = "chest"
    SUPER_CHEST = "super_chest"
    DESTRUCTIBLE = "destructible"
    OTHER = "other"


class GameObject(BaseModel):
    """Interactive object in the current area."""

    id: int = 0
    name: str = ""
    kind: ObjectKind = ObjectKind.OTHER
    position: Position
    selectable: bool = True

    model_config = ConfigDict(frozen=True, extra="ignore")

    def is_door(self) -> bool:
        return self.kind == ObjectKind.DOOR

    def is_chest(self) -> bool:
        return self.kind in (ObjectKind.CHEST, ObjectKind.SUPER_CHEST)


class KeyBinding(BaseModel):
    """Primary and secondary ``(virtual key, modifier)`` pair for one action.

    0 and 255 mean "unbound"; the secondary pair is used when the primary
    key is unbound.
    """

    key1: tuple[int, int] = (0, 0)
    key2: tuple[int, int] = (0, 0)

    model_config = ConfigDict(frozen=True, extra="ignore")

    def keys(self) -> tuple[int, int]:
        if self.key1[0] in UNBOUND_KEYS:
            return self.key2
        return self.key1

    @property
    def key(self) -> int:
        return self.keys()[0]

    @property
    def modifier(self) -> int | None:
        mod = self.keys()[1]
        return None if mod in UNBOUND_KEYS else mod

    def is_bound(self) -> bool:
        return self.key not in UNBOUND_KEYS

    def is_mouse_button(self) -> bool:
        return self.key in MOUSE_BUTTON_KEYS


class KeyBindings(BaseModel):
    # Left mouse button by default, the game's out-of-the-box setting
    force_move: KeyBinding = Field(default_factory=lambda: KeyBinding(key1=(1, 0)))

    model_config = ConfigDict(frozen=True, extra="ignore")


class WorldSnapshot(BaseModel):
    """Read-only view of the world for one control tick."""

    player: Position
    area: str = ""
    is_town: bool = False
    grid: CollisionGrid | None = None
    objects: tuple[GameObject, ...] = ()
    rooms: tuple[Room, ...] = ()
    key_bindings: KeyBindings = Field(default_factory=KeyBindings)
    can_teleport: bool = False
    right_skill: str | None = None
    cast_duration: float = 0.0  # seconds

    model_config = ConfigDict(frozen=True, extra="ignore", arbitrary_types_allowed=True)

    def is_walkable(self, pos: Position) -> bool:
        return self.grid is not None and self.grid.is_walkable(pos)

    def selectable_doors(self) -> list[GameObject]:
        return [o for o in self.objects if o.is_door() and o.selectable]
