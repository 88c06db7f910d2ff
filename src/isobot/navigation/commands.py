# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Movement commands produced by the planner.

``MovementCommand`` is a closed union discriminated on ``kind``; the planner
dispatches it with an exhaustive ``match``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from isobot.input.base import MouseButton
from isobot.navigation.geometry import Position
from isobot.navigation.snapshot import KeyBinding


class MovementStrategy(StrEnum):
    WALK_CLICK = "walk_click"  # town: plain left click
    WALK_FORCE = "walk_force"  # field: force-move, never attacks
    TELEPORT_INPUT = "teleport_input"
    TELEPORT_PROTOCOL = "teleport_protocol"
    DIRECTIONAL_FALLBACK = "directional_fallback"
    RANDOM_FALLBACK = "random_fallback"


class ScreenClick(BaseModel):
    """Move the pointer to ``(x, y)`` and click."""

    kind: Literal["screen_click"] = "screen_click"
    button: MouseButton
    x: int
    y: int

    model_config = ConfigDict(frozen=True)


class KeyPress(BaseModel):
    """Move the pointer to ``(x, y)`` and press a bound key."""

    kind: Literal["key_press"] = "key_press"
    binding: KeyBinding
    x: int
    y: int

    model_config = ConfigDict(frozen=True)


class ProtocolTeleport(BaseModel):
    """Teleport via the protocol sender.

    ``x``/``y`` are the screen coordinates of the same point, used for the
    right-click fallback when the sender rejects the command.
    """

    kind: Literal["protocol_teleport"] = "protocol_teleport"
    position: Position
    x: int
    y: int
    select_skill: str | None = None

    model_config = ConfigDict(frozen=True)


MovementCommand = Annotated[ScreenClick | KeyPress | ProtocolTeleport, Field(discriminator="kind")]
