# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""YAML scenarios: a hand-written world snapshot plus a destination.

Used by the CLI to exercise the planner offline. Grid rows use ``#`` for
blocked cells and ``.`` (or anything else) for walkable ones::

    area: BloodMoor
    player: {x: 1, y: 1}
    destination: {x: 8, y: 3}
    grid:
      - ".........."
      - "....#....."
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from isobot.errors import ConfigError
from isobot.logging import get_logger
from isobot.navigation.geometry import Position
from isobot.navigation.grid import CollisionGrid
from isobot.navigation.projection import Viewport
from isobot.navigation.rooms import Room
from isobot.navigation.snapshot import GameObject, KeyBindings, WorldSnapshot

logger = get_logger(__name__)


class ViewportSpec(BaseModel):
    width: int = 1280
    height: int = 720

    model_config = ConfigDict(extra="ignore")


class Scenario(BaseModel):
    """One planning problem."""

    area: str = ""
    is_town: bool = False
    can_teleport: bool = False
    right_skill: str | None = None
    cast_duration: float = 0.0
    player: Position
    destination: Position
    grid: list[str] = Field(default_factory=list)
    offset_x: int = 0
    offset_y: int = 0
    objects: list[GameObject] = Field(default_factory=list)
    rooms: list[Room] = Field(default_factory=list)
    key_bindings: KeyBindings = Field(default_factory=KeyBindings)
    viewport: ViewportSpec = Field(default_factory=ViewportSpec)

    model_config = ConfigDict(extra="ignore")

    @field_validator("grid")
    @classmethod
    def check_row_widths(cls, rows: list[str]) -> list[str]:
        widths = sorted({len(row) for row in rows})
        if len(widths) > 1:
            raise ValueError(f"grid rows have mixed widths: {widths}")
        return rows

    @classmethod
    def from_yaml(cls, path: Path | str) -> Scenario:
        path = Path(path)
        logger.info("scenario_loading", path=str(path))
        try:
            data = yaml.safe_load(path.read_text()) or {}
            return cls.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            raise ConfigError(f"cannot load scenario {path}: {e}") from e

    def collision_grid(self) -> CollisionGrid | None:
        if not self.grid:
            return None
        try:
            return CollisionGrid.from_strings(self.grid, self.offset_x, self.offset_y)
        except ValueError as e:
            raise ConfigError(str(e)) from e

    def to_viewport(self) -> Viewport:
        return Viewport(self.viewport.width, self.viewport.height)

    def to_snapshot(self) -> WorldSnapshot:
        return WorldSnapshot(
            player=self.player,
            area=self.area,
            is_town=self.is_town,
            grid=self.collision_grid(),
            objects=tuple(self.objects),
            rooms=tuple(self.rooms),
            key_bindings=self.key_bindings,
            can_teleport=self.can_teleport,
            right_skill=self.right_skill,
            cast_duration=self.cast_duration,
        )
