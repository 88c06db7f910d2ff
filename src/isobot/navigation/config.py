# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration for the navigation core.

Every tuning constant the planner uses lives here so it can be overridden from
YAML or ``ISOBOT_NAVIGATION__*`` environment variables. The stuck-recovery
radii and screen margins are empirical values from live play; keep them
unless a new value has been measured.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from isobot.errors import ConfigError
from isobot.logging import get_logger
from isobot.navigation.projection import DEFAULT_HUD_FRACTION

logger = get_logger(__name__)


class PacketCastingConfig(BaseModel):
    """Protocol-level casting instead of simulated clicks."""

    use_for_teleport: bool = False
    use_for_skill_selection: bool = False
    # Areas where protocol teleports desync the client; always click there
    mouse_only_areas: list[str] = Field(
        default_factory=lambda: ["FlayerJungle", "LowerKurast", "RiverOfFlame"]
    )

    model_config = ConfigDict(extra="ignore")


class FallbackConfig(BaseModel):
    """Stuck-recovery tuning."""

    short_radius: int = 5
    long_radius_factor: int = 2
    screen_margin: int = 50  # pixels

    model_config = ConfigDict(extra="ignore")


class SettleConfig(BaseModel):
    """Delays (milliseconds) after issuing input, before the next snapshot."""

    walk_ms: int = 50
    skill_select_ms: int = 50
    directional_ms: int = 150
    random_ms: int = 100

    model_config = ConfigDict(extra="ignore")


class NavigationConfig(BaseModel):
    """Complete navigation configuration."""

    packet_casting: PacketCastingConfig = Field(default_factory=PacketCastingConfig)
    fallback: FallbackConfig = Field(default_factory=FallbackConfig)
    settle: SettleConfig = Field(default_factory=SettleConfig)

    # Protocol teleports this close (world units) to the area edge are unreliable
    boundary_threshold: int = 60
    # Path points walked per second of walk duration
    walk_speed: float = 25.0
    hud_fraction: float = DEFAULT_HUD_FRACTION
    teleport_skill: str = "teleport"
    narrow_areas: list[str] = Field(
        default_factory=lambda: [
            "MaggotLairLevel1",
            "MaggotLairLevel2",
            "MaggotLairLevel3",
            "ArcaneSanctuary",
            "ClawViperTempleLevel2",
            "RiverOfFlame",
            "ChaosSanctuary",
        ]
    )

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_yaml(cls, path: Path | str) -> NavigationConfig:
        path = Path(path)
        logger.info("config_loading", path=str(path))
        try:
            data = yaml.safe_load(path.read_text()) or {}
            return cls.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            raise ConfigError(f"cannot load navigation config {path}: {e}") from e

    def to_yaml(self, path: Path | str) -> None:
        path = Path(path)
        logger.info("config_saving", path=str(path))
        path.write_text(self.dump_yaml())

    def dump_yaml(self) -> str:
        return yaml.dump(self.model_dump(mode="json"), default_flow_style=False, sort_keys=False)

    def is_narrow_map(self, area: str) -> bool:
        return area in self.narrow_areas


def load_config(path: Path | str) -> NavigationConfig:
    return NavigationConfig.from_yaml(path)
