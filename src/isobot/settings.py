# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from isobot.navigation.config import NavigationConfig, load_config


class Settings(BaseSettings):
    log_level: str = "WARNING"
    config_path: Path | None = None
    navigation: NavigationConfig = Field(default_factory=NavigationConfig)

    model_config = SettingsConfigDict(
        env_prefix="ISOBOT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    def navigation_config(self) -> NavigationConfig:
        """Navigation config from ``config_path`` when set, else the inline one."""
        if self.config_path is not None:
            return load_config(self.config_path)
        return self.navigation
