# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Runtime settings, read from GRIDCOMMAND_* environment variables or .env."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GRIDCOMMAND_",
        env_file=".env",
        extra="ignore",
    )

    # Decision core
    rng_seed: int = 6147
    desync_team_a: bool = True  # team A burns one draw so the teams diverge
    sense_radius_squared: int = -1  # negative = whole map

    # Diagnostics
    log_level: str = "INFO"

    # Local host
    map_width: int = Field(default=20, gt=0)
    map_height: int = Field(default=20, gt=0)
    map_seed: int = 0
    max_tile_uranium: int = Field(default=5, ge=0)
    starting_uranium: int = Field(default=10, ge=0)
    mine_amount: int = Field(default=1, gt=0)
    match_rounds: int = Field(default=200, gt=0)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
