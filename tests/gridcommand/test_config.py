# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Unit tests for gridcommand/config.py — defaults, validation, env parsing."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from gridcommand.config import Settings, get_settings

pytestmark = pytest.mark.unit


class TestSettingsDefaults:
    def test_decision_defaults(self, settings):
        assert settings.rng_seed == 6147
        assert settings.desync_team_a is True
        assert settings.sense_radius_squared == -1

    def test_host_defaults(self, settings):
        assert settings.map_width == 20
        assert settings.map_height == 20
        assert settings.starting_uranium == 10
        assert settings.mine_amount == 1
        assert settings.match_rounds == 200

    def test_log_level_default(self, settings):
        assert settings.log_level == "INFO"


class TestSettingsEnvOverride:
    def test_seed_from_env(self):
        with patch.dict(os.environ, {"GRIDCOMMAND_RNG_SEED": "42"}, clear=True):
            assert Settings(_env_file=None).rng_seed == 42

    def test_bool_from_env(self):
        with patch.dict(os.environ, {"GRIDCOMMAND_DESYNC_TEAM_A": "false"}, clear=True):
            assert Settings(_env_file=None).desync_team_a is False

    def test_unprefixed_env_ignored(self):
        with patch.dict(os.environ, {"RNG_SEED": "42"}, clear=True):
            assert Settings(_env_file=None).rng_seed == 6147

    def test_get_settings_cached(self):
        with patch.dict(os.environ, {"GRIDCOMMAND_MAP_WIDTH": "7"}, clear=True):
            assert get_settings() is get_settings()
            assert get_settings().map_width == 7


class TestSettingsValidation:
    def test_log_level_normalized(self):
        with patch.dict(os.environ, {}, clear=True):
            assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None, log_level="chatty")

    @pytest.mark.parametrize("field", ["map_width", "map_height", "mine_amount", "match_rounds"])
    def test_must_be_positive(self, field):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None, **{field: 0})

    def test_negative_starting_uranium(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None, starting_uranium=-1)
