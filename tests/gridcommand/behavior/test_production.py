# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Tests for ProductionPolicy — whole-pool, one-build-per-tick production."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from gridcommand.behavior.production import ProductionPolicy
from gridcommand.world.controller import RobotController
from gridcommand.world.grid import GridWorld
from gridcommand.world.model import Team

pytestmark = pytest.mark.unit


def _rc(pool: int, can_build: bool = True):
    rc = MagicMock(spec=RobotController)
    rc.get_team.return_value = Team.A
    rc.get_team_uranium.return_value = pool
    rc.can_build_robot.return_value = can_build
    return rc


class TestProductionPolicy:
    @pytest.mark.parametrize("pool", [0, -1, -50])
    def test_no_build_without_positive_pool(self, pool):
        rc = _rc(pool)
        assert ProductionPolicy().tick(rc) is None
        rc.can_build_robot.assert_not_called()
        rc.build_robot.assert_not_called()

    @pytest.mark.parametrize("pool", [1, 10, 999])
    def test_builds_exactly_one_of_full_pool(self, pool):
        rc = _rc(pool)
        assert ProductionPolicy().tick(rc) == pool
        rc.can_build_robot.assert_called_once_with(pool)
        rc.build_robot.assert_called_once_with(pool)

    def test_illegal_build_is_skipped(self):
        rc = _rc(10, can_build=False)
        assert ProductionPolicy().tick(rc) is None
        rc.build_robot.assert_not_called()

    def test_reads_own_team_pool(self):
        rc = _rc(4)
        rc.get_team.return_value = Team.B
        ProductionPolicy().tick(rc)
        rc.get_team_uranium.assert_called_once_with(Team.B)

    def test_pool_is_spent_in_world(self):
        w = GridWorld(5, 5, starting_uranium=10)
        w.begin_round()
        rc = w.controller_for(w.add_controller(Team.A))
        assert ProductionPolicy().tick(rc) == 10
        assert w.team_uranium(Team.A) == 0
        assert [r.health for r in w.robots(Team.A)] == [10]
        # Nothing left: next tick builds nothing.
        w.begin_round()
        assert ProductionPolicy().tick(rc) is None
