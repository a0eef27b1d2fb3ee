# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Unit tests for Direction, DIRECTIONS and MapLocation."""

from __future__ import annotations

import pytest

from gridcommand.world.geometry import DIRECTIONS, Direction, MapLocation

pytestmark = pytest.mark.unit


class TestDirections:
    def test_canonical_order(self):
        assert [d.name for d in DIRECTIONS] == [
            "NORTH", "NORTHEAST", "EAST", "SOUTHEAST",
            "SOUTH", "SOUTHWEST", "WEST", "NORTHWEST",
        ]

    def test_all_eight_distinct(self):
        assert len(set(DIRECTIONS)) == 8
        assert set(DIRECTIONS) == set(Direction)

    def test_offsets_are_unit_steps(self):
        for d in DIRECTIONS:
            assert (d.dx, d.dy) != (0, 0)
            assert max(abs(d.dx), abs(d.dy)) == 1

    def test_north_is_plus_y(self):
        assert (Direction.NORTH.dx, Direction.NORTH.dy) == (0, 1)
        assert (Direction.EAST.dx, Direction.EAST.dy) == (1, 0)


class TestMapLocation:
    def test_add(self):
        assert MapLocation(3, 3).add(Direction.NORTHEAST) == MapLocation(4, 4)
        assert MapLocation(0, 0).add(Direction.WEST) == MapLocation(-1, 0)

    def test_hashable_and_frozen(self):
        loc = MapLocation(1, 2)
        assert {loc: "x"}[MapLocation(1, 2)] == "x"
        with pytest.raises(AttributeError):
            loc.x = 5

    def test_distance_squared(self):
        assert MapLocation(0, 0).distance_squared_to(MapLocation(3, 4)) == 25

    def test_str(self):
        assert str(MapLocation(2, -1)) == "(2, -1)"
