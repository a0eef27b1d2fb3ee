# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""OrderPolicy -- the controller's per-robot action choice.

Each tick the controller enumerates every robot on its team and gives each
one at most one order, using a fixed priority chain:

  1. MINE     if mining at the robot's cell is legal.  Nothing else is
              considered that tick.
  2. ENGAGE   else ram the first adjacent enemy, scanning DIRECTIONS in
              canonical order (N, NE, E, SE, S, SW, W, NW).  First legal
              match wins; no target comparison.
  3. EXPLORE  else draw one random direction and move there if legal.
              An illegal draw means no action; there is no second draw.

Robot ids come from an enumeration and may be destroyed at any point, so
existence is re-checked before each step that reuses the id.  Every
action is issued only right after its ``can_*`` predicate returned True.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

from gridcommand.world.geometry import DIRECTIONS, Direction, MapLocation

from .guard import robot_exists

if TYPE_CHECKING:
    from gridcommand.world.controller import RobotController
    from gridcommand.world.model import Team

# Sensing origin for "all robots on the map" queries.
_ORIGIN = MapLocation(0, 0)


class OrderKind(Enum):
    SKIPPED = "skipped"  # robot vanished before it could be ordered
    MINED = "mined"
    ENGAGED = "engaged"
    MOVED = "moved"
    IDLE = "idle"  # drew an illegal direction


@dataclass(frozen=True)
class Order:
    """What the controller did with one robot this tick."""

    robot_id: int
    kind: OrderKind
    direction: Direction | None = None


class OrderPolicy:
    """Mine > engage > explore, one order per robot per tick."""

    def __init__(self, rng: random.Random, radius_squared: int = -1) -> None:
        self._rng = rng
        self._radius_squared = radius_squared

    def tick(self, rc: RobotController) -> list[Order]:
        """Order every friendly robot in sensing range."""
        team = rc.get_team()
        my_robots = rc.sense_nearby_robots(_ORIGIN, self._radius_squared, team)
        return [self.command(rc, info.robot_id, team) for info in my_robots]

    def command(
        self,
        rc: RobotController,
        robot_id: int,
        team: Team | None = None,
    ) -> Order:
        if team is None:
            team = rc.get_team()

        if not robot_exists(rc, robot_id):
            return Order(robot_id, OrderKind.SKIPPED)

        logger.debug("Controlling robot {}", robot_id)

        if rc.can_mine(robot_id):
            rc.mine(robot_id)
            logger.debug("Robot {} mined", robot_id)
            return Order(robot_id, OrderKind.MINED)

        if not robot_exists(rc, robot_id):
            return Order(robot_id, OrderKind.SKIPPED)

        direction = self._find_enemy(rc, robot_id, team)
        if direction is not None:
            rc.move(robot_id, direction)
            logger.debug("Robot {} rams enemy to the {}", robot_id, direction.name)
            return Order(robot_id, OrderKind.ENGAGED, direction)

        if not robot_exists(rc, robot_id):
            return Order(robot_id, OrderKind.SKIPPED)

        direction = DIRECTIONS[self._rng.randrange(len(DIRECTIONS))]
        logger.debug("Trying to move {}", direction.name)
        if rc.can_move(robot_id, direction):
            rc.move(robot_id, direction)
            return Order(robot_id, OrderKind.MOVED, direction)
        logger.debug("Robot {} can't move {}", robot_id, direction.name)
        return Order(robot_id, OrderKind.IDLE, direction)

    @staticmethod
    def _find_enemy(
        rc: RobotController,
        robot_id: int,
        team: Team,
    ) -> Direction | None:
        """First direction holding an enemy the robot can legally move into."""
        for direction in DIRECTIONS:
            adjacent = rc.adjacent_location(robot_id, direction)
            if not rc.on_the_map(adjacent):
                continue
            enemy = rc.sense_robot_at_location(adjacent)
            if enemy is None or enemy.team is team:
                continue
            if rc.can_move(robot_id, direction):
                return direction
        return None
