# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""CommanderBehavior -- a controller's whole turn.

Production first, then one order per owned robot.  Building first means a
robot spawned this tick is already visible to the enumeration and gets
its first order immediately.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

from .orders import Order, OrderKind, OrderPolicy
from .production import ProductionPolicy

if TYPE_CHECKING:
    from gridcommand.world.controller import RobotController


@dataclass
class CommanderReport:
    """Outcome of one controller tick."""

    built: int | None = None  # health of the robot built, if any
    orders: list[Order] = field(default_factory=list)

    def count(self, kind: OrderKind) -> int:
        return sum(1 for o in self.orders if o.kind is kind)


class CommanderBehavior:
    """Controller role: build from the pool, then order every robot."""

    def __init__(self, rng: random.Random, radius_squared: int = -1) -> None:
        self._production = ProductionPolicy()
        self._orders = OrderPolicy(rng, radius_squared=radius_squared)

    def tick(self, rc: RobotController) -> CommanderReport:
        team = rc.get_team()
        logger.opt(lazy=True).debug(
            "Controller has {} robot(s) and {} uranium",
            rc.get_robot_count, lambda: rc.get_team_uranium(team),
        )
        report = CommanderReport()
        report.built = self._production.tick(rc)
        report.orders = self._orders.tick(rc)
        return report
