# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""ProductionPolicy -- turn the whole uranium pool into one robot.

Greedy and all-or-nothing: every tick the controller tries to build a
single robot whose health equals the entire pool.  Nothing is held back
for a bigger unit later, and at most one robot is built per tick.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from gridcommand.world.controller import RobotController


class ProductionPolicy:
    """Controller-only build decision.  Stateless."""

    def tick(self, rc: RobotController) -> int | None:
        """Build one robot from the full pool if legal.

        Returns the health of the robot built, or None if nothing was built.
        """
        pool = rc.get_team_uranium(rc.get_team())
        if pool <= 0:
            return None
        if not rc.can_build_robot(pool):
            return None
        rc.build_robot(pool)
        logger.info("Built new robot of health {}", pool)
        return pool
