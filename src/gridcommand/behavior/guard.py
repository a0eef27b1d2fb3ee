# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Stale-reference guard for robot ids."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from gridcommand.world.controller import RobotController


def robot_exists(rc: RobotController, robot_id: int) -> bool:
    """True if *robot_id* still refers to a live robot.

    Asks the world for the robot's team, which only succeeds for live ids.
    Any failure of that query reads as "gone" and is not propagated.
    """
    try:
        rc.get_team(robot_id)
    except Exception as exc:
        logger.trace("robot #{} no longer exists: {}", robot_id, exc)
        return False
    return True
