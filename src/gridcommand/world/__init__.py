# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""world/ package -- the facade the decision core talks to, plus a local host."""

from .controller import RobotController
from .errors import GameActionError, GameActionErrorType
from .geometry import DIRECTIONS, Direction, MapLocation
from .model import RobotInfo, RobotKind, Team

__all__ = [
    "DIRECTIONS",
    "Direction",
    "GameActionError",
    "GameActionErrorType",
    "MapLocation",
    "RobotController",
    "RobotInfo",
    "RobotKind",
    "Team",
]
