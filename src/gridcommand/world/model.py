# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Team, role and robot snapshot types shared by the host and the core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .geometry import MapLocation


class Team(Enum):
    A = "A"
    B = "B"


class RobotKind(Enum):
    """The two entity roles.  CONTROLLER commands, ROBOT works."""

    ROBOT = "robot"
    CONTROLLER = "controller"


@dataclass(frozen=True)
class RobotInfo:
    """Point-in-time view of a robot returned by sensing calls.

    The snapshot is not kept in sync with the world.  Only ``robot_id`` is
    safe to hold on to, and even that may stop resolving at any time.
    """

    robot_id: int
    team: Team
    kind: RobotKind
    location: MapLocation
    health: int
