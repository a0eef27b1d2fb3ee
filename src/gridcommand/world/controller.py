# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""RobotController — the world facade handed to each entity.

This is the contract between the host simulation and the decision core.
GridWorld implements it for local matches; a remote host would implement
the same interface.  Action methods raise GameActionError when the action
is illegal; every ``can_*`` predicate reports legality without raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .geometry import Direction, MapLocation
    from .model import RobotInfo, RobotKind, Team


@runtime_checkable
class RobotController(Protocol):
    """Interface every host must provide to an entity."""

    def get_id(self) -> int:
        """Id of the entity this controller is bound to."""
        ...

    def get_kind(self) -> RobotKind:
        ...

    def get_team(self, robot_id: int | None = None) -> Team:
        """Own team, or the team of *robot_id*.

        Raises GameActionError if *robot_id* does not refer to a live robot.
        """
        ...

    def get_robot_count(self) -> int:
        """Number of live robots on this entity's team."""
        ...

    def get_team_uranium(self, team: Team) -> int:
        ...

    def can_build_robot(self, health: int) -> bool:
        ...

    def build_robot(self, health: int) -> None:
        ...

    def sense_nearby_robots(
        self,
        center: MapLocation,
        radius_squared: int,
        team: Team | None = None,
    ) -> list[RobotInfo]:
        """Live robots within *radius_squared* of *center*.

        A negative radius means unbounded.  *team* filters by affiliation.
        """
        ...

    def get_location(self, robot_id: int) -> MapLocation:
        ...

    def get_health(self, robot_id: int) -> int:
        ...

    def can_mine(self, robot_id: int) -> bool:
        ...

    def mine(self, robot_id: int) -> None:
        ...

    def sense_uranium(self, location: MapLocation) -> int:
        ...

    def adjacent_location(self, robot_id: int, direction: Direction) -> MapLocation:
        ...

    def on_the_map(self, location: MapLocation) -> bool:
        ...

    def sense_robot_at_location(self, location: MapLocation) -> RobotInfo | None:
        ...

    def can_move(self, robot_id: int, direction: Direction) -> bool:
        ...

    def move(self, robot_id: int, direction: Direction) -> None:
        ...
