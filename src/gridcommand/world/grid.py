# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""GridWorld -- in-memory match host for local play and testing.

Architecture
------------
GridWorld owns all authoritative match state:

  - a ``numpy`` uranium field indexed ``[x, y]``
  - every live entity (controllers and robots) keyed by id
  - a cell -> robot id occupancy map
  - one uranium pool per team

Entities never touch GridWorld directly.  Each one gets a
GridRobotController bound to its id, which implements the RobotController
protocol and applies the rules below on the caller's behalf.

Rules:
  - Controllers sit off the board at their team's spawn corner.  They
    never occupy a cell and never show up in sensing results.
  - A controller may build one robot per round.  The robot's health is
    the uranium spent, and it appears on the spawn cell or the first free
    neighbor in canonical direction order.
  - A robot may act (mine or move) once per round, either on its own or
    when ordered by its team's controller.
  - Moving into a hostile rams it: both lose the smaller of the two
    healths, robots at zero are destroyed, and the mover takes the cell
    if it survives.
  - Ids are never reused.  Queries about a destroyed id raise
    GameActionError(CANT_SENSE_THAT); legality predicates return False.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from loguru import logger

from .errors import GameActionError, GameActionErrorType
from .geometry import DIRECTIONS, Direction, MapLocation
from .model import RobotInfo, RobotKind, Team

if TYPE_CHECKING:
    from gridcommand.config import Settings


@dataclass
class _Entity:
    robot_id: int
    team: Team
    kind: RobotKind
    location: MapLocation
    health: int
    acted_round: int = -1

    def snapshot(self) -> RobotInfo:
        return RobotInfo(
            robot_id=self.robot_id,
            team=self.team,
            kind=self.kind,
            location=self.location,
            health=self.health,
        )


class GridWorld:
    """Authoritative state for one match on a rectangular grid."""

    def __init__(
        self,
        width: int,
        height: int,
        uranium: np.ndarray | None = None,
        starting_uranium: int = 0,
        mine_amount: int = 1,
    ) -> None:
        if uranium is None:
            uranium = np.zeros((width, height), dtype=np.int64)
        if uranium.shape != (width, height):
            raise ValueError(
                f"uranium field shape {uranium.shape} != ({width}, {height})"
            )
        self.width = width
        self.height = height
        self.mine_amount = mine_amount
        self.round_num = 0
        self._uranium = uranium.astype(np.int64, copy=True)
        self._pools: dict[Team, int] = {team: starting_uranium for team in Team}
        self._entities: dict[int, _Entity] = {}
        self._occupancy: dict[MapLocation, int] = {}
        self._next_id = 1

    @classmethod
    def from_settings(cls, settings: Settings) -> GridWorld:
        """Random uranium field seeded by ``settings.map_seed``."""
        rng = np.random.default_rng(settings.map_seed)
        field = rng.integers(
            0, settings.max_tile_uranium + 1,
            size=(settings.map_width, settings.map_height),
        )
        return cls(
            settings.map_width,
            settings.map_height,
            uranium=field,
            starting_uranium=settings.starting_uranium,
            mine_amount=settings.mine_amount,
        )

    # -- Setup / host events ----------------------------------------------

    def spawn_location(self, team: Team) -> MapLocation:
        if team is Team.A:
            return MapLocation(0, 0)
        return MapLocation(self.width - 1, self.height - 1)

    def add_controller(self, team: Team) -> int:
        return self._add(team, RobotKind.CONTROLLER, self.spawn_location(team), 0)

    def add_robot(self, team: Team, location: MapLocation, health: int) -> int:
        if not self.on_the_map(location):
            raise ValueError(f"{location} is off the map")
        if location in self._occupancy:
            raise ValueError(f"{location} is occupied")
        if health <= 0:
            raise ValueError("health must be positive")
        return self._add(team, RobotKind.ROBOT, location, health)

    def destroy(self, robot_id: int) -> None:
        """Remove an entity.  Unknown ids are ignored."""
        entity = self._entities.pop(robot_id, None)
        if entity is None:
            return
        if entity.kind is RobotKind.ROBOT:
            self._occupancy.pop(entity.location, None)
        logger.debug("{} #{} ({}) destroyed", entity.kind.value, robot_id, entity.team.value)

    def begin_round(self) -> int:
        self.round_num += 1
        return self.round_num

    def set_uranium(self, location: MapLocation, amount: int) -> None:
        self._uranium[location.x, location.y] = amount

    def set_team_uranium(self, team: Team, amount: int) -> None:
        if amount < 0:
            raise ValueError("uranium pool cannot be negative")
        self._pools[team] = amount

    def controller_for(self, robot_id: int) -> GridRobotController:
        self._require(robot_id)
        return GridRobotController(self, robot_id)

    # -- Read-only views ----------------------------------------------------

    def is_alive(self, robot_id: int) -> bool:
        return robot_id in self._entities

    def live_ids(self) -> list[int]:
        """Live entity ids in creation order."""
        return sorted(self._entities)

    def robot_info(self, robot_id: int) -> RobotInfo:
        return self._require(robot_id).snapshot()

    def robots(self, team: Team | None = None) -> list[RobotInfo]:
        return [
            e.snapshot() for _, e in sorted(self._entities.items())
            if e.kind is RobotKind.ROBOT and (team is None or e.team is team)
        ]

    def team_uranium(self, team: Team) -> int:
        return self._pools[team]

    def uranium_at(self, location: MapLocation) -> int:
        return int(self._uranium[location.x, location.y])

    def on_the_map(self, location: MapLocation) -> bool:
        return 0 <= location.x < self.width and 0 <= location.y < self.height

    def robot_at(self, location: MapLocation) -> RobotInfo | None:
        rid = self._occupancy.get(location)
        return None if rid is None else self._entities[rid].snapshot()

    # -- Rules (called through GridRobotController) -------------------------

    def can_build_robot(self, actor_id: int, health: int) -> bool:
        actor = self._entities.get(actor_id)
        if actor is None or actor.kind is not RobotKind.CONTROLLER:
            return False
        if actor.acted_round == self.round_num:
            return False
        if health <= 0 or health > self._pools[actor.team]:
            return False
        return self._free_spawn_cell(actor.team) is not None

    def build_robot(self, actor_id: int, health: int) -> int:
        actor = self._require(actor_id)
        if actor.kind is not RobotKind.CONTROLLER:
            raise GameActionError(GameActionErrorType.CANT_DO_THAT, "only controllers build")
        if actor.acted_round == self.round_num:
            raise GameActionError(GameActionErrorType.IS_NOT_READY, "already built this round")
        if health <= 0 or health > self._pools[actor.team]:
            raise GameActionError(
                GameActionErrorType.NOT_ENOUGH_RESOURCE,
                f"need {health}, have {self._pools[actor.team]}",
            )
        cell = self._free_spawn_cell(actor.team)
        if cell is None:
            raise GameActionError(GameActionErrorType.CANT_MOVE_THERE, "spawn area is full")
        self._pools[actor.team] -= health
        actor.acted_round = self.round_num
        return self._add(actor.team, RobotKind.ROBOT, cell, health)

    def can_mine(self, actor_id: int, robot_id: int) -> bool:
        robot = self._commandable(actor_id, robot_id)
        if robot is None:
            return False
        return self.uranium_at(robot.location) > 0

    def mine(self, actor_id: int, robot_id: int) -> int:
        robot = self._require_commandable(actor_id, robot_id)
        available = self.uranium_at(robot.location)
        if available <= 0:
            raise GameActionError(GameActionErrorType.NOT_ENOUGH_RESOURCE, f"no uranium at {robot.location}")
        amount = min(self.mine_amount, available)
        self._uranium[robot.location.x, robot.location.y] -= amount
        self._pools[robot.team] += amount
        robot.acted_round = self.round_num
        return amount

    def can_move(self, actor_id: int, robot_id: int, direction: Direction) -> bool:
        robot = self._commandable(actor_id, robot_id)
        if robot is None:
            return False
        return self._move_blocker(robot, direction) is None

    def move(self, actor_id: int, robot_id: int, direction: Direction) -> None:
        robot = self._require_commandable(actor_id, robot_id)
        blocker = self._move_blocker(robot, direction)
        if blocker is not None:
            raise GameActionError(GameActionErrorType.CANT_MOVE_THERE, blocker)
        robot.acted_round = self.round_num
        dest = robot.location.add(direction)
        occupant_id = self._occupancy.get(dest)
        if occupant_id is not None:
            self._ram(robot, self._entities[occupant_id])
        if self.is_alive(robot.robot_id) and dest not in self._occupancy:
            self._relocate(robot, dest)

    # -- Internals ------------------------------------------------------------

    def _add(self, team: Team, kind: RobotKind, location: MapLocation, health: int) -> int:
        rid = self._next_id
        self._next_id += 1
        self._entities[rid] = _Entity(rid, team, kind, location, health)
        if kind is RobotKind.ROBOT:
            self._occupancy[location] = rid
        return rid

    def _require(self, robot_id: int) -> _Entity:
        entity = self._entities.get(robot_id)
        if entity is None:
            raise GameActionError(GameActionErrorType.CANT_SENSE_THAT, f"no robot with id {robot_id}")
        return entity

    def _commandable(self, actor_id: int, robot_id: int) -> _Entity | None:
        """The robot if *actor_id* may order it to act this round."""
        actor = self._entities.get(actor_id)
        robot = self._entities.get(robot_id)
        if actor is None or robot is None:
            return None
        if robot.kind is not RobotKind.ROBOT or robot.team is not actor.team:
            return None
        if actor_id != robot_id and actor.kind is not RobotKind.CONTROLLER:
            return None
        if robot.acted_round == self.round_num:
            return None
        return robot

    def _require_commandable(self, actor_id: int, robot_id: int) -> _Entity:
        self._require(robot_id)
        robot = self._commandable(actor_id, robot_id)
        if robot is None:
            raise GameActionError(GameActionErrorType.CANT_DO_THAT, f"cannot order robot {robot_id} now")
        return robot

    def _move_blocker(self, robot: _Entity, direction: Direction) -> str | None:
        dest = robot.location.add(direction)
        if not self.on_the_map(dest):
            return f"{dest} is off the map"
        occupant_id = self._occupancy.get(dest)
        if occupant_id is not None and self._entities[occupant_id].team is robot.team:
            return f"{dest} holds a friendly robot"
        return None

    def _ram(self, attacker: _Entity, defender: _Entity) -> None:
        damage = min(attacker.health, defender.health)
        attacker.health -= damage
        defender.health -= damage
        logger.debug(
            "robot #{} rams #{} for {}", attacker.robot_id, defender.robot_id, damage,
        )
        for entity in (defender, attacker):
            if entity.health <= 0:
                self.destroy(entity.robot_id)

    def _relocate(self, robot: _Entity, dest: MapLocation) -> None:
        self._occupancy.pop(robot.location, None)
        robot.location = dest
        self._occupancy[dest] = robot.robot_id

    def _free_spawn_cell(self, team: Team) -> MapLocation | None:
        spawn = self.spawn_location(team)
        for cell in (spawn, *(spawn.add(d) for d in DIRECTIONS)):
            if self.on_the_map(cell) and cell not in self._occupancy:
                return cell
        return None


class GridRobotController:
    """RobotController implementation bound to one GridWorld entity."""

    def __init__(self, world: GridWorld, robot_id: int) -> None:
        self._world = world
        self._id = robot_id

    def get_id(self) -> int:
        return self._id

    def get_kind(self) -> RobotKind:
        return self._world._require(self._id).kind

    def get_team(self, robot_id: int | None = None) -> Team:
        target = self._id if robot_id is None else robot_id
        return self._world._require(target).team

    def get_robot_count(self) -> int:
        return len(self._world.robots(self.get_team()))

    def get_team_uranium(self, team: Team) -> int:
        return self._world.team_uranium(team)

    def can_build_robot(self, health: int) -> bool:
        return self._world.can_build_robot(self._id, health)

    def build_robot(self, health: int) -> None:
        self._world.build_robot(self._id, health)

    def sense_nearby_robots(
        self,
        center: MapLocation,
        radius_squared: int,
        team: Team | None = None,
    ) -> list[RobotInfo]:
        return [
            info for info in self._world.robots(team)
            if radius_squared < 0
            or info.location.distance_squared_to(center) <= radius_squared
        ]

    def get_location(self, robot_id: int) -> MapLocation:
        return self._world._require(robot_id).location

    def get_health(self, robot_id: int) -> int:
        return self._world._require(robot_id).health

    def can_mine(self, robot_id: int) -> bool:
        return self._world.can_mine(self._id, robot_id)

    def mine(self, robot_id: int) -> None:
        self._world.mine(self._id, robot_id)

    def sense_uranium(self, location: MapLocation) -> int:
        self._require_on_map(location)
        return self._world.uranium_at(location)

    def adjacent_location(self, robot_id: int, direction: Direction) -> MapLocation:
        return self._world._require(robot_id).location.add(direction)

    def on_the_map(self, location: MapLocation) -> bool:
        return self._world.on_the_map(location)

    def sense_robot_at_location(self, location: MapLocation) -> RobotInfo | None:
        self._require_on_map(location)
        return self._world.robot_at(location)

    def can_move(self, robot_id: int, direction: Direction) -> bool:
        return self._world.can_move(self._id, robot_id, direction)

    def move(self, robot_id: int, direction: Direction) -> None:
        self._world.move(self._id, robot_id, direction)

    def _require_on_map(self, location: MapLocation) -> None:
        if not self._world.on_the_map(location):
            raise GameActionError(GameActionErrorType.OUT_OF_RANGE, f"{location} is off the map")
