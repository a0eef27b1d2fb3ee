# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""MatchRunner -- round-robin host scheduler for a GridWorld match.

Each live entity has one TurnDriver.run() generator.  A round resumes every
process once, in entity creation order.  Robots built during a round get
their process at the start of the next round.  When an entity is
destroyed its process is closed and never resumed again.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

from .config import get_settings
from .driver import TurnDriver, TurnOutcome, TurnResult
from .world.grid import GridWorld
from .world.model import Team

if TYPE_CHECKING:
    from .config import Settings


@dataclass
class TeamSummary:
    """End-of-match totals for one team."""

    team: Team
    robots: int = 0
    total_health: int = 0
    uranium: int = 0
    built: int = 0
    outcomes: Counter = field(default_factory=Counter)
    orders: Counter = field(default_factory=Counter)

    def to_dict(self) -> dict:
        return {
            "team": self.team.value,
            "robots": self.robots,
            "total_health": self.total_health,
            "uranium": self.uranium,
            "built": self.built,
            "outcomes": {k.value: v for k, v in self.outcomes.items()},
            "orders": {k.value: v for k, v in self.orders.items()},
        }


@dataclass
class MatchSummary:
    rounds: int
    teams: dict[Team, TeamSummary]
    winner: Team | None

    def to_dict(self) -> dict:
        return {
            "rounds": self.rounds,
            "winner": self.winner.value if self.winner else None,
            "teams": {t.value: s.to_dict() for t, s in self.teams.items()},
        }


class MatchRunner:
    """Owns the entity processes for one GridWorld and plays rounds."""

    def __init__(self, world: GridWorld, settings: Settings | None = None) -> None:
        self._world = world
        self._settings = settings if settings is not None else get_settings()
        self._processes: dict[int, Iterator[TurnResult]] = {}
        self._drivers: dict[int, TurnDriver] = {}
        self._tally: dict[Team, TeamSummary] = {team: TeamSummary(team) for team in Team}
        self._rounds_played = 0

    @classmethod
    def new_match(cls, settings: Settings | None = None) -> MatchRunner:
        """Fresh world from settings with one controller per team."""
        settings = settings if settings is not None else get_settings()
        world = GridWorld.from_settings(settings)
        for team in Team:
            world.add_controller(team)
        return cls(world, settings)

    @property
    def world(self) -> GridWorld:
        return self._world

    @property
    def rounds_played(self) -> int:
        return self._rounds_played

    def driver(self, robot_id: int) -> TurnDriver | None:
        return self._drivers.get(robot_id)

    def play_round(self) -> list[TurnResult]:
        """Resume every live entity once.  Returns their results in order."""
        self._world.begin_round()
        self._reap()
        self._spawn_processes()
        results: list[TurnResult] = []
        for robot_id in list(self._processes):
            if not self._world.is_alive(robot_id):
                continue
            result = next(self._processes[robot_id])
            self._record(self._drivers[robot_id].team, result)
            results.append(result)
        self._reap()
        self._rounds_played += 1
        return results

    def play(self, rounds: int | None = None) -> MatchSummary:
        rounds = rounds if rounds is not None else self._settings.match_rounds
        for _ in range(rounds):
            self.play_round()
        summary = self.summary()
        logger.info(
            "Match over after {} rounds, winner: {}",
            summary.rounds, summary.winner.value if summary.winner else "tie",
        )
        return summary

    def summary(self) -> MatchSummary:
        for team, tally in self._tally.items():
            robots = self._world.robots(team)
            tally.robots = len(robots)
            tally.total_health = sum(r.health for r in robots)
            tally.uranium = self._world.team_uranium(team)
        return MatchSummary(
            rounds=self._rounds_played,
            teams=dict(self._tally),
            winner=self._winner(),
        )

    def close(self) -> None:
        for process in self._processes.values():
            process.close()
        self._processes.clear()

    # -- Internals -------------------------------------------------------------

    def _spawn_processes(self) -> None:
        for robot_id in self._world.live_ids():
            if robot_id in self._drivers:
                continue
            driver = TurnDriver(self._world.controller_for(robot_id), self._settings)
            self._drivers[robot_id] = driver
            self._processes[robot_id] = driver.run()

    def _reap(self) -> None:
        for robot_id in [rid for rid in self._processes if not self._world.is_alive(rid)]:
            self._processes.pop(robot_id).close()
            self._drivers.pop(robot_id, None)

    def _record(self, team: Team, result: TurnResult) -> None:
        tally = self._tally[team]
        tally.outcomes[result.outcome] += 1
        if result.outcome is not TurnOutcome.OK or result.report is None:
            return
        if result.report.built is not None:
            tally.built += 1
        for order in result.report.orders:
            tally.orders[order.kind] += 1

    def _winner(self) -> Team | None:
        def key(team: Team) -> tuple[int, int, int]:
            t = self._tally[team]
            return (t.robots, t.total_health, t.uranium)

        a, b = key(Team.A), key(Team.B)
        if a == b:
            return None
        return Team.A if a > b else Team.B
