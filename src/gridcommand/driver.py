# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""TurnDriver -- the per-entity turn loop.

Architecture
------------
Every entity in a match runs one TurnDriver.  ``run()`` is the entity's
process: a generator that loops forever and yields once per tick.  The
yield hands control back to the host, which resumes the generator on the
next round or closes it when the entity is destroyed.

Each iteration (``take_turn``):
  1. age += 1
  2. dispatch on the entity's kind:
       CONTROLLER -> CommanderBehavior
       ROBOT      -> WorkerBehavior
  3. turn any failure into a TurnResult instead of raising:
       GameActionError  -> ILLEGAL_ACTION
       other Exception  -> UNEXPECTED_ERROR

A failed tick is logged and abandoned.  Nothing is retried within the
tick; the next tick re-reads the world and decides again.

Each driver owns a ``random.Random`` seeded once with a fixed constant, so
a replay with identical inputs makes identical decisions.
"""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from loguru import logger

from .behavior.commander import CommanderBehavior
from .behavior.worker import WorkerBehavior
from .config import get_settings
from .diagnostics import entity_label
from .world.errors import GameActionError
from .world.model import RobotKind, Team

if TYPE_CHECKING:
    from .config import Settings
    from .world.controller import RobotController


class TurnOutcome(Enum):
    OK = "ok"
    ILLEGAL_ACTION = "illegal_action"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True)
class TurnResult:
    """Result of one iteration of an entity's turn loop."""

    turn: int
    kind: RobotKind
    outcome: TurnOutcome
    report: Any = None  # CommanderReport for controllers, None for robots
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is TurnOutcome.OK


class TurnDriver:
    """Runs one entity's turns.  Called by the host once per tick."""

    def __init__(self, rc: RobotController, settings: Settings | None = None) -> None:
        if settings is None:
            settings = get_settings()
        self._rc = rc
        self._kind = rc.get_kind()
        self._team = rc.get_team()
        self._turn_count = 0
        self._label = entity_label(self._kind, rc.get_id(), self._team)
        self._log = logger.bind(entity=self._label)

        self._rng = random.Random(settings.rng_seed)
        if settings.desync_team_a and self._team is Team.A:
            self._rng.random()

        if self._kind is RobotKind.CONTROLLER:
            self._behavior = CommanderBehavior(
                self._rng, radius_squared=settings.sense_radius_squared,
            )
        else:
            self._behavior = WorkerBehavior()

    @property
    def age(self) -> int:
        return self._turn_count

    @property
    def kind(self) -> RobotKind:
        return self._kind

    @property
    def team(self) -> Team:
        return self._team

    def run(self) -> Iterator[TurnResult]:
        """Entity process.  Never returns on its own."""
        self._log.info("I'm a {} and I just got created!", self._kind.value)
        while True:
            yield self.take_turn()

    def take_turn(self) -> TurnResult:
        self._turn_count += 1
        self._log.debug("Age: {}", self._turn_count)
        try:
            with logger.contextualize(entity=self._label):
                report = self._behavior.tick(self._rc)
        except GameActionError as exc:
            self._log.opt(exception=exc).warning(
                "{} illegal action on turn {}: {}", self._kind.value, self._turn_count, exc,
            )
            return TurnResult(self._turn_count, self._kind, TurnOutcome.ILLEGAL_ACTION, error=exc)
        except Exception as exc:
            self._log.opt(exception=exc).error(
                "{} crashed on turn {}: {}", self._kind.value, self._turn_count, exc,
            )
            return TurnResult(self._turn_count, self._kind, TurnOutcome.UNEXPECTED_ERROR, error=exc)
        return TurnResult(self._turn_count, self._kind, TurnOutcome.OK, report=report)
