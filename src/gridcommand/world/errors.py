# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Errors raised by the world facade."""

from __future__ import annotations

from enum import Enum


class GameActionErrorType(Enum):
    CANT_DO_THAT = "cant_do_that"
    CANT_SENSE_THAT = "cant_sense_that"
    CANT_MOVE_THERE = "cant_move_there"
    NOT_ENOUGH_RESOURCE = "not_enough_resource"
    OUT_OF_RANGE = "out_of_range"
    IS_NOT_READY = "is_not_ready"
    NO_ROBOT_THERE = "no_robot_there"


class GameActionError(Exception):
    """The world rejected a query or action as currently illegal."""

    def __init__(self, error_type: GameActionErrorType, message: str = ""):
        self.error_type = error_type
        super().__init__(
            f"{error_type.value}{f': {message}' if message else ''}"
        )
