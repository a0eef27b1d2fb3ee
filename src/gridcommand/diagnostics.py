# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Loguru sink setup.

Entity processes log through ``logger.bind(entity=...)`` so every line says
which robot or controller produced it.  Lines from unbound loggers show
``-`` in that column.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[entity]}</cyan> | {message}"
)


def configure_logging(level: str = "INFO", sink: TextIO | None = None) -> int:
    """Replace loguru's default handler with a single formatted sink.

    Returns the handler id so callers can remove it again.
    """
    logger.remove()
    logger.configure(extra={"entity": "-"})
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=_FORMAT,
        colorize=sink is None,
        backtrace=False,
        diagnose=False,
    )


def entity_label(kind: object, robot_id: int, team: object) -> str:
    """Short tag used as the ``entity`` extra, e.g. ``controller#1/A``."""
    kind_name = getattr(kind, "value", kind)
    team_name = getattr(team, "value", team)
    return f"{kind_name}#{robot_id}/{team_name}"
