# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""WorkerBehavior -- what a robot does on its own turn.

Robots are driven entirely by their controller's orders, so a robot's own
turn is a no-op.  This is the hook for per-unit autonomy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridcommand.world.controller import RobotController


class WorkerBehavior:
    """Robot self-control.  Takes no action."""

    def tick(self, rc: RobotController) -> None:
        return None
