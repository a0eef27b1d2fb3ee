# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""behavior/ package -- per-role decision logic.

Re-exports the two role behaviors and the policies they are built from.
"""

from .commander import CommanderBehavior, CommanderReport
from .guard import robot_exists
from .orders import Order, OrderKind, OrderPolicy
from .production import ProductionPolicy
from .worker import WorkerBehavior

__all__ = [
    "CommanderBehavior",
    "CommanderReport",
    "Order",
    "OrderKind",
    "OrderPolicy",
    "ProductionPolicy",
    "WorkerBehavior",
    "robot_exists",
]
