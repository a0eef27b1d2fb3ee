# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""gridcommand — commander decision engine for turn-based grid matches.

The controller entity of each team spends uranium on new robots and orders
every robot it owns to mine, ram an adjacent enemy, or wander.  The world
itself is reached only through the RobotController protocol; GridWorld is
an in-memory host for local matches and tests.
"""

__version__ = "0.1.0"
