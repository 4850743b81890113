# MIT License (see LICENSE)
"""
Default values for the pendulum simulation.

Lengths are in meters, times in seconds and angles in radians. The default
parameters describe a long rod under Earth gravity with light damping.
"""
from __future__ import annotations

import math

# Starting displacement of the bob (45 degrees). Reset returns here.
INITIAL_ANGLE: float = math.pi / 4

# Fixed tick period for the simulation loop (60 ticks per second).
DEFAULT_DT: float = 1.0 / 60.0

DEFAULT_LENGTH: float = 100.0

# Earth gravity. Try 1.62 for the Moon or 24.79 for Jupiter.
DEFAULT_GRAVITY: float = 9.81

# 0.0 is an ideal frictionless pendulum.
DEFAULT_DAMPING: float = 0.1
