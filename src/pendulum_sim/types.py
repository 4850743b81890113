# MIT License (see LICENSE)
"""
Core type definitions for the pendulum simulation.

Defines the two data structures the integrator works on:
- PendulumState: kinematic state (angle, angular velocity, elapsed time),
  mutated in place once per tick.
- PendulumParameters: physical constants (length, gravity, damping), fixed
  for the duration of a tick and replaced wholesale between ticks.

The equation of motion is the damped, nonlinear pendulum:
  dθ/dt = ω
  dω/dt = -(g/L)·sin(θ) - c·ω
"""
from __future__ import annotations
from dataclasses import dataclass, replace

from .constants import (
    INITIAL_ANGLE,
    DEFAULT_LENGTH,
    DEFAULT_GRAVITY,
    DEFAULT_DAMPING,
)


@dataclass
class PendulumState:
    """
    Kinematic state of a single planar pendulum.

    Attributes:
        angle: Deviation from vertical in radians. Signed and unbounded,
               so several full turns accumulate rather than wrap.
        angular_velocity: dθ/dt in rad/s.
        elapsed_time: Simulated time in seconds since the last reset.
        angular_acceleration: α computed by the most recent tick, in rad/s².
                              Observable only; the next tick recomputes it
                              from angle and velocity.

    Note:
        A state has exactly one writer. Observers that need the current
        values should take a copy() after a tick has completed.
    """
    angle: float = INITIAL_ANGLE
    angular_velocity: float = 0.0
    elapsed_time: float = 0.0
    angular_acceleration: float = 0.0

    def __post_init__(self) -> None:
        """Store plain floats so numpy scalars never leak into the state."""
        self.angle = float(self.angle)
        self.angular_velocity = float(self.angular_velocity)
        self.elapsed_time = float(self.elapsed_time)
        self.angular_acceleration = float(self.angular_acceleration)

    def copy(self) -> "PendulumState":
        """Return an independent snapshot of this state."""
        return replace(self)


@dataclass(frozen=True)
class PendulumParameters:
    """
    Physical constants of the pendulum.

    Attributes:
        length: Rod length L in meters. Expected > 0; L = 0 gives an
                infinite acceleration rather than an error.
        gravity: Gravitational acceleration g in m/s². Expected >= 0.
        damping: Velocity-proportional loss coefficient c. 0 is undamped.

    No range checking is performed here. Control surfaces clamp their own
    inputs (see controls.py) before handing values over.
    """
    length: float = DEFAULT_LENGTH
    gravity: float = DEFAULT_GRAVITY
    damping: float = DEFAULT_DAMPING

    def replace(self, **changes: float) -> "PendulumParameters":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)
