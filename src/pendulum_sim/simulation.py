# MIT License (see LICENSE)
"""
The pendulum simulation container.

PendulumSimulation owns one PendulumState and the current
PendulumParameters, and exposes:
- step(): one fixed-size tick of the integrator.
- reset(): return to the initial kinematic state.
- set_length / set_gravity / set_damping: replace parameters between ticks.
- Derived read-only values (period, angle in degrees, energy) for display.

Structure:
    - User creates a PendulumSimulation.
    - A driver (see clock.py) calls step() at a fixed cadence.
    - Observers read snapshot() after each completed step.

The simulation knows nothing about rendering or input handling.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field

from .constants import DEFAULT_DT
from .types import PendulumState, PendulumParameters
from .profiler import Profiler
from .core.integrators import advance, reset_state
from .core.invariants import period, angle_in_degrees, mechanical_energy


def _check_dt(dt: float) -> float:
    """Timesteps must move time forward by a finite amount."""
    dt = float(dt)
    if not (math.isfinite(dt) and dt > 0):
        raise ValueError(f"Timestep must be positive and finite, got {dt}")
    return dt


@dataclass
class PendulumSimulation:
    """
    Single damped pendulum driven by fixed ticks.

    Attributes:
        params: Physical constants (length, gravity, damping).
        dt: Tick length in seconds (default: 1/60).
        profiler: Optional Profiler instance for timing statistics.
        state: Kinematic state, mutated in place by step().

    Raises:
        ValueError: If dt is not a positive, finite number.
    """
    params: PendulumParameters = field(default_factory=PendulumParameters)
    dt: float = DEFAULT_DT
    profiler: Profiler | None = None
    state: PendulumState = field(default_factory=PendulumState)

    def __post_init__(self) -> None:
        self.dt = _check_dt(self.dt)

    def step(self, dt: float | None = None) -> PendulumState:
        """
        Advance the simulation by one tick.

        Args:
            dt: Override for this tick only. Defaults to self.dt.

        Returns:
            The (mutated) simulation state.

        Raises:
            ValueError: If the override is not a positive, finite number.
        """
        dt = self.dt if dt is None else _check_dt(dt)
        if self.profiler:
            with self.profiler.section("integrate"):
                advance(self.state, self.params, dt)
        else:
            advance(self.state, self.params, dt)
        return self.state

    def reset(self) -> None:
        """Restore angle, velocity and time. Parameters are kept."""
        reset_state(self.state)

    def set_length(self, length: float) -> None:
        self.params = self.params.replace(length=float(length))

    def set_gravity(self, gravity: float) -> None:
        self.params = self.params.replace(gravity=float(gravity))

    def set_damping(self, damping: float) -> None:
        self.params = self.params.replace(damping=float(damping))

    def snapshot(self) -> PendulumState:
        """Copy of the current state, safe to hand to observers."""
        return self.state.copy()

    @property
    def time(self) -> float:
        """Elapsed simulated time in seconds."""
        return self.state.elapsed_time

    @property
    def period(self) -> float:
        """Small-angle period 2π·sqrt(L/g); +inf when g <= 0."""
        return period(self.params)

    @property
    def angle_degrees(self) -> float:
        return angle_in_degrees(self.state)

    @property
    def energy(self) -> float:
        """Mechanical energy per unit mass (see core.invariants)."""
        return mechanical_energy(self.state, self.params)
