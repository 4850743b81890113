# MIT License (see LICENSE)
"""
Core pendulum physics.

This subpackage provides:
    - Integrator: semi-implicit Euler step, state reset.
    - Invariants: period, angle in degrees, mechanical energy.
    - Trajectory: numpy rollouts of many ticks.

Typical usage:
    from pendulum_sim.core import advance, period

    advance(state, params, dt=1/60)
    print(period(params))
"""
from .integrators import angular_acceleration, advance, advanced, reset_state
from .invariants import period, angle_in_degrees, mechanical_energy
from .trajectory import simulate_trajectory

__all__ = [
    # Integrator
    "angular_acceleration",
    "advance",
    "advanced",
    "reset_state",
    # Invariants
    "period",
    "angle_in_degrees",
    "mechanical_energy",
    # Rollouts
    "simulate_trajectory",
]
