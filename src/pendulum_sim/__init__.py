# MIT License (see LICENSE)
"""
pendulum_sim - A damped planar pendulum simulation.

This package advances a single pendulum with a semi-implicit Euler
integrator and exposes the derived values a display needs.

Main entry points:
    - PendulumSimulation: State, parameters and the per-tick step.
    - PendulumState, PendulumParameters: The data the integrator works on.
    - FixedRateClock: Fixed-cadence driver with thread-safe parameter updates.

Submodules:
    - core: Integrator, period/energy helpers, numpy rollouts.
    - controls: Allowed parameter ranges for interactive controls.
    - renderer: Optional visualization adapters.

Example:
    from pendulum_sim import PendulumSimulation

    sim = PendulumSimulation()
    sim.step()
    print(sim.angle_degrees, sim.period)
"""
from .simulation import PendulumSimulation
from .types import PendulumState, PendulumParameters
from .clock import FixedRateClock, ParameterUpdate

__all__ = [
    # Core simulation
    "PendulumSimulation",
    "PendulumState",
    "PendulumParameters",
    # Driving
    "FixedRateClock",
    "ParameterUpdate",
]
