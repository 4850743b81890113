# MIT License (see LICENSE)
"""
Numerical integrator for the damped pendulum.

The state is advanced with semi-implicit (symplectic) Euler:
    α  = -(g/L)·sin(θ) - c·ω
    ω' = ω + α·dt
    θ' = θ + ω'·dt
    t' = t + dt

Velocity is updated before the angle, and the angle update uses the new
velocity. This ordering keeps the undamped energy bounded over long runs,
where explicit Euler would let it grow without limit.

The restoring term uses the full sin(θ), not the small-angle θ.

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

import numpy as np

from ..constants import INITIAL_ANGLE
from ..types import PendulumState, PendulumParameters


def angular_acceleration(state: PendulumState, params: PendulumParameters) -> float:
    """
    Evaluate α = -(g/L)·sin(θ) - c·ω for the given state.

    Division by a zero length follows IEEE-754 (±inf or NaN) instead of
    raising ZeroDivisionError.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        restoring = -np.divide(np.float64(params.gravity), np.float64(params.length))
        alpha = restoring * np.sin(state.angle) - params.damping * state.angular_velocity
    return float(alpha)


def advance(state: PendulumState, params: PendulumParameters, dt: float) -> PendulumState:
    """
    Advance the pendulum by one tick of length dt (modified in-place).

    Angle and velocity are both derived from the values held before the
    call; there is no point at which one has been updated and the other
    has not been computed yet.

    Args:
        state: Pendulum state to integrate (modified in-place).
        params: Physical constants for this tick.
        dt: Timestep in seconds. Must be positive.

    Returns:
        The same state object, for chaining.
    """
    alpha = angular_acceleration(state, params)
    omega = state.angular_velocity + alpha * dt
    theta = state.angle + omega * dt

    state.angular_acceleration = alpha
    state.angular_velocity = omega
    state.angle = theta
    state.elapsed_time += dt
    return state


def advanced(state: PendulumState, params: PendulumParameters, dt: float) -> PendulumState:
    """Functional form of advance(): return a new state, leave the input alone."""
    return advance(state.copy(), params, dt)


def reset_state(state: PendulumState) -> PendulumState:
    """
    Restore the initial kinematic state (θ = π/4, at rest, t = 0).

    Only the state is touched. Length, gravity and damping live in
    PendulumParameters and survive a reset.
    """
    state.angle = INITIAL_ANGLE
    state.angular_velocity = 0.0
    state.angular_acceleration = 0.0
    state.elapsed_time = 0.0
    return state
