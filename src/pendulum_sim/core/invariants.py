# MIT License (see LICENSE)
"""
Derived quantities of the pendulum.

These are pure functions of the current state and parameters, read on
demand by display code and used by tests to check integrator behavior.
In an undamped run the mechanical energy should stay near its starting
value (within integration error); with damping it should decay.
"""
from __future__ import annotations
import math

import numpy as np

from ..types import PendulumState, PendulumParameters


def period(params: PendulumParameters) -> float:
    """
    Small-angle period of the pendulum.

    T = 2π·sqrt(L/g)

    The formula ignores amplitude, so it is only an estimate for the
    nonlinear motion that is actually simulated.

    Returns:
        Period in seconds. Exactly +inf when g <= 0, since g = 0 would
        otherwise give 0/0.
    """
    if params.gravity <= 0:
        return math.inf
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(2.0 * np.pi * np.sqrt(np.float64(params.length) / params.gravity))


def angle_in_degrees(state: PendulumState) -> float:
    """Current angle converted from radians to degrees."""
    return state.angle * 180.0 / math.pi


def mechanical_energy(state: PendulumState, params: PendulumParameters) -> float:
    """
    Total mechanical energy per unit bob mass.

    E = ½·L²·ω² + g·L·(1 - cos θ)

    The zero of potential energy is the bob hanging straight down.

    Returns:
        Energy in J/kg.
    """
    L = params.length
    omega = state.angular_velocity
    kinetic = 0.5 * L * L * omega * omega
    with np.errstate(invalid="ignore"):
        potential = params.gravity * L * (1.0 - float(np.cos(state.angle)))
    return kinetic + potential
