import math

import numpy as np

from pendulum_sim.core.integrators import advance
from pendulum_sim.core.invariants import mechanical_energy
from pendulum_sim.types import PendulumState, PendulumParameters


def test_undamped_energy_bounded():
    """
    With no damping, E = ½L²ω² + gL(1 - cos θ) should stay near E0.
    Symplectic Euler oscillates around the true energy but does not drift
    over 10,000 ticks at dt=1/60.
    """
    params = PendulumParameters(length=100.0, gravity=9.81, damping=0.0)
    state = PendulumState()
    e0 = mechanical_energy(state, params)

    energies = np.empty(10_000)
    for k in range(10_000):
        advance(state, params, 1 / 60)
        energies[k] = mechanical_energy(state, params)

    rel = np.abs(energies - e0) / e0
    print("max relative energy error", rel.max())
    assert rel.max() < 0.02
    # No secular growth: last stretch is no worse than the first
    assert rel[-2000:].max() < 2 * rel[:2000].max() + 1e-6


def test_damped_motion_decays():
    """damping=0.1: after 100,000 ticks at dt=1/60 the pendulum is at rest."""
    params = PendulumParameters(length=100.0, gravity=9.81, damping=0.1)
    state = PendulumState()
    for _ in range(100_000):
        advance(state, params, 1 / 60)

    assert abs(state.angle) < 0.01
    assert abs(state.angular_velocity) < 0.01


def test_damping_removes_energy():
    params = PendulumParameters(length=1.0, gravity=9.81, damping=0.3)
    state = PendulumState()
    e_prev = mechanical_energy(state, params)
    for _ in range(10):
        for _ in range(60):
            advance(state, params, 1 / 60)
        e = mechanical_energy(state, params)
        assert e < e_prev
        e_prev = e


def test_energy_at_rest_is_zero():
    state = PendulumState(angle=0.0, angular_velocity=0.0)
    assert mechanical_energy(state, PendulumParameters()) == 0.0

    state = PendulumState(angle=math.pi, angular_velocity=0.0)
    params = PendulumParameters(length=2.0, gravity=10.0)
    assert mechanical_energy(state, params) == 40.0
