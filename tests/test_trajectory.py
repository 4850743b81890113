import math

import numpy as np
import pytest

from pendulum_sim import PendulumSimulation, PendulumParameters, PendulumState
from pendulum_sim.constants import INITIAL_ANGLE
from pendulum_sim.core import simulate_trajectory, period


def test_trajectory_matches_live_simulation():
    """A rollout and a stepped simulation produce identical states."""
    params = PendulumParameters(length=1.0, gravity=9.81, damping=0.05)
    t, X = simulate_trajectory(params, 1 / 60, 300)

    sim = PendulumSimulation(params=params)
    for _ in range(300):
        sim.step()

    assert t.shape == (301,)
    assert X.shape == (301, 2)
    assert X[0, 0] == INITIAL_ANGLE
    assert t[0] == 0.0
    assert X[-1, 0] == sim.state.angle
    assert X[-1, 1] == sim.state.angular_velocity
    assert t[-1] == sim.time


def test_start_state_is_not_modified():
    start = PendulumState(angle=0.2, angular_velocity=0.0)
    simulate_trajectory(PendulumParameters(), 1 / 60, 10, state=start)
    assert start == PendulumState(angle=0.2, angular_velocity=0.0)


def test_small_angle_period():
    """
    Small-angle analytic pendulum:
      θ(t) = θ0 cos( sqrt(g/L) t )
    Zero crossings of θ should be half a period apart.
    """
    params = PendulumParameters(length=1.0, gravity=9.81, damping=0.0)
    dt = 1 / 600
    t, X = simulate_trajectory(params, dt, 6000, state=PendulumState(angle=0.05))

    theta = X[:, 0]
    crossings = t[1:][np.sign(theta[1:]) != np.sign(theta[:-1])]
    half_periods = np.diff(crossings)
    T_sim = 2 * half_periods.mean()
    print("period", T_sim, "expected", period(params))
    assert T_sim == pytest.approx(period(params), rel=0.01)


def test_large_amplitude_longer_than_small_angle_estimate():
    """The nonlinear pendulum swings slower than 2π·sqrt(L/g) at 90°."""
    params = PendulumParameters(length=1.0, gravity=9.81, damping=0.0)
    t, X = simulate_trajectory(params, 1 / 600, 6000, state=PendulumState(angle=math.pi / 2))

    theta = X[:, 0]
    crossings = t[1:][np.sign(theta[1:]) != np.sign(theta[:-1])]
    T_sim = 2 * np.diff(crossings).mean()
    # Exact ratio at 90° is about 1.18
    assert T_sim / period(params) == pytest.approx(1.18, abs=0.02)
