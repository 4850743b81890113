# MIT License (see LICENSE)
"""
Batch rollouts of the pendulum integrator.

Runs the same per-tick update the live simulation uses and collects the
result into numpy arrays, for analysis, plotting and benchmarks.
"""
from __future__ import annotations

import numpy as np

from ..types import PendulumState, PendulumParameters
from .integrators import advance


def simulate_trajectory(
    params: PendulumParameters,
    dt: float,
    n_steps: int,
    state: PendulumState | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Integrate n_steps ticks and record every intermediate state.

    Args:
        params: Physical constants, held fixed for the whole rollout.
        dt: Timestep in seconds.
        n_steps: Number of ticks to take.
        state: Starting state. Defaults to the initial state (π/4, at rest).
               The caller's object is copied, never modified.

    Returns:
        Tuple (t, X):
        - t: Elapsed times, shape (n_steps + 1,).
        - X: Rows of (θ, ω), shape (n_steps + 1, 2). Row 0 is the start.
    """
    s = PendulumState() if state is None else state.copy()
    t = np.empty(n_steps + 1, dtype=np.float64)
    X = np.empty((n_steps + 1, 2), dtype=np.float64)

    t[0] = s.elapsed_time
    X[0] = (s.angle, s.angular_velocity)
    for k in range(1, n_steps + 1):
        advance(s, params, dt)
        t[k] = s.elapsed_time
        X[k] = (s.angle, s.angular_velocity)
    return t, X
