import math

import pytest

from pendulum_sim.core.invariants import period, angle_in_degrees
from pendulum_sim.types import PendulumState, PendulumParameters


def test_period_small_angle_formula():
    """T = 2π·sqrt(L/g), about 20.06 s for L=100, g=9.81."""
    T = period(PendulumParameters(length=100.0, gravity=9.81))
    assert T == pytest.approx(2 * math.pi * math.sqrt(100 / 9.81), rel=1e-6)
    assert T == pytest.approx(20.06, abs=0.01)


def test_period_ignores_damping():
    a = period(PendulumParameters(length=50.0, gravity=3.0, damping=0.0))
    b = period(PendulumParameters(length=50.0, gravity=3.0, damping=0.9))
    assert a == b


@pytest.mark.parametrize("length", [100.0, 0.0, 1e-9, 200.0])
def test_period_infinite_without_gravity(length):
    assert period(PendulumParameters(length=length, gravity=0.0)) == math.inf


def test_period_infinite_for_negative_gravity():
    assert period(PendulumParameters(gravity=-9.81)) == math.inf


def test_period_negative_length_is_nan():
    """Nonsensical length gives NaN rather than an exception."""
    assert math.isnan(period(PendulumParameters(length=-1.0, gravity=9.81)))


def test_angle_in_degrees():
    assert angle_in_degrees(PendulumState()) == pytest.approx(45.0)
    assert angle_in_degrees(PendulumState(angle=-math.pi)) == pytest.approx(-180.0)
    assert angle_in_degrees(PendulumState(angle=4 * math.pi)) == pytest.approx(720.0)
