import io

import numpy as np

from pendulum_sim import PendulumSimulation, FixedRateClock, PendulumParameters, PendulumState
from pendulum_sim.renderer import DebugRenderer, NullRenderer, BufferedRenderer, format_readout


def test_format_readout_initial_state():
    readout = format_readout(PendulumState(), PendulumParameters())
    assert readout == {
        "Elapsed Time": "0.00s",
        "Current Angle": "45.0°",
        "Period (T)": "20.06s",
    }


def test_format_readout_infinite_period():
    readout = format_readout(PendulumState(), PendulumParameters(gravity=0.0))
    assert readout["Period (T)"] == "infs"


def test_debug_renderer_output():
    out = io.StringIO()
    sim = PendulumSimulation()
    sim.step()
    DebugRenderer(output=out).render(sim)

    text = out.getvalue()
    assert text.startswith("=== Frame t=0.0167 ===")
    assert "Current Angle: 45.0°" in text
    assert "Period (T): 20.06s" in text
    assert "L=100.00 g=9.81 c=0.10" in text


def test_debug_renderer_terse():
    out = io.StringIO()
    DebugRenderer(output=out, verbose=False).render(PendulumSimulation())
    assert "L=" not in out.getvalue()


def test_null_renderer_does_not_touch_state():
    sim = PendulumSimulation()
    before = sim.snapshot()
    NullRenderer().render(sim)
    assert sim.state == before


def test_buffered_renderer_as_clock_observer():
    sim = PendulumSimulation()
    clock = FixedRateClock(sim, realtime=False)
    recorder = BufferedRenderer()
    clock.add_observer(recorder)
    clock.run(ticks=60)

    t, theta, omega = recorder.as_arrays()
    assert t.shape == theta.shape == omega.shape == (60,)
    assert np.all(np.diff(t) > 0)
    assert theta[-1] == sim.state.angle
    assert omega[-1] == sim.state.angular_velocity

    recorder.clear()
    assert recorder.frames == []


def test_buffered_frames_have_same_keys_on_both_paths():
    """Frames from render() and from the observer call are interchangeable."""
    sim = PendulumSimulation()
    recorder = BufferedRenderer()
    recorder.render(sim)
    sim.step()
    recorder(sim.snapshot())

    rendered, observed = recorder.frames
    assert rendered.keys() == observed.keys()
    assert observed["time"] == sim.time
