"""
Headless pendulum clock: 60 Hz ticks, text readout twice per second,
a parameter change and a reset from a second thread.
Run:
  python examples/pendulum_clock.py
"""
import logging
import threading

from pendulum_sim import PendulumSimulation, FixedRateClock
from pendulum_sim.controls import clamped_update
from pendulum_sim.renderer import DebugRenderer

logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(message)s")

sim = PendulumSimulation()
clock = FixedRateClock(sim)
renderer = DebugRenderer(verbose=False)

def show(state):
    if clock.ticks % 30 == 0:
        renderer.begin_frame(state.elapsed_time)
        renderer.draw_pendulum(state, sim.params)
        renderer.end_frame()

clock.add_observer(show)

# Simulated control panel: move to Jupiter gravity, then press reset.
threading.Timer(2.0, lambda: clock.submit(clamped_update("gravity", 24.79))).start()
threading.Timer(4.0, clock.request_reset).start()

clock.run(duration=6.0)
