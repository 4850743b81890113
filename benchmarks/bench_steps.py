"""
Microbenchmark: time per tick, bare simulation vs clock with observers.
Run:
  python benchmarks/bench_steps.py
"""
import time

from pendulum_sim import PendulumSimulation, FixedRateClock
from pendulum_sim.profiler import Profiler
from pendulum_sim.renderer import BufferedRenderer, NullRenderer
from pendulum_sim.core import simulate_trajectory

def run_simulation(steps: int = 100_000):
    prof = Profiler()
    sim = PendulumSimulation(profiler=prof)

    # warmup
    for _ in range(100):
        sim.step()

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step()
    t1 = time.perf_counter()
    return (t1 - t0) / steps, prof.stats.summary()

def run_clock(observer, steps: int = 100_000):
    clock = FixedRateClock(PendulumSimulation(), realtime=False)
    clock.add_observer(observer)
    t0 = time.perf_counter()
    clock.run(ticks=steps)
    t1 = time.perf_counter()
    return (t1 - t0) / steps

def run_rollout(steps: int = 100_000):
    sim = PendulumSimulation()
    t0 = time.perf_counter()
    simulate_trajectory(sim.params, sim.dt, steps)
    t1 = time.perf_counter()
    return (t1 - t0) / steps

if __name__ == "__main__":
    per_step, summary = run_simulation()
    print(f"simulation.step   {1e6*per_step:8.3f} us  steps/s={1/per_step:10.1f}")
    print("  integrate", summary["integrate"])

    null = NullRenderer()
    per_step = run_clock(lambda s: null.draw_pendulum(s, None))
    print(f"clock+null        {1e6*per_step:8.3f} us  steps/s={1/per_step:10.1f}")

    per_step = run_clock(BufferedRenderer())
    print(f"clock+buffered    {1e6*per_step:8.3f} us  steps/s={1/per_step:10.1f}")

    per_step = run_rollout()
    print(f"trajectory        {1e6*per_step:8.3f} us  steps/s={1/per_step:10.1f}")
