# MIT License (see LICENSE)
"""
Fixed-rate tick driver.

The clock is the only writer of a PendulumSimulation. It turns the
simulation into a producer -> consumer -> observer pipeline:

    1. The clock fires at a fixed cadence (default: the simulation dt).
    2. Pending commands (parameter updates, reset requests) are applied.
    3. The simulation advances one tick.
    4. Observers receive a snapshot of the completed state.

Other threads never touch the simulation directly. They call submit() or
request_reset(), which enqueue a command that the ticking thread applies
between two ticks, so an advance never sees half-written parameters.

Example:
    sim = PendulumSimulation()
    clock = FixedRateClock(sim)
    clock.add_observer(lambda s: print(s.angle))
    clock.run(duration=5.0)
"""
from __future__ import annotations
import logging
import math
import queue
import threading
import time
from dataclasses import dataclass
from typing import Callable

from .simulation import PendulumSimulation
from .types import PendulumState

logger = logging.getLogger(__name__)

PARAMETER_NAMES = ("length", "gravity", "damping")

Observer = Callable[[PendulumState], None]


@dataclass(frozen=True)
class ParameterUpdate:
    """
    Request to change one physical parameter before the next tick.

    Attributes:
        name: One of "length", "gravity", "damping".
        value: New value. Not clamped here.
    """
    name: str
    value: float

    def __post_init__(self) -> None:
        if self.name not in PARAMETER_NAMES:
            raise ValueError(
                f"Unknown parameter '{self.name}', expected one of {PARAMETER_NAMES}"
            )
        object.__setattr__(self, "value", float(self.value))


class _ResetRequest:
    """Queue marker for a reset."""


_RESET = _ResetRequest()


class FixedRateClock:
    """
    Drives a simulation at a fixed tick rate.

    Args:
        simulation: The simulation to advance. The clock becomes its only writer.
        interval: Wall-clock seconds between ticks. Defaults to simulation.dt.
        realtime: If False, ticks run back to back without sleeping
                  (useful for tests and offline rollouts).
        sleep: Sleep function, injectable for testing.
        now: Monotonic time source, injectable for testing.

    Raises:
        ValueError: If interval is not positive and finite.
    """

    def __init__(
        self,
        simulation: PendulumSimulation,
        interval: float | None = None,
        realtime: bool = True,
        sleep: Callable[[float], None] = time.sleep,
        now: Callable[[], float] = time.perf_counter,
    ):
        self.simulation = simulation
        self.interval = float(simulation.dt if interval is None else interval)
        if not (math.isfinite(self.interval) and self.interval > 0):
            raise ValueError(f"Tick interval must be positive and finite, got {self.interval}")
        self.realtime = realtime
        self._sleep = sleep
        self._now = now
        self._commands: queue.SimpleQueue = queue.SimpleQueue()
        self._observers: list[Observer] = []
        self._stop = threading.Event()
        self.ticks = 0

    def add_observer(self, observer: Observer) -> None:
        """Register a callable that receives a state snapshot after every tick."""
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def submit(self, update: ParameterUpdate) -> None:
        """Queue a parameter change. Safe to call from any thread."""
        self._commands.put(update)

    def request_reset(self) -> None:
        """Queue a reset of the kinematic state. Safe to call from any thread."""
        self._commands.put(_RESET)

    def stop(self) -> None:
        """
        Ask run() to return after the current tick.

        A request made while no run() is active makes the next run()
        return immediately.
        """
        self._stop.set()

    def _apply_pending(self) -> None:
        """Apply every queued command, in submission order."""
        sim = self.simulation
        while True:
            try:
                cmd = self._commands.get_nowait()
            except queue.Empty:
                return
            if cmd is _RESET:
                sim.reset()
                logger.debug("Simulation reset at tick %d", self.ticks)
            else:
                setter = getattr(sim, f"set_{cmd.name}")
                setter(cmd.value)
                logger.debug("Set %s=%g at tick %d", cmd.name, cmd.value, self.ticks)

    def tick(self) -> PendulumState:
        """
        Run one tick: apply pending commands, step, notify observers.

        Returns:
            Snapshot of the state after the tick.
        """
        self._apply_pending()
        self.simulation.step()
        self.ticks += 1

        snap = self.simulation.snapshot()
        for observer in list(self._observers):
            observer(snap)
        return snap

    def run(self, ticks: int | None = None, duration: float | None = None) -> int:
        """
        Tick at the fixed cadence until a limit is reached or stop() is called.

        Args:
            ticks: Maximum number of ticks to run.
            duration: Simulated seconds to run, rounded up to whole ticks.
                      math.inf means no limit.

        Returns:
            Number of ticks executed by this call.

        Raises:
            ValueError: If duration is NaN or negative.

        Note:
            With neither limit the loop runs until stop(). A stop() issued
            before run() is entered is honored: run() then returns 0. The
            stop request is cleared when run() returns.

            The wait happens before each tick after the first, never after
            the last one. When a tick overruns its slot the schedule
            restarts from the current time instead of bursting to catch up.
        """
        limit = ticks
        if duration is not None:
            if math.isnan(duration) or duration < 0:
                raise ValueError(f"Duration must be non-negative, got {duration}")
            if math.isfinite(duration):
                n = math.ceil(duration / self.simulation.dt - 1e-9)
                limit = n if limit is None else min(limit, n)

        logger.debug("Clock started (interval=%.4fs, limit=%s)", self.interval, limit)

        count = 0
        deadline = self._now()
        try:
            while not self._stop.is_set():
                if limit is not None and count >= limit:
                    break
                if self.realtime and count > 0:
                    deadline += self.interval
                    delay = deadline - self._now()
                    if delay > 0:
                        self._sleep(delay)
                    else:
                        logger.debug("Tick %d overran by %.2f ms", self.ticks, -1e3 * delay)
                        deadline = self._now()
                self.tick()
                count += 1
        finally:
            self._stop.clear()

        logger.debug("Clock stopped after %d ticks", count)
        return count
