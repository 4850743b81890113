# MIT License (see LICENSE)
"""
Renderer adapters for pendulum visualization.

This module provides an abstract base class for observers that present
the simulation, plus text, no-op and recording implementations. The
simulation has no rendering dependency; renderers only read state.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import math
import sys

import numpy as np

from ..types import PendulumState, PendulumParameters
from ..core.invariants import period, angle_in_degrees

if TYPE_CHECKING:
    from ..simulation import PendulumSimulation


def format_readout(state: PendulumState, params: PendulumParameters) -> dict[str, str]:
    """
    Text for the information header of a pendulum display.

    Returns:
        Dict with keys 'Elapsed Time', 'Current Angle' and 'Period (T)',
        e.g. {'Elapsed Time': '1.50s', 'Current Angle': '45.0°',
        'Period (T)': '20.06s'}. An infinite period reads 'infs'.
    """
    return {
        "Elapsed Time": f"{state.elapsed_time:.2f}s",
        "Current Angle": f"{angle_in_degrees(state):.1f}°",
        "Period (T)": f"{period(params):.2f}s",
    }


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses map the pendulum angle to whatever their backend draws
    (a rotation transform, a line, text). They must not modify the state.

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(sim.time)
        renderer.draw_pendulum(sim.state, sim.params)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame for rendering.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_pendulum(self, state: PendulumState, params: PendulumParameters) -> None:
        """Draw the pendulum in the given state."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render(self, simulation: "PendulumSimulation") -> None:
        """Render the current state of a simulation as one frame."""
        self.begin_frame(simulation.time)
        self.draw_pendulum(simulation.state, simulation.params)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and headless runs.

    Example output:
        === Frame t=0.0167 ===
        Elapsed Time: 0.02s  Current Angle: 45.0°  Period (T): 20.06s
        L=100.00 g=9.81 c=0.10 ω=-0.0012 α=-0.0694
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include parameters and velocity/acceleration.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_pendulum(self, state: PendulumState, params: PendulumParameters) -> None:
        readout = format_readout(state, params)
        self.output.write("  ".join(f"{k}: {v}" for k, v in readout.items()) + "\n")
        if self.verbose:
            self.output.write(
                f"L={params.length:.2f} g={params.gravity:.2f} c={params.damping:.2f} "
                f"ω={state.angular_velocity:.4f} α={state.angular_acceleration:.4f}\n"
            )

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks and as a placeholder."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_pendulum(self, state: PendulumState, params: PendulumParameters) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records one entry per frame.

    Also usable directly as a clock observer: calling the instance with a
    state snapshot records a frame for it.

    Example:
        renderer = BufferedRenderer()
        clock.add_observer(renderer)
        clock.run(ticks=600)
        t, theta, omega = renderer.as_arrays()
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time}

    def draw_pendulum(self, state: PendulumState, params: PendulumParameters | None = None) -> None:
        if self._current_frame is None:
            return
        # Kinematic state only, so frames from render() and from the
        # observer path carry the same keys.
        self._current_frame.update(
            angle=state.angle,
            angular_velocity=state.angular_velocity,
            angular_acceleration=state.angular_acceleration,
        )

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def __call__(self, state: PendulumState) -> None:
        self.begin_frame(state.elapsed_time)
        self.draw_pendulum(state)
        self.end_frame()

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Recorded frames as numpy arrays.

        Returns:
            Tuple (t, theta, omega), each of shape (n_frames,).
        """
        t = np.array([f["time"] for f in self.frames], dtype=np.float64)
        theta = np.array([f.get("angle", math.nan) for f in self.frames], dtype=np.float64)
        omega = np.array([f.get("angular_velocity", math.nan) for f in self.frames], dtype=np.float64)
        return t, theta, omega

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
