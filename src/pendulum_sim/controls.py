# MIT License (see LICENSE)
"""
Control-surface ranges for the pendulum parameters.

The integrator accepts any finite value. Interactive controls (sliders,
knobs, command lines) keep users inside a sensible range; this module is
where that range lives, so every control layer clamps the same way.

Example:
    clock.submit(clamped_update("length", 500.0))   # becomes 200.0
"""
from __future__ import annotations
from dataclasses import dataclass

from .clock import ParameterUpdate


@dataclass(frozen=True)
class ParameterRange:
    """
    Closed interval a control allows for one parameter.

    Attributes:
        name: Parameter name ("length", "gravity" or "damping").
        low: Smallest allowed value.
        high: Largest allowed value.
        unit: Display unit, empty for dimensionless values.
    """
    name: str
    low: float
    high: float
    unit: str = ""

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"Empty range for {self.name}: [{self.low}, {self.high}]")

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high

    def clamp(self, value: float) -> float:
        """Nearest value inside [low, high]."""
        return max(self.low, min(self.high, float(value)))


CONTROL_RANGES: dict[str, ParameterRange] = {
    "length": ParameterRange("length", 20.0, 200.0, "m"),
    "gravity": ParameterRange("gravity", 1.0, 25.0, "m/s²"),
    "damping": ParameterRange("damping", 0.0, 1.0),
}


def clamped_update(name: str, value: float) -> ParameterUpdate:
    """
    Build a ParameterUpdate with value clamped to the control range.

    Raises:
        ValueError: If name is not a known parameter.
    """
    if name not in CONTROL_RANGES:
        raise ValueError(f"No control range for parameter '{name}'")
    return ParameterUpdate(name, CONTROL_RANGES[name].clamp(value))


def format_control(rng: ParameterRange, value: float) -> str:
    """Slider readout, two decimals plus unit (e.g. '100.00 m')."""
    text = f"{value:.2f}"
    return f"{text} {rng.unit}" if rng.unit else text
