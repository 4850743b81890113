# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output.
    - NullRenderer: No-op renderer for performance testing.
    - BufferedRenderer: Records frames, usable as a clock observer.
    - format_readout: Elapsed time / angle / period display strings.

The simulation has no rendering dependency; these adapters are optional.

Typical usage:
    from pendulum_sim.renderer import DebugRenderer

    renderer = DebugRenderer()
    renderer.render(sim)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
    format_readout,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "format_readout",
]
