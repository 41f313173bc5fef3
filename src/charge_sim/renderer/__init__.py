# MIT License (see LICENSE)
"""
Rendering adapters for field visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer for performance testing.
    - BufferedRenderer: Records frames as plain data.
    - SVGPathRenderer: Produces SVG path elements for a browser overlay.

The engine has no rendering dependency; these adapters are optional.

Typical usage:
    from charge_sim.renderer import SVGPathRenderer

    renderer = SVGPathRenderer()
    renderer.render_snapshot(simulator.recompute())
    svg = renderer.to_svg()
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
    SVGPathRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "SVGPathRenderer",
]
