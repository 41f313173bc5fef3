# MIT License (see LICENSE)
"""
Renderer adapters for field visualization.

This module provides an abstract base class for rendering a FieldSnapshot
and a few concrete implementations. The core engine has no rendering
dependency; renderers only consume the data it returns.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence, TextIO
import sys

from ..types import Bounds, Charge, FieldLine, Point

if TYPE_CHECKING:
    from ..simulator import FieldSnapshot

FIELD_LINE_STROKE = "#42a5f5"
CONTOUR_STROKE = "#9c27b0"
CONTOUR_DASHARRAY = "3,3"


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses implement the drawing methods to integrate with a graphics
    backend (SVG, matplotlib, a web canvas, ...).

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(snapshot.bounds)
        for line in snapshot.field_lines:
            renderer.draw_field_line(line)
        for charge in snapshot.charges:
            renderer.draw_charge(charge)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_snapshot(snapshot)
    """

    @abstractmethod
    def begin_frame(self, bounds: Bounds) -> None:
        """
        Begin a new frame, discarding anything drawn before.

        Args:
            bounds: Canvas extents for this frame.
        """
        ...

    @abstractmethod
    def draw_field_line(self, line: FieldLine) -> None:
        ...

    @abstractmethod
    def draw_contour(self, level: float, points: Sequence[Point]) -> None:
        """
        Draw one equipotential level.

        Args:
            level: Potential of the contour.
            points: Crossing points, joined in order.
        """
        ...

    @abstractmethod
    def draw_charge(self, charge: Charge) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_snapshot(self, snapshot: "FieldSnapshot") -> None:
        """
        Draw a whole snapshot: geometry first, then charges on top.

        Args:
            snapshot: Output of Simulator.recompute().
        """
        self.begin_frame(snapshot.bounds)
        for line in snapshot.field_lines:
            self.draw_field_line(line)
        for level, points in snapshot.contours.items():
            self.draw_contour(level, points)
        for charge in snapshot.charges:
            self.draw_charge(charge)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Output:
        === Frame 800x500 ===
        line from 3f2a... (176.0, 141.0) 42 pts
        contour V=+10 18 pts
        [3f2a...] positive q=1 @ (176.00, 141.00)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Initialize the debug renderer.

        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, also print one line per field line and contour.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, bounds: Bounds) -> None:
        self.output.write(f"=== Frame {bounds.width:g}x{bounds.height:g} ===\n")

    def draw_field_line(self, line: FieldLine) -> None:
        if self.verbose:
            o = line.origin
            self.output.write(
                f"line from {line.charge_id} ({o.x:.1f}, {o.y:.1f}) {len(line.points)} pts\n"
            )

    def draw_contour(self, level: float, points: Sequence[Point]) -> None:
        if self.verbose:
            self.output.write(f"contour V={level:+g} {len(points)} pts\n")

    def draw_charge(self, charge: Charge) -> None:
        cx, cy = charge.center
        self.output.write(
            f"[{charge.id}] {charge.sign.value} q={charge.value:g} @ ({cx:.2f}, {cy:.2f})\n"
        )

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer that does nothing.

    Useful as a placeholder or for timing recomputation alone.
    """

    def begin_frame(self, bounds: Bounds) -> None:
        pass

    def draw_field_line(self, line: FieldLine) -> None:
        pass

    def draw_contour(self, level: float, points: Sequence[Point]) -> None:
        pass

    def draw_charge(self, charge: Charge) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frames as plain dicts.

    Example:
        renderer = BufferedRenderer()
        renderer.render_snapshot(simulator.recompute())
        frame = renderer.frames[-1]
        print(len(frame["field_lines"]), len(frame["charges"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, bounds: Bounds) -> None:
        self._current_frame = {
            "bounds": (bounds.width, bounds.height),
            "field_lines": [],
            "contours": [],
            "charges": [],
        }

    def draw_field_line(self, line: FieldLine) -> None:
        if self._current_frame is None:
            return
        self._current_frame["field_lines"].append(
            [line.origin.as_tuple()] + [p.as_tuple() for p in line.points]
        )

    def draw_contour(self, level: float, points: Sequence[Point]) -> None:
        if self._current_frame is None:
            return
        self._current_frame["contours"].append(
            {"level": level, "points": [p.as_tuple() for p in points]}
        )

    def draw_charge(self, charge: Charge) -> None:
        if self._current_frame is None:
            return
        self._current_frame["charges"].append({
            "id": charge.id,
            "center": charge.center,
            "sign": charge.sign.value,
            "value": charge.value,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()


class SVGPathRenderer(RendererAdapter):
    """
    Renders a snapshot as SVG path elements.

    Field lines start at the seeding charge center ("M cx,cy") and continue
    through every traced point ("L x,y"). Contours start at their first
    crossing point and are drawn dashed. Charges are not drawn; the host
    page renders its own glyphs over the SVG layer.

    Attributes:
        paths: Attribute dicts of the current frame, one per <path>.
    """

    def __init__(self):
        self.paths: list[dict[str, str]] = []
        self._bounds = Bounds(0.0, 0.0)

    @staticmethod
    def path_data(points: Sequence[Point], origin: Point | None = None) -> str:
        """SVG path 'd' attribute through the points, optionally from origin."""
        coords = list(points)
        if origin is not None:
            coords.insert(0, origin)
        if not coords:
            return ""
        head, rest = coords[0], coords[1:]
        parts = [f"M {head.x:g},{head.y:g}"]
        parts.extend(f"L {p.x:g},{p.y:g}" for p in rest)
        return " ".join(parts)

    def begin_frame(self, bounds: Bounds) -> None:
        self._bounds = bounds
        self.paths = []

    def draw_field_line(self, line: FieldLine) -> None:
        self.paths.append({
            "class": "field-line",
            "d": self.path_data(line.points, origin=line.origin),
            "stroke": FIELD_LINE_STROKE,
            "stroke-width": "1.5",
            "fill": "none",
        })

    def draw_contour(self, level: float, points: Sequence[Point]) -> None:
        if not points:
            return
        self.paths.append({
            "class": "equipotential",
            "d": self.path_data(points),
            "stroke": CONTOUR_STROKE,
            "stroke-width": "1",
            "fill": "none",
            "stroke-dasharray": CONTOUR_DASHARRAY,
        })

    def draw_charge(self, charge: Charge) -> None:
        pass

    def end_frame(self) -> None:
        pass

    def to_svg(self) -> str:
        """The current frame as a standalone <svg> document."""
        w, h = self._bounds.width, self._bounds.height
        body = "\n".join(
            "  <path " + " ".join(f'{k}="{v}"' for k, v in attrs.items()) + "/>"
            for attrs in self.paths
        )
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w:g}" height="{h:g}">\n'
            f"{body}\n</svg>"
        )
