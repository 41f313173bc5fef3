# MIT License (see LICENSE)
"""
Equipotential contour extraction on a uniform grid.

Marching-squares-style edge interpolation: potential is sampled at every
grid node, and for each node the edges to its right and lower neighbors are
tested for a crossing of the target level. A crossing is located by linear
interpolation along the edge:

    t = |(V1 - level) / (V1 - V2)|,   P = P1 + t · (P2 - P1)

Known simplifications, kept on purpose:
    - Only the right and down edges of each node are tested, so some
      crossings on boundary cells are missed.
    - Points come out in discovery order (x-major, then y). Disjoint branches
      at the same level are not separated; joining consecutive points gives
      a visual approximation, not a topologically correct contour.
"""
from __future__ import annotations
from typing import Iterable, Sequence

import numpy as np

from ..constants import DEFAULT_POTENTIAL_LEVELS, GRID_SPACING, MIN_CONTOUR_POINTS
from ..types import Bounds, Charge, Point
from .field import potential_grid


def _grid_axes(bounds: Bounds, spacing: float) -> tuple[np.ndarray, np.ndarray]:
    """Node coordinates 0, spacing, 2·spacing, ... strictly below each extent."""
    xs = np.arange(0.0, bounds.width, spacing, dtype=np.float64)
    ys = np.arange(0.0, bounds.height, spacing, dtype=np.float64)
    return xs, ys


def _crossings(
    v: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    bounds: Bounds,
    level: float,
) -> list[Point]:
    """Scan a sampled potential grid for crossings of a single level."""
    points: list[Point] = []
    nx, ny = v.shape

    for i in range(nx):
        x = xs[i]
        for j in range(ny):
            y = ys[j]
            p1 = v[i, j]

            # right neighbor, then down neighbor
            for ai, aj in ((i + 1, j), (i, j + 1)):
                if ai >= nx or aj >= ny:
                    continue
                ax, ay = xs[ai], ys[aj]
                if ax >= bounds.width or ay >= bounds.height:
                    continue

                p2 = v[ai, aj]
                if (p1 - level) * (p2 - level) > 0:
                    continue

                if p1 == p2:
                    t = 0.0
                else:
                    t = abs((p1 - level) / (p1 - p2))
                points.append(
                    Point(float(x + t * (ax - x)), float(y + t * (ay - y)))
                )

    return points


def extract_equipotential(
    charges: Iterable[Charge],
    level: float,
    bounds: Bounds,
    spacing: float = GRID_SPACING,
) -> list[Point]:
    """
    Crossing points of the potential field with one target level.

    Args:
        charges: Source charges.
        level: Target potential.
        bounds: Canvas extents; grid nodes cover [0, width) × [0, height).
        spacing: Grid spacing in canvas units.

    Returns:
        Interpolated crossing points in discovery order. Empty if the level
        never occurs on the grid. Callers should skip drawing a level with
        fewer than MIN_CONTOUR_POINTS points.
    """
    xs, ys = _grid_axes(bounds, spacing)
    v = potential_grid(charges, xs, ys)
    return _crossings(v, xs, ys, bounds, level)


def extract_equipotentials(
    charges: Iterable[Charge],
    bounds: Bounds,
    levels: Sequence[float] = DEFAULT_POTENTIAL_LEVELS,
    min_points: int = MIN_CONTOUR_POINTS,
    spacing: float = GRID_SPACING,
) -> dict[float, list[Point]]:
    """
    Contour family for a list of levels.

    The grid is sampled once and scanned per level. Levels with fewer than
    min_points crossings are dropped.

    Returns:
        Mapping level -> crossing points, in the order of `levels`.
    """
    xs, ys = _grid_axes(bounds, spacing)
    v = potential_grid(charges, xs, ys)

    contours: dict[float, list[Point]] = {}
    for level in levels:
        points = _crossings(v, xs, ys, bounds, float(level))
        if len(points) >= min_points:
            contours[float(level)] = points
    return contours
