# MIT License (see LICENSE)
"""
Field-line tracing by fixed-step streamline integration.

A field line is approximated with explicit Euler steps of constant length
along the normalized local field direction:

    p(n+1) = p(n) + s · d · E(p(n)) / |E(p(n))|

where s is the step length and d = +1 when tracing away from a positive
source, -1 when tracing into a negative one. Constant-length steps keep the
line resolution uniform on screen regardless of field strength.

Tracing stops at whichever comes first:
    (a) MAX_LINE_STEPS steps taken
    (b) the next point leaves the canvas
    (c) the next point is within LINE_MIN_CLEARANCE of any charge center
    (d) |E| < FIELD_EPSILON (no usable direction)

Reference:
    Streamline integration: https://en.wikipedia.org/wiki/Streamlines,_streaklines,_and_pathlines
"""
from __future__ import annotations
import math
from typing import Sequence

import numpy as np

from ..constants import (
    BASE_STEP_SIZE,
    DEFAULT_LINES_PER_UNIT,
    FIELD_EPSILON,
    LINE_MIN_CLEARANCE,
    LINE_START_OFFSET,
    MAX_LINE_STEPS,
)
from ..types import Bounds, Charge, ChargeSign, FieldLine, Point
from ..util import direction, f64, norm2
from .field import field_at


def _too_close(charges: Sequence[Charge], p: np.ndarray) -> bool:
    """True if p lies within the clearance radius of any charge center."""
    limit = LINE_MIN_CLEARANCE * LINE_MIN_CLEARANCE
    for charge in charges:
        if norm2(p - f64(charge.center)) < limit:
            return True
    return False


def trace_field_line(
    charges: Sequence[Charge],
    start_x: float,
    start_y: float,
    angle: float,
    outward: bool,
    bounds: Bounds,
    strength_scale: float = 1.0,
) -> list[Point]:
    """
    Trace one field line from a seed near a source charge.

    Args:
        charges: All charges on the canvas (the source included).
        start_x, start_y: Seed point, normally the source charge center.
        angle: Initial direction in radians; the first point is placed
               LINE_START_OFFSET away from the seed along this angle.
        outward: True to follow the field (away from a positive source),
                 False to follow it backwards (into a negative source).
        bounds: Canvas extents; the line stops at the edge.
        strength_scale: Multiplier on BASE_STEP_SIZE.

    Returns:
        Ordered points along the line, starting with the offset seed point.
        At most MAX_LINE_STEPS + 1 points. Only the first point may lie
        inside the clearance radius of a charge.
    """
    charges = list(charges)
    step = BASE_STEP_SIZE * strength_scale
    sense = 1.0 if outward else -1.0

    p = f64((start_x, start_y)) + LINE_START_OFFSET * direction(angle)
    points = [Point(float(p[0]), float(p[1]))]

    for _ in range(MAX_LINE_STEPS):
        e = field_at(charges, p[0], p[1])
        if e.magnitude < FIELD_EPSILON:
            break

        d = np.array([e.x, e.y], dtype=np.float64) / e.magnitude
        p = p + sense * step * d

        if not bounds.contains(p[0], p[1]):
            break
        if _too_close(charges, p):
            break

        points.append(Point(float(p[0]), float(p[1])))

    return points


def seed_field_lines(
    charges: Sequence[Charge],
    bounds: Bounds,
    strength_scale: float = 1.0,
    lines_per_unit: int = DEFAULT_LINES_PER_UNIT,
) -> list[FieldLine]:
    """
    Fan out field lines from every charge.

    Rendering density policy: each charge gets ceil(|q| · lines_per_unit)
    lines, evenly spaced 2π/count apart and seeded at its center. Lines
    leave positive charges along the field and enter negative charges
    against it.

    Returns:
        One FieldLine per seeded line, charges in input order, angles
        increasing from 0.
    """
    charges = list(charges)
    lines: list[FieldLine] = []

    for charge in charges:
        # a fractional count still draws its last line
        count = math.ceil(round(abs(charge.value) * lines_per_unit, 9))
        if count <= 0:
            continue
        angle_step = 2.0 * np.pi / count
        cx, cy = charge.center
        outward = charge.sign is ChargeSign.POSITIVE
        for i in range(count):
            points = trace_field_line(
                charges, cx, cy, i * angle_step, outward, bounds, strength_scale
            )
            lines.append(FieldLine(charge.id, Point(cx, cy), tuple(points)))

    return lines
