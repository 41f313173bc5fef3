# MIT License (see LICENSE)
"""
Electric field and potential evaluation by superposition.

The net field at a point is the vector sum of each charge's Coulomb field,
and the net potential is the algebraic sum of k·q/r over all charges.
Every function here is pure: it reads the current charge positions on each
call and has no side effects.

Singularity guard:
    Point charges produce unbounded values at r → 0. Instead of softening
    the denominator, a charge whose center is too close to the query point
    is skipped for that sample:
      - field:     skipped when r² < FIELD_MIN_R2
      - potential: skipped when r  < POTENTIAL_MIN_DISTANCE
    This is a visual approximation, not physics. The field jumps at the
    guard radius, which can show up as kinks in lines traced close to a
    source.

Complexity is O(N) per sample in the number of charges.
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from ..constants import K_COULOMB, FIELD_MIN_R2, POTENTIAL_MIN_DISTANCE
from ..types import Charge, Vector
from ..util import f64, norm2


def field_at(charges: Iterable[Charge], x: float, y: float) -> Vector:
    """
    Net electric field vector at (x, y).

    Each contribution is sign(q) · k|q|/r² along the unit vector from the
    charge center to the query point: outward for positive charges, inward
    for negative ones.

    Args:
        charges: Source charges (any iterable, e.g. a ChargeSet).
        x, y: Query point in canvas coordinates.

    Returns:
        The summed field. Its magnitude is the norm of the summed components,
        not the sum of per-charge magnitudes. Zero vector if there are no
        charges or every charge is inside the guard radius.
    """
    p = f64((x, y))
    e = np.zeros(2, dtype=np.float64)

    for charge in charges:
        r = p - f64(charge.center)
        r2 = norm2(r)
        if r2 < FIELD_MIN_R2:
            continue

        dist = np.sqrt(r2)
        magnitude = K_COULOMB * abs(charge.value) / r2
        sign = 1.0 if charge.value > 0 else -1.0
        e += sign * magnitude * (r / dist)

    return Vector.from_components(e[0], e[1])


def potential_at(charges: Iterable[Charge], x: float, y: float) -> float:
    """
    Net electric potential V = Σ k·q/r at (x, y).

    Signed sum: contributions of opposite charges cancel.
    """
    p = f64((x, y))
    v = 0.0

    for charge in charges:
        dist = np.sqrt(norm2(p - f64(charge.center)))
        if dist < POTENTIAL_MIN_DISTANCE:
            continue
        v += K_COULOMB * charge.value / dist

    return float(v)


def evaluate_field_and_potential(
    charges: Iterable[Charge],
    x: float,
    y: float,
) -> tuple[Vector, float]:
    """
    Field vector and potential at (x, y) in a single call.

    Args:
        charges: Source charges.
        x, y: Query point in canvas coordinates.

    Returns:
        Tuple (field, potential).
    """
    charges = list(charges)
    return field_at(charges, x, y), potential_at(charges, x, y)


def potential_grid(
    charges: Iterable[Charge],
    xs: np.ndarray,
    ys: np.ndarray,
) -> np.ndarray:
    """
    Potential sampled on the grid spanned by xs (columns) and ys (rows).

    Vectorized form of potential_at with the same guard and the same
    per-charge summation order.

    Returns:
        Array of shape (len(xs), len(ys)) where out[i, j] = V(xs[i], ys[j]).
    """
    gx, gy = np.meshgrid(f64(xs), f64(ys), indexing="ij")
    v = np.zeros_like(gx)

    for charge in charges:
        cx, cy = charge.center
        dx = gx - cx
        dy = gy - cy
        dist = np.sqrt(dx * dx + dy * dy)
        outside = dist >= POTENTIAL_MIN_DISTANCE
        with np.errstate(divide="ignore"):
            contrib = K_COULOMB * charge.value / dist
        v += np.where(outside, contrib, 0.0)

    return v
