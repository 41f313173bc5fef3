# MIT License (see LICENSE)
"""
Coulomb force between two point charges.

Implements F = k · |q1 · q2| / r² and classifies the interaction as
attractive (strictly opposite signs) or repulsive (everything else).

Precondition: r > 0. The calculator does not special-case zero separation;
with r == 0 the float division yields inf (nan if a charge is also zero)
and no exception is raised. Callers guard against zero separation.
"""
from __future__ import annotations

import numpy as np

from ..constants import K_COULOMB
from ..types import Charge, ForceResult
from ..util import f64, norm


def compute_force(q1: float, q2: float, r: float) -> ForceResult:
    """
    Apply Coulomb's law to a charge pair.

    Args:
        q1: First signed charge in coulombs.
        q2: Second signed charge in coulombs.
        r: Separation in meters. Must be > 0.

    Returns:
        ForceResult with the force magnitude in newtons and whether the
        pair attracts.
    """
    q1 = np.float64(q1)
    q2 = np.float64(q2)
    r = np.float64(r)
    with np.errstate(divide="ignore", invalid="ignore"):
        magnitude = K_COULOMB * abs(q1 * q2) / (r * r)

    is_attractive = bool((q1 > 0 and q2 < 0) or (q1 < 0 and q2 > 0))
    return ForceResult(magnitude=float(magnitude), is_attractive=is_attractive)


def force_between(a: Charge, b: Charge) -> ForceResult:
    """
    Coulomb force between two placed charges.

    Uses the center-to-center distance in canvas units as r, so the result
    is only physically meaningful when canvas units are meters.
    """
    r = norm(f64(a.center) - f64(b.center))
    return compute_force(a.value, b.value, r)
