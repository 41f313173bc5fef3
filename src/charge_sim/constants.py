# MIT License (see LICENSE)
"""
Physical constants and fixed thresholds used throughout the engine.

Coordinates are canvas units (pixels). The guard radii below are visual
approximations tied to the size of a charge glyph, not physical quantities.
"""
from __future__ import annotations

# Coulomb's constant (electrostatic constant), k = 1/(4πε₀)
# Rounded to the value used by the calculator: 8.99 × 10⁹ N·m²/C²
K_COULOMB: float = 8.99e9

# A charge is drawn as a 48px circular glyph anchored at its top-left corner.
# Fields originate from the glyph center, anchor + 24px on each axis.
CHARGE_CENTER_OFFSET: float = 24.0
CHARGE_GLYPH_RADIUS: float = 24.0

# Singularity guards. Contributions inside these radii are skipped entirely
# (not clamped), so the field is discontinuous at the guard boundary.
FIELD_MIN_R2: float = 100.0          # r² below which a charge adds no field
POTENTIAL_MIN_DISTANCE: float = 10.0  # r below which a charge adds no potential

# Field-line tracing
LINE_START_OFFSET: float = 15.0   # seed clearance from the source center
LINE_MIN_CLEARANCE: float = 15.0  # stop when closer than this to any charge
BASE_STEP_SIZE: float = 5.0       # scaled by the caller's strength factor
MAX_LINE_STEPS: int = 100
FIELD_EPSILON: float = 1e-6       # field magnitude treated as "no direction"
DEFAULT_LINES_PER_UNIT: int = 8   # fan-out density per unit of |q|

# Equipotential extraction
GRID_SPACING: float = 10.0
MIN_CONTOUR_POINTS: int = 3
DEFAULT_POTENTIAL_LEVELS: tuple[float, ...] = (
    -500.0, -200.0, -100.0, -50.0, -20.0, -10.0,
    10.0, 20.0, 50.0, 100.0, 200.0, 500.0,
)

# Force indicator saturates at this magnitude (N)
FORCE_INDICATOR_MAX: float = 1e-7
