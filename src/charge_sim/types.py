# MIT License (see LICENSE)
"""
Core type definitions for the electrostatics engine.

Defines the fundamental data structures:
- ChargeSign / Charge: a point charge placed on the canvas.
- Point, Vector: value types for positions and field samples.
- Bounds: the canvas extents supplied by the hosting container.
- ForceResult: output of the Coulomb force calculator.

Canvas coordinates follow screen convention: the origin is the top-left
corner, x grows to the right and y grows downward.
"""
from __future__ import annotations
import math
import uuid
from dataclasses import dataclass, field
from enum import Enum

from .constants import CHARGE_CENTER_OFFSET


class ChargeSign(str, Enum):
    """Polarity of a point charge."""
    POSITIVE = "positive"
    NEGATIVE = "negative"

    @property
    def factor(self) -> float:
        """+1.0 for positive, -1.0 for negative."""
        return 1.0 if self is ChargeSign.POSITIVE else -1.0


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


# =============================================================================
# Value Types
# =============================================================================

@dataclass(frozen=True)
class Point:
    """A location in canvas coordinates."""
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Vector:
    """
    Electric field sample.

    Attributes:
        x, y: Field components.
        magnitude: Euclidean norm of (x, y). Build through from_components()
                   so the cached magnitude always matches the components.
    """
    x: float
    y: float
    magnitude: float

    @classmethod
    def from_components(cls, x: float, y: float) -> "Vector":
        return cls(float(x), float(y), float(math.hypot(x, y)))

    @classmethod
    def zero(cls) -> "Vector":
        return cls(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Bounds:
    """
    Canvas extents, measured by the hosting container.

    Attributes:
        width: Canvas width in canvas units.
        height: Canvas height in canvas units.
    """
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """True if (x, y) lies on the canvas, edges included."""
        return 0.0 <= x <= self.width and 0.0 <= y <= self.height


@dataclass(frozen=True)
class FieldLine:
    """
    A traced field line together with the charge it was seeded from.

    Attributes:
        charge_id: Id of the seeding charge.
        origin: Seed point (the charge center). Not part of points; renderers
                start the path here so the line visibly leaves the glyph.
        points: Traced polyline, starting at the offset seed point.
    """
    charge_id: str
    origin: Point
    points: tuple[Point, ...]


@dataclass(frozen=True)
class ForceResult:
    """
    Coulomb interaction between two charges.

    Attributes:
        magnitude: |F| in newtons (inf when the separation is zero).
        is_attractive: True when the charges have strictly opposite signs.
    """
    magnitude: float
    is_attractive: bool


# =============================================================================
# Charge
# =============================================================================

@dataclass
class Charge:
    """
    A point charge on the canvas.

    Attributes:
        x, y: Anchor position (top-left of the charge glyph). Mutable so a
              drag handler can reposition the charge in place.
        sign: Polarity. Accepts the enum or its string value.
        value: Signed magnitude in coulomb-equivalent units. Must agree with
               sign (positive sign => value > 0).
        id: Opaque identifier, unique per charge instance.

    Note:
        Physics originates from the glyph center (see center), never from the
        anchor. Evaluators read x, y on every call and never cache them.
    """
    x: float
    y: float
    sign: ChargeSign
    value: float
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        """Normalize the sign and enforce sign/value agreement."""
        self.sign = ChargeSign(self.sign)
        self.x = float(self.x)
        self.y = float(self.y)
        self.value = float(self.value)
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Charge position must be finite, got ({self.x}, {self.y})")
        if not math.isfinite(self.value) or self.value == 0.0:
            raise ValueError(f"Charge value must be finite and non-zero, got {self.value}")
        if (self.value > 0) != (self.sign is ChargeSign.POSITIVE):
            raise ValueError(
                f"Charge sign '{self.sign.value}' disagrees with value {self.value}"
            )

    @classmethod
    def create(
        cls,
        sign: ChargeSign | str,
        magnitude: float,
        x: float = 0.0,
        y: float = 0.0,
    ) -> "Charge":
        """Build a charge whose value takes its sign from `sign`."""
        sign = ChargeSign(sign)
        return cls(x=x, y=y, sign=sign, value=sign.factor * abs(magnitude))

    @property
    def center(self) -> tuple[float, float]:
        """Glyph center, the source location used by all field calculations."""
        return (self.x + CHARGE_CENTER_OFFSET, self.y + CHARGE_CENTER_OFFSET)

    def move_to(self, x: float, y: float) -> None:
        """Reposition the anchor (drag handlers call this)."""
        self.x = float(x)
        self.y = float(y)
