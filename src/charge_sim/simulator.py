# MIT License (see LICENSE)
"""
The charge simulator state holder and recomputation entry point.

The Simulator acts as the state container behind the interactive charge
canvas. It manages:
- The current ChargeSet (add, move, remove, reset, demo preset).
- Display parameters (field strength, charge magnitude, visualization mode,
  play/pause).
- Explicit recomputation: recompute() runs the pure core over the current
  charges and returns an immutable FieldSnapshot for a renderer.

Nothing is recomputed implicitly. Callers invoke recompute() after any
change they want reflected on screen.

Structure:
    - User creates a Simulator with the canvas bounds.
    - User adds or moves charges.
    - User calls recompute() and hands the snapshot to a renderer.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterator

import numpy as np

from .constants import (
    CHARGE_GLYPH_RADIUS,
    DEFAULT_LINES_PER_UNIT,
    DEFAULT_POTENTIAL_LEVELS,
    MIN_CONTOUR_POINTS,
)
from .core.contours import extract_equipotentials
from .core.tracer import seed_field_lines
from .profiler import Profiler
from .types import Bounds, Charge, ChargeSign, FieldLine, Point
from .util import f64, norm2

logger = logging.getLogger(__name__)

# Charges spawn at least this far from the canvas edges
SPAWN_MARGIN: float = 25.0

MIN_CHARGE_MAGNITUDE: int = 1
MAX_CHARGE_MAGNITUDE: int = 10


class VisualizationMode(str, Enum):
    """What recompute() produces."""
    FIELD_LINES = "fieldLines"
    EQUIPOTENTIAL = "equipotential"


# =============================================================================
# Charge Collection
# =============================================================================

@dataclass(frozen=True)
class ChargeSet:
    """
    Immutable, ordered collection of charges.

    Mutators return a new ChargeSet; the original is never modified. Order
    is insertion order, which is also draw order (later charges on top).
    The Charge objects themselves are shared, not copied; use detached()
    for a copy that in-place moves (Charge.move_to) cannot reach.
    """
    charges: tuple[Charge, ...] = ()

    def __hash__(self) -> int:
        return hash(tuple(c.id for c in self.charges))

    def __iter__(self) -> Iterator[Charge]:
        return iter(self.charges)

    def __len__(self) -> int:
        return len(self.charges)

    def __contains__(self, charge_id: object) -> bool:
        return any(c.id == charge_id for c in self.charges)

    def get(self, charge_id: str) -> Charge:
        """Return the charge with this id. Raises KeyError if absent."""
        for c in self.charges:
            if c.id == charge_id:
                return c
        raise KeyError(charge_id)

    def add(self, charge: Charge) -> "ChargeSet":
        if charge.id in self:
            raise ValueError(f"Duplicate charge id: {charge.id}")
        return ChargeSet(self.charges + (charge,))

    def remove(self, charge_id: str) -> "ChargeSet":
        self.get(charge_id)
        return ChargeSet(tuple(c for c in self.charges if c.id != charge_id))

    def move(self, charge_id: str, x: float, y: float) -> "ChargeSet":
        """Return a set with the charge re-anchored at (x, y)."""
        self.get(charge_id)
        return ChargeSet(tuple(
            replace(c, x=x, y=y) if c.id == charge_id else c
            for c in self.charges
        ))

    def detached(self) -> "ChargeSet":
        """Return a set holding copies of every charge, ids preserved."""
        return ChargeSet(tuple(replace(c) for c in self.charges))

    def hit_test(self, x: float, y: float) -> Charge | None:
        """
        Find the charge whose glyph contains the point.

        Used for picking before a drag. Checks the topmost (last added)
        charge first.
        """
        p = f64((x, y))
        r2 = CHARGE_GLYPH_RADIUS * CHARGE_GLYPH_RADIUS
        for c in reversed(self.charges):
            if norm2(p - f64(c.center)) <= r2:
                return c
        return None


# =============================================================================
# Configuration & Output
# =============================================================================

@dataclass
class SimulatorConfig:
    """
    Display parameters for the simulator.

    Attributes:
        bounds: Canvas extents.
        field_strength: Step-size scale for field lines, 0..1 (default 0.5).
        charge_magnitude: Magnitude of newly added charges, 1..10.
        mode: Field lines or equipotential contours.
        running: When False, recompute() returns an empty snapshot.
        lines_per_unit: Field lines seeded per unit of |q|.
        potential_levels: Levels for the equipotential family.
        min_contour_points: Levels with fewer crossings are not drawn.
        seed: Optional RNG seed for charge placement (None = nondeterministic).
    """
    bounds: Bounds = field(default_factory=lambda: Bounds(800.0, 500.0))
    field_strength: float = 0.5
    charge_magnitude: int = 5
    mode: VisualizationMode = VisualizationMode.FIELD_LINES
    running: bool = True
    lines_per_unit: int = DEFAULT_LINES_PER_UNIT
    potential_levels: tuple[float, ...] = DEFAULT_POTENTIAL_LEVELS
    min_contour_points: int = MIN_CONTOUR_POINTS
    seed: int | None = None

    def __post_init__(self) -> None:
        self.mode = VisualizationMode(self.mode)


@dataclass(frozen=True, eq=False)
class FieldSnapshot:
    """
    Result of one recomputation, ready for a renderer.

    Attributes:
        bounds: Canvas extents the snapshot was computed for.
        charges: Copies of the charges at recomputation time.
        mode: Mode that produced the geometry.
        field_lines: Traced lines (empty in equipotential mode).
        contours: Level -> crossing points (empty in field-line mode).
    """
    bounds: Bounds
    charges: ChargeSet
    mode: VisualizationMode
    field_lines: tuple[FieldLine, ...] = ()
    contours: dict[float, tuple[Point, ...]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.field_lines and not self.contours


# =============================================================================
# Simulator
# =============================================================================

@dataclass
class Simulator:
    """
    Charge simulator: holds charges and display parameters.

    Attributes:
        config: Display parameters.
        charges: Current charge collection.
        profiler: Optional Profiler for recompute timing.
        demo: Start with the default positive/negative demo pair.
    """
    config: SimulatorConfig = field(default_factory=SimulatorConfig)
    charges: ChargeSet = field(default_factory=ChargeSet)
    profiler: Profiler | None = None
    demo: bool = False

    def __post_init__(self) -> None:
        self._rng = np.random.default_rng(self.config.seed)
        if self.demo and len(self.charges) == 0:
            self.load_demo()

    # --- charge management ---------------------------------------------

    def add_charge(self, sign: ChargeSign | str, value: float | None = None) -> Charge:
        """
        Place a new charge at a random position on the canvas.

        Args:
            sign: Polarity of the new charge.
            value: Magnitude (its sign is ignored). Defaults to the
                   configured charge magnitude.

        Returns:
            The new charge.
        """
        bounds = self.config.bounds
        magnitude = self.config.charge_magnitude if value is None else value
        x = self._rng.random() * (bounds.width - 2 * SPAWN_MARGIN) + SPAWN_MARGIN
        y = self._rng.random() * (bounds.height - 2 * SPAWN_MARGIN) + SPAWN_MARGIN

        charge = Charge.create(sign, magnitude, float(x), float(y))
        self.charges = self.charges.add(charge)
        logger.info(
            f"Added {charge.sign.value} charge {charge.id} "
            f"(q={charge.value:g}) at ({charge.x:.1f}, {charge.y:.1f})"
        )
        return charge

    def move_charge(self, charge_id: str, x: float, y: float) -> None:
        self.charges = self.charges.move(charge_id, x, y)
        logger.debug(f"Moved charge {charge_id} to ({x:.1f}, {y:.1f})")

    def remove_charge(self, charge_id: str) -> None:
        self.charges = self.charges.remove(charge_id)
        logger.info(f"Removed charge {charge_id}")

    def reset(self) -> None:
        """Remove every charge."""
        self.charges = ChargeSet()
        logger.info("Simulation reset.")

    def load_demo(self) -> None:
        """
        Replace the charges with the demo pair.

        A +1 charge centered at 25% / 33% of the canvas and a -1 charge
        centered at 75% / 66%.
        """
        w, h = self.config.bounds.width, self.config.bounds.height
        offset = CHARGE_GLYPH_RADIUS
        self.charges = ChargeSet((
            Charge.create(ChargeSign.POSITIVE, 1.0, w * 0.25 - offset, h * 0.33 - offset),
            Charge.create(ChargeSign.NEGATIVE, 1.0, w * 0.75 - offset, h * 0.66 - offset),
        ))
        logger.info("Loaded demo charge pair.")

    # --- display parameters --------------------------------------------

    def set_field_strength(self, percent: float) -> None:
        """Set field strength from a 0-100 slider value (clamped)."""
        self.config.field_strength = min(1.0, max(0.0, float(percent) / 100.0))

    def set_charge_magnitude(self, value: float) -> None:
        """Set the magnitude used by add_charge(), clamped to 1..10."""
        self.config.charge_magnitude = int(
            min(MAX_CHARGE_MAGNITUDE, max(MIN_CHARGE_MAGNITUDE, round(value)))
        )

    def set_mode(self, mode: VisualizationMode | str) -> None:
        self.config.mode = VisualizationMode(mode)

    def set_bounds(self, width: float, height: float) -> None:
        """Canvas resized by the hosting container."""
        self.config.bounds = Bounds(float(width), float(height))

    def play(self) -> None:
        self.config.running = True

    def pause(self) -> None:
        self.config.running = False

    # --- recomputation --------------------------------------------------

    def recompute(self) -> FieldSnapshot:
        """
        Rebuild all geometry from the current charges and parameters.

        Returns:
            A new FieldSnapshot. Empty geometry when paused or when there
            are no charges.
        """
        cfg = self.config
        charges = self.charges.detached()

        if not cfg.running or len(charges) == 0:
            return FieldSnapshot(bounds=cfg.bounds, charges=charges, mode=cfg.mode)

        prof = self.profiler
        if cfg.mode is VisualizationMode.FIELD_LINES:
            if prof:
                with prof.section("field_lines"):
                    lines = self._field_lines(charges)
            else:
                lines = self._field_lines(charges)
            logger.debug(f"Traced {len(lines)} field lines for {len(charges)} charges")
            return FieldSnapshot(
                bounds=cfg.bounds,
                charges=charges,
                mode=cfg.mode,
                field_lines=tuple(lines),
            )

        if prof:
            with prof.section("equipotentials"):
                contours = self._contours(charges)
        else:
            contours = self._contours(charges)
        logger.debug(f"Extracted {len(contours)} equipotential levels")
        return FieldSnapshot(
            bounds=cfg.bounds,
            charges=charges,
            mode=cfg.mode,
            contours={level: tuple(pts) for level, pts in contours.items()},
        )

    def _field_lines(self, charges: ChargeSet) -> list[FieldLine]:
        cfg = self.config
        return seed_field_lines(
            charges.charges,
            cfg.bounds,
            strength_scale=cfg.field_strength,
            lines_per_unit=cfg.lines_per_unit,
        )

    def _contours(self, charges: ChargeSet) -> dict[float, list[Point]]:
        cfg = self.config
        return extract_equipotentials(
            charges.charges,
            cfg.bounds,
            levels=cfg.potential_levels,
            min_points=cfg.min_contour_points,
        )
