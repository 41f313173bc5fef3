# MIT License (see LICENSE)
"""
charge_sim - A 2D electrostatics engine for teaching Coulomb's law.

This package computes everything the interactive charge canvas and the
force calculator need: field and potential by superposition, Coulomb
forces, field-line traces and equipotential contours.

Main entry points:
    - Simulator: Holds charges and display parameters, recomputes on demand.
    - Charge, ChargeSign: Point charges on the canvas.
    - evaluate_field_and_potential, compute_force, trace_field_line,
      extract_equipotential: The pure core functions.

Submodules:
    - core: Field, force, tracing and contour computations.
    - calculator: Scientific-notation parsing and force formatting.
    - io: JSON-compatible serialization.
    - renderer: Optional visualization adapters.

Example:
    from charge_sim import Simulator, SimulatorConfig, Bounds

    sim = Simulator(SimulatorConfig(bounds=Bounds(800, 500)), demo=True)
    snapshot = sim.recompute()
"""
from .types import Bounds, Charge, ChargeSign, FieldLine, ForceResult, Point, Vector
from .core import (
    compute_force,
    evaluate_field_and_potential,
    extract_equipotential,
    trace_field_line,
)
from .simulator import ChargeSet, FieldSnapshot, Simulator, SimulatorConfig, VisualizationMode

__all__ = [
    # Simulation
    "Simulator",
    "SimulatorConfig",
    "ChargeSet",
    "FieldSnapshot",
    "VisualizationMode",
    # Types
    "Charge",
    "ChargeSign",
    "Point",
    "Vector",
    "Bounds",
    "FieldLine",
    "ForceResult",
    # Core
    "evaluate_field_and_potential",
    "compute_force",
    "trace_field_line",
    "extract_equipotential",
]
