# MIT License (see LICENSE)
"""
Core electrostatics computations.

This subpackage provides:
    - Field & potential evaluation by superposition.
    - Coulomb force calculation for a charge pair.
    - Field-line tracing and fan-out seeding.
    - Equipotential contour extraction.

All functions are pure and bounded by fixed iteration caps.

Typical usage:
    from charge_sim.core import evaluate_field_and_potential, trace_field_line

    field, potential = evaluate_field_and_potential(charges, 120.0, 80.0)
"""
from .field import field_at, potential_at, evaluate_field_and_potential, potential_grid
from .forces import compute_force, force_between
from .tracer import trace_field_line, seed_field_lines
from .contours import extract_equipotential, extract_equipotentials

__all__ = [
    # Field & potential
    "field_at",
    "potential_at",
    "evaluate_field_and_potential",
    "potential_grid",
    # Forces
    "compute_force",
    "force_between",
    # Field lines
    "trace_field_line",
    "seed_field_lines",
    # Equipotentials
    "extract_equipotential",
    "extract_equipotentials",
]
