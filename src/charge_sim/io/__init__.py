# MIT License (see LICENSE)
"""
Serialization utilities for the charge simulator.

This subpackage provides:
    - Charge (de)serialization to plain dicts.
    - Snapshot export for a rendering front end.

Typical usage:
    from charge_sim.io import snapshot_to_json

    payload = snapshot_to_json(simulator.recompute())
"""
from .json_io import (
    charge_from_json,
    charge_to_json,
    charges_from_json,
    charges_to_json,
    points_to_json,
    snapshot_to_json,
)

__all__ = [
    # Loading
    "charge_from_json",
    "charges_from_json",
    # Serialization
    "charge_to_json",
    "charges_to_json",
    "points_to_json",
    "snapshot_to_json",
]
