# MIT License (see LICENSE)
"""
JSON-compatible serialization of charges and field snapshots.

Produces plain dicts/lists for the rendering front end. Nothing is written
to disk; the caller decides how (or whether) to send the data anywhere.

JSON Schema Overview:
---------------------
Charge:
{
  "id": string,                    # Optional on input (generated if missing)
  "x": float, "y": float,          # Required, glyph anchor position
  "sign": "positive" | "negative", # Optional on input (derived from value)
  "value": float                   # Required, signed, non-zero
}

Snapshot:
{
  "bounds": {"width": float, "height": float},
  "mode": "fieldLines" | "equipotential",
  "charges": [Charge, ...],
  "fieldLines": [                              # Field-line mode only
    {"chargeId": string, "origin": [x, y], "points": [[x, y], ...]}
  ],
  "contours": [                                # Equipotential mode only
    {"level": float, "points": [[x, y], ...]}
  ]
}
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Any, Iterable, Sequence

from ..types import Charge, ChargeSign, Point

if TYPE_CHECKING:
    from ..simulator import FieldSnapshot

logger = logging.getLogger(__name__)


def charge_from_json(d: dict[str, Any]) -> Charge:
    """
    Parse a single charge definition from a dictionary.

    Raises:
        ValueError: If required fields are missing or the charge is invalid.
    """
    for key in ("x", "y", "value"):
        if key not in d:
            raise ValueError(f"Charge definition missing required '{key}' field.")

    value = float(d["value"])
    if "sign" in d:
        sign = ChargeSign(d["sign"])
    else:
        sign = ChargeSign.POSITIVE if value > 0 else ChargeSign.NEGATIVE

    kwargs: dict[str, Any] = {
        "x": float(d["x"]),
        "y": float(d["y"]),
        "sign": sign,
        "value": value,
    }
    if "id" in d:
        kwargs["id"] = str(d["id"])
    return Charge(**kwargs)


def charge_to_json(charge: Charge) -> dict[str, Any]:
    """Serialize a Charge to a dictionary (round-trip compatible)."""
    return {
        "id": charge.id,
        "x": charge.x,
        "y": charge.y,
        "sign": charge.sign.value,
        "value": charge.value,
    }


def charges_to_json(charges: Iterable[Charge]) -> list[dict[str, Any]]:
    """Serialize a collection of charges to a JSON-compatible list."""
    return [charge_to_json(c) for c in charges]


def charges_from_json(data: Iterable[dict[str, Any]]) -> list[Charge]:
    charges = [charge_from_json(d) for d in data]
    logger.debug(f"Parsed {len(charges)} charges.")
    return charges


def points_to_json(points: Sequence[Point]) -> list[list[float]]:
    """Polyline as a list of [x, y] pairs."""
    return [[p.x, p.y] for p in points]


def snapshot_to_json(snapshot: "FieldSnapshot") -> dict[str, Any]:
    """
    Serialize a FieldSnapshot for a rendering front end.

    Only the geometry for the snapshot's mode is included.
    """
    result: dict[str, Any] = {
        "bounds": {"width": snapshot.bounds.width, "height": snapshot.bounds.height},
        "mode": snapshot.mode.value,
        "charges": charges_to_json(snapshot.charges),
    }
    if snapshot.field_lines:
        result["fieldLines"] = [
            {
                "chargeId": line.charge_id,
                "origin": [line.origin.x, line.origin.y],
                "points": points_to_json(line.points),
            }
            for line in snapshot.field_lines
        ]
    if snapshot.contours:
        result["contours"] = [
            {"level": level, "points": points_to_json(points)}
            for level, points in snapshot.contours.items()
        ]
    return result
