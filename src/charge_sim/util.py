# MIT License (see LICENSE)
"""
Utility functions for vector math and environment lookups.

Provides low-level 2D vector operations shared by the field evaluator and the
tracer. All vector functions operate on 2D vectors represented as numpy
arrays of shape (2,).
"""
from __future__ import annotations
import logging
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for points and offsets.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def direction(angle: float) -> np.ndarray:
    """Unit vector pointing at `angle` radians, counterclockwise from +x."""
    return np.array([np.cos(angle), np.sin(angle)], dtype=np.float64)


def rotate(v: np.ndarray, angle: float) -> np.ndarray:
    """Rotate a 2D vector about the origin by `angle` radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([v[0] * c - v[1] * s, v[0] * s + v[1] * c], dtype=np.float64)


def env_log_level() -> int:
    """Log level from CHARGE_SIM_LOG_LEVEL (name or number), INFO if unset."""
    raw = os.environ.get("CHARGE_SIM_LOG_LEVEL", "INFO").strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO
