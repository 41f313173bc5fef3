# MIT License (see LICENSE)
"""
Coulomb's law calculator helpers.

Text in, text out: parses charge and distance values typed in scientific
notation, runs the force calculator, and formats the result the way the
calculator card displays it ("8.20 × 10⁻⁸ N").
"""
from __future__ import annotations
import math
import re
from dataclasses import dataclass

from .constants import FORCE_INDICATOR_MAX
from .core.forces import compute_force
from .types import ForceResult

_SUPERSCRIPT_IN = str.maketrans("⁺⁻⁰¹²³⁴⁵⁶⁷⁸⁹", "+-0123456789")
_SUPERSCRIPT_OUT = str.maketrans("-0123456789", "⁻⁰¹²³⁴⁵⁶⁷⁸⁹")

_MANTISSA = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)"
_POWER = r"10\s*(?:\^|\*\*)\s*(?P<exp>[+-]?\d+)"
_SCI_FULL = re.compile(rf"^(?P<mant>{_MANTISSA})\s*[×xX*·]\s*{_POWER}$")
_SCI_BARE = re.compile(rf"^(?P<sign>[+-]?){_POWER}$")


@dataclass(frozen=True)
class CalculatorResult:
    """
    Output of one calculator run.

    Attributes:
        force: Force magnitude in newtons.
        formatted: Force in display notation, e.g. "2.40 × 10⁰ N".
        is_attractive: True for opposite signs.
        label: "Attractive (opposite signs)" or "Repulsive (same signs)".
    """
    force: float
    formatted: str
    is_attractive: bool
    label: str


def _normalize(text: str) -> str:
    text = text.strip().replace("\u2212", "-").replace("\u2009", " ").replace("\u00a0", " ")
    # "10⁻¹⁹" -> "10^-19"
    return re.sub(
        r"[⁺⁻⁰¹²³⁴⁵⁶⁷⁸⁹]+",
        lambda m: "^" + m.group(0).translate(_SUPERSCRIPT_IN),
        text,
    )


def parse_scientific(text: str) -> float:
    """
    Parse a number typed in any of the usual scientific notations.

    Accepted forms include "0.15", "1.6e-19", "1.6 × 10⁻¹⁹", "1.6×10^-19",
    "1.6*10**-19", "-2 x 10^-6" and "10⁻⁶".

    Raises:
        ValueError: If the text is not a finite number in a known notation.
    """
    s = _normalize(text)
    if not s:
        raise ValueError("Empty input")

    try:
        value = float(s)
    except ValueError:
        m = _SCI_FULL.match(s)
        if m:
            value = float(f"{m.group('mant')}e{int(m.group('exp'))}")
        else:
            m = _SCI_BARE.match(s)
            if not m:
                raise ValueError(f"Not a number in scientific notation: {text!r}") from None
            sign = "-" if m.group("sign") == "-" else ""
            value = float(f"{sign}1e{int(m.group('exp'))}")

    if not math.isfinite(value):
        raise ValueError(f"Value must be finite, got {text!r}")
    return value


def format_scientific(value: float, unit: str = "N", digits: int = 2) -> str:
    """
    Format a value as "m.mm × 10ⁿ unit" with Unicode superscripts.

    Zero is shown without an exponent and infinity as "∞".
    """
    suffix = f" {unit}" if unit else ""
    if math.isnan(value):
        raise ValueError("Cannot format NaN")
    if math.isinf(value):
        return ("-∞" if value < 0 else "∞") + suffix
    if value == 0:
        return f"{0.0:.{digits}f}{suffix}"

    # "%e" already carries 9.996 over to 1.00e+01 and handles subnormals
    mantissa, exponent = f"{value:.{digits}e}".split("e")
    power = str(int(exponent)).translate(_SUPERSCRIPT_OUT)
    return f"{mantissa} × 10{power}{suffix}"


def force_type_label(result: ForceResult) -> str:
    if result.is_attractive:
        return "Attractive (opposite signs)"
    return "Repulsive (same signs)"


def normalized_force_strength(magnitude: float, max_force: float = FORCE_INDICATOR_MAX) -> float:
    """Force scaled to [0, 1] for the attraction/repulsion indicator."""
    if math.isnan(magnitude) or magnitude <= 0:
        return 0.0
    return min(magnitude / max_force, 1.0)


def calculate(charge1: str | float, charge2: str | float, distance: str | float) -> CalculatorResult:
    """
    Run the calculator on user input.

    Args:
        charge1, charge2: Signed charges in coulombs (text or number).
        distance: Separation in meters (text or number).

    Raises:
        ValueError: If an input cannot be parsed or distance <= 0.
    """
    q1 = parse_scientific(charge1) if isinstance(charge1, str) else float(charge1)
    q2 = parse_scientific(charge2) if isinstance(charge2, str) else float(charge2)
    r = parse_scientific(distance) if isinstance(distance, str) else float(distance)
    if r <= 0:
        raise ValueError(f"Distance must be positive, got {r}")

    result = compute_force(q1, q2, r)
    return CalculatorResult(
        force=result.magnitude,
        formatted=format_scientific(result.magnitude),
        is_attractive=result.is_attractive,
        label=force_type_label(result),
    )
