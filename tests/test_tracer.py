import numpy as np
import pytest
from charge_sim.constants import (
    CHARGE_CENTER_OFFSET, LINE_MIN_CLEARANCE, LINE_START_OFFSET, MAX_LINE_STEPS
)
from charge_sim.core.tracer import trace_field_line, seed_field_lines
from charge_sim.types import Bounds, Charge, ChargeSign, Point


def centered(sign, magnitude, cx, cy):
    return Charge.create(sign, magnitude, cx - CHARGE_CENTER_OFFSET, cy - CHARGE_CENTER_OFFSET)


def test_radial_line_from_single_positive_charge():
    """
    +1 at (200, 200) on a 400x400 canvas, traced along +x with step 5:
      points at x = 215, 220, ..., 400, then the next step leaves the canvas.
    """
    q = centered(ChargeSign.POSITIVE, 1.0, 200.0, 200.0)
    pts = trace_field_line([q], 200.0, 200.0, 0.0, True, Bounds(400.0, 400.0), 1.0)

    assert pts[0] == Point(215.0, 200.0)
    assert len(pts) == 38
    assert pts[-1].x == pytest.approx(400.0)
    assert all(p.y == pytest.approx(200.0, abs=1e-9) for p in pts)
    assert all(b.x > a.x for a, b in zip(pts, pts[1:]))


def test_strength_scale_sets_step_length():
    q = centered(ChargeSign.POSITIVE, 1.0, 200.0, 200.0)
    pts = trace_field_line([q], 200.0, 200.0, 0.0, True, Bounds(400.0, 400.0), 0.5)
    steps = [b.x - a.x for a, b in zip(pts, pts[1:])]
    assert np.allclose(steps, 2.5)


def test_inward_trace_from_negative_charge_moves_away():
    """The inward sense flips the field, which points into the negative charge."""
    q = centered(ChargeSign.NEGATIVE, 1.0, 200.0, 200.0)
    pts = trace_field_line([q], 200.0, 200.0, 0.0, False, Bounds(400.0, 400.0))
    assert len(pts) > 1
    assert pts[1].x == pytest.approx(220.0)


def test_following_field_into_negative_charge_stops_at_clearance():
    q = centered(ChargeSign.NEGATIVE, 1.0, 200.0, 200.0)
    pts = trace_field_line([q], 200.0, 200.0, 0.0, True, Bounds(400.0, 400.0))
    # one step back toward the center lands at r = 10 < 15
    assert pts == [Point(215.0, 200.0)]


def test_stops_where_field_vanishes():
    """Midpoint of two equal positive charges has exactly zero field."""
    a = centered(ChargeSign.POSITIVE, 1.0, 100.0, 200.0)
    b = centered(ChargeSign.POSITIVE, 1.0, 300.0, 200.0)
    pts = trace_field_line([a, b], 185.0, 200.0, 0.0, True, Bounds(400.0, 400.0))
    assert pts == [Point(200.0, 200.0)]


def test_empty_charge_set_returns_seed_only():
    pts = trace_field_line([], 50.0, 50.0, np.pi / 2, True, Bounds(100.0, 100.0))
    assert pts == [Point(50.0, 50.0 + LINE_START_OFFSET)]


def test_dipole_line_ends_near_negative_charge():
    pos = centered(ChargeSign.POSITIVE, 1.0, 150.0, 200.0)
    neg = centered(ChargeSign.NEGATIVE, 1.0, 250.0, 200.0)
    pts = trace_field_line([pos, neg], 150.0, 200.0, 0.0, True, Bounds(400.0, 400.0))

    last = np.array(pts[-1].as_tuple())
    dist = np.linalg.norm(last - np.array(neg.center))
    print("points", len(pts), "final distance", dist)
    assert len(pts) < MAX_LINE_STEPS + 1
    assert dist < LINE_MIN_CLEARANCE + 5.0


def test_terminates_and_keeps_clearance_for_random_layouts():
    rng = np.random.default_rng(12345)
    bounds = Bounds(600.0, 400.0)

    for _ in range(20):
        charges = []
        for _ in range(int(rng.integers(1, 5))):
            sign = ChargeSign.POSITIVE if rng.random() < 0.5 else ChargeSign.NEGATIVE
            charges.append(Charge.create(
                sign, float(rng.integers(1, 4)),
                float(rng.uniform(0, 550)), float(rng.uniform(0, 350)),
            ))
        src = charges[0]
        cx, cy = src.center
        pts = trace_field_line(
            charges, cx, cy, float(rng.uniform(0, 2 * np.pi)),
            src.sign is ChargeSign.POSITIVE, bounds, float(rng.uniform(0.1, 1.0)),
        )

        assert 1 <= len(pts) <= MAX_LINE_STEPS + 1
        for p in pts[1:]:
            assert bounds.contains(p.x, p.y)
            for c in charges:
                d2 = (p.x - c.center[0]) ** 2 + (p.y - c.center[1]) ** 2
                assert d2 >= LINE_MIN_CLEARANCE ** 2


def test_trace_is_deterministic():
    charges = [centered(ChargeSign.POSITIVE, 2.0, 120.0, 90.0),
               centered(ChargeSign.NEGATIVE, 1.0, 300.0, 260.0)]
    args = (charges, 120.0, 90.0, 0.7, True, Bounds(400.0, 300.0), 0.5)
    assert trace_field_line(*args) == trace_field_line(*args)


def test_seed_field_lines_fan_out():
    """|q|·8 lines per charge, all starting at the charge center."""
    pos = centered(ChargeSign.POSITIVE, 1.0, 150.0, 150.0)
    neg = centered(ChargeSign.NEGATIVE, 2.0, 350.0, 150.0)
    lines = seed_field_lines([pos, neg], Bounds(500.0, 300.0), 0.5)

    assert len(lines) == 8 + 16
    assert [l.charge_id for l in lines] == [pos.id] * 8 + [neg.id] * 16
    assert all(l.origin == Point(150.0, 150.0) for l in lines[:8])
    assert all(l.origin == Point(350.0, 150.0) for l in lines[8:])

    # first seed points are evenly spaced around the source
    angles = [np.arctan2(l.points[0].y - 150.0, l.points[0].x - 150.0) for l in lines[:8]]
    expected = [np.arctan2(np.sin(a), np.cos(a)) for a in np.arange(8) * (2 * np.pi / 8)]
    assert np.allclose(angles, expected)


def test_seed_field_lines_density_parameter():
    q = centered(ChargeSign.POSITIVE, 3.0, 100.0, 100.0)
    assert len(seed_field_lines([q], Bounds(200.0, 200.0), lines_per_unit=2)) == 6
    assert seed_field_lines([], Bounds(200.0, 200.0)) == []


def test_seed_field_lines_fractional_charge_keeps_partial_line():
    """|q|·8 = 0.48 still seeds one line; 2.5·8 = 20 seeds exactly 20."""
    small = centered(ChargeSign.POSITIVE, 0.06, 100.0, 100.0)
    assert len(seed_field_lines([small], Bounds(200.0, 200.0))) == 1

    q = centered(ChargeSign.NEGATIVE, 2.5, 100.0, 100.0)
    assert len(seed_field_lines([q], Bounds(200.0, 200.0))) == 20

    odd = centered(ChargeSign.POSITIVE, 0.7, 100.0, 100.0)
    assert len(seed_field_lines([odd], Bounds(200.0, 200.0))) == 6
