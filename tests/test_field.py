import numpy as np
import pytest
from charge_sim.constants import K_COULOMB, CHARGE_CENTER_OFFSET
from charge_sim.core.field import (
    field_at, potential_at, evaluate_field_and_potential, potential_grid
)
from charge_sim.types import Charge, ChargeSign
from charge_sim.util import rotate


def centered(sign, magnitude, cx, cy):
    """Charge whose glyph center sits at (cx, cy)."""
    return Charge.create(sign, magnitude, cx - CHARGE_CENTER_OFFSET, cy - CHARGE_CENTER_OFFSET)


def test_no_charges_gives_zero():
    for x, y in [(0, 0), (123.4, 56.7), (-50, 1e4)]:
        e, v = evaluate_field_and_potential([], x, y)
        assert e.x == 0.0 and e.y == 0.0 and e.magnitude == 0.0
        assert v == 0.0


def test_positive_charge_points_outward():
    """
    Single +1 charge at (400, 250), query 50 units to its right:
      E = k q / r² along +x,  V = k q / r
    """
    q = centered(ChargeSign.POSITIVE, 1.0, 400.0, 250.0)
    e, v = evaluate_field_and_potential([q], 450.0, 250.0)

    assert e.x > 0
    assert e.y == pytest.approx(0.0, abs=1e-12)
    assert e.magnitude == pytest.approx(K_COULOMB / 2500.0, rel=1e-12)
    assert v > 0
    assert v == pytest.approx(K_COULOMB / 50.0, rel=1e-12)


def test_negative_charge_points_inward():
    q = centered(ChargeSign.NEGATIVE, 2.0, 400.0, 250.0)
    e, v = evaluate_field_and_potential([q], 450.0, 250.0)

    assert e.x < 0
    assert v == pytest.approx(-2.0 * K_COULOMB / 50.0, rel=1e-12)


def test_field_guard_skips_close_charge():
    """Inside r² < 100 the charge adds nothing; at r = 10 it counts again."""
    q = centered(ChargeSign.POSITIVE, 1.0, 100.0, 100.0)

    assert field_at([q], 105.0, 100.0).magnitude == 0.0
    assert field_at([q], 109.9, 100.0).magnitude == 0.0
    assert field_at([q], 110.0, 100.0).magnitude == pytest.approx(K_COULOMB / 100.0)


def test_potential_guard_skips_close_charge():
    q = centered(ChargeSign.POSITIVE, 1.0, 100.0, 100.0)

    assert potential_at([q], 100.0, 100.0) == 0.0
    assert potential_at([q], 109.0, 100.0) == 0.0
    assert potential_at([q], 110.0, 100.0) == pytest.approx(K_COULOMB / 10.0)


def test_symmetric_pair_cancels_field_but_not_potential():
    a = centered(ChargeSign.POSITIVE, 1.0, 300.0, 250.0)
    b = centered(ChargeSign.POSITIVE, 1.0, 500.0, 250.0)
    e, v = evaluate_field_and_potential([a, b], 400.0, 250.0)

    assert e.magnitude == pytest.approx(0.0, abs=1e-9)
    assert v == pytest.approx(2.0 * K_COULOMB / 100.0, rel=1e-12)


def test_opposite_pair_cancels_potential():
    a = centered(ChargeSign.POSITIVE, 1.0, 300.0, 250.0)
    b = centered(ChargeSign.NEGATIVE, 1.0, 500.0, 250.0)
    e, v = evaluate_field_and_potential([a, b], 400.0, 250.0)

    assert v == pytest.approx(0.0, abs=1e-6)
    # both contributions point toward the negative charge
    assert e.magnitude == pytest.approx(2.0 * K_COULOMB / 1e4, rel=1e-12)


def test_magnitude_is_norm_of_sum():
    """Perpendicular contributions of size m combine to m·√2, not 2m."""
    above = centered(ChargeSign.POSITIVE, 1.0, 400.0, 150.0)
    left = centered(ChargeSign.POSITIVE, 1.0, 300.0, 250.0)
    e = field_at([above, left], 400.0, 250.0)

    m = K_COULOMB / 1e4
    assert e.x == pytest.approx(m)
    assert e.y == pytest.approx(m)
    assert e.magnitude == pytest.approx(m * np.sqrt(2.0))
    assert e.magnitude == pytest.approx(np.hypot(e.x, e.y))


@pytest.mark.parametrize("theta", [0.3, np.pi / 2, 2.0, -1.1])
def test_rotation_invariance(theta):
    """Rotating the charge center and the query point together keeps |E|."""
    c = np.array([120.0, 40.0])
    p = np.array([170.0, -25.0])
    e0 = field_at([centered(ChargeSign.NEGATIVE, 3.0, *c)], *p)
    c1, p1 = rotate(c, theta), rotate(p, theta)
    e1 = field_at([centered(ChargeSign.NEGATIVE, 3.0, *c1)], *p1)

    assert np.isclose(e0.magnitude, e1.magnitude, rtol=1e-9)


def test_reads_current_position():
    q = centered(ChargeSign.POSITIVE, 1.0, 100.0, 100.0)
    before = potential_at([q], 200.0, 100.0)

    q.move_to(150.0 - CHARGE_CENTER_OFFSET, 100.0 - CHARGE_CENTER_OFFSET)
    after = potential_at([q], 200.0, 100.0)

    assert after == pytest.approx(2.0 * before)


def test_potential_grid_matches_pointwise():
    charges = [
        centered(ChargeSign.POSITIVE, 1.0, 35.0, 42.0),
        centered(ChargeSign.NEGATIVE, 2.0, 81.0, 17.0),
    ]
    xs = np.arange(0.0, 120.0, 10.0)
    ys = np.arange(0.0, 60.0, 10.0)
    grid = potential_grid(charges, xs, ys)

    assert grid.shape == (len(xs), len(ys))
    expected = np.array([[potential_at(charges, x, y) for y in ys] for x in xs])
    assert np.allclose(grid, expected, rtol=1e-12, atol=0.0)


def test_evaluation_is_deterministic():
    charges = [centered(ChargeSign.POSITIVE, 1.0, 10.0, 20.0),
               centered(ChargeSign.NEGATIVE, 1.0, 90.0, 60.0)]
    first = evaluate_field_and_potential(charges, 47.0, 33.0)
    second = evaluate_field_and_potential(charges, 47.0, 33.0)
    assert first == second
