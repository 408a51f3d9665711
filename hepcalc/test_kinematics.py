"""Unified FourMomentum and vector-algebra test suite.

This single file consolidates all tests for:
  - Construction (scalars, sequences, copies)
  - Derived kinematic quantities (pperp, rapidity, phi, mass)
  - In-place and pure additive algebra
  - Minkowski product laws
  - Non-finite propagation at the boundaries

Add new tests here as the value type grows.
"""

import math
import numpy as np
import pytest
from .kinematics import FourMomentum
from .algebra import dot, add, subtract, components_close


# ----------------------------- Utility ------------------------------------
def _assert_close(a, b, tol=1e-9, msg=""):
    assert abs(a - b) < tol, msg or f"Values differ: {a} vs {b} (tol={tol})"


VECTORS = [
    FourMomentum(200.0, 0.0, 0.0, 200.0),
    FourMomentum(90.0, 30.0, 30.0, 2000.0),
    FourMomentum(45.0, 15.0, 20.0, 1000.0),
    FourMomentum(1e6, 1e5, -2e5, 3e5),
    FourMomentum(-3.5, 0.25, -7.0, 1.5),
]


# ----------------------------- Construction -------------------------------
def test_construct_from_scalars_keeps_order():
    p = FourMomentum(90, 30, 31, 2000)
    assert (p.E, p.px, p.py, p.pz) == (90.0, 30.0, 31.0, 2000.0)


def test_construct_from_sequence_matches_scalars():
    assert FourMomentum.from_components([45, 15, 20, 1000]) == FourMomentum(45, 15, 20, 1000)
    assert FourMomentum.from_components((1.0, 2.0, 3.0, 4.0)) == FourMomentum(1, 2, 3, 4)
    assert FourMomentum.from_components(np.array([1.0, 2.0, 3.0, 4.0])) == FourMomentum(1, 2, 3, 4)


@pytest.mark.parametrize("components", [[], [1.0], [1.0, 2.0, 3.0], [1.0, 2.0, 3.0, 4.0, 5.0]])
def test_construct_from_wrong_length_raises(components):
    with pytest.raises(ValueError):
        FourMomentum.from_components(components)


def test_P_returns_independent_array():
    p = FourMomentum(45, 15, 20, 1000)
    arr = p.P()
    assert np.array_equal(arr, np.array([45.0, 15.0, 20.0, 1000.0]))
    arr[0] = -1.0
    assert p.E == 45.0


def test_copy_is_independent():
    p = FourMomentum(45, 15, 20, 1000)
    q = p.copy()
    q += FourMomentum(1, 1, 1, 1)
    assert p == FourMomentum(45, 15, 20, 1000)
    assert q == FourMomentum(46, 16, 21, 1001)


# -------------------------- Derived quantities ----------------------------
def test_derived_quantities_values():
    p = FourMomentum(90, 30, 40, 20)
    _assert_close(p.pperp2(), 2500.0)
    _assert_close(p.pperp(), 50.0)
    _assert_close(p.phi(), math.atan2(40, 30))
    _assert_close(p.m2(), 8100.0 - 900.0 - 1600.0 - 400.0)
    _assert_close(p.m(), math.sqrt(5200.0))
    _assert_close(p.rap(), 0.5 * math.log(110.0 / 70.0))


@pytest.mark.parametrize("p", VECTORS)
def test_derived_quantities_are_pure(p):
    before = p.P()
    for accessor in (p.pperp2, p.pperp, p.rap, p.phi, p.m2, p.m):
        first = accessor()
        second = accessor()
        assert first == second or (math.isnan(first) and math.isnan(second))
    assert np.array_equal(before, p.P())


def test_phi_of_zero_transverse_momentum_is_zero():
    assert FourMomentum(10, 0, 0, 5).phi() == 0.0


def test_rapidity_infinite_when_E_equals_pz():
    p = FourMomentum(200.0, 0.0, 0.0, 200.0)
    rap = p.rap()
    assert math.isinf(rap) and rap > 0


def test_mass_of_spacelike_vector_is_nan_without_raising():
    p = FourMomentum(1.0, 0.0, 0.0, 10.0)
    assert p.m2() < 0
    assert math.isnan(p.m())


# ------------------------------- Algebra ----------------------------------
def test_iadd_mutates_receiver_only():
    b = FourMomentum(90, 30, 30, 2000)
    c = FourMomentum(45, 15, 20, 1000)
    ref = b
    b += c
    assert b is ref
    assert b == FourMomentum(135, 45, 50, 3000)
    assert c == FourMomentum(45, 15, 20, 1000)


def test_isub_mutates_receiver_only():
    b = FourMomentum(90, 30, 30, 2000)
    c = FourMomentum(45, 15, 20, 1000)
    b -= c
    assert b == FourMomentum(45, 15, 10, 1000)
    assert c == FourMomentum(45, 15, 20, 1000)


def test_in_place_operators_chain():
    v = FourMomentum(1, 2, 3, 4)
    w = FourMomentum(0.5, 0.5, 0.5, 0.5)
    assert v.__iadd__(w).__iadd__(w) is v
    assert v == FourMomentum(2, 3, 4, 5)


@pytest.mark.parametrize("v", VECTORS)
@pytest.mark.parametrize("w", VECTORS)
def test_add_then_subtract_restores_receiver(v, w):
    original = v.copy()
    u = v.copy()
    u += w
    u -= w
    assert components_close(u, original, tol=1e-6)


def test_pure_add_subtract_leave_arguments():
    b = FourMomentum(90, 30, 30, 2000)
    c = FourMomentum(45, 15, 20, 1000)
    assert add(b, c) == FourMomentum(135, 45, 50, 3000)
    assert subtract(b, c) == FourMomentum(45, 15, 10, 1000)
    assert b + c == add(b, c)
    assert b - c == subtract(b, c)
    assert b == FourMomentum(90, 30, 30, 2000)
    assert c == FourMomentum(45, 15, 20, 1000)


@pytest.mark.parametrize("a", VECTORS)
@pytest.mark.parametrize("b", VECTORS)
def test_dot_is_commutative(a, b):
    assert dot(a, b) == dot(b, a)


@pytest.mark.parametrize("a", VECTORS)
def test_dot_with_self_is_mass_squared(a):
    assert dot(a, a) == a.m2()


def test_dot_reference_value():
    a = FourMomentum(200, 0, 0, 200)
    bc = FourMomentum(135, 45, 50, 3000)
    _assert_close(dot(a, bc), -573000.0)


def test_components_close_rejects_nan():
    v = FourMomentum(float("nan"), 0, 0, 0)
    assert not components_close(v, v)


# ---------------------------- Representation ------------------------------
def test_str_contains_components_and_mass_squared():
    text = str(FourMomentum(90, 30, 30, 2000))
    assert text.startswith("Four Momentum with components\n")
    assert "E = 90 px = 30 py = 30 pz = 2000" in text
    assert "|| (mass)^2 = -3993700" in text


def test_str_uses_nine_significant_digits():
    text = str(FourMomentum(1.0 / 3.0, 0, 0, 0))
    assert "E = 0.333333333 " in text
