import math

import numpy as np
import pytest

from rendermath.core.trig import sign, approx_equals, inv_sqrt


def test_sign_values():
    assert sign(5.0) == 1.0
    assert sign(-3.2) == -1.0
    assert sign(0.0) == 0.0
    assert sign(-0.0) == 0.0
    assert sign(1e-300) == 1.0
    assert sign(float('-inf')) == -1.0


def test_sign_of_nan_is_zero():
    assert sign(float('nan')) == 0.0


class TestApproxEquals:

    def test_within_and_outside_tolerance(self):
        assert approx_equals(1.0, 1.05, 0.1)
        assert not approx_equals(1.0, 1.2, 0.1)

    def test_boundary_is_inclusive(self):
        assert approx_equals(0.0, 0.5, 0.5)

    def test_symmetric(self):
        rng = np.random.RandomState(7)
        for a, b, t in rng.uniform(-10.0, 10.0, size=(200, 3)):
            t = abs(t)
            assert approx_equals(a, b, t) == approx_equals(b, a, t)

    def test_reflexive_at_zero_tolerance(self):
        for x in (0.0, -1.5, 3.25, 1e300, -1e-300):
            assert approx_equals(x, x, 0.0)

    def test_zero_tolerance_is_exact(self):
        assert not approx_equals(1.0, 1.0 + 1e-15, 0.0)


class TestInvSqrt:

    def test_known_values(self):
        assert inv_sqrt(4.0) == pytest.approx(0.5, abs=1e-6)
        assert inv_sqrt(1.0) == pytest.approx(1.0, abs=1e-6)
        assert inv_sqrt(0.25) == pytest.approx(2.0, abs=1e-6)

    def test_exact_not_approximated(self):
        for val in (2.0, 3.0, 10.0, 12345.678):
            assert inv_sqrt(val) == pytest.approx(1.0 / math.sqrt(val), rel=1e-15)

    def test_zero_gives_infinity(self):
        assert inv_sqrt(0.0) == float('inf')

    def test_negative_gives_nan(self):
        assert math.isnan(inv_sqrt(-1.0))

    def test_returns_plain_float(self):
        assert type(inv_sqrt(9.0)) is float
