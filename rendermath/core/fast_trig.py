"""Fast polynomial approximations of the trigonometric functions.

Each function comes in two tiers. Tier 0 uses a short coefficient table (fewer
multiply-adds, lower accuracy); tier 1 a longer one (more multiply-adds, higher
accuracy). Every (function, tier) pair is a constant coefficient table plus a
variant tag, evaluated by one shared Horner routine:

======  ===============  =====================================  ==================
kind    polynomial in    combined as                            documented domain
======  ===============  =====================================  ==================
odd     ``val*val``      ``poly * val``                         sin, tan, atan
even    ``val*val``      ``poly``                               cos
acos    ``val``          ``sqrt(|1 - val|) * poly``             [0, 1]
asin    ``val``          ``HALF_PI - sqrt(|1 - val|) * poly``   [0, 1]
======  ===============  =====================================  ==================

Documented domains: sin and cos [-HALF_PI, HALF_PI], tan [-PI/4, PI/4],
asin and acos [0, 1], atan [-1, 1]. Outside them the result drifts away from
the reference function; nothing is checked or raised. asin and acos take
arguments in [-1, 1], but no reflection is applied to negative input, so
on [-1, 0) they drift (``fast_acos1(-1.0)`` is about 2.80, not PI).

Approximate maximum absolute error over the documented domain:

- sin: 1.7e-4 (tier 0), 2.3e-9 (tier 1)
- cos: 1.2e-3 (tier 0), 1.0e-9 (tier 1)
- tan: 8.1e-4 (tier 0), 1.9e-8 (tier 1)
- asin/acos: 6.8e-5 (tier 0), 2.0e-8 (tier 1)
- atan: 1.0e-5 (tier 0), 2.0e-8 (tier 1)
"""
from __future__ import annotations

import math
from typing import Callable, NamedTuple, Sequence

from .constants import HALF_PI

__all__ = [
	'polynomial_eval', 'FastTrigSet', 'fast_trig_set',
	'fast_sin0', 'fast_sin1', 'fast_cos0', 'fast_cos1', 'fast_tan0', 'fast_tan1',
	'fast_asin0', 'fast_asin1', 'fast_acos0', 'fast_acos1', 'fast_atan0', 'fast_atan1',
]

# Coefficient tables, highest degree first.
_SIN0 = (7.61e-03, -1.6605e-01, 1.0)
_SIN1 = (-2.39e-08, 2.7526e-06, -1.98409e-04, 8.3333315e-03, -1.666666664e-01, 1.0)

_COS0 = (3.705e-02, -4.967e-01, 1.0)
_COS1 = (-2.605e-07, 2.47609e-05, -1.3888397e-03, 4.16666418e-02, -4.999999963e-01, 1.0)

_TAN0 = (2.033e-01, 3.1755e-01, 1.0)
_TAN1 = (
	9.5168091e-03, 2.900525e-03, 2.45650893e-02, 5.33740603e-02,
	1.333923995e-01, 3.333314036e-01, 1.0,
)

# asin and acos share their tables; only the final combination differs.
_ARC0 = (-0.0187293, 0.0742610, -0.2121144, 1.5707288)
_ARC1 = (
	-0.0012624911, 0.0066700901, -0.0170881256, 0.0308918810,
	-0.0501743046, 0.0889789874, -0.2145988016, 1.5707963050,
)

_ATAN0 = (0.0208351, -0.085133, 0.180141, -0.3302995, 0.999866)
_ATAN1 = (
	0.0028662257, -0.0161657367, 0.0429096138, -0.0752896400,
	0.1065626393, -0.1420889944, 0.1999355085, -0.3333314528, 1.0,
)


def polynomial_eval(coeffs: Sequence[float], x: float) -> float:
	"""Evaluate a polynomial by Horner's method.

	Parameters
	----------
	coeffs : sequence of float
		Coefficients ordered from the highest degree down to the constant term.
	x : float
		Evaluation point.
	"""
	result = coeffs[0]
	for c in coeffs[1:]:
		result = result * x + c
	return result


def _odd(coeffs, val):
	return polynomial_eval(coeffs, val * val) * val


def _even(coeffs, val):
	return polynomial_eval(coeffs, val * val)


def _arc_cos(coeffs, val):
	root = math.sqrt(abs(1.0 - val))
	return root * polynomial_eval(coeffs, val)


def _arc_sin(coeffs, val):
	root = math.sqrt(abs(1.0 - val))
	return HALF_PI - root * polynomial_eval(coeffs, val)


def fast_sin0(val: float) -> float:
	return _odd(_SIN0, val)


def fast_sin1(val: float) -> float:
	return _odd(_SIN1, val)


def fast_cos0(val: float) -> float:
	return _even(_COS0, val)


def fast_cos1(val: float) -> float:
	return _even(_COS1, val)


def fast_tan0(val: float) -> float:
	return _odd(_TAN0, val)


def fast_tan1(val: float) -> float:
	return _odd(_TAN1, val)


def fast_asin0(val: float) -> float:
	return _arc_sin(_ARC0, val)


def fast_asin1(val: float) -> float:
	return _arc_sin(_ARC1, val)


def fast_acos0(val: float) -> float:
	return _arc_cos(_ARC0, val)


def fast_acos1(val: float) -> float:
	return _arc_cos(_ARC1, val)


def fast_atan0(val: float) -> float:
	return _odd(_ATAN0, val)


def fast_atan1(val: float) -> float:
	return _odd(_ATAN1, val)


class FastTrigSet(NamedTuple):
	"""The six fast approximations of one accuracy tier."""
	sin: Callable[[float], float]
	cos: Callable[[float], float]
	tan: Callable[[float], float]
	asin: Callable[[float], float]
	acos: Callable[[float], float]
	atan: Callable[[float], float]


_TIERS = (
	FastTrigSet(fast_sin0, fast_cos0, fast_tan0, fast_asin0, fast_acos0, fast_atan0),
	FastTrigSet(fast_sin1, fast_cos1, fast_tan1, fast_asin1, fast_acos1, fast_atan1),
)


def fast_trig_set(tier: int) -> FastTrigSet:
	"""Return the approximation functions for ``tier`` (0 = faster, 1 = more accurate)."""
	if isinstance(tier, bool) or tier not in (0, 1):
		raise ValueError(f"unknown fast trig tier {tier!r}; expected 0 or 1")
	return _TIERS[int(tier)]
