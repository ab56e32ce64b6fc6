"""Domain-safe inverse trigonometry and scalar helpers.

None of these routines raise. Inputs that fall outside a function's domain
are clamped to the boundary result (``acos``/``asin``) or produce the IEEE-754
special value (``inv_sqrt``).
"""
from __future__ import annotations

import math

import numpy as np

from .angles import Radian
from .constants import PI, HALF_PI

__all__ = ['acos', 'asin', 'sign', 'approx_equals', 'inv_sqrt']


def acos(val: float) -> Radian:
	"""Arc-cosine clamped to the valid domain.

	Values at or above 1 give ``Radian(0)``, values at or below -1 (and NaN)
	give ``Radian(PI)``. Rounding in normalized dot products routinely lands a
	hair outside [-1, 1]; clamping keeps NaN out of downstream angles.
	"""
	if -1.0 < val:
		if val < 1.0:
			return Radian(math.acos(val))
		return Radian(0.0)
	return Radian(PI)


def asin(val: float) -> Radian:
	"""Arc-sine clamped to the valid domain.

	Values at or above 1 give ``Radian(HALF_PI)``, values at or below -1 (and
	NaN) give ``Radian(-HALF_PI)``.
	"""
	if -1.0 < val:
		if val < 1.0:
			return Radian(math.asin(val))
		return Radian(HALF_PI)
	return Radian(-HALF_PI)


def sign(val: float) -> float:
	if val > 0.0:
		return 1.0
	if val < 0.0:
		return -1.0
	return 0.0


def approx_equals(a: float, b: float, tolerance: float) -> bool:
	"""True when ``|b - a| <= tolerance``; a zero tolerance is exact equality."""
	return abs(b - a) <= tolerance


def inv_sqrt(val: float) -> float:
	"""Exact reciprocal square root ``1 / sqrt(val)``.

	No approximation and no domain check: zero gives ``inf`` and negative
	input gives ``nan``, silently.
	"""
	with np.errstate(divide='ignore', invalid='ignore'):
		return float(np.float64(1.0) / np.sqrt(np.float64(val)))
