"""3-vector helpers over numpy arrays.

A 3-vector is a float64 ``numpy.ndarray`` of shape ``(3,)``. Helpers return new
arrays and never modify their arguments.
"""
from __future__ import annotations

import numpy as np

from .constants import EPS_LENGTH

__all__ = ['as_vec3', 'length', 'normalize', 'cross', 'dot']


def as_vec3(v) -> np.ndarray:
	arr = np.asarray(v, dtype=np.float64)
	if arr.shape != (3,):
		raise ValueError(f"expected a 3-vector, got shape {arr.shape}")
	return arr


def length(v) -> float:
	return float(np.linalg.norm(as_vec3(v)))


def normalize(v) -> np.ndarray:
	"""Return ``v`` scaled to unit length.

	A zero-length vector is returned unchanged (as a copy) instead of being
	divided by zero, so degenerate input yields a zero vector rather than NaN.
	"""
	arr = as_vec3(v)
	n = float(np.linalg.norm(arr))
	if n > EPS_LENGTH:
		return arr / n
	return arr.copy()


def cross(a, b) -> np.ndarray:
	return np.cross(as_vec3(a), as_vec3(b))


def dot(a, b) -> float:
	return float(np.dot(as_vec3(a), as_vec3(b)))
