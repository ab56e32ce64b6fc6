"""Tangent-space basis for a single triangle.

Derives the tangent used for normal mapping from a triangle's vertex positions
and matching (u, v) texture coordinates. Degenerate triangles or UV layouts
are not rejected: zero-length vectors stay zero (see ``vectors.normalize``),
so the result degrades to a zero vector instead of raising.
"""
from __future__ import annotations

from typing import NamedTuple

import numpy as np

from .vectors import as_vec3, cross, dot, normalize
from ..logging_utils import get_logger

__all__ = ['TangentBasis', 'triangle_normal', 'calculate_tri_tangent', 'calculate_tri_basis']

log = get_logger(__name__)


class TangentBasis(NamedTuple):
	tangent: np.ndarray
	binormal: np.ndarray
	normal: np.ndarray


def _sides(position1, position2, position3):
	p1 = as_vec3(position1)
	p2 = as_vec3(position2)
	p3 = as_vec3(position3)
	return p1 - p2, p3 - p1


def triangle_normal(position1, position2, position3) -> np.ndarray:
	"""Unit face normal ``normalize(cross(P3 - P1, P1 - P2))``."""
	side0, side1 = _sides(position1, position2, position3)
	return normalize(cross(side1, side0))


def calculate_tri_basis(position1, position2, position3, u1, v1, u2, v2, u3, v3) -> TangentBasis:
	"""Tangent, binormal and face normal of a triangle.

	Parameters
	----------
	position1, position2, position3 : array-like (3,)
		Vertex positions.
	u1, v1, u2, v2, u3, v3 : float
		Texture coordinates of the matching vertices, same winding.

	Returns
	-------
	TangentBasis
		When the UV mapping is mirrored for this triangle (the tangent/binormal
		cross product points away from the face normal), tangent and binormal
		are both negated.
	"""
	side0, side1 = _sides(position1, position2, position3)

	normal = normalize(cross(side1, side0))
	if not np.any(normal):
		log.debug('degenerate triangle: zero-length face normal')

	delta_v0 = v1 - v2
	delta_v1 = v3 - v1
	tangent = normalize(delta_v1 * side0 - delta_v0 * side1)

	delta_u0 = u1 - u2
	delta_u1 = u3 - u1
	binormal = normalize(delta_u1 * side0 - delta_u0 * side1)

	# Mirrored UVs: negate both
	if dot(cross(tangent, binormal), normal) < 0.0:
		tangent = -tangent
		binormal = -binormal

	return TangentBasis(tangent, binormal, normal)


def calculate_tri_tangent(position1, position2, position3, u1, v1, u2, v2, u3, v3) -> np.ndarray:
	"""Tangent vector of a triangle for normal mapping.

	Only the tangent is returned; the binormal computed for the handedness
	test is discarded. Use ``calculate_tri_basis`` to get the full frame.
	"""
	return calculate_tri_basis(position1, position2, position3, u1, v1, u2, v2, u3, v3).tangent
