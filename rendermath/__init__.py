"""Public package API for rendermath.

Scalar math primitives for a real-time rendering pipeline: domain-safe inverse
trigonometry, two-tier fast trigonometric approximations, scalar helpers and
the per-triangle tangent builder used for normal mapping.

Example
-------
    from rendermath import acos, fast_sin1, calculate_tri_tangent

The implementation lives in ``rendermath.core.*``; rely on this layer for
public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:  # Python 3.8+ runtime version export
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("rendermath")  # populated when installed
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('rendermath.core.constants')
_angles = _imp('rendermath.core.angles')
_trig = _imp('rendermath.core.trig')
_fast = _imp('rendermath.core.fast_trig')
_vec = _imp('rendermath.core.vectors')
_tan = _imp('rendermath.core.tangent')

# Constants
POS_INFINITY = _const.POS_INFINITY
NEG_INFINITY = _const.NEG_INFINITY
PI = _const.PI
TWO_PI = _const.TWO_PI
HALF_PI = _const.HALF_PI
DEG2RAD = _const.DEG2RAD
RAD2DEG = _const.RAD2DEG
LOG2 = _const.LOG2

# Angle types
Radian = _angles.Radian
Degree = _angles.Degree

# Safe inverse trig and scalar helpers
acos = _trig.acos
asin = _trig.asin
sign = _trig.sign
approx_equals = _trig.approx_equals
inv_sqrt = _trig.inv_sqrt

# Fast approximations
fast_sin0 = _fast.fast_sin0
fast_sin1 = _fast.fast_sin1
fast_cos0 = _fast.fast_cos0
fast_cos1 = _fast.fast_cos1
fast_tan0 = _fast.fast_tan0
fast_tan1 = _fast.fast_tan1
fast_asin0 = _fast.fast_asin0
fast_asin1 = _fast.fast_asin1
fast_acos0 = _fast.fast_acos0
fast_acos1 = _fast.fast_acos1
fast_atan0 = _fast.fast_atan0
fast_atan1 = _fast.fast_atan1
fast_trig_set = _fast.fast_trig_set
FastTrigSet = _fast.FastTrigSet

# Tangent space
calculate_tri_tangent = _tan.calculate_tri_tangent
calculate_tri_basis = _tan.calculate_tri_basis
triangle_normal = _tan.triangle_normal
TangentBasis = _tan.TangentBasis

from .config import MathConfig  # noqa: E402
from .logging_utils import configure_logging, get_logger  # noqa: E402

# Namespace submodules
constants = _const
angles = _angles
trig = _trig
fast_trig = _fast
vectors = _vec
tangent = _tan

__all__ = [
    '__version__',
    # constants
    'POS_INFINITY', 'NEG_INFINITY', 'PI', 'TWO_PI', 'HALF_PI', 'DEG2RAD', 'RAD2DEG', 'LOG2',
    # angles
    'Radian', 'Degree',
    # safe trig / scalar helpers
    'acos', 'asin', 'sign', 'approx_equals', 'inv_sqrt',
    # fast approximations
    'fast_sin0', 'fast_sin1', 'fast_cos0', 'fast_cos1', 'fast_tan0', 'fast_tan1',
    'fast_asin0', 'fast_asin1', 'fast_acos0', 'fast_acos1', 'fast_atan0', 'fast_atan1',
    'fast_trig_set', 'FastTrigSet',
    # tangent space
    'calculate_tri_tangent', 'calculate_tri_basis', 'triangle_normal', 'TangentBasis',
    # configuration / logging
    'MathConfig', 'configure_logging', 'get_logger',
    # submodules
    'constants', 'angles', 'trig', 'fast_trig', 'vectors', 'tangent',
]
