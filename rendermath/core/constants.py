"""Central math constants and small numeric tolerances.

Every module that needs pi, its fractions or a unit-conversion factor reads it
from here so the values are computed once and never scattered as literals.
"""
from __future__ import annotations

import math

# Infinities
POS_INFINITY: float = float('inf')
NEG_INFINITY: float = -float('inf')

# Pi and derivatives
PI: float = 4.0 * math.atan(1.0)
TWO_PI: float = 2.0 * PI
HALF_PI: float = 0.5 * PI

# Unit conversion
DEG2RAD: float = PI / 180.0
RAD2DEG: float = 180.0 / PI

LOG2: float = math.log(2.0)

# Tolerances
EPS_APPROX: float = 1e-6   # default approx_equals tolerance used by MathConfig
EPS_LENGTH: float = 0.0    # vectors at or below this length are not normalized

__all__ = [
    'POS_INFINITY', 'NEG_INFINITY',
    'PI', 'TWO_PI', 'HALF_PI',
    'DEG2RAD', 'RAD2DEG', 'LOG2',
    'EPS_APPROX', 'EPS_LENGTH',
]
