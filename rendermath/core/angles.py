"""Angle value types.

``Radian`` and ``Degree`` are immutable single-field wrappers around a float.
They keep radians and degrees apart at API boundaries: arithmetic between the
two (or with a bare float) raises ``TypeError``; crossing units always goes
through an explicit conversion.
"""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

from .constants import DEG2RAD, RAD2DEG


@dataclass(frozen=True, order=True)
class Radian:
    """An angle in radians."""
    value: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'value', float(self.value))

    @classmethod
    def from_degrees(cls, degrees: float) -> 'Radian':
        return cls(float(degrees) * DEG2RAD)

    @classmethod
    def from_degree(cls, degree: 'Degree') -> 'Radian':
        return cls(degree.value * DEG2RAD)

    def value_radians(self) -> float:
        return self.value

    def value_degrees(self) -> float:
        return self.value * RAD2DEG

    def to_degree(self) -> 'Degree':
        return Degree(self.value * RAD2DEG)

    def __float__(self) -> float:
        return self.value

    def __neg__(self) -> 'Radian':
        return Radian(-self.value)

    def __pos__(self) -> 'Radian':
        return self

    def __add__(self, other):
        if not isinstance(other, Radian):
            return NotImplemented
        return Radian(self.value + other.value)

    def __sub__(self, other):
        if not isinstance(other, Radian):
            return NotImplemented
        return Radian(self.value - other.value)

    def __mul__(self, scalar):
        if isinstance(scalar, (Radian, Degree)) or not isinstance(scalar, Real):
            return NotImplemented
        return Radian(self.value * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, (Radian, Degree)) or not isinstance(scalar, Real):
            return NotImplemented
        return Radian(self.value / scalar)

    def __repr__(self) -> str:
        return f'Radian({self.value!r})'


@dataclass(frozen=True, order=True)
class Degree:
    """An angle in degrees."""
    value: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'value', float(self.value))

    @classmethod
    def from_radian(cls, radian: Radian) -> 'Degree':
        return cls(radian.value * RAD2DEG)

    def value_degrees(self) -> float:
        return self.value

    def value_radians(self) -> float:
        return self.value * DEG2RAD

    def to_radian(self) -> Radian:
        return Radian(self.value * DEG2RAD)

    def __float__(self) -> float:
        return self.value

    def __neg__(self) -> 'Degree':
        return Degree(-self.value)

    def __pos__(self) -> 'Degree':
        return self

    def __add__(self, other):
        if not isinstance(other, Degree):
            return NotImplemented
        return Degree(self.value + other.value)

    def __sub__(self, other):
        if not isinstance(other, Degree):
            return NotImplemented
        return Degree(self.value - other.value)

    def __mul__(self, scalar):
        if isinstance(scalar, (Radian, Degree)) or not isinstance(scalar, Real):
            return NotImplemented
        return Degree(self.value * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, (Radian, Degree)) or not isinstance(scalar, Real):
            return NotImplemented
        return Degree(self.value / scalar)

    def __repr__(self) -> str:
        return f'Degree({self.value!r})'


__all__ = ['Radian', 'Degree']
