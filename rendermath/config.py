"""Configuration object for callers that pick an accuracy tier and tolerance once."""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping

from .core.constants import EPS_APPROX
from .core.fast_trig import FastTrigSet, fast_trig_set
from .core.trig import approx_equals
from .logging_utils import configure_logging


@dataclass(frozen=True)
class MathConfig:
    """Caller-side defaults for the numeric routines.

    Attributes
    ----------
    fast_trig_tier : int
        Approximation tier returned by ``fast_trig()``: 0 (faster) or 1 (more accurate).
    approx_tolerance : float
        Tolerance applied by ``approx_equals()``; must be non-negative.
    log_level : str
        Level applied to the 'rendermath' logger by ``configure_logging()``.
    """
    fast_trig_tier: int = 0
    approx_tolerance: float = EPS_APPROX
    log_level: str = 'WARNING'

    def __post_init__(self):
        if isinstance(self.fast_trig_tier, bool) or self.fast_trig_tier not in (0, 1):
            raise ValueError(f"fast_trig_tier must be 0 or 1, got {self.fast_trig_tier!r}")
        if not self.approx_tolerance >= 0.0:
            raise ValueError(f"approx_tolerance must be >= 0, got {self.approx_tolerance!r}")
        if not isinstance(self.log_level, int) and not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ValueError(f"unknown log_level {self.log_level!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'MathConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown MathConfig keys: {', '.join(unknown)}")
        return cls(**dict(data))

    def fast_trig(self) -> FastTrigSet:
        return fast_trig_set(self.fast_trig_tier)

    def approx_equals(self, a: float, b: float) -> bool:
        return approx_equals(a, b, self.approx_tolerance)

    def configure_logging(self):
        return configure_logging(self.log_level)


__all__ = ['MathConfig']
