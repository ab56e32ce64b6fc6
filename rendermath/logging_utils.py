"""Logging utilities for rendermath.

Keeps every rendermath logger under the ``rendermath`` namespace without
touching the process root logger. Library code obtains loggers via
get_logger(); applications opt into output with configure_logging().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_ROOT_NAME = 'rendermath'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_package_root() -> logging.Logger:
    """Give the 'rendermath' logger a single stdout handler and isolate it
    from the process root logger. Returns the 'rendermath' logger.
    """
    pkg_root = logging.getLogger(_ROOT_NAME)
    has_stream = any(not isinstance(h, logging.NullHandler) for h in pkg_root.handlers)
    if not has_stream:
        # The package __init__ installs a NullHandler; swap it for a real one
        for h in list(pkg_root.handlers):
            pkg_root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        pkg_root.addHandler(handler)
    pkg_root.propagate = False
    return pkg_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = getattr(logging, str(level).upper(), None)
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> logging.Logger:
    """Set the level of the 'rendermath' logger family.

    This does NOT modify the process root logger.
    """
    pkg_root = _ensure_package_root()
    pkg_root.setLevel(_to_level(level))
    return pkg_root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'rendermath' namespace.

    Names outside the namespace are prefixed with ``rendermath.``. Without an
    explicit level the logger is left at NOTSET so it inherits whatever
    configure_logging() set on the package root.
    """
    _ensure_package_root()
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
