"""
Package logger for geonav. Warnings are shown by default; degenerate geometry
(non-intersecting paths, unreachable parallels) is reported at DEBUG.
"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('geonav')
LOGGER.setLevel(logging.WARNING)

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_handler)

_ALREADY_WARNED = set()


def warn_once(warning: str):
    """Logs a warning the first time a given message is seen, and never again"""
    if warning in _ALREADY_WARNED:
        return

    LOGGER.warning(warning)
    _ALREADY_WARNED.add(warning)
