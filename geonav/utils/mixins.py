"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Mixin class for logging. Gives each instance a logger named after its module
    and class, which sits beneath the package logger in the logging hierarchy, so
    its verbosity follows geonav.LOGGER unless set separately.

    Args:
        logstr:
            (Optional) A suffix appended to the class name in the logger name
    """
    logger: logging.Logger

    def __init__(self, logstr: Optional[str] = None):
        _class = self.__class__
        classname = _class.__name__
        if logstr:
            classname += f'.{logstr}'

        self.logger = logging.getLogger(f'{_class.__module__}.{classname}')
