"""
Logging utilities for PyFmincg.

Every module obtains a namespaced logger through get_logger(__name__). The
loggers write to stderr at WARNING level by default, so the minimizer is
silent unless the caller asks for progress with set_log_level("DEBUG").
"""

import logging
import sys
from typing import Dict, Optional, Union

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = '[%(levelname)s] %(name)s: %(message)s'

_loggers: Dict[str, logging.Logger] = {}


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger under the 'pyfmincg' namespace.

    Parameters
    ----------
    name : str, optional
        Logger name, typically __name__ of the calling module

    Returns
    -------
    logging.Logger
        Cached logger with a single stderr handler

    Examples
    --------
    >>> logger = get_logger(__name__)
    >>> logger.debug("iteration %4i | cost %4.6e", 1, 0.5)
    """
    if name is None:
        name = "pyfmincg"
    logger_name = name if name.startswith("pyfmincg") else f"pyfmincg.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """
    Set the level of every PyFmincg logger.

    Parameters
    ----------
    level : int or str
        logging.DEBUG, logging.INFO, ... or their names ('DEBUG', 'INFO')
    """
    global _DEFAULT_LEVEL
    level = _resolve_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    format_string: Optional[str] = None,
    stream=None
) -> None:
    """
    Replace the handlers of every PyFmincg logger.

    Parameters
    ----------
    level : int or str, optional
        Logging level (default: WARNING)
    format_string : str, optional
        Record format (default: '[%(levelname)s] %(name)s: %(message)s')
    stream : file-like, optional
        Output stream (default: sys.stderr)
    """
    global _DEFAULT_LEVEL
    level = _resolve_level(level)
    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level
