"""Package-wide logging for graphtk.

Every algorithm module logs through ``get_logger(__name__)``, so all records
land under the ``graphtk`` logger. Searches and max-flow only emit DEBUG
records (exhaustion, augmentation counts, spanning forests); the clique search
warns about large inputs. The package logger owns one stdout handler, which
``configure_logging`` replaces and ``reset_logging`` removes.

Example:
    >>> import logging
    >>> from graphtk import max_clique
    >>> from graphtk.logging import enable_debug_logging, log_level
    >>> enable_debug_logging()
    >>> with log_level(logging.ERROR):
    ...     max_clique(big_graph)  # no size warning
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

PACKAGE_LOGGER = "graphtk"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks the handler installed here, leaving user-added handlers alone
_HANDLER_ATTR = "_graphtk_handler"


def _package_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            return handler
    return None


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Install (or replace) the package handler on the ``graphtk`` logger.

    Args:
        level: Level of the ``graphtk`` logger.
        fmt: Record format.
        stream: Output stream. Defaults to ``sys.stdout``.

    Returns:
        The installed handler.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    previous = _package_handler(package_logger)
    if previous is not None:
        package_logger.removeHandler(previous)

    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.setFormatter(logging.Formatter(fmt))
    setattr(handler, _HANDLER_ATTR, True)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # pytest's caplog listens on the root logger
    package_logger.propagate = True
    return handler


def get_logger(name: str) -> logging.Logger:
    """Return a logger below ``graphtk``, installing the package handler once.

    Module loggers keep level NOTSET so ``set_global_log_level`` reaches them.
    """
    if _package_handler(logging.getLogger(PACKAGE_LOGGER)) is None:
        configure_logging()
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the ``graphtk`` logger and, through it, every module."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


@contextmanager
def log_level(level: int) -> Iterator[None]:
    """Temporarily change the package log level."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    saved = package_logger.level
    package_logger.setLevel(level)
    try:
        yield
    finally:
        package_logger.setLevel(saved)


def reset_logging() -> None:
    """Remove the package handler and level; mainly for tests."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handler = _package_handler(package_logger)
    if handler is not None:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
