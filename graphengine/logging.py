"""Package-wide logging for graphengine.

Every module asks :func:`get_logger` for a child of the ``graphengine``
logger. Only that parent owns a handler; children stay at NOTSET and follow
whatever level the parent is given through :func:`set_global_log_level`.

Algorithms wrap their main loop in :func:`algorithm_span`, which emits DEBUG
records on entry and exit with the elapsed time and any counters the
algorithm reports.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from time import perf_counter
from typing import Any, Dict, Iterator, Optional

ROOT_LOGGER_NAME = "graphengine"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _package_logger() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the package handler once.

    Later calls do nothing until :func:`reset_logging` runs, so a handler
    passed by a test or an application wins over the import-time default.

    Args:
        level: Level of the ``graphengine`` logger.
        format_string: Record format; `DEFAULT_FORMAT` if omitted.
        handler: Destination; a stdout StreamHandler if omitted.
    """
    global _configured
    if _configured:
        return

    package_logger = _package_logger()
    package_logger.handlers.clear()
    package_logger.setLevel(level)

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)
    # caplog listens on the interpreter root
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger for module ``name``, levelled by the ``graphengine`` parent."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and each of its handlers."""
    setup_root_logger()
    package_logger = _package_logger()
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Forget the handler so the next call configures from scratch."""
    global _configured
    _configured = False
    package_logger = _package_logger()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@contextmanager
def algorithm_span(
    logger: logging.Logger, name: str, **fields: Any
) -> Iterator[Dict[str, Any]]:
    """Log the start and end of an algorithm run at DEBUG level.

    The yielded dict is a scratchpad: counters the algorithm stores in it are
    appended to the closing record. Nothing is formatted when DEBUG is off.

    Args:
        logger: Logger of the calling module.
        name: Algorithm name, e.g. ``"dijkstra"``.
        **fields: Input description such as vertex and edge counts.

    Yields:
        Mutable dict of counters reported when the span closes.
    """
    stats: Dict[str, Any] = {}
    if not logger.isEnabledFor(logging.DEBUG):
        yield stats
        return

    logger.debug("%s start: %s", name, _format_fields(fields))
    started = perf_counter()
    try:
        yield stats
    finally:
        elapsed_ms = (perf_counter() - started) * 1000.0
        logger.debug(
            "%s done in %.3f ms: %s", name, elapsed_ms, _format_fields(stats)
        )


def _format_fields(fields: Dict[str, Any]) -> str:
    if not fields:
        return "-"
    return ", ".join(f"{key}={value}" for key, value in fields.items())


setup_root_logger()
