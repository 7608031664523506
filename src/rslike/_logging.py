"""Structured logging for rslike.

Every module logs through ``get_logger(__name__)``. The returned structlog
logger sits on top of a standard library logger under the ``rslike``
namespace, so events obey whatever level and handlers the application
gives that namespace. Out of the box the namespace inherits the root
logger's WARNING level and the debug diagnostics emitted by containers,
Bind and Async are dropped by ``filter_by_level`` before any processing.

``configure_logging`` is the opt-in: it gives the ``rslike`` namespace a
level and its own stderr handler rendering JSON or console lines, and
leaves the application's root logger alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = ['LIBRARY_LOGGER', 'configure_logging', 'get_logger']

LIBRARY_LOGGER = 'rslike'

# Handler installed by configure_logging, replaced on every call
_handler: logging.Handler | None = None


def _event_processors() -> list[Any]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def get_logger(name: str) -> Any:
    """Return a structlog BoundLogger for the stdlib logger called name.

    Args:
        name: Logger name, usually the caller's ``__name__``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_event_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> logging.Handler:
    """Route rslike events to stderr at the given level.

    Calling it again swaps the handler installed by the previous call.
    Events stop propagating to the root logger while the handler is in
    place, so they are rendered once.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", ...). Unknown
            names fall back to INFO.
        json_output: Render JSON lines when True, console lines otherwise.

    Returns:
        The installed handler.

    Example:
        ```python
        from rslike import Bind, configure_logging

        configure_logging('DEBUG', json_output=False)
        Bind(int)('x')  # stderr: [debug] bind_captured_exception ...
        ```
    """
    global _handler  # noqa: PLW0603

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_event_processors(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None:
        library_logger.removeHandler(_handler)
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False
    _handler = handler
    return handler
