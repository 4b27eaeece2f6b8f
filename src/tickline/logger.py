"""Structured logging using structlog.

Library modules log through stdlib ``logging``. :func:`setup_logging` puts a
single handler on the root logger whose ``ProcessorFormatter`` renders both
structlog events and those stdlib records, so a fallback warning from the
label search looks the same as any other event.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

HANDLER_NAME = "tickline"

# Applied to structlog events and to records from plain stdlib loggers.
_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def setup_logging(*, debug: bool = False, json_output: bool = False) -> None:
    """Configure structlog and the root logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        debug: Enable DEBUG level logging.
        json_output: Use JSON output format instead of console.
    """
    level = logging.DEBUG if debug else logging.INFO
    renderer: Any = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    remove_handler(root)
    root.addHandler(handler)
    root.setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def remove_handler(logger: logging.Logger | None = None) -> None:
    """Detach the handler installed by :func:`setup_logging`, if any."""
    logger = logger or logging.getLogger()
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()


def get_logger(name: str = "tickline", **kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name, **kwargs)
