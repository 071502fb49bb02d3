"""Rendering of pagination log records through structlog."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "jsonapi_pagination"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


class _PaginationHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Handler installed by ``new_logger``; replaced on reconfiguration."""


def new_logger(
    level: str = "INFO",
    format: str = "json",
    stream: TextIO | None = None,
) -> structlog.stdlib.BoundLogger:
    """Route the library's stdlib records through structlog renderers.

    The params, query and pagination modules log with ``extra=`` fields;
    ``ExtraAdder`` lifts those into the rendered event.

    Args:
        level: log level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        format: output format ("json" or "text")
        stream: destination, stdout when omitted

    Returns:
        A structlog.stdlib.BoundLogger named after the package
    """
    renderer: structlog.types.Processor
    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *_SHARED_PROCESSORS],
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )
    handler = _PaginationHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(LOGGER_NAME)
    for old in [h for h in package_logger.handlers if isinstance(h, _PaginationHandler)]:
        package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    return structlog.stdlib.get_logger(LOGGER_NAME)
