"""
Optional structlog output for the ``gmgn`` logger namespace.

The library only emits events (``gmgn_request``, ``gmgn_response``,
``gmgn_request_failed``). Applications that already configure logging can
ignore this module; others call ``setup_logging`` once.
"""

import logging
import sys
from typing import Optional, TextIO

import structlog

from .config import settings

LOGGER_NAME = "gmgn"


def setup_logging(
    log_level: Optional[str] = None,
    *,
    json_logs: Optional[bool] = None,
    stream: TextIO = sys.stdout,
) -> logging.Logger:
    """Attach a structlog-formatted handler to the ``gmgn`` logger.

    The root logger and other libraries are left untouched. JSON lines are the
    default; DEBUG switches to the console renderer unless ``json_logs`` says
    otherwise.
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    if json_logs is None:
        json_logs = level != logging.DEBUG

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    gmgn_logger = logging.getLogger(LOGGER_NAME)
    gmgn_logger.handlers[:] = [handler]
    gmgn_logger.setLevel(level)
    gmgn_logger.propagate = False
    return gmgn_logger
