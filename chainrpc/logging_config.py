"""
Structured log output for the ``chainrpc`` logger tree.

Library modules log through ``logging.getLogger(__name__)``. ``setup_logging``
attaches one structlog-rendering handler to the ``chainrpc`` logger only, so
the host application's root logging setup is left alone.
"""

import logging
import sys
from typing import IO, Iterable, Optional

import structlog

from .config import settings

LOGGER_NAME = "chainrpc"
DEFAULT_QUIET_LOGGERS = ("httpx", "httpcore")


def _build_formatter(json_logs: bool) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        pre_chain.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def setup_logging(
    log_level: Optional[str] = None,
    json_logs: Optional[bool] = None,
    quiet_loggers: Iterable[str] = DEFAULT_QUIET_LOGGERS,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Route ``chainrpc.*`` records through structlog.

    Args:
        log_level: Override log level (default: from settings.log_level)
        json_logs: JSON lines when True, console rendering when False
            (default: console at DEBUG, JSON otherwise)
        quiet_loggers: Loggers raised to WARNING, by default the HTTP stack's
            per-request chatter
        stream: Output stream (default: stdout)

    Calling it again replaces the handler it installed earlier.
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    if json_logs is None:
        json_logs = level != logging.DEBUG

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(_build_formatter(json_logs))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger
