"""structlog setup for the KWIC tools.

Logs go to stderr so the report on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys

import structlog

_configured = False


def configure_logging(verbose: bool = False) -> None:
    """Configure stdlib logging + structlog.  Safe to call more than once."""
    global _configured

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    if _configured:
        return

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
