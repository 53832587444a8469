"""
Ledger Event Logger

DESIGN DECISION: Every ledger mutation and every recovered failure is logged.
This provides:
1. Debugging capability (what happened to the ledger, and in which order)
2. Diagnostics for corrupt saved data that was silently replaced by defaults

The event logger writes to the local structured log only; nothing is persisted.
"""

import logging
import sys

import structlog

from finplan.models.events import EventSeverity, LedgerEvent


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """Route the stdlib side of structlog to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("finplan").setLevel(level.upper())


def get_logger(name: str = "finplan") -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


class LedgerEventLogger:
    """
    Central event logging service.

    Severity decides the log method; the event body goes in as
    structured key/value pairs.
    """

    def __init__(self, name: str = "finplan.ledger"):
        self._logger = get_logger(name)

    def log(self, event: LedgerEvent) -> None:
        log_dict = event.to_log_dict()

        if event.severity == EventSeverity.ERROR:
            self._logger.error("ledger_event", **log_dict)
        elif event.severity == EventSeverity.WARNING:
            self._logger.warning("ledger_event", **log_dict)
        elif event.severity == EventSeverity.DEBUG:
            self._logger.debug("ledger_event", **log_dict)
        else:
            self._logger.info("ledger_event", **log_dict)
