"""Structured logging package."""

from finplan.log.logger import LedgerEventLogger, configure_logging, get_logger

__all__ = ["LedgerEventLogger", "configure_logging", "get_logger"]
