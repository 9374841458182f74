"""Wirebox Logging: logging port and structlog adapter."""

from wirebox.logging.port import LoggingPort
from wirebox.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
