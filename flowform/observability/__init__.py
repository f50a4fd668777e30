"""Observability components for logging and tracing."""

from flowform.observability.logging import get_logger, setup_logging
from flowform.observability.tracing import TraceContext

__all__ = [
    "get_logger",
    "setup_logging",
    "TraceContext",
]
