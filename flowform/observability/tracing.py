"""Tracing for conversation turns."""

import time
from typing import Any

from flowform.observability.logging import get_logger

logger = get_logger(__name__)


class TraceContext:
    """Context manager around one host-side operation, usually a turn.

    Logs ``trace_start`` on entry and ``trace_end`` or ``trace_error`` on exit,
    with ``duration_ms`` and anything recorded through :meth:`annotate`.
    """

    def __init__(self, operation: str, **kwargs: Any):
        self.operation = operation
        self.kwargs = kwargs
        self.outcome: dict[str, Any] = {}
        self.logger = logger.bind(operation=operation, **kwargs)
        self._started: float | None = None

    def annotate(self, **kwargs: Any) -> None:
        """Attach outcome details (error code, completion) to the closing event."""
        self.outcome.update(kwargs)

    @property
    def duration_ms(self) -> float | None:
        if self._started is None:
            return None
        return round((time.perf_counter() - self._started) * 1000, 2)

    def __enter__(self):
        self._started = time.perf_counter()
        self.logger.info("trace_start")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.logger.error(
                "trace_error",
                duration_ms=self.duration_ms,
                exc_type=exc_type.__name__,
                exc_val=str(exc_val) if exc_val else None,
                **self.outcome,
            )
        else:
            self.logger.info("trace_end", duration_ms=self.duration_ms, **self.outcome)
        return False
