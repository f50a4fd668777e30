"""Structured logging setup."""

import atexit
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Union

import structlog

# ANSI color codes for log categories
_RESET = "\033[0m"
_CATEGORY_COLORS = {
    "llm": "\033[36m",    # Cyan - model calls
    "turn": "\033[33m",   # Yellow - turn outcomes
    "form": "\033[32m",   # Green - form lifecycle
}

# Event name → category for colored prefix
_EVENT_CATEGORY_MAP = {
    "llm_call": "llm",
    "llm_response": "llm",
    "turn_start": "turn",
    "turn_accepted": "turn",
    "turn_rejected": "turn",
    "form_loaded": "form",
    "form_complete": "form",
    "session_abandoned": "form",
}

_INTERNAL_KEYS = ("_event_category", "_event_color", "_level", "event", "level")


def _event_category_processor(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """Add _event_category and _event_color from event name for colored output."""
    event = event_dict.get("event", "")
    category = _EVENT_CATEGORY_MAP.get(event)
    event_dict["_event_category"] = category
    event_dict["_event_color"] = _CATEGORY_COLORS.get(category, "") if category else ""
    return event_dict


def _render(event_dict: dict, color: str) -> str:
    """Render [timestamp] [EVENT] [LEVEL] followed by key=value pairs."""
    event = event_dict.get("event", "")
    level = event_dict.get("level", "info").upper()

    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    event_tag = ""
    if event:
        event_tag = f" {color}[{event.upper()}]{_RESET}" if color else f" [{event.upper()}]"

    prefix = f"[{ts}]{event_tag} [{level}]"
    parts = [f"{k}={v}" for k, v in event_dict.items() if k not in _INTERNAL_KEYS]
    line = " ".join(parts)
    return prefix + (" " + line if line else "")


def _colored_console_renderer(logger: logging.Logger, method_name: str, event_dict: dict) -> str:
    return _render(event_dict, event_dict.get("_event_color", ""))


def _plain_console_renderer(logger: logging.Logger, method_name: str, event_dict: dict) -> str:
    return _render(event_dict, "")


class FileOutputProcessor:
    """Writes each event to a file without ANSI codes, then passes it on."""

    def __init__(self, file_path: Path):
        self.file_path = file_path
        self.file_handle = open(file_path, "a", encoding="utf-8")
        atexit.register(self._cleanup)

    def _cleanup(self) -> None:
        if not self.file_handle.closed:
            self.file_handle.close()

    def __call__(self, logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
        self.file_handle.write(_plain_console_renderer(logger, method_name, event_dict) + "\n")
        self.file_handle.flush()
        return event_dict


def setup_logging(
    level: str = "INFO",
    use_colors: bool = True,
    log_file: Union[str, Path, None] = None,
) -> None:
    """Set up structured logging with optional category colors and optional log file.

    Console output goes to stderr so that stdout stays free for conversation
    text. When log_file is provided the same events are also written there as
    plain text.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _event_category_processor,
    ]

    if log_file is not None:
        path = Path(log_file).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        processors.append(FileOutputProcessor(path))

    processors.append(_colored_console_renderer if use_colors else _plain_console_renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger."""
    return structlog.get_logger(name)
