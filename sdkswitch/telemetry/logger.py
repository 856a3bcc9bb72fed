"""Structured operation logging utilities.

Responsibilities:
- Emit concise, deterministic operation-level runtime logs through `loguru`.
- Surface non-fatal drift (broken links, copy fallback) as warnings.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class RunLogger:
    """Emit deterministic operation logs for CLI-observable filesystem activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "WARNING") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, operation: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[op] level={level} op={operation} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_operation_start(self, operation: str, **context: object) -> None:
        """Emit an operation-start runtime event."""

        self._emit("INFO", "start", operation, **context)

    def log_operation_complete(self, operation: str, **context: object) -> None:
        """Emit an operation-complete runtime event."""

        self._emit("INFO", "complete", operation, **context)

    def log_operation_failure(self, operation: str, error_type: str) -> None:
        """Emit an operation-failure runtime event without sensitive payload details."""

        self._emit("ERROR", "failure", operation, error_type=error_type)

    def log_warning(self, operation: str, reason: str, **context: object) -> None:
        """Emit a non-fatal warning that the user should notice."""

        self._emit("WARNING", "warning", operation, reason=reason, **context)
