"""LoggerProtocol - structured logging port.

Calls are a message plus key-value context; implementations decide how
lines are rendered. ``bind``/``with_context`` return a new logger that
always includes the given context.

Usage:
    from src.core.container import get_logger

    logger = get_logger().bind(view="organisation_summary")
    logger.debug("Organisation summaries presented", count=len(views))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error; ``error`` adds error_type and error_message fields."""
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical failure; ``error`` is handled as in ``error()``."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol: ...

    def with_context(self, **context: Any) -> LoggerProtocol: ...
