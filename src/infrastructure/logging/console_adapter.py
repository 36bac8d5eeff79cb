"""Console logging adapter.

Writes structured log lines to stdout through structlog: coloured key-value
output in development, one JSON object per line everywhere else.

The adapter satisfies LoggerProtocol structurally (PEP 544); it does not
inherit from it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _level_number(level: str) -> int:
    """Map a standard level name to its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    number = logging.getLevelNamesMapping().get(level.strip().upper())
    if number is None or number == logging.NOTSET:
        raise ValueError(f"Unknown log level: {level!r}")
    return number


class ConsoleAdapter:
    """structlog-backed logger for organisation view services.

    Args:
        use_json: Render JSON lines instead of the development console format.
        level: Minimum level name to emit (e.g. "INFO").

    Raises:
        ValueError: If ``level`` is not a standard logging level.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        threshold = _level_number(level)
        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrap(cls, logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose log lines always include ``context``.

        The original adapter is left unchanged.
        """
        return self._wrap(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        return self.bind(**context)


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    # Exception details are flattened into plain fields for JSON output
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context
