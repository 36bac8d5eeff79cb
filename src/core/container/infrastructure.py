"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: human-readable console output
    - testing/ci/production: JSON output

    Every log line carries the application name, version and environment.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    adapter = ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
    return adapter.bind(
        app=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )
