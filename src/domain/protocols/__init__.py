"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import LoggerProtocol, OrganisationProtocol
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.organisation_protocol import OrganisationProtocol

__all__ = [
    "LoggerProtocol",
    "OrganisationProtocol",
]
