"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.organisation import Organisation

__all__ = [
    "Organisation",
]
