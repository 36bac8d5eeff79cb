"""Container module - Centralized dependency injection.

Re-exports the factory functions so callers import from one place:

    from src.core.container import get_organisation_summary_presenter

The container is organized into modules by concern:
- infrastructure: Core services (logging)
- views: Presentation collaborators (link builder, presenter)
"""

# Infrastructure services
from src.core.container.infrastructure import get_logger

# Presentation collaborators
from src.core.container.views import (
    get_organisation_link_builder,
    get_organisation_summary_presenter,
)

__all__ = [
    "get_logger",
    "get_organisation_link_builder",
    "get_organisation_summary_presenter",
]
