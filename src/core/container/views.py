"""Presentation collaborator factories.

Application-scoped singletons for objects the views layer is wired with.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from src.presentation.views.organisation_links import OrganisationLinkBuilder
    from src.presentation.views.organisation_summary_presenter import (
        OrganisationSummaryPresenter,
    )


@lru_cache()
def get_organisation_link_builder() -> "OrganisationLinkBuilder":
    """Return the link builder configured from settings.

    Returns:
        OrganisationLinkBuilder: Builder producing view/edit hrefs.
    """
    from src.presentation.views.organisation_links import OrganisationLinkBuilder

    return OrganisationLinkBuilder.from_settings(settings)


@lru_cache()
def get_organisation_summary_presenter() -> "OrganisationSummaryPresenter":
    """Return the presenter wired with the link builder and app logger.

    Returns:
        OrganisationSummaryPresenter: Presenter for organisation listings.
    """
    from src.presentation.views.organisation_summary_presenter import (
        OrganisationSummaryPresenter,
    )

    return OrganisationSummaryPresenter(
        link_builder=get_organisation_link_builder(),
        logger=get_logger().bind(view="organisation_summary"),
    )
