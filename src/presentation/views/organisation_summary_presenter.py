"""Organisation summary presenter.

Prepares summary views for a listing page: builds one view per organisation,
fills in links and reports missing organisations as a Failure instead of
letting the construction error escape to the page handler.

Architecture:
- Presentation layer (no I/O, no rendering)
- Dependencies injected via constructor (see src.core.container)
- Returns Result[list[OrganisationSummaryView], ValidationError]
"""

from collections.abc import Iterable, Sequence
from typing import Any

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.organisation_protocol import OrganisationProtocol
from src.presentation.views.organisation_links import OrganisationLinkBuilder
from src.presentation.views.organisation_summary_view import OrganisationSummaryView


class OrganisationSummaryPresenter:
    """Presenter for organisation listing pages.

    Dependencies (injected via constructor):
        - OrganisationLinkBuilder: Fills view/edit links
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        link_builder: OrganisationLinkBuilder,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize presenter with dependencies.

        Args:
            link_builder: Builder used to fill view/edit links.
            logger: Structured logger.
        """
        self._link_builder = link_builder
        self._logger = logger

    def handle(
        self, organisations: Iterable[OrganisationProtocol | None]
    ) -> Result[list[OrganisationSummaryView], ValidationError]:
        """Build linked summary views for organisations in display order.

        The input is read exactly once, so generators are accepted.

        Args:
            organisations: Organisations in display order.

        Returns:
            Success(list[OrganisationSummaryView]): One view per organisation,
                same order, links applied.
            Failure(ValidationError): If any organisation is None; the error's
                field names the first offending index.
        """
        views: list[OrganisationSummaryView] = []
        for index, organisation in enumerate(organisations):
            if organisation is None:
                field = f"organisations[{index}]"
                self._logger.warning("Organisation summary rejected", field=field)
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.ORGANISATION_MISSING,
                        message="Organisation cannot be None",
                        field=field,
                    )
                )
            views.append(OrganisationSummaryView(organisation))

        self._link_builder.apply_all(views)

        self._logger.debug("Organisation summaries presented", count=len(views))
        return Success(value=views)


def render_context(views: Sequence[OrganisationSummaryView]) -> list[dict[str, Any]]:
    """Return the template context of each view, in order."""
    return [view.to_template_context() for view in views]
