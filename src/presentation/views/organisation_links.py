"""Link building for organisation summary views.

Turns the configured path templates into view/edit hrefs and assigns them
to summary views.

Usage:
    from src.core.container import get_organisation_link_builder

    builder = get_organisation_link_builder()
    views = builder.apply_all(OrganisationSummaryView.create(organisations))
"""

from typing import TYPE_CHECKING
from urllib.parse import quote

from src.domain.protocols.organisation_protocol import OrganisationProtocol
from src.presentation.views.organisation_summary_view import OrganisationSummaryView

if TYPE_CHECKING:
    from src.core.config import Settings

_PLACEHOLDER = "{org_unit_id}"


class OrganisationLinkBuilder:
    """Builds view and edit links for organisations.

    Args:
        base_url: Prefix for every link; empty for site-relative links.
        view_path: Path template for the view page.
        edit_path: Path template for the edit page.

    Raises:
        ValueError: If a path template lacks the ``{org_unit_id}`` placeholder.
    """

    def __init__(self, *, base_url: str = "", view_path: str, edit_path: str) -> None:
        for label, path in (("view_path", view_path), ("edit_path", edit_path)):
            if _PLACEHOLDER not in path:
                raise ValueError(f"{label} must contain {_PLACEHOLDER}")

        self._base_url = base_url.rstrip("/")
        self._view_path = view_path
        self._edit_path = edit_path

    @classmethod
    def from_settings(cls, settings: "Settings") -> "OrganisationLinkBuilder":
        """Create a builder from application settings.

        Args:
            settings: Loaded application settings.

        Returns:
            OrganisationLinkBuilder: Builder using the configured paths.
        """
        return cls(
            base_url=settings.site_base_url,
            view_path=settings.organisation_view_path,
            edit_path=settings.organisation_edit_path,
        )

    def view_href_for(self, organisation: OrganisationProtocol) -> str:
        return self._build(self._view_path, organisation)

    def edit_href_for(self, organisation: OrganisationProtocol) -> str:
        return self._build(self._edit_path, organisation)

    def apply(self, view: OrganisationSummaryView) -> OrganisationSummaryView:
        """Assign both links on a view.

        Args:
            view: View to update in place.

        Returns:
            OrganisationSummaryView: The same view.
        """
        view.view_href = self.view_href_for(view.organisation)
        view.edit_href = self.edit_href_for(view.organisation)
        return view

    def apply_all(
        self, views: list[OrganisationSummaryView]
    ) -> list[OrganisationSummaryView]:
        for view in views:
            self.apply(view)
        return views

    def _build(self, path: str, organisation: OrganisationProtocol) -> str:
        # Identifier is quoted as a single path segment
        org_unit_id = quote(organisation.org_unit_id, safe="")
        return self._base_url + path.replace(_PLACEHOLDER, org_unit_id)
