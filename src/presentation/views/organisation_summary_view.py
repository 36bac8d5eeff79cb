"""Organisation summary view.

Presentation-ready projection of an organisation for listing pages: the
display name and identifier are read straight from the bound organisation,
and the view/edit links are filled in by the caller (usually the
OrganisationLinkBuilder).
"""

from collections.abc import Iterable
from typing import Any

from src.domain.protocols.organisation_protocol import OrganisationProtocol
from src.presentation.views.template_binding import (
    AttributeKind,
    TemplateBinding,
    get_template_view,
    template_view,
)


@template_view(
    "Summary",
    TemplateBinding(field="name", element_id="orgUnitName", attribute_id="orgUnitName"),
    TemplateBinding(field="org_unit_id", element_id="orgUnitId", attribute_id="orgUnitId"),
    TemplateBinding(
        field="view_href", attribute_id="orgUnitViewHref", attr=AttributeKind.HREF
    ),
    TemplateBinding(
        field="edit_href", attribute_id="orgUnitEditHref", attr=AttributeKind.HREF
    ),
)
class OrganisationSummaryView:
    """Summary view wrapping exactly one organisation.

    The organisation is bound at construction and never replaced. Links
    start unset (None) and may be assigned any number of times.

    Attributes:
        organisation: Bound organisation (read-only).
        name: Organisation display name (read-only, delegated).
        org_unit_id: Organisation identifier (read-only, delegated).
        view_href: Link to the organisation's view page, or None.
        edit_href: Link to the organisation's edit page, or None.

    Example:
        >>> view = OrganisationSummaryView(Organisation("OU-1", "Finance"))
        >>> view.view_href = "/organisations/OU-1"
        >>> view.to_template_context()["orgUnitViewHref"]
        '/organisations/OU-1'
    """

    __slots__ = ("_organisation", "_view_href", "_edit_href")

    def __init__(self, organisation: OrganisationProtocol) -> None:
        """Bind the view to an organisation.

        Args:
            organisation: Organisation to summarise.

        Raises:
            ValueError: If organisation is None.
        """
        if organisation is None:
            raise ValueError("Organisation cannot be None")

        self._organisation = organisation
        self._view_href: str | None = None
        self._edit_href: str | None = None

    @property
    def organisation(self) -> OrganisationProtocol:
        return self._organisation

    @property
    def name(self) -> str:
        return self._organisation.name

    @property
    def org_unit_id(self) -> str:
        return self._organisation.org_unit_id

    @property
    def view_href(self) -> str | None:
        return self._view_href

    @view_href.setter
    def view_href(self, value: str | None) -> None:
        self._view_href = value

    @property
    def edit_href(self) -> str | None:
        return self._edit_href

    @edit_href.setter
    def edit_href(self, value: str | None) -> None:
        self._edit_href = value

    def to_template_context(self) -> dict[str, Any]:
        """Return binding key to value mapping for the renderer."""
        return get_template_view(self).resolve(self)

    @staticmethod
    def create(
        organisations: Iterable[OrganisationProtocol],
    ) -> list["OrganisationSummaryView"]:
        """Build one summary view per organisation.

        Order is preserved; nothing is deduplicated, sorted or filtered.

        Args:
            organisations: Organisations to summarise.

        Returns:
            list[OrganisationSummaryView]: New views with unset links.

        Raises:
            ValueError: If any organisation is None.
        """
        return [OrganisationSummaryView(org) for org in organisations]

    def __repr__(self) -> str:
        """Return repr for debugging.

        Returns:
            str: String representation.
        """
        return (
            f"OrganisationSummaryView(organisation={self._organisation!r}, "
            f"view_href={self._view_href!r}, edit_href={self._edit_href!r})"
        )
