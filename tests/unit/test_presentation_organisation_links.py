"""Unit tests for OrganisationLinkBuilder.

Tests cover:
- Link formatting with and without base URL
- Identifier quoting
- Applying links to one view and to a batch
- Construction from settings and template validation
"""

import pytest

from src.core.config import Settings
from src.presentation.views.organisation_links import OrganisationLinkBuilder
from src.presentation.views.organisation_summary_view import OrganisationSummaryView
from tests.conftest import create_organisation


@pytest.fixture
def builder():
    return OrganisationLinkBuilder(
        view_path="/organisations/{org_unit_id}",
        edit_path="/organisations/{org_unit_id}/edit",
    )


@pytest.mark.unit
class TestOrganisationLinkBuilderFormatting:
    """Test href formatting."""

    def test_relative_view_href(self, builder, organisation):
        """Test view link without base URL is site-relative."""
        assert builder.view_href_for(organisation) == "/organisations/OU-001"

    def test_relative_edit_href(self, builder, organisation):
        """Test edit link without base URL is site-relative."""
        assert builder.edit_href_for(organisation) == "/organisations/OU-001/edit"

    def test_base_url_prefix_strips_trailing_slash(self, organisation):
        """Test base URL is joined without a double slash."""
        builder = OrganisationLinkBuilder(
            base_url="https://intranet.example.com/",
            view_path="/org/{org_unit_id}",
            edit_path="/org/{org_unit_id}/edit",
        )

        assert (
            builder.view_href_for(organisation)
            == "https://intranet.example.com/org/OU-001"
        )

    def test_identifier_is_quoted(self, builder):
        """Test reserved characters in the identifier are percent-encoded."""
        org = create_organisation(org_unit_id="a/b c")

        assert builder.view_href_for(org) == "/organisations/a%2Fb%20c"

    @pytest.mark.parametrize("path", ["/organisations", "/org/{id}"])
    def test_path_without_placeholder_raises(self, path):
        """Test templates must contain the identifier placeholder."""
        with pytest.raises(ValueError, match="must contain"):
            OrganisationLinkBuilder(view_path=path, edit_path="/e/{org_unit_id}")

    def test_edit_path_without_placeholder_raises(self):
        """Test edit template is validated too."""
        with pytest.raises(ValueError, match="edit_path"):
            OrganisationLinkBuilder(view_path="/v/{org_unit_id}", edit_path="/e")


@pytest.mark.unit
class TestOrganisationLinkBuilderApply:
    """Test assigning links to views."""

    def test_apply_sets_both_links(self, builder, organisation):
        """Test apply fills view and edit links and returns the view."""
        view = OrganisationSummaryView(organisation)

        result = builder.apply(view)

        assert result is view
        assert view.view_href == "/organisations/OU-001"
        assert view.edit_href == "/organisations/OU-001/edit"

    def test_apply_overwrites_existing_links(self, builder, organisation):
        """Test previously assigned links are replaced."""
        view = OrganisationSummaryView(organisation)
        view.view_href = "/stale"

        builder.apply(view)

        assert view.view_href == "/organisations/OU-001"

    def test_apply_all(self, builder, organisations):
        """Test every view in a batch receives its own links."""
        views = OrganisationSummaryView.create(organisations)

        result = builder.apply_all(views)

        assert result is views
        assert [view.edit_href for view in views] == [
            "/organisations/OU-001/edit",
            "/organisations/OU-002/edit",
            "/organisations/OU-003/edit",
        ]

    def test_apply_all_empty(self, builder):
        """Test an empty batch is returned unchanged."""
        assert builder.apply_all([]) == []


@pytest.mark.unit
class TestOrganisationLinkBuilderFromSettings:
    """Test construction from Settings."""

    def test_from_settings(self, organisation):
        """Test configured base URL and paths are used."""
        settings = Settings(
            site_base_url="https://hr.example.com/",
            organisation_view_path="/units/{org_unit_id}",
            organisation_edit_path="/units/{org_unit_id}/change",
        )

        builder = OrganisationLinkBuilder.from_settings(settings)

        assert builder.view_href_for(organisation) == "https://hr.example.com/units/OU-001"
        assert (
            builder.edit_href_for(organisation)
            == "https://hr.example.com/units/OU-001/change"
        )
