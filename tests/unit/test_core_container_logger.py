"""Unit tests for container factory functions.

Tests cover:
- get_logger() adapter configuration per environment
- App metadata bound into the logger
- Singleton pattern (same instance returned)
- Link builder and presenter wiring

Architecture:
- Unit tests with mocked settings and adapters
"""

from unittest.mock import MagicMock, patch

import pytest

from src.core.config import Settings
from src.core.container import (
    get_logger,
    get_organisation_link_builder,
    get_organisation_summary_presenter,
)
from src.core.enums import Environment
from src.core.result import Success
from src.domain.entities.organisation import Organisation

CONSOLE_ADAPTER = "src.infrastructure.logging.console_adapter.ConsoleAdapter"


@pytest.fixture(autouse=True)
def clear_container_caches():
    get_logger.cache_clear()
    get_organisation_link_builder.cache_clear()
    get_organisation_summary_presenter.cache_clear()
    yield
    get_logger.cache_clear()
    get_organisation_link_builder.cache_clear()
    get_organisation_summary_presenter.cache_clear()


@pytest.mark.unit
class TestGetLoggerContainer:
    """Test get_logger() container function."""

    @pytest.mark.parametrize(
        "environment,use_json",
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_renderer_per_environment(self, environment, use_json):
        """Test JSON rendering everywhere except development."""
        configured = Settings(environment=environment, log_level="WARNING")
        with patch("src.core.container.infrastructure.settings", configured):
            with patch(CONSOLE_ADAPTER) as mock_console:
                get_logger()

                mock_console.assert_called_once_with(use_json=use_json, level="WARNING")

    def test_app_metadata_bound(self):
        """Test application name, version and environment are bound."""
        configured = Settings(
            environment=Environment.CI, app_name="Org Pages", app_version="2.3.0"
        )
        with patch("src.core.container.infrastructure.settings", configured):
            with patch(CONSOLE_ADAPTER) as mock_console:
                logger = get_logger()

                mock_console.return_value.bind.assert_called_once_with(
                    app="Org Pages", version="2.3.0", environment="ci"
                )
                assert logger is mock_console.return_value.bind.return_value

    def test_get_logger_uses_singleton_pattern(self):
        """Test get_logger() returns same instance on multiple calls."""
        with patch(CONSOLE_ADAPTER) as mock_console:
            mock_console.return_value = MagicMock()

            logger1 = get_logger()
            logger2 = get_logger()

            mock_console.assert_called_once()
            assert logger1 is logger2


@pytest.mark.unit
class TestGetOrganisationLinkBuilder:
    """Test get_organisation_link_builder() container function."""

    def test_builder_uses_settings(self):
        """Test builder is configured from settings."""
        configured = Settings(
            site_base_url="https://intranet.example.com",
            organisation_view_path="/ou/{org_unit_id}",
            organisation_edit_path="/ou/{org_unit_id}/edit",
        )
        with patch("src.core.container.views.settings", configured):
            builder = get_organisation_link_builder()

        org = Organisation(org_unit_id="OU-7", name="Audit")
        assert builder.view_href_for(org) == "https://intranet.example.com/ou/OU-7"
        assert builder.edit_href_for(org) == "https://intranet.example.com/ou/OU-7/edit"

    def test_builder_is_singleton(self):
        """Test the same builder is returned on repeated calls."""
        assert get_organisation_link_builder() is get_organisation_link_builder()


@pytest.mark.unit
class TestGetOrganisationSummaryPresenter:
    """Test get_organisation_summary_presenter() container function."""

    def test_presenter_logs_through_app_logger(self):
        """Test the presenter's logger comes from get_logger()."""
        app_logger = MagicMock()
        with patch("src.core.container.views.get_logger", return_value=app_logger):
            presenter = get_organisation_summary_presenter()

        app_logger.bind.assert_called_once_with(view="organisation_summary")
        presenter.handle([Organisation(org_unit_id="OU-1", name="Finance")])
        app_logger.bind.return_value.debug.assert_called_once_with(
            "Organisation summaries presented", count=1
        )

    def test_presenter_applies_configured_links(self):
        """Test the wired presenter fills links from settings."""
        with patch("src.core.container.views.get_logger", return_value=MagicMock()):
            presenter = get_organisation_summary_presenter()

        result = presenter.handle([Organisation(org_unit_id="OU-1", name="Finance")])

        assert isinstance(result, Success)
        assert result.value[0].view_href is not None
        assert result.value[0].view_href.endswith("OU-1")

    def test_presenter_is_singleton(self):
        """Test the same presenter is returned on repeated calls."""
        with patch("src.core.container.views.get_logger", return_value=MagicMock()):
            assert (
                get_organisation_summary_presenter()
                is get_organisation_summary_presenter()
            )
