"""Presentation views for template rendering.

Usage:
    from src.presentation.views import (
        OrganisationSummaryView,
        OrganisationSummaryPresenter,
    )
"""

from src.presentation.views.organisation_links import OrganisationLinkBuilder
from src.presentation.views.organisation_summary_presenter import (
    OrganisationSummaryPresenter,
    render_context,
)
from src.presentation.views.organisation_summary_view import OrganisationSummaryView
from src.presentation.views.template_binding import (
    AttributeKind,
    TemplateBinding,
    TemplateView,
    get_template_view,
    template_view,
)

__all__ = [
    "AttributeKind",
    "OrganisationLinkBuilder",
    "OrganisationSummaryView",
    "TemplateBinding",
    "TemplateView",
    "OrganisationSummaryPresenter",
    "get_template_view",
    "render_context",
    "template_view",
]
