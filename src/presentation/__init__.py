"""Presentation layer - view models for template rendering.

Structure:
- views/: Summary views, binding tables, link building and presenters

The presentation layer depends on the domain layer (reads entities through
protocols) but contains NO business logic and performs NO rendering.
"""
