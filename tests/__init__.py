"""Test suite for the organisation summary views.

Test structure:
- unit/: Unit tests - entities, views, bindings, presenters, config, logging
"""
