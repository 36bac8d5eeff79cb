"""Infrastructure layer - Adapters for domain protocols.

Structure:
- logging/: Structured logging adapters (structlog)

The infrastructure layer depends on the domain layer (implements protocols).
"""
