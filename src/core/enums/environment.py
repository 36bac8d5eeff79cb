"""Application environment types.

Defines the runtime environments the views service runs in.
Used by Settings to pick environment-specific behavior (log rendering).

Environments:
- DEVELOPMENT: Local development, human-readable console logs
- TESTING: Automated test execution
- CI: Continuous integration environment
- PRODUCTION: Production deployment, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
