"""Core enums package.

- Environment: selects environment-specific behavior (log rendering)
- ErrorCode: machine-readable codes carried by Result failures

Usage:
    from src.core.enums import ErrorCode, Environment
"""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
