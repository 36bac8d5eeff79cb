"""Common error classes used across layers.

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.ORGANISATION_MISSING,
        message="Organisation cannot be None",
        field="organisations[2]",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None
