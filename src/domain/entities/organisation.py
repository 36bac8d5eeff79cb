"""Organisation domain entity.

Represents an organisational unit (department, team, branch) that the
presentation layer summarises for listing pages.
"""

from dataclasses import dataclass


@dataclass
class Organisation:
    """Organisational unit entity.

    Attributes:
        org_unit_id: Identifier of the organisational unit.
        name: Human-readable display name.

    Example:
        >>> org = Organisation(org_unit_id="OU-001", name="Finance")
        >>> org.name
        'Finance'
    """

    org_unit_id: str
    name: str

    def __post_init__(self) -> None:
        """Validate organisation after initialization.

        Raises:
            ValueError: If required fields are invalid.
        """
        if not self.org_unit_id:
            raise ValueError("Organisation org_unit_id cannot be empty")

        if len(self.org_unit_id) > 64:
            raise ValueError("Organisation org_unit_id cannot exceed 64 characters")

        if not self.name:
            raise ValueError("Organisation name cannot be empty")

        if len(self.name) > 255:
            raise ValueError("Organisation name cannot exceed 255 characters")

    def __repr__(self) -> str:
        """Return repr for debugging.

        Returns:
            str: String representation.
        """
        return f"Organisation(org_unit_id={self.org_unit_id!r}, name={self.name!r})"

    def __str__(self) -> str:
        """Return string representation.

        Returns:
            str: Human-readable string.
        """
        return f"{self.name} ({self.org_unit_id})"
