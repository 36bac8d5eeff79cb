"""OrganisationProtocol - the organisation contract consumed by views.

Summary views only ever read an organisation's display name and identifier.
Any object exposing those two attributes satisfies the protocol (PEP 544
structural subtyping); the concrete Organisation entity is one of them.
"""

from typing import Protocol


class OrganisationProtocol(Protocol):
    """Read-only organisation contract.

    Attributes:
        name: Human-readable display name.
        org_unit_id: Identifier of the organisational unit.
    """

    @property
    def name(self) -> str: ...

    @property
    def org_unit_id(self) -> str: ...
