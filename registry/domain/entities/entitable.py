"""Capability shared by every record an Entity can delegate to."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasIdentityNumber(Protocol):
    """A record that can resolve an identification number (business, person)."""

    id: str

    def resolve_identity_number(self) -> str:
        """Return the identification number or raise MissingIdentityError."""
        ...
