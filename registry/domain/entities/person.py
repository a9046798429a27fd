"""Person domain entity (variant that owns an identity directly)."""

from dataclasses import dataclass

from registry.domain.entities.identity import IdentityEntity
from registry.domain.exceptions import MissingIdentityError, ValidationException


@dataclass(frozen=True)
class PersonEntity:
    """Domain entity for a person.

    Every persisted person references exactly one identity. identity may
    still be None on a loaded record when the referenced row is gone; that
    surfaces as MissingIdentityError on resolution rather than here.
    """

    id: str
    name: str
    identity: IdentityEntity | None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Person ID is required", field="id")
        if not self.name or not self.name.strip():
            raise ValidationException("Person name is required", field="name")

    def resolve_identity_number(self) -> str:
        """Forward to the identity's number.

        Returns:
            The identification number.

        Raises:
            MissingIdentityError: If the identity reference is unset.
        """
        if self.identity is None:
            raise MissingIdentityError("person", self.id, "no identity")
        return self.identity.get_number()
