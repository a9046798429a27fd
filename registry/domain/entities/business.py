"""Business domain entity (variant that resolves identity through its owner)."""

from dataclasses import dataclass

from registry.domain.entities.person import PersonEntity
from registry.domain.exceptions import MissingIdentityError, ValidationException


@dataclass(frozen=True)
class BusinessEntity:
    """Domain entity for a business.

    A business has no identity of its own; the owner (a person) is optional.
    """

    id: str
    name: str
    owner: PersonEntity | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Business ID is required", field="id")
        if not self.name or not self.name.strip():
            raise ValidationException("Business name is required", field="name")

    def has_owner(self) -> bool:
        return self.owner is not None

    def resolve_identity_number(self) -> str:
        """Forward to the owner's identity number.

        Returns:
            The owner's identification number.

        Raises:
            MissingIdentityError: If there is no owner, or the owner has no identity.
        """
        if self.owner is None:
            raise MissingIdentityError("business", self.id, "no owner")
        return self.owner.resolve_identity_number()
