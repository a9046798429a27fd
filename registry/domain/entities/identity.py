"""Identity domain entity (leaf of the identity-resolution chain)."""

from dataclasses import dataclass

from registry.domain.exceptions import ValidationException
from registry.domain.value_objects.core import IdentificationNumber


@dataclass(frozen=True)
class IdentityEntity:
    """Holds a single identification number. Immutable once issued."""

    id: str
    number: IdentificationNumber

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Identity ID is required", field="id")
        if not isinstance(self.number, IdentificationNumber):
            raise ValidationException(
                "Identity number must be an IdentificationNumber", field="number"
            )

    def get_number(self) -> str:
        """Return the stored identification number."""
        return self.number.value
