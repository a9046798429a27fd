"""Entity aggregate: one addressable handle over a business or a person.

The Entity stores a tagged reference to exactly one variant and forwards
identity resolution to it. The variant is fixed at creation.
"""

from dataclasses import dataclass

from registry.domain.entities.business import BusinessEntity
from registry.domain.entities.person import PersonEntity
from registry.domain.enums import EntitableType
from registry.domain.exceptions import InvalidVariantError, ValidationException
from registry.shared.utils.generators import generate_cuid

Entitable = BusinessEntity | PersonEntity


@dataclass(frozen=True)
class EntityAggregate:
    """Delegated-type container over {BusinessEntity, PersonEntity}.

    Construction validates the variant; there are no transitions afterwards,
    so every read below is side-effect free.
    """

    id: str
    entitable: Entitable

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Entity ID is required", field="id")
        if not isinstance(self.entitable, (BusinessEntity, PersonEntity)):
            raise InvalidVariantError(type(self.entitable).__name__)

    @classmethod
    def create(cls, variant: object, entity_id: str | None = None) -> "EntityAggregate":
        """Build an entity holding variant.

        Args:
            variant: A BusinessEntity or PersonEntity.
            entity_id: Optional id; a new CUID is generated when omitted.

        Raises:
            InvalidVariantError: If variant is None or of any other type.
        """
        if not isinstance(variant, (BusinessEntity, PersonEntity)):
            raise InvalidVariantError(type(variant).__name__)
        return cls(id=entity_id or generate_cuid(), entitable=variant)

    @property
    def entitable_type(self) -> EntitableType:
        if isinstance(self.entitable, BusinessEntity):
            return EntitableType.BUSINESS
        return EntitableType.PERSON

    @property
    def entitable_id(self) -> str:
        return self.entitable.id

    def is_business(self) -> bool:
        return self.entitable_type is EntitableType.BUSINESS

    def is_person(self) -> bool:
        return self.entitable_type is EntitableType.PERSON

    @property
    def business(self) -> BusinessEntity | None:
        """The held business, or None when the entity holds a person."""
        return self.entitable if isinstance(self.entitable, BusinessEntity) else None

    @property
    def person(self) -> PersonEntity | None:
        """The held person, or None when the entity holds a business."""
        return self.entitable if isinstance(self.entitable, PersonEntity) else None

    def get_identity_number(self) -> str:
        """Return the identity number by forwarding to the held variant.

        Returns:
            The identification number resolved through the variant chain.

        Raises:
            MissingIdentityError: If the variant (or its owner) has no identity.
        """
        match self.entitable_type:
            case EntitableType.BUSINESS if self.business is not None:
                return self.business.resolve_identity_number()
            case EntitableType.PERSON if self.person is not None:
                return self.person.resolve_identity_number()
        raise InvalidVariantError(self.entitable_type.value)
