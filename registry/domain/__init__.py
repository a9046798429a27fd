"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure. Used by application and
infrastructure layers.
"""

from registry.domain.entities import (
    BusinessEntity,
    EntityAggregate,
    HasIdentityNumber,
    IdentityEntity,
    PersonEntity,
)
from registry.domain.enums import EntitableType
from registry.domain.exceptions import (
    InvalidVariantError,
    MissingIdentityError,
    RegistryException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from registry.domain.value_objects import IdentificationNumber, RecordName

__all__ = [
    # Entities
    "BusinessEntity",
    "EntityAggregate",
    "HasIdentityNumber",
    "IdentityEntity",
    "PersonEntity",
    # Enums
    "EntitableType",
    # Exceptions
    "InvalidVariantError",
    "MissingIdentityError",
    "RegistryException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
    # Value objects
    "IdentificationNumber",
    "RecordName",
]
