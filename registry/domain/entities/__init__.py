"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from registry.domain.entities.business import BusinessEntity
from registry.domain.entities.entitable import HasIdentityNumber
from registry.domain.entities.entity import Entitable, EntityAggregate
from registry.domain.entities.identity import IdentityEntity
from registry.domain.entities.person import PersonEntity

__all__ = [
    "BusinessEntity",
    "Entitable",
    "EntityAggregate",
    "HasIdentityNumber",
    "IdentityEntity",
    "PersonEntity",
]
