"""Repositories: SQLAlchemy implementations of the application ports."""

from registry.infrastructure.persistence.repositories.base import BaseRepository
from registry.infrastructure.persistence.repositories.business_repo import (
    BusinessRepository,
)
from registry.infrastructure.persistence.repositories.entity_repo import (
    EntityRepository,
)
from registry.infrastructure.persistence.repositories.identity_repo import (
    IdentityRepository,
)
from registry.infrastructure.persistence.repositories.person_repo import (
    PersonRepository,
)

__all__ = [
    "BaseRepository",
    "BusinessRepository",
    "EntityRepository",
    "IdentityRepository",
    "PersonRepository",
]
