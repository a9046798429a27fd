"""Repository interfaces (ports) for the application layer.

Protocols define the storage collaborator: find by id, find all with a
filter, and save. Save failures surface as ConstraintViolationError.
All types are domain entities; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from registry.domain.entities import (
        BusinessEntity,
        EntityAggregate,
        IdentityEntity,
        PersonEntity,
    )
    from registry.domain.enums import EntitableType
    from registry.domain.value_objects import IdentificationNumber


class IIdentityRepository(Protocol):
    """Protocol for identity repository (DIP)."""

    async def get_identity(self, identity_id: str) -> IdentityEntity | None:
        """Return identity by ID."""

    async def get_by_number(self, number: IdentificationNumber) -> IdentityEntity | None:
        """Return identity holding number."""

    async def create_identity(self, identity: IdentityEntity) -> IdentityEntity:
        """Save identity; duplicate number raises ConstraintViolationError."""


class IPersonRepository(Protocol):
    """Protocol for person repository (DIP)."""

    async def get_person(self, person_id: str) -> PersonEntity | None:
        """Return person (with identity) by ID."""

    async def get_people(self, person_ids: Collection[str]) -> dict[str, PersonEntity]:
        """Return people keyed by ID (batch)."""

    async def list_people(
        self, skip: int = 0, limit: int = 100, name_contains: str | None = None
    ) -> list[PersonEntity]:
        """Return people, optionally filtered by name substring."""

    async def create_person(self, person: PersonEntity) -> PersonEntity:
        """Save person; identity already used raises ConstraintViolationError."""


class IBusinessRepository(Protocol):
    """Protocol for business repository (DIP)."""

    async def get_business(self, business_id: str) -> BusinessEntity | None:
        """Return business (with owner) by ID."""

    async def list_businesses(
        self,
        skip: int = 0,
        limit: int = 100,
        name_contains: str | None = None,
        owned: bool | None = None,
    ) -> list[BusinessEntity]:
        """Return businesses, optionally filtered by name substring or ownership."""

    async def create_business(self, business: BusinessEntity) -> BusinessEntity:
        """Save business."""


class IEntityRepository(Protocol):
    """Protocol for entity repository (DIP)."""

    async def get_entity(self, entity_id: str) -> EntityAggregate | None:
        """Return entity with its variant graph loaded."""

    async def get_entities(
        self, entity_ids: Collection[str]
    ) -> dict[str, EntityAggregate]:
        """Return entities keyed by ID (batch; one query per table)."""

    async def get_by_entitable(
        self, entitable_type: EntitableType, entitable_id: str
    ) -> EntityAggregate | None:
        """Return the entity delegating to the given variant record."""

    async def list_entities(
        self,
        entitable_type: EntitableType | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[EntityAggregate]:
        """Return entities, optionally only one variant type."""

    async def create_entity(self, entity: EntityAggregate) -> EntityAggregate:
        """Save entity; a second entity for one variant raises ConstraintViolationError."""
