"""Identity repository. Returns IdentityEntity domain objects."""

from collections.abc import Collection

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from registry.domain.entities.identity import IdentityEntity
from registry.domain.value_objects.core import IdentificationNumber
from registry.infrastructure.persistence.models.identity import Identity
from registry.infrastructure.persistence.repositories.base import BaseRepository


def _identity_to_entity(row: Identity) -> IdentityEntity:
    """Map ORM Identity to domain IdentityEntity."""
    return IdentityEntity(id=row.id, number=IdentificationNumber(row.number))


class IdentityRepository(BaseRepository[Identity]):
    """Identity repository. Numbers are unique; rows are never updated."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Identity)

    async def get_identity(self, identity_id: str) -> IdentityEntity | None:
        row = await self.get_by_id(identity_id)
        return _identity_to_entity(row) if row else None

    async def get_identities(
        self, identity_ids: Collection[str]
    ) -> dict[str, IdentityEntity]:
        """Return identities keyed by id (batch; one query)."""
        rows = await self.get_by_ids(identity_ids)
        return {rid: _identity_to_entity(row) for rid, row in rows.items()}

    async def get_by_number(self, number: IdentificationNumber) -> IdentityEntity | None:
        result = await self.db.execute(
            select(Identity).where(Identity.number == number.value)
        )
        row = result.scalar_one_or_none()
        return _identity_to_entity(row) if row else None

    async def create_identity(self, identity: IdentityEntity) -> IdentityEntity:
        """Save identity; duplicate numbers raise ConstraintViolationError."""
        created = await self.create(Identity(id=identity.id, number=identity.get_number()))
        return _identity_to_entity(created)
