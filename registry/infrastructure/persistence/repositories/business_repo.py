"""Business repository. Returns BusinessEntity with owner (and owner identity) loaded."""

from collections.abc import Collection, Mapping

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from registry.domain.entities.business import BusinessEntity
from registry.domain.entities.person import PersonEntity
from registry.infrastructure.persistence.models.business import Business
from registry.infrastructure.persistence.repositories.base import BaseRepository
from registry.infrastructure.persistence.repositories.person_repo import (
    PersonRepository,
)


def _business_to_entity(
    row: Business, owners: Mapping[str, PersonEntity]
) -> BusinessEntity:
    """Map ORM Business to BusinessEntity. Missing owner rows map to owner=None."""
    owner = owners.get(row.owner_id) if row.owner_id else None
    return BusinessEntity(id=row.id, name=row.name, owner=owner)


class BusinessRepository(BaseRepository[Business]):
    """Business repository. Owners are loaded in batch through PersonRepository."""

    def __init__(
        self, db: AsyncSession, person_repo: PersonRepository | None = None
    ) -> None:
        super().__init__(db, Business)
        self._people = person_repo or PersonRepository(db)

    async def hydrate(
        self,
        rows: Collection[Business],
        known_people: Mapping[str, PersonEntity] | None = None,
    ) -> dict[str, BusinessEntity]:
        """Map rows to entities keyed by id.

        Owners not already in known_people are fetched in one batch.
        """
        known = dict(known_people or {})
        missing = {row.owner_id for row in rows if row.owner_id} - known.keys()
        if missing:
            known.update(await self._people.get_people(missing))
        return {row.id: _business_to_entity(row, known) for row in rows}

    async def get_business(self, business_id: str) -> BusinessEntity | None:
        row = await self.get_by_id(business_id)
        if row is None:
            return None
        return (await self.hydrate([row]))[row.id]

    async def get_businesses(
        self, business_ids: Collection[str]
    ) -> dict[str, BusinessEntity]:
        rows = await self.get_by_ids(business_ids)
        return await self.hydrate(list(rows.values()))

    async def list_businesses(
        self,
        skip: int = 0,
        limit: int = 100,
        name_contains: str | None = None,
        owned: bool | None = None,
    ) -> list[BusinessEntity]:
        """Return businesses oldest first.

        Args:
            skip: Offset.
            limit: Page size.
            name_contains: Optional case-insensitive name substring.
            owned: True for businesses with an owner, False for ownerless, None for all.
        """
        stmt = select(Business)
        if name_contains:
            stmt = stmt.where(Business.name.icontains(name_contains, autoescape=True))
        if owned is True:
            stmt = stmt.where(Business.owner_id.is_not(None))
        elif owned is False:
            stmt = stmt.where(Business.owner_id.is_(None))
        result = await self.db.execute(
            stmt.order_by(Business.created_at, Business.id).offset(skip).limit(limit)
        )
        rows = list(result.scalars().all())
        businesses = await self.hydrate(rows)
        return [businesses[row.id] for row in rows]

    async def create_business(self, business: BusinessEntity) -> BusinessEntity:
        """Save business; owner_id is set from business.owner when present."""
        owner_id = business.owner.id if business.owner else None
        created = await self.create(
            Business(id=business.id, name=business.name, owner_id=owner_id)
        )
        owners = {owner_id: business.owner} if business.owner and owner_id else {}
        return _business_to_entity(created, owners)
