"""Entity repository: polymorphic rows hydrated into EntityAggregate graphs.

Loading N entities costs one query per table (entity, business, person,
identity), not one lookup per record.
"""

from collections.abc import Collection, Mapping

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from registry.domain.entities.business import BusinessEntity
from registry.domain.entities.entity import EntityAggregate
from registry.domain.entities.person import PersonEntity
from registry.domain.enums import EntitableType
from registry.domain.exceptions import InvalidVariantError, ResourceNotFoundException
from registry.infrastructure.exceptions import ConstraintViolationError
from registry.infrastructure.persistence.models.entity import Entity
from registry.infrastructure.persistence.repositories.base import BaseRepository
from registry.infrastructure.persistence.repositories.business_repo import (
    BusinessRepository,
)
from registry.infrastructure.persistence.repositories.person_repo import (
    PersonRepository,
)


def _entity_to_aggregate(
    row: Entity,
    businesses: Mapping[str, BusinessEntity],
    people: Mapping[str, PersonEntity],
) -> EntityAggregate:
    """Map ORM Entity to EntityAggregate using pre-loaded variants.

    Raises:
        InvalidVariantError: If the stored tag is not a known variant.
        ResourceNotFoundException: If the referenced variant row does not exist.
    """
    try:
        tag = EntitableType(row.entitable_type)
    except ValueError:
        raise InvalidVariantError(row.entitable_type) from None
    variants: Mapping[str, BusinessEntity | PersonEntity]
    variants = businesses if tag is EntitableType.BUSINESS else people
    variant = variants.get(row.entitable_id)
    if variant is None:
        raise ResourceNotFoundException(tag.value, row.entitable_id)
    return EntityAggregate(id=row.id, entitable=variant)


class EntityRepository(BaseRepository[Entity]):
    """Entity repository. One entity per variant record (unique (entitable_type, entitable_id))."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Entity)
        self._people = PersonRepository(db)
        self._businesses = BusinessRepository(db, person_repo=self._people)

    async def hydrate(self, rows: Collection[Entity]) -> dict[str, EntityAggregate]:
        """Map rows to aggregates keyed by id, loading each variant table once."""
        business_ids = {
            r.entitable_id for r in rows if r.entitable_type == EntitableType.BUSINESS.value
        }
        person_ids = {
            r.entitable_id for r in rows if r.entitable_type == EntitableType.PERSON.value
        }
        business_rows = await self._businesses.get_by_ids(business_ids)
        owner_ids = {b.owner_id for b in business_rows.values() if b.owner_id}
        people = await self._people.get_people(person_ids | owner_ids)
        businesses = await self._businesses.hydrate(
            list(business_rows.values()), known_people=people
        )
        return {row.id: _entity_to_aggregate(row, businesses, people) for row in rows}

    async def get_entity(self, entity_id: str) -> EntityAggregate | None:
        row = await self.get_by_id(entity_id)
        if row is None:
            return None
        return (await self.hydrate([row]))[row.id]

    async def get_entities(
        self, entity_ids: Collection[str]
    ) -> dict[str, EntityAggregate]:
        """Return aggregates keyed by id. Unknown ids are absent from the result."""
        rows = await self.get_by_ids(entity_ids)
        return await self.hydrate(list(rows.values()))

    async def get_by_entitable(
        self, entitable_type: EntitableType, entitable_id: str
    ) -> EntityAggregate | None:
        """Return the entity that delegates to the given variant record, if any."""
        result = await self.db.execute(
            select(Entity).where(
                Entity.entitable_type == entitable_type.value,
                Entity.entitable_id == entitable_id,
            )
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return (await self.hydrate([row]))[row.id]

    async def list_entities(
        self,
        entitable_type: EntitableType | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[EntityAggregate]:
        """Return entities oldest first, optionally only those holding one variant type."""
        stmt = select(Entity)
        if entitable_type is not None:
            stmt = stmt.where(Entity.entitable_type == entitable_type.value)
        result = await self.db.execute(
            stmt.order_by(Entity.created_at, Entity.id).offset(skip).limit(limit)
        )
        rows = list(result.scalars().all())
        entities = await self.hydrate(rows)
        return [entities[row.id] for row in rows]

    async def create_entity(self, entity: EntityAggregate) -> EntityAggregate:
        """Save the entity row.

        entitable_id has no database foreign key (it points at one of two
        tables), so the referenced variant row is checked here first.

        Raises:
            ConstraintViolationError: If the variant row does not exist, or a
                second entity is saved for the same variant.
        """
        tag = entity.entitable_type
        variants = self._businesses if tag is EntitableType.BUSINESS else self._people
        if await variants.get_by_id(entity.entitable_id) is None:
            raise ConstraintViolationError(
                "entity",
                f"entitable_id references no {tag.value} row",
                entitable_id=entity.entitable_id,
            )
        await self.create(
            Entity(
                id=entity.id,
                entitable_type=entity.entitable_type.value,
                entitable_id=entity.entitable_id,
            )
        )
        return entity
