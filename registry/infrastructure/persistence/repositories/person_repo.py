"""Person repository. Returns PersonEntity with its identity loaded."""

from collections.abc import Collection, Mapping

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from registry.domain.entities.identity import IdentityEntity
from registry.domain.entities.person import PersonEntity
from registry.domain.exceptions import ValidationException
from registry.infrastructure.persistence.models.person import Person
from registry.infrastructure.persistence.repositories.base import BaseRepository
from registry.infrastructure.persistence.repositories.identity_repo import (
    IdentityRepository,
)


def _person_to_entity(
    row: Person, identities: Mapping[str, IdentityEntity]
) -> PersonEntity:
    """Map ORM Person to PersonEntity. A dangling identity_id maps to identity=None."""
    return PersonEntity(
        id=row.id,
        name=row.name,
        identity=identities.get(row.identity_id),
    )


class PersonRepository(BaseRepository[Person]):
    """Person repository. Loads identities in one extra query per call."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Person)
        self._identities = IdentityRepository(db)

    async def hydrate(self, rows: Collection[Person]) -> dict[str, PersonEntity]:
        """Map rows to entities keyed by id, loading all identities in one query."""
        identities = await self._identities.get_identities(
            {row.identity_id for row in rows}
        )
        return {row.id: _person_to_entity(row, identities) for row in rows}

    async def get_person(self, person_id: str) -> PersonEntity | None:
        row = await self.get_by_id(person_id)
        if row is None:
            return None
        return (await self.hydrate([row]))[row.id]

    async def get_people(self, person_ids: Collection[str]) -> dict[str, PersonEntity]:
        """Return people keyed by id (two queries regardless of count)."""
        rows = await self.get_by_ids(person_ids)
        return await self.hydrate(list(rows.values()))

    async def list_people(
        self, skip: int = 0, limit: int = 100, name_contains: str | None = None
    ) -> list[PersonEntity]:
        """Return people oldest first, optionally filtered by case-insensitive name substring."""
        stmt = select(Person)
        if name_contains:
            stmt = stmt.where(Person.name.icontains(name_contains, autoescape=True))
        result = await self.db.execute(
            stmt.order_by(Person.created_at, Person.id).offset(skip).limit(limit)
        )
        rows = list(result.scalars().all())
        people = await self.hydrate(rows)
        return [people[row.id] for row in rows]

    async def create_person(self, person: PersonEntity) -> PersonEntity:
        """Save person. The identity is mandatory and may back only one person."""
        if person.identity is None:
            raise ValidationException("Person requires an identity", field="identity_id")
        created = await self.create(
            Person(id=person.id, name=person.name, identity_id=person.identity.id)
        )
        return _person_to_entity(created, {person.identity.id: person.identity})
