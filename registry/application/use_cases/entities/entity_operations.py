"""Entity operations: register records, create entities, resolve identity numbers.

Delegates persistence to the repository ports; identity resolution runs
on the loaded domain graph (EntityAggregate -> variant -> ... -> Identity).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from registry.application.dtos.entity import EntityIdentityResult
from registry.application.interfaces.repositories import (
    IBusinessRepository,
    IEntityRepository,
    IIdentityRepository,
    IPersonRepository,
)
from registry.domain.entities import (
    BusinessEntity,
    EntityAggregate,
    IdentityEntity,
    PersonEntity,
)
from registry.domain.enums import EntitableType
from registry.domain.exceptions import (
    InvalidVariantError,
    MissingIdentityError,
    ResourceNotFoundException,
    ValidationException,
)
from registry.domain.value_objects.core import IdentificationNumber, RecordName
from registry.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)


def _parse_entitable_type(value: EntitableType | str) -> EntitableType:
    """Map a tag to EntitableType; unknown tags raise InvalidVariantError."""
    if isinstance(value, EntitableType):
        return value
    try:
        return EntitableType(value)
    except ValueError:
        raise InvalidVariantError(repr(value)) from None


def _record_name(name: str) -> str:
    try:
        return RecordName(name).value
    except ValueError as e:
        raise ValidationException(str(e), field="name") from e


class EntityService:
    """Create and query identities, people, businesses and the entities over them."""

    def __init__(
        self,
        identity_repo: IIdentityRepository,
        person_repo: IPersonRepository,
        business_repo: IBusinessRepository,
        entity_repo: IEntityRepository,
        *,
        default_page_size: int = 100,
        max_page_size: int = 1000,
    ) -> None:
        self.identity_repo = identity_repo
        self.person_repo = person_repo
        self.business_repo = business_repo
        self.entity_repo = entity_repo
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    def _page(self, skip: int, limit: int | None) -> tuple[int, int]:
        """Clamp paging arguments to [0, ...) and [1, max_page_size]."""
        if limit is None:
            limit = self.default_page_size
        return max(skip, 0), min(max(limit, 1), self.max_page_size)

    # Records

    async def register_identity(self, number: str) -> IdentityEntity:
        """Issue an identity for number. Duplicate numbers raise ConstraintViolationError."""
        try:
            value = IdentificationNumber(number)
        except ValueError as e:
            raise ValidationException(str(e), field="number") from e
        return await self.identity_repo.create_identity(
            IdentityEntity(id=generate_cuid(), number=value)
        )

    async def register_person(self, name: str, identity_id: str) -> PersonEntity:
        """Create a person holding an existing identity."""
        identity = await self.identity_repo.get_identity(identity_id)
        if identity is None:
            raise ResourceNotFoundException("identity", identity_id)
        return await self.person_repo.create_person(
            PersonEntity(id=generate_cuid(), name=_record_name(name), identity=identity)
        )

    async def register_business(
        self, name: str, owner_id: str | None = None
    ) -> BusinessEntity:
        """Create a business, optionally owned by an existing person."""
        owner: PersonEntity | None = None
        if owner_id is not None:
            owner = await self.person_repo.get_person(owner_id)
            if owner is None:
                raise ResourceNotFoundException("person", owner_id)
        return await self.business_repo.create_business(
            BusinessEntity(id=generate_cuid(), name=_record_name(name), owner=owner)
        )

    async def get_person(self, person_id: str) -> PersonEntity:
        person = await self.person_repo.get_person(person_id)
        if person is None:
            raise ResourceNotFoundException("person", person_id)
        return person

    async def get_business(self, business_id: str) -> BusinessEntity:
        business = await self.business_repo.get_business(business_id)
        if business is None:
            raise ResourceNotFoundException("business", business_id)
        return business

    async def list_people(
        self, skip: int = 0, limit: int | None = None, name_contains: str | None = None
    ) -> list[PersonEntity]:
        skip, limit = self._page(skip, limit)
        return await self.person_repo.list_people(
            skip=skip, limit=limit, name_contains=name_contains
        )

    async def list_businesses(
        self,
        skip: int = 0,
        limit: int | None = None,
        name_contains: str | None = None,
        owned: bool | None = None,
    ) -> list[BusinessEntity]:
        skip, limit = self._page(skip, limit)
        return await self.business_repo.list_businesses(
            skip=skip, limit=limit, name_contains=name_contains, owned=owned
        )

    # Entities

    async def create_entity(
        self, entitable_type: EntitableType | str, entitable_id: str
    ) -> EntityAggregate:
        """Create an entity delegating to an existing business or person.

        Raises:
            InvalidVariantError: If entitable_type is not 'business' or 'person'.
            ResourceNotFoundException: If the variant record does not exist.
            ConstraintViolationError: If the variant already has an entity.
        """
        tag = _parse_entitable_type(entitable_type)
        variant: BusinessEntity | PersonEntity | None
        match tag:
            case EntitableType.BUSINESS:
                variant = await self.business_repo.get_business(entitable_id)
            case EntitableType.PERSON:
                variant = await self.person_repo.get_person(entitable_id)
        if variant is None:
            raise ResourceNotFoundException(tag.value, entitable_id)
        entity = await self.entity_repo.create_entity(EntityAggregate.create(variant))
        logger.info(
            "Entity %s created for %s %s", entity.id, tag.value, entitable_id
        )
        return entity

    async def get_entity(self, entity_id: str) -> EntityAggregate:
        """Return entity by id; raise ResourceNotFoundException when absent."""
        entity = await self.entity_repo.get_entity(entity_id)
        if entity is None:
            raise ResourceNotFoundException("entity", entity_id)
        return entity

    async def get_entity_for(
        self, entitable_type: EntitableType | str, entitable_id: str
    ) -> EntityAggregate:
        """Return the entity that holds the given variant record."""
        tag = _parse_entitable_type(entitable_type)
        entity = await self.entity_repo.get_by_entitable(tag, entitable_id)
        if entity is None:
            raise ResourceNotFoundException(f"entity for {tag.value}", entitable_id)
        return entity

    async def list_entities(
        self,
        entitable_type: EntitableType | str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[EntityAggregate]:
        """Return entities, optionally only businesses or only people."""
        tag = _parse_entitable_type(entitable_type) if entitable_type is not None else None
        skip, limit = self._page(skip, limit)
        return await self.entity_repo.list_entities(
            entitable_type=tag, skip=skip, limit=limit
        )

    async def get_identity_number(self, entity_id: str) -> str:
        """Load the entity graph and resolve its identity number.

        Raises:
            ResourceNotFoundException: If the entity does not exist.
            MissingIdentityError: If the chain ends before an identity.
        """
        entity = await self.get_entity(entity_id)
        try:
            return entity.get_identity_number()
        except MissingIdentityError as e:
            logger.warning(
                "Identity unresolved for entity %s: %s", entity_id, e.message
            )
            raise

    async def resolve_identity_numbers(
        self, entity_ids: Iterable[str]
    ) -> list[EntityIdentityResult]:
        """Resolve identity numbers for many entities with batched loads.

        Results follow the order of entity_ids (duplicates repeated). The
        first unknown id raises ResourceNotFoundException and the first
        unresolvable chain raises MissingIdentityError; nothing is skipped.
        """
        ids = list(entity_ids)
        entities = await self.entity_repo.get_entities(set(ids))
        results: list[EntityIdentityResult] = []
        for entity_id in ids:
            entity = entities.get(entity_id)
            if entity is None:
                raise ResourceNotFoundException("entity", entity_id)
            try:
                number = entity.get_identity_number()
            except MissingIdentityError as e:
                logger.warning(
                    "Identity unresolved for entity %s: %s", entity_id, e.message
                )
                raise
            results.append(
                EntityIdentityResult(
                    entity_id=entity.id,
                    entitable_type=entity.entitable_type,
                    entitable_id=entity.entitable_id,
                    identity_number=number,
                )
            )
        return results
