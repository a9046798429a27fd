"""Composition root: wire SQLAlchemy repositories into EntityService for one session."""

from sqlalchemy.ext.asyncio import AsyncSession

from registry.application.use_cases.entities import EntityService
from registry.core.config import Settings, get_settings
from registry.infrastructure.persistence.repositories import (
    BusinessRepository,
    EntityRepository,
    IdentityRepository,
    PersonRepository,
)


def build_entity_service(db: AsyncSession, settings: Settings | None = None) -> EntityService:
    """Return an EntityService whose repositories share db (one unit of work)."""
    settings = settings or get_settings()
    person_repo = PersonRepository(db)
    return EntityService(
        identity_repo=IdentityRepository(db),
        person_repo=person_repo,
        business_repo=BusinessRepository(db, person_repo=person_repo),
        entity_repo=EntityRepository(db),
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
