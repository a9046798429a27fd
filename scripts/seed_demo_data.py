"""Seed the two reference entities and log their resolved identity numbers.

Creates tables if missing, then registers one identity (4WA3X6E21T), a
person holding it, a business owned by that person, and one entity per
variant. Re-running is safe: if the identity number already exists the
seed is skipped.

Usage:
    uv run python -m scripts.seed_demo_data [IDENTITY_NUMBER]

Requires: DATABASE_URL (defaults to a local SQLite file).
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from registry.core.config import get_settings
from registry.domain.enums import EntitableType
from registry.domain.value_objects.core import IdentificationNumber
from registry.infrastructure.composition import build_entity_service
from registry.infrastructure.persistence.database import (
    create_all,
    dispose_engine,
    get_db_transactional,
)
from registry.infrastructure.persistence.repositories import IdentityRepository
from registry.shared.logging import setup_logging

DEFAULT_NUMBER = "4WA3X6E21T"

logger = logging.getLogger("scripts.seed_demo_data")


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)
    get_settings.cache_clear()


async def run(number: str) -> None:
    _load_env()
    setup_logging()
    try:
        await create_all()
        async with get_db_transactional() as session:
            svc = build_entity_service(session)
            existing = await IdentityRepository(session).get_by_number(
                IdentificationNumber(number)
            )
            if existing is not None:
                logger.info("Identity %s already seeded (%s); skipping", number, existing.id)
                return
            identity = await svc.register_identity(number)
            person = await svc.register_person("Ada Lovelace", identity.id)
            business = await svc.register_business("Analytical Engines Ltd", owner_id=person.id)
            person_entity = await svc.create_entity(EntitableType.PERSON, person.id)
            business_entity = await svc.create_entity(EntitableType.BUSINESS, business.id)
            for result in await svc.resolve_identity_numbers(
                [person_entity.id, business_entity.id]
            ):
                logger.info(
                    "Entity %s (%s %s) -> %s",
                    result.entity_id,
                    result.entitable_type.value,
                    result.entitable_id,
                    result.identity_number,
                )
    finally:
        await dispose_engine()


def main() -> None:
    number = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_NUMBER
    asyncio.run(run(number))


if __name__ == "__main__":
    main()
