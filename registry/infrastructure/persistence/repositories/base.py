"""Base repository: primary-key lookups, batch lookups, paging, and create."""

from collections.abc import Collection
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from registry.infrastructure.exceptions import ConstraintViolationError
from registry.infrastructure.persistence.database import Base
from registry.shared.logging import get_logger

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


def _integrity_reason(exc: IntegrityError) -> str:
    """First line of the driver message (drops the SQL and parameters)."""
    return str(exc.orig).splitlines()[0] if exc.orig is not None else str(exc)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, get_by_ids, get_all and create.

    Rows are written once and never updated, so there is no update/delete.
    Subclasses map rows to domain entities and may override _on_after_create.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    @property
    def resource_type(self) -> str:
        return self.model.__tablename__

    async def get_by_id(self, record_id: str) -> ModelType | None:
        """Return a single row by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == record_id))
        return result.scalar_one_or_none()

    async def get_by_ids(self, record_ids: Collection[str]) -> dict[str, ModelType]:
        """Return rows keyed by id for the given ids (batch; one query). Missing ids are absent."""
        if not record_ids:
            return {}
        model: Any = self.model
        result = await self.db.execute(
            select(self.model).where(model.id.in_(set(record_ids)))
        )
        return {row.id: row for row in result.scalars().all()}

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[ModelType]:
        """Return rows oldest first with pagination."""
        model: Any = self.model
        result = await self.db.execute(
            select(self.model)
            .order_by(model.created_at, model.id)
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new row and run _on_after_create hook.

        Raises:
            ConstraintViolationError: If the database rejects the row.
        """
        self.db.add(obj)
        try:
            await self.db.flush()
        except IntegrityError as exc:
            reason = _integrity_reason(exc)
            logger.warning("Rejected %s insert: %s", self.resource_type, reason)
            raise ConstraintViolationError(self.resource_type, reason) from exc
        await self.db.refresh(obj)
        await self._on_after_create(obj)
        return obj

    async def _on_after_create(self, obj: ModelType) -> None:
        """Log the new row; override in subclasses for extra bookkeeping."""
        logger.info("Created %s %s", self.resource_type, getattr(obj, "id", None))
