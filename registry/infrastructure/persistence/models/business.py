"""Business ORM model. Optionally owned by a person."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from registry.infrastructure.persistence.database import Base
from registry.infrastructure.persistence.models.mixins import RecordModel


class Business(RecordModel, Base):
    """Business record. Table: business. owner_id is nullable (ownerless businesses)."""

    __tablename__ = "business"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    owner_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("person.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
