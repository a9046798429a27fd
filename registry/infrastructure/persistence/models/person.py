"""Person ORM model. Each person references exactly one identity."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from registry.infrastructure.persistence.database import Base
from registry.infrastructure.persistence.models.mixins import RecordModel


class Person(RecordModel, Base):
    """Person record. Table: person. identity_id is mandatory and unique (one person per identity)."""

    __tablename__ = "person"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    identity_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("identity.id", ondelete="RESTRICT"),
        unique=True,
        nullable=False,
    )
