"""Entity ORM model. Polymorphic reference to a business or a person.

entitable_id points into the table named by entitable_type, so there is
no foreign key; the check constraint restricts the tag and the unique
constraint keeps one entity per variant record.
"""

from sqlalchemy import CheckConstraint, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from registry.domain.enums import EntitableType
from registry.infrastructure.persistence.database import Base
from registry.infrastructure.persistence.models.mixins import RecordModel


class Entity(RecordModel, Base):
    """Entity record. Table: entity. Tag: business, person."""

    __tablename__ = "entity"

    entitable_type: Mapped[str] = mapped_column(String(32), nullable=False)
    entitable_id: Mapped[str] = mapped_column(String, nullable=False)

    __table_args__ = (
        CheckConstraint(
            "entitable_type IN ({})".format(
                ", ".join(
                    "'{}'".format(v.replace("'", "''"))
                    for v in EntitableType.values()
                )
            ),
            name="entity_entitable_type_check",
        ),
        UniqueConstraint(
            "entitable_type",
            "entitable_id",
            name="uq_entity_entitable",
        ),
        Index("ix_entity_entitable_type", "entitable_type"),
    )
