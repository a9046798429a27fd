"""Identity ORM model. Leaf record holding an identification number."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from registry.domain.value_objects.core import IdentificationNumber
from registry.infrastructure.persistence.database import Base
from registry.infrastructure.persistence.models.mixins import RecordModel


class Identity(RecordModel, Base):
    """Identity record. Table: identity. number is unique across the registry."""

    __tablename__ = "identity"

    number: Mapped[str] = mapped_column(
        String(IdentificationNumber.MAX_LENGTH), unique=True, nullable=False
    )
