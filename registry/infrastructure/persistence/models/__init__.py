"""Persistence models: ORM records and mixins."""

from registry.infrastructure.persistence.models.business import Business
from registry.infrastructure.persistence.models.entity import Entity
from registry.infrastructure.persistence.models.identity import Identity
from registry.infrastructure.persistence.models.mixins import (
    CuidMixin,
    RecordModel,
    TimestampMixin,
)
from registry.infrastructure.persistence.models.person import Person

__all__ = [
    "Business",
    "Entity",
    "Identity",
    "Person",
    "CuidMixin",
    "RecordModel",
    "TimestampMixin",
]
