"""Application layer: repository ports, DTOs, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces.
"""

from registry.application.dtos.entity import EntityIdentityResult
from registry.application.interfaces import (
    IBusinessRepository,
    IEntityRepository,
    IIdentityRepository,
    IPersonRepository,
)
from registry.application.use_cases.entities import EntityService

__all__ = [
    "EntityIdentityResult",
    "EntityService",
    "IBusinessRepository",
    "IEntityRepository",
    "IIdentityRepository",
    "IPersonRepository",
]
