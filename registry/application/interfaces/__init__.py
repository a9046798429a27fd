"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from registry.infrastructure.
"""

from registry.application.interfaces.repositories import (
    IBusinessRepository,
    IEntityRepository,
    IIdentityRepository,
    IPersonRepository,
)

__all__ = [
    "IBusinessRepository",
    "IEntityRepository",
    "IIdentityRepository",
    "IPersonRepository",
]
