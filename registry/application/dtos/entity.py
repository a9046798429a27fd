"""DTOs for entity use cases (no dependency on ORM)."""

from dataclasses import dataclass

from registry.domain.enums import EntitableType


@dataclass(frozen=True)
class EntityIdentityResult:
    """Identity number resolved for one entity (result of resolve_identity_numbers)."""

    entity_id: str
    entitable_type: EntitableType
    entitable_id: str
    identity_number: str
