"""Domain value objects (immutable, self-validating)."""

from registry.domain.value_objects.core import IdentificationNumber, RecordName

__all__ = ["IdentificationNumber", "RecordName"]
