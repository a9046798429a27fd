"""Infrastructure exceptions for storage operations.

Storage errors extend RegistryException so callers handle them the same
way as domain errors.
"""

from typing import Any

from registry.domain.exceptions import RegistryException


class StorageException(RegistryException):
    """Base exception for storage operations."""


class ConstraintViolationError(StorageException):
    """Save rejected by the database (unique, foreign-key, not-null or check constraint)."""

    def __init__(self, resource_type: str, reason: str, **details_extra: Any) -> None:
        """Initialize with the record type and the driver's reason.

        Args:
            resource_type: Table / record type being saved (e.g. 'identity').
            reason: Driver message (first line of the IntegrityError).
            **details_extra: Optional keys merged into details (e.g. number).
        """
        super().__init__(
            f"Constraint violation saving {resource_type}",
            "CONSTRAINT_VIOLATION",
            {"resource_type": resource_type, "reason": reason, **details_extra},
        )
