"""Domain exceptions for the entity registry.

Defines domain-level exceptions that represent business rule violations
and broken delegation chains. These exceptions are independent of
infrastructure concerns; callers map them using error_code and details.
"""

from typing import Any


class RegistryException(Exception):
    """Base exception for all registry errors.

    All custom exceptions inherit from this class to allow consistent
    error handling and logging.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, record id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a serializable representation (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RegistryException):
    """Raised when input validation fails (e.g. empty name, malformed number)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(RegistryException):
    """Raised when a requested record is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of record (e.g. 'person', 'entity').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class InvalidVariantError(RegistryException):
    """Raised when an Entity is built without exactly one recognized variant.

    A variant is recognized when it is a Business or a Person; None and
    any other type (or an unknown entitable_type tag) are rejected.
    """

    def __init__(self, received: str) -> None:
        """Initialize with a description of what was received.

        Args:
            received: Type name or tag that was rejected (e.g. 'NoneType', 'company').
        """
        super().__init__(
            f"Entity requires a business or person variant, got: {received}",
            "INVALID_VARIANT",
            {"received": received},
        )


class MissingIdentityError(RegistryException):
    """Raised when identity resolution reaches a record with nothing to forward to.

    Examples: a Business with no owner, or a Person without an Identity
    (a data-integrity violation).
    """

    def __init__(self, record_type: str, record_id: str, reason: str) -> None:
        """Initialize with the record that broke the chain.

        Args:
            record_type: 'business' or 'person'.
            record_id: Id of the record with no further reference.
            reason: Human-readable reason (e.g. 'no owner').
        """
        super().__init__(
            f"No identity number for {record_type} {record_id}: {reason}",
            "MISSING_IDENTITY",
            {"record_type": record_type, "record_id": record_id, "reason": reason},
        )


class SqlNotConfiguredException(RegistryException):
    """Raised when a session is requested but no database engine could be created."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
