"""Tests for domain and storage exceptions (error_code, message, details)."""

import pytest

from registry.domain.exceptions import (
    InvalidVariantError,
    MissingIdentityError,
    RegistryException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from registry.infrastructure.exceptions import ConstraintViolationError, StorageException


def test_registry_exception_default_error_code() -> None:
    """Base RegistryException uses class name as error_code when not provided."""
    exc = RegistryException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "RegistryException"
    assert exc.details == {}


def test_registry_exception_to_dict() -> None:
    exc = RegistryException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    exc = ValidationException("Invalid format", field="number")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "number"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("person", "p-1")
    assert "person" in exc.message and "p-1" in exc.message
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "person", "resource_id": "p-1"}


def test_invalid_variant_error() -> None:
    exc = InvalidVariantError("NoneType")
    assert "NoneType" in exc.message
    assert exc.error_code == "INVALID_VARIANT"
    assert exc.details == {"received": "NoneType"}


def test_missing_identity_error() -> None:
    exc = MissingIdentityError("business", "b-1", "no owner")
    assert "b-1" in exc.message and "no owner" in exc.message
    assert exc.error_code == "MISSING_IDENTITY"
    assert exc.details == {
        "record_type": "business",
        "record_id": "b-1",
        "reason": "no owner",
    }


def test_sql_not_configured_exception() -> None:
    exc = SqlNotConfiguredException()
    assert "SQL" in exc.message
    assert exc.error_code == "SERVICE_UNAVAILABLE"


def test_constraint_violation_error() -> None:
    exc = ConstraintViolationError("identity", "UNIQUE constraint failed", number="X1")
    assert exc.error_code == "CONSTRAINT_VIOLATION"
    assert exc.details == {
        "resource_type": "identity",
        "reason": "UNIQUE constraint failed",
        "number": "X1",
    }
    assert isinstance(exc, StorageException)


def test_exceptions_are_catchable_as_registry_exception() -> None:
    with pytest.raises(RegistryException) as exc_info:
        raise MissingIdentityError("person", "p-1", "no identity")
    assert exc_info.value.error_code == "MISSING_IDENTITY"
