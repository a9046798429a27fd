"""Tests for the delegation chain: EntityAggregate -> Business / Person -> Identity."""

import dataclasses

import pytest

from registry.domain.entities import (
    BusinessEntity,
    EntityAggregate,
    HasIdentityNumber,
    IdentityEntity,
    PersonEntity,
)
from registry.domain.enums import EntitableType
from registry.domain.exceptions import (
    InvalidVariantError,
    MissingIdentityError,
    ValidationException,
)
from registry.domain.value_objects.core import IdentificationNumber

NUMBER = "4WA3X6E21T"


def _identity(number: str = NUMBER) -> IdentityEntity:
    return IdentityEntity(id="id-1", number=IdentificationNumber(number))


def _person(identity: IdentityEntity | None = None) -> PersonEntity:
    return PersonEntity(id="p-1", name="Ada Lovelace", identity=identity or _identity())


class TestIdentityEntity:
    def test_get_number(self) -> None:
        assert _identity().get_number() == NUMBER

    def test_requires_id(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            IdentityEntity(id="", number=IdentificationNumber(NUMBER))
        assert exc_info.value.details == {"field": "id"}

    def test_requires_value_object(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            IdentityEntity(id="id-1", number=NUMBER)  # type: ignore[arg-type]
        assert exc_info.value.details == {"field": "number"}

    def test_number_is_immutable(self) -> None:
        identity = _identity()
        with pytest.raises(dataclasses.FrozenInstanceError):
            identity.number = IdentificationNumber("OTHER")  # type: ignore[misc]


class TestPersonEntity:
    def test_resolves_identity_number(self) -> None:
        assert _person().resolve_identity_number() == NUMBER

    def test_missing_identity_raises(self) -> None:
        person = PersonEntity(id="p-1", name="Ada", identity=None)
        with pytest.raises(MissingIdentityError) as exc_info:
            person.resolve_identity_number()
        assert exc_info.value.details["record_type"] == "person"
        assert exc_info.value.details["record_id"] == "p-1"

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            PersonEntity(id="p-1", name="  ", identity=_identity())
        assert exc_info.value.details == {"field": "name"}


class TestBusinessEntity:
    def test_resolves_through_owner(self) -> None:
        business = BusinessEntity(id="b-1", name="Acme", owner=_person())
        assert business.has_owner()
        assert business.resolve_identity_number() == NUMBER

    def test_no_owner_raises(self) -> None:
        business = BusinessEntity(id="b-1", name="Acme")
        assert not business.has_owner()
        with pytest.raises(MissingIdentityError) as exc_info:
            business.resolve_identity_number()
        assert exc_info.value.details["record_type"] == "business"
        assert exc_info.value.details["reason"] == "no owner"

    def test_owner_without_identity_raises(self) -> None:
        owner = PersonEntity(id="p-1", name="Ada", identity=None)
        business = BusinessEntity(id="b-1", name="Acme", owner=owner)
        with pytest.raises(MissingIdentityError) as exc_info:
            business.resolve_identity_number()
        assert exc_info.value.details["record_type"] == "person"


class TestHasIdentityNumber:
    def test_variants_satisfy_protocol(self) -> None:
        assert isinstance(_person(), HasIdentityNumber)
        assert isinstance(BusinessEntity(id="b-1", name="Acme"), HasIdentityNumber)

    def test_identity_is_not_a_variant(self) -> None:
        assert not isinstance(_identity(), HasIdentityNumber)


class TestEntityAggregate:
    def test_person_scenario(self) -> None:
        """Identity -> Person -> Entity resolves the identity number."""
        entity = EntityAggregate.create(_person())
        assert entity.get_identity_number() == NUMBER

    def test_business_scenario(self) -> None:
        """Identity -> Person -> Business(owner) -> Entity resolves the owner's number."""
        business = BusinessEntity(id="b-1", name="Acme", owner=_person())
        entity = EntityAggregate.create(business)
        assert entity.get_identity_number() == NUMBER

    def test_business_without_owner_raises(self) -> None:
        entity = EntityAggregate.create(BusinessEntity(id="b-1", name="Acme"))
        with pytest.raises(MissingIdentityError):
            entity.get_identity_number()

    def test_idempotent(self) -> None:
        entity = EntityAggregate.create(_person())
        assert entity.get_identity_number() == entity.get_identity_number() == NUMBER

    @pytest.mark.parametrize("variant", [None, "p-1", _identity(), object()])
    def test_create_rejects_non_variants(self, variant: object) -> None:
        with pytest.raises(InvalidVariantError) as exc_info:
            EntityAggregate.create(variant)
        assert exc_info.value.details["received"] == type(variant).__name__

    def test_constructor_rejects_non_variant(self) -> None:
        with pytest.raises(InvalidVariantError):
            EntityAggregate(id="e-1", entitable=None)  # type: ignore[arg-type]

    def test_create_generates_id(self) -> None:
        first = EntityAggregate.create(_person())
        second = EntityAggregate.create(_person())
        assert first.id and second.id and first.id != second.id

    def test_create_keeps_given_id(self) -> None:
        assert EntityAggregate.create(_person(), entity_id="e-1").id == "e-1"

    def test_person_accessors(self) -> None:
        person = _person()
        entity = EntityAggregate.create(person)
        assert entity.entitable_type is EntitableType.PERSON
        assert entity.entitable_id == "p-1"
        assert entity.is_person() and not entity.is_business()
        assert entity.person is person
        assert entity.business is None

    def test_business_accessors(self) -> None:
        business = BusinessEntity(id="b-1", name="Acme")
        entity = EntityAggregate.create(business)
        assert entity.entitable_type is EntitableType.BUSINESS
        assert entity.entitable_id == "b-1"
        assert entity.is_business() and not entity.is_person()
        assert entity.business is business
        assert entity.person is None

    def test_variant_is_immutable(self) -> None:
        entity = EntityAggregate.create(_person())
        with pytest.raises(dataclasses.FrozenInstanceError):
            entity.entitable = BusinessEntity(id="b-1", name="Acme")  # type: ignore[misc]
