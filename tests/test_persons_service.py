"""Unit tests for PersonsService. In-memory repos only."""

import dataclasses
from datetime import date

import pytest

from roster.application import (
    CountryAddRequest,
    CountryService,
    NotFoundError,
    NullArgumentError,
    PersonAddRequest,
    PersonsService,
    PersonUpdateRequest,
    SortOrder,
    ValidationError,
)
from roster.domain import GenderOptions
from roster.infrastructure import InMemoryCountryRepository, InMemoryPersonRepository


@pytest.fixture
def country_repo() -> InMemoryCountryRepository:
    return InMemoryCountryRepository()


@pytest.fixture
def person_repo() -> InMemoryPersonRepository:
    return InMemoryPersonRepository()


@pytest.fixture
def countries(country_repo) -> CountryService:
    return CountryService(country_repo)


@pytest.fixture
def service(person_repo, countries) -> PersonsService:
    return PersonsService(person_repo, countries)


def _add_request(country_id: str | None, **overrides) -> PersonAddRequest:
    fields = dict(
        name="eslam",
        email="test@test.com",
        date_of_birth=date(2000, 1, 1),
        gender=GenderOptions.MALE,
        country_id=country_id,
        address="Cairo street",
        receive_newsletters=False,
    )
    fields.update(overrides)
    return PersonAddRequest(**fields)


# --- add_person ---


def test_add_person_none_request_raises(service) -> None:
    with pytest.raises(NullArgumentError):
        service.add_person(None)


def test_add_person_missing_name_raises_and_stores_nothing(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    with pytest.raises(ValidationError):
        service.add_person(_add_request(egypt.id, name=None))
    assert service.get_all_persons() == []


def test_add_person_invalid_email_raises(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    with pytest.raises(ValidationError) as exc_info:
        service.add_person(_add_request(egypt.id, email="not-an-email"))
    assert exc_info.value.field == "email"


def test_add_person_proper_details(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    added = service.add_person(_add_request(egypt.id, receive_newsletters=True))

    assert added.id
    assert added.name == "eslam"
    assert added.gender == "Male"
    assert added.country_id == egypt.id
    assert added.country_name == "Egypt"
    assert added.receive_newsletters is True
    assert added.age is not None
    assert added in service.get_all_persons()


def test_added_person_retrievable_with_equal_fields(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    added = service.add_person(_add_request(egypt.id))
    assert service.get_person_by_id(added.id) == added


def test_person_view_equality_ignores_age(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    added = service.add_person(_add_request(egypt.id))
    assert dataclasses.replace(added, age=999) == added
    assert dataclasses.replace(added, address="elsewhere") != added


def test_person_without_birth_date_has_no_age(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    added = service.add_person(_add_request(egypt.id, date_of_birth=None))
    assert added.age is None


# --- get_person_by_id / get_all_persons ---


def test_get_person_by_id_none_or_unknown(service) -> None:
    assert service.get_person_by_id(None) is None
    assert service.get_person_by_id("nonexistent-uuid") is None


def test_get_all_persons_empty(service) -> None:
    assert service.get_all_persons() == []


def test_get_all_persons_after_adding_few(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    cairo = countries.add_country(CountryAddRequest(name="Cairo"))
    added = [
        service.add_person(_add_request(egypt.id, name="test", email="test@test.com")),
        service.add_person(_add_request(cairo.id, name="test2", email="test2@test.com")),
    ]
    listed = service.get_all_persons()
    assert len(listed) == 2
    for view in added:
        assert view in listed


def test_dangling_country_reference_resolves_to_none(service, countries, country_repo) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    added = service.add_person(_add_request(egypt.id))
    assert country_repo.remove(egypt.id) is True

    found = service.get_person_by_id(added.id)
    assert found is not None
    assert found.country_id == egypt.id
    assert found.country_name is None


# --- get_filtered_persons ---


def _add_eslam_and_solom(service, countries):
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    india = countries.add_country(CountryAddRequest(name="India"))
    eslam = service.add_person(_add_request(egypt.id, name="eslam", email="test@test.com"))
    solom = service.add_person(
        _add_request(
            india.id,
            name="solom",
            email="solom@mail.com",
            gender=GenderOptions.FEMALE,
            date_of_birth=date(1990, 6, 15),
            address="Delhi road",
        )
    )
    return eslam, solom


def test_get_filtered_persons_empty_search_text_returns_all(service, countries) -> None:
    eslam, solom = _add_eslam_and_solom(service, countries)
    assert service.get_filtered_persons("name", "") == [eslam, solom]
    assert service.get_filtered_persons("name", None) == [eslam, solom]
    assert service.get_filtered_persons("", "es") == [eslam, solom]


def test_get_filtered_persons_by_name(service, countries) -> None:
    eslam, _ = _add_eslam_and_solom(service, countries)
    assert service.get_filtered_persons("name", "es") == [eslam]
    assert service.get_filtered_persons("name", "ES") == [eslam]


def test_get_filtered_persons_by_country_name(service, countries) -> None:
    _, solom = _add_eslam_and_solom(service, countries)
    assert service.get_filtered_persons("country", "ind") == [solom]


def test_get_filtered_persons_unknown_field_returns_all(service, countries) -> None:
    eslam, solom = _add_eslam_and_solom(service, countries)
    assert service.get_filtered_persons("shoe_size", "es") == [eslam, solom]


# --- get_sorted_persons ---


def test_get_sorted_persons_by_name_descending(service, countries) -> None:
    _add_eslam_and_solom(service, countries)
    all_persons = service.get_all_persons()
    ordered = service.get_sorted_persons(all_persons, "name", SortOrder.DESC)
    assert [p.name for p in ordered] == ["solom", "eslam"]


def test_get_sorted_persons_empty_field_returns_input(service, countries) -> None:
    _add_eslam_and_solom(service, countries)
    all_persons = service.get_all_persons()
    assert service.get_sorted_persons(all_persons, "", SortOrder.DESC) == all_persons


# --- update_person ---


def test_update_person_none_request_raises(service) -> None:
    with pytest.raises(NullArgumentError):
        service.update_person(None)


def test_update_person_unknown_id_raises_not_found(service) -> None:
    valid = PersonUpdateRequest(id="nonexistent-uuid", name="eslam", email="test@test.com")
    with pytest.raises(NotFoundError):
        service.update_person(valid)
    with pytest.raises(NotFoundError):
        service.update_person(PersonUpdateRequest(id="nonexistent-uuid"))
    with pytest.raises(NotFoundError):
        service.update_person(PersonUpdateRequest(id=None, name="x", email="x@test.com"))


def test_update_person_blank_name_raises(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    added = service.add_person(_add_request(egypt.id))
    request = PersonUpdateRequest(id=added.id, name="", email=added.email)
    with pytest.raises(ValidationError):
        service.update_person(request)
    assert service.get_person_by_id(added.id) == added


def test_update_person_applies_mutable_fields(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    italy = countries.add_country(CountryAddRequest(name="Italy"))
    added = service.add_person(_add_request(egypt.id))

    request = PersonUpdateRequest(
        id=added.id,
        name="eslam ahmed",
        email="eslam@mail.com",
        date_of_birth=date(1970, 5, 5),
        gender=GenderOptions.FEMALE,
        country_id=italy.id,
        address="Rome",
        receive_newsletters=True,
    )
    updated = service.update_person(request)

    assert updated.id == added.id
    assert updated.name == "eslam ahmed"
    assert updated.email == "eslam@mail.com"
    assert updated.country_name == "Italy"
    assert updated.address == "Rome"
    assert updated.receive_newsletters is True
    # date_of_birth and gender are not changed by update
    assert updated.date_of_birth == added.date_of_birth
    assert updated.gender == added.gender
    assert service.get_person_by_id(added.id) == updated


def test_update_from_view_roundtrip(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    added = service.add_person(_add_request(egypt.id))
    request = added.to_update_request()
    assert request.gender is GenderOptions.MALE
    assert service.update_person(request) == added


# --- delete_person ---


def test_delete_person_none_id_raises(service) -> None:
    with pytest.raises(NullArgumentError):
        service.delete_person(None)


def test_delete_person_unknown_id_returns_false(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    added = service.add_person(_add_request(egypt.id))
    assert service.delete_person("nonexistent-uuid") is False
    assert service.get_all_persons() == [added]


def test_delete_person_removes_only_that_person(service, countries) -> None:
    eslam, solom = _add_eslam_and_solom(service, countries)
    assert service.delete_person(solom.id) is True
    assert service.get_person_by_id(solom.id) is None
    assert service.get_all_persons() == [eslam]
    assert service.delete_person(solom.id) is False


def test_add_person_gender_given_as_text(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    added = service.add_person(_add_request(egypt.id, gender="male"))
    assert added.gender == "Male"
    assert service.get_person_by_id(added.id).gender == "Male"


def test_add_person_unknown_gender_raises_and_stores_nothing(service, countries) -> None:
    egypt = countries.add_country(CountryAddRequest(name="Egypt"))
    with pytest.raises(ValidationError) as exc_info:
        service.add_person(_add_request(egypt.id, gender="Robot"))
    assert exc_info.value.field == "gender"
    assert service.get_all_persons() == []
