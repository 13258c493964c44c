"""Person directory: add, update, delete, lookup, list, filter and sort."""

import dataclasses

from roster.application.country_service import CountryService
from roster.application.dto import PersonAddRequest, PersonUpdateRequest, PersonView
from roster.application.errors import NotFoundError, NullArgumentError
from roster.application.ports import PersonRepository
from roster.application.query import PersonField, SortOrder, filter_persons, sort_persons
from roster.application.validation import validate_add_request, validate_update_request
from roster.application.views import to_person_view
from roster.domain import GenderOptions, Person


class PersonsService:
    """Owns Person records. Views are joined with the Country directory on every read."""

    def __init__(
        self,
        repository: PersonRepository,
        country_service: CountryService,
    ) -> None:
        self._repo = repository
        self._countries = country_service

    def _to_view(self, person: Person) -> PersonView:
        return to_person_view(person, self._countries.countries_by_id())

    def add_person(self, request: PersonAddRequest | None) -> PersonView:
        """Validate and store a new person. Raises NullArgumentError or ValidationError."""
        if request is None:
            raise NullArgumentError("person_add_request")

        validate_add_request(request)

        person = Person(
            name=request.name.strip(),
            email=request.email.strip(),
            date_of_birth=request.date_of_birth,
            gender=GenderOptions.parse(request.gender).value,
            country_id=request.country_id,
            address=request.address,
            receive_newsletters=bool(request.receive_newsletters),
        )
        self._repo.add(person)
        return self._to_view(person)

    def get_all_persons(self) -> list[PersonView]:
        countries = self._countries.countries_by_id()
        return [to_person_view(p, countries) for p in self._repo.list_all()]

    def get_person_by_id(self, person_id: str | None) -> PersonView | None:
        """Return the person, or None when person_id is None or unknown."""
        if not person_id:
            return None
        person = self._repo.get_by_id(person_id)
        if person is None:
            return None
        return self._to_view(person)

    def get_filtered_persons(
        self,
        search_by: PersonField | str | None,
        search_string: str | None,
    ) -> list[PersonView]:
        return filter_persons(self.get_all_persons(), search_by, search_string)

    def get_sorted_persons(
        self,
        persons: list[PersonView],
        sort_by: PersonField | str | None,
        sort_order: SortOrder | str = SortOrder.ASC,
    ) -> list[PersonView]:
        return sort_persons(persons, sort_by, sort_order)

    def update_person(self, request: PersonUpdateRequest | None) -> PersonView:
        """Apply name, email, country_id, address and receive_newsletters to an existing person.

        An unknown id raises NotFoundError before the payload is validated.
        """
        if request is None:
            raise NullArgumentError("person_update_request")

        existing = self._repo.get_by_id(request.id) if request.id else None
        if existing is None:
            raise NotFoundError(request.id)

        validate_update_request(request)

        updated = dataclasses.replace(
            existing,
            name=request.name.strip(),
            email=request.email.strip(),
            country_id=request.country_id,
            address=request.address,
            receive_newsletters=bool(request.receive_newsletters),
        )
        if not self._repo.update(updated):
            raise NotFoundError(request.id)
        return self._to_view(updated)

    def delete_person(self, person_id: str | None) -> bool:
        """Remove the person. False when no person has that id."""
        if person_id is None:
            raise NullArgumentError("person_id")
        if self._repo.get_by_id(person_id) is None:
            return False
        return self._repo.delete(person_id)
