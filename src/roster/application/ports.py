"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from roster.domain import Country, Person


class CountryRepository(Protocol):
    """Persists and queries Country records."""

    def add(self, country: Country) -> None:
        """Store a new country. Raises DuplicateKeyError if storage rejects the name as taken."""
        ...

    def get_by_id(self, country_id: str) -> Country | None:
        """Return the country with the given id, or None."""
        ...

    def find_by_name(self, name: str) -> Country | None:
        """Return the country whose name equals name exactly (case-sensitive), or None."""
        ...

    def list_all(self) -> list[Country]:
        """Return all countries in a stable order."""
        ...


class PersonRepository(Protocol):
    """Persists and queries Person records."""

    def add(self, person: Person) -> None:
        """Store a new person."""
        ...

    def update(self, person: Person) -> bool:
        """Replace the stored person with the same id. Returns False if not found."""
        ...

    def delete(self, person_id: str) -> bool:
        """Remove the person. Returns True if removed, False if not found."""
        ...

    def get_by_id(self, person_id: str) -> Person | None:
        """Return the person with the given id, or None."""
        ...

    def list_all(self) -> list[Person]:
        """Return all persons in a stable order."""
        ...
