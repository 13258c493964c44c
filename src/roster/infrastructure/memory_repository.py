"""In-memory implementations of CountryRepository and PersonRepository (no DB)."""

from roster.domain import Country, Person


class InMemoryCountryRepository:
    """Stores countries in memory. Order preserved by insertion."""

    def __init__(self) -> None:
        self._by_id: dict[str, Country] = {}

    def add(self, country: Country) -> None:
        if country.id in self._by_id:
            return
        self._by_id[country.id] = country

    def get_by_id(self, country_id: str) -> Country | None:
        return self._by_id.get(country_id)

    def find_by_name(self, name: str) -> Country | None:
        for country in self._by_id.values():
            if country.name == name:
                return country
        return None

    def list_all(self) -> list[Country]:
        return list(self._by_id.values())

    def remove(self, country_id: str) -> bool:
        """Drop a country. Persons referencing it keep their country_id."""
        return self._by_id.pop(country_id, None) is not None


class InMemoryPersonRepository:
    """Stores persons in memory. Order preserved by insertion; updates keep position."""

    def __init__(self) -> None:
        self._by_id: dict[str, Person] = {}

    def add(self, person: Person) -> None:
        if person.id in self._by_id:
            return
        self._by_id[person.id] = person

    def update(self, person: Person) -> bool:
        if person.id not in self._by_id:
            return False
        self._by_id[person.id] = person
        return True

    def delete(self, person_id: str) -> bool:
        return self._by_id.pop(person_id, None) is not None

    def get_by_id(self, person_id: str) -> Person | None:
        return self._by_id.get(person_id)

    def list_all(self) -> list[Person]:
        return list(self._by_id.values())
