"""Country directory: add with name uniqueness, list, lookup by id."""

from roster.application.dto import CountryAddRequest, CountryView
from roster.application.errors import (
    DuplicateKeyError,
    InvalidArgumentError,
    NullArgumentError,
)
from roster.application.ports import CountryRepository
from roster.application.views import to_country_view
from roster.domain import Country


class CountryService:
    """Owns Country records. Names are unique (case-sensitive, exact)."""

    def __init__(self, repository: CountryRepository) -> None:
        self._repo = repository

    def add_country(self, request: CountryAddRequest | None) -> CountryView:
        if request is None:
            raise NullArgumentError("country_add_request")

        name = request.name
        if name is None or not name.strip():
            raise InvalidArgumentError("Country name can't be blank.")

        if self._repo.find_by_name(name) is not None:
            raise DuplicateKeyError(name)

        country = Country(name=name)
        self._repo.add(country)
        return to_country_view(country)

    def get_all_countries(self) -> list[CountryView]:
        return [to_country_view(c) for c in self._repo.list_all()]

    def get_country_by_id(self, country_id: str | None) -> CountryView | None:
        """Return the country, or None when country_id is None or unknown."""
        if not country_id:
            return None
        country = self._repo.get_by_id(country_id)
        if country is None:
            return None
        return to_country_view(country)

    def countries_by_id(self) -> dict[str, Country]:
        """Full Country set keyed by id, for joining Person views."""
        return {c.id: c for c in self._repo.list_all()}
