"""Read-time join of a Person with the Country set."""

from collections.abc import Mapping
from datetime import date

from roster.application.dto import CountryView, PersonView
from roster.domain import Country, Person

DAYS_PER_YEAR = 365.25


def compute_age(date_of_birth: date | None, today: date | None = None) -> int | None:
    """Whole years from date_of_birth to today, on a 365.25-day year. None without a birth date."""
    if date_of_birth is None:
        return None
    today = today or date.today()
    return round((today - date_of_birth).days / DAYS_PER_YEAR)


def to_country_view(country: Country) -> CountryView:
    return CountryView(id=country.id, name=country.name)


def to_person_view(
    person: Person,
    countries_by_id: Mapping[str, Country],
    *,
    today: date | None = None,
) -> PersonView:
    """Build the view for one Person. A missing or dangling country_id gives country_name None."""
    country = countries_by_id.get(person.country_id) if person.country_id else None
    return PersonView(
        id=person.id,
        name=person.name,
        email=person.email,
        date_of_birth=person.date_of_birth,
        gender=person.gender,
        country_id=person.country_id,
        country_name=country.name if country else None,
        address=person.address,
        receive_newsletters=person.receive_newsletters,
        age=compute_age(person.date_of_birth, today),
    )
