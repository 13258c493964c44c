"""Request and view types exchanged with the presentation layer."""

from dataclasses import dataclass, field
from datetime import date

from roster.domain import GenderOptions


@dataclass(frozen=True)
class CountryAddRequest:
    """Input for adding a Country."""

    name: str | None = None


@dataclass(frozen=True)
class CountryView:
    """One Country as returned by the Country directory."""

    id: str
    name: str


@dataclass(frozen=True)
class PersonAddRequest:
    """Input for adding a Person. Checked by the validation rules before anything is stored."""

    name: str | None = None
    email: str | None = None
    date_of_birth: date | None = None
    gender: GenderOptions | str | None = None
    country_id: str | None = None
    address: str | None = None
    receive_newsletters: bool = False


@dataclass(frozen=True)
class PersonUpdateRequest:
    """Input for updating a Person.

    Only name, email, country_id, address and receive_newsletters are applied;
    date_of_birth and gender are carried so an edit form can round-trip them.
    """

    id: str | None = None
    name: str | None = None
    email: str | None = None
    date_of_birth: date | None = None
    gender: GenderOptions | None = None
    country_id: str | None = None
    address: str | None = None
    receive_newsletters: bool = False


@dataclass(frozen=True)
class PersonView:
    """
    A Person joined with its Country name.
    age is derived from date_of_birth and is left out of equality.
    """

    id: str
    name: str
    email: str
    date_of_birth: date | None = None
    gender: str | None = None
    country_id: str | None = None
    country_name: str | None = None
    address: str | None = None
    receive_newsletters: bool = False
    age: int | None = field(default=None, compare=False)

    def to_update_request(self) -> PersonUpdateRequest:
        gender = GenderOptions.parse(self.gender)
        return PersonUpdateRequest(
            id=self.id,
            name=self.name,
            email=self.email,
            date_of_birth=self.date_of_birth,
            gender=gender,
            country_id=self.country_id,
            address=self.address,
            receive_newsletters=self.receive_newsletters,
        )
