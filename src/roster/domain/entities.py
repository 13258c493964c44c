"""Domain entities: Country and Person."""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GenderOptions(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: "GenderOptions | str | None") -> "GenderOptions | None":
        """Return the member for a member or its text (any case), or None when unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        return next((g for g in cls if g.value.lower() == key), None)


@dataclass(frozen=True)
class Country:
    """
    A country a Person may live in.
    Names are unique across the directory; a Country is never updated.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = field(default="")
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Country name must be non-empty.")


@dataclass(frozen=True)
class Person:
    """
    A person record.
    country_id is a weak reference: it may point to a Country that no longer exists.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = field(default="")
    email: str = field(default="")
    date_of_birth: date | None = None
    gender: str | None = None
    country_id: str | None = None
    address: str | None = None
    receive_newsletters: bool = False
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Person name must be non-empty.")

        if not self.email or not self.email.strip():
            raise ValueError("Person email must be non-empty.")
