"""Filtering and sorting over resolved PersonView lists. Pure; no storage access.

Each recognized field maps to a text extractor (used by filter) and a sort key
(used by sort). Unrecognized fields leave the input unchanged.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from roster.application.dto import PersonView

DATE_DISPLAY_FORMAT = "%d %B %Y"


def _field_key(value: str) -> str:
    return value.strip().replace("_", "").lower()


class PersonField(str, Enum):
    NAME = "name"
    EMAIL = "email"
    DATE_OF_BIRTH = "date_of_birth"
    AGE = "age"
    GENDER = "gender"
    COUNTRY = "country"
    ADDRESS = "address"
    RECEIVE_NEWSLETTERS = "receive_newsletters"

    @classmethod
    def parse(cls, value: "PersonField | str | None") -> "PersonField | None":
        """Return the member for value, or None when it is empty or unrecognized.

        Matching ignores case and underscores, so "date_of_birth" and
        "dateOfBirth" name the same field.
        """
        if isinstance(value, cls):
            return value
        key = _field_key(value or "")
        if not key:
            return None
        for member in cls:
            if _field_key(member.value) == key:
                return member
        return None


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: "SortOrder | str") -> "SortOrder":
        if isinstance(value, cls):
            return value
        return cls((value or "").strip().upper())


def format_date(value: date | None) -> str | None:
    return value.strftime(DATE_DISPLAY_FORMAT) if value is not None else None


def _nulls_first(value: Any) -> tuple:
    return (0,) if value is None else (1, value)


def _folded(value: str | None) -> tuple:
    return _nulls_first(value.casefold() if value is not None else None)


@dataclass(frozen=True)
class FieldSpec:
    text: Callable[[PersonView], str | None] | None
    sort_key: Callable[[PersonView], tuple]


FIELD_SPECS: dict[PersonField, FieldSpec] = {
    PersonField.NAME: FieldSpec(
        text=lambda p: p.name,
        sort_key=lambda p: _folded(p.name),
    ),
    PersonField.EMAIL: FieldSpec(
        text=lambda p: p.email,
        sort_key=lambda p: _folded(p.email),
    ),
    PersonField.DATE_OF_BIRTH: FieldSpec(
        text=lambda p: format_date(p.date_of_birth),
        sort_key=lambda p: _nulls_first(p.date_of_birth),
    ),
    PersonField.AGE: FieldSpec(
        text=None,
        sort_key=lambda p: _nulls_first(p.age),
    ),
    PersonField.GENDER: FieldSpec(
        text=lambda p: p.gender,
        sort_key=lambda p: _folded(p.gender),
    ),
    PersonField.COUNTRY: FieldSpec(
        text=lambda p: p.country_name,
        sort_key=lambda p: _folded(p.country_name),
    ),
    PersonField.ADDRESS: FieldSpec(
        text=lambda p: p.address,
        sort_key=lambda p: _folded(p.address),
    ),
    PersonField.RECEIVE_NEWSLETTERS: FieldSpec(
        text=None,
        sort_key=lambda p: (bool(p.receive_newsletters),),
    ),
}


def filter_persons(
    records: list[PersonView],
    field: PersonField | str | None,
    text: str | None,
) -> list[PersonView]:
    """Keep records whose field contains text, case-insensitive.

    Records with an empty value in the field are kept. Empty field or text, or a
    field that cannot be searched, returns records unchanged.
    """
    if not field or not text:
        return records
    person_field = PersonField.parse(field)
    if person_field is None:
        return records
    extract = FIELD_SPECS[person_field].text
    if extract is None:
        return records

    needle = text.casefold()
    out = []
    for record in records:
        value = extract(record)
        if not value or needle in value.casefold():
            out.append(record)
    return out


def sort_persons(
    records: list[PersonView],
    field: PersonField | str | None,
    order: SortOrder | str = SortOrder.ASC,
) -> list[PersonView]:
    """Stable sort by one field. Empty values sort first ascending; DESC is the exact reverse."""
    if not field:
        return list(records)
    person_field = PersonField.parse(field)
    if person_field is None:
        return list(records)
    descending = SortOrder.parse(order) is SortOrder.DESC
    # sorted() keeps ties in input order for reverse=True as well.
    return sorted(records, key=FIELD_SPECS[person_field].sort_key, reverse=descending)
