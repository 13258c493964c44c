"""Application layer: directories, validation and query engine, ports, and DTOs. Depends only on domain."""

from roster.application.country_service import CountryService
from roster.application.dto import (
    CountryAddRequest,
    CountryView,
    PersonAddRequest,
    PersonUpdateRequest,
    PersonView,
)
from roster.application.errors import (
    DuplicateKeyError,
    FieldError,
    InvalidArgumentError,
    NotFoundError,
    NullArgumentError,
    RosterError,
    ValidationError,
)
from roster.application.persons_service import PersonsService
from roster.application.ports import CountryRepository, PersonRepository
from roster.application.query import PersonField, SortOrder, filter_persons, sort_persons

__all__ = [
    "CountryAddRequest",
    "CountryRepository",
    "CountryService",
    "CountryView",
    "DuplicateKeyError",
    "FieldError",
    "InvalidArgumentError",
    "NotFoundError",
    "NullArgumentError",
    "PersonAddRequest",
    "PersonField",
    "PersonRepository",
    "PersonUpdateRequest",
    "PersonView",
    "PersonsService",
    "RosterError",
    "SortOrder",
    "ValidationError",
    "filter_persons",
    "sort_persons",
]
