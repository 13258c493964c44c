"""
Roster core: clean-architecture layout.

- domain: entities (Country, Person). No outer dependencies.
- application: directories (CountryService, PersonsService), validation and
  query engine, ports (CountryRepository, PersonRepository), DTOs.
- infrastructure: adapters (in-memory and Neo4j repositories).
"""

from roster.application import (
    CountryAddRequest,
    CountryRepository,
    CountryService,
    CountryView,
    DuplicateKeyError,
    FieldError,
    InvalidArgumentError,
    NotFoundError,
    NullArgumentError,
    PersonAddRequest,
    PersonField,
    PersonRepository,
    PersonsService,
    PersonUpdateRequest,
    PersonView,
    RosterError,
    SortOrder,
    ValidationError,
)
from roster.domain import Country, GenderOptions, Person
from roster.infrastructure import (
    InMemoryCountryRepository,
    InMemoryPersonRepository,
    Neo4jCountryRepository,
    Neo4jPersonRepository,
)

__all__ = [
    "Country",
    "CountryAddRequest",
    "CountryRepository",
    "CountryService",
    "CountryView",
    "DuplicateKeyError",
    "FieldError",
    "GenderOptions",
    "InMemoryCountryRepository",
    "InMemoryPersonRepository",
    "InvalidArgumentError",
    "Neo4jCountryRepository",
    "Neo4jPersonRepository",
    "NotFoundError",
    "NullArgumentError",
    "Person",
    "PersonAddRequest",
    "PersonField",
    "PersonRepository",
    "PersonUpdateRequest",
    "PersonView",
    "PersonsService",
    "RosterError",
    "SortOrder",
    "ValidationError",
]
