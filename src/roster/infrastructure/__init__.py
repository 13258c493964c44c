"""Infrastructure layer: concrete implementations of application ports."""

from roster.infrastructure.memory_repository import (
    InMemoryCountryRepository,
    InMemoryPersonRepository,
)
from roster.infrastructure.persistence.neo4j_repository import (
    Neo4jCountryRepository,
    Neo4jPersonRepository,
)
from roster.infrastructure.schema import (
    ensure_constraints,
    ensure_country_name_constraint,
    ensure_person_id_constraint,
)

__all__ = [
    "InMemoryCountryRepository",
    "InMemoryPersonRepository",
    "Neo4jCountryRepository",
    "Neo4jPersonRepository",
    "ensure_constraints",
    "ensure_country_name_constraint",
    "ensure_person_id_constraint",
]
