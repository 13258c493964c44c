"""Neo4j schema setup for the directory graph."""

_COUNTRY_NAME_CONSTRAINT_QUERY = """
CREATE CONSTRAINT country_name_unique IF NOT EXISTS
FOR (c:Country) REQUIRE c.name IS UNIQUE
"""

_PERSON_ID_CONSTRAINT_QUERY = """
CREATE CONSTRAINT person_id_unique IF NOT EXISTS
FOR (p:Person) REQUIRE p.id IS UNIQUE
"""


def ensure_country_name_constraint(driver) -> None:
    """Create unique constraint on Country(name) if missing."""
    with driver.session() as session:
        session.run(_COUNTRY_NAME_CONSTRAINT_QUERY)


def ensure_person_id_constraint(driver) -> None:
    """Create unique constraint on Person(id) if missing."""
    with driver.session() as session:
        session.run(_PERSON_ID_CONSTRAINT_QUERY)


def ensure_constraints(driver) -> None:
    """Call at startup, before the repositories are used."""
    ensure_country_name_constraint(driver)
    ensure_person_id_constraint(driver)
