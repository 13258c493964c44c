"""Neo4j implementations of CountryRepository and PersonRepository.
Graph: (:Country {id, name, created_at}) and (:Person {...}).
A Person's country is stored as the country_id property, not as a relationship,
so deleting a Country never touches Person nodes.
"""

from datetime import date, datetime

from neo4j.exceptions import ConstraintError

from roster.application.errors import DuplicateKeyError
from roster.domain import Country, Person


def _datetime_to_iso(dt: datetime) -> str:
    return dt.isoformat()


def _iso_to_datetime(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _date_to_iso(d: date | None) -> str | None:
    return d.isoformat() if d is not None else None


def _iso_to_date(s: str | None) -> date | None:
    if not s:
        return None
    return date.fromisoformat(s)


class Neo4jCountryRepository:
    """Stores Country nodes. Pair with ensure_country_name_constraint at startup."""

    def __init__(self, driver: object) -> None:
        self._driver = driver

    def add(self, country: Country) -> None:
        """Store a new country. A name taken under the uniqueness constraint raises DuplicateKeyError."""
        try:
            with self._driver.session() as session:
                session.run(
                    """
                    CREATE (c:Country {
                        id: $id,
                        name: $name,
                        created_at: $created_at
                    })
                    """,
                    id=country.id,
                    name=country.name,
                    created_at=_datetime_to_iso(country.created_at),
                )
        except ConstraintError as e:
            raise DuplicateKeyError(country.name) from e

    def get_by_id(self, country_id: str) -> Country | None:
        with self._driver.session() as session:
            result = session.run(
                "MATCH (c:Country {id: $id}) RETURN c",
                id=country_id,
            )
            record = result.single()
        if not record:
            return None
        return _record_to_country(record)

    def find_by_name(self, name: str) -> Country | None:
        with self._driver.session() as session:
            result = session.run(
                "MATCH (c:Country) WHERE c.name = $name RETURN c LIMIT 1",
                name=name,
            )
            record = result.single()
        if not record:
            return None
        return _record_to_country(record)

    def list_all(self) -> list[Country]:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (c:Country)
                RETURN c
                ORDER BY c.created_at, c.id
                """
            )
            return [_record_to_country(rec) for rec in result]


class Neo4jPersonRepository:
    """Stores Person nodes."""

    def __init__(self, driver: object) -> None:
        self._driver = driver

    def add(self, person: Person) -> None:
        with self._driver.session() as session:
            session.run(
                """
                CREATE (p:Person {
                    id: $id,
                    name: $name,
                    email: $email,
                    date_of_birth: $date_of_birth,
                    gender: $gender,
                    country_id: $country_id,
                    address: $address,
                    receive_newsletters: $receive_newsletters,
                    created_at: $created_at
                })
                """,
                **_person_params(person),
            )

    def update(self, person: Person) -> bool:
        """Overwrite the mutable properties. Returns True if updated, False if not found."""
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (p:Person {id: $id})
                SET p.name = $name,
                    p.email = $email,
                    p.date_of_birth = $date_of_birth,
                    p.gender = $gender,
                    p.country_id = $country_id,
                    p.address = $address,
                    p.receive_newsletters = $receive_newsletters
                RETURN 1 AS ok
                """,
                **_person_params(person),
            )
            return result.single() is not None

    def delete(self, person_id: str) -> bool:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (p:Person {id: $id})
                DETACH DELETE p
                RETURN count(*) AS deleted
                """,
                id=person_id,
            )
            record = result.single()
        return bool(record and record["deleted"])

    def get_by_id(self, person_id: str) -> Person | None:
        with self._driver.session() as session:
            result = session.run(
                "MATCH (p:Person {id: $id}) RETURN p",
                id=person_id,
            )
            record = result.single()
        if not record:
            return None
        return _record_to_person(record)

    def list_all(self) -> list[Person]:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (p:Person)
                RETURN p
                ORDER BY p.created_at, p.id
                """
            )
            return [_record_to_person(rec) for rec in result]


def _person_params(person: Person) -> dict:
    return {
        "id": person.id,
        "name": person.name,
        "email": person.email,
        "date_of_birth": _date_to_iso(person.date_of_birth),
        "gender": person.gender,
        "country_id": person.country_id,
        "address": person.address,
        "receive_newsletters": bool(person.receive_newsletters),
        "created_at": _datetime_to_iso(person.created_at),
    }


def _record_to_country(record) -> Country:
    c = record["c"]
    return Country(
        id=c["id"],
        name=c["name"],
        created_at=_iso_to_datetime(c["created_at"]),
    )


def _record_to_person(record) -> Person:
    p = record["p"]
    return Person(
        id=p["id"],
        name=p["name"],
        email=p["email"],
        date_of_birth=_iso_to_date(p.get("date_of_birth")),
        gender=p.get("gender") or None,
        country_id=p.get("country_id") or None,
        address=p.get("address"),
        receive_newsletters=bool(p.get("receive_newsletters")),
        created_at=_iso_to_datetime(p["created_at"]),
    )
