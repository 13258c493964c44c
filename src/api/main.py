"""
FastAPI backend: REST API over the Country and Person directories.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager
from dataclasses import dataclass

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from neo4j import GraphDatabase
from pydantic import BaseModel

from roster.application import (
    CountryAddRequest,
    CountryService,
    CountryView,
    DuplicateKeyError,
    InvalidArgumentError,
    NotFoundError,
    NullArgumentError,
    PersonAddRequest,
    PersonField,
    PersonsService,
    PersonUpdateRequest,
    PersonView,
    SortOrder,
    ValidationError,
)
from roster.domain import GenderOptions
from roster.infrastructure import (
    InMemoryCountryRepository,
    InMemoryPersonRepository,
    Neo4jCountryRepository,
    Neo4jPersonRepository,
    ensure_constraints,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

STORAGE_NEO4J = "neo4j"
STORAGE_MEMORY = "memory"


def _storage_backend() -> str:
    return os.environ.get("ROSTER_STORAGE", STORAGE_NEO4J).strip().lower() or STORAGE_NEO4J


def _get_driver():
    uri = os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip()
    user = os.environ.get("NEO4J_USER", "neo4j").strip()
    password = os.environ.get("NEO4J_PASSWORD", "password").strip()
    return GraphDatabase.driver(uri, auth=(user, password))


def _get_cached_driver(app: FastAPI):
    if getattr(app.state, "driver", None) is None:
        app.state.driver = _get_driver()
    return app.state.driver


@dataclass(frozen=True)
class Directories:
    countries: CountryService
    persons: PersonsService


def _build_directories(app: FastAPI) -> Directories:
    backend = _storage_backend()
    if backend == STORAGE_MEMORY:
        country_repo = InMemoryCountryRepository()
        person_repo = InMemoryPersonRepository()
    elif backend == STORAGE_NEO4J:
        driver = _get_cached_driver(app)
        country_repo = Neo4jCountryRepository(driver)
        person_repo = Neo4jPersonRepository(driver)
    else:
        raise RuntimeError(f"Unknown ROSTER_STORAGE {backend!r}")
    logger.info("Using %s storage", backend)
    countries = CountryService(country_repo)
    return Directories(countries=countries, persons=PersonsService(person_repo, countries))


def get_directories(app: FastAPI) -> Directories:
    if getattr(app.state, "directories", None) is None:
        app.state.directories = _build_directories(app)
    return app.state.directories


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.driver = None
    app.state.directories = None
    try:
        if _storage_backend() == STORAGE_NEO4J:
            app.state.driver = _get_driver()
            ensure_constraints(app.state.driver)
        yield
    finally:
        if getattr(app.state, "driver", None) is not None:
            app.state.driver.close()


app = FastAPI(title="Roster API", lifespan=lifespan)


# --- Error mapping ---


@app.exception_handler(ValidationError)
async def _validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=400,
        content={
            "detail": exc.message,
            "errors": [{"field": e.field, "message": e.message} for e in exc.errors],
        },
    )


@app.exception_handler(DuplicateKeyError)
async def _duplicate_key_handler(request: Request, exc: DuplicateKeyError):
    logger.info("Rejected duplicate country %r", exc.name)
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def _not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(NullArgumentError)
@app.exception_handler(InvalidArgumentError)
async def _invalid_argument_handler(request: Request, exc: ValueError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: countries ---


class CreateCountryBody(BaseModel):
    name: str | None = None


class CountryItem(BaseModel):
    id: str
    name: str


def _country_item(view: CountryView) -> CountryItem:
    return CountryItem(id=view.id, name=view.name)


@app.get("/countries")
def list_countries(request: Request):
    directories = get_directories(request.app)
    return [_country_item(c) for c in directories.countries.get_all_countries()]


@app.post("/countries", status_code=201)
def create_country(body: CreateCountryBody, request: Request):
    directories = get_directories(request.app)
    created = directories.countries.add_country(CountryAddRequest(name=body.name))
    return _country_item(created)


# --- REST: persons ---


class PersonBody(BaseModel):
    name: str | None = None
    email: str | None = None
    date_of_birth: date | None = None
    gender: GenderOptions | None = None
    country_id: str | None = None
    address: str | None = None
    receive_newsletters: bool = False


class PersonItem(BaseModel):
    id: str
    name: str
    email: str
    date_of_birth: date | None = None
    gender: str | None = None
    country_id: str | None = None
    country_name: str | None = None
    address: str | None = None
    receive_newsletters: bool = False
    age: int | None = None


def _person_item(view: PersonView) -> PersonItem:
    return PersonItem(
        id=view.id,
        name=view.name,
        email=view.email,
        date_of_birth=view.date_of_birth,
        gender=view.gender,
        country_id=view.country_id,
        country_name=view.country_name,
        address=view.address,
        receive_newsletters=view.receive_newsletters,
        age=view.age,
    )


@app.get("/persons")
def list_persons(
    request: Request,
    search_by: str | None = None,
    search_string: str | None = None,
    sort_by: str = PersonField.NAME.value,
    sort_order: SortOrder = SortOrder.ASC,
):
    """Filter then sort. Unknown search_by or sort_by values leave the list as is."""
    persons = get_directories(request.app).persons
    matching = persons.get_filtered_persons(search_by, search_string)
    ordered = persons.get_sorted_persons(matching, sort_by, sort_order)
    return [_person_item(p) for p in ordered]


@app.post("/persons", status_code=201)
def create_person(body: PersonBody, request: Request):
    persons = get_directories(request.app).persons
    created = persons.add_person(PersonAddRequest(**body.model_dump()))
    logger.info("Created person %s", created.id)
    return _person_item(created)


@app.get("/persons/{person_id}")
def get_person(person_id: str, request: Request):
    person = get_directories(request.app).persons.get_person_by_id(person_id)
    if person is None:
        raise HTTPException(status_code=404, detail="Person not found")
    return _person_item(person)


@app.put("/persons/{person_id}")
def update_person(person_id: str, body: PersonBody, request: Request):
    persons = get_directories(request.app).persons
    updated = persons.update_person(PersonUpdateRequest(id=person_id, **body.model_dump()))
    return _person_item(updated)


@app.delete("/persons/{person_id}", status_code=204)
def delete_person(person_id: str, request: Request):
    persons = get_directories(request.app).persons
    if not persons.delete_person(person_id):
        raise HTTPException(status_code=404, detail="Person not found")
    logger.info("Deleted person %s", person_id)
    return Response(status_code=204)
