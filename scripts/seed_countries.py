#!/usr/bin/env python3
"""Seed Country nodes into Neo4j.

Adds each name given on the command line (or DEFAULT_COUNTRIES when none are
given) through CountryService, so name uniqueness is enforced the same way as
in the API. Names that already exist are skipped. Run from repo root with .env
(NEO4J_URI, NEO4J_USER, NEO4J_PASSWORD). Idempotent.
"""
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))

from dotenv import load_dotenv  # noqa: E402
from neo4j import GraphDatabase  # noqa: E402

from roster.application import (  # noqa: E402
    CountryAddRequest,
    CountryService,
    DuplicateKeyError,
)
from roster.infrastructure import (  # noqa: E402
    Neo4jCountryRepository,
    ensure_country_name_constraint,
)

load_dotenv(REPO_ROOT / ".env")

DEFAULT_COUNTRIES = ("Egypt", "India", "Italy", "Japan", "United States")


def main(argv: list[str]) -> int:
    names = [n.strip() for n in argv if n.strip()] or list(DEFAULT_COUNTRIES)
    uri = os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip()
    user = os.environ.get("NEO4J_USER", "neo4j").strip()
    password = os.environ.get("NEO4J_PASSWORD", "password").strip()
    driver = GraphDatabase.driver(uri, auth=(user, password))
    try:
        ensure_country_name_constraint(driver)
        service = CountryService(Neo4jCountryRepository(driver))
        added, skipped = [], []
        for name in names:
            try:
                service.add_country(CountryAddRequest(name=name))
                added.append(name)
            except DuplicateKeyError:
                skipped.append(name)
        print(f"Added {len(added)} country(ies): {added}")
        if skipped:
            print(f"Skipped {len(skipped)} existing: {skipped}")
        return 0
    finally:
        driver.close()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
