"""Pytest configuration and shared fixtures.

The repository uses a flat `src/` layout; this conftest puts the repo root on `sys.path` so tests can
import from the `src.*` namespace without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from src.model.address_book import AddressBook  # noqa: E402
from src.model.person import Person  # noqa: E402


def make_person(**overrides: Any) -> Person:
    data: dict[str, Any] = {
        "name": "Alice Pauline",
        "phone": "94351253",
        "email": "alice@example.com",
        "address": "123, Jurong West Ave 6, #08-111",
        "fees": 200,
        "class_id": "1",
        "months_paid": frozenset({"2024-01"}),
        "tags": frozenset({"friends"}),
    }
    data.update(overrides)
    return Person(**data)


@pytest.fixture
def alice() -> Person:
    return make_person()


@pytest.fixture
def bob() -> Person:
    return make_person(
        name="Bob Choo",
        phone="22222222",
        email="bob@example.com",
        fees=300,
        class_id="2",
        months_paid=frozenset({"2024-01", "2024-02"}),
        tags=frozenset(),
    )


@pytest.fixture
def carl() -> Person:
    return make_person(
        name="Carl Kurz",
        phone="95352563",
        email="heinz@example.com",
        class_id="2",
        months_paid=frozenset(),
        tags=frozenset(),
    )


@pytest.fixture
def address_book(alice: Person, bob: Person, carl: Person) -> AddressBook:
    return AddressBook([alice, bob, carl])


@pytest.fixture
def person_factory() -> Any:
    """Build a valid `Person`, overriding any fields by keyword."""

    return make_person
