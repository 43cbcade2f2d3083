"""Tests for the in-memory address book."""

from __future__ import annotations

from typing import Any

import pytest

from src.model.address_book import AddressBook, DuplicatePersonError, PersonNotFoundError
from src.model.person import Person
from src.model.predicates import ClassIdContainsKeywordsPredicate
from src.model.sample_data import sample_address_book


def test_add_rejects_same_person(address_book: AddressBook, person_factory: Any) -> None:
    with pytest.raises(DuplicatePersonError):
        address_book.add_person(person_factory(name="alice pauline", phone="99999999"))
    assert len(address_book) == 3


def test_set_person_keeps_position(address_book: AddressBook, bob: Person, person_factory: Any) -> None:
    edited = person_factory(name="Bobby Choo")
    address_book.set_person(bob, edited)
    assert address_book.persons[1] == edited


def test_set_person_rejects_collision(
        address_book: AddressBook, alice: Person, bob: Person
) -> None:
    with pytest.raises(DuplicatePersonError):
        address_book.set_person(bob, alice.model_copy(update={"phone": "12345"}))


def test_set_person_allows_same_identity(address_book: AddressBook, alice: Person) -> None:
    edited = alice.model_copy(update={"phone": "12345"})
    address_book.set_person(alice, edited)
    assert address_book.persons[0].phone == "12345"


def test_missing_person(address_book: AddressBook, person_factory: Any) -> None:
    stranger = person_factory(name="Stranger")
    with pytest.raises(PersonNotFoundError):
        address_book.remove_person(stranger)
    with pytest.raises(PersonNotFoundError):
        address_book.set_person(stranger, stranger)


def test_filter_and_clear(address_book: AddressBook, bob: Person, carl: Person) -> None:
    address_book.update_filter(ClassIdContainsKeywordsPredicate(["2"]))
    assert address_book.filtered_persons == [bob, carl]
    assert len(address_book.persons) == 3

    address_book.clear()
    assert address_book.persons == []
    assert address_book.filtered_persons == []


def test_sample_data_is_consistent() -> None:
    book = sample_address_book()
    assert len(book) == len(book.filtered_persons) > 0
