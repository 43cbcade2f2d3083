"""In-memory address book with a filtered view.

The address book keeps persons in insertion order and guarantees that no two stored persons are
the "same person" (see `Person.is_same_person`). Index-based commands address the filtered view.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from src.model.person import Person

logger = logging.getLogger(__name__)

PersonPredicate = Callable[[Person], bool]


def show_all(_person: Person) -> bool:
    return True


class DuplicatePersonError(ValueError):
    """Raised when an operation would store two records of the same person."""


class PersonNotFoundError(ValueError):
    """Raised when a person expected in the address book is missing."""


class AddressBook:
    """Ordered collection of unique persons plus the active filter predicate."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: list[Person] = []
        self._filter: PersonPredicate = show_all
        for person in persons:
            self.add_person(person)

    @property
    def persons(self) -> list[Person]:
        return list(self._persons)

    @property
    def filtered_persons(self) -> list[Person]:
        """Persons matching the active filter, in address book order."""

        return [p for p in self._persons if self._filter(p)]

    def has_person(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self._persons)

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicatePersonError(person.name)
        self._persons.append(person)
        logger.debug("added person name=%s", person.name)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace `target` with `edited`, keeping its position."""

        try:
            idx = self._persons.index(target)
        except ValueError as exc:
            raise PersonNotFoundError(target.name) from exc

        if not target.is_same_person(edited) and self.has_person(edited):
            raise DuplicatePersonError(edited.name)
        self._persons[idx] = edited
        logger.debug("replaced person old=%s new=%s", target.name, edited.name)

    def remove_person(self, person: Person) -> None:
        try:
            self._persons.remove(person)
        except ValueError as exc:
            raise PersonNotFoundError(person.name) from exc

    def clear(self) -> None:
        self._persons.clear()
        self._filter = show_all

    def update_filter(self, predicate: PersonPredicate) -> None:
        self._filter = predicate

    def __len__(self) -> int:
        return len(self._persons)
