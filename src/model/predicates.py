"""Person filter predicates used by the `find` command.

Every predicate is a value object: two predicates built from the same keywords compare equal.
Keywords are kept as tuples in the order they were supplied.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from src.model.person import Person


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """Whether `word` equals one of the whitespace-separated words of `sentence`, ignoring case."""

    target = word.strip().casefold()
    if not target:
        return False
    return any(token.casefold() == target for token in sentence.split())


@dataclass(frozen=True)
class _KeywordsPredicate:
    keywords: Sequence[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", tuple(self.keywords))


@dataclass(frozen=True)
class NameContainsKeywordsPredicate(_KeywordsPredicate):
    """Matches persons whose name contains any keyword as a whole word."""

    def __call__(self, person: Person) -> bool:
        return any(contains_word_ignore_case(person.name, kw) for kw in self.keywords)


@dataclass(frozen=True)
class ClassIdContainsKeywordsPredicate(_KeywordsPredicate):
    """Matches persons whose class id equals any keyword (case-insensitive)."""

    def __call__(self, person: Person) -> bool:
        return any(contains_word_ignore_case(person.class_id, kw) for kw in self.keywords)


@dataclass(frozen=True)
class NameAndClassIdContainsKeywordsPredicate:
    """Matches persons satisfying both a name predicate and a class id predicate."""

    name_keywords: Sequence[str]
    class_id_keywords: Sequence[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "name_keywords", tuple(self.name_keywords))
        object.__setattr__(self, "class_id_keywords", tuple(self.class_id_keywords))

    def __call__(self, person: Person) -> bool:
        return NameContainsKeywordsPredicate(self.name_keywords)(
            person
        ) and ClassIdContainsKeywordsPredicate(self.class_id_keywords)(person)


@dataclass(frozen=True)
class MonthPaidContainsKeywordsPredicate(_KeywordsPredicate):
    """Matches persons who paid for at least one of the given months."""

    def __call__(self, person: Person) -> bool:
        return any(kw in person.months_paid for kw in self.keywords)


@dataclass(frozen=True)
class NotMonthPaidContainsKeywordsPredicate(_KeywordsPredicate):
    """Matches persons who paid for none of the given months."""

    def __call__(self, person: Person) -> bool:
        return not MonthPaidContainsKeywordsPredicate(self.keywords)(person)
