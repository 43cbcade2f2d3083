"""Tests for the `find` predicates."""

from __future__ import annotations

from typing import Any

from src.model.predicates import (
    ClassIdContainsKeywordsPredicate,
    MonthPaidContainsKeywordsPredicate,
    NameAndClassIdContainsKeywordsPredicate,
    NameContainsKeywordsPredicate,
    NotMonthPaidContainsKeywordsPredicate,
    contains_word_ignore_case,
)


def test_contains_word_ignore_case() -> None:
    assert contains_word_ignore_case("Alice Bob", "alice")
    assert contains_word_ignore_case("Alice  Bob", " BOB ")
    assert not contains_word_ignore_case("Alice Bob", "Ali")
    assert not contains_word_ignore_case("Alice Bob", "")


def test_name_predicate(person_factory: Any) -> None:
    person = person_factory(name="Alice Bob")
    assert NameContainsKeywordsPredicate(["alice"])(person)
    assert NameContainsKeywordsPredicate(["Carol", "bOB"])(person)
    assert not NameContainsKeywordsPredicate(["Carol"])(person)
    assert not NameContainsKeywordsPredicate([])(person)
    # Other fields are not searched.
    assert not NameContainsKeywordsPredicate(["alice@example.com"])(person)


def test_class_id_predicate(person_factory: Any) -> None:
    person = person_factory(class_id="ClassA")
    assert ClassIdContainsKeywordsPredicate(["classa"])(person)
    assert not ClassIdContainsKeywordsPredicate(["Class"])(person)


def test_name_and_class_id_predicate_requires_both(person_factory: Any) -> None:
    person = person_factory(name="Alice Bob", class_id="1")
    assert NameAndClassIdContainsKeywordsPredicate(["Bob"], ["2", "1"])(person)
    assert not NameAndClassIdContainsKeywordsPredicate(["Bob"], ["2"])(person)
    assert not NameAndClassIdContainsKeywordsPredicate(["Carol"], ["1"])(person)


def test_month_paid_predicates_are_complementary(person_factory: Any) -> None:
    person = person_factory(months_paid=frozenset({"2024-01", "2024-03"}))
    for keywords in (["2024-01"], ["2024-02", "2024-03"], ["2024-02"], ["Jan"]):
        paid = MonthPaidContainsKeywordsPredicate(keywords)(person)
        assert NotMonthPaidContainsKeywordsPredicate(keywords)(person) is not paid

    assert MonthPaidContainsKeywordsPredicate(["2024-02", "2024-03"])(person)
    assert NotMonthPaidContainsKeywordsPredicate(["2024-02"])(person)


def test_predicates_compare_by_value() -> None:
    assert NameContainsKeywordsPredicate(["a", "b"]) == NameContainsKeywordsPredicate(("a", "b"))
    assert NameContainsKeywordsPredicate(["a", "b"]) != NameContainsKeywordsPredicate(["b", "a"])
    assert NameContainsKeywordsPredicate(["a"]) != ClassIdContainsKeywordsPredicate(["a"])
    assert MonthPaidContainsKeywordsPredicate(["2024-01"]) != NotMonthPaidContainsKeywordsPredicate(
        ["2024-01"]
    )
