"""`find` command: filter the displayed person list with a keyword predicate."""

from __future__ import annotations

from dataclasses import dataclass

from src.commands.base import MESSAGE_PERSONS_LISTED_OVERVIEW, Command, CommandResult
from src.model.address_book import AddressBook
from src.model.predicates import (
    ClassIdContainsKeywordsPredicate,
    MonthPaidContainsKeywordsPredicate,
    NameAndClassIdContainsKeywordsPredicate,
    NameContainsKeywordsPredicate,
    NotMonthPaidContainsKeywordsPredicate,
)

FindPredicate = (
    NameContainsKeywordsPredicate
    | ClassIdContainsKeywordsPredicate
    | NameAndClassIdContainsKeywordsPredicate
    | MonthPaidContainsKeywordsPredicate
    | NotMonthPaidContainsKeywordsPredicate
)


@dataclass(frozen=True)
class FindCommand(Command):
    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all persons matching the given keywords (case-insensitive) and displays them "
        "as a list with index numbers.\n"
        "Parameters: n/NAME_KEYWORDS [c/CLASSID_KEYWORDS] | c/CLASSID_KEYWORDS | m/YYYY-MM... | "
        "nm/YYYY-MM...\n"
        "Example: find n/alice bob c/1"
    )
    EMPTY_SEARCH_VALUE_PROVIDED = "Search value cannot be empty."

    predicate: FindPredicate

    def execute(self, address_book: AddressBook) -> CommandResult:
        address_book.update_filter(self.predicate)
        return CommandResult(
            MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(address_book.filtered_persons)),
            show_persons=True,
        )
