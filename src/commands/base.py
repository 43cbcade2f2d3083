"""Command contract shared by every executable command."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from src.model.address_book import AddressBook
from src.model.person import Person

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"


class CommandError(ValueError):
    """Raised when a parsed command cannot be applied to the current address book."""


@dataclass(frozen=True)
class CommandResult:
    """Feedback for the user plus flags telling the CLI what to do next."""

    feedback: str
    show_help: bool = False
    show_persons: bool = False
    exit: bool = False


class Command(ABC):
    """An executable command produced by the parser."""

    @abstractmethod
    def execute(self, address_book: AddressBook) -> CommandResult:
        """Apply the command and return user feedback.

        Raises:
            CommandError: If the command is not applicable to the address book's current state.
        """


def person_at(address_book: AddressBook, index: int) -> Person:
    """Return the person at a 1-based position of the filtered list."""

    persons = address_book.filtered_persons
    if index < 1 or index > len(persons):
        raise CommandError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return persons[index - 1]
