"""Simple commands: add, delete, markpaid, list, clear, help, exit."""

from __future__ import annotations

from dataclasses import dataclass

from src.commands.base import (
    MESSAGE_DUPLICATE_PERSON,
    Command,
    CommandError,
    CommandResult,
    person_at,
)
from src.model.address_book import AddressBook, DuplicatePersonError, show_all
from src.model.person import Person


@dataclass(frozen=True)
class AddCommand(Command):
    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add: Adds a person to the address book.\n"
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS f/FEES c/CLASSID [t/TAG]...\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2, #02-25 "
        "f/300 c/2 t/friends"
    )
    MESSAGE_SUCCESS = "New person added: {}"

    person: Person

    def execute(self, address_book: AddressBook) -> CommandResult:
        try:
            address_book.add_person(self.person)
        except DuplicatePersonError as exc:
            raise CommandError(MESSAGE_DUPLICATE_PERSON) from exc
        return CommandResult(self.MESSAGE_SUCCESS.format(self.person))


@dataclass(frozen=True)
class DeleteCommand(Command):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the person identified by the index number used in the displayed person "
        "list.\nParameters: INDEX (must be a positive integer)\nExample: delete 1"
    )
    MESSAGE_SUCCESS = "Deleted Person: {}"

    index: int

    def execute(self, address_book: AddressBook) -> CommandResult:
        target = person_at(address_book, self.index)
        address_book.remove_person(target)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


@dataclass(frozen=True)
class MarkPaidCommand(Command):
    COMMAND_WORD = "markpaid"
    MESSAGE_USAGE = (
        "markpaid: Marks the given months as paid for the person identified by the index number "
        "used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer) m/YYYY-MM [m/YYYY-MM]...\n"
        "Example: markpaid 1 m/2024-01 m/2024-02"
    )
    MESSAGE_SUCCESS = "Marked months as paid: {}"

    index: int
    months: frozenset[str]

    def execute(self, address_book: AddressBook) -> CommandResult:
        target = person_at(address_book, self.index)
        updated = target.model_copy(update={"months_paid": target.months_paid | self.months})
        address_book.set_person(target, updated)
        return CommandResult(self.MESSAGE_SUCCESS.format(updated))


@dataclass(frozen=True)
class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_SUCCESS = "Listed all persons"

    def execute(self, address_book: AddressBook) -> CommandResult:
        address_book.update_filter(show_all)
        return CommandResult(self.MESSAGE_SUCCESS, show_persons=True)


@dataclass(frozen=True)
class ClearCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_SUCCESS = "Address book has been cleared!"

    def execute(self, address_book: AddressBook) -> CommandResult:
        address_book.clear()
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows program usage instructions.\nExample: help"
    SHOWING_HELP_MESSAGE = (
        "Commands: add, edit, delete, find, markpaid, list, clear, help, exit. "
        "Type a command word followed by its parameters, e.g. `find n/alice`."
    )

    def execute(self, address_book: AddressBook) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Address Book as requested ..."

    def execute(self, address_book: AddressBook) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)
