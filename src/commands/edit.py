"""`edit` command: update fields of an existing person."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, NonNegativeInt, ValidationError

from src.commands.base import (
    MESSAGE_DUPLICATE_PERSON,
    Command,
    CommandError,
    CommandResult,
    person_at,
)
from src.model.address_book import AddressBook, DuplicatePersonError, show_all
from src.model.person import Person


class EditPersonDescriptor(BaseModel):
    """Partial update: only the fields set here are changed on the target person.

    A `tags` value of an empty set means "remove all tags"; `None` means "leave unchanged".
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, validate_assignment=True)

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    fees: NonNegativeInt | None = None
    class_id: str | None = None
    tags: frozenset[str] | None = None

    def is_any_field_edited(self) -> bool:
        return any(value is not None for value in self.model_dump().values())

    def changes(self) -> dict[str, Any]:
        """Field updates to apply, excluding untouched fields."""

        return {key: value for key, value in self.model_dump().items() if value is not None}


def create_edited_person(person: Person, descriptor: EditPersonDescriptor) -> Person:
    """Build a re-validated copy of `person` with the descriptor's changes applied."""

    data = person.model_dump()
    data.update(descriptor.changes())
    return Person.model_validate(data)


@dataclass(frozen=True)
class EditCommand(Command):
    """Edit the person at `index` (1-based, filtered list) using `descriptor`."""

    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit: Edits the details of the person identified by the index number used in the "
        "displayed person list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] "
        "[f/FEES] [c/CLASSID] [t/TAG]...\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )
    MESSAGE_EDIT_PERSON_SUCCESS = "Edited Person: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

    index: int
    descriptor: EditPersonDescriptor

    def execute(self, address_book: AddressBook) -> CommandResult:
        target = person_at(address_book, self.index)
        try:
            edited = create_edited_person(target, self.descriptor)
        except ValidationError as exc:
            raise CommandError(str(exc)) from exc

        try:
            address_book.set_person(target, edited)
        except DuplicatePersonError as exc:
            raise CommandError(MESSAGE_DUPLICATE_PERSON) from exc

        address_book.update_filter(show_all)
        return CommandResult(self.MESSAGE_EDIT_PERSON_SUCCESS.format(edited))
