"""Tests for command-word dispatch."""

from __future__ import annotations

import pytest

from src.commands.base import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND
from src.commands.basic import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    ExitCommand,
    HelpCommand,
    ListCommand,
    MarkPaidCommand,
)
from src.commands.edit import EditCommand, EditPersonDescriptor
from src.commands.find import FindCommand
from src.model.predicates import NameContainsKeywordsPredicate
from src.parser.errors import ParseError
from src.parser.parser import parse_command


def test_edit_and_find_are_routed() -> None:
    assert parse_command("edit 1 n/Bob") == EditCommand(1, EditPersonDescriptor(name="Bob"))
    assert parse_command("  find n/Bob Lee ") == FindCommand(
        NameContainsKeywordsPredicate(["Bob", "Lee"])
    )


def test_add() -> None:
    command = parse_command(
        "add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2, #02-25 f/300 c/2 "
        "t/friends t/owesMoney"
    )
    assert isinstance(command, AddCommand)
    assert command.person.name == "John Doe"
    assert command.person.fees == 300
    assert command.person.months_paid == frozenset()
    assert command.person.tags == frozenset({"friends", "owesMoney"})


@pytest.mark.parametrize(
    "line",
    [
        "add n/John Doe p/98765432 e/johnd@example.com a/somewhere f/300",
        "add hello n/John Doe p/98765432 e/johnd@example.com a/somewhere f/300 c/2",
    ],
)
def test_add_missing_field_or_preamble(line: str) -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_command(line)
    assert str(exc_info.value) == MESSAGE_INVALID_COMMAND_FORMAT.format(AddCommand.MESSAGE_USAGE)


def test_delete_and_mark_paid() -> None:
    assert parse_command("delete 3") == DeleteCommand(3)
    assert parse_command("markpaid 2 m/2024-01 m/2024-02") == MarkPaidCommand(
        2, frozenset({"2024-01", "2024-02"})
    )
    with pytest.raises(ParseError):
        parse_command("delete zero")
    with pytest.raises(ParseError):
        parse_command("markpaid 2")


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("list", ListCommand()),
        ("list 3", ListCommand()),
        ("clear", ClearCommand()),
        ("help", HelpCommand()),
        ("exit", ExitCommand()),
    ],
)
def test_no_argument_commands(line: str, expected: object) -> None:
    assert parse_command(line) == expected


def test_unknown_and_blank_input() -> None:
    with pytest.raises(ParseError, match=MESSAGE_UNKNOWN_COMMAND):
        parse_command("unknownCommand")
    with pytest.raises(ParseError) as exc_info:
        parse_command("   ")
    assert str(exc_info.value) == MESSAGE_INVALID_COMMAND_FORMAT.format(HelpCommand.MESSAGE_USAGE)
