"""Command-word dispatch.

Splits an input line into `COMMAND_WORD ARGUMENTS` and hands the arguments to the matching
per-command parser.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from src.commands.base import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND, Command
from src.commands.basic import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    ExitCommand,
    HelpCommand,
    ListCommand,
    MarkPaidCommand,
)
from src.commands.edit import EditCommand
from src.commands.find import FindCommand
from src.parser.basic import parse_add_command, parse_delete_command, parse_mark_paid_command
from src.parser.edit import parse_edit_command
from src.parser.errors import ParseError
from src.parser.find import parse_find_command

logger = logging.getLogger(__name__)

_COMMAND_FORMAT_RE = re.compile(r"(?P<word>\S+)(?P<arguments>.*)", flags=re.DOTALL)

_ARGUMENT_PARSERS: dict[str, Callable[[str], Command]] = {
    AddCommand.COMMAND_WORD: parse_add_command,
    EditCommand.COMMAND_WORD: parse_edit_command,
    DeleteCommand.COMMAND_WORD: parse_delete_command,
    FindCommand.COMMAND_WORD: parse_find_command,
    MarkPaidCommand.COMMAND_WORD: parse_mark_paid_command,
}

# Commands that take no arguments; anything after the command word is ignored.
_NO_ARGUMENT_COMMANDS: dict[str, Callable[[], Command]] = {
    ListCommand.COMMAND_WORD: ListCommand,
    ClearCommand.COMMAND_WORD: ClearCommand,
    HelpCommand.COMMAND_WORD: HelpCommand,
    ExitCommand.COMMAND_WORD: ExitCommand,
}


def parse_command(user_input: str) -> Command:
    """Parse a full input line into an executable command.

    Raises:
        ParseError: If the line is blank, the command word is unknown, or the arguments are invalid.
    """

    match = _COMMAND_FORMAT_RE.fullmatch((user_input or "").strip())
    if not match:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(HelpCommand.MESSAGE_USAGE))

    word = match.group("word")
    arguments = match.group("arguments")

    if word in _NO_ARGUMENT_COMMANDS:
        return _NO_ARGUMENT_COMMANDS[word]()

    parser = _ARGUMENT_PARSERS.get(word)
    if parser is None:
        logger.debug("unknown command word=%s", word)
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    return parser(arguments)
