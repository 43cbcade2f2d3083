"""Parsers for the `add`, `delete` and `markpaid` commands."""

from __future__ import annotations

from src.commands.base import MESSAGE_INVALID_COMMAND_FORMAT
from src.commands.basic import AddCommand, DeleteCommand, MarkPaidCommand
from src.model.person import Person
from src.parser import fields
from src.parser.arguments import (
    PREFIX_ADDRESS,
    PREFIX_CLASSID,
    PREFIX_EMAIL,
    PREFIX_FEES,
    PREFIX_MONTHPAID,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    tokenize,
)
from src.parser.errors import ParseError

_ADD_REQUIRED_PREFIXES: tuple[str, ...] = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_FEES,
    PREFIX_CLASSID,
)


def parse_add_command(args: str) -> AddCommand:
    arg_multimap = tokenize(args, *_ADD_REQUIRED_PREFIXES, PREFIX_TAG)

    if arg_multimap.preamble or not all(arg_multimap.is_present(p) for p in _ADD_REQUIRED_PREFIXES):
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(AddCommand.MESSAGE_USAGE))
    arg_multimap.verify_no_duplicate_prefixes_for(*_ADD_REQUIRED_PREFIXES)

    person = Person(
        name=fields.parse_name(arg_multimap.get_value(PREFIX_NAME) or ""),
        phone=fields.parse_phone(arg_multimap.get_value(PREFIX_PHONE) or ""),
        email=fields.parse_email(arg_multimap.get_value(PREFIX_EMAIL) or ""),
        address=fields.parse_address(arg_multimap.get_value(PREFIX_ADDRESS) or ""),
        fees=fields.parse_fees(arg_multimap.get_value(PREFIX_FEES) or ""),
        class_id=fields.parse_class_id(arg_multimap.get_value(PREFIX_CLASSID) or ""),
        tags=fields.parse_tags(arg_multimap.get_all_values(PREFIX_TAG)),
    )
    return AddCommand(person)


def parse_delete_command(args: str) -> DeleteCommand:
    try:
        return DeleteCommand(fields.parse_index(args))
    except ParseError as exc:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(DeleteCommand.MESSAGE_USAGE)) from exc


def parse_mark_paid_command(args: str) -> MarkPaidCommand:
    """Parse `INDEX m/YYYY-MM [m/YYYY-MM]...`; at least one month is required."""

    arg_multimap = tokenize(args, PREFIX_MONTHPAID)
    usage_error = MESSAGE_INVALID_COMMAND_FORMAT.format(MarkPaidCommand.MESSAGE_USAGE)
    months = arg_multimap.get_all_values(PREFIX_MONTHPAID)
    if not fields.is_valid_index(arg_multimap.preamble) or not months:
        raise ParseError(usage_error)

    return MarkPaidCommand(
        index=fields.parse_index(arg_multimap.preamble),
        months=fields.parse_months_paid(months),
    )
