"""Parser for the `edit` command.

Format: `INDEX [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [f/FEES] [c/CLASSID] [t/TAG]...`
"""

from __future__ import annotations

from collections.abc import Sequence

from src.commands.base import MESSAGE_INVALID_COMMAND_FORMAT
from src.commands.edit import EditCommand, EditPersonDescriptor
from src.parser import fields
from src.parser.arguments import (
    PREFIX_ADDRESS,
    PREFIX_CLASSID,
    PREFIX_EMAIL,
    PREFIX_FEES,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    ArgumentMultimap,
    duplicate_prefixes_message,
    tokenize,
)
from src.parser.errors import ParseError

# Checked in this order; only the first duplicated prefix is reported.
_SINGLE_VALUED_PREFIXES: tuple[str, ...] = (PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)


def _has_duplicate(arg_multimap: ArgumentMultimap, prefix: str) -> bool:
    return len(arg_multimap.get_all_values(prefix)) > 1


def _parse_tags_for_edit(tags: Sequence[str]) -> frozenset[str] | None:
    """Parse `t/` values for an edit.

    Returns `None` when no `t/` was given (tags unchanged) and an empty set for a single empty
    `t/` (clear all tags).
    """

    if not tags:
        return None
    if len(tags) == 1 and tags[0] == "":
        return frozenset()
    return fields.parse_tags(tags)


def parse_edit_command(args: str) -> EditCommand:
    """Parse `edit` arguments into an `EditCommand`.

    Raises:
        ParseError: If the index is missing or invalid, a single-valued prefix is repeated, a field
            value is invalid, or no field is being edited.
    """

    arg_multimap = tokenize(
        args,
        PREFIX_NAME,
        PREFIX_PHONE,
        PREFIX_EMAIL,
        PREFIX_ADDRESS,
        PREFIX_FEES,
        PREFIX_CLASSID,
        PREFIX_TAG,
    )

    usage_error = MESSAGE_INVALID_COMMAND_FORMAT.format(EditCommand.MESSAGE_USAGE)
    if not arg_multimap.preamble or not fields.is_valid_index(arg_multimap.preamble):
        raise ParseError(usage_error)

    try:
        index = fields.parse_index(arg_multimap.preamble)
    except ParseError as exc:
        raise ParseError(usage_error) from exc

    for prefix in _SINGLE_VALUED_PREFIXES:
        if _has_duplicate(arg_multimap, prefix):
            raise ParseError(duplicate_prefixes_message(prefix))

    descriptor = EditPersonDescriptor()
    if (name := arg_multimap.get_value(PREFIX_NAME)) is not None:
        descriptor.name = fields.parse_name(name)
    if (phone := arg_multimap.get_value(PREFIX_PHONE)) is not None:
        descriptor.phone = fields.parse_phone(phone)
    if (email := arg_multimap.get_value(PREFIX_EMAIL)) is not None:
        descriptor.email = fields.parse_email(email)
    if (address := arg_multimap.get_value(PREFIX_ADDRESS)) is not None:
        descriptor.address = fields.parse_address(address)
    if (fees := arg_multimap.get_value(PREFIX_FEES)) is not None:
        descriptor.fees = fields.parse_fees(fees)
    if (class_id := arg_multimap.get_value(PREFIX_CLASSID)) is not None:
        descriptor.class_id = fields.parse_class_id(class_id)

    tags = _parse_tags_for_edit(arg_multimap.get_all_values(PREFIX_TAG))
    if tags is not None:
        descriptor.tags = tags

    if not descriptor.is_any_field_edited():
        raise ParseError(EditCommand.MESSAGE_NOT_EDITED)

    return EditCommand(index=index, descriptor=descriptor)
