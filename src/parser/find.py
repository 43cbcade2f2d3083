"""Parser for the `find` command.

Exactly one search mode is selected from the combination of supplied prefixes:

    n/           -> name
    c/           -> class id
    n/ + c/      -> name and class id
    m/           -> months paid
    nm/          -> months not paid

Any other combination is rejected with the usage message.
"""

from __future__ import annotations

from enum import StrEnum

from src.commands.base import MESSAGE_INVALID_COMMAND_FORMAT
from src.commands.find import FindCommand
from src.model.predicates import (
    ClassIdContainsKeywordsPredicate,
    MonthPaidContainsKeywordsPredicate,
    NameAndClassIdContainsKeywordsPredicate,
    NameContainsKeywordsPredicate,
    NotMonthPaidContainsKeywordsPredicate,
)
from src.parser.arguments import (
    PREFIX_CLASSID,
    PREFIX_MONTHPAID,
    PREFIX_NAME,
    PREFIX_NOT_MONTHPAID,
    ArgumentMultimap,
    tokenize,
)
from src.parser.errors import ParseError

_FIND_PREFIXES: tuple[str, ...] = (PREFIX_NAME, PREFIX_CLASSID, PREFIX_MONTHPAID, PREFIX_NOT_MONTHPAID)


class FindCommandType(StrEnum):
    """Search mode selected from the supplied prefixes."""

    name = "name"
    class_id = "class_id"
    name_and_class_id = "name_and_class_id"
    month_paid = "month_paid"
    not_month_paid = "not_month_paid"
    none = "none"


def get_find_command_type(
        *,
        name: bool,
        class_id: bool,
        month_paid: bool,
        not_month_paid: bool,
) -> FindCommandType:
    """Classify which prefixes are present into a single search mode."""

    if month_paid and not (name or class_id or not_month_paid):
        return FindCommandType.month_paid
    if name and class_id and not (month_paid or not_month_paid):
        return FindCommandType.name_and_class_id
    if name and not (class_id or month_paid or not_month_paid):
        return FindCommandType.name
    if class_id and not (name or month_paid or not_month_paid):
        return FindCommandType.class_id
    if not_month_paid and not (name or class_id or month_paid):
        return FindCommandType.not_month_paid
    return FindCommandType.none


def _keywords(arg_multimap: ArgumentMultimap, prefix: str) -> list[str]:
    """Split the value of `prefix` on whitespace, rejecting an empty search value."""

    keywords = (arg_multimap.get_value(prefix) or "").split()
    if not keywords:
        raise ParseError(FindCommand.EMPTY_SEARCH_VALUE_PROVIDED)
    return keywords


def parse_find_command(args: str) -> FindCommand:
    """Parse `find` arguments into a `FindCommand`.

    Raises:
        ParseError: If a preamble is present, a prefix is repeated, the prefix combination is not a
            supported search mode, or a search value is empty.
    """

    arg_multimap = tokenize(args, *_FIND_PREFIXES)
    usage_error = MESSAGE_INVALID_COMMAND_FORMAT.format(FindCommand.MESSAGE_USAGE)
    if arg_multimap.preamble:
        raise ParseError(usage_error)
    arg_multimap.verify_no_duplicate_prefixes_for(*_FIND_PREFIXES)

    command_type = get_find_command_type(
        name=arg_multimap.is_present(PREFIX_NAME),
        class_id=arg_multimap.is_present(PREFIX_CLASSID),
        month_paid=arg_multimap.is_present(PREFIX_MONTHPAID),
        not_month_paid=arg_multimap.is_present(PREFIX_NOT_MONTHPAID),
    )

    match command_type:
        case FindCommandType.name_and_class_id:
            predicate = NameAndClassIdContainsKeywordsPredicate(
                _keywords(arg_multimap, PREFIX_NAME),
                _keywords(arg_multimap, PREFIX_CLASSID),
            )
        case FindCommandType.name:
            predicate = NameContainsKeywordsPredicate(_keywords(arg_multimap, PREFIX_NAME))
        case FindCommandType.class_id:
            predicate = ClassIdContainsKeywordsPredicate(_keywords(arg_multimap, PREFIX_CLASSID))
        case FindCommandType.month_paid:
            predicate = MonthPaidContainsKeywordsPredicate(_keywords(arg_multimap, PREFIX_MONTHPAID))
        case FindCommandType.not_month_paid:
            predicate = NotMonthPaidContainsKeywordsPredicate(
                _keywords(arg_multimap, PREFIX_NOT_MONTHPAID)
            )
        case _:
            raise ParseError(usage_error)

    return FindCommand(predicate)
