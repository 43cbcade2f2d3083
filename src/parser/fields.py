"""Parsers for individual command fields.

Each `parse_*` function strips the raw value, validates it against the person field constraints and
returns the normalized value, raising `ParseError` with the constraint message otherwise.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from src.model import fields
from src.parser.errors import ParseError

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

_UNSIGNED_INT_RE = re.compile(r"[0-9]+")


def is_valid_index(text: str) -> bool:
    """Whether `text` is a non-zero unsigned integer (leading/trailing whitespace ignored)."""

    value = (text or "").strip()
    return _UNSIGNED_INT_RE.fullmatch(value) is not None and int(value) > 0


def parse_index(text: str) -> int:
    """Parse a 1-based index."""

    if not is_valid_index(text):
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(text.strip())


def _require(value: str, is_valid: Callable[[str], bool], message: str) -> str:
    trimmed = value.strip()
    if not is_valid(trimmed):
        raise ParseError(message)
    return trimmed


def parse_name(value: str) -> str:
    return _require(value, fields.is_valid_name, fields.NAME_CONSTRAINTS)


def parse_phone(value: str) -> str:
    return _require(value, fields.is_valid_phone, fields.PHONE_CONSTRAINTS)


def parse_email(value: str) -> str:
    return _require(value, fields.is_valid_email, fields.EMAIL_CONSTRAINTS)


def parse_address(value: str) -> str:
    return _require(value, fields.is_valid_address, fields.ADDRESS_CONSTRAINTS)


def parse_fees(value: str) -> int:
    return int(_require(value, fields.is_valid_fees, fields.FEES_CONSTRAINTS))


def parse_class_id(value: str) -> str:
    return _require(value, fields.is_valid_class_id, fields.CLASS_ID_CONSTRAINTS)


def parse_month_paid(value: str) -> str:
    return _require(value, fields.is_valid_month_paid, fields.MONTH_PAID_CONSTRAINTS)


def parse_months_paid(values: Iterable[str]) -> frozenset[str]:
    return frozenset(parse_month_paid(v) for v in values)


def parse_tag(value: str) -> str:
    return _require(value, fields.is_valid_tag, fields.TAG_CONSTRAINTS)


def parse_tags(values: Iterable[str]) -> frozenset[str]:
    """Parse tag values into a set (duplicates collapse)."""

    return frozenset(parse_tag(v) for v in values)
