"""Field-level constraints for person records.

Each field exposes a constraint message and an `is_valid_*` check. The same checks back both the
`Person` model validators and the command-line field parsers, so a value accepted by the parser is
always accepted by the model.
"""

from __future__ import annotations

import re

NAME_CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"
PHONE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain, where the local-part contains only "
    "alphanumeric characters and the special characters +_.- (not at the start or end), and the "
    "domain is made up of labels separated by periods ending with a label of at least 2 characters"
)
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
FEES_CONSTRAINTS = "Fees should only contain digits and represent a non-negative whole amount"
CLASS_ID_CONSTRAINTS = "Class ids should only contain alphanumeric characters, and it should not be blank"
MONTH_PAID_CONSTRAINTS = "Months paid should be in the format YYYY-MM, e.g. 2024-01"
TAG_CONSTRAINTS = "Tag names should be alphanumeric"

_NAME_RE = re.compile(r"[^\W_]+(?: +[^\W_]+)*")
_PHONE_RE = re.compile(r"\d{3,}")
_EMAIL_RE = re.compile(
    r"[a-z0-9](?:[a-z0-9+_.\-]*[a-z0-9])?"
    r"@(?:[a-z0-9](?:[a-z0-9\-]*[a-z0-9])?\.)*[a-z0-9](?:[a-z0-9\-]*[a-z0-9])?",
    flags=re.IGNORECASE,
)
_FEES_RE = re.compile(r"\d+")
_CLASS_ID_RE = re.compile(r"[^\W_]+")
_MONTH_PAID_RE = re.compile(r"\d{4}-(?:0[1-9]|1[0-2])")
_TAG_RE = re.compile(r"[^\W_]+")


def is_valid_name(value: str) -> bool:
    return _NAME_RE.fullmatch(value) is not None


def is_valid_phone(value: str) -> bool:
    return _PHONE_RE.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    """Whether `value` looks like `local-part@domain`.

    The final domain label must be at least two characters long.
    """

    if _EMAIL_RE.fullmatch(value) is None:
        return False
    domain = value.split("@", 1)[1]
    return len(domain.rsplit(".", 1)[-1]) >= 2


def is_valid_address(value: str) -> bool:
    return bool(value.strip())


def is_valid_fees(value: str) -> bool:
    return _FEES_RE.fullmatch(value) is not None


def is_valid_class_id(value: str) -> bool:
    return _CLASS_ID_RE.fullmatch(value) is not None


def is_valid_month_paid(value: str) -> bool:
    return _MONTH_PAID_RE.fullmatch(value) is not None


def is_valid_tag(value: str) -> bool:
    return _TAG_RE.fullmatch(value) is not None
