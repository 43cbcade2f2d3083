"""Prefix tokenizer for command arguments.

Arguments look like `PREAMBLE n/NAME p/PHONE t/TAG t/TAG`. A prefix is only recognised at the start
of the argument text or right after whitespace, so `alice@e/x` is a plain value, not an `e/` field.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from src.parser.errors import ParseError

PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_ADDRESS = "a/"
PREFIX_FEES = "f/"
PREFIX_CLASSID = "c/"
PREFIX_TAG = "t/"
PREFIX_MONTHPAID = "m/"
PREFIX_NOT_MONTHPAID = "nm/"


def duplicate_prefixes_message(*prefixes: str) -> str:
    """User-facing message for prefixes supplied more than once."""

    return "Multiple values specified for the following single-valued field(s): " + " ".join(prefixes)


@dataclass(frozen=True)
class ArgumentMultimap:
    """Prefix -> ordered values mapping, plus the free-text preamble."""

    preamble: str = ""
    values: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {prefix: tuple(vals) for prefix, vals in self.values.items()}
        object.__setattr__(self, "values", MappingProxyType(frozen))

    def get_value(self, prefix: str) -> str | None:
        """Return the last value supplied for `prefix`, or `None` if it is absent."""

        vals = self.values.get(prefix, ())
        return vals[-1] if vals else None

    def get_all_values(self, prefix: str) -> list[str]:
        return list(self.values.get(prefix, ()))

    def is_present(self, prefix: str) -> bool:
        return prefix in self.values

    def verify_no_duplicate_prefixes_for(self, *prefixes: str) -> None:
        """Raise `ParseError` listing every given prefix that has more than one value."""

        duplicated = [p for p in prefixes if len(self.values.get(p, ())) > 1]
        if duplicated:
            raise ParseError(duplicate_prefixes_message(*duplicated))


def _prefix_pattern(prefixes: Sequence[str]) -> re.Pattern[str]:
    # Longest first so a prefix is never shadowed by a shorter one sharing its start.
    alternation = "|".join(re.escape(p) for p in sorted(prefixes, key=lambda p: (-len(p), p)))
    return re.compile(rf"(?:^|(?<=\s))(?P<prefix>{alternation})")


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    """Split `args` into a preamble and prefixed values.

    Values and the preamble are stripped of surrounding whitespace. Values keep the order in which
    they appear; unknown prefixes are treated as part of the preceding value.
    """

    text = args or ""
    if not prefixes:
        return ArgumentMultimap(preamble=text.strip())

    matches = list(_prefix_pattern(prefixes).finditer(text))
    if not matches:
        return ArgumentMultimap(preamble=text.strip())

    values: dict[str, list[str]] = {}
    preamble = text[: matches[0].start()].strip()
    for idx, match in enumerate(matches):
        end = matches[idx + 1].start() if idx + 1 < len(matches) else len(text)
        value = text[match.end(): end].strip()
        values.setdefault(match.group("prefix"), []).append(value)

    return ArgumentMultimap(preamble=preamble, values=values)
