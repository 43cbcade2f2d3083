"""Parser exceptions."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when user input does not conform to the expected command format.

    The message is user-facing and is shown verbatim by the CLI.
    """
