"""Input line handler.

Hard contract: every input line produces exactly one `CommandResult`. Parse and command errors are
shown to the user verbatim; any other failure is logged and reported with a generic message.
"""

from __future__ import annotations

import logging
from time import monotonic

from src.app import App
from src.commands.base import CommandError, CommandResult
from src.parser.errors import ParseError
from src.parser.parser import parse_command

logger = logging.getLogger(__name__)

MESSAGE_INTERNAL_ERROR = "Something went wrong while running that command."


def handle_line(line: str, app: App) -> CommandResult:
    """Parse and execute a single input line against the app's address book."""

    started = monotonic()

    # noinspection PyBroadException
    try:
        command = parse_command(line)
        result = command.execute(app.address_book)

        latency_ms = int((monotonic() - started) * 1000)
        logger.info(
            "handled command=%s persons=%d latency_ms=%d",
            type(command).__name__,
            len(app.address_book),
            latency_ms,
        )
        return result
    except (ParseError, CommandError) as exc:
        # Invalid input -> show the message, no stack trace needed.
        latency_ms = int((monotonic() - started) * 1000)
        logger.info("rejected reason=%s latency_ms=%d", exc, latency_ms)
        return CommandResult(str(exc))
    except Exception:
        # Handler boundary: an internal error must not end the session.
        logger.exception("handler failed")
        return CommandResult(MESSAGE_INTERNAL_ERROR)
