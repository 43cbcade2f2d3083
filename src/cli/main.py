"""CLI process entrypoint (read-eval-print loop)."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from dotenv import load_dotenv

from src.app import App, create_app
from src.cli.handlers import handle_line
from src.config.logging import configure_logging
from src.config.settings import load_settings

logger = logging.getLogger(__name__)


def run(app: App, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
    """Read commands from `stdin` until `exit` or end of input, printing one reply per line."""

    interactive = stdin.isatty()
    while True:
        if interactive:
            stdout.write(app.settings.prompt)
            stdout.flush()

        line = stdin.readline()
        if not line:
            break
        if not line.strip():
            continue

        result = handle_line(line, app)
        print(result.feedback, file=stdout)
        if result.show_persons:
            for idx, person in enumerate(app.address_book.filtered_persons, start=1):
                print(f"{idx}. {person}", file=stdout)
        if result.exit:
            break


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the address book."""

    parser = argparse.ArgumentParser(description="Fee-tracking address book.")
    parser.add_argument(
        "--no-sample-data",
        action="store_true",
        help="Start with an empty address book instead of the bundled sample persons.",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (e.g. DEBUG).")
    args = parser.parse_args(argv)

    load_dotenv(".env")
    overrides: dict[str, object] = {}
    if args.no_sample_data:
        overrides["LOAD_SAMPLE_DATA"] = False
    if args.log_level:
        overrides["LOG_LEVEL"] = args.log_level

    settings = load_settings(**overrides)
    configure_logging(settings.log_level)

    app = create_app(settings)
    try:
        run(app)
    finally:
        logger.info("shutting down")


if __name__ == "__main__":
    main()
