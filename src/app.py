"""Application composition root.

This module wires together configuration and the in-memory address book for the CLI runtime.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.config.settings import Settings
from src.model.address_book import AddressBook
from src.model.sample_data import sample_address_book


@dataclass(frozen=True)
class App:
    """Shared application dependencies for the line handler."""

    settings: Settings
    address_book: AddressBook


def create_app(settings: Settings) -> App:
    """Create the application container, seeding sample persons if enabled."""

    address_book = sample_address_book() if settings.load_sample_data else AddressBook()
    return App(settings=settings, address_book=address_book)
