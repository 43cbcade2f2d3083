"""Sample persons used to seed an empty address book at startup."""

from __future__ import annotations

from src.model.address_book import AddressBook
from src.model.person import Person


def sample_persons() -> list[Person]:
    return [
        Person(
            name="Alex Yeoh",
            phone="87438807",
            email="alexyeoh@example.com",
            address="Blk 30 Geylang Street 29, #06-40",
            fees=200,
            class_id="1",
            months_paid=frozenset({"2024-01", "2024-02"}),
            tags=frozenset({"friends"}),
        ),
        Person(
            name="Bernice Yu",
            phone="99272758",
            email="berniceyu@example.com",
            address="Blk 30 Lorong 3 Serangoon Gardens, #07-18",
            fees=250,
            class_id="2",
            months_paid=frozenset({"2024-01"}),
            tags=frozenset({"colleagues", "friends"}),
        ),
        Person(
            name="Charlotte Oliveiro",
            phone="93210283",
            email="charlotte@example.com",
            address="Blk 11 Ang Mo Kio Street 74, #11-04",
            fees=200,
            class_id="1",
            tags=frozenset({"neighbours"}),
        ),
        Person(
            name="David Li",
            phone="91031282",
            email="lidavid@example.com",
            address="Blk 436 Serangoon Gardens Street 26, #16-43",
            fees=300,
            class_id="3",
            months_paid=frozenset({"2024-02"}),
            tags=frozenset({"family"}),
        ),
    ]


def sample_address_book() -> AddressBook:
    return AddressBook(sample_persons())
