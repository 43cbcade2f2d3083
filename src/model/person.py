"""Person record (Pydantic model).

Persons are immutable; edits produce a new `Person` via `model_copy` and are re-validated by the
address book before being stored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator

from src.model import fields


class Person(BaseModel):
    """A single student/contact with fee tracking information."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, frozen=True)

    name: str
    phone: str
    email: str
    address: str
    fees: NonNegativeInt
    class_id: str
    months_paid: frozenset[str] = Field(default_factory=frozenset)
    tags: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not fields.is_valid_name(value):
            raise ValueError(fields.NAME_CONSTRAINTS)
        return value

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str) -> str:
        if not fields.is_valid_phone(value):
            raise ValueError(fields.PHONE_CONSTRAINTS)
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not fields.is_valid_email(value):
            raise ValueError(fields.EMAIL_CONSTRAINTS)
        return value

    @field_validator("address")
    @classmethod
    def validate_address(cls, value: str) -> str:
        if not fields.is_valid_address(value):
            raise ValueError(fields.ADDRESS_CONSTRAINTS)
        return value

    @field_validator("class_id")
    @classmethod
    def validate_class_id(cls, value: str) -> str:
        if not fields.is_valid_class_id(value):
            raise ValueError(fields.CLASS_ID_CONSTRAINTS)
        return value

    @field_validator("months_paid")
    @classmethod
    def validate_months_paid(cls, value: frozenset[str]) -> frozenset[str]:
        for month in value:
            if not fields.is_valid_month_paid(month):
                raise ValueError(fields.MONTH_PAID_CONSTRAINTS)
        return value

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, value: frozenset[str]) -> frozenset[str]:
        for tag in value:
            if not fields.is_valid_tag(tag):
                raise ValueError(fields.TAG_CONSTRAINTS)
        return value

    def is_same_person(self, other: Person) -> bool:
        """Whether both records describe the same person (names equal, ignoring case)."""

        return self.name.casefold() == other.name.casefold()

    def __str__(self) -> str:
        months = ", ".join(sorted(self.months_paid)) or "-"
        tags = "".join(f"[{t}]" for t in sorted(self.tags))
        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; Address: {self.address}; "
            f"Fees: {self.fees}; Class Id: {self.class_id}; Months Paid: {months}; Tags: {tags}"
        )
