"""Contact records for the contact book.

A ``Contact`` is a tagged variant: shared base attributes (name, number,
timestamps), a ``kind`` tag, and a variant-specific payload in
``details``.  The payload types are frozen dataclasses too, so a contact
is immutable apart from ``time_updated``, which only the edit flow moves
forward through ``set_time_updated``.

Timestamps are kept at minute precision.  Downstream code should dispatch
on ``kind`` (or on the field schema registered for it) rather than on the
payload type.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

from contactbook.model.validators import NO_DATA, NO_NUMBER

PERSON: str = "person"
ORGANIZATION: str = "organization"


def truncate_to_minute(moment: datetime) -> datetime:
    """Drop seconds and microseconds from ``moment``."""
    return moment.replace(second=0, microsecond=0)


# ---------------------------------------------------------------------------
# Variant payloads
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PersonDetails:
    """Attributes only a person has."""

    surname: str = ""
    birth_date: str = NO_DATA
    gender: str = NO_DATA


@dataclass(frozen=True, slots=True)
class OrganizationDetails:
    """Attributes only an organization has."""

    address: str = NO_DATA


Details = Union[PersonDetails, OrganizationDetails]


# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Contact:
    """A single contact-book record.

    Parameters
    ----------
    kind:
        Variant tag, e.g. ``"person"`` or ``"organization"``.
    name:
        First name of a person, or the organization name.
    number:
        Validated phone number or ``"[no number]"``.
    details:
        Variant-specific payload.
    time_created:
        When the record was first built.  Never changes afterwards.
    time_updated:
        When the record was last edited.  Never earlier than
        ``time_created``.
    """

    kind: str
    name: str
    number: str
    details: Details
    time_created: datetime
    time_updated: datetime = field(hash=False)

    def __post_init__(self) -> None:
        created = truncate_to_minute(self.time_created)
        updated = max(truncate_to_minute(self.time_updated), created)
        object.__setattr__(self, "time_created", created)
        object.__setattr__(self, "time_updated", updated)

    # ------------------------------------------------------------------
    # Derived accessors
    # ------------------------------------------------------------------

    @property
    def is_person(self) -> bool:
        return isinstance(self.details, PersonDetails)

    @property
    def full_name(self) -> str:
        """Name shown in listings: ``"name surname"`` for a person."""
        if isinstance(self.details, PersonDetails):
            return f"{self.name} {self.details.surname}"
        return self.name

    @property
    def surname(self) -> str:
        return self._person_details("surname").surname

    @property
    def birth_date(self) -> str:
        return self._person_details("birth_date").birth_date

    @property
    def gender(self) -> str:
        return self._person_details("gender").gender

    @property
    def address(self) -> str:
        if not isinstance(self.details, OrganizationDetails):
            raise AttributeError(f"{self.kind!r} contact has no attribute 'address'")
        return self.details.address

    @property
    def has_number(self) -> bool:
        return self.number != NO_NUMBER

    def _person_details(self, attribute: str) -> PersonDetails:
        if not isinstance(self.details, PersonDetails):
            raise AttributeError(f"{self.kind!r} contact has no attribute {attribute!r}")
        return self.details

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_time_updated(self, moment: datetime) -> None:
        """Record an edit at ``moment``.

        The value is truncated to the minute and never moved before
        ``time_created``.
        """
        updated = max(truncate_to_minute(moment), self.time_created)
        object.__setattr__(self, "time_updated", updated)

    def __str__(self) -> str:
        return f"{self.kind}: {self.full_name}"
