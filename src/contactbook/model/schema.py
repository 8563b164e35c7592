"""Field schemas: the editable, searchable attributes of each contact kind.

A ``FieldSchema`` is a statically declared, ordered table of
``FieldSpec`` entries.  Edit and search code only ever walk these
tables, so adding a contact kind means declaring a new schema and a
builder for it; the edit and search paths stay untouched.

Field order is the variant's own fields first, followed by the base
fields every contact shares.  Timestamps are bookkeeping and never
appear in a schema.

Usage
-----
::

    from contactbook.model.schema import PERSON_SCHEMA

    PERSON_SCHEMA.names()
    # ('surname', 'birth_date', 'gender', 'name', 'number')
    PERSON_SCHEMA.project(contact)
    # 'LeeMay 1st 1990FAnn+1 555 0100'
"""
from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from contactbook.errors import UnknownFieldError
from contactbook.model.notices import ValidationNotice
from contactbook.model.validators import (
    NO_DATA,
    NO_NUMBER,
    is_not_blank,
    is_valid_gender,
    is_valid_number,
)

if TYPE_CHECKING:
    from contactbook.model.contact import Contact


@dataclass(frozen=True)
class FieldSpec:
    """Descriptor for one contact attribute.

    Parameters
    ----------
    name:
        Field name used for edit selection and persistence.
    label:
        Heading used when a record is displayed.
    prompt:
        Text shown when asking the user for this field.
    accessor:
        Reads the field's value from a ``Contact``.
    check:
        Predicate applied to raw input.  ``None`` accepts anything.
    sentinel:
        Value stored when ``check`` rejects the input.
    default:
        Value a builder slot holds after ``reset()``.
    code:
        Notice code reported on rejection.
    message:
        Notice message reported on rejection.
    """

    name: str
    label: str
    prompt: str
    accessor: Callable[["Contact"], object]
    check: Callable[[str], bool] | None = None
    sentinel: str = NO_DATA
    default: str = ""
    code: str = ""
    message: str = ""

    @property
    def validated(self) -> bool:
        return self.check is not None

    def clean(self, raw: str) -> tuple[str, ValidationNotice | None]:
        """Validate ``raw`` and return the value to store plus any notice."""
        if self.check is None or self.check(raw):
            return raw, None
        notice = ValidationNotice(
            code=self.code,
            field=self.name,
            value=raw,
            message=self.message,
            substituted=self.sentinel,
        )
        return self.sentinel, notice

    def read(self, contact: "Contact") -> object:
        """Return this field's value on ``contact``."""
        return self.accessor(contact)


class FieldSchema:
    """Ordered field table for one contact kind.

    Parameters
    ----------
    kind:
        The variant tag this schema describes.
    own:
        Fields declared by the variant itself, in declaration order.
    base:
        Fields shared by every contact, in declaration order.
    entry_order:
        Order in which a new record is prompted and displayed.  Defaults
        to schema order.
    """

    def __init__(
        self,
        kind: str,
        own: Sequence[FieldSpec],
        base: Sequence[FieldSpec],
        entry_order: Sequence[str] | None = None,
    ) -> None:
        self._kind = kind
        self._fields: tuple[FieldSpec, ...] = (*own, *base)
        self._by_name: dict[str, FieldSpec] = {f.name: f for f in self._fields}
        if len(self._by_name) != len(self._fields):
            raise ValueError(f"Duplicate field names in the {kind!r} schema")
        order = tuple(entry_order) if entry_order is not None else self.names()
        if sorted(order) != sorted(self._by_name):
            raise ValueError(
                f"entry_order for {kind!r} must list every field exactly once: {order!r}"
            )
        self._entry_order: tuple[str, ...] = order

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        return self._fields

    @property
    def entry_order(self) -> tuple[str, ...]:
        return self._entry_order

    def names(self) -> tuple[str, ...]:
        """Return field names in schema order."""
        return tuple(f.name for f in self._fields)

    def get(self, name: str) -> FieldSpec:
        """Return the ``FieldSpec`` called ``name``.

        Raises
        ------
        UnknownFieldError
            If the schema has no such field.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownFieldError(name, self._kind) from None

    def values(self, contact: "Contact") -> dict[str, object]:
        """Return ``{field name: value}`` for ``contact`` in schema order."""
        return {f.name: f.read(contact) for f in self._fields}

    def project(self, contact: "Contact") -> str:
        """Concatenate every field value in schema order for text search.

        ``None`` values contribute nothing.
        """
        parts = []
        for spec in self._fields:
            value = spec.read(contact)
            if value is not None:
                parts.append(str(value))
        return "".join(parts).strip()

    def describe(self, contact: "Contact") -> list[tuple[str, str]]:
        """Return labelled ``(label, value)`` lines in entry order."""
        lines = [
            (self._by_name[name].label, str(self._by_name[name].read(contact)))
            for name in self._entry_order
        ]
        lines.append(("Time created", contact.time_created.isoformat(timespec="minutes")))
        lines.append(("Time last edit", contact.time_updated.isoformat(timespec="minutes")))
        return lines

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldSchema(kind={self._kind!r}, fields={list(self.names())})"


# ---------------------------------------------------------------------------
# Base fields
# ---------------------------------------------------------------------------

NAME_FIELD = FieldSpec(
    name="name",
    label="Name",
    prompt="Enter the name: ",
    accessor=lambda c: c.name,
)

NUMBER_FIELD = FieldSpec(
    name="number",
    label="Number",
    prompt="Enter the number: ",
    accessor=lambda c: c.number,
    check=is_valid_number,
    sentinel=NO_NUMBER,
    default=NO_NUMBER,
    code="CB001",
    message="Wrong number format!",
)

# ---------------------------------------------------------------------------
# Person
# ---------------------------------------------------------------------------

SURNAME_FIELD = FieldSpec(
    name="surname",
    label="Surname",
    prompt="Enter the surname: ",
    accessor=lambda c: c.surname,
)

BIRTH_DATE_FIELD = FieldSpec(
    name="birth_date",
    label="Birth date",
    prompt="Enter the birth date: ",
    accessor=lambda c: c.birth_date,
    check=is_not_blank,
    code="CB002",
    message="Bad birth date!",
)

GENDER_FIELD = FieldSpec(
    name="gender",
    label="Gender",
    prompt="Enter the gender (M, F): ",
    accessor=lambda c: c.gender,
    check=is_valid_gender,
    code="CB003",
    message="Bad gender!",
)

PERSON_SCHEMA = FieldSchema(
    kind="person",
    own=(SURNAME_FIELD, BIRTH_DATE_FIELD, GENDER_FIELD),
    base=(NAME_FIELD, NUMBER_FIELD),
    entry_order=("name", "surname", "birth_date", "gender", "number"),
)

# ---------------------------------------------------------------------------
# Organization
# ---------------------------------------------------------------------------

ADDRESS_FIELD = FieldSpec(
    name="address",
    label="Address",
    prompt="Enter the address: ",
    accessor=lambda c: c.address,
    check=is_not_blank,
    code="CB004",
    message="Wrong organization address!",
)

ORGANIZATION_NAME_FIELD = replace(
    NAME_FIELD,
    label="Organization name",
    prompt="Enter the organization name: ",
)

ORGANIZATION_SCHEMA = FieldSchema(
    kind="organization",
    own=(ADDRESS_FIELD,),
    base=(ORGANIZATION_NAME_FIELD, NUMBER_FIELD),
    entry_order=("name", "address", "number"),
)
