"""contactbook — personal contact book for people and organizations.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import contactbook

    # Load a saved collection
    contacts = contactbook.load("data/Contacts.json")

    # Free-text search across every field
    hits = contactbook.search(contacts, "smith")

    # Inspect the editable fields of a contact kind
    contactbook.fields("person")
    ('surname', 'birth_date', 'gender', 'name', 'number')

    # Write the collection back
    contactbook.save(contacts, "data/Contacts.json")

    contactbook.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from contactbook.model.contact import Contact
    from contactbook.model.schema import FieldSchema


def schema(kind: str) -> "FieldSchema":
    """Return the field schema registered for ``kind``.

    Raises
    ------
    contactbook.errors.VariantNotFoundError
        If ``kind`` is not a registered contact kind.
    """
    from contactbook.builders import builder_registry

    return builder_registry.schema_for(kind)


def fields(kind: str) -> tuple[str, ...]:
    """Return the editable field names of ``kind`` in schema order."""
    return schema(kind).names()


def search(contacts: Iterable["Contact"], query: str) -> list["Contact"]:
    """Return the contacts whose fields contain ``query`` (case-insensitive)."""
    from contactbook.searching import search_contacts

    return search_contacts(contacts, query)


def load(path: str | Path) -> list["Contact"]:
    """Load a contact collection from a JSON or YAML file.

    Raises
    ------
    contactbook.errors.StoreError
        If the file is missing, unreadable, or not a contact collection.
    """
    from contactbook.storage import ContactStore

    return ContactStore(path).load()


def save(contacts: Iterable["Contact"], path: str | Path) -> None:
    """Save a contact collection to a JSON or YAML file.

    Raises
    ------
    contactbook.errors.StoreWriteError
        If the file cannot be written.
    """
    from contactbook.storage import ContactStore

    ContactStore(path).save(contacts)


__all__ = [
    "__version__",
    "schema",
    "fields",
    "search",
    "load",
    "save",
]
