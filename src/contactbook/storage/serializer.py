"""Contact collection serialization.

Converts a list of ``Contact`` records to and from a plain dict/list
document that maps naturally to both JSON and YAML::

    {
      "format": "contactbook",
      "version": 1,
      "contacts": [
        {
          "kind": "person",
          "time_created": "2026-10-19T09:30:00",
          "time_updated": "2026-10-19T09:45:00",
          "fields": {"surname": "Lee", "birth_date": "[no data]", ...}
        }
      ]
    }

Each entry carries a ``"kind"`` discriminator; its ``"fields"`` are
exactly the fields of that kind's schema, so new kinds serialize without
changes here.  Deserialization validates the whole document and raises
``ValueError`` (or ``TypeError``) on the first problem.

Usage
-----
::

    from contactbook.storage.serializer import ContactSerializer

    serializer = ContactSerializer()
    text = serializer.to_json(contacts)
    assert serializer.from_json(text) == contacts
"""
from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any

import yaml

from contactbook.builders.registry import BuilderRegistry, builder_registry
from contactbook.errors import VariantNotFoundError
from contactbook.model.contact import Contact

FORMAT_TAG = "contactbook"
FORMAT_VERSION = 1


class ContactSerializer:
    """Converts between contact collections and JSON/YAML documents.

    Parameters
    ----------
    registry:
        Resolves each entry's kind to its schema and builder.  Defaults to
        the global ``builder_registry``.
    """

    def __init__(self, registry: BuilderRegistry | None = None) -> None:
        self._registry = registry if registry is not None else builder_registry

    # ------------------------------------------------------------------
    # Serialization (contacts → dict)
    # ------------------------------------------------------------------

    def to_dict(self, contacts: Iterable[Contact]) -> dict[str, object]:
        """Serialize a contact collection to a JSON-compatible dict."""
        return {
            "format": FORMAT_TAG,
            "version": FORMAT_VERSION,
            "contacts": [self.contact_to_dict(c) for c in contacts],
        }

    def contact_to_dict(self, contact: Contact) -> dict[str, object]:
        schema = self._registry.schema_for(contact.kind)
        return {
            "kind": contact.kind,
            "time_created": contact.time_created.isoformat(),
            "time_updated": contact.time_updated.isoformat(),
            "fields": {name: str(value) for name, value in schema.values(contact).items()},
        }

    # ------------------------------------------------------------------
    # Deserialization (dict → contacts)
    # ------------------------------------------------------------------

    def from_dict(self, data: Any) -> list[Contact]:
        """Deserialize a document produced by ``to_dict``.

        A bare list of entries is accepted as well.

        Raises
        ------
        TypeError
            If the document or an entry has the wrong shape.
        ValueError
            If the document has the wrong format tag or version, or an
            entry has an unknown kind, missing fields or a bad timestamp.
        """
        if isinstance(data, list):
            entries = data
        elif isinstance(data, dict):
            if data.get("format") != FORMAT_TAG:
                raise ValueError(f"Not a contact book document: format={data.get('format')!r}")
            version = data.get("version")
            if version != FORMAT_VERSION:
                raise ValueError(f"Unsupported contact book version: {version!r}")
            entries = data.get("contacts")
            if not isinstance(entries, list):
                raise TypeError("'contacts' must be a list")
        else:
            raise TypeError(f"Expected a contact book document, got {type(data).__name__}")
        return [self.contact_from_dict(entry, index) for index, entry in enumerate(entries)]

    def contact_from_dict(self, d: Any, index: int = 0) -> Contact:
        if not isinstance(d, dict):
            raise TypeError(f"Contact #{index + 1} is not a mapping")
        kind = d.get("kind")
        try:
            builder_cls = self._registry.get(kind)
        except VariantNotFoundError:
            raise ValueError(f"Contact #{index + 1} has unknown kind {kind!r}") from None
        fields = d.get("fields")
        if not isinstance(fields, dict):
            raise TypeError(f"Contact #{index + 1} has no 'fields' mapping")
        values: dict[str, str] = {}
        for name in builder_cls.schema.names():
            value = fields.get(name)
            if not isinstance(value, str):
                raise ValueError(f"Contact #{index + 1} field {name!r} is missing or not text")
            values[name] = value
        return builder_cls.build(
            values,
            self._datetime_from(d.get("time_created"), "time_created", index),
            self._datetime_from(d.get("time_updated"), "time_updated", index),
        )

    def _datetime_from(self, value: object, key: str, index: int) -> datetime:
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Contact #{index + 1} has no {key!r} timestamp")
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            raise ValueError(f"Contact #{index + 1} has a bad {key!r}: {value!r}") from None

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, contacts: Iterable[Contact], indent: int = 2) -> str:
        """Serialize contacts to a JSON string."""
        return json.dumps(self.to_dict(contacts), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> list[Contact]:
        """Deserialize contacts from a JSON string."""
        return self.from_dict(json.loads(text))

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, contacts: Iterable[Contact]) -> str:
        """Serialize contacts to a YAML string."""
        return yaml.dump(
            self.to_dict(contacts), default_flow_style=False, allow_unicode=True, sort_keys=False
        )

    def from_yaml(self, text: str) -> list[Contact]:
        """Deserialize contacts from a YAML string."""
        return self.from_dict(yaml.safe_load(text))
