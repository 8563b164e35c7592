"""File-backed persistence for a contact collection.

A ``ContactStore`` owns exactly one file, given explicitly at
construction.  ``save`` writes the whole collection in one go (to a
temporary sibling that is then renamed over the target, so a failed
write never truncates the previous file); ``load`` reads and validates
the whole collection.

The on-disk format follows the file suffix: ``.yaml``/``.yml`` files are
YAML, everything else is JSON.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

import yaml

from contactbook.errors import (
    StoreFormatError,
    StoreNotFoundError,
    StoreReadError,
    StoreWriteError,
)
from contactbook.model.contact import Contact
from contactbook.storage.serializer import ContactSerializer

logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class ContactStore:
    """Reads and writes one contact collection file.

    Parameters
    ----------
    path:
        The file holding the collection.  Parent directories are created
        on the first save.
    serializer:
        Converts contacts to and from documents.  Defaults to a
        ``ContactSerializer`` over the global builder registry.
    """

    def __init__(self, path: Path | str, serializer: ContactSerializer | None = None) -> None:
        self._path = Path(path)
        self._serializer = serializer if serializer is not None else ContactSerializer()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def format(self) -> str:
        """Return ``"yaml"`` or ``"json"`` according to the file suffix."""
        return "yaml" if self._path.suffix.lower() in YAML_SUFFIXES else "json"

    def exists(self) -> bool:
        return self._path.is_file()

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    def load(self) -> list[Contact]:
        """Read and validate the stored collection.

        Raises
        ------
        StoreNotFoundError
            If the file does not exist.
        StoreReadError
            If the file cannot be read or is not valid JSON/YAML.
        StoreFormatError
            If the document is not a contact collection.
        """
        if not self.exists():
            raise StoreNotFoundError(self._path)
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreReadError(self._path, f"Problem in loading contacts ({exc})") from exc

        try:
            data = yaml.safe_load(text) if self.format == "yaml" else json.loads(text)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise StoreReadError(self._path, "Problem in loading contacts from file") from exc

        try:
            contacts = self._serializer.from_dict(data)
        except (TypeError, ValueError, KeyError) as exc:
            raise StoreFormatError(self._path, f"Stored data is not a contact list ({exc})") from exc

        logger.debug("Loaded %d contact(s) from %s", len(contacts), self._path)
        return contacts

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def save(self, contacts: Iterable[Contact]) -> None:
        """Write the whole collection, replacing the previous file.

        Raises
        ------
        StoreWriteError
            If the directory or file cannot be written.
        """
        contacts = list(contacts)
        if self.format == "yaml":
            text = self._serializer.to_yaml(contacts)
        else:
            text = self._serializer.to_json(contacts)

        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(text, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise StoreWriteError(self._path, f"Problem in saving contacts to a file ({exc})") from exc

        logger.debug("Saved %d contact(s) to %s", len(contacts), self._path)

    def __repr__(self) -> str:
        return f"ContactStore(path={str(self._path)!r}, format={self.format!r})"
