"""Configuration for a contact-book session.

A ``BookConfig`` names which collection to open and where it lives.  The
CLI builds one from its options (which fall back to the
``CONTACTBOOK_DATA_DIR`` and ``CONTACTBOOK_FORMAT`` environment
variables); library callers construct it directly.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from contactbook.storage.store import ContactStore

DEFAULT_BOOK_NAME = "Contacts"
DEFAULT_DATA_DIR = Path("data")
FORMATS: dict[str, str] = {"json": ".json", "yaml": ".yaml"}


@dataclass(frozen=True)
class BookConfig:
    """Location of one persisted contact collection.

    Parameters
    ----------
    name:
        Base file name of the collection (default ``"Contacts"``).
    data_dir:
        Directory holding the collection file.
    format:
        ``"json"`` or ``"yaml"``; selects the file suffix.
    """

    name: str = DEFAULT_BOOK_NAME
    data_dir: Path = field(default=DEFAULT_DATA_DIR)
    format: str = "json"

    def __post_init__(self) -> None:
        if not self.name or self.name.strip() != self.name:
            raise ValueError(f"Invalid book name: {self.name!r}")
        if "/" in self.name or "\\" in self.name or self.name in {".", ".."}:
            raise ValueError(f"Book name must be a plain file name: {self.name!r}")
        if self.format not in FORMATS:
            raise ValueError(
                f"Unknown format {self.format!r}; expected one of {', '.join(FORMATS)}"
            )
        object.__setattr__(self, "data_dir", Path(self.data_dir))

    @property
    def path(self) -> Path:
        """Return the collection file path."""
        return self.data_dir / f"{self.name}{FORMATS[self.format]}"

    def open_store(self) -> ContactStore:
        """Return a ``ContactStore`` for this collection."""
        return ContactStore(self.path)
