"""Exception types shared across contactbook.

Recoverable conditions (bad user input, unknown menu actions) never reach
these classes: they are handled where they occur with sentinels and
re-prompts.  What remains here is either a persistence problem, which the
director reports and survives, or a programming-contract failure, which
is allowed to propagate.
"""
from __future__ import annotations

from pathlib import Path


# ---------------------------------------------------------------------------
# Variant registry errors
# ---------------------------------------------------------------------------


class VariantNotFoundError(KeyError):
    """Raised when no builder is registered for a contact kind."""

    def __init__(self, kind: str, available: list[str] | None = None) -> None:
        self.kind = kind
        self.available = list(available or [])
        super().__init__(
            f"Contact kind {kind!r} is not registered. "
            f"Available kinds: {', '.join(self.available) or '(none)'}."
        )


class VariantAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a kind that already exists."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(
            f"Contact kind {kind!r} is already registered. "
            "Use a unique kind or deregister the existing builder first."
        )


# ---------------------------------------------------------------------------
# Schema / builder contract errors
# ---------------------------------------------------------------------------


class UnknownFieldError(KeyError):
    """Raised when a field name is looked up in a schema that lacks it."""

    def __init__(self, field_name: str, kind: str) -> None:
        self.field_name = field_name
        self.kind = kind
        super().__init__(f"Field {field_name!r} is not part of the {kind!r} schema.")


class SchemaDriftError(RuntimeError):
    """Raised when a builder cannot run a step its schema claims to have.

    This means the field schema and the builder have drifted apart, which
    is an internal error rather than a user mistake.
    """

    def __init__(self, field_name: str, builder_name: str) -> None:
        self.field_name = field_name
        self.builder_name = builder_name
        super().__init__(
            f"Builder {builder_name} has no step for field {field_name!r}; "
            "field schema and builder are out of sync."
        )


class ContactNotFoundError(KeyError):
    """Raised when an operation needs a contact that is not in the book."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Contact {name!r} is not in the contact book.")


# ---------------------------------------------------------------------------
# Persistence errors
# ---------------------------------------------------------------------------


class StoreError(Exception):
    """Base class for persistence failures.

    Parameters
    ----------
    path:
        The file the store was reading or writing.
    message:
        Human-readable description of the failure.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class StoreNotFoundError(StoreError):
    """The store file does not exist yet."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "Contact file doesn't exist")


class StoreReadError(StoreError):
    """The store file exists but could not be read or decoded."""


class StoreFormatError(StoreError):
    """The store file decoded, but does not hold a contact collection."""


class StoreWriteError(StoreError):
    """Saving the collection failed; the previous file is left untouched."""
