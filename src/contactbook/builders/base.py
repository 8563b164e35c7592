"""Staged construction of contacts.

A ``ContactBuilder`` holds one slot per field of its ``FieldSchema``.
Each step prompts for a field, validates the answer and stores either
the value or the field's sentinel, then returns the builder so steps
chain::

    contact = builder.reset().add_name().add_address().add_number().get_contact()

A builder is long-lived: the director creates one per contact kind and
reuses it for every create and edit.  ``reset()`` prepares it for a new
record; ``load(contact)`` stages an existing record so that re-running a
single step followed by ``get_contact()`` edits exactly one field while
keeping the others and ``time_created`` intact.

Subclasses declare ``schema``, the named steps, and a ``STEPS`` table
mapping field names to those steps, and implement ``build``.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import ClassVar, TypeVar

from contactbook.errors import SchemaDriftError, UnknownFieldError
from contactbook.io import Prompter
from contactbook.model.contact import Contact, truncate_to_minute
from contactbook.model.notices import NoticeReporter, ValidationNotice
from contactbook.model.schema import FieldSchema, FieldSpec

logger = logging.getLogger(__name__)

B = TypeVar("B", bound="ContactBuilder")


class ContactBuilder(ABC):
    """Base class for per-kind contact builders.

    Parameters
    ----------
    prompter:
        Source of raw field input.
    reporter:
        Optional callback invoked with every ``ValidationNotice``.
    clock:
        Returns the current time; used for ``time_created`` of new
        records.  Defaults to ``datetime.now``.
    """

    schema: ClassVar[FieldSchema]
    STEPS: ClassVar[Mapping[str, Callable[..., "ContactBuilder"]]]

    def __init__(
        self,
        prompter: Prompter,
        reporter: NoticeReporter | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._prompter = prompter
        self._reporter = reporter
        self._clock = clock if clock is not None else datetime.now
        self._values: dict[str, str] = {}
        self._time_created: datetime | None = None
        self._time_updated: datetime | None = None
        self.notices: list[ValidationNotice] = []
        self.reset()

    @property
    def kind(self) -> str:
        return self.schema.kind

    @property
    def reporter(self) -> NoticeReporter | None:
        return self._reporter

    @reporter.setter
    def reporter(self, reporter: NoticeReporter | None) -> None:
        self._reporter = reporter

    # ------------------------------------------------------------------
    # Staging
    # ------------------------------------------------------------------

    def add(self: B, field_name: str) -> B:
        """Prompt for ``field_name``, validate it, and stage the result."""
        spec = self._spec(field_name)
        raw = self._prompter.ask(spec.prompt)
        return self.stage(field_name, raw)

    def stage(self: B, field_name: str, raw: str) -> B:
        """Validate ``raw`` for ``field_name`` and stage it without prompting."""
        spec = self._spec(field_name)
        value, notice = spec.clean(raw)
        self._values[spec.name] = value
        if notice is not None:
            self.notices.append(notice)
            logger.debug("Rejected %r for %s.%s: %s", raw, self.kind, spec.name, notice.code)
            if self._reporter is not None:
                self._reporter(notice)
        return self

    def run_step(self, field_name: str) -> "ContactBuilder":
        """Run the named step registered for ``field_name``.

        Raises
        ------
        SchemaDriftError
            If ``STEPS`` has no entry for a field, i.e. the builder and
            its schema are out of sync.
        """
        step = self.STEPS.get(field_name)
        if step is None:
            raise SchemaDriftError(field_name, type(self).__name__)
        return step(self)

    def value(self, field_name: str) -> str:
        """Return the currently staged value for ``field_name``."""
        return self._values[self._spec(field_name).name]

    @property
    def staged(self) -> dict[str, str]:
        """Return a copy of all staged values."""
        return dict(self._values)

    def _spec(self, field_name: str) -> FieldSpec:
        try:
            return self.schema.get(field_name)
        except UnknownFieldError:
            raise SchemaDriftError(field_name, type(self).__name__) from None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self: B) -> B:
        """Clear every slot to its default and forget loaded timestamps."""
        self._values = {spec.name: spec.default for spec in self.schema}
        self._time_created = None
        self._time_updated = None
        self.notices.clear()
        return self

    def load(self: B, contact: Contact) -> B:
        """Stage every field and both timestamps of ``contact``.

        Raises
        ------
        ValueError
            If ``contact`` is of a different kind than this builder.
        """
        if contact.kind != self.kind:
            raise ValueError(
                f"{type(self).__name__} cannot load a {contact.kind!r} contact"
            )
        self._values = {spec.name: str(spec.read(contact)) for spec in self.schema}
        self._time_created = contact.time_created
        self._time_updated = contact.time_updated
        self.notices.clear()
        return self

    def get_contact(self) -> Contact:
        """Return a new ``Contact`` built from the staged values."""
        created = self._time_created
        if created is None:
            created = truncate_to_minute(self._clock())
        updated = self._time_updated if self._time_updated is not None else created
        return self.build(dict(self._values), created, updated)

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    @classmethod
    @abstractmethod
    def build(
        cls,
        values: Mapping[str, str],
        time_created: datetime,
        time_updated: datetime,
    ) -> Contact:
        """Assemble a ``Contact`` of this kind from field values."""

    @classmethod
    def creation_steps(cls) -> tuple[str, ...]:
        """Field names in the order a new record is prompted for."""
        return cls.schema.entry_order

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, staged={self._values!r})"
