"""ContactsDirector: owns the contact collection for one session.

The director is the only component that mutates the collection.  It
drives the per-kind builders for create and edit, delegates search to
``ContactSearcher``, and writes the whole collection to its store after
every change.

User-facing messages are printed on a rich ``Console`` as plain text;
contact data is never interpreted as markup.

Usage
-----
::

    from contactbook.director import ContactsDirector
    from contactbook.io import ScriptedPrompter
    from contactbook.storage import ContactStore

    director = ContactsDirector(
        ContactStore("data/Contacts.json"),
        ScriptedPrompter(["Acme", "221B Baker St", "+1-202-555-0176"]),
    )
    director.load()
    director.create_contact("organization")
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from rich.console import Console
from rich.text import Text

from contactbook.builders.base import ContactBuilder
from contactbook.builders.registry import BuilderRegistry, builder_registry
from contactbook.errors import (
    ContactNotFoundError,
    StoreError,
    StoreNotFoundError,
    VariantNotFoundError,
)
from contactbook.io import Prompter
from contactbook.model.contact import Contact
from contactbook.model.notices import ValidationNotice
from contactbook.model.schema import FieldSchema
from contactbook.searching.searcher import ContactSearcher
from contactbook.storage.store import ContactStore

logger = logging.getLogger(__name__)


class ContactsDirector:
    """Orchestrates create, list, select, edit, remove and search.

    Parameters
    ----------
    store:
        Where the collection is loaded from and saved to.  ``None`` keeps
        the session in memory only.
    prompter:
        Source of every user answer.
    console:
        Where messages are printed.  Defaults to a new stdout console.
    registry:
        Builder registry; one builder per registered kind is created up
        front and reused for the whole session.
    clock:
        Returns the current time for new records and edits.
    """

    def __init__(
        self,
        store: ContactStore | None,
        prompter: Prompter,
        console: Console | None = None,
        registry: BuilderRegistry | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._prompter = prompter
        self._console = console if console is not None else Console()
        self._registry = registry if registry is not None else builder_registry
        self._clock = clock if clock is not None else datetime.now
        self._builders: dict[str, ContactBuilder] = self._registry.create_builders(
            prompter, reporter=self._report_notice, clock=self._clock
        )
        self._searcher = ContactSearcher(prompter, self._registry)
        self._contacts: list[Contact] = []
        self._searched: list[Contact] = []

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def contacts(self) -> tuple[Contact, ...]:
        """Snapshot of the collection in display order."""
        return tuple(self._contacts)

    @property
    def searched(self) -> tuple[Contact, ...]:
        """Results of the most recent search."""
        return tuple(self._searched)

    @property
    def kinds(self) -> list[str]:
        return list(self._builders)

    def builder_for(self, kind: str) -> ContactBuilder:
        """Return the session's builder for ``kind``.

        Raises
        ------
        VariantNotFoundError
            If no builder exists for ``kind``.
        """
        try:
            return self._builders[kind]
        except KeyError:
            raise VariantNotFoundError(kind, self.kinds) from None

    def schema_for(self, contact: Contact) -> FieldSchema:
        return self._registry.schema_for(contact.kind)

    def get_size(self) -> int:
        return len(self._contacts)

    def __len__(self) -> int:
        return len(self._contacts)

    def print_size(self) -> None:
        self._say(f"The Phone Book has {len(self._contacts)} records.")

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def choose_variant(self) -> str | None:
        """Ask which kind of contact to add; ``None`` if the answer is unknown."""
        kinds = ", ".join(self._builders)
        answer = self._prompter.ask(f"Enter the type ({kinds}): ").strip().lower()
        if answer in self._builders:
            return answer
        self._say("Wrong type, choose the correct type!", style="red")
        return None

    def create_contact(self, kind: str) -> Contact:
        """Prompt for every field of a new ``kind`` contact, store and save it."""
        builder = self.builder_for(kind)
        builder.reset()
        for field_name in builder.creation_steps():
            builder.run_step(field_name)
        contact = builder.get_contact()
        self._contacts.append(contact)
        logger.debug("Created %s contact %r", kind, contact.full_name)
        self.save()
        self._say("The record added.", style="green")
        return contact

    # ------------------------------------------------------------------
    # List and select
    # ------------------------------------------------------------------

    def list_all(self) -> bool:
        """Print the numbered collection; False if there is nothing to show."""
        if not self._contacts:
            self._say("No contacts to show info!")
            return False
        self._print_names(self._contacts)
        return True

    def indexed(self, contacts: Sequence[Contact] | None = None) -> list[tuple[int, Contact]]:
        """Return ``(record number, contact)`` pairs, numbered from 1."""
        source = self._contacts if contacts is None else contacts
        return list(enumerate(source, start=1))

    def select_record(self, contacts: Sequence[Contact] | None = None) -> int:
        """Ask for a record number until a valid one is given, then show it.

        Parameters
        ----------
        contacts:
            The list currently on screen.  Defaults to the full collection.

        Returns
        -------
        int
            The chosen 1-based record number.
        """
        source = self._contacts if contacts is None else contacts
        while True:
            answer = self._prompter.ask("Select a record: ").strip()
            try:
                record = int(answer)
            except ValueError:
                continue
            if 1 <= record <= len(source):
                break
        self.show(source[record - 1])
        return record

    def get_contact(self, record: int, searched: bool = False) -> Contact:
        """Return the contact for a 1-based record number.

        With ``searched=True`` the number refers to the last search results
        and is mapped back to the same object in the collection.

        Raises
        ------
        IndexError
            If ``record`` is out of range.
        ContactNotFoundError
            If a searched contact is no longer in the collection.
        """
        source = self._searched if searched else self._contacts
        if not 1 <= record <= len(source):
            raise IndexError(f"No record {record}; {len(source)} available")
        contact = source[record - 1]
        if searched:
            contact = self._contacts[self._index_of(contact)]
        return contact

    def show(self, contact: Contact) -> None:
        """Print every field of ``contact`` with its label."""
        for label, value in self.schema_for(contact).describe(contact):
            self._say(f"{label}: {value}")
        self._say("")

    # ------------------------------------------------------------------
    # Edit and remove
    # ------------------------------------------------------------------

    def edit_contact(self, contact: Contact) -> Contact:
        """Let the user change one field of ``contact`` and save the result.

        The contact is replaced at its original position by a new record
        whose other fields and ``time_created`` are unchanged.

        Raises
        ------
        ContactNotFoundError
            If ``contact`` is not in the collection.
        SchemaDriftError
            If the builder has no step for a field the schema lists.
        """
        index = self._index_of(contact)
        schema = self.schema_for(contact)
        field_name = self._choose_field(schema)
        builder = self.builder_for(contact.kind)
        builder.load(contact)
        builder.run_step(field_name)
        edited = builder.get_contact()
        edited.set_time_updated(self._clock())
        self._contacts[index] = edited
        self._replace_searched(contact, edited)
        logger.debug("Edited %s of %r", field_name, edited.full_name)
        self.save()
        self._say("The record updated!", style="green")
        return edited

    def remove_contact(self, contact: Contact) -> bool:
        """Remove ``contact``; a contact not in the collection is ignored."""
        for index, candidate in enumerate(self._contacts):
            if candidate is contact:
                del self._contacts[index]
                self._searched = [c for c in self._searched if c is not contact]
                self._say("The record removed!")
                self.save()
                return True
        return False

    def _choose_field(self, schema: FieldSchema) -> str:
        names = schema.names()
        prompt = f"Select a field ({', '.join(names)}): "
        while True:
            answer = self._prompter.ask(prompt).strip()
            if answer in schema:
                return answer

    def _index_of(self, contact: Contact) -> int:
        for index, candidate in enumerate(self._contacts):
            if candidate is contact:
                return index
        raise ContactNotFoundError(contact.full_name)

    def _replace_searched(self, old: Contact, new: Contact) -> None:
        self._searched = [new if c is old else c for c in self._searched]

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, query: str | None = None) -> list[Contact]:
        """Search the collection and remember the results for selection."""
        self._searched = self._searcher.search(self._contacts, query)
        if self._searched:
            self._say(f"Found {len(self._searched)} results:")
            self._print_names(self._searched)
        else:
            self._say("No contacts found!")
        return list(self._searched)

    def show_searched(self, record: int) -> bool:
        """Print searched record ``record``; False if there is no such record."""
        if not 1 <= record <= len(self._searched):
            self._say("No such record!", style="red")
            return False
        self.show(self._searched[record - 1])
        return True

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> bool:
        """Replace the collection with the stored one.

        Any failure is reported and leaves an empty collection.
        """
        self._searched = []
        if self._store is None:
            self._contacts = []
            return False
        try:
            self._contacts = self._store.load()
        except StoreNotFoundError as exc:
            self._contacts = []
            self._say(f"{exc.path} file doesn't exist", style="yellow")
            return False
        except StoreError as exc:
            self._contacts = []
            logger.warning("Could not load %s: %s", exc.path, exc)
            self._say(str(exc), style="red")
            return False
        return True

    def save(self) -> bool:
        """Write the collection; failures are reported, never raised."""
        if self._store is None:
            return False
        try:
            self._store.save(self._contacts)
        except StoreError as exc:
            logger.warning("Could not save %s: %s", exc.path, exc)
            self._say(str(exc), style="red")
            return False
        return True

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _print_names(self, contacts: Sequence[Contact]) -> None:
        for record, contact in self.indexed(contacts):
            self._say(f"{record}. {contact.full_name}")
        self._say("")

    def _report_notice(self, notice: ValidationNotice) -> None:
        self._say(notice.message, style="red")

    def _say(self, message: str, style: str = "") -> None:
        self._console.print(Text(message, style=style))
