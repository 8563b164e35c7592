"""Free-text search over contacts.

Each contact is projected to a single string by concatenating its schema
fields in schema order (see ``FieldSchema.project``).  A contact matches
when that projection contains the query as a case-insensitive literal
substring.  Queries are never interpreted as patterns, so ``"(555)"``
matches the characters ``(555)`` and nothing else.

Usage
-----
::

    from contactbook.searching import ContactSearcher

    searcher = ContactSearcher()
    hits = searcher.search(contacts, "smith")
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from contactbook.builders.registry import BuilderRegistry, builder_registry
from contactbook.io import Prompter
from contactbook.model.contact import Contact

logger = logging.getLogger(__name__)

QUERY_PROMPT = "Enter search query: "


class ContactSearcher:
    """Searches a contact collection by substring.

    Parameters
    ----------
    prompter:
        Asked for the query when ``search`` is called without one.
    registry:
        Source of the per-kind field schemas.  Defaults to the global
        ``builder_registry``.
    """

    def __init__(
        self,
        prompter: Prompter | None = None,
        registry: BuilderRegistry | None = None,
    ) -> None:
        self._prompter = prompter
        self._registry = registry if registry is not None else builder_registry

    def projection(self, contact: Contact) -> str:
        """Return the text a query is matched against for ``contact``."""
        return self._registry.schema_for(contact.kind).project(contact)

    def matches(self, contact: Contact, query: str) -> bool:
        """Return True if ``contact``'s projection contains ``query``."""
        return query.lower() in self.projection(contact).lower()

    def search(self, contacts: Iterable[Contact], query: str | None = None) -> list[Contact]:
        """Return the contacts matching ``query``, in collection order.

        Parameters
        ----------
        contacts:
            The collection to scan.
        query:
            Text to look for.  When ``None`` the prompter is asked for it.

        Raises
        ------
        ValueError
            If ``query`` is ``None`` and no prompter was configured.
        """
        if query is None:
            if self._prompter is None:
                raise ValueError("No query given and no prompter configured")
            query = self._prompter.ask(QUERY_PROMPT)
        results = [c for c in contacts if self.matches(c, query)]
        logger.debug("Search %r matched %d contact(s)", query, len(results))
        return results


def search_contacts(contacts: Iterable[Contact], query: str) -> list[Contact]:
    """Convenience function: search ``contacts`` with the default registry."""
    return ContactSearcher().search(contacts, query)
