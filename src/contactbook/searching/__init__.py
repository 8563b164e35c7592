"""Contact search module.

Exports ``ContactSearcher`` and the ``search_contacts`` convenience
function.
"""
from __future__ import annotations

from contactbook.searching.searcher import QUERY_PROMPT, ContactSearcher, search_contacts

__all__ = [
    "ContactSearcher",
    "search_contacts",
    "QUERY_PROMPT",
]
