"""Contact collection orchestration.

Exports ``ContactsDirector``.
"""
from __future__ import annotations

from contactbook.director.director import ContactsDirector

__all__ = ["ContactsDirector"]
