"""Contact persistence module.

Exports ``ContactStore`` (file-backed load/save) and
``ContactSerializer`` (JSON/YAML document conversion).
"""
from __future__ import annotations

from contactbook.storage.serializer import FORMAT_TAG, FORMAT_VERSION, ContactSerializer
from contactbook.storage.store import ContactStore

__all__ = [
    "ContactStore",
    "ContactSerializer",
    "FORMAT_TAG",
    "FORMAT_VERSION",
]
