"""Validation notices emitted by contact builders.

A ``ValidationNotice`` is the record of one rejected input: the builder
stored a sentinel instead and carried on.  Notices are shown to the user
and kept on the builder for inspection.

Notice codes use the ``CB`` prefix followed by a three-digit number:

    CB001  Wrong number format
    CB002  Blank birth date
    CB003  Unknown gender
    CB004  Blank organization address
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class ValidationNotice:
    """A single rejected field value.

    Parameters
    ----------
    code:
        Short machine-readable identifier, e.g. ``"CB001"``.
    field:
        Name of the schema field that rejected the input.
    value:
        The raw input that was rejected.
    message:
        Human-readable message shown to the user.
    substituted:
        The sentinel stored in place of ``value``.
    """

    code: str
    field: str
    value: str
    message: str
    substituted: str

    def __str__(self) -> str:
        return f"[{self.code}] {self.field}: {self.message}"


NoticeReporter = Callable[[ValidationNotice], None]
