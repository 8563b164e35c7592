"""Input validators and sentinel values for contact fields.

Each check is a plain predicate ``(str) -> bool``.  The ``validate_*``
helpers wrap a predicate and substitute the matching sentinel for
rejected input, which is what the builders store.
"""
from __future__ import annotations

import re

NO_NUMBER: str = "[no number]"
NO_DATA: str = "[no data]"

GENDERS: frozenset[str] = frozenset({"M", "F"})

_GROUP = r"[0-9a-z]{2,}"
_SEP = r"[-\s]"
_LEAD = rf"(?:[0-9a-z]{_SEP})?"

# Accepted shapes, after an optional "+":
#   a single character
#   (group) [sep group]...                 parentheses on the first group
#   group [sep group]...                   no parentheses
#   group sep (group) [sep group]...       parentheses on the second group
# Each shape may start with one single-character group, e.g. "1 (202) 555".
PHONE_PATTERN: re.Pattern[str] = re.compile(
    r"\+?(?:"
    r"[0-9a-z]"
    rf"|{_LEAD}\({_GROUP}\)(?:{_SEP}{_GROUP})*"
    rf"|{_LEAD}{_GROUP}(?:{_SEP}{_GROUP})*"
    rf"|{_LEAD}{_GROUP}{_SEP}\({_GROUP}\)(?:{_SEP}{_GROUP})*"
    r")",
    re.IGNORECASE | re.ASCII,
)


def is_valid_number(number: str) -> bool:
    """Return True if ``number`` is a non-blank, well-formed phone number."""
    if not number or number.isspace():
        return False
    return PHONE_PATTERN.fullmatch(number) is not None


def is_not_blank(value: str) -> bool:
    """Return True if ``value`` has at least one non-whitespace character."""
    return bool(value) and not value.isspace()


def is_valid_gender(value: str) -> bool:
    """Return True for exactly ``"M"`` or ``"F"``."""
    return value in GENDERS


def validate_number(number: str) -> str:
    """Return ``number`` unchanged if valid, otherwise ``NO_NUMBER``."""
    return number if is_valid_number(number) else NO_NUMBER


def validate_text(value: str) -> str:
    """Return ``value`` unchanged if not blank, otherwise ``NO_DATA``."""
    return value if is_not_blank(value) else NO_DATA


def validate_gender(value: str) -> str:
    """Return ``value`` unchanged if it is a known gender, otherwise ``NO_DATA``."""
    return value if is_valid_gender(value) else NO_DATA
