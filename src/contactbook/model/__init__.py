"""Contact data model.

Exports the ``Contact`` record and its variant payloads, the field
schemas that describe each variant, validators and sentinel values, and
the ``ValidationNotice`` type builders report.
"""
from __future__ import annotations

from contactbook.model.contact import (
    ORGANIZATION,
    PERSON,
    Contact,
    Details,
    OrganizationDetails,
    PersonDetails,
    truncate_to_minute,
)
from contactbook.model.notices import NoticeReporter, ValidationNotice
from contactbook.model.schema import (
    ORGANIZATION_SCHEMA,
    PERSON_SCHEMA,
    FieldSchema,
    FieldSpec,
)
from contactbook.model.validators import (
    NO_DATA,
    NO_NUMBER,
    PHONE_PATTERN,
    is_not_blank,
    is_valid_gender,
    is_valid_number,
    validate_gender,
    validate_number,
    validate_text,
)

__all__ = [
    # Records
    "Contact",
    "Details",
    "PersonDetails",
    "OrganizationDetails",
    "PERSON",
    "ORGANIZATION",
    "truncate_to_minute",
    # Schemas
    "FieldSchema",
    "FieldSpec",
    "PERSON_SCHEMA",
    "ORGANIZATION_SCHEMA",
    # Validation
    "NO_DATA",
    "NO_NUMBER",
    "PHONE_PATTERN",
    "is_not_blank",
    "is_valid_gender",
    "is_valid_number",
    "validate_gender",
    "validate_number",
    "validate_text",
    "ValidationNotice",
    "NoticeReporter",
]
