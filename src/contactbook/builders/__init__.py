"""Contact builders.

Importing this package registers the built-in person and organization
builders in ``builder_registry``.
"""
from __future__ import annotations

from contactbook.builders.base import ContactBuilder

# Registration order is the order kinds are offered in: person, then organization.
from contactbook.builders.person import PersonContactBuilder  # isort: skip
from contactbook.builders.organization import OrganizationContactBuilder  # isort: skip
from contactbook.builders.registry import (
    ENTRYPOINT_GROUP,
    BuilderRegistry,
    builder_registry,
)

__all__ = [
    "ContactBuilder",
    "PersonContactBuilder",
    "OrganizationContactBuilder",
    "BuilderRegistry",
    "builder_registry",
    "ENTRYPOINT_GROUP",
]
