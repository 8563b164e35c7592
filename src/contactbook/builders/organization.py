"""Builder for organization contacts."""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from contactbook.builders.base import ContactBuilder
from contactbook.builders.registry import builder_registry
from contactbook.model.contact import ORGANIZATION, Contact, OrganizationDetails
from contactbook.model.schema import ORGANIZATION_SCHEMA


@builder_registry.register(ORGANIZATION)
class OrganizationContactBuilder(ContactBuilder):
    """Stages name, address and number of an organization."""

    schema = ORGANIZATION_SCHEMA

    def add_name(self) -> "OrganizationContactBuilder":
        return self.add("name")

    def add_address(self) -> "OrganizationContactBuilder":
        return self.add("address")

    def add_number(self) -> "OrganizationContactBuilder":
        return self.add("number")

    STEPS = {
        "address": add_address,
        "name": add_name,
        "number": add_number,
    }

    @classmethod
    def build(
        cls,
        values: Mapping[str, str],
        time_created: datetime,
        time_updated: datetime,
    ) -> Contact:
        return Contact(
            kind=ORGANIZATION,
            name=values["name"],
            number=values["number"],
            details=OrganizationDetails(address=values["address"]),
            time_created=time_created,
            time_updated=time_updated,
        )
