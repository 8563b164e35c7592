"""Builder for person contacts."""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from contactbook.builders.base import ContactBuilder
from contactbook.builders.registry import builder_registry
from contactbook.model.contact import PERSON, Contact, PersonDetails
from contactbook.model.schema import PERSON_SCHEMA


@builder_registry.register(PERSON)
class PersonContactBuilder(ContactBuilder):
    """Stages name, surname, birth date, gender and number of a person."""

    schema = PERSON_SCHEMA

    def add_name(self) -> "PersonContactBuilder":
        return self.add("name")

    def add_surname(self) -> "PersonContactBuilder":
        return self.add("surname")

    def add_birth_date(self) -> "PersonContactBuilder":
        return self.add("birth_date")

    def add_gender(self) -> "PersonContactBuilder":
        return self.add("gender")

    def add_number(self) -> "PersonContactBuilder":
        return self.add("number")

    STEPS = {
        "surname": add_surname,
        "birth_date": add_birth_date,
        "gender": add_gender,
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
            kind=PERSON,
            name=values["name"],
            number=values["number"],
            details=PersonDetails(
                surname=values["surname"],
                birth_date=values["birth_date"],
                gender=values["gender"],
            ),
            time_created=time_created,
            time_updated=time_updated,
        )
