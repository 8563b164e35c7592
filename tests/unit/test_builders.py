"""Unit tests for the person and organization contact builders."""
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import pytest

from contactbook.builders import OrganizationContactBuilder, PersonContactBuilder
from contactbook.errors import SchemaDriftError
from contactbook.io import ScriptedPrompter
from contactbook.model.contact import Contact
from contactbook.model.notices import ValidationNotice
from contactbook.model.validators import NO_DATA, NO_NUMBER


def _person_builder(answers: list[str], clock: Callable[[], datetime]) -> PersonContactBuilder:
    return PersonContactBuilder(ScriptedPrompter(answers), clock=clock)


class TestPersonCreation:
    def test_bad_input_replaced_by_sentinels(self, clock: Callable[[], datetime]) -> None:
        builder = _person_builder(["Ann", "Lee", "", "X", "not-a-phone"], clock)
        contact = (
            builder.add_name()
            .add_surname()
            .add_birth_date()
            .add_gender()
            .add_number()
            .get_contact()
        )
        assert contact.name == "Ann"
        assert contact.surname == "Lee"
        assert contact.birth_date == NO_DATA
        assert contact.gender == NO_DATA
        assert contact.number == NO_NUMBER
        assert [n.code for n in builder.notices] == ["CB002", "CB003", "CB001"]

    def test_time_created_from_clock(self, clock: Callable[[], datetime]) -> None:
        builder = _person_builder(["Ann"], clock)
        contact = builder.add_name().get_contact()
        assert contact.time_created == datetime(2026, 10, 19, 9, 30)
        assert contact.time_updated == contact.time_created

    def test_prompts_in_entry_order(self, clock: Callable[[], datetime]) -> None:
        prompter = ScriptedPrompter(["Ann", "Lee", "1990", "F", "12"])
        builder = PersonContactBuilder(prompter, clock=clock)
        for field_name in builder.creation_steps():
            builder.run_step(field_name)
        assert prompter.asked == [
            "Enter the name: ",
            "Enter the surname: ",
            "Enter the birth date: ",
            "Enter the gender (M, F): ",
            "Enter the number: ",
        ]

    def test_unset_fields_keep_defaults(self, clock: Callable[[], datetime]) -> None:
        contact = _person_builder(["Ann"], clock).add_name().get_contact()
        assert contact.surname == ""
        assert contact.number == NO_NUMBER

    def test_steps_chain(self, clock: Callable[[], datetime]) -> None:
        builder = _person_builder(["Ann"], clock)
        assert builder.add_name() is builder

    def test_reporter_receives_notices(self, clock: Callable[[], datetime]) -> None:
        seen: list[ValidationNotice] = []
        builder = PersonContactBuilder(
            ScriptedPrompter(["Q"]), reporter=seen.append, clock=clock
        )
        builder.add_gender()
        assert len(seen) == 1
        assert seen[0].message == "Bad gender!"

    def test_reporter_can_be_replaced(self, clock: Callable[[], datetime]) -> None:
        seen: list[ValidationNotice] = []
        builder = _person_builder(["Q"], clock)
        builder.reporter = seen.append
        builder.add_gender()
        assert builder.reporter is not None
        assert [n.code for n in seen] == ["CB003"]


class TestOrganizationCreation:
    def test_acme(self, clock: Callable[[], datetime]) -> None:
        builder = OrganizationContactBuilder(
            ScriptedPrompter(["Acme", "221B Baker St", "+1-202-555-0176"]), clock=clock
        )
        contact = builder.add_name().add_address().add_number().get_contact()
        assert contact.full_name == "Acme"
        assert contact.address == "221B Baker St"
        assert contact.number == "+1-202-555-0176"
        assert builder.notices == []

    def test_blank_address(self, clock: Callable[[], datetime]) -> None:
        builder = OrganizationContactBuilder(ScriptedPrompter(["  "]), clock=clock)
        contact = builder.add_address().get_contact()
        assert contact.address == NO_DATA
        assert builder.notices[0].code == "CB004"

    def test_prompt_wording(self, clock: Callable[[], datetime]) -> None:
        prompter = ScriptedPrompter(["Acme"])
        OrganizationContactBuilder(prompter, clock=clock).add_name()
        assert prompter.asked == ["Enter the organization name: "]


class TestReset:
    def test_reset_clears_every_field(self, clock: Callable[[], datetime]) -> None:
        builder = _person_builder(["Ann", "Lee", "1990", "M", "12"], clock)
        builder.add_name().add_surname().add_birth_date().add_gender().add_number()
        builder.reset()
        assert builder.staged == {
            "surname": "",
            "birth_date": "",
            "gender": "",
            "name": "",
            "number": NO_NUMBER,
        }

    def test_reset_clears_notices(self, clock: Callable[[], datetime]) -> None:
        builder = _person_builder(["X"], clock)
        builder.add_gender()
        assert builder.reset().notices == []

    def test_no_leak_between_records(self, clock: Callable[[], datetime]) -> None:
        builder = _person_builder(["Ann", "Lee", "Bob"], clock)
        builder.add_name().add_surname().get_contact()
        second = builder.reset().add_name().get_contact()
        assert second.surname == ""
        assert second.full_name == "Bob "

    def test_reset_forgets_loaded_timestamps(
        self, clock: Callable[[], datetime], make_person: Callable[..., Contact]
    ) -> None:
        old = make_person(created=datetime(2020, 1, 1))
        builder = _person_builder([], clock)
        contact = builder.load(old).reset().get_contact()
        assert contact.time_created == datetime(2026, 10, 19, 9, 30)


class TestLoadAndEdit:
    def test_edit_one_field(
        self, clock: Callable[[], datetime], make_person: Callable[..., Contact]
    ) -> None:
        original = make_person(created=datetime(2025, 1, 2, 3, 4))
        builder = _person_builder(["Kim"], clock)
        edited = builder.load(original).run_step("surname").get_contact()
        assert edited.surname == "Kim"
        assert edited.name == original.name
        assert edited.birth_date == original.birth_date
        assert edited.gender == original.gender
        assert edited.number == original.number
        assert edited.time_created == original.time_created

    def test_edit_with_bad_value(
        self, clock: Callable[[], datetime], make_organization: Callable[..., Contact]
    ) -> None:
        original = make_organization()
        builder = OrganizationContactBuilder(ScriptedPrompter(["not-a-phone"]), clock=clock)
        edited = builder.load(original).run_step("number").get_contact()
        assert edited.number == NO_NUMBER
        assert edited.address == original.address

    def test_load_wrong_kind(
        self, clock: Callable[[], datetime], make_organization: Callable[..., Contact]
    ) -> None:
        with pytest.raises(ValueError):
            _person_builder([], clock).load(make_organization())

    def test_value_accessor(
        self, clock: Callable[[], datetime], make_person: Callable[..., Contact]
    ) -> None:
        builder = _person_builder([], clock).load(make_person())
        assert builder.value("surname") == "Lee"


class TestSchemaDrift:
    def test_unknown_step(self, clock: Callable[[], datetime]) -> None:
        with pytest.raises(SchemaDriftError) as info:
            _person_builder([], clock).run_step("address")
        assert info.value.field_name == "address"
        assert info.value.builder_name == "PersonContactBuilder"

    def test_unknown_field_for_add(self, clock: Callable[[], datetime]) -> None:
        with pytest.raises(SchemaDriftError):
            _person_builder(["x"], clock).add("address")

    def test_every_schema_field_has_a_step(self) -> None:
        for cls in (PersonContactBuilder, OrganizationContactBuilder):
            assert set(cls.schema.names()) == set(cls.STEPS)


class TestStage:
    def test_stage_without_prompt(self, clock: Callable[[], datetime]) -> None:
        prompter = ScriptedPrompter([])
        builder = PersonContactBuilder(prompter, clock=clock)
        builder.stage("gender", "M")
        assert builder.value("gender") == "M"
        assert prompter.asked == []

    def test_exhausted_prompter_raises_eof(self, clock: Callable[[], datetime]) -> None:
        with pytest.raises(EOFError):
            _person_builder([], clock).add_name()

    def test_repr(self, clock: Callable[[], datetime]) -> None:
        assert "person" in repr(_person_builder([], clock))
