"""Unit tests for contactbook.searching."""
from __future__ import annotations

from collections.abc import Callable

import pytest

from contactbook.io import ScriptedPrompter
from contactbook.model.contact import Contact
from contactbook.searching import QUERY_PROMPT, ContactSearcher, search_contacts


@pytest.fixture()
def book(
    make_person: Callable[..., Contact], make_organization: Callable[..., Contact]
) -> list[Contact]:
    return [
        make_person(name="Mary", surname="Smith", number="MSmith123"),
        make_organization(name="Acme", address="Main St", number="+1 (555) 0100"),
        make_person(name="Bob", surname="Jones", number="+1-202-555-0176"),
    ]


class TestMatching:
    def test_case_insensitive(self, book: list[Contact]) -> None:
        hits = search_contacts(book, "msmith")
        assert [c.name for c in hits] == ["Mary"]

    def test_query_is_literal(self, book: list[Contact]) -> None:
        hits = search_contacts(book, "(555)")
        assert [c.name for c in hits] == ["Acme"]

    def test_regex_characters_not_interpreted(self, book: list[Contact]) -> None:
        assert search_contacts(book, ".*") == []

    def test_collection_order_kept(self, book: list[Contact]) -> None:
        hits = search_contacts(book, "555")
        assert [c.name for c in hits] == ["Acme", "Bob"]

    def test_matches_across_field_boundary(self, book: list[Contact]) -> None:
        # person projection is surname, birth date, gender, name, number
        assert search_contacts(book, "FMary") == [book[0]]

    def test_empty_query_matches_all(self, book: list[Contact]) -> None:
        assert search_contacts(book, "") == book

    def test_no_case_folding_expansion(
        self, make_organization: Callable[..., Contact]
    ) -> None:
        contacts = [make_organization(name="Straße GmbH", address="Main St", number="12")]
        assert search_contacts(contacts, "strasse") == []
        assert search_contacts(contacts, "STRASSE") == []
        assert search_contacts(contacts, "STRAßE") == contacts

    def test_no_hits(self, book: list[Contact]) -> None:
        assert search_contacts(book, "zzz") == []

    def test_timestamps_not_searched(self, book: list[Contact]) -> None:
        assert search_contacts(book, "2026") == []

    def test_hits_are_the_same_objects(self, book: list[Contact]) -> None:
        hits = search_contacts(book, "jones")
        assert hits[0] is book[2]

    def test_projection(self, book: list[Contact]) -> None:
        assert ContactSearcher().projection(book[1]) == "Main StAcme+1 (555) 0100"


class TestPrompting:
    def test_asks_for_query(self, book: list[Contact]) -> None:
        prompter = ScriptedPrompter(["acme"])
        hits = ContactSearcher(prompter).search(book)
        assert prompter.asked == [QUERY_PROMPT]
        assert [c.name for c in hits] == ["Acme"]

    def test_explicit_query_skips_prompt(self, book: list[Contact]) -> None:
        prompter = ScriptedPrompter([])
        ContactSearcher(prompter).search(book, "acme")
        assert prompter.asked == []

    def test_no_prompter_and_no_query(self, book: list[Contact]) -> None:
        with pytest.raises(ValueError):
            ContactSearcher().search(book)
