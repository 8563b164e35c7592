"""Scripted sessions through contactbook.cli.menu.Menu."""
from __future__ import annotations

import io
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest
from rich.console import Console

from contactbook.cli.menu import MAIN_PROMPT, RECORD_PROMPT, SEARCH_PROMPT, Menu
from contactbook.director import ContactsDirector
from contactbook.io import ScriptedPrompter
from contactbook.model.contact import Contact
from contactbook.storage import ContactStore


@pytest.fixture()
def store(
    tmp_path: Path,
    make_person: Callable[..., Contact],
    make_organization: Callable[..., Contact],
) -> ContactStore:
    store = ContactStore(tmp_path / "Contacts.json")
    store.save([make_person(), make_organization()])
    return store


def _session(
    answers: list[str],
    store: ContactStore,
    console: Console,
    clock: Callable[[], datetime],
) -> tuple[Menu, ContactsDirector, ScriptedPrompter]:
    prompter = ScriptedPrompter(answers)
    director = ContactsDirector(store, prompter, console=console, clock=clock)
    return Menu(director, prompter, console=console), director, prompter


class TestMainMenu:
    def test_exit(self, store: ContactStore, console: Console, clock: Callable[[], datetime]) -> None:
        menu, director, prompter = _session(["exit"], store, console, clock)
        menu.run()
        assert director.get_size() == 2
        assert prompter.asked == [MAIN_PROMPT]

    def test_count(
        self,
        store: ContactStore,
        console: Console,
        clock: Callable[[], datetime],
        output: io.StringIO,
    ) -> None:
        menu, _, _ = _session(["count", "exit"], store, console, clock)
        menu.run()
        assert "The Phone Book has 2 records." in output.getvalue()

    def test_unknown_action(
        self,
        store: ContactStore,
        console: Console,
        clock: Callable[[], datetime],
        output: io.StringIO,
    ) -> None:
        menu, _, prompter = _session(["dance", "EXIT"], store, console, clock)
        menu.run()
        assert "Wrong input! Choose action from the list!" in output.getvalue()
        assert prompter.asked == [MAIN_PROMPT, MAIN_PROMPT]

    def test_input_exhausted_ends_session(
        self, store: ContactStore, console: Console, clock: Callable[[], datetime]
    ) -> None:
        menu, _, prompter = _session(["count"], store, console, clock)
        menu.run()
        assert prompter.remaining == 0

    def test_add(
        self, store: ContactStore, console: Console, clock: Callable[[], datetime]
    ) -> None:
        answers = ["add", "organization", "Globex", "1 Main St", "12", "exit"]
        menu, director, _ = _session(answers, store, console, clock)
        menu.run()
        assert [c.name for c in store.load()] == ["Ann", "Acme", "Globex"]
        assert director.get_size() == 3

    def test_add_wrong_type(
        self,
        store: ContactStore,
        console: Console,
        clock: Callable[[], datetime],
        output: io.StringIO,
    ) -> None:
        menu, director, _ = _session(["add", "robot", "exit"], store, console, clock)
        menu.run()
        assert "Wrong type, choose the correct type!" in output.getvalue()
        assert director.get_size() == 2


class TestRecordMenu:
    def test_list_then_delete(
        self, store: ContactStore, console: Console, clock: Callable[[], datetime]
    ) -> None:
        menu, _, prompter = _session(["list", "1", "delete", "exit"], store, console, clock)
        menu.run()
        assert [c.name for c in store.load()] == ["Acme"]
        assert RECORD_PROMPT in prompter.asked

    def test_list_then_edit(
        self, store: ContactStore, console: Console, clock: Callable[[], datetime]
    ) -> None:
        answers = ["list", "2", "rename", "edit", "number", "+44 20 7946 0958", "exit"]
        menu, _, _ = _session(answers, store, console, clock)
        menu.run()
        assert store.load()[1].number == "+44 20 7946 0958"

    def test_wrong_record_action(
        self,
        store: ContactStore,
        console: Console,
        clock: Callable[[], datetime],
        output: io.StringIO,
    ) -> None:
        menu, _, _ = _session(["list", "1", "fly", "menu", "exit"], store, console, clock)
        menu.run()
        assert "Wrong action!" in output.getvalue()

    def test_list_empty_book(
        self,
        tmp_path: Path,
        console: Console,
        clock: Callable[[], datetime],
        output: io.StringIO,
    ) -> None:
        menu, _, prompter = _session(
            ["list", "exit"], ContactStore(tmp_path / "empty.json"), console, clock
        )
        menu.run()
        assert "No contacts to show info!" in output.getvalue()
        assert "Select a record: " not in prompter.asked


class TestSearchMenu:
    def test_search_select_delete(
        self, store: ContactStore, console: Console, clock: Callable[[], datetime]
    ) -> None:
        answers = ["search", "acme", "1", "delete", "exit"]
        menu, _, _ = _session(answers, store, console, clock)
        menu.run()
        assert [c.name for c in store.load()] == ["Ann"]

    def test_search_back(
        self, store: ContactStore, console: Console, clock: Callable[[], datetime]
    ) -> None:
        menu, director, prompter = _session(["search", "zzz", "back", "exit"], store, console, clock)
        menu.run()
        assert director.searched == ()
        assert prompter.asked.count(SEARCH_PROMPT) == 1

    def test_search_again(
        self, store: ContactStore, console: Console, clock: Callable[[], datetime]
    ) -> None:
        answers = ["search", "zzz", "again", "ann", "back", "exit"]
        menu, director, _ = _session(answers, store, console, clock)
        menu.run()
        assert [c.name for c in director.searched] == ["Ann"]

    def test_bad_search_action(
        self,
        store: ContactStore,
        console: Console,
        clock: Callable[[], datetime],
        output: io.StringIO,
    ) -> None:
        answers = ["search", "acme", "5", "what", "back", "exit"]
        menu, _, _ = _session(answers, store, console, clock)
        menu.run()
        text = output.getvalue()
        assert "No such record!" in text
        assert "Wrong input!" in text

    @pytest.mark.parametrize("action", ["²", "1.0", "-", "①"])
    def test_non_integer_digits_reprompt(
        self,
        store: ContactStore,
        console: Console,
        clock: Callable[[], datetime],
        output: io.StringIO,
        action: str,
    ) -> None:
        answers = ["search", "acme", action, "1", "menu", "count", "exit"]
        menu, director, prompter = _session(answers, store, console, clock)
        menu.run()
        assert prompter.asked.count(SEARCH_PROMPT) == 2
        assert "Wrong input!" in output.getvalue()
        assert "The Phone Book has 2 records." in output.getvalue()
        assert director.get_size() == 2
