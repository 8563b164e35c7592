"""Interactive command loop for a contact-book session.

The menu only parses actions and dispatches to ``ContactsDirector``.
Menus and their actions::

    [menu]    add, list, search, count, exit
    [search]  <number>, back, again
    [record]  edit, delete, menu

Unrecognized actions are reported and asked again.  The session ends on
``exit`` or when the prompter runs out of input.
"""
from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console
from rich.text import Text

from contactbook.director.director import ContactsDirector
from contactbook.io import Prompter
from contactbook.model.contact import Contact

logger = logging.getLogger(__name__)

MAIN_PROMPT = "[menu] Enter action (add, list, search, count, exit): "
SEARCH_PROMPT = "[search] Enter action ([number], back, again): "
RECORD_PROMPT = "[record] Enter action (edit, delete, menu): "


class Menu:
    """Main, search and record menus over one ``ContactsDirector``.

    Parameters
    ----------
    director:
        The session's director.
    prompter:
        Source of menu actions.  Usually the same prompter the director
        uses, so one input stream drives the whole session.
    console:
        Where menu messages are printed.
    """

    def __init__(
        self,
        director: ContactsDirector,
        prompter: Prompter,
        console: Console | None = None,
    ) -> None:
        self._director = director
        self._prompter = prompter
        self._console = console if console is not None else Console()
        self._actions: dict[str, Callable[[], None]] = {
            "add": self.add,
            "list": self.list_records,
            "search": self.search,
            "count": self._director.print_size,
        }

    def run(self) -> None:
        """Load the collection and process actions until ``exit``."""
        self._director.load()
        try:
            while self.step():
                pass
        except EOFError:
            logger.debug("Input exhausted; ending session")

    def step(self) -> bool:
        """Handle one main-menu action; False once the user chose ``exit``."""
        action = self._ask(MAIN_PROMPT)
        if action == "exit":
            return False
        handler = self._actions.get(action)
        if handler is None:
            self._say("Wrong input! Choose action from the list!", style="red")
        else:
            handler()
        self._say("")
        return True

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def add(self) -> None:
        kind = self._director.choose_variant()
        if kind is not None:
            self._director.create_contact(kind)

    def list_records(self) -> None:
        if not self._director.list_all():
            return
        record = self._director.select_record()
        self.record(self._director.get_contact(record))

    def search(self) -> None:
        self._director.search()
        while True:
            action = self._ask(SEARCH_PROMPT)
            if action == "back":
                return
            if action == "again":
                self._director.search()
                continue
            try:
                record = int(action)
            except ValueError:
                self._say("Wrong input!", style="red")
                continue
            if self._director.show_searched(record):
                self.record(self._director.get_contact(record, searched=True))
                return
            self._say("Wrong input!", style="red")

    def record(self, contact: Contact) -> None:
        """Run the record menu for ``contact`` until an action succeeds."""
        while True:
            action = self._ask(RECORD_PROMPT)
            if action == "edit":
                self._director.edit_contact(contact)
                return
            if action == "delete":
                self._director.remove_contact(contact)
                return
            if action == "menu":
                return
            self._say("Wrong action!", style="red")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ask(self, prompt: str) -> str:
        return self._prompter.ask(prompt).strip().lower()

    def _say(self, message: str, style: str = "") -> None:
        self._console.print(Text(message, style=style))
