"""Shared test fixtures for contactbook.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import io
from collections.abc import Callable
from datetime import datetime, timedelta

import pytest
from rich.console import Console

from contactbook.builders import OrganizationContactBuilder, PersonContactBuilder
from contactbook.model.contact import Contact

FIXED_NOW = datetime(2026, 10, 19, 9, 30, 42)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = FIXED_NOW) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, minutes: int) -> None:
        self.now += timedelta(minutes=minutes)


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "contactbook"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def output() -> io.StringIO:
    """Buffer that captures everything printed on ``console``."""
    return io.StringIO()


@pytest.fixture()
def console(output: io.StringIO) -> Console:
    return Console(file=output, width=120, color_system=None, highlight=False)


@pytest.fixture()
def make_person() -> Callable[..., Contact]:
    def _make(
        name: str = "Ann",
        surname: str = "Lee",
        birth_date: str = "1990-05-01",
        gender: str = "F",
        number: str = "+1 555 0100",
        created: datetime = FIXED_NOW,
    ) -> Contact:
        values = {
            "name": name,
            "surname": surname,
            "birth_date": birth_date,
            "gender": gender,
            "number": number,
        }
        return PersonContactBuilder.build(values, created, created)

    return _make


@pytest.fixture()
def make_organization() -> Callable[..., Contact]:
    def _make(
        name: str = "Acme",
        address: str = "221B Baker St",
        number: str = "+1-202-555-0176",
        created: datetime = FIXED_NOW,
    ) -> Contact:
        values = {"name": name, "address": address, "number": number}
        return OrganizationContactBuilder.build(values, created, created)

    return _make
