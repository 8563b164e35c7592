#!/usr/bin/env python3
"""Example: Quickstart — contactbook

Build two contacts from scripted answers, save them, load them back and
search across every field.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install contactbook
"""
from __future__ import annotations

import tempfile
from pathlib import Path

import contactbook
from contactbook.builders import OrganizationContactBuilder, PersonContactBuilder
from contactbook.io import ScriptedPrompter


def main() -> None:
    print(f"contactbook version: {contactbook.__version__}")

    # Step 1: Build contacts; invalid answers become sentinels
    person = PersonContactBuilder(ScriptedPrompter(["Mary", "Smith", "", "F", "MSmith123"]))
    for field_name in person.creation_steps():
        person.run_step(field_name)
    for notice in person.notices:
        print(f"  notice: {notice}")

    org = OrganizationContactBuilder(
        ScriptedPrompter(["Acme", "221B Baker St", "+1-202-555-0176"])
    )
    for field_name in org.creation_steps():
        org.run_step(field_name)

    contacts = [person.get_contact(), org.get_contact()]

    # Step 2: Save and reload
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "Contacts.yaml"
        contactbook.save(contacts, path)
        loaded = contactbook.load(path)
    print(f"Reloaded {len(loaded)} contacts, equal: {loaded == contacts}")

    # Step 3: Search
    for query in ("msmith", "(555)", "0176"):
        hits = contactbook.search(loaded, query)
        print(f"  {query!r}: {[c.full_name for c in hits]}")


if __name__ == "__main__":
    main()
