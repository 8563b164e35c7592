"""CLI entry point for contactbook.

Invoked as::

    contactbook [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m contactbook.cli.main

Commands
--------
run       Start an interactive session on a contact book
list      Print every contact in a book
search    Print the contacts matching a query
count     Print the number of contacts in a book
version   Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from contactbook.config import DEFAULT_BOOK_NAME, DEFAULT_DATA_DIR, FORMATS, BookConfig
from contactbook.model.contact import Contact

console = Console()
err_console = Console(stderr=True)


def _config_or_exit(ctx: click.Context, book: str) -> BookConfig:
    """Build a ``BookConfig`` from global options, exiting on bad values."""
    try:
        return BookConfig(name=book, data_dir=ctx.obj["data_dir"], format=ctx.obj["format"])
    except ValueError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


def _load_or_exit(config: BookConfig) -> list[Contact]:
    """Load a book for a read-only command; a missing book is empty."""
    from contactbook.errors import StoreError, StoreNotFoundError

    store = config.open_store()
    try:
        return store.load()
    except StoreNotFoundError:
        err_console.print(f"[yellow]Warning:[/yellow] {config.path} doesn't exist yet")
        return []
    except StoreError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


def _contacts_table(title: str, contacts: list[Contact]) -> Table:
    from contactbook.builders import builder_registry

    table = Table(title=Text(title), show_lines=False)
    table.add_column("#", justify="right", style="bold")
    table.add_column("Kind", min_width=8)
    table.add_column("Name")
    table.add_column("Number")
    table.add_column("Details")
    table.add_column("Last edit", min_width=16)
    for record, contact in enumerate(contacts, start=1):
        schema = builder_registry.schema_for(contact.kind)
        details = ", ".join(
            f"{spec.label}: {spec.read(contact)}"
            for spec in schema
            if spec.name not in ("name", "number")
        )
        table.add_row(
            str(record),
            contact.kind,
            Text(contact.full_name),
            Text(contact.number),
            Text(details),
            contact.time_updated.isoformat(sep=" ", timespec="minutes"),
        )
    return table


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="contactbook")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="CONTACTBOOK_DATA_DIR",
    show_default=True,
    help="Directory holding contact books",
)
@click.option(
    "--format",
    "store_format",
    type=click.Choice(sorted(FORMATS), case_sensitive=False),
    default="json",
    envvar="CONTACTBOOK_FORMAT",
    show_default=True,
    help="File format of the contact book",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, store_format: str, verbose: bool) -> None:
    """Personal contact book: people and organizations, searchable and editable."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir
    ctx.obj["format"] = store_format.lower()

    from contactbook.builders import builder_registry

    builder_registry.load_entrypoints()


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from contactbook import __version__
    from contactbook.builders import builder_registry

    table = Table(show_header=False, box=None)
    table.add_row("[bold]contactbook[/bold]", f"v{__version__}")
    table.add_row("Contact kinds", ", ".join(builder_registry.kinds()))
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


@cli.command(name="run")
@click.argument("book", default=DEFAULT_BOOK_NAME)
@click.pass_context
def run_command(ctx: click.Context, book: str) -> None:
    """Start an interactive session.

    BOOK is the base name of the contact book to open (default: Contacts).
    """
    from contactbook.cli.menu import Menu
    from contactbook.director import ContactsDirector
    from contactbook.io import ConsolePrompter

    config = _config_or_exit(ctx, book)
    prompter = ConsolePrompter(console)
    director = ContactsDirector(config.open_store(), prompter, console=console)
    Menu(director, prompter, console=console).run()


# ---------------------------------------------------------------------------
# list command
# ---------------------------------------------------------------------------


@cli.command(name="list")
@click.argument("book", default=DEFAULT_BOOK_NAME)
@click.pass_context
def list_command(ctx: click.Context, book: str) -> None:
    """Print every contact in BOOK."""
    config = _config_or_exit(ctx, book)
    contacts = _load_or_exit(config)
    if not contacts:
        console.print("No contacts to show info!")
        return
    console.print(_contacts_table(f"Contacts: {config.name}", contacts))


# ---------------------------------------------------------------------------
# search command
# ---------------------------------------------------------------------------


@cli.command(name="search")
@click.argument("query")
@click.argument("book", default=DEFAULT_BOOK_NAME)
@click.pass_context
def search_command(ctx: click.Context, query: str, book: str) -> None:
    """Print the contacts of BOOK whose fields contain QUERY.

    Matching is a case-insensitive substring test over all fields.

    Examples:

    \b
        contactbook search smith
        contactbook search "(555)" Work
    """
    from contactbook.searching import ContactSearcher

    config = _config_or_exit(ctx, book)
    contacts = _load_or_exit(config)
    results = ContactSearcher().search(contacts, query)
    if not results:
        console.print("No contacts found!")
        return
    console.print(f"Found {len(results)} results:")
    console.print(_contacts_table(f"Search: {query}", results))


# ---------------------------------------------------------------------------
# count command
# ---------------------------------------------------------------------------


@cli.command(name="count")
@click.argument("book", default=DEFAULT_BOOK_NAME)
@click.pass_context
def count_command(ctx: click.Context, book: str) -> None:
    """Print the number of contacts in BOOK."""
    config = _config_or_exit(ctx, book)
    contacts = _load_or_exit(config)
    console.print(f"The Phone Book has {len(contacts)} records.")


if __name__ == "__main__":
    cli()
