"""
SQLite-backed store for todo items.

This module owns everything that touches the database:

    • opening the database file, creating it on first use
    • the `item` table schema
    • one function per item operation (insert / done / remove / list)
    • `execute`, which maps a resolved command onto exactly one operation

Every mutating operation runs as a single statement inside its own
transaction, and returns the number of rows it affected. Errors from SQLite
(`sqlite3.Error`) propagate unchanged to the caller; the CLI turns them into
a non-zero exit status.
"""

import sqlite3
from pathlib import Path
from typing import List, Optional, Union

import typer

from todo.commands import (
    AddCommand,
    DoneCommand,
    ItemCommand,
    ListCommand,
    RemoveCommand,
)
from todo.types import Echo, ItemRecord

MEMORY_DATABASE = ":memory:"

CREATE_ITEM_TABLE = """
    CREATE TABLE item (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        note TEXT NOT NULL,
        is_done BOOLEAN NOT NULL
    )
"""


class MalformedRowError(ValueError):
    """Raised when a row read from the `item` table cannot be decoded."""


# ---------------------------------------------------------------------------
# Database initialization
# ---------------------------------------------------------------------------


def create_item_table(conn: sqlite3.Connection) -> None:
    """Create the `item` table on a freshly created database."""
    with conn:
        conn.execute(CREATE_ITEM_TABLE)


def open_database(path: Union[str, Path]) -> sqlite3.Connection:
    """
    Open the database at `path`, creating it and its schema when missing.

    The open happens in two steps:

        1. Strict open in read-write mode without the create flag.
        2. If that fails *because the file does not exist*, create the file
           and the `item` table.

    Any other failure (the file exists but cannot be opened, the parent
    directory is missing, permission denied) is raised to the caller.

    Passing ":memory:" returns an in-memory database with the schema already
    created.

    Raises
    ------
    sqlite3.Error
        If the database cannot be opened or created.
    """
    if str(path) == MEMORY_DATABASE:
        conn = sqlite3.connect(MEMORY_DATABASE)
        create_item_table(conn)
        conn.row_factory = sqlite3.Row
        return conn

    path = Path(path)
    try:
        conn = sqlite3.connect(f"{path.resolve().as_uri()}?mode=rw", uri=True)
    except sqlite3.OperationalError:
        if path.exists():
            raise
        conn = sqlite3.connect(path)
        create_item_table(conn)

    conn.row_factory = sqlite3.Row
    return conn


def database_exists(path: Union[str, Path]) -> bool:
    """Return True if `path` names an on-disk database file that already exists."""
    return str(path) != MEMORY_DATABASE and Path(path).exists()


# ---------------------------------------------------------------------------
# Item operations
# ---------------------------------------------------------------------------


def insert_item(conn: sqlite3.Connection, note: str) -> int:
    """Insert a new item that is not done. Returns the number of rows inserted."""
    with conn:
        cursor = conn.execute(
            "INSERT INTO item (note, is_done) VALUES (?, ?)", (note, False)
        )
    return cursor.rowcount


def set_item_done(conn: sqlite3.Connection, item_id: int) -> int:
    """
    Mark the item with `item_id` as done.

    Returns the number of rows matched: 1 when the item exists (even if it
    was already done), 0 otherwise.
    """
    with conn:
        cursor = conn.execute(
            "UPDATE item SET is_done = ? WHERE id = ?", (True, item_id)
        )
    return cursor.rowcount


def remove_item(conn: sqlite3.Connection, item_id: int) -> int:
    """Delete the item with `item_id`. Returns 1 if it existed, 0 otherwise."""
    with conn:
        cursor = conn.execute("DELETE FROM item WHERE id = ?", (item_id,))
    return cursor.rowcount


def _row_to_item(row: sqlite3.Row) -> ItemRecord:
    """
    Decode one `item` row.

    Raises
    ------
    MalformedRowError
        If the id is not an integer, the note is not text, or is_done is not
        a 0/1 value.
    """
    item_id, note, is_done = row["id"], row["note"], row["is_done"]

    if not isinstance(item_id, int):
        raise MalformedRowError(f"Item id {item_id!r} is not an integer")
    if not isinstance(note, str):
        raise MalformedRowError(f"Item {item_id} has a non-text note: {note!r}")
    if is_done not in (0, 1):
        raise MalformedRowError(f"Item {item_id} has an invalid is_done: {is_done!r}")

    return {"id": item_id, "note": note, "is_done": bool(is_done)}


def fetch_items(conn: sqlite3.Connection) -> List[ItemRecord]:
    """Return every item, ordered by id."""
    rows = conn.execute("SELECT id, note, is_done FROM item ORDER BY id")
    return [_row_to_item(row) for row in rows]


def get_item(conn: sqlite3.Connection, item_id: int) -> Optional[ItemRecord]:
    """Return the item with `item_id`, or None if there is no such item."""
    row = conn.execute(
        "SELECT id, note, is_done FROM item WHERE id = ?", (item_id,)
    ).fetchone()
    if row is None:
        return None
    return _row_to_item(row)


def count_items(conn: sqlite3.Connection) -> int:
    """Return the number of rows in the `item` table."""
    (count,) = conn.execute("SELECT COUNT(*) FROM item").fetchone()
    return count


def format_item(item: ItemRecord) -> str:
    """
    Render an item as `"{id}: {note}"`.

    Done items have their note struck through. The styling is plain ANSI;
    `typer.echo` strips it when stdout is not a terminal.
    """
    note = item["note"]
    if item["is_done"]:
        note = typer.style(note, strikethrough=True)
    return f"{item['id']}: {note}"


def list_items(conn: sqlite3.Connection, echo: Echo = typer.echo) -> int:
    """
    Print every item, one line each, and return the number printed.

    A row that cannot be decoded aborts the listing with MalformedRowError;
    lines already printed stay printed.
    """
    printed = 0
    for row in conn.execute("SELECT id, note, is_done FROM item ORDER BY id"):
        echo(format_item(_row_to_item(row)))
        printed += 1
    return printed


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


def execute(
    conn: sqlite3.Connection, command: ItemCommand, echo: Echo = typer.echo
) -> int:
    """
    Run one command against the store.

    Returns
    -------
    int
        Rows inserted, updated, or deleted; for ListCommand, rows printed.

    Raises
    ------
    TypeError
        If `command` is not one of the known command variants.
    """
    if isinstance(command, AddCommand):
        return insert_item(conn, command.note)
    if isinstance(command, DoneCommand):
        return set_item_done(conn, command.item_id)
    if isinstance(command, RemoveCommand):
        return remove_item(conn, command.item_id)
    if isinstance(command, ListCommand):
        return list_items(conn, echo)
    raise TypeError(f"Unknown command: {command!r}")
