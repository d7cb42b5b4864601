"""
Root entrypoint for the todo command-line interface.

This module defines the `todo` command and its subcommands:

    • todo add <text...>   → add a new item
    • todo done <id>       → mark an existing item as done
    • todo remove <id>     → remove an existing item
    • todo                 → list all items (no subcommand)

Each subcommand resolves its arguments into one of the command variants in
`todo.commands`, then hands it to `run_command`, which opens the database and
delegates to `todo.store.execute`.

The database file is selected with `-d/--database`, given either before the
subcommand (`todo -d work.db add ...`) or after it (`todo add ... -d work.db`).
When both are given, the one after the subcommand wins.
"""

import sqlite3
from contextlib import closing
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

import typer

from todo import __version__
from todo.commands import (
    AddCommand,
    DoneCommand,
    ItemCommand,
    ListCommand,
    RemoveCommand,
)
from todo.config import DEFAULT_DB_FILE, resolve_db_path
from todo.logging_utils import log_debug, log_verbose
from todo.store import MalformedRowError, database_exists, execute, open_database

DATABASE_HELP = (
    "Database file to read and write. If the file does not exist, it is "
    f"created. Defaults to $TODO_DB, or {DEFAULT_DB_FILE} in the working "
    "directory."
)

# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
cli = typer.Typer(add_completion=False)


@dataclass
class Settings:
    """Options given before the subcommand, shared through `ctx.obj`."""

    database: Optional[Path] = None
    verbose: bool = False
    debug: bool = False


def _database_option() -> Any:
    return typer.Option(
        None,
        "-d",
        "--database",
        dir_okay=False,
        help=DATABASE_HELP,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"todo {__version__}")
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Shared execution path
# ---------------------------------------------------------------------------
def run_command(
    ctx: typer.Context,
    command: ItemCommand,
    database: Optional[Path] = None,
) -> int:
    """
    Open the database and execute a resolved command against it.

    Parameters
    ----------
    ctx : typer.Context
        The active context; `ctx.obj` holds the root Settings.
    command : ItemCommand
        The command resolved from the command line.
    database : Path | None
        A -d value given after the subcommand. Overrides the root -d.

    Returns
    -------
    int
        The row count reported by the store.

    Any SQLite failure or undecodable row is reported as `Error: ...` on
    stderr and ends the process with exit status 1.
    """
    settings: Settings = ctx.obj or Settings()
    db_path = resolve_db_path(database if database is not None else settings.database)

    log_debug(f"Resolved command: {command!r}", settings.debug)
    log_debug(f"Resolved database: {db_path}", settings.debug)

    existed = database_exists(db_path)
    try:
        conn = open_database(db_path)
    except sqlite3.Error as e:
        typer.echo(f"Error: cannot open database {db_path}: {e}", err=True)
        raise typer.Exit(code=1)

    if existed:
        log_verbose(f"Opened database {db_path}", settings.verbose)
    else:
        log_verbose(f"Created database {db_path}", settings.verbose)

    with closing(conn):
        if settings.debug:
            conn.set_trace_callback(lambda sql: log_debug(sql, True))
        try:
            rows = execute(conn, command)
        except (sqlite3.Error, MalformedRowError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    log_verbose(f"Rows affected: {rows}", settings.verbose)

    if isinstance(command, (DoneCommand, RemoveCommand)) and rows == 0:
        typer.echo(f"No item with id {command.item_id}.", err=True)

    return rows


# ---------------------------------------------------------------------------
# Root callback: global options, and `list` when no subcommand is given
# ---------------------------------------------------------------------------
@cli.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    database: Optional[Path] = _database_option(),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show progress messages on stderr."
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Show resolved commands and SQL on stderr."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """
    A small todo-list manager backed by a local SQLite database.

    Run without a subcommand to list all items; done items are struck
    through.
    """
    ctx.obj = Settings(database=database, verbose=verbose, debug=debug)

    if ctx.invoked_subcommand is None:
        run_command(ctx, ListCommand())


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------
@cli.command("add")
def add_command(
    ctx: typer.Context,
    text: List[str] = typer.Argument(
        ..., metavar="TEXT...", help="The note text. Words are joined with spaces."
    ),
    database: Optional[Path] = _database_option(),
) -> None:
    """Add new item to todo."""
    run_command(ctx, AddCommand(note=" ".join(text)), database)


@cli.command("done")
def done_command(
    ctx: typer.Context,
    item_id: int = typer.Argument(..., metavar="ID", min=1, help="Id of the item."),
    database: Optional[Path] = _database_option(),
) -> None:
    """Set existing item to done."""
    run_command(ctx, DoneCommand(item_id=item_id), database)


@cli.command("remove")
def remove_command(
    ctx: typer.Context,
    item_id: int = typer.Argument(..., metavar="ID", min=1, help="Id of the item."),
    database: Optional[Path] = _database_option(),
) -> None:
    """Remove existing item from todo list."""
    run_command(ctx, RemoveCommand(item_id=item_id), database)


# ---------------------------------------------------------------------------
# Entry point for `python -m todo.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
