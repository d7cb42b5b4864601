"""
todo/commands.py

The closed set of commands the todo manager can execute.

Each subcommand on the command line resolves to exactly one of these
variants, and `todo.store.execute` holds one branch per variant:

    • AddCommand(note)       → insert a new item
    • DoneCommand(item_id)   → mark an item as done
    • RemoveCommand(item_id) → delete an item
    • ListCommand()          → print every item
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class AddCommand:
    """Insert a new, not-yet-done item with the given note."""

    note: str


@dataclass(frozen=True)
class DoneCommand:
    """Set `is_done` on the item with the given id."""

    item_id: int


@dataclass(frozen=True)
class RemoveCommand:
    """Permanently delete the item with the given id."""

    item_id: int


@dataclass(frozen=True)
class ListCommand:
    """Print all items. Selected when no subcommand is given."""


ItemCommand = Union[AddCommand, DoneCommand, RemoveCommand, ListCommand]
