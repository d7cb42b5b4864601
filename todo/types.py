"""
todo/types.py

Centralized type definitions for the todo manager.

This module defines the TypedDicts and Protocols shared by the store, the
CLI, and the test suite. When the `item` table changes, this file should be
updated first.
"""

from typing import Any, Protocol, TypedDict


# ---------------------------------------------------------------------------
# ItemRecord
# ---------------------------------------------------------------------------
# Represents a single row of the `item` table.
#
#   • id      : assigned by SQLite on insert, never reused after deletion
#   • note    : free text describing the task
#   • is_done : False at creation; only the `done` command sets it to True
# ---------------------------------------------------------------------------
class ItemRecord(TypedDict):
    id: int
    note: str
    is_done: bool


# ---------------------------------------------------------------------------
# Echo
# ---------------------------------------------------------------------------
# The output callable used by the store when listing items.
#
# The CLI passes `typer.echo`; tests pass a capturing function so printed
# lines can be asserted on without a terminal.
# ---------------------------------------------------------------------------
class Echo(Protocol):
    def __call__(self, message: str, *args: Any, **kwargs: Any) -> Any: ...
