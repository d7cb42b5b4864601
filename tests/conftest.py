"""
Shared pytest configuration for the todo test suite.

This file centralizes reusable testing utilities so that:
    • CLI tests share one CliRunner setup
    • store tests run against an in-memory database with the real schema
    • printed output can be captured without a terminal
"""

import pytest
from typer.testing import CliRunner

from todo.store import open_database


# ============================================================================
# SHARED TEST INFRASTRUCTURE
# ============================================================================


@pytest.fixture(autouse=True)
def clear_db_env(monkeypatch):
    """Keep a TODO_DB set in the developer's shell from leaking into tests."""
    monkeypatch.delenv("TODO_DB", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def db_path(tmp_path):
    """Path to a database file that does not exist yet."""
    return tmp_path / "todo.db"


# ============================================================================
# STORE FIXTURES
# ============================================================================


@pytest.fixture
def memory_conn():
    """An in-memory database with the `item` table already created."""
    conn = open_database(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def seed_items():
    """
    Insert rows directly with SQL, bypassing the store functions.

    Usage:
        seed_items(conn, ("buy milk", False), ("walk dog", True))
    """

    def _seed(conn, *items):
        with conn:
            conn.executemany("INSERT INTO item (note, is_done) VALUES (?, ?)", items)

    return _seed


@pytest.fixture
def echo_capture():
    """
    A stand-in for typer.echo that records every printed line.

    Exposes:
        • calling it like echo(message)
        • .lines → list of printed messages, in order
    """

    class EchoCapture:
        def __init__(self):
            self.lines = []

        def __call__(self, message, *args, **kwargs):
            self.lines.append(message)

    return EchoCapture()
