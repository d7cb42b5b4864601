"""
Typer command-line interface for the todo manager.

The root application lives in `todo.cli.main` and is exposed as the `todo`
console script.
"""

from .main import cli

__all__ = ["cli"]
