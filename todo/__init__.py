"""
todo

A small command-line todo-list manager backed by a local SQLite database.

Public surface:

    • todo.store     → open the database and execute item commands
    • todo.commands  → the four command variants (add / done / remove / list)
    • todo.cli.main  → the Typer application mounted as the `todo` executable
"""

__version__ = "0.1.0"
