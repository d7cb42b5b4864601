"""
logging_utils.py

Logging helpers used by the todo CLI.

Two levels are supported, matching the CLI flags:

    • --verbose → short progress messages (database path, rows affected)
    • --debug   → internal objects (resolved command, SQL statements)

Both write to stderr through `typer.echo`, so the item listing on stdout is
never interleaved with diagnostics.
"""

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a high-level progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        A short, plain-English description of what the CLI is doing
        (e.g., "Opened database todo.db").

    verbose : bool
        Whether verbose mode is active. When False, this function does
        nothing.
    """
    if verbose:
        typer.echo(message, err=True)


def log_debug(message: str, debug: bool) -> None:
    """Print a `[debug]`-prefixed message when debug mode is enabled."""
    if debug:
        typer.echo(f"[debug] {message}", err=True)
