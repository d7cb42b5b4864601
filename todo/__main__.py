"""Entry point for `python -m todo`."""

from todo.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="todo")
