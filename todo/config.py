# todo/config.py

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from a .env file into the process environment
load_dotenv()

# Database file used when neither -d nor TODO_DB is given
DEFAULT_DB_FILE = "todo.db"

# Environment variable that overrides the default database file
DB_ENV_VAR = "TODO_DB"


def resolve_db_path(cli_value: Optional[Path] = None) -> Path:
    """
    Return the database path for this invocation.

    Precedence: the -d option, then the TODO_DB environment variable, then
    `todo.db` in the working directory.
    """
    if cli_value is not None:
        return Path(cli_value)

    override = os.getenv(DB_ENV_VAR)
    if override:
        return Path(override)

    return Path(DEFAULT_DB_FILE)
