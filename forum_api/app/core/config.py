"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration; in a deployment you
override them through the environment.  Tests construct their own
``Settings`` instance with explicit values instead.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Forum Questions API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the question routes are mounted.  Empty by
    # default so that the routes live at ``/questions``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Path to the SQLite database file.  If a relative path is provided,
    # it will be resolved relative to the project root by the ``db``
    # module.  ``:memory:`` is not supported because every store call
    # opens its own connection.
    database_url: str = os.getenv("DATABASE_URL", "forum.db")

    # Seconds a connection waits for a lock held by another writer.
    db_busy_timeout: float = float(os.getenv("DB_BUSY_TIMEOUT", "5"))
    # Seconds a single statement may run before it is interrupted.
    db_statement_timeout: float = float(os.getenv("DB_STATEMENT_TIMEOUT", "10"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# defaults are computed at import time, environment variables should
# be set before importing this module.
settings = Settings()
