"""
SQLite database integration and simple migration system.

The ``Database`` class is the store handle shared by the services.  It
is created once by the application factory, initialised on startup
(which applies pending migrations) and closed on shutdown.  Every
store call opens its own connection through ``cursor`` or
``transaction`` and closes it when the block exits, so the handle
itself holds no connection state and can be shared between worker
threads.

Every connection:

* enables foreign key enforcement (``PRAGMA foreign_keys = ON``);
* waits at most ``busy_timeout`` seconds for a lock;
* is interrupted once it has been open for ``statement_timeout``
  seconds;
* exposes a ``casefold`` SQL function used for case-insensitive search.

Driver errors never leave this module: they are logged with their
traceback and re-raised as ``StoreError`` carrying the caller's
generic message.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .config import Settings
from .exceptions import StoreError

logger = logging.getLogger(__name__)

# Store-side clock.  Millisecond precision so that ordering by creation
# time is meaningful for rows created within the same second.
NOW_SQL = "strftime('%Y-%m-%dT%H:%M:%fZ', 'now')"

# Number of SQLite virtual machine instructions between deadline checks.
_PROGRESS_STEPS = 1000

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: questions and their answers
    (
        1,
        f"""
        CREATE TABLE IF NOT EXISTS questions (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            description TEXT NOT NULL,
            category TEXT NOT NULL,
            created_at TEXT NOT NULL DEFAULT ({NOW_SQL}),
            updated_at TEXT NOT NULL DEFAULT ({NOW_SQL})
        );

        CREATE TABLE IF NOT EXISTS answers (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            content TEXT NOT NULL,
            question_id INTEGER NOT NULL,
            created_at TEXT NOT NULL DEFAULT ({NOW_SQL}),
            updated_at TEXT NOT NULL DEFAULT ({NOW_SQL}),
            FOREIGN KEY(question_id) REFERENCES questions(id) ON DELETE CASCADE
        );
        """,
    ),
    # Migration 2: indices backing the listing order and per-question lookups
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_questions_created_at ON questions(created_at);
        CREATE INDEX IF NOT EXISTS idx_answers_question_id ON answers(question_id, created_at);
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    If ``database_url`` is an absolute path, use it directly.  Otherwise
    resolve it relative to the project root.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parents[3]
    return str((base_dir / database_url).resolve())


def _casefold(value: Optional[str]) -> Optional[str]:
    if isinstance(value, str):
        return value.casefold()
    return value


class Database:
    """Lifecycle-scoped handle to the SQLite store."""

    def __init__(
        self,
        path: str,
        busy_timeout: float = 5.0,
        statement_timeout: float = 10.0,
    ) -> None:
        self.path = path
        self.busy_timeout = busy_timeout
        self.statement_timeout = statement_timeout
        self._closed = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            resolve_database_path(settings.database_url),
            busy_timeout=settings.db_busy_timeout,
            statement_timeout=settings.db_statement_timeout,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def connect(self) -> sqlite3.Connection:
        """Open a new connection configured for one store call.

        The connection runs in autocommit mode; ``transaction`` issues
        ``BEGIN IMMEDIATE`` explicitly.  Rows are returned as
        ``sqlite3.Row`` so columns can be accessed by name.
        """
        if self._closed:
            raise sqlite3.ProgrammingError("Database handle is closed")
        conn = sqlite3.connect(
            self.path,
            timeout=self.busy_timeout,
            isolation_level=None,
        )
        conn.row_factory = sqlite3.Row
        # SQLite ships with foreign keys disabled; it is a per-connection switch.
        conn.execute("PRAGMA foreign_keys = ON")
        conn.create_function("casefold", 1, _casefold, deterministic=True)
        if self.statement_timeout and self.statement_timeout > 0:
            deadline = time.monotonic() + self.statement_timeout
            # A non-zero return value interrupts the running statement.
            conn.set_progress_handler(lambda: int(time.monotonic() > deadline), _PROGRESS_STEPS)
        return conn

    @contextmanager
    def cursor(self, failure_message: str) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor for read-only work and close the connection on exit."""
        conn = None
        try:
            conn = self.connect()
            yield conn.cursor()
        except sqlite3.Error as exc:
            logger.exception("%s (%s)", failure_message, exc)
            raise StoreError(failure_message) from exc
        finally:
            if conn is not None:
                conn.close()

    @contextmanager
    def transaction(self, failure_message: str) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor inside ``BEGIN IMMEDIATE`` ... ``COMMIT``.

        Any exception raised inside the block, including service errors
        such as ``NotFound``, rolls back every statement executed so far.
        """
        conn = None
        try:
            conn = self.connect()
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn.cursor()
            except BaseException:
                if conn.in_transaction:
                    conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")
        except sqlite3.Error as exc:
            logger.exception("%s (%s)", failure_message, exc)
            raise StoreError(failure_message) from exc
        finally:
            if conn is not None:
                conn.close()

    def init_db(self) -> None:
        """Create the database file if needed and apply pending migrations.

        If you add a new migration, append it to ``MIGRATIONS`` with an
        incremented version number.
        """
        self._closed = False
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        with self.cursor("Unable to initialise database.") as cursor:
            cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
            row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(
                        f"BEGIN;\n{sql}\nINSERT INTO migrations (version) VALUES ({version});\nCOMMIT;"
                    )
                    logger.info("Applied migration %s", version)
                    current_version = version

    def close(self) -> None:
        """Release the handle; later store calls fail with ``StoreError``."""
        self._closed = True
        logger.info("Database handle for %s closed", self.path)
