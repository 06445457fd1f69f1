"""Read-only SQLite access to the catalog store."""

import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Optional, Sequence

from ..exceptions import DatabaseConnectionError, QueryError
from ..logging_config import get_logger

logger = get_logger('database')


class CatalogConnection:
    """Read-only connection to a catalog store.

    The store is opened with ``mode=ro``, so a missing file fails instead of
    being created. Supports the context manager protocol, closing on every
    exit path:
        with CatalogConnection('ClientDatabase.sqlite') as conn:
            rows = conn.query(SELECT_COURSES)
    """

    def __init__(self, db_path: str):
        self.db_path = Path(db_path)
        self.conn: Optional[sqlite3.Connection] = None
        self._connect()

    def _connect(self):
        """Open the store read-only."""
        uri = f"{self.db_path.resolve().as_uri()}?mode=ro"
        try:
            self.conn = sqlite3.connect(uri, uri=True)
            self.conn.row_factory = sqlite3.Row
            # sqlite opens lazily; touch the schema so unreadable files fail here
            self.conn.execute("SELECT 1 FROM sqlite_master LIMIT 1").close()
        except sqlite3.Error as e:
            if self.conn is not None:
                self.conn.close()
                self.conn = None
            logger.error(f"Failed to open catalog store: {e}")
            raise DatabaseConnectionError(str(self.db_path), reason=str(e))
        logger.debug(f"Opened catalog store: {self.db_path}")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - ensures the connection is closed."""
        self.close()
        return False

    def query(self, sql: str, params: Sequence = ()) -> list[sqlite3.Row]:
        """Run a parameterized query and return all of its rows.

        The cursor is closed before returning, so callers can issue nested
        queries while walking the result.

        Raises:
            QueryError: If the query cannot be executed or its rows fetched
        """
        try:
            with closing(self.conn.execute(sql, tuple(params))) as cursor:
                return cursor.fetchall()
        except sqlite3.Error as e:
            raise QueryError(sql, reason=str(e))

    def query_one(self, sql: str, params: Sequence = ()) -> Optional[sqlite3.Row]:
        """Run a parameterized query and return its first row, or None."""
        try:
            with closing(self.conn.execute(sql, tuple(params))) as cursor:
                return cursor.fetchone()
        except sqlite3.Error as e:
            raise QueryError(sql, reason=str(e))

    def close(self):
        """Close the connection."""
        if self.conn:
            self.conn.close()
            self.conn = None
            logger.debug("Catalog store closed")
