"""
Unified database connection abstraction for the LightBnB data-access layer.

This file defines:
- DBConnection: a wrapper around a live database handle
- DBPool: simple pool/manager to allocate backend connections

DBPool is the "execution collaborator" the registries depend on: it takes
(query text, ordered params) and hands rows back as plain dicts.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from .backend_base import ensure_backend
from .helpers import QueryExecutionError

logger = logging.getLogger(__name__)


class DBConnection:
    """
    Thin wrapper around a raw DB-API 2.0 connection.

    Responsibilities:
        - Provide a stable API for SQL execution (fetch_all, fetch_one)
        - Normalize rows across backends (return Python dicts)
        - Leave transaction handling to the caller

    Notes:
        - No implicit autocommit unless the backend enforces it
        - Caller must commit() after mutating operations
        - Safe to close() multiple times
    """

    def __init__(self, raw_conn: Any, helpers: Any):
        self.raw = raw_conn
        self.helpers = helpers

    # ------------------------------------------------------------------
    # SQL execution wrappers
    # ------------------------------------------------------------------

    def fetch_all(self, query: str, params: Optional[Sequence[Any]] = None) -> List[dict]:
        """
        Execute a statement and return every row as a dict.
        """
        rows = self.helpers.safe_fetch_all(self.raw, query, params)
        return [self.helpers.row_to_dict(r) for r in rows]

    def fetch_one(self, query: str, params: Optional[Sequence[Any]] = None) -> Optional[dict]:
        """
        Execute a SELECT statement and return a single dict row or None.
        """
        row = self.helpers.safe_fetch_one(self.raw, query, params)
        return self.helpers.row_to_dict(row) if row else None

    # ------------------------------------------------------------------
    # Transaction and connection lifecycle
    # ------------------------------------------------------------------

    def commit(self) -> None:
        """
        Commit the current transaction.
        """
        try:
            self.raw.commit()
        except Exception as e:
            logger.error("Commit failed: %s", e)
            raise QueryExecutionError(f"Commit failed: {e}") from e

    def rollback(self) -> None:
        """
        Roll back the current transaction.
        """
        try:
            self.raw.rollback()
        except Exception:
            # Connection may already be broken; close() follows anyway.
            logger.warning("Rollback failed", exc_info=True)

    def close(self) -> None:
        """
        Close the underlying connection safely.
        """
        try:
            self.raw.close()
        except Exception:
            logger.warning("Closing DB connection failed", exc_info=True)


# ----------------------------------------------------------------------
# DB Pool
# ----------------------------------------------------------------------

class DBPool:
    """
    Simple database connection factory.

    The backend must provide:
        - connect()   -> raw DB-API connection
        - helpers     -> module with DB helper functions
        - paramstyle  -> placeholder style for rendered SQL
        - ilike       -> case-insensitive match keyword
    """

    def __init__(self, backend: Any):
        self.backend = ensure_backend(backend)

    @property
    def paramstyle(self) -> str:
        return self.backend.paramstyle

    @property
    def ilike(self) -> str:
        return self.backend.ilike

    def get(self) -> DBConnection:
        """
        Acquire a new DBConnection wrapper.
        """
        try:
            raw = self.backend.connect()
        except Exception as e:
            logger.error("Could not connect to database: %s", e)
            raise QueryExecutionError(f"Connect failed: {e}") from e
        return DBConnection(raw, self.backend.helpers)

    # ------------------------------------------------------------------
    # Context manager syntax:
    #     with db_pool.connection() as conn:
    #         ...
    # ------------------------------------------------------------------

    def connection(self):
        return _ConnectionContext(self)


class _ConnectionContext:
    """
    Internal context manager for DBConnection.
    """

    def __init__(self, pool: DBPool):
        self.pool = pool
        self.conn: Optional[DBConnection] = None

    def __enter__(self) -> DBConnection:
        self.conn = self.pool.get()
        return self.conn

    def __exit__(self, exc_type, exc, tb):
        if self.conn is None:
            return False

        # Rollback on error
        if exc_type is not None:
            self.conn.rollback()

        # Always close
        self.conn.close()

        # Propagate exceptions
        return False
