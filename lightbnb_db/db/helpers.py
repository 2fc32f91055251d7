"""
Shared DB helper utilities.

These wrappers ensure:
    - consistent interfaces across backends
    - predictable row→dict mapping
    - a single, typed execution failure (QueryExecutionError)

Backends import this module as `.helpers`
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Errors
# ----------------------------------------------------------------------

class QueryExecutionError(RuntimeError):
    """
    Raised when the database driver fails to run a statement.

    Wraps connectivity errors, constraint violations, syntax errors and
    commit failures alike. The original driver exception is chained as
    ``__cause__``.

    Attributes
    ----------
    query:
        SQL text that was being executed (None for commit failures).
    params:
        Bind parameters handed to the driver.
    """

    def __init__(
        self,
        message: str,
        *,
        query: Optional[str] = None,
        params: Optional[Sequence[Any]] = None,
    ):
        super().__init__(message)
        self.query = query
        self.params = params


# ----------------------------------------------------------------------
# Execution helpers
# ----------------------------------------------------------------------

def safe_execute(conn: Any, query: str, params: Optional[Sequence[Any]] = None):
    """
    Execute a single SQL statement.
    Returns the raw cursor.

    Parameters
    ----------
    conn:
        DB-API compatible connection object (sqlite3, psycopg2, etc.).
    query:
        SQL string with placeholders in the backend's paramstyle.
    params:
        Optional parameter sequence, in placeholder order.

    Raises
    ------
    QueryExecutionError
        Wrapped execution error with the failing query attached.
    """
    bound = tuple(params) if params else ()
    logger.debug("Executing query with %d params: %s", len(bound), query)

    cur = conn.cursor()
    try:
        cur.execute(query, bound)
    except Exception as e:
        # Params may carry credentials; only the statement is logged.
        logger.error("DB execute failed: %s | Query: %r", e, query)
        raise QueryExecutionError(
            f"DB execute failed: {e}", query=query, params=bound
        ) from e
    return cur


def safe_fetch_all(conn: Any, query: str, params: Optional[Sequence[Any]] = None):
    """
    Execute a SELECT (or RETURNING) statement and fetch all rows.

    Returns
    -------
    list
        List of backend-specific row records (e.g., sqlite3.Row).
    """
    cur = safe_execute(conn, query, params)
    try:
        return cur.fetchall()
    except Exception as e:
        logger.error("DB fetch failed: %s | Query: %r", e, query)
        raise QueryExecutionError(
            f"DB fetch failed: {e}", query=query, params=params
        ) from e


def safe_fetch_one(conn: Any, query: str, params: Optional[Sequence[Any]] = None):
    """
    Execute a SELECT query and fetch one row.

    Returns
    -------
    Any
        Backend-specific row object or None.
    """
    cur = safe_execute(conn, query, params)
    try:
        return cur.fetchone()
    except Exception as e:
        logger.error("DB fetch failed: %s | Query: %r", e, query)
        raise QueryExecutionError(
            f"DB fetch failed: {e}", query=query, params=params
        ) from e


# ----------------------------------------------------------------------
# Row mapping
# ----------------------------------------------------------------------

def row_to_dict(row: Any) -> dict:
    """
    Convert sqlite3.Row or psycopg2 RealDictRow to a plain Python dict.

    Column values are passed through untouched.
    """
    if row is None:
        return {}

    # sqlite3.Row, psycopg2.extras.RealDictRow, etc.
    if hasattr(row, "keys"):
        return {k: row[k] for k in row.keys()}

    # Fallback: treat as a tuple-like sequence
    return dict(enumerate(row))


__all__ = [
    "QueryExecutionError",
    "safe_execute",
    "safe_fetch_all",
    "safe_fetch_one",
    "row_to_dict",
]
