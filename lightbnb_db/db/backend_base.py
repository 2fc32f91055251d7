"""
Backend base interfaces for the LightBnB data-access layer.

This module defines the minimal contracts that all database backends
(SQLite, Postgres, etc.) must satisfy.

It is intentionally light-weight:

- It does NOT depend on any specific DB driver.
- It only encodes the structural requirements assumed by:
      * lightbnb_db.db.connection.DBPool
      * lightbnb_db.db.helpers
      * the registry layer, which renders SQL for the backend's dialect

Backends must expose:

    backend.connect()    -> raw_connection
    backend.helpers      -> module with:
                              - safe_execute(conn, query, params)
                              - safe_fetch_all(conn, query, params)
                              - safe_fetch_one(conn, query, params)
                              - row_to_dict(row)
    backend.paramstyle   -> placeholder syntax ("format", "qmark", "dollar")
    backend.ilike        -> case-insensitive LIKE keyword for the dialect

    backend.init_schema(conn)  # optional

This file provides:
- DBBackend: abstract base class
- BackendLike: structural protocol
- ensure_backend: runtime validator
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Abstract Base Backend
# ---------------------------------------------------------------------------

class DBBackend(ABC):
    """
    Abstract base class for a LightBnB DB backend.

    Concrete subclasses may define any constructor signature they want
    (e.g. SQLiteBackend(db_path), PostgresBackend(dsn)).

    Required interface:

        @property
        helpers     - module providing safe_execute, row_to_dict, etc.
        paramstyle  - placeholder style understood by the driver
        ilike       - keyword used for case-insensitive substring matches
        connect()   -> raw DB-API connection
        init_schema(conn) -> None (optional; default is a no-op)
    """

    paramstyle: str = "format"
    ilike: str = "ILIKE"

    @property
    @abstractmethod
    def helpers(self) -> Any:
        """
        Return the helper module associated with this backend.

        Normally this is lightbnb_db.db.helpers, but alternative backends
        (mocks, test backends) may provide compatible modules.
        """
        raise NotImplementedError

    @abstractmethod
    def connect(self) -> Any:
        """
        Acquire and return a new raw DB-API 2.0 connection.
        """
        raise NotImplementedError

    def init_schema(self, conn: Any) -> None:
        """
        Optional schema bootstrap.

        SQLite backends populate the LightBnB tables here.
        Postgres backends leave this empty; the production schema is
        managed outside this package.

        Default: no-op.
        """
        return None


# ---------------------------------------------------------------------------
# Structural Protocol
# ---------------------------------------------------------------------------

@runtime_checkable
class BackendLike(Protocol):
    """
    Structural protocol for objects usable as a LightBnB DB backend.

    This enables DBPool and the registry layer to operate on it without
    knowing the concrete backend implementation.
    """

    helpers: Any
    paramstyle: str
    ilike: str

    def connect(self) -> Any:
        ...

    def init_schema(self, conn: Any) -> None:
        ...


# ---------------------------------------------------------------------------
# Runtime Guard
# ---------------------------------------------------------------------------

def ensure_backend(backend: Any) -> BackendLike:
    """
    Validate that an object behaves like a LightBnB DB backend.

    First, try an isinstance check against BackendLike.
    If that fails, fall back to manual attribute inspection so the
    error message names what is missing.

    Raises:
        TypeError if required attributes are missing.
    """
    if not isinstance(backend, BackendLike):
        missing = [
            attr
            for attr in ("connect", "helpers", "init_schema", "paramstyle", "ilike")
            if not hasattr(backend, attr)
        ]

        if missing:
            raise TypeError(
                f"Invalid LightBnB DB backend {backend!r}: missing attributes {missing}"
            )

    return backend  # type: ignore[return-value]


__all__ = [
    "DBBackend",
    "BackendLike",
    "ensure_backend",
]
