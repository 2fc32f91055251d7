"""
SQLite backend for the LightBnB data-access layer.

Used for:
    - local development
    - tests
    - CLI tools

Implements:
    - connect()
    - helpers      (required by DBBackend abstract interface)
    - init_schema()

SQLite's LIKE is already case-insensitive for ASCII text, so it stands in
for Postgres' ILIKE.
"""

from __future__ import annotations

from pathlib import Path
import sqlite3

from . import helpers
from .backend_base import DBBackend


# ----------------------------------------------------------------------
# LightBnB schema
# ----------------------------------------------------------------------

SQL_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id        INTEGER PRIMARY KEY AUTOINCREMENT,
    name      TEXT NOT NULL,
    email     TEXT NOT NULL,
    password  TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS properties (
    id                   INTEGER PRIMARY KEY AUTOINCREMENT,
    owner_id             INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,

    title                TEXT NOT NULL,
    description          TEXT,
    thumbnail_photo_url  TEXT NOT NULL,
    cover_photo_url      TEXT NOT NULL,
    cost_per_night       INTEGER NOT NULL DEFAULT 0,
    parking_spaces       INTEGER NOT NULL DEFAULT 0,
    number_of_bathrooms  INTEGER NOT NULL DEFAULT 0,
    number_of_bedrooms   INTEGER NOT NULL DEFAULT 0,

    country              TEXT NOT NULL,
    street               TEXT NOT NULL,
    city                 TEXT NOT NULL,
    province             TEXT NOT NULL,
    post_code            TEXT NOT NULL,

    active               BOOLEAN NOT NULL DEFAULT 1
);

CREATE TABLE IF NOT EXISTS reservations (
    id           INTEGER PRIMARY KEY AUTOINCREMENT,
    start_date   DATE NOT NULL,
    end_date     DATE NOT NULL,
    property_id  INTEGER NOT NULL REFERENCES properties(id) ON DELETE CASCADE,
    guest_id     INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS property_reviews (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    guest_id        INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    property_id     INTEGER NOT NULL REFERENCES properties(id) ON DELETE CASCADE,
    reservation_id  INTEGER NOT NULL REFERENCES reservations(id) ON DELETE CASCADE,
    rating          SMALLINT NOT NULL DEFAULT 0,
    message         TEXT
);

CREATE INDEX IF NOT EXISTS idx_users_email ON users(email);
CREATE INDEX IF NOT EXISTS idx_properties_owner ON properties(owner_id);
CREATE INDEX IF NOT EXISTS idx_reservations_guest ON reservations(guest_id);
CREATE INDEX IF NOT EXISTS idx_reviews_property ON property_reviews(property_id);
"""


# ----------------------------------------------------------------------
# Backend implementation
# ----------------------------------------------------------------------

class SQLiteBackend(DBBackend):
    """
    Minimal SQLite backend.

    Parameters
    ----------
    db_path : str
        Path to the SQLite database file.
    """

    paramstyle = "qmark"
    ilike = "LIKE"

    def __init__(self, db_path: str):
        self.path = Path(db_path)
        self._helpers = helpers

    @property
    def helpers(self):
        """
        Required by DBBackend.

        Returns the module containing query helpers and row mapping.
        """
        return self._helpers

    # ------------------------------------------------------------------
    # Connection handling
    # ------------------------------------------------------------------

    def connect(self) -> sqlite3.Connection:
        """
        Open a SQLite3 connection with row_factory=dict-like access.

        Also ensures foreign keys are enforced.
        """
        conn = sqlite3.connect(str(self.path))
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    # ------------------------------------------------------------------
    # Schema initializer
    # ------------------------------------------------------------------

    def init_schema(self, conn) -> None:
        """
        Create tables and indices if they do not exist.

        Idempotent – safe to call multiple times.
        """
        cur = conn.cursor()
        cur.executescript(SQL_SCHEMA)
        conn.commit()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(db_path={str(self.path)!r})"
