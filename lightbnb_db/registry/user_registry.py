"""
DB-backed User Registry.

Responsible for user lookups and sign-ups.
"""

from __future__ import annotations

from typing import Optional

from ..db.connection import DBPool
from ..models import NewUser, Record
from ..query import SelectQuery, render_statement

_USER_SELECT = """
SELECT users.*
FROM users
"""


class DBUserRegistry:
    """
    Database-backed registry for users.

    Schema (canonical):
        users(
            id SERIAL PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            email VARCHAR(255) NOT NULL,
            password VARCHAR(255) NOT NULL
        )

    Emails are stored and looked up lower-cased.
    """

    def __init__(self, pool: DBPool):
        self.pool = pool

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_by_email(self, email: str) -> Optional[Record]:
        query = SelectQuery(_USER_SELECT).where("email = {}", email.lower())
        return self._fetch_one(query)

    def get_by_id(self, user_id: int) -> Optional[Record]:
        query = SelectQuery(_USER_SELECT).where("id = {}", user_id)
        return self._fetch_one(query)

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def add_user(self, user: NewUser) -> Optional[Record]:
        """
        Insert a new user and return the stored row.
        """
        stmt = render_statement(
            """
            INSERT INTO users (name, email, password)
            VALUES ({}, {}, {})
            RETURNING *
            """,
            (user.name, user.email.lower(), user.password),
            self.pool.paramstyle,
        )

        with self.pool.connection() as conn:
            rows = conn.fetch_all(stmt.sql, stmt.params)
            conn.commit()

        return rows[0] if rows else None

    # ------------------------------------------------------------------
    # Internal helper
    # ------------------------------------------------------------------

    def _fetch_one(self, query: SelectQuery) -> Optional[Record]:
        built = query.build(self.pool.paramstyle)
        with self.pool.connection() as conn:
            return conn.fetch_one(built.sql, built.params)
