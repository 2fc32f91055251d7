"""
DB-backed Property Registry.

Listing with optional filters, and property creation.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..db.connection import DBPool
from ..models import NewProperty, PropertyFilterOptions, Record
from ..query import build_property_listing, render_statement

logger = logging.getLogger(__name__)


class DBPropertyRegistry:
    """
    Database-backed registry for rental properties.

    Schema (canonical):
        properties(
            id, owner_id, title, description, thumbnail_photo_url,
            cover_photo_url, cost_per_night, parking_spaces,
            number_of_bathrooms, number_of_bedrooms, country, street,
            city, province, post_code, active
        )

    cost_per_night is stored in cents.
    """

    def __init__(self, pool: DBPool):
        self.pool = pool

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def list_properties(
        self,
        options: Optional[PropertyFilterOptions] = None,
        limit: int = 10,
    ) -> List[Record]:
        """
        Properties matching every given filter, cheapest first.

        Returns an empty list when nothing matches.
        """
        built = build_property_listing(
            options or PropertyFilterOptions(),
            limit,
            paramstyle=self.pool.paramstyle,
            ilike=self.pool.ilike,
        )
        logger.debug("Listing properties with %d bound params", len(built.params))

        with self.pool.connection() as conn:
            return conn.fetch_all(built.sql, built.params)

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def add_property(self, prop: NewProperty) -> Optional[Record]:
        """
        Insert a new property and return the stored row.
        """
        columns = NewProperty.columns()
        column_list = ", ".join(columns)
        slots = ", ".join(["{}"] * len(columns))
        stmt = render_statement(
            f"""
            INSERT INTO properties ({column_list})
            VALUES ({slots})
            RETURNING *
            """,
            prop.values(),
            self.pool.paramstyle,
        )

        with self.pool.connection() as conn:
            rows = conn.fetch_all(stmt.sql, stmt.params)
            conn.commit()

        return rows[0] if rows else None
