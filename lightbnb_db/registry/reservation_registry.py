"""
DB-backed Reservation Registry.
"""

from __future__ import annotations

from typing import List

from ..db.connection import DBPool
from ..models import Record
from ..query import SelectQuery

_GUEST_RESERVATIONS = """
SELECT properties.*,
       reservations.id AS reservation_id,
       reservations.start_date,
       reservations.end_date,
       avg(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
"""


class DBReservationRegistry:
    """
    Database-backed registry for reservations.

    Each row is a reserved property joined with the reservation dates and
    the property's average review rating.
    """

    def __init__(self, pool: DBPool):
        self.pool = pool

    def list_for_guest(self, guest_id: int, limit: int = 10) -> List[Record]:
        """
        Reservations made by one guest, earliest start date first.

        The reservation id is exposed as ``reservation_id`` so it does not
        collide with the property's own ``id`` column.
        """
        built = (
            SelectQuery(
                _GUEST_RESERVATIONS,
                group_by="properties.id, reservations.id",
                order_by="reservations.start_date",
            )
            .where("reservations.guest_id = {}", guest_id)
            .limit(limit)
            .build(self.pool.paramstyle)
        )

        with self.pool.connection() as conn:
            return conn.fetch_all(built.sql, built.params)
