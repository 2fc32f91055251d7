"""
LightBnB DB - Registry package.

Database-backed registry implementations:
    * DBUserRegistry
    * DBReservationRegistry
    * DBPropertyRegistry

They sit above the database backend (SQLite, Postgres) and are used by the
LightBnBDB façade. Rows are returned as plain dicts; "not found" is None
for single-row lookups and [] for listings, while execution failures raise
QueryExecutionError.
"""

from .user_registry import DBUserRegistry
from .reservation_registry import DBReservationRegistry
from .property_registry import DBPropertyRegistry

__all__ = [
    "DBUserRegistry",
    "DBReservationRegistry",
    "DBPropertyRegistry",
]
