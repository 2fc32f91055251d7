"""
Core façade for the LightBnB data-access layer.

LightBnBDB is the single, high-level entrypoint used by the web layer's
route handlers. It wraps:

    - DB backend + pool
    - Registry layer (users, reservations, properties)

and exposes the six data-access operations under the names the route
handlers know: get_user_with_email, get_user_with_id, add_user,
get_all_reservations, get_all_properties, add_property.

Results are plain dict records. Lookups that match nothing return None,
listings that match nothing return []. Database failures raise
QueryExecutionError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from .config import LightBnBDBConfig, load_config
from .db import DBPool, PostgresBackend, SQLiteBackend
from .models import NewProperty, NewUser, PropertyFilterOptions, Record
from .registry import DBPropertyRegistry, DBReservationRegistry, DBUserRegistry

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# LightBnBDB façade
# ---------------------------------------------------------------------------

@dataclass
class LightBnBDB:
    """
    High-level façade over the LightBnB database.

    This object is intended to be long-lived and shared:
        - one instance per process (or per service)
        - safe to hand to route handlers; every call borrows its own
          connection from the pool and returns it before returning

    Attributes
    ----------
    config:
        LightBnBDBConfig used to construct this instance.

    db_pool:
        DBPool that provides DBConnection objects on-demand.

    users, reservations, properties:
        DB-backed registries.
    """

    config: LightBnBDBConfig
    db_pool: DBPool
    users: DBUserRegistry
    reservations: DBReservationRegistry
    properties: DBPropertyRegistry

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_config(
        cls,
        config: Optional[LightBnBDBConfig] = None,
        *,
        init_schema: bool = True,
    ) -> "LightBnBDB":
        """
        Construct a LightBnBDB instance from a LightBnBDBConfig.

        This:
            - selects the DB backend (sqlite/postgres),
            - optionally bootstraps the schema,
            - wires up the registries.
        """
        cfg = config or load_config()

        if cfg.enable_logging:
            logging.basicConfig(level=logging.INFO)

        backend = _create_backend_from_config(cfg)
        logger.info("Initializing LightBnBDB with backend %r", backend)

        return cls.from_pool(DBPool(backend), config=cfg, init_schema=init_schema)

    @classmethod
    def from_pool(
        cls,
        db_pool: DBPool,
        *,
        config: Optional[LightBnBDBConfig] = None,
        init_schema: bool = False,
    ) -> "LightBnBDB":
        """
        Wire the registries around an existing pool.
        """
        if init_schema:
            with db_pool.connection() as conn:
                db_pool.backend.init_schema(conn.raw)

        return cls(
            config=config or LightBnBDBConfig(),
            db_pool=db_pool,
            users=DBUserRegistry(db_pool),
            reservations=DBReservationRegistry(db_pool),
            properties=DBPropertyRegistry(db_pool),
        )

    @classmethod
    def from_env(cls, *, init_schema: bool = True) -> "LightBnBDB":
        """Construct LightBnBDB using environment variables."""
        return cls.from_config(load_config(), init_schema=init_schema)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_user_with_email(self, email: str) -> Optional[Record]:
        """Fetch a user by email; matching ignores case."""
        return self.users.get_by_email(email)

    def get_user_with_id(self, user_id: int) -> Optional[Record]:
        """Fetch a user by id."""
        return self.users.get_by_id(user_id)

    def add_user(self, user: Union[NewUser, Mapping[str, Any]]) -> Optional[Record]:
        """Insert a user and return the stored row."""
        if not isinstance(user, NewUser):
            user = NewUser.from_mapping(user)
        return self.users.add_user(user)

    # ------------------------------------------------------------------
    # Reservations
    # ------------------------------------------------------------------

    def get_all_reservations(
        self,
        guest_id: int,
        limit: Optional[int] = None,
    ) -> List[Record]:
        """All reservations for a single guest, earliest first."""
        return self.reservations.list_for_guest(guest_id, self._limit(limit))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def get_all_properties(
        self,
        options: Union[PropertyFilterOptions, Mapping[str, Any], None] = None,
        limit: Optional[int] = None,
    ) -> List[Record]:
        """
        List properties matching the given filters, cheapest first.

        options may be a PropertyFilterOptions or a plain mapping such as
        the query args of a search form.
        """
        if not isinstance(options, PropertyFilterOptions):
            options = PropertyFilterOptions.from_mapping(options)
        return self.properties.list_properties(options, self._limit(limit))

    def add_property(
        self,
        prop: Union[NewProperty, Mapping[str, Any]],
    ) -> Optional[Record]:
        """Insert a property and return the stored row."""
        if not isinstance(prop, NewProperty):
            prop = NewProperty.from_mapping(prop)
        return self.properties.add_property(prop)

    # ------------------------------------------------------------------
    # Internal helper
    # ------------------------------------------------------------------

    def _limit(self, limit: Optional[int]) -> int:
        return self.config.default_limit if limit is None else limit


# ---------------------------------------------------------------------------
# Backend factory
# ---------------------------------------------------------------------------

def _create_backend_from_config(config: LightBnBDBConfig):
    """
    Instantiate the appropriate DB backend for a given configuration.
    """
    name = (config.db_backend or "").lower()

    if name == "sqlite":
        return SQLiteBackend(config.db_uri)

    if name in ("postgres", "postgresql", "psql"):
        return PostgresBackend(config.db_uri)

    raise ValueError(f"Unsupported LightBnB DB backend: {config.db_backend!r}")


# ---------------------------------------------------------------------------
# Convenience
# ---------------------------------------------------------------------------

def create_lightbnb_db(
    config: Optional[LightBnBDBConfig] = None,
    *,
    init_schema: bool = True,
) -> LightBnBDB:
    """
    Convenience constructor used by services / scripts.
    """
    return LightBnBDB.from_config(config, init_schema=init_schema)


__all__ = [
    "LightBnBDB",
    "create_lightbnb_db",
]
