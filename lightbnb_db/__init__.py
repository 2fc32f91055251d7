"""
lightbnb_db

Data-access layer for the LightBnB property-rental web application.

Submodules include:
    - db/        backends, connection pool, execution helpers
    - query/     parameterized SQL builders
    - registry/  users, reservations and properties
    - core       LightBnBDB façade
"""

from .config import LightBnBDBConfig, load_config
from .core import LightBnBDB, create_lightbnb_db
from .db import QueryExecutionError
from .models import NewProperty, NewUser, PropertyFilterOptions

__all__ = [
    "LightBnBDBConfig",
    "load_config",
    "LightBnBDB",
    "create_lightbnb_db",
    "QueryExecutionError",
    "NewProperty",
    "NewUser",
    "PropertyFilterOptions",
]
