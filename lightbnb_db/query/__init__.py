"""
lightbnb_db.query

SQL assembly for the data-access layer:

    - SelectQuery / render_statement: placeholder-safe statement builders
    - build_property_listing: the filtered property listing query
"""

from .builder import BuiltQuery, SelectQuery, render_statement
from .listing import build_property_listing

__all__ = [
    "BuiltQuery",
    "SelectQuery",
    "render_statement",
    "build_property_listing",
]
