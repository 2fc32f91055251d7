"""
Property listing query.

Translates PropertyFilterOptions plus a result limit into one SELECT over
properties and their average review rating.
"""

from __future__ import annotations

from ..models import PropertyFilterOptions, is_blank
from .builder import BuiltQuery, SelectQuery

PROPERTY_LISTING_BASE = """
SELECT properties.*, avg(property_reviews.rating) AS average_rating
FROM properties
LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
"""

_LIKE_KEYWORDS = ("ILIKE", "LIKE")


def _is_set(value) -> bool:
    # Zero is "no filter" for the numeric options, like an empty form field.
    return not is_blank(value) and value != 0


def build_property_listing(
    options: PropertyFilterOptions,
    limit: int = 10,
    *,
    paramstyle: str = "dollar",
    ilike: str = "ILIKE",
) -> BuiltQuery:
    """
    Build the property listing query.

    Filters are applied in a fixed order: city, owner, minimum price and
    maximum price narrow the rows before grouping; minimum rating filters
    the aggregated average afterwards. Absent filters add nothing; a
    numeric filter of 0 is absent too.

    Prices are stored in cents and compared in whole currency units.
    Price bounds are exclusive, the rating bound is inclusive.
    """
    if ilike not in _LIKE_KEYWORDS:
        raise ValueError(f"ilike must be one of {_LIKE_KEYWORDS}, got {ilike!r}")

    query = SelectQuery(
        PROPERTY_LISTING_BASE,
        group_by="properties.id",
        order_by="cost_per_night",
    )

    if not is_blank(options.city):
        query.where(f"city {ilike} {{}}", f"%{options.city}%")
    if _is_set(options.owner_id):
        query.where("owner_id = {}", options.owner_id)
    if _is_set(options.minimum_price_per_night):
        query.where("cost_per_night / 100 > {}", options.minimum_price_per_night)
    if _is_set(options.maximum_price_per_night):
        query.where("cost_per_night / 100 < {}", options.maximum_price_per_night)

    if _is_set(options.minimum_rating):
        query.having("avg(property_reviews.rating) >= {}", options.minimum_rating)

    query.limit(limit)
    return query.build(paramstyle)
