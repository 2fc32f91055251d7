from __future__ import annotations

import math
from dataclasses import astuple, dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple, Union

Number = Union[int, float]

# Rows come back from the driver as plain column -> value dicts.
Record = Dict[str, Any]


# ----------------------------------------------------------------------
# Value coercion
# ----------------------------------------------------------------------

def is_blank(value: Any) -> bool:
    """True for values that mean "not provided" (None or an empty string)."""
    return value is None or (isinstance(value, str) and not value.strip())


def _to_int(name: str, value: Any) -> Optional[int]:
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e


def _to_number(name: str, value: Any) -> Optional[Number]:
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        number = value
    else:
        text = str(value).strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError as e:
                raise ValueError(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(number):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return number


def _require(mapping: Mapping[str, Any], names: Tuple[str, ...], kind: str) -> None:
    missing = [n for n in names if is_blank(mapping.get(n))]
    if missing:
        raise ValueError(f"{kind} is missing required fields: {missing}")


# ----------------------------------------------------------------------
# Property listing filters
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class PropertyFilterOptions:
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[Number] = None
    maximum_price_per_night: Optional[Number] = None
    minimum_rating: Optional[Number] = None

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "PropertyFilterOptions":
        """
        Build options from loose input such as HTTP query args.

        Unknown keys are ignored and empty values count as absent.
        Numeric fields accept numeric strings.
        """
        mapping = mapping or {}
        city = mapping.get("city")
        return cls(
            city=None if is_blank(city) else str(city),
            owner_id=_to_int("owner_id", mapping.get("owner_id")),
            minimum_price_per_night=_to_number(
                "minimum_price_per_night", mapping.get("minimum_price_per_night")
            ),
            maximum_price_per_night=_to_number(
                "maximum_price_per_night", mapping.get("maximum_price_per_night")
            ),
            minimum_rating=_to_number("minimum_rating", mapping.get("minimum_rating")),
        )


# ----------------------------------------------------------------------
# Insert payloads
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class NewUser:
    name: str
    email: str
    password: str

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "NewUser":
        _require(mapping, ("name", "email", "password"), "user")
        return cls(
            name=mapping["name"],
            email=mapping["email"],
            password=mapping["password"],
        )


@dataclass(frozen=True)
class NewProperty:
    owner_id: int
    title: str
    description: Optional[str]
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    country: str
    street: str
    city: str
    province: str
    post_code: str

    _INT_FIELDS = (
        "owner_id",
        "cost_per_night",
        "parking_spaces",
        "number_of_bathrooms",
        "number_of_bedrooms",
    )

    @classmethod
    def columns(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def values(self) -> Tuple[Any, ...]:
        return astuple(self)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "NewProperty":
        required = tuple(c for c in cls.columns() if c != "description")
        _require(mapping, required, "property")

        kwargs: Dict[str, Any] = {c: mapping.get(c) for c in cls.columns()}
        for name in cls._INT_FIELDS:
            kwargs[name] = _to_int(name, kwargs[name])
        if is_blank(kwargs["description"]):
            kwargs["description"] = None
        return cls(**kwargs)
