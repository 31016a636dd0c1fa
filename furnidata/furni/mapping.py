"""Field table and coercion helpers shared by the chunked and XML decoders.

FIELDS is the single source of truth for the FurniItem layout:
position in a chunked record -> (attribute name, coercion, XML tag).
Reordering or adding a field is a change to this table only.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from furnidata.furni.records import FLOOR_ITEM, WALL_ITEM, FurniItem

_INT_RE = re.compile(r"[+-]?[0-9]+")

# Signed 32-bit range of the upstream integer fields
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def to_int(value: str | None, fallback: int = 0) -> int:
    """Parse a base-10 signed 32-bit integer, returning fallback for anything else."""
    if value is None:
        return fallback
    value = value.strip()
    if not _INT_RE.fullmatch(value):
        return fallback
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        return fallback
    return number


def to_bool(value: str | None) -> bool:
    """True for "1" or "true" (any case), False otherwise."""
    if value is None:
        return False
    value = value.strip()
    return value == "1" or value.lower() == "true"


def to_str(value: str | None) -> str:
    return value if value is not None else ""


@dataclass(frozen=True, slots=True)
class FieldSpec:
    name: str                       # FurniItem attribute
    coerce: Callable[[str], object]
    tag: str | None                 # XML descendant tag, None if sourced elsewhere


FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("kind", to_str, None),            # parent container in XML
    FieldSpec("id", to_int, None),              # furnitype@id
    FieldSpec("class_id", to_str, None),        # furnitype@classname
    FieldSpec("revision", to_int, "revision"),
    FieldSpec("category", to_str, "category"),
    FieldSpec("width_tiles", to_int, "xdim"),
    FieldSpec("length_tiles", to_int, "ydim"),
    FieldSpec("part_colors", to_str, None),     # partcolors/color in XML
    FieldSpec("name", to_str, "name"),
    FieldSpec("description", to_str, "description"),
    FieldSpec("ad_url", to_str, "adurl"),
    FieldSpec("offer_id", to_int, "offerid"),
    FieldSpec("is_buyout", to_bool, "buyout"),
    FieldSpec("rent_offer_id", to_int, "rentofferid"),
    FieldSpec("rent_buyout_price", to_int, "rentbuyout"),
    FieldSpec("is_subscriber_exclusive", to_bool, "bc"),
    FieldSpec("excluded_from_dynamic_catalog", to_bool, "excludeddynamic"),
    FieldSpec("subscriber_offer_id", to_int, "bcofferid"),
    FieldSpec("custom_params", to_str, "customparams"),
    FieldSpec("special_type", to_int, "specialtype"),
    FieldSpec("can_stand_on", to_bool, "canstandon"),
    FieldSpec("can_sit_on", to_bool, "cansiton"),
    FieldSpec("can_lay_on", to_bool, "canlayon"),
    FieldSpec("furni_line", to_str, "furniline"),
    FieldSpec("environment", to_str, "environment"),
    FieldSpec("is_rare", to_bool, "rare"),
)

FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in FIELDS)

# XML parent container tag (lower-cased) -> item kind
CONTAINER_KINDS: dict[str, str] = {
    "roomitemtypes": FLOOR_ITEM,
}


def lookup_kind(container: str | None) -> str:
    """Return the item kind for a parent container tag; unknown or missing is a wall item."""
    if not container:
        return WALL_ITEM
    return CONTAINER_KINDS.get(container.lower(), WALL_ITEM)


def build_item(raw: dict[str, str]) -> FurniItem:
    """Coerce raw text values keyed by field name into a FurniItem.

    Missing keys are treated as empty text before coercion.
    """
    return FurniItem(**{f.name: f.coerce(raw.get(f.name, "")) for f in FIELDS})


def build_item_from_positions(values: list[str]) -> FurniItem:
    """Map positional chunked values onto FIELDS; short records get defaults."""
    return build_item({f.name: values[i] for i, f in enumerate(FIELDS) if i < len(values)})
