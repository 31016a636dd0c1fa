"""FurniItem dataclass: one decoded furnidata catalog entry."""
from __future__ import annotations

from dataclasses import dataclass

# Placement kinds as they appear in the chunked format
FLOOR_ITEM = "s"
WALL_ITEM = "i"


@dataclass(frozen=True, slots=True)
class FurniItem:
    """A single furni definition, independent of the wire format it came from."""
    kind: str = ""                  # "s" floor item, "i" wall item
    id: int = 0
    class_id: str = ""              # classname, may carry a "*N" color variant suffix
    revision: int = 0
    category: str = ""
    width_tiles: int = 0            # xdim
    length_tiles: int = 0           # ydim
    part_colors: str = ""           # comma-joined color tokens
    name: str = ""
    description: str = ""
    ad_url: str = ""
    offer_id: int = 0
    is_buyout: bool = False
    rent_offer_id: int = 0
    rent_buyout_price: int = 0
    is_subscriber_exclusive: bool = False       # bc
    excluded_from_dynamic_catalog: bool = False  # excludeddynamic, opaque flag
    subscriber_offer_id: int = 0                # bcofferid
    custom_params: str = ""
    special_type: int = 0
    can_stand_on: bool = False
    can_sit_on: bool = False
    can_lay_on: bool = False
    furni_line: str = ""
    environment: str = ""
    is_rare: bool = False

    @property
    def is_floor_item(self) -> bool:
        return self.kind == FLOOR_ITEM

    @property
    def is_wall_item(self) -> bool:
        return self.kind == WALL_ITEM

    @property
    def file_name(self) -> str:
        """Asset name shared by all color variants (classname up to the first '*')."""
        if "*" in self.class_id:
            return self.class_id.split("*", 1)[0]
        return self.class_id

    @property
    def colors(self) -> list[str]:
        """Part colors as a list, skipping empty tokens."""
        return [c for c in self.part_colors.split(",") if c]
