"""Export furni items as CSV."""
from __future__ import annotations

import csv
import io

from furnidata.furni.mapping import FIELD_NAMES
from furnidata.furni.records import FurniItem


def _cell(value: object) -> object:
    if isinstance(value, bool):
        return 1 if value else 0
    return value


def export_csv(items: list[FurniItem]) -> str:
    """Export items as CSV string with a header row in field-table order."""
    output = io.StringIO()
    writer = csv.writer(output)

    writer.writerow(FIELD_NAMES)
    for item in items:
        writer.writerow([_cell(getattr(item, name)) for name in FIELD_NAMES])

    return output.getvalue()
