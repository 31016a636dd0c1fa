"""Export furni items as JSON."""
from __future__ import annotations

import json
from dataclasses import asdict

from furnidata.furni.records import FurniItem


def export_json(items: list[FurniItem]) -> str:
    """Export items as a JSON array string, one object per item in input order."""
    return json.dumps([asdict(item) for item in items], indent=2, ensure_ascii=False)
