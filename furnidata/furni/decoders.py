"""Entry point for decoding furnidata in either wire format."""
from __future__ import annotations

import logging

from furnidata.furni.chunked import decode_chunked
from furnidata.furni.detect import CHUNKED, TREE, try_parse_tree
from furnidata.furni.records import FurniItem
from furnidata.furni.tree import decode_tree_root

log = logging.getLogger(__name__)


def decode(text: str | None) -> list[FurniItem]:
    """Decode raw furnidata text (XML or chunked) into FurniItems.

    Blank input yields an empty list. The XML trial parse decides the
    format; its root is reused so the document is only parsed once.
    """
    if text is None or not text.strip():
        return []

    root = try_parse_tree(text)
    if root is not None:
        log.debug("Detected %s furnidata (%d chars)", TREE, len(text))
        return decode_tree_root(root)

    log.debug("Detected %s furnidata (%d chars)", CHUNKED, len(text))
    return decode_chunked(text)
