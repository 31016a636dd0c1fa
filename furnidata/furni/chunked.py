"""Decoder for the legacy chunked-array furnidata text.

The text holds one or more chunks of the form [[...],[...]], each inner
bracket group being one furni whose fields are positional:

    [["s","13","shelves_norja","1","","1","1","","Beige Bookcase",...],
     ["i","4001","poster","1","","","","","Poster",...]]

Fields are double-quoted strings (backslash escapes kept verbatim) or bare
scalars such as 0. Field order is mapping.FIELDS.
"""
from __future__ import annotations

import logging
import re

from furnidata.furni.mapping import build_item_from_positions
from furnidata.furni.records import FurniItem

log = logging.getLogger(__name__)

_CHUNK_RE = re.compile(r"\[\[.*?\]\]", re.DOTALL)
_RECORD_RE = re.compile(r"\[(.*?)\]")
_FIELD_RE = re.compile(r'"((?:\\.|[^"\\])*)"|([^,\s\[\]"]+)')


def split_fields(record: str) -> list[str]:
    """Split the inside of one bracketed record into positional field values."""
    fields = []
    for m in _FIELD_RE.finditer(record):
        quoted, bare = m.groups()
        fields.append(quoted if quoted is not None else bare)
    return fields


def iter_records(text: str):
    """Yield the field list of every non-empty record inside every chunk, in order."""
    for chunk in _CHUNK_RE.finditer(text):
        for rec in _RECORD_RE.finditer(chunk.group()):
            fields = split_fields(rec.group(1))
            if not fields:
                log.debug("Skipping empty record at offset %d", chunk.start() + rec.start())
                continue
            yield fields


def decode_chunked(text: str) -> list[FurniItem]:
    """Decode chunked-array text. Malformed structure yields fewer items, never an error."""
    items = [build_item_from_positions(fields) for fields in iter_records(text)]
    log.debug("Decoded %d chunked items", len(items))
    return items
