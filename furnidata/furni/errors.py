"""Error raised when a buffer cannot be decoded as furnidata."""
from __future__ import annotations


class UndecodableDocument(ValueError):
    """The text is not decodable by either furnidata format."""
