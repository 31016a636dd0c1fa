"""Format detection: XML furnidata vs. the legacy chunked-array text."""
from __future__ import annotations

import re
from typing import Optional

from lxml import etree

TREE = "tree"
CHUNKED = "chunked"

# lxml refuses str input carrying an encoding declaration; the text is already decoded
_XML_DECLARATION_RE = re.compile(r"^\ufeff?\s*<\?xml\b[^>]*\?>")


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        remove_comments=True,
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
    )


def try_parse_tree(text: str) -> Optional[etree._Element]:
    """Parse text as XML, returning the root element or None if it is not well-formed."""
    if not text:
        return None
    body = _XML_DECLARATION_RE.sub("", text, count=1)
    try:
        return etree.fromstring(body, parser=_make_parser())
    except (etree.XMLSyntaxError, ValueError):
        return None


def detect(text: str) -> str:
    """Classify text as TREE or CHUNKED. Never raises."""
    return TREE if try_parse_tree(text) is not None else CHUNKED
