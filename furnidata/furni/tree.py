"""Decoder for XML furnidata (furnidata.xml).

Layout::

    <furnidata>
      <roomitemtypes>
        <furnitype id="13" classname="shelves_norja">
          <revision>61856</revision>
          <xdim>1</xdim>
          <ydim>1</ydim>
          <partcolors><color>#ffffff</color><color>#F7EBBC</color></partcolors>
          <name>Beige Bookcase</name>
          ...
        </furnitype>
      </roomitemtypes>
      <wallitemtypes>
        <furnitype id="4001" classname="poster">...</furnitype>
      </wallitemtypes>
    </furnidata>

Item kind is not stored on the element; it is inferred from the parent
container (see mapping.CONTAINER_KINDS).
"""
from __future__ import annotations

import logging

from lxml import etree

from furnidata.furni.detect import try_parse_tree
from furnidata.furni.errors import UndecodableDocument
from furnidata.furni.mapping import FIELDS, build_item, lookup_kind
from furnidata.furni.records import FurniItem

log = logging.getLogger(__name__)

# Tags match by local name; "{*}" accepts any namespace or none
FURNITYPE_TAG = "{*}furnitype"


def _text_content(el: etree._Element) -> str:
    return "".join(el.itertext())


def _descendant_text(el: etree._Element, tag: str) -> str:
    """Text of the first descendant with the given local name, or "" if there is none."""
    found = el.find(f".//{{*}}{tag}")
    if found is None:
        return ""
    return _text_content(found)


def _part_colors(el: etree._Element) -> str:
    container = el.find(".//{*}partcolors")
    if container is None:
        return ""
    return ",".join(_text_content(c) for c in container.iterfind(".//{*}color"))


def _container_tag(el: etree._Element) -> str | None:
    parent = el.getparent()
    if parent is None or not isinstance(parent.tag, str):
        return None
    return etree.QName(parent).localname


def decode_furnitype(el: etree._Element) -> FurniItem:
    """Build one FurniItem from a <furnitype> element."""
    raw = {
        "kind": lookup_kind(_container_tag(el)),
        "id": el.get("id", ""),
        "class_id": el.get("classname", ""),
        "part_colors": _part_colors(el),
    }
    for entry in FIELDS:
        if entry.tag is not None:
            raw[entry.name] = _descendant_text(el, entry.tag)
    return build_item(raw)


def decode_tree_root(root: etree._Element) -> list[FurniItem]:
    """Decode every <furnitype> under (and including) root, in document order."""
    items = [decode_furnitype(el) for el in root.iter(FURNITYPE_TAG)]
    log.debug("Decoded %d XML items", len(items))
    return items


def decode_tree(text: str) -> list[FurniItem]:
    """Parse and decode XML furnidata text.

    Raises UndecodableDocument if text is not well-formed XML.
    """
    root = try_parse_tree(text)
    if root is None:
        raise UndecodableDocument("furnidata is not well-formed XML")
    return decode_tree_root(root)
