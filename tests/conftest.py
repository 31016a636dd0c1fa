"""Shared furnidata samples."""
from __future__ import annotations

import pytest

RUG_CHUNKED = (
    '[["s","1","rug_normal","1","decoration","1","1","","Normal Rug","A rug","",0,"1",'
    '0,0,"0","0",0,"",0,"0","0","0","","",0]]'
)

CATALOG_XML = """<?xml version="1.0" encoding="UTF-8"?>
<furnidata>
  <!-- floor items -->
  <roomitemtypes>
    <furnitype id="13" classname="shelves_norja">
      <revision>61856</revision>
      <category>shelf</category>
      <xdim>1</xdim>
      <ydim>2</ydim>
      <partcolors>
        <color>#ffffff</color>
        <color>#F7EBBC</color>
      </partcolors>
      <name>Beige Bookcase</name>
      <description>For nic naks and art deco books</description>
      <adurl></adurl>
      <offerid>5</offerid>
      <buyout>1</buyout>
      <rentofferid>-1</rentofferid>
      <rentbuyout>0</rentbuyout>
      <bc>1</bc>
      <excludeddynamic>0</excludeddynamic>
      <customparams></customparams>
      <specialtype>1</specialtype>
      <canstandon>0</canstandon>
      <cansiton>0</cansiton>
      <canlayon>0</canlayon>
      <furniline>iced</furniline>
      <environment></environment>
      <rare>false</rare>
    </furnitype>
    <furnitype id="230" classname="rare_dragonlamp*4">
      <name>Blue Dragon Lamp</name>
      <rare>TRUE</rare>
    </furnitype>
  </roomitemtypes>
  <wallitemtypes>
    <furnitype id="4001" classname="poster">
      <revision>abc</revision>
      <name>Poster</name>
    </furnitype>
  </wallitemtypes>
</furnidata>
"""


@pytest.fixture
def rug_chunked() -> str:
    return RUG_CHUNKED


@pytest.fixture
def catalog_xml() -> str:
    return CATALOG_XML
