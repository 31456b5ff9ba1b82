from xml.sax.saxutils import unescape

import pytest

from odtwriter.xmlutil import escape_xml


def test_plain_text_unchanged():
    assert escape_xml("hello world") == "hello world"


def test_empty_string():
    assert escape_xml("") == ""


def test_each_special_character():
    assert escape_xml("&") == "&amp;"
    assert escape_xml("<") == "&lt;"
    assert escape_xml(">") == "&gt;"
    assert escape_xml('"') == "&quot;"
    assert escape_xml("'") == "&apos;"


def test_ampersand_not_double_escaped():
    assert escape_xml("<a>") == "&lt;a&gt;"


@pytest.mark.parametrize(
    "text",
    ["a & b", "<tag attr=\"v\">", "it's", "&amp; already", "mixed <&>\"' text"],
)
def test_round_trip(text):
    escaped = escape_xml(text)
    restored = unescape(escaped, {"&quot;": '"', "&apos;": "'"})
    assert restored == text


@pytest.mark.parametrize("text", ["<&>\"'", "x < y & z > w"])
def test_no_raw_specials_remain(text):
    escaped = escape_xml(text)
    for char in "<>\"'":
        assert char not in escaped