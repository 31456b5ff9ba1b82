import base64
import xml.etree.ElementTree as ET

from odtwriter.cell_style import CellStyle
from odtwriter.content import Content
from odtwriter.image import Image
from odtwriter.paragraph import Paragraph
from odtwriter.table import Table
from odtwriter.text_style import TextStyle

_PNG = base64.b64encode(b"\x89PNG\r\n\x1a\n" + b"\x00" * 16).decode()
_TEXT_NS = "urn:oasis:names:tc:opendocument:xmlns:text:1.0"
_TABLE_NS = "urn:oasis:names:tc:opendocument:xmlns:table:1.0"


def test_empty_content_is_well_formed():
    xml = Content().generate()
    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert xml.endswith("</office:document-content>")
    root = ET.fromstring(xml.encode("utf-8"))
    assert root.tag == "{urn:oasis:names:tc:opendocument:xmlns:office:1.0}document-content"


def test_empty_content_has_no_files():
    assert Content().files_info() == []


def test_elements_appear_in_order():
    content = Content()
    first = Paragraph().with_text("first", TextStyle())
    table = Table(1, 1)
    table.set_value(0, 0, "cell")
    content.add(first)
    content.add(table)
    assert content.elements == [first, table]
    xml = content.generate()
    assert xml.index(first.generate()) < xml.index(table.generate())


def test_styles_go_in_automatic_styles_section():
    content = Content()
    style = TextStyle().with_bold()
    paragraph = Paragraph().with_text("hello", style)
    content.add(paragraph)
    xml = content.generate()
    start = xml.index("<office:automatic-styles>")
    end = xml.index("</office:automatic-styles>")
    assert start < xml.index(style.generate()) < end
    assert xml.index(paragraph.generate()) > end


def test_generated_document_parses():
    content = Content()
    content.add(Paragraph().with_text("a < b", TextStyle()))
    table = Table(2, 2)
    table.set_cell_style(0, 0, CellStyle().with_border("0.5pt solid #000000"))
    table.set_value(1, 1, "x")
    content.add(table)
    root = ET.fromstring(content.generate().encode("utf-8"))
    spans = list(root.iter(f"{{{_TEXT_NS}}}span"))
    assert [span.text for span in spans] == ["a < b"]
    assert len(list(root.iter(f"{{{_TABLE_NS}}}table-cell"))) == 4


def test_files_info_collects_images():
    content = Content()
    image = Image(_PNG)
    content.add(Paragraph().with_image(image))
    content.add(Table(1, 1))
    infos = content.files_info()
    assert infos == [image.file_info()]
    assert infos[0].content_type == "image/png"


def test_document_with_image_parses():
    content = Content()
    image = Image(_PNG)
    image.caption = "caption"
    content.add(Paragraph().with_image(image))
    root = ET.fromstring(content.generate().encode("utf-8"))
    assert len(list(root.iter(f"{{{_TEXT_NS}}}p"))) == 2