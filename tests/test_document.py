import base64
import io
import zipfile
import xml.etree.ElementTree as ET

from odtwriter.document import Document
from odtwriter.image import Image
from odtwriter.paragraph import Paragraph
from odtwriter.table import Table
from odtwriter.text_style import TextStyle

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(8)


def _archive(doc: Document) -> zipfile.ZipFile:
    return zipfile.ZipFile(io.BytesIO(doc.get_bytes()))


def test_mimetype_first_and_stored():
    archive = _archive(Document())
    first = archive.infolist()[0]
    assert first.filename == "mimetype"
    assert first.compress_type == zipfile.ZIP_STORED
    assert archive.read("mimetype") == b"application/vnd.oasis.opendocument.text"


def test_standard_parts_present():
    names = set(_archive(Document()).namelist())
    assert {"meta.xml", "styles.xml", "content.xml", "META_INF/manifest.xml"} <= names
    assert "settings.xml" not in names


def test_parts_are_well_formed_xml():
    doc = Document()
    doc.paragraph(Paragraph().with_text("Hello", TextStyle()))
    archive = _archive(doc)
    for name in ("meta.xml", "styles.xml", "content.xml", "META_INF/manifest.xml"):
        root = ET.fromstring(archive.read(name))
        assert root.tag.startswith("{urn:oasis:names:tc:opendocument:xmlns:")


def test_paragraph_text_in_content():
    doc = Document()
    style = TextStyle().with_bold()
    doc.paragraph(Paragraph().with_text("Hello & bye", style))
    content = _archive(doc).read("content.xml").decode("utf-8")
    assert f'<text:span text:style-name="{style.name}">Hello &amp; bye</text:span>' in content
    assert style.generate() in content


def test_table_in_content():
    doc = Document()
    table = Table(2, 2)
    table.set_value(1, 1, "Cell 1:1")
    doc.table(table)
    content = _archive(doc).read("content.xml").decode("utf-8")
    assert table.generate() in content


def test_image_stored_and_listed():
    image = Image(base64.b64encode(PNG_BYTES).decode("ascii"))
    doc = Document()
    doc.paragraph(Paragraph().with_image(image))
    archive = _archive(doc)
    path = image.file_info().path
    assert archive.read(path) == PNG_BYTES
    manifest = archive.read("META_INF/manifest.xml").decode("utf-8")
    assert f'manifest:full-path="{path}" manifest:media-type="image/png"' in manifest


def test_meta_changes_reach_archive():
    doc = Document()
    doc.meta.creator = "Someone Else"
    meta = _archive(doc).read("meta.xml").decode("utf-8")
    assert "<creator>Someone Else</creator>" in meta


def test_save_to_file(tmp_path):
    doc = Document()
    doc.paragraph(Paragraph().with_text("Saved", TextStyle()))
    target = tmp_path / "out.odt"
    doc.save_to_file(target)
    with zipfile.ZipFile(target) as archive:
        assert "Saved" in archive.read("content.xml").decode("utf-8")
        assert archive.read("mimetype") == b"application/vnd.oasis.opendocument.text"