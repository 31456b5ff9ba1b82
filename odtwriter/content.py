"""The body of a text document: its automatic styles and elements."""

from __future__ import annotations

from typing import Protocol

from .model import FileInfo


class _Element(Protocol):
    def files_info(self) -> list[FileInfo]: ...

    def generate_styles(self) -> str: ...

    def generate(self) -> str: ...


_OASIS = "urn:oasis:names:tc:opendocument:xmlns:"
_OOO = "http://openoffice.org/"
_W3 = "http://www.w3.org/"

_NAMESPACES: tuple[tuple[str, str], ...] = (
    ("office", _OASIS + "office:1.0"),
    ("ooo", _OOO + "2004/office"),
    ("fo", _OASIS + "xsl-fo-compatible:1.0"),
    ("xlink", _W3 + "1999/xlink"),
    ("dc", "http://purl.org/dc/elements/1.1/"),
    ("meta", _OASIS + "meta:1.0"),
    ("style", _OASIS + "style:1.0"),
    ("text", _OASIS + "text:1.0"),
    ("rpt", _OOO + "2005/report"),
    ("draw", _OASIS + "drawing:1.0"),
    ("dr3d", _OASIS + "dr3d:1.0"),
    ("svg", _OASIS + "svg-compatible:1.0"),
    ("chart", _OASIS + "chart:1.0"),
    ("table", _OASIS + "table:1.0"),
    ("number", _OASIS + "datastyle:1.0"),
    ("ooow", _OOO + "2004/writer"),
    ("oooc", _OOO + "2004/calc"),
    ("of", _OASIS + "of:1.2"),
    ("xforms", _W3 + "2002/xforms"),
    ("tableooo", _OOO + "2009/table"),
    ("calcext", "urn:org:documentfoundation:names:experimental:calc:xmlns:calcext:1.0"),
    ("drawooo", _OOO + "2010/draw"),
    ("xhtml", _W3 + "1999/xhtml"),
    ("loext", "urn:org:documentfoundation:names:experimental:office:xmlns:loext:1.0"),
    ("field", "urn:openoffice:names:experimental:ooo-ms-interop:xmlns:field:1.0"),
    ("math", _W3 + "1998/Math/MathML"),
    ("form", _OASIS + "form:1.0"),
    ("script", _OASIS + "script:1.0"),
    ("formx", "urn:openoffice:names:experimental:ooxml-odf-interop:xmlns:form:1.0"),
    ("dom", _W3 + "2001/xml-events"),
    ("xsd", _W3 + "2001/XMLSchema"),
    ("xsi", _W3 + "2001/XMLSchema-instance"),
    ("grddl", _W3 + "2003/g/data-view#"),
    ("css3t", _W3 + "TR/css3-text/"),
    ("officeooo", _OOO + "2009/office"),
)

_DEFAULT_PARAGRAPH_STYLE = (
    '<style:style style:name="P1" style:family="paragraph">'
    '<style:text-properties fo:font-size="12pt"/>'
    "</style:style>"
)


def _root_open() -> str:
    declarations = "\n    ".join(f'xmlns:{prefix}="{uri}"' for prefix, uri in _NAMESPACES)
    return f'<office:document-content {declarations} office:version="1.4">'


class Content:
    """The ordered paragraphs and tables of a document."""

    def __init__(self) -> None:
        self.elements: list[_Element] = []

    def add(self, element: _Element) -> None:
        """Append a paragraph or table."""
        self.elements.append(element)

    def files_info(self) -> list[FileInfo]:
        """Return the extra files required by all elements, in order."""
        return [info for element in self.elements for info in element.files_info()]

    def generate(self) -> str:
        """Return the content.xml document."""
        styles = "".join(element.generate_styles() for element in self.elements)
        body = "".join(element.generate() for element in self.elements)
        return "\n".join(
            [
                '<?xml version="1.0" encoding="UTF-8"?>',
                _root_open(),
                "<office:automatic-styles>" + _DEFAULT_PARAGRAPH_STYLE + styles
                + "</office:automatic-styles>",
                "<office:body>",
                "<office:text>" + body + "</office:text>",
                "</office:body>",
                "</office:document-content>",
            ]
        )