"""The common styles part of a text document."""

from __future__ import annotations

_OASIS = "urn:oasis:names:tc:opendocument:xmlns:"

_NAMESPACES: tuple[tuple[str, str], ...] = (
    ("office", _OASIS + "office:1.0"),
    ("style", _OASIS + "style:1.0"),
    ("text", _OASIS + "text:1.0"),
    ("fo", _OASIS + "xsl-fo-compatible:1.0"),
)

_DEFAULT_FONT_SIZE = "12pt"
_DEFAULT_FONT_NAME = "Liberation Sans"


def _render() -> str:
    declarations = " ".join(f'xmlns:{prefix}="{uri}"' for prefix, uri in _NAMESPACES)
    standard = (
        '<style:style style:name="Standard" style:family="paragraph" style:class="text">'
        f'<style:text-properties fo:font-size="{_DEFAULT_FONT_SIZE}"'
        f' style:font-name="{_DEFAULT_FONT_NAME}"/>'
        "</style:style>"
    )
    return "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f"<office:document-styles {declarations}>",
            "<office:styles>",
            standard,
            "</office:styles>",
            "</office:document-styles>",
        ]
    )


_STYLES_XML = _render()


class Styles:
    """The fixed default paragraph style of a text document."""

    def generate(self) -> str:
        """Return the styles.xml document."""
        return _STYLES_XML