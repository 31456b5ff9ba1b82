"""Styled runs of text inside a paragraph."""

from __future__ import annotations

from .model import TEXT_ELEMENT
from .text_style import TextStyle
from .xmlutil import escape_xml


class Text:
    """A run of text drawn with one text style.

    Special characters in ``text`` are XML-escaped when the element is generated.
    """

    element_type = TEXT_ELEMENT

    def __init__(self, text: str, style: TextStyle) -> None:
        self.text = text
        self.style = style

    def generate_styles(self) -> str:
        """Return the automatic-style XML for this run's style."""
        return self.style.generate()

    def generate(self) -> str:
        """Return the span element holding the escaped text."""
        return (
            f'<text:span text:style-name="{self.style.name}">'
            f"{escape_xml(self.text)}</text:span>"
        )