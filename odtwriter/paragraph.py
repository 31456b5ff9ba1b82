"""Paragraphs made of styled text runs and pictures."""

from __future__ import annotations

from typing import Protocol

from .image import Image
from .model import FileInfo
from .text import Text
from .text_style import TextStyle


class _Element(Protocol):
    element_type: str

    def generate_styles(self) -> str: ...

    def generate(self) -> str: ...


class Paragraph:
    """A paragraph whose text runs and pictures are laid out on one line."""

    def __init__(self) -> None:
        self._elements: list[_Element] = []

    @property
    def elements(self) -> tuple[_Element, ...]:
        """The runs and pictures in the order they were added."""
        return tuple(self._elements)

    def add_text(self, text: str, style: TextStyle) -> None:
        """Append a run of text drawn with ``style``."""
        self._elements.append(Text(text, style))

    def with_text(self, text: str, style: TextStyle) -> Paragraph:
        """Append a run of text and return the paragraph for chaining."""
        self.add_text(text, style)
        return self

    def add_image(self, image: Image) -> None:
        """Append a picture."""
        self._elements.append(image)

    def with_image(self, image: Image) -> Paragraph:
        """Append a picture and return the paragraph for chaining."""
        self.add_image(image)
        return self

    def generate_styles(self) -> str:
        """Return the automatic styles used by every element."""
        return "".join(element.generate_styles() for element in self._elements)

    def files_info(self) -> list[FileInfo]:
        """Return the picture files that must be stored in the archive."""
        infos = (
            element.file_info()
            for element in self._elements
            if isinstance(element, Image)
        )
        return [info for info in infos if info.is_valid()]

    def generate(self) -> str:
        """Return the paragraph element as XML."""
        body = "".join(element.generate() for element in self._elements)
        return f'<text:p text:style-name="P1">{body}</text:p>'