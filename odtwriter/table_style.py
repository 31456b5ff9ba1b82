"""Styles for whole tables."""

from __future__ import annotations

import itertools
import threading

_name_counter = itertools.count(1)
_name_lock = threading.Lock()


def _next_name() -> str:
    with _name_lock:
        return f"TblS{next(_name_counter)}"


class TableStyle:
    """Width, alignment, margin, background and borders of a table."""

    def __init__(self) -> None:
        self._name = _next_name()
        self._width = ""
        self._align = ""
        self._margin = ""
        self._background_color = ""
        self._border_model = ""
        self._border = ""

    @property
    def name(self) -> str:
        """The unique style name used to reference this style."""
        return self._name

    def with_width(self, width: str) -> TableStyle:
        self._width = width
        return self

    def with_align(self, align: str) -> TableStyle:
        self._align = align
        return self

    def with_margin(self, margin: str) -> TableStyle:
        self._margin = margin
        return self

    def with_background_color(self, color: str) -> TableStyle:
        self._background_color = color
        return self

    def with_border_model(self, model: str) -> TableStyle:
        """Set the border model: ``"collapsing"`` or ``"separating"``."""
        self._border_model = model
        return self

    def with_border(self, border: str) -> TableStyle:
        """Set the border, e.g. ``"0.002cm solid #000000"``."""
        self._border = border
        return self

    def _attributes(self):
        string_attributes = (
            ("style:width", self._width),
            ("table:align", self._align),
            ("fo:margin", self._margin),
            ("fo:background-color", self._background_color),
            ("table:border-model", self._border_model),
            ("fo:border", self._border),
        )
        for attribute, value in string_attributes:
            if value:
                yield f' {attribute}="{value}"'

    def generate(self) -> str:
        """Return the automatic-style XML element for this table style."""
        return (
            f'<style:style style:name="{self._name}" style:family="table">'
            "<style:table-properties"
            + "".join(self._attributes())
            + "/></style:style>"
        )