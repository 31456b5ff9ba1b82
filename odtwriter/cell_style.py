"""Styles for individual table cells."""

from __future__ import annotations

import itertools
import threading

_name_counter = itertools.count(1)
_name_lock = threading.Lock()


def _next_name() -> str:
    with _name_lock:
        return f"TblCellS{next(_name_counter)}"


class CellStyle:
    """Background, borders, padding, alignment and wrapping of a table cell."""

    def __init__(self) -> None:
        self._name = _next_name()
        self._background_color = ""
        self._border = ""
        self._border_top = ""
        self._border_bottom = ""
        self._border_left = ""
        self._border_right = ""
        self._padding = ""
        self._padding_top = ""
        self._padding_bottom = ""
        self._padding_left = ""
        self._padding_right = ""
        self._text_align = ""
        self._vertical_align = ""
        self._wrap_option = ""
        self._rotation_angle = 0
        self._shrink_to_fit = False
        self._repeat_content = False

    @property
    def name(self) -> str:
        """The unique style name used to reference this style."""
        return self._name

    def with_background(self, color: str) -> CellStyle:
        self._background_color = color
        return self

    def with_border(self, border: str) -> CellStyle:
        """Set all borders, e.g. ``"0.5pt solid #CCCCCC"``."""
        self._border = border
        return self

    def with_individual_borders(
        self, top: str, bottom: str, left: str, right: str
    ) -> CellStyle:
        self._border_top = top
        self._border_bottom = bottom
        self._border_left = left
        self._border_right = right
        return self

    def with_padding(self, padding: str) -> CellStyle:
        self._padding = padding
        return self

    def with_individual_padding(
        self, top: str, bottom: str, left: str, right: str
    ) -> CellStyle:
        self._padding_top = top
        self._padding_bottom = bottom
        self._padding_left = left
        self._padding_right = right
        return self

    def with_alignment(self, horizontal: str, vertical: str) -> CellStyle:
        self._text_align = horizontal
        self._vertical_align = vertical
        return self

    def with_text_wrap(self, wrap_option: str) -> CellStyle:
        """Set wrapping: ``"wrap"`` or ``"no-wrap"``."""
        self._wrap_option = wrap_option
        return self

    def with_text_rotation(self, angle: int) -> CellStyle:
        self._rotation_angle = angle
        return self

    def with_shrink_to_fit(self, shrink: bool) -> CellStyle:
        self._shrink_to_fit = shrink
        return self

    def _attributes(self):
        string_attributes = (
            ("fo:background-color", self._background_color),
            ("fo:border", self._border),
            ("fo:border-top", self._border_top),
            ("fo:border-bottom", self._border_bottom),
            ("fo:border-left", self._border_left),
            ("fo:border-right", self._border_right),
            ("fo:padding", self._padding),
            ("fo:padding-top", self._padding_top),
            ("fo:padding-bottom", self._padding_bottom),
            ("fo:padding-left", self._padding_left),
            ("fo:padding-right", self._padding_right),
            ("fo:text-align", self._text_align),
            ("style:vertical-align", self._vertical_align),
            ("fo:wrap-option", self._wrap_option),
        )
        for attribute, value in string_attributes:
            if value:
                yield f' {attribute}="{value}"'
        if self._rotation_angle != 0:
            yield f' style:rotation-angle="{self._rotation_angle}"'
        if self._shrink_to_fit:
            yield ' style:shrink-to-fit="true"'
        if self._repeat_content:
            yield ' style:repeat-content="true"'

    def generate(self) -> str:
        """Return the automatic-style XML element for this cell style."""
        return (
            f'<style:style style:name="{self._name}" style:family="table-cell">'
            "<style:table-cell-properties"
            + "".join(self._attributes())
            + "/></style:style>"
        )