"""Styles for table columns."""

from __future__ import annotations

import itertools
import threading

_name_counter = itertools.count(1)
_name_lock = threading.Lock()


def _next_name() -> str:
    with _name_lock:
        return f"TblCS{next(_name_counter)}"


class ColumnStyle:
    """Width, background, border and breaks of a table column."""

    def __init__(self) -> None:
        self._name = _next_name()
        self._width = ""
        self._rel_width = ""
        self._break_before = ""
        self._break_after = ""
        self._background_color = ""
        self._border = ""
        self._optimal_width = False

    @property
    def name(self) -> str:
        """The unique style name used to reference this style."""
        return self._name

    def with_width(self, width: str) -> ColumnStyle:
        """Set the absolute width with units, e.g. ``"3.5cm"``."""
        self._width = width
        return self

    def with_relative_width(self, rel_width: str) -> ColumnStyle:
        """Set the relative width, e.g. ``"3*"``."""
        self._rel_width = rel_width
        return self

    def with_background(self, color: str) -> ColumnStyle:
        self._background_color = color
        return self

    def with_border(self, border: str) -> ColumnStyle:
        self._border = border
        return self

    def with_break_before(self, break_type: str) -> ColumnStyle:
        """Set the break before the column: ``"auto"``, ``"column"`` or ``"page"``."""
        self._break_before = break_type
        return self

    def with_optimal_width(self, optimal: bool) -> ColumnStyle:
        self._optimal_width = optimal
        return self

    def _attributes(self):
        string_attributes = (
            ("style:column-width", self._width),
            ("style:rel-column-width", self._rel_width),
            ("fo:background-color", self._background_color),
            ("fo:border", self._border),
            ("fo:break-before", self._break_before),
            ("fo:break-after", self._break_after),
        )
        for attribute, value in string_attributes:
            if value:
                yield f' {attribute}="{value}"'
        if self._optimal_width:
            yield ' style:use-optimal-column-width="true"'

    def generate(self) -> str:
        """Return the automatic-style XML element for this column style."""
        return (
            f'<style:style style:name="{self._name}" style:family="table-column">'
            "<style:table-column-properties"
            + "".join(self._attributes())
            + "/></style:style>"
        )