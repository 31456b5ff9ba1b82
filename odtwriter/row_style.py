"""Styles for table rows."""

from __future__ import annotations

import itertools
import threading

_name_counter = itertools.count(1)
_name_lock = threading.Lock()


def _next_name() -> str:
    with _name_lock:
        return f"TblRS{next(_name_counter)}"


class RowStyle:
    """Height, background, breaks and keeping behaviour of a table row."""

    def __init__(self) -> None:
        self._name = _next_name()
        self._height = ""
        self._min_height = ""
        self._background_color = ""
        self._break_before = ""
        self._break_after = ""
        self._keep_together = False
        self._use_optimal_height = False

    @property
    def name(self) -> str:
        """The unique style name used to reference this style."""
        return self._name

    def with_height(self, height: str) -> RowStyle:
        """Set the row height with units, e.g. ``"0.8cm"``."""
        self._height = height
        return self

    def with_min_height(self, min_height: str) -> RowStyle:
        self._min_height = min_height
        return self

    def with_background(self, color: str) -> RowStyle:
        self._background_color = color
        return self

    def with_break_before(self, break_type: str) -> RowStyle:
        """Set the break before the row, e.g. ``"page"`` or ``"column"``."""
        self._break_before = break_type
        return self

    def with_keep_together(self, keep: bool) -> RowStyle:
        self._keep_together = keep
        return self

    def with_optimal_height(self, optimal: bool) -> RowStyle:
        self._use_optimal_height = optimal
        return self

    def _attributes(self):
        string_attributes = (
            ("style:row-height", self._height),
            ("style:min-row-height", self._min_height),
            ("fo:background-color", self._background_color),
            ("fo:break-before", self._break_before),
            ("fo:break-after", self._break_after),
        )
        for attribute, value in string_attributes:
            if value:
                yield f' {attribute}="{value}"'
        if self._keep_together:
            yield ' fo:keep-together="true"'
        if self._use_optimal_height:
            yield ' style:use-optimal-row-height="true"'

    def generate(self) -> str:
        """Return the automatic-style XML element for this row style."""
        return (
            f'<style:style style:name="{self._name}" style:family="table-row">'
            "<style:table-row-properties"
            + "".join(self._attributes())
            + "/></style:style>"
        )