"""Helpers for producing XML text."""

_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(s: str) -> str:
    """Escape the five XML special characters in ``s``."""
    for char, entity in _REPLACEMENTS:
        s = s.replace(char, entity)
    return s