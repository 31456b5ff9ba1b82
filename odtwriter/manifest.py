"""The manifest part of a text document."""

from __future__ import annotations

from collections.abc import Iterable

from .model import FileInfo

_ENTRY = '<manifest:file-entry manifest:full-path="{path}" manifest:media-type="{media_type}"/>'

_MANIFEST_XML = """<?xml version="1.0" encoding="UTF-8"?>
<manifest:manifest xmlns:manifest="urn:oasis:names:tc:opendocument:xmlns:manifest:1.0">
    <manifest:file-entry manifest:full-path="/" manifest:media-type="application/vnd.oasis.opendocument.text"/>
    <manifest:file-entry manifest:full-path="content.xml" manifest:media-type="text/xml"/>
    <manifest:file-entry manifest:full-path="styles.xml" manifest:media-type="text/xml"/>
\t<manifest:file-entry manifest:full-path="meta.xml" manifest:media-type="text/xml"/>{entries}
</manifest:manifest>"""


class Manifest:
    """Lists every file stored in the document archive."""

    def __init__(self) -> None:
        self.additional_entries: list[FileInfo] = []

    def add_entries(self, entries: Iterable[FileInfo]) -> None:
        """Append entries for extra files such as pictures."""
        self.additional_entries.extend(entries)

    def generate(self) -> str:
        """Return the manifest.xml document."""
        entries = "".join(
            "\n\t" + _ENTRY.format(path=entry.path, media_type=entry.content_type)
            for entry in self.additional_entries
        )
        return _MANIFEST_XML.format(entries=entries)