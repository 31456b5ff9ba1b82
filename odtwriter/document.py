"""Assembling a complete text document archive."""

from __future__ import annotations

import io
import os
import zipfile
from pathlib import Path

from .content import Content
from .manifest import Manifest
from .meta import Meta
from .mimetype import MimeType
from .paragraph import Paragraph
from .styles import Styles
from .table import Table

META_FILE_NAME = "meta.xml"
SETTINGS_FILE_NAME = "settings.xml"
STYLES_FILE_NAME = "styles.xml"
CONTENT_FILE_NAME = "content.xml"
MIMETYPE_FILE_NAME = "mimetype"
MANIFEST_FILE_NAME = "META_INF/manifest.xml"


class Document:
    """A text document built from paragraphs and tables."""

    def __init__(self) -> None:
        self.meta = Meta()
        self._styles = Styles()
        self._content = Content()
        self._mimetype = MimeType()
        self._manifest = Manifest()

    def paragraph(self, paragraph: Paragraph) -> None:
        """Append a paragraph."""
        self._content.add(paragraph)

    def table(self, table: Table) -> None:
        """Append a table."""
        self._content.add(table)

    def save_to_file(self, file_path: str | os.PathLike[str]) -> None:
        """Write the document archive to ``file_path``."""
        Path(file_path).write_bytes(self.get_bytes())

    def get_bytes(self) -> bytes:
        """Return the complete document archive."""
        files_info = self._content.files_info()
        self._manifest.add_entries(files_info)

        parts = {
            META_FILE_NAME: self.meta.generate(),
            STYLES_FILE_NAME: self._styles.generate(),
            CONTENT_FILE_NAME: self._content.generate(),
            MANIFEST_FILE_NAME: self._manifest.generate(),
        }

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
            archive.writestr(
                zipfile.ZipInfo(MIMETYPE_FILE_NAME),
                self._mimetype.generate(),
                compress_type=zipfile.ZIP_STORED,
            )
            for name, xml in parts.items():
                archive.writestr(name, xml)
            for info in files_info:
                archive.writestr(info.path, info.data)
        return buffer.getvalue()