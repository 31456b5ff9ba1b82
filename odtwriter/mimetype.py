"""The mimetype entry of a text document."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MIME_TYPE = "application/vnd.oasis.opendocument.text"


@dataclass(frozen=True)
class MimeType:
    """The MIME type stored first and uncompressed in the archive."""

    value: str = DEFAULT_MIME_TYPE

    def generate(self) -> str:
        """Return the MIME type text."""
        return self.value