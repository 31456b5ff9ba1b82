"""Shared data types for document parts."""

from dataclasses import dataclass

TEXT_ELEMENT = "text"
IMAGE_ELEMENT = "image"


@dataclass
class FileInfo:
    """An extra file stored inside the document archive."""

    path: str = ""
    content_type: str = ""
    data: bytes = b""

    def is_valid(self) -> bool:
        """Return True when path, content type and data are all present."""
        return bool(self.path) and bool(self.content_type) and len(self.data) > 0