"""Build OpenDocument Text files with styled text, images and tables."""

__version__ = "0.1.0"