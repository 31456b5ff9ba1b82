"""Embedded pictures inside a paragraph."""

from __future__ import annotations

import base64
import binascii
import itertools
import threading
from dataclasses import dataclass

from .model import IMAGE_ELEMENT, FileInfo
from .text_style import TextStyle

# Anchor types
POSITION_TYPE_PARAGRAPH = "paragraph"
POSITION_TYPE_PAGE = "page"
POSITION_TYPE_CHAR = "char"
POSITION_TYPE_FRAME = "frame"

# Horizontal alignment
HORIZONTAL_LEFT = "left"
HORIZONTAL_CENTER = "center"
HORIZONTAL_RIGHT = "right"
HORIZONTAL_FROM_LEFT = "from-left"

# Vertical alignment
VERTICAL_TOP = "top"
VERTICAL_MIDDLE = "middle"
VERTICAL_BOTTOM = "bottom"
VERTICAL_FROM_TOP = "from-top"

# Text wrap behaviours
WRAP_NONE = "none"
WRAP_PARALLEL = "parallel"
WRAP_DYNAMIC = "dynamic"

# Wrap sides
WRAP_SIDE_LEFT = "left"
WRAP_SIDE_RIGHT = "right"
WRAP_SIDE_BIGGEST = "biggest"
WRAP_SIDE_BOTH = "both"

DEFAULT_CAPTION_STYLE_NAME = "Caption"
DEFAULT_WIDTH = "100px"
DEFAULT_HEIGHT = "100px"
PICTURES_FOLDER = "Pictures"

SUPPORTED_IMAGE_TYPES = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/gif": ".gif",
    "image/svg+xml": ".svg",
    "image/bmp": ".bmp",
    "image/webp": ".webp",
    "image/tiff": ".tiff",
}

_MAGIC_NUMBERS = (
    ((b"\x89PNG",), "image/png"),
    ((b"\xff\xd8",), "image/jpeg"),
    ((b"GIF87a", b"GIF89a"), "image/gif"),
    ((b"BM",), "image/bmp"),
    ((b"WEBP",), "image/webp"),
    ((b"II*\x00", b"MM\x00*"), "image/tiff"),
)

_name_counter = itertools.count(1)
_name_lock = threading.Lock()


def _next_index() -> int:
    with _name_lock:
        return next(_name_counter)


def clean_base64_data(data: str) -> str:
    """Strip a data-URI prefix (everything up to the first comma)."""
    _, comma, rest = data.partition(",")
    return rest if comma else data


def _decode(data: str) -> bytes:
    cleaned = clean_base64_data(data).replace("\r", "").replace("\n", "")
    return base64.b64decode(cleaned, validate=True)


def detect_content_type(data: str) -> str:
    """Return the MIME type of base64 image data or a data URI.

    Raises ValueError when the data is malformed or the format is not supported.
    """
    if len(data) < 12:
        raise ValueError("invalid base64 data: too short")

    if data.startswith("data:"):
        head, sep, _ = data.partition(";")
        if not sep:
            raise ValueError("invalid data URI format")
        mime_type = head[len("data:"):]
        if mime_type in SUPPORTED_IMAGE_TYPES:
            return mime_type
        raise ValueError(f"unsupported image MIME type: {mime_type}")

    try:
        raw = _decode(data)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 data: {exc}") from exc

    if len(raw) < 12:
        raise ValueError("image data too short")

    for prefixes, mime_type in _MAGIC_NUMBERS:
        if raw.startswith(prefixes):
            return mime_type
    if b"<svg" in raw[:12]:
        return "image/svg+xml"
    raise ValueError("unrecognized image format")


@dataclass
class Position:
    """Where an image is anchored and aligned."""

    kind: str = POSITION_TYPE_PARAGRAPH
    anchor: str = POSITION_TYPE_PARAGRAPH
    horizontal: str = ""
    vertical: str = ""
    x_offset: str = ""
    y_offset: str = ""


@dataclass
class TextWrap:
    """How surrounding text flows around an image."""

    kind: str = WRAP_NONE
    side: str = ""
    margin: str = ""


_CAPTION_FRAME_STYLE = """<style:style style:name="{name}" style:family="graphic" style:parent-style-name="Graphics">
            <style:graphic-properties fo:margin-left="0cm" fo:margin-right="0cm" fo:margin-top="0cm"
                fo:margin-bottom="0cm" style:run-through="foreground" style:wrap="none"
                style:vertical-pos="top" style:vertical-rel="paragraph-content"
                style:horizontal-pos="center" style:horizontal-rel="paragraph-content"
                fo:padding="0cm" fo:border="none" style:shadow="none" draw:shadow-opacity="100%"
                style:mirror="none" fo:clip="rect(0cm, 0cm, 0cm, 0cm)" draw:luminance="0%"
                draw:contrast="0%" draw:red="0%" draw:green="0%" draw:blue="0%" draw:gamma="100%"
                draw:color-inversion="false" draw:image-opacity="100%" draw:color-mode="standard"
                loext:rel-width-rel="paragraph" />
        </style:style>"""

_CAPTIONED_FRAME = (
    '<draw:frame draw:style-name="{style}" draw:name="{name}" text:anchor-type="paragraph"'
    ' svg:width="{width}" svg:height="{height}" draw:z-index="0">\n'
    '\t\t\t\t\t<draw:text-box fo:min-height="7.999cm">\n'
    '                        <text:p text:style-name="Caption">\n'
    '                            <draw:frame draw:style-name="Caption"\n'
    '                                draw:name="Image2" text:anchor-type="paragraph" svg:width="7.938cm"\n'
    '                                style:rel-width="100%" svg:height="7.999cm" style:rel-height="scale"\n'
    '                                draw:z-index="2">\n'
    '                                <draw:image xlink:href="{href}" xlink:type="simple"'
    ' xlink:show="embed" xlink:actuate="onLoad"/>\n'
    "                            </draw:frame>\n"
    "                            {caption}\n"
    "                        </text:p>\n"
    "                    </draw:text-box>\n"
    "        </draw:frame>"
)

_PLAIN_FRAME = (
    '<draw:frame draw:style-name="{style}" draw:name="{name}" text:anchor-type="paragraph"'
    ' svg:width="{width}" svg:height="{height}" draw:z-index="0">\n'
    '            <draw:image xlink:href="{href}" xlink:type="simple"'
    ' xlink:show="embed" xlink:actuate="onLoad"/>\n'
    "        </draw:frame>"
)


class Image:
    """A picture given as base64 data or a base64 data URI.

    Supported types: PNG, JPEG, GIF, SVG, BMP, WebP and TIFF.
    Raises ValueError when the data cannot be recognised.
    """

    element_type = IMAGE_ELEMENT

    def __init__(self, data: str) -> None:
        index = _next_index()
        self.content_type = detect_content_type(data)
        self._name = f"Image{index}"
        self._style_name = f"Im{index}"
        self._caption_style_name = f"Imc{index}"
        self._src = data
        self.width = DEFAULT_WIDTH
        self.height = DEFAULT_HEIGHT
        self.caption = ""
        self.caption_style: TextStyle | None = None
        self.position = Position()
        self.text_wrap = TextWrap()

    @property
    def name(self) -> str:
        return self._name

    @property
    def style_name(self) -> str:
        return self._style_name

    @property
    def caption_style_name(self) -> str:
        return self._caption_style_name

    @property
    def src(self) -> str:
        return self._src

    def set_position_type(self, kind: str) -> None:
        """Set the reference type, which is also used as the anchor type."""
        self.position.kind = kind
        self.position.anchor = kind

    def file_info(self) -> FileInfo:
        """Return the archive path, MIME type and bytes of the picture.

        An empty FileInfo is returned when the picture cannot be stored.
        """
        if not self._src or not self._name or not self.content_type:
            return FileInfo()
        ext = SUPPORTED_IMAGE_TYPES.get(self.content_type)
        if ext is None:
            return FileInfo()
        try:
            data = _decode(self._src)
        except binascii.Error:
            return FileInfo()
        return FileInfo(
            path=f"{PICTURES_FOLDER}/{self._name}{ext}",
            content_type=self.content_type,
            data=data,
        )

    def _graphic_attributes(self):
        pos, wrap = self.position, self.text_wrap
        if pos.anchor:
            yield f'text:anchor-type="{pos.anchor}" '
        if pos.horizontal:
            yield f'style:horizontal-pos="{pos.horizontal}" '
        if pos.vertical:
            yield f'style:vertical-pos="{pos.vertical}" '
        if pos.x_offset and pos.horizontal == HORIZONTAL_FROM_LEFT:
            yield f'svg:x="{pos.x_offset}" '
        if pos.y_offset and pos.vertical == VERTICAL_FROM_TOP:
            yield f'svg:y="{pos.y_offset}" '
        if wrap.kind:
            yield f'style:wrap="{wrap.kind}" '
        if wrap.side:
            yield f'fo:wrap-contour="{wrap.side}" '
        if wrap.margin:
            yield f'fo:margin="{wrap.margin}" '

    def _caption_frame_style(self) -> str:
        if not self.caption:
            return ""
        return _CAPTION_FRAME_STYLE.format(name=self._caption_style_name)

    def generate_styles(self) -> str:
        """Return the graphic style and any caption styles as XML."""
        caption_style = self.caption_style.generate() if self.caption_style else ""
        return (
            f'<style:style style:name="{self._style_name}" style:family="graphic" '
            'style:parent-style-name="Graphics">'
            "<style:graphic-properties "
            + "".join(self._graphic_attributes())
            + "/></style:style>"
            + " "
            + self._caption_frame_style()
            + " "
            + caption_style
        )

    def generate(self) -> str:
        """Return the frame element that places the picture."""
        fields = {
            "style": self._style_name,
            "name": self._name,
            "width": self.width,
            "height": self.height,
            "href": self.file_info().path,
        }
        if self.caption:
            caption = self.caption
            if self.caption_style is not None:
                caption = (
                    f'<text:span text:style-name="{self.caption_style.name}">'
                    f"{self.caption}</text:span>"
                )
            return _CAPTIONED_FRAME.format(caption=caption, **fields)
        return _PLAIN_FRAME.format(**fields)