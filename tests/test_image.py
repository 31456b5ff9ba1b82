import base64

import pytest

from odtwriter.image import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    HORIZONTAL_FROM_LEFT,
    Image,
    POSITION_TYPE_PAGE,
    WRAP_NONE,
    clean_base64_data,
    detect_content_type,
)
from odtwriter.model import IMAGE_ELEMENT
from odtwriter.text_style import TextStyle

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 8


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (PNG_BYTES, "image/png"),
        (b"\xff\xd8" + b"\x00" * 14, "image/jpeg"),
        (b"GIF87a" + b"\x00" * 10, "image/gif"),
        (b"GIF89a" + b"\x00" * 10, "image/gif"),
        (b"BM" + b"\x00" * 14, "image/bmp"),
        (b"WEBP" + b"\x00" * 12, "image/webp"),
        (b"II*\x00" + b"\x00" * 12, "image/tiff"),
        (b"MM\x00*" + b"\x00" * 12, "image/tiff"),
        (b"  <svg xmlns='x'>", "image/svg+xml"),
    ],
)
def test_detect_by_magic_numbers(raw, expected):
    assert detect_content_type(_b64(raw)) == expected


def test_detect_from_data_uri():
    uri = "data:image/png;base64," + _b64(PNG_BYTES)
    assert detect_content_type(uri) == "image/png"


@pytest.mark.parametrize(
    "data, message",
    [
        ("AAAA", "too short"),
        ("data:text/plain;base64,AAAAAAAA", "unsupported image MIME type"),
        ("data:image/pngAAAAAAAA", "invalid data URI format"),
        ("!!!!!!!!!!!!!!!!", "invalid base64 data"),
        ("AAAAAAAAAAAA", "image data too short"),
        (_b64(b"\x01" * 16), "unrecognized image format"),
    ],
)
def test_detect_rejects_bad_data(data, message):
    with pytest.raises(ValueError, match=message):
        detect_content_type(data)


def test_clean_base64_data_strips_prefix():
    payload = _b64(PNG_BYTES)
    assert clean_base64_data("data:image/png;base64," + payload) == payload
    assert clean_base64_data(payload) == payload


def test_new_image_defaults():
    img = Image(_b64(PNG_BYTES))
    assert img.content_type == "image/png"
    assert img.width == DEFAULT_WIDTH
    assert img.height == DEFAULT_HEIGHT
    assert img.caption == ""
    assert img.element_type == IMAGE_ELEMENT


def test_image_rejects_unknown_data():
    with pytest.raises(ValueError):
        Image(_b64(b"\x01" * 16))


def test_names_share_one_index_and_increase():
    first = Image(_b64(PNG_BYTES))
    second = Image(_b64(PNG_BYTES))
    index = first.name[len("Image"):]
    assert first.style_name == "Im" + index
    assert first.caption_style_name == "Imc" + index
    assert int(second.name[len("Image"):]) > int(index)


def test_file_info_round_trips_bytes():
    img = Image(_b64(PNG_BYTES))
    info = img.file_info()
    assert info.path == f"Pictures/{img.name}.png"
    assert info.content_type == "image/png"
    assert info.data == PNG_BYTES
    assert info.is_valid()


def test_file_info_from_data_uri_decodes_payload():
    img = Image("data:image/png;base64," + _b64(PNG_BYTES))
    assert img.file_info().data == PNG_BYTES


def test_file_info_empty_for_unsupported_content_type():
    img = Image(_b64(PNG_BYTES))
    img.content_type = "image/x-unknown"
    assert not img.file_info().is_valid()


def test_generate_without_caption_references_file():
    img = Image(_b64(PNG_BYTES))
    out = img.generate()
    assert f'xlink:href="{img.file_info().path}"' in out
    assert f'draw:name="{img.name}"' in out
    assert f'svg:width="{DEFAULT_WIDTH}"' in out
    assert "draw:text-box" not in out


def test_generate_with_styled_caption():
    img = Image(_b64(PNG_BYTES))
    style = TextStyle().with_bold()
    img.caption = "Some image name"
    img.caption_style = style
    img.width = "300px"
    out = img.generate()
    assert (
        f'<text:span text:style-name="{style.name}">Some image name</text:span>' in out
    )
    assert 'svg:width="300px"' in out
    assert "draw:text-box" in out


def test_generate_styles_defaults():
    img = Image(_b64(PNG_BYTES))
    styles = img.generate_styles()
    assert styles.startswith(f'<style:style style:name="{img.style_name}"')
    assert 'text:anchor-type="paragraph" ' in styles
    assert f'style:wrap="{WRAP_NONE}" ' in styles
    assert img.caption_style_name not in styles


def test_generate_styles_with_caption_includes_caption_styles():
    img = Image(_b64(PNG_BYTES))
    style = TextStyle().with_underline()
    img.caption = "c"
    img.caption_style = style
    styles = img.generate_styles()
    assert f'style:name="{img.caption_style_name}"' in styles
    assert styles.endswith(style.generate())


def test_set_position_type_sets_anchor():
    img = Image(_b64(PNG_BYTES))
    img.set_position_type(POSITION_TYPE_PAGE)
    assert img.position.kind == POSITION_TYPE_PAGE
    assert img.position.anchor == POSITION_TYPE_PAGE
    assert 'text:anchor-type="page" ' in img.generate_styles()


def test_offset_written_only_for_absolute_alignment():
    img = Image(_b64(PNG_BYTES))
    img.position.x_offset = "2cm"
    img.position.horizontal = "left"
    assert 'svg:x="2cm"' not in img.generate_styles()
    img.position.horizontal = HORIZONTAL_FROM_LEFT
    assert 'svg:x="2cm" ' in img.generate_styles()


def test_wrap_side_and_margin_written():
    img = Image(_b64(PNG_BYTES))
    img.text_wrap.side = "both"
    img.text_wrap.margin = "0.1cm"
    styles = img.generate_styles()
    assert 'fo:wrap-contour="both" ' in styles
    assert 'fo:margin="0.1cm" ' in styles