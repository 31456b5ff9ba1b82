from odtwriter.model import TEXT_ELEMENT
from odtwriter.text import Text
from odtwriter.text_style import TextStyle


def test_generate_wraps_text_in_styled_span():
    style = TextStyle()
    text = Text("Header", style)
    assert text.generate() == (
        f'<text:span text:style-name="{style.name}">Header</text:span>'
    )


def test_generate_escapes_special_characters():
    style = TextStyle()
    text = Text("a<b & \"c\" 'd'>", style)
    assert text.generate() == (
        f'<text:span text:style-name="{style.name}">'
        "a&lt;b &amp; &quot;c&quot; &apos;d&apos;&gt;</text:span>"
    )


def test_generate_styles_matches_style_output():
    style = TextStyle().with_font_size("30pt").with_color("#FF0000")
    text = Text("x", style)
    assert text.generate_styles() == style.generate()


def test_text_can_be_replaced():
    style = TextStyle()
    text = Text("old", style)
    text.text = "new"
    assert ">new<" in text.generate()
    assert "old" not in text.generate()


def test_element_type_is_text():
    assert Text("x", TextStyle()).element_type == TEXT_ELEMENT