"""Text formatting styles for spans of text."""

from __future__ import annotations

import itertools
import threading

# Base fonts
FONT_NAME_ARIAL = "Arial"
FONT_NAME_TIMES_NEW_ROMAN = "Times New Roman"
FONT_NAME_COURIER_NEW = "Courier New"
FONT_NAME_GEORGIA = "Georgia"
FONT_NAME_VERDANA = "Verdana"
FONT_NAME_TAHOMA = "Tahoma"
FONT_NAME_IMPACT = "Impact"
FONT_NAME_COMIC_SANS_MS = "Comic Sans MS"
FONT_NAME_TREBUCHET_MS = "Trebuchet MS"
FONT_NAME_PALATINO_LINOTYPE = "Palatino Linotype"
FONT_NAME_BOOK_ANTIQUA = "Book Antiqua"
FONT_NAME_SYMBOL = "Symbol"
FONT_NAME_WINGDINGS = "Wingdings"
FONT_NAME_WEBDINGS = "Webdings"

# Windows fonts
FONT_NAME_CALIBRI = "Calibri"
FONT_NAME_CAMBRIA = "Cambria"
FONT_NAME_CANDARA = "Candara"
FONT_NAME_CONSOLAS = "Consolas"
FONT_NAME_CONSTANTIA = "Constantia"
FONT_NAME_CORBEL = "Corbel"
FONT_NAME_SEGOE_UI = "Segoe UI"
FONT_NAME_FRANKLIN_GOTHIC_MEDIUM = "Franklin Gothic Medium"
FONT_NAME_MICROSOFT_SANS_SERIF = "Microsoft Sans Serif"
FONT_NAME_MS_REFERENCE_SANS_SERIF = "MS Reference Sans Serif"
FONT_NAME_MS_REFERENCE_SERIF = "MS Reference Serif"
FONT_NAME_EBRIMA = "Ebrima"
FONT_NAME_LEELAWADEE_UI = "Leelawadee UI"
FONT_NAME_MALGUN_GOTHIC = "Malgun Gothic"
FONT_NAME_SYLFAEN = "Sylfaen"
FONT_NAME_HOLOLENS_MDL2_ASSETS = "HoloLens MDL2 Assets"
FONT_NAME_MARLETT = "Marlett"
FONT_NAME_SIMSUN = "SimSun"
FONT_NAME_NSIMSUN = "NSimSun"
FONT_NAME_MINGLIU = "MingLiU"
FONT_NAME_PMINGLIU = "PMingLiU"
FONT_NAME_MS_GOTHIC = "MS Gothic"
FONT_NAME_MS_MINCHO = "MS Mincho"
FONT_NAME_MS_UI_GOTHIC = "MS UI Gothic"

# macOS fonts
FONT_NAME_SAN_FRANCISCO = "San Francisco"
FONT_NAME_NEW_YORK = "New York"
FONT_NAME_SF_PRO = "SF Pro"
FONT_NAME_SF_COMPACT = "SF Compact"
FONT_NAME_SF_MONO = "SF Mono"
FONT_NAME_HELVETICA_NEUE = "Helvetica Neue"
FONT_NAME_HELVETICA = "Helvetica"
FONT_NAME_LUCIDA_GRANDE = "Lucida Grande"
FONT_NAME_GENEVA = "Geneva"
FONT_NAME_APPLE_SYMBOLS = "Apple Symbols"
FONT_NAME_MENLO = "Menlo"
FONT_NAME_MONACO = "Monaco"
FONT_NAME_OPTIMA = "Optima"
FONT_NAME_ZAPFINO = "Zapfino"
FONT_NAME_BRUSH_SCRIPT_MT = "Brush Script MT"
FONT_NAME_CHALKBOARD = "Chalkboard"
FONT_NAME_CHALKDUSTER = "Chalkduster"
FONT_NAME_NOTEWORTHY = "Noteworthy"
FONT_NAME_PAPYRUS = "Papyrus"
FONT_NAME_THONBURI = "Thonburi"

# Linux fonts
FONT_NAME_DEJAVU_SANS = "DejaVu Sans"
FONT_NAME_DEJAVU_SERIF = "DejaVu Serif"
FONT_NAME_DEJAVU_SANS_MONO = "DejaVu Sans Mono"
FONT_NAME_LIBERATION_SANS = "Liberation Sans"
FONT_NAME_LIBERATION_SERIF = "Liberation Serif"
FONT_NAME_LIBERATION_MONO = "Liberation Mono"
FONT_NAME_UBUNTU = "Ubuntu"
FONT_NAME_UBUNTU_MONO = "Ubuntu Mono"
FONT_NAME_NOTO_SANS = "Noto Sans"
FONT_NAME_NOTO_SERIF = "Noto Serif"
FONT_NAME_NOTO_MONO = "Noto Mono"
FONT_NAME_FREE_SANS = "FreeSans"
FONT_NAME_FREE_SERIF = "FreeSerif"
FONT_NAME_FREE_MONO = "FreeMono"
FONT_NAME_DROID_SANS = "Droid Sans"
FONT_NAME_DROID_SERIF = "Droid Serif"
FONT_NAME_DROID_SANS_MONO = "Droid Sans Mono"
FONT_NAME_OPEN_SANS = "Open Sans"
FONT_NAME_ROBOTO = "Roboto"
FONT_NAME_SOURCE_SANS_PRO = "Source Sans Pro"
FONT_NAME_SOURCE_SERIF_PRO = "Source Serif Pro"
FONT_NAME_SOURCE_CODE_PRO = "Source Code Pro"
FONT_NAME_FIRA_SANS = "Fira Sans"
FONT_NAME_FIRA_MONO = "Fira Mono"
FONT_NAME_CANTARELL = "Cantarell"
FONT_NAME_INCONSOLATA = "Inconsolata"
FONT_NAME_NIMBUS_SANS = "Nimbus Sans"
FONT_NAME_NIMBUS_ROMAN = "Nimbus Roman"
FONT_NAME_NIMBUS_MONO = "Nimbus Mono"

FONT_NAME_UNDEFINED = "UNDEFINED"

# Underline styles
UNDERLINE_NONE = "none"
UNDERLINE_SINGLE = "solid"
UNDERLINE_DOUBLE = "double"
UNDERLINE_DOTTED = "dotted"
UNDERLINE_DASH = "dash"
UNDERLINE_WAVE = "wave"
UNDERLINE_BOLD = "bold"
UNDERLINE_DOT_DASH = "dot-dash"
UNDERLINE_DOT_DOT_DASH = "dot-dot-dash"
UNDERLINE_LONG_DASH = "long-dash"

# Overline styles
OVERLINE_NONE = "none"
OVERLINE_SINGLE = "solid"
OVERLINE_DOUBLE = "double"
OVERLINE_DOTTED = "dotted"
OVERLINE_DASH = "dash"
OVERLINE_WAVE = "wave"

# Line-through styles
LINE_THROUGH_NONE = "none"
LINE_THROUGH_SOLID = "solid"
LINE_THROUGH_WAVE = "wave"
LINE_THROUGH_SLASH = "slash"
LINE_THROUGH_X = "x"

# Text transformations
TRANSFORM_NONE = "none"
TRANSFORM_UPPERCASE = "uppercase"
TRANSFORM_LOWERCASE = "lowercase"
TRANSFORM_CAPITALIZE = "capitalize"
TRANSFORM_SMALL_CAPS = "small-caps"

# Rotation scaling
ROTATION_SCALE_FIXED = "fixed"
ROTATION_SCALE_LINE_HEIGHT = "line-height"

# Writing modes
WRITING_MODE_LR_TB = "lr-tb"
WRITING_MODE_RL_TB = "rl-tb"
WRITING_MODE_TB_RL = "tb-rl"
WRITING_MODE_TB_LR = "tb-lr"
WRITING_MODE_PAGE = "page"

# Emphasis marks
EMPHASIS_NONE = "none"
EMPHASIS_DOT = "dot"
EMPHASIS_CIRCLE = "circle"
EMPHASIS_DISC = "disc"
EMPHASIS_ACCENT = "accent"
EMPHASIS_FILLED_DOT = "filled dot"
EMPHASIS_FILLED_CIRCLE = "filled circle"
EMPHASIS_FILLED_DISC = "filled disc"
EMPHASIS_FILLED_ACCENT = "filled accent"
EMPHASIS_ABOVE = "above"
EMPHASIS_BELOW = "below"
EMPHASIS_LEFT = "left"
EMPHASIS_RIGHT = "right"

# Font weights
FONT_WEIGHT_NORMAL = "normal"
FONT_WEIGHT_BOLD = "bold"
FONT_WEIGHT_100 = "100"
FONT_WEIGHT_200 = "200"
FONT_WEIGHT_300 = "300"
FONT_WEIGHT_400 = "400"
FONT_WEIGHT_500 = "500"
FONT_WEIGHT_600 = "600"
FONT_WEIGHT_700 = "700"
FONT_WEIGHT_800 = "800"
FONT_WEIGHT_900 = "900"

# Font styles
FONT_STYLE_NORMAL = "normal"
FONT_STYLE_ITALIC = "italic"
FONT_STYLE_OBLIQUE = "oblique"

# Style names start at T2: T1 is left free for the document's own use.
_name_counter = itertools.count(2)
_name_lock = threading.Lock()


def _next_name() -> str:
    with _name_lock:
        return f"T{next(_name_counter)}"


class TextStyle:
    """Formatting for a run of text: font, weight, decorations and layout."""

    def __init__(self) -> None:
        self._name = _next_name()
        self._font_name = ""
        self._font_size = ""
        self._bold = False
        self._italic = False
        self._color = ""
        self._text_shadow = ""
        self._letter_spacing = ""
        self._text_transform = ""
        self._underline_style = ""
        self._underline_color = ""
        self._overline_style = ""
        self._overline_color = ""
        self._line_through_style = ""
        self._text_outline = ""
        self._text_emphasize = ""
        self._writing_mode = ""
        self._rotation_angle = 0
        self._rotation_scale = ""

    @property
    def name(self) -> str:
        """The unique style name used to reference this style."""
        return self._name

    def with_font_name(self, font_name: str) -> TextStyle:
        self._font_name = font_name
        return self

    def with_font_size(self, font_size: str) -> TextStyle:
        self._font_size = font_size
        return self

    def with_bold(self) -> TextStyle:
        self._bold = True
        return self

    def with_italic(self) -> TextStyle:
        self._italic = True
        return self

    def with_color(self, color: str) -> TextStyle:
        self._color = color
        return self

    def with_text_shadow(self, shadow: str) -> TextStyle:
        self._text_shadow = shadow
        return self

    def with_letter_spacing(self, spacing: str) -> TextStyle:
        self._letter_spacing = spacing
        return self

    def with_text_transform(self, transform: str) -> TextStyle:
        self._text_transform = transform
        return self

    def with_underline(self) -> TextStyle:
        """Underline with a single solid line in the font colour."""
        self._underline_style = UNDERLINE_SINGLE
        self._underline_color = "font-color"
        return self

    def with_styled_underline(self, style: str, color: str) -> TextStyle:
        self._underline_style = style
        self._underline_color = color
        return self

    def with_overline(self, style: str, color: str) -> TextStyle:
        self._overline_style = style
        self._overline_color = color
        return self

    def with_line_through(self, style: str) -> TextStyle:
        self._line_through_style = style
        return self

    def with_text_outline(self, outline: str) -> TextStyle:
        self._text_outline = outline
        return self

    def with_text_emphasis(self, emphasis: str) -> TextStyle:
        self._text_emphasize = emphasis
        return self

    def with_writing_mode(self, mode: str) -> TextStyle:
        self._writing_mode = mode
        return self

    def with_rotation(self, angle: int, scale: str) -> TextStyle:
        self._rotation_angle = angle
        self._rotation_scale = scale
        return self

    def _attributes(self):
        if self._font_name:
            yield f' style:font-name="{self._font_name}"'
        if self._font_size:
            yield f' fo:font-size="{self._font_size}"'
        if self._bold:
            yield ' fo:font-weight="bold"'
        if self._italic:
            yield ' fo:font-style="italic"'
        if self._underline_style and self._underline_color:
            yield (
                f' style:text-underline-style="{self._underline_style}"'
                ' style:text-underline-width="auto"'
                f' style:text-underline-color="{self._underline_color}"'
            )
        if self._color:
            yield f' fo:color="{self._color}"'
        if self._text_shadow:
            yield f' fo:text-shadow="{self._text_shadow}"'
        if self._letter_spacing:
            yield f' fo:letter-spacing="{self._letter_spacing}"'
        if self._text_transform:
            yield f' fo:text-transform="{self._text_transform}"'
        if self._overline_style and self._overline_color:
            yield (
                f' style:text-overline-style="{self._overline_style}"'
                f' style:text-overline-color="{self._overline_color}"'
            )
        if self._line_through_style:
            yield f' style:text-line-through-style="{self._line_through_style}"'
        if self._text_outline:
            yield f' fo:text-outline="{self._text_outline}"'
        if self._text_emphasize:
            yield f' style:text-emphasize="{self._text_emphasize}"'
        if self._writing_mode:
            yield f' style:writing-mode="{self._writing_mode}"'
        if self._rotation_scale:
            yield (
                f' style:text-rotation-scale="{self._rotation_scale}"'
                f' style:text-rotation-angle="{self._rotation_angle}"'
            )

    def generate(self) -> str:
        """Return the automatic-style XML element for this style."""
        return (
            f'<style:style style:name="{self._name}" style:family="text">'
            "<style:text-properties"
            + "".join(self._attributes())
            + "/></style:style>"
        )