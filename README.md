# odtwriter

Create OpenDocument Text (`.odt`) files from Python: paragraphs of styled
text, embedded images with optional captions, and tables with table, row,
column and cell styles. Only the standard library is used.

## Installation

```
pip install odtwriter
```

## Quick start

```python
from odtwriter.document import Document
from odtwriter.paragraph import Paragraph
from odtwriter.text_style import TextStyle

doc = Document()

header = TextStyle().with_font_size("30pt").with_color("#FF0000")
bold = TextStyle().with_font_size("14pt").with_bold()
underlined = TextStyle().with_font_size("17pt").with_underline()

doc.paragraph(Paragraph().with_text("Header", header))
doc.paragraph(
    Paragraph()
    .with_text("Some text 1.", bold)
    .with_text("Some text 2.", underlined)
)

doc.save_to_file("example.odt")
```

All runs in one paragraph are written on one line. Special XML characters
in paragraph text (`&`, `<`, `>`, `"`, `'`) are escaped; the helper that does
this is `odtwriter.xmlutil.escape_xml`.

`TextStyle` also offers `with_font_name`, `with_italic`, `with_text_shadow`,
`with_letter_spacing`, `with_text_transform`, `with_styled_underline`,
`with_overline`, `with_line_through`, `with_text_outline`,
`with_text_emphasis`, `with_writing_mode` and `with_rotation`. Each returns the
style, so calls chain. Named values for these (font names, underline styles,
writing modes and so on) are module constants in `odtwriter.text_style`, such
as `FONT_NAME_ARIAL`, `UNDERLINE_WAVE` and `WRITING_MODE_TB_RL`.

## Images

Images come from base64 strings, either plain or in `data:` URI form. The
format is detected from the data (`odtwriter.image.detect_content_type`):
PNG, JPEG, GIF, SVG, BMP, WebP and TIFF are supported. Data that is too
short, is not valid base64, or has an unrecognised format raises
`ValueError`.

```python
import base64
from pathlib import Path

from odtwriter.image import Image

encoded = base64.b64encode(Path("photo.jpg").read_bytes()).decode()
picture = Image(encoded)
picture.width = "300px"
picture.height = "8cm"
picture.caption = "Some image name"
picture.caption_style = TextStyle().with_font_size("20pt").with_bold()

doc.paragraph(Paragraph().with_image(picture))
```

Width and height default to `100px`. Placement and text wrapping are set
through `set_position_type(...)` and the `position` and `text_wrap`
attributes (for example `picture.position.horizontal = HORIZONTAL_FROM_LEFT`
with `picture.position.x_offset = "2cm"`); the constants live in
`odtwriter.image`. Caption text is written as given, without escaping.

Images are stored under `Pictures/` in the archive and listed in the
manifest.

## Tables

```python
from odtwriter.table import Table
from odtwriter.table_style import TableStyle
from odtwriter.cell_style import CellStyle

table = Table(3, 3)
for row in range(3):
    for col in range(3):
        table.set_value(row, col, f"Cell {row}:{col}")

table.style = TableStyle().with_width("16cm").with_border("0.002cm solid #000000")
table.set_cell_style(0, 0, CellStyle().with_background("#E6E6E6"))
table.set_span(0, 0, 2, 1)

doc.table(table)
```

Row and column styles are `RowStyle` (`odtwriter.row_style`) and
`ColumnStyle` (`odtwriter.column_style`), applied with `set_row_style` and
`set_column_style`. A cell's text style goes in
`table.rows[r].cells[c].value.style`. Positions outside the table are
ignored. Cell text is written as given, without escaping.

## Metadata

```python
doc.meta.title = "Report"
doc.meta.initial_creator = "Hi it's me"
doc.meta.creator = "It's me too"
doc.meta.subject = "just test odt file"
```

`creation_date` and `date` are `datetime` values, defaulting to the time the
document was created. The description element of `meta.xml` carries the
subject text.

## In memory

`Document.get_bytes()` returns the finished archive as `bytes` instead of
writing a file. The archive holds an uncompressed `mimetype` entry first,
then `meta.xml`, `styles.xml`, `content.xml`, `META_INF/manifest.xml` and any
pictures. Each call adds the picture entries to the manifest again, so build
the archive once per document.

## What it does not do

- It only writes documents; it cannot open, read or edit existing `.odt`
  files.
- Content is limited to paragraphs of text runs and images, and tables.
  There are no headings, lists, page styles, headers or footers.
- `odtwriter.settings.Settings` can produce a fixed `settings.xml`, but
  `Document` does not put it in the archive.
- There is no command-line tool.

## Running the tests

```
pip install odtwriter[test]
pytest
```