from odtwriter.table_style import TableStyle


def test_name_prefix():
    assert TableStyle().name.startswith("TblS")


def test_names_are_unique():
    names = [TableStyle().name for _ in range(5)]
    assert len(set(names)) == 5
    assert all(name.startswith("TblS") for name in names)


def test_default_generate():
    style = TableStyle()
    assert style.generate() == (
        f'<style:style style:name="{style.name}" style:family="table">'
        "<style:table-properties/></style:style>"
    )


def test_chaining_returns_same_object():
    style = TableStyle()
    assert style.with_width("10cm").with_align("center") is style


def test_all_attributes_in_order():
    style = (
        TableStyle()
        .with_border("0.002cm solid #000000")
        .with_border_model("collapsing")
        .with_background_color("#FFFFFF")
        .with_margin("1cm")
        .with_align("center")
        .with_width("10cm")
    )
    xml = style.generate()
    expected_parts = [
        ' style:width="10cm"',
        ' table:align="center"',
        ' fo:margin="1cm"',
        ' fo:background-color="#FFFFFF"',
        ' table:border-model="collapsing"',
        ' fo:border="0.002cm solid #000000"',
    ]
    positions = [xml.index(part) for part in expected_parts]
    assert positions == sorted(positions)


def test_empty_value_omits_attribute():
    style = TableStyle().with_width("")
    assert "style:width" not in style.generate()