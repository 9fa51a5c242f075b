"""Tests for the DOM helpers and the Reader layer."""

from gas_dts.dom import extract_links, extract_text, parse_html, select_rows
from gas_dts.reader import (
    read_member_rows,
    read_method_blocks,
    read_property_rows,
    read_service,
    read_service_paths,
)
from gas_dts.rows import MethodBlock


# ---------------------------------------------------------------------------
# dom
# ---------------------------------------------------------------------------

def test_extract_text_strips():
    doc = parse_html("<div><p>  hello  </p></div>")
    assert extract_text("p", doc) == "hello"

def test_extract_text_missing_is_empty():
    doc = parse_html("<div></div>")
    assert extract_text("p", doc) == ""

def test_extract_text_first_match():
    doc = parse_html("<p>one</p><p>two</p>")
    assert extract_text("p", doc) == "one"

def test_extract_links_in_order():
    doc = parse_html('<a href="/a">A</a><a>no href</a><a href="/b">B</a>')
    assert extract_links("a", doc) == ["/a", "/b"]

def test_select_rows_skips_header():
    doc = parse_html("<table><tr><th>h</th></tr><tr><td>1</td></tr><tr><td>2</td></tr></table>")
    rows = select_rows("tr:not(:first-child)", doc)
    assert [r.get_text() for r in rows] == ["1", "2"]


# ---------------------------------------------------------------------------
# Root listing / service page
# ---------------------------------------------------------------------------

def test_service_paths(site):
    doc = parse_html(site["/apps-script/reference"])
    assert read_service_paths(doc) == [
        "/apps-script/reference/colors",
        "/apps-script/reference/settings",
    ]

def test_service_descriptor(site):
    doc = parse_html(site["/apps-script/reference/colors"])
    svc = read_service(doc, "/apps-script/reference/colors")
    assert svc.name == "Colors Service"
    assert svc.description == "This service provides colors."
    assert svc.source_path == "/apps-script/reference/colors"

def test_member_rows(site):
    doc = parse_html(site["/apps-script/reference/colors"])
    rows = read_member_rows(doc)
    assert [r.name for r in rows] == ["Foo", "Painter"]
    assert rows[0].description == "An enum of colors"
    assert rows[0].path == "/apps-script/reference/colors/foo"

def test_member_rows_absent_table(site):
    doc = parse_html(site["/apps-script/reference/settings"])
    assert read_member_rows(doc) == []

def test_member_row_without_link():
    doc = parse_html(
        '<h2 id="classes">Classes</h2><div class="toc"><table class="member">'
        "<tr><th>Name</th><th>Brief</th></tr>"
        "<tr><td>Bare</td><td>A thing</td></tr></table></div>"
    )
    rows = read_member_rows(doc)
    assert rows[0].name == "Bare"
    assert rows[0].path == ""


# ---------------------------------------------------------------------------
# Detail pages
# ---------------------------------------------------------------------------

def test_property_rows(site):
    doc = parse_html(site["/apps-script/reference/colors/foo"])
    rows = read_property_rows(doc)
    assert [(r.name, r.type, r.description) for r in rows] == [
        ("Red", "Enum", "the color red"),
        ("Blue", "Enum", "the color blue"),
    ]

def test_method_blocks(site):
    doc = parse_html(site["/apps-script/reference/colors/painter"])
    blocks = read_method_blocks(doc)
    assert [b.name for b in blocks] == ["setOptions", "paint", "reset"]

    set_options = blocks[0]
    assert set_options.summary == "Sets painting options."
    assert set_options.example == "painter.setOptions({Retries: 3});"
    assert set_options.return_text == "Painter — this painter, for chaining"
    assert [p.name for p in set_options.params] == ["options"]
    assert [p.name for p in set_options.advanced_params] == ["Retries"]

def test_method_block_tables_are_scoped(site):
    doc = parse_html(site["/apps-script/reference/colors/painter"])
    paint = read_method_blocks(doc)[1]
    assert [(p.name, p.type) for p in paint.params] == [("label", "String"), ("strokes", "Integer[]")]
    assert paint.advanced_params == []
    assert paint.example == ""

def test_method_block_without_prose(site):
    doc = parse_html(site["/apps-script/reference/colors/painter"])
    reset = read_method_blocks(doc)[2]
    assert reset.summary == ""
    assert reset.return_text == ""
    assert reset.params == []

def test_method_name_from_heading():
    assert MethodBlock(heading="getRange(row, column)").name == "getRange"
    assert MethodBlock(heading="reset()").name == "reset"
