"""Reader layer: converts reference pages to row records."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from .config import Selectors
from .dom import Context, extract_links, extract_text, select_rows
from .model import ServiceDescriptor
from .rows import MemberRow, MethodBlock, ValueRow


_DEFAULT = Selectors()


# ---------------------------------------------------------------------------
# Root listing / service page
# ---------------------------------------------------------------------------

def read_service_paths(doc: BeautifulSoup, sel: Selectors = _DEFAULT) -> list[str]:
    """Service page links from the root reference listing."""
    return extract_links(sel.service_path, doc)


def read_service(doc: BeautifulSoup, path: str, sel: Selectors = _DEFAULT) -> ServiceDescriptor:
    """Title and first paragraph of a service page.

    The title is kept as documented (e.g. ``Calendar Service``); the namespace
    name is derived from it at assembly time.
    """
    return ServiceDescriptor(
        name=extract_text(sel.service_name, doc),
        description=extract_text(sel.service_desc, doc),
        source_path=path,
    )


def read_member_rows(doc: BeautifulSoup, sel: Selectors = _DEFAULT) -> list[MemberRow]:
    rows: list[MemberRow] = []
    for row in select_rows(sel.service_class_rows, doc):
        links = extract_links(sel.member_link, row)
        rows.append(
            MemberRow(
                name=extract_text(sel.member_name, row),
                description=extract_text(sel.service_class_desc, row),
                path=links[0] if links else "",
            )
        )
    return rows


# ---------------------------------------------------------------------------
# Member detail page
# ---------------------------------------------------------------------------

def read_value_row(row: Tag, sel: Selectors = _DEFAULT) -> ValueRow:
    return ValueRow(
        name=extract_text(sel.member_name, row),
        type=extract_text(sel.member_type, row),
        description=extract_text(sel.member_desc, row),
    )


def read_value_rows(selector: str, context: Context, sel: Selectors = _DEFAULT) -> list[ValueRow]:
    return [read_value_row(row, sel) for row in select_rows(selector, context)]


def read_property_rows(doc: BeautifulSoup, sel: Selectors = _DEFAULT) -> list[ValueRow]:
    """Property rows of an interface page, or value rows of an enum page."""
    return read_value_rows(sel.property_rows, doc, sel)


def read_method_blocks(doc: BeautifulSoup, sel: Selectors = _DEFAULT) -> list[MethodBlock]:
    blocks: list[MethodBlock] = []
    for detail in select_rows(sel.method_details, doc):
        blocks.append(
            MethodBlock(
                heading=extract_text(sel.method_name, detail),
                summary=extract_text(sel.method_summary, detail),
                example=extract_text(sel.method_example, detail),
                return_text=extract_text(sel.method_return, detail),
                params=read_value_rows(sel.method_param_rows, detail, sel),
                advanced_params=read_value_rows(sel.method_adv_param_rows, detail, sel),
            )
        )
    return blocks
