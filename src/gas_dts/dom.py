"""DOM query helpers over BeautifulSoup trees."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

Context = BeautifulSoup | Tag


def extract_text(selector: str, context: Context) -> str:
    """Stripped text of the first element matching *selector*, or ``""``."""
    el = context.select_one(selector)
    if el is None:
        return ""
    return el.get_text().strip()


def extract_links(selector: str, context: Context) -> list[str]:
    """``href`` values of the anchors matching *selector*, in document order."""
    links: list[str] = []
    for a in context.select(selector):
        href = a.get("href")
        if href:
            links.append(href)
    return links


def select_rows(selector: str, context: Context) -> list[Tag]:
    return list(context.select(selector))


def parse_html(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")
