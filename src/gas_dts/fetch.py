"""Document retrieval for reference pages."""

from __future__ import annotations

import logging
from urllib.parse import urlencode, urljoin

import requests
from bs4 import BeautifulSoup

from . import __description__, __project__, __version__
from .config import DOCS_BASE, REQUEST_TIMEOUT
from .dom import parse_html

logger = logging.getLogger(__name__)

USER_AGENT = f"name {__project__}; version {__version__}; about {__description__};"


def build_url(
    base: str,
    path: str,
    hash: str | None = None,
    parameters: dict[str, str] | None = None,
) -> str:
    url = urljoin(base, path)
    if parameters:
        url = f"{url.split('?', 1)[0]}?{urlencode(parameters)}"
    if hash:
        url = f"{url.split('#', 1)[0]}#{hash}"
    return url


class DocumentSource:
    """Fetches pages relative to a base URL and parses them.

    Usage::

        source = DocumentSource("https://developers.google.com")
        doc = source.get("/apps-script/reference")
        if doc is None:
            ...  # non-200 or transport error
    """

    def __init__(
        self,
        base_url: str = DOCS_BASE,
        timeout: float = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def url_for(self, path: str) -> str:
        return build_url(self.base_url, path)

    def get(
        self,
        path: str,
        hash: str | None = None,
        parameters: dict[str, str] | None = None,
    ) -> BeautifulSoup | None:
        """GET *path* and return the parsed document, or ``None`` on failure."""
        url = build_url(self.base_url, path, hash=hash, parameters=parameters)
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            return None

        if resp.status_code != 200:
            logger.debug("GET %s returned %d", url, resp.status_code)
            return None

        # Reference pages are UTF-8; requests falls back to latin-1 for text/html
        resp.encoding = "utf-8"
        return parse_html(resp.text)

    __call__ = get
