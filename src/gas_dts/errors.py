"""Exceptions raised by gas-dts."""

from __future__ import annotations


class GasDtsError(Exception):
    """Base class for all gas-dts errors."""


class FetchError(GasDtsError):
    """A page the run cannot continue without could not be fetched."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Failed to GET {url}")
        self.url = url
