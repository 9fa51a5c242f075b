"""Pipeline driver: discovery → per-service build → emit → throttle."""

from __future__ import annotations

import logging
import time
from enum import Enum, auto
from typing import Callable

from bs4 import BeautifulSoup

from .assembler import assemble_root, assemble_service, namespace_name
from .builder import build_service
from .config import AMBIENT_NAMESPACE, DOCS_PATH, THROTTLE_SECONDS, Selectors
from .errors import FetchError
from .model import NamespaceNode
from .reader import read_service, read_service_paths

logger = logging.getLogger(__name__)

Fetch = Callable[[str], "BeautifulSoup | None"]
Emit = Callable[[NamespaceNode], object]
Sleep = Callable[[float], object]


class State(Enum):
    Idle = auto()
    Discovering = auto()
    ProcessingService = auto()
    Emitting = auto()
    Throttling = auto()
    Done = auto()
    Failed = auto()


class Pipeline:
    """Sequential generator run over every discovered service.

    Collaborators are injected so tests can run against fixture documents::

        pipeline = Pipeline(fetch=DocumentSource(), emit=FileEmitter("index.d.ts"))
        root = pipeline.run()

    *fetch* maps a path to a parsed document (or ``None``), *emit* receives
    the root namespace after each service, *sleep* implements the throttle.
    """

    def __init__(
        self,
        fetch: Fetch,
        emit: Emit,
        sleep: Sleep = time.sleep,
        root_path: str = DOCS_PATH,
        namespace: str = AMBIENT_NAMESPACE,
        delay: float = THROTTLE_SECONDS,
        limit: int | None = None,
        typed: bool = False,
        selectors: Selectors | None = None,
        url_for: Callable[[str], str] | None = None,
    ) -> None:
        self.fetch = fetch
        self.emit = emit
        self.sleep = sleep
        self.root_path = root_path
        self.namespace = namespace
        self.delay = delay
        self.limit = limit
        self.typed = typed
        self.selectors = selectors or Selectors()
        self.url_for = url_for or getattr(fetch, "url_for", None) or (lambda path: path)

        self.state = State.Idle
        self.index = -1  # service being processed
        self.services: list[NamespaceNode] = []

    # -- Stages ---------------------------------------------------------

    def discover(self) -> list[str]:
        self.state = State.Discovering
        doc = self._fetch_required(self.root_path)
        paths = read_service_paths(doc, self.selectors)
        logger.info(
            "Found the following service paths to scrape:\n%s",
            "\n".join(f" - {p}" for p in paths),
        )
        if self.limit is not None:
            paths = paths[: self.limit]
        return paths

    def process_service(self, path: str) -> NamespaceNode:
        self.state = State.ProcessingService
        doc = self._fetch_required(path)
        service = read_service(doc, path, self.selectors)
        logger.info("Generating types for the %s Service", namespace_name(service.name))

        env = build_service(doc, self.fetch, self.selectors, typed=self.typed)
        node = assemble_service(service, env)
        logger.debug(
            "%s: %d members, %d option types",
            node.name, len(env.members), len(env.option_types()),
        )
        return node

    def run(self) -> NamespaceNode:
        """Process every service in discovery order and return the root namespace."""
        try:
            paths = self.discover()
            for i, path in enumerate(paths):
                self.index = i
                self.services.append(self.process_service(path))

                self.state = State.Emitting
                self.emit(self.root())

                self.state = State.Throttling
                self.sleep(self.delay)
        except FetchError:
            self.state = State.Failed
            raise

        self.state = State.Done
        return self.root()

    # -- Helpers --------------------------------------------------------

    def root(self) -> NamespaceNode:
        return assemble_root(self.services, self.namespace)

    def _fetch_required(self, path: str) -> BeautifulSoup:
        doc = self.fetch(path)
        if doc is None:
            raise FetchError(self.url_for(path))
        return doc
