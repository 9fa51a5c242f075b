"""Command-line entry point (``gas-dts`` / ``python -m gas_dts.cli``)."""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .config import (
    AMBIENT_NAMESPACE,
    DOCS_BASE,
    DOCS_PATH,
    OUTPUT_PATH,
    REQUEST_TIMEOUT,
    THROTTLE_SECONDS,
    Settings,
)
from .emitter import FileEmitter
from .errors import GasDtsError
from .fetch import DocumentSource
from .pipeline import Pipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gas-dts",
        description="Generate TypeScript declarations from the Apps Script reference.",
    )
    p.add_argument("--base-url", default=DOCS_BASE, help=f"Documentation host (default {DOCS_BASE})")
    p.add_argument("--root-path", default=DOCS_PATH, help=f"Reference listing path (default {DOCS_PATH})")
    p.add_argument("-o", "--output", default=OUTPUT_PATH, help=f"Declaration file to write (default {OUTPUT_PATH})")
    p.add_argument("--namespace", default=AMBIENT_NAMESPACE, help=f"Root ambient namespace (default {AMBIENT_NAMESPACE})")
    p.add_argument("--delay", type=float, default=THROTTLE_SECONDS, help=f"Seconds to wait after each service (default {THROTTLE_SECONDS})")
    p.add_argument("--timeout", type=float, default=REQUEST_TIMEOUT, help=f"HTTP timeout in seconds (default {REQUEST_TIMEOUT})")
    p.add_argument("--limit", type=int, default=None, help="Only process the first N discovered services")
    p.add_argument("--typed", action="store_true", help="Include types in @param/@return tags")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def run(settings: Settings) -> int:
    source = DocumentSource(settings.base_url, timeout=settings.timeout)
    pipeline = Pipeline(
        fetch=source,
        emit=FileEmitter(settings.output),
        root_path=settings.root_path,
        namespace=settings.namespace,
        delay=settings.delay,
        limit=settings.limit,
        typed=settings.typed,
        selectors=settings.selectors,
    )
    try:
        root = pipeline.run()
    except GasDtsError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Generated %d service namespace(s) into %s", len(root.members), settings.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    return run(Settings.from_args(args))


if __name__ == "__main__":
    sys.exit(main())
