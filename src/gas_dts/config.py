"""Configuration for the Apps Script reference scraper."""

from __future__ import annotations

from dataclasses import dataclass, field

DOCS_BASE = "https://developers.google.com"
DOCS_PATH = "/apps-script/reference"

# Root namespace wrapping every generated service
AMBIENT_NAMESPACE = "GoogleAppsScript"

OUTPUT_PATH = "index.d.ts"

THROTTLE_SECONDS = 1.0  # delay after each service (be nice to the host)
REQUEST_TIMEOUT = 30.0


# ---------------------------------------------------------------------------
# Selector contract
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Selectors:
    """CSS selectors used to query the reference pages."""

    # Root listing
    service_path: str = (
        ".devsite-nav-expandable ul.devsite-nav-section > "
        "li.devsite-nav-item:first-child > a[href*='/apps-script/reference/']"
    )

    # Service page
    service_name: str = "h1.devsite-page-title"
    service_desc: str = ".devsite-article-body p:first-of-type"
    service_class_rows: str = "#classes + .toc .member tr:not(:first-child)"
    service_class_desc: str = "td:nth-child(2)"

    # Table cells shared by every row kind
    member_name: str = "td:first-child"
    member_type: str = "td:nth-child(2)"
    member_desc: str = "td:nth-child(3)"
    member_link: str = "td:first-child a"

    # Member detail page
    property_rows: str = ".members.property tr:not(:first-child)"
    method_details: str = ".function.doc"
    method_name: str = "h3"
    method_param_rows: str = ".function.param tr:not(:first-child)"
    method_adv_param_rows: str = ".function.advancedparam tr:not(:first-child)"
    method_return: str = "[id*='return'] + p"
    method_summary: str = "div > p"
    method_example: str = "div > pre"


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@dataclass
class Settings:
    base_url: str = DOCS_BASE
    root_path: str = DOCS_PATH
    output: str = OUTPUT_PATH
    namespace: str = AMBIENT_NAMESPACE
    delay: float = THROTTLE_SECONDS
    timeout: float = REQUEST_TIMEOUT
    limit: int | None = None  # None → every discovered service
    typed: bool = False  # include {type} in @param / @return tags
    verbose: bool = False
    selectors: Selectors = field(default_factory=Selectors)

    @classmethod
    def from_args(cls, args) -> "Settings":
        """Build settings from an ``argparse.Namespace``."""
        return cls(
            base_url=args.base_url,
            root_path=args.root_path,
            output=args.output,
            namespace=args.namespace,
            delay=args.delay,
            timeout=args.timeout,
            limit=args.limit,
            typed=args.typed,
            verbose=args.verbose,
        )
