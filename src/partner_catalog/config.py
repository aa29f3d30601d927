"""Configuration for the OpenText partner directory and solutions catalog.

Source URLs and selectors were taken from the live listing pages. Every
setting can be overridden through ``PARTNER_CATALOG_*`` environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
import os

PARTNER_DIRECTORY_URL = "https://www.opentext.com/partners/partner-directory"
SOLUTIONS_CATALOG_URL = (
    "https://www.opentext.com/products-and-solutions/partners-and-alliances/"
    "partner-solutions-catalog"
)

# Both listings render each entry title as this anchor
LISTING_MARKER_SELECTOR = "h3.text-lg.mb-1 a.more"

# Nearest enclosing container of a catalog entry, most specific first
ATTRIBUTION_CONTAINERS = (".card", "div")

# Labels that may carry the owning partner's name; the first in document order wins
ATTRIBUTION_CANDIDATES = (".partner", ".eyebrow", ".subtitle")

# Scroll settling
SETTLE_DELAY_SECONDS = 0.5
MAX_SCROLL_ITERATIONS = 200
SCROLL_TIMEOUT_SECONDS = 120.0

# Page session
NAVIGATION_TIMEOUT_SECONDS = 30.0
SELECTOR_TIMEOUT_SECONDS = 30.0
NAVIGATION_WAIT_UNTIL = "domcontentloaded"
MAX_RETRIES = 3

BROWSER_ARGS = ("--no-sandbox", "--disable-setuid-sandbox")

ENV_PREFIX = "PARTNER_CATALOG_"


@dataclass(frozen=True)
class ScrapeConfig:
    """Settings for a single scrape run.

    Attributes:
        partner_directory_url: Partner directory listing page.
        solutions_catalog_url: Partner solutions catalog listing page.
        listing_selector: Selector of the per-entry marker on both pages.
        settle_delay: Seconds to wait after each scroll step.
        max_scroll_iterations: Upper bound on scroll steps per page.
        scroll_timeout: Wall-clock bound on scroll settling, in seconds.
        strict_scroll: Raise instead of warning when a page never settles.
        navigation_timeout: Page load timeout in seconds.
        selector_timeout: Listing marker wait timeout in seconds.
        max_retries: Attempts for navigation and selector waits.
        headless: Run the browser without a window.
    """

    partner_directory_url: str = PARTNER_DIRECTORY_URL
    solutions_catalog_url: str = SOLUTIONS_CATALOG_URL
    listing_selector: str = LISTING_MARKER_SELECTOR
    attribution_containers: tuple[str, ...] = field(default=ATTRIBUTION_CONTAINERS)
    attribution_candidates: tuple[str, ...] = field(default=ATTRIBUTION_CANDIDATES)
    settle_delay: float = SETTLE_DELAY_SECONDS
    max_scroll_iterations: int = MAX_SCROLL_ITERATIONS
    scroll_timeout: float = SCROLL_TIMEOUT_SECONDS
    strict_scroll: bool = False
    navigation_timeout: float = NAVIGATION_TIMEOUT_SECONDS
    selector_timeout: float = SELECTOR_TIMEOUT_SECONDS
    max_retries: int = MAX_RETRIES
    headless: bool = True

    @classmethod
    def from_env(cls, **overrides: object) -> ScrapeConfig:
        """Build a config from ``PARTNER_CATALOG_*`` variables.

        Explicit keyword overrides win over the environment.

        Example:
            PARTNER_CATALOG_SETTLE_DELAY=1.0 -> settle_delay=1.0
        """
        values: dict[str, object] = {}
        for fld in fields(cls):
            name, default = fld.name, fld.default
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is None or raw == "":
                continue
            values[name] = _coerce(raw, default)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def _coerce(raw: str, default: object) -> object:
    """Convert an environment string to the type of the field default."""
    if isinstance(default, bool):
        return raw.strip().lower() in ("1", "true", "yes")
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, float):
        return float(raw)
    if isinstance(default, tuple):
        return tuple(part.strip() for part in raw.split(",") if part.strip())
    return raw
