"""Pytest configuration and shared test fixtures.

This module provides fixtures for testing the partner catalog scraper,
including listing HTML modeled on the live pages and a fake page session
that replays canned heights and markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from partner_catalog.config import ScrapeConfig
from partner_catalog.extractors import RENDERED_HTML_SCRIPT
from partner_catalog.scroll import SCROLL_HEIGHT_SCRIPT, SCROLL_TO_BOTTOM_SCRIPT

# =============================================================================
# HTML CONTENT FIXTURES
# =============================================================================

PARTNER_DIRECTORY_HTML = """\
<html><body>
<div class="grid">
    <div class="card">
        <h3 class="text-lg mb-1"><a class="more" href="/partners/acme">  Acme Inc. </a></h3>
        <p>Enterprise content services</p>
    </div>
    <div class="card">
        <h3 class="text-lg mb-1"><a class="more" href="/partners/beta">Beta&nbsp;LLC</a></h3>
    </div>
    <div class="card">
        <h3 class="text-lg mb-1"><a class="more" href="/partners/acme-2">ACME</a></h3>
    </div>
    <div class="card">
        <h3 class="text-lg"><a class="more" href="/not-a-listing">Featured</a></h3>
    </div>
    <div class="card">
        <h3 class="text-lg mb-1"><a class="more" href="/partners/smith">Smith &amp; Sons, Ltd.</a></h3>
    </div>
</div>
</body></html>
"""

SOLUTIONS_CATALOG_HTML = """\
<html><body>
<div class="grid">
    <div class="card">
        <span class="partner">ACME</span>
        <h3 class="text-lg mb-1"><a class="more" href="/s/1">Suite X</a></h3>
    </div>
    <div class="card">
        <span class="eyebrow">Smith and Sons</span>
        <h3 class="text-lg mb-1"><a class="more" href="/s/2">Archive Connector</a></h3>
    </div>
    <div class="card">
        <h3 class="text-lg mb-1"><a class="more" href="/s/3">Orphan Tool</a></h3>
    </div>
    <div class="card">
        <p class="subtitle">Gamma Corp</p>
        <h3 class="text-lg mb-1"><a class="more" href="/s/4">Y</a></h3>
    </div>
    <div class="card">
        <span class="partner">Acme, Inc</span>
        <h3 class="text-lg mb-1"><a class="more" href="/s/5">Suite X</a></h3>
    </div>
</div>
</body></html>
"""


@pytest.fixture
def partner_directory_html() -> str:
    """Provide partner directory markup.

    Includes duplicates by normalized name (Acme Inc. / ACME), an &nbsp;,
    an ampersand, and a heading that lacks the listing classes.
    """
    return PARTNER_DIRECTORY_HTML


@pytest.fixture
def solutions_catalog_html() -> str:
    """Provide solutions catalog markup.

    Covers each attribution label class, a card without any label, and
    a repeated solution title for the same partner.
    """
    return SOLUTIONS_CATALOG_HTML


# =============================================================================
# PAGE SESSION FAKE
# =============================================================================


@dataclass
class FakePage:
    """Canned content of one URL."""

    html: str = "<html><body></body></html>"
    heights: list[int] = field(default_factory=lambda: [1000, 1000])


class FakePageSession:
    """In-memory page session for extractor and pipeline tests.

    Each navigation loads a ``FakePage``; height measurements replay its
    ``heights`` list, repeating the last value once exhausted.
    """

    def __init__(
        self,
        pages: dict[str, FakePage] | None = None,
        errors: dict[str, Exception] | None = None,
    ) -> None:
        """Initialize with URL -> page and call -> error mappings.

        ``errors`` keys are either a URL (raised on navigate) or a
        selector (raised on wait_for_selector).
        """
        self.pages = pages or {}
        self.errors = errors or {}
        self.calls: list[tuple[str, str]] = []
        self.scrolls = 0
        self.closed = False
        self._current: FakePage | None = None
        self._height_index = 0

    async def navigate(self, url: str, wait_until: str = "domcontentloaded") -> None:
        """Load a canned page."""
        self.calls.append(("navigate", url))
        if url in self.errors:
            raise self.errors[url]
        self._current = self.pages.get(url, FakePage())
        self._height_index = 0

    async def wait_for_selector(self, selector: str) -> None:
        """Record the wait and optionally fail."""
        self.calls.append(("wait_for_selector", selector))
        if selector in self.errors:
            raise self.errors[selector]

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        """Answer the scripts used by the scroll loader and extractors."""
        assert self._current is not None, "evaluate() before navigate()"
        if expression == SCROLL_HEIGHT_SCRIPT:
            heights = self._current.heights
            height = heights[min(self._height_index, len(heights) - 1)]
            self._height_index += 1
            return height
        if expression == SCROLL_TO_BOTTOM_SCRIPT:
            self.scrolls += 1
            return None
        if expression == RENDERED_HTML_SCRIPT:
            self.calls.append(("evaluate", "html"))
            return self._current.html
        msg = f"Unexpected script: {expression}"
        raise AssertionError(msg)

    async def close(self) -> None:
        """Mark the session closed."""
        self.closed = True

    async def __aenter__(self) -> FakePageSession:
        """Enter async context."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Close on context exit."""
        await self.close()


# =============================================================================
# CONFIG FIXTURES
# =============================================================================


@pytest.fixture
def fast_config() -> ScrapeConfig:
    """Provide a config with no scroll delay and small limits.

    Returns:
        ScrapeConfig suitable for fake sessions.
    """
    return ScrapeConfig(
        partner_directory_url="https://example.test/partners",
        solutions_catalog_url="https://example.test/solutions",
        settle_delay=0.0,
        max_scroll_iterations=5,
        scroll_timeout=60.0,
    )


@pytest.fixture
def fake_session(
    fast_config: ScrapeConfig,
    partner_directory_html: str,
    solutions_catalog_html: str,
) -> FakePageSession:
    """Provide a fake session serving both listings.

    Returns:
        FakePageSession keyed by the fast_config URLs.
    """
    return FakePageSession(
        pages={
            fast_config.partner_directory_url: FakePage(
                html=partner_directory_html, heights=[800, 1600, 1600]
            ),
            fast_config.solutions_catalog_url: FakePage(
                html=solutions_catalog_html, heights=[900, 900]
            ),
        }
    )
