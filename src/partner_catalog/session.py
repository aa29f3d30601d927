"""Page session abstraction over a headless browser.

The pipeline needs four operations from a browser page: navigate, wait
for a selector, evaluate a read-only script, and close. ``PageSession``
captures them as a Protocol so extractors and the orchestrator can be
driven by a fake in tests; ``PlaywrightSession`` is the live
implementation.

Example:
    async with PlaywrightSession() as session:
        await session.navigate("https://example.com")
        await session.wait_for_selector("h3 a.more")
        html = await session.evaluate("() => document.documentElement.outerHTML")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import structlog

from .config import BROWSER_ARGS, NAVIGATION_WAIT_UNTIL, ScrapeConfig
from .exceptions import (
    BrowserNotInstalledError,
    NavigationError,
    PlaywrightNotAvailableError,
    SelectorTimeoutError,
)
from .utils.retry import page_retry

if TYPE_CHECKING:
    from types import TracebackType

logger = structlog.get_logger(__name__)


@runtime_checkable
class PageSession(Protocol):
    """Protocol defining the page session interface."""

    async def navigate(self, url: str, wait_until: str = NAVIGATION_WAIT_UNTIL) -> None:
        """Load ``url`` and wait for the given load state.

        Raises:
            NavigationError: If the page cannot be loaded.
        """
        ...

    async def wait_for_selector(self, selector: str) -> None:
        """Suspend until an element matching ``selector`` is attached to the DOM.

        Raises:
            SelectorTimeoutError: If it does not appear in time.
        """
        ...

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        """Run a read-only script against the rendered page and return its value."""
        ...

    async def close(self) -> None:
        """Release resources."""
        ...


class PlaywrightSession:
    """Single-page Chromium session driven by Playwright.

    Features:
    - Lazy browser initialization
    - Bounded retry with exponential backoff on navigation and selector waits
    - Playwright errors translated into scraper exceptions
    - Automatic resource cleanup
    """

    def __init__(self, config: ScrapeConfig | None = None) -> None:
        """Initialize PlaywrightSession.

        Args:
            config: Optional scrape configuration. Uses defaults if not provided.
        """
        self._config = config or ScrapeConfig()
        self._playwright: Any = None
        self._browser: Any = None
        self._page: Any = None
        self._retry = page_retry(self._config.max_retries)

    async def __aenter__(self) -> PlaywrightSession:
        """Launch the browser on context entry."""
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the browser on context exit."""
        await self.close()

    async def open(self) -> None:
        """Launch Chromium and open a page if not already open.

        Raises:
            PlaywrightNotAvailableError: If playwright package not installed.
            BrowserNotInstalledError: If browser binaries not installed.
        """
        if self._page is not None:
            return

        try:
            from playwright.async_api import async_playwright
        except ImportError as e:
            raise PlaywrightNotAvailableError() from e

        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self._config.headless,
                args=list(BROWSER_ARGS),
            )
            self._page = await self._browser.new_page()
        except Exception as e:
            await self.close()
            if "Executable doesn't exist" in str(e):
                raise BrowserNotInstalledError() from e
            raise
        logger.info("Browser initialized", engine="chromium", headless=self._config.headless)

    async def close(self) -> None:
        """Close the browser and release resources."""
        self._page = None
        if self._browser:
            await self._browser.close()
            self._browser = None
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    async def navigate(self, url: str, wait_until: str = NAVIGATION_WAIT_UNTIL) -> None:
        """Navigate the page, retrying transient failures."""
        await self._retry(self._goto)(url, wait_until)

    async def wait_for_selector(self, selector: str) -> None:
        """Wait for ``selector``, retrying transient timeouts."""
        await self._retry(self._wait_for)(selector)

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        """Evaluate a script in the page and return its JSON-compatible value."""
        page = self._require_page()
        return await page.evaluate(expression, arg)

    async def _goto(self, url: str, wait_until: str) -> None:
        from playwright.async_api import Error as PlaywrightError

        page = self._require_page()
        logger.info("Navigating", url=url, wait_until=wait_until)
        try:
            response = await page.goto(
                url,
                wait_until=wait_until,
                timeout=self._config.navigation_timeout * 1000,  # Playwright uses ms
            )
        except PlaywrightError as e:
            raise NavigationError(url, str(e)) from e
        if response is not None:
            logger.debug("Navigation finished", url=url, status=response.status)

    async def _wait_for(self, selector: str) -> None:
        from playwright.async_api import Error as PlaywrightError

        page = self._require_page()
        try:
            await page.wait_for_selector(
                selector,
                state="attached",
                timeout=self._config.selector_timeout * 1000,
            )
        except PlaywrightError as e:
            raise SelectorTimeoutError(selector, self._config.selector_timeout) from e

    def _require_page(self) -> Any:
        if self._page is None:
            msg = "Session not open. Use as async context manager."
            raise RuntimeError(msg)
        return self._page
