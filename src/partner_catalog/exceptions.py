"""Custom exceptions for the partner catalog scraper.

Provides a hierarchy of exceptions for different error conditions:
- ScraperError: Base exception for all scraper errors
- NavigationError: A source page could not be loaded
- SelectorTimeoutError: The listing marker never appeared
- StabilizationTimeoutError: Lazy-loaded content never stopped growing
- PlaywrightNotAvailableError: Playwright package not installed
- BrowserNotInstalledError: Browser binaries not installed
"""


class ScraperError(Exception):
    """Base exception for scraper errors."""


class NavigationError(ScraperError):
    """A source URL was unreachable or did not finish loading.

    Attributes:
        url: The URL that failed to load.
    """

    def __init__(self, url: str, message: str) -> None:
        """Initialize NavigationError.

        Args:
            url: The URL that failed to load.
            message: Description of what went wrong.
        """
        self.url = url
        super().__init__(f"Failed to load {url}: {message}")


class SelectorTimeoutError(ScraperError):
    """The listing marker element did not appear in time.

    Usually means the page structure changed or the listing is empty.

    Attributes:
        selector: The CSS selector that was awaited.
        timeout: Seconds waited before giving up.
    """

    def __init__(self, selector: str, timeout: float) -> None:
        """Initialize SelectorTimeoutError.

        Args:
            selector: The CSS selector that was awaited.
            timeout: Seconds waited before giving up.
        """
        self.selector = selector
        self.timeout = timeout
        super().__init__(f"Selector {selector!r} did not appear within {timeout:g}s")


class StabilizationTimeoutError(ScraperError):
    """Scrolling never reached a stable content height.

    Attributes:
        iterations: Scroll steps performed.
        elapsed: Seconds spent scrolling.
    """

    def __init__(self, iterations: int, elapsed: float) -> None:
        """Initialize StabilizationTimeoutError.

        Args:
            iterations: Scroll steps performed.
            elapsed: Seconds spent scrolling.
        """
        self.iterations = iterations
        self.elapsed = elapsed
        super().__init__(
            f"Page content did not stabilize after {iterations} scrolls ({elapsed:.1f}s)"
        )


class PlaywrightNotAvailableError(ScraperError):
    """Playwright package not installed."""

    def __init__(self) -> None:
        """Initialize PlaywrightNotAvailableError."""
        super().__init__("Playwright not installed. Install with: pip install playwright")


class BrowserNotInstalledError(ScraperError):
    """Playwright browser binaries not installed.

    Raised when playwright is installed but browser binaries are missing.
    """

    def __init__(self) -> None:
        """Initialize BrowserNotInstalledError."""
        super().__init__("Browser not installed. Run: playwright install chromium")
