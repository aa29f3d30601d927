"""Listing extractors for the partner directory and solutions catalog.

Each extractor loads its page in the shared session, waits for the
listing marker, scrolls until lazy loading settles, and parses the
rendered HTML into records.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

import structlog

from .attribution import AttributionResolver
from .config import ScrapeConfig
from .exceptions import StabilizationTimeoutError
from .models import PartnerRecord, SolutionRecord
from .parser import ListingParser
from .scroll import ScrollLoader

if TYPE_CHECKING:
    from .session import PageSession

logger = structlog.get_logger(__name__)

RENDERED_HTML_SCRIPT = "() => document.documentElement.outerHTML"

RecordT = TypeVar("RecordT")


class ListingExtractor(ABC, Generic[RecordT]):
    """Base extractor: navigate, wait, settle, parse.

    Subclasses set ``name`` and implement ``url`` and ``parse``.
    """

    name = "listing"

    def __init__(
        self,
        config: ScrapeConfig | None = None,
        parser: ListingParser | None = None,
        scroll_loader: ScrollLoader | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            config: Scrape configuration. Uses defaults if not provided.
            parser: Listing parser. Built from ``config`` if not provided.
            scroll_loader: Scroll loader. Built from ``config`` if not provided.
        """
        self.config = config or ScrapeConfig()
        self.parser = parser or ListingParser(
            selector=self.config.listing_selector,
            resolver=AttributionResolver(
                containers=self.config.attribution_containers,
                candidates=self.config.attribution_candidates,
            ),
        )
        self.scroll_loader = scroll_loader or ScrollLoader(
            settle_delay=self.config.settle_delay,
            max_iterations=self.config.max_scroll_iterations,
            timeout=self.config.scroll_timeout,
        )

    @property
    @abstractmethod
    def url(self) -> str:
        """Listing page to load."""

    @abstractmethod
    def parse(self, html: str) -> list[RecordT]:
        """Parse rendered listing HTML into records."""

    async def extract(self, session: PageSession) -> list[RecordT]:
        """Load the listing page in ``session`` and return its records.

        Args:
            session: Open page session. Navigated away from its current page.

        Returns:
            Records in document order. May be empty.

        Raises:
            NavigationError: If the page cannot be loaded.
            SelectorTimeoutError: If no listing entry appears.
            StabilizationTimeoutError: If scrolling never settles and
                ``strict_scroll`` is enabled.
        """
        await session.navigate(self.url)
        await session.wait_for_selector(self.config.listing_selector)

        outcome = await self.scroll_loader.settle(session)
        if outcome.timed_out and self.config.strict_scroll:
            raise StabilizationTimeoutError(outcome.iterations, outcome.elapsed)

        html = await session.evaluate(RENDERED_HTML_SCRIPT)
        records = self.parse(html)

        logger.info(
            "Extracted listing",
            listing=self.name,
            records=len(records),
            scrolls=outcome.iterations,
            stabilized=outcome.stabilized,
        )
        return records


class PartnerExtractor(ListingExtractor[PartnerRecord]):
    """Extract partner names from the partner directory."""

    name = "partners"

    @property
    def url(self) -> str:
        return self.config.partner_directory_url

    def parse(self, html: str) -> list[PartnerRecord]:
        return self.parser.parse_partners(html)


class SolutionExtractor(ListingExtractor[SolutionRecord]):
    """Extract solution titles and their partners from the solutions catalog."""

    name = "solutions"

    @property
    def url(self) -> str:
        return self.config.solutions_catalog_url

    def parse(self, html: str) -> list[SolutionRecord]:
        return self.parser.parse_solutions(html)


async def extract_partners(
    session: PageSession, config: ScrapeConfig | None = None
) -> list[PartnerRecord]:
    """Extract the partner directory with a default extractor."""
    return await PartnerExtractor(config).extract(session)


async def extract_solutions(
    session: PageSession, config: ScrapeConfig | None = None
) -> list[SolutionRecord]:
    """Extract the solutions catalog with a default extractor."""
    return await SolutionExtractor(config).extract(session)
