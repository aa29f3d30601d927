"""HTML parsing of the partner directory and solutions catalog listings.

Both pages mark each entry with the same anchor (``h3.text-lg.mb-1 a.more``).
On the directory the anchor text is the partner name; in the catalog it is
the solution title and the partner is recovered by ``AttributionResolver``.
"""

from bs4 import BeautifulSoup

from .attribution import AttributionResolver
from .config import LISTING_MARKER_SELECTOR
from .models import PartnerRecord, SolutionRecord


class ListingParser:
    """Parser for rendered listing page HTML."""

    def __init__(
        self,
        selector: str = LISTING_MARKER_SELECTOR,
        resolver: AttributionResolver | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            selector: CSS selector of the per-entry listing marker.
            resolver: Partner attribution strategy for catalog entries.
        """
        self.selector = selector
        self.resolver = resolver or AttributionResolver()

    def parse_partners(self, html: str) -> list[PartnerRecord]:
        """Extract partner directory entries in document order.

        Duplicate names are kept; the join groups them later.
        """
        soup = BeautifulSoup(html, "html.parser")
        return [
            PartnerRecord(partner_name=marker.get_text().strip())
            for marker in soup.select(self.selector)
        ]

    def parse_solutions(self, html: str) -> list[SolutionRecord]:
        """Extract catalog entries with their best-effort partner name."""
        soup = BeautifulSoup(html, "html.parser")
        return [
            SolutionRecord(
                solution_title=marker.get_text().strip(),
                partner_name=self.resolver.resolve(marker),
            )
            for marker in soup.select(self.selector)
        ]
