"""Partner catalog pipeline orchestration.

Runs the two extractions in one browser session, strictly one after the
other, then joins and serializes the result:

1. Partner directory → partner records
2. Solutions catalog → solution records
3. Join by normalized partner name
4. Serialize to JSON

Usage:
    pipeline = PartnerCatalogPipeline()
    records = await pipeline.run()
    print(serialize_output(records))
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
import json
from typing import TYPE_CHECKING

from rich.console import Console
import structlog

from .config import ScrapeConfig
from .extractors import PartnerExtractor, SolutionExtractor
from .join import JoinEngine
from .session import PlaywrightSession

if TYPE_CHECKING:
    from .models import OutputRecord
    from .session import PageSession

    SessionFactory = Callable[[ScrapeConfig], AbstractAsyncContextManager[PageSession]]

logger = structlog.get_logger(__name__)

console = Console(stderr=True)


def serialize_output(records: list[OutputRecord]) -> str:
    """Render output records as the published JSON document.

    Args:
        records: Joined records; each has at least one solution.

    Returns:
        Pretty-printed JSON array using the ``partnerName``/``solutions`` keys.
    """
    payload = [record.model_dump(by_alias=True) for record in records]
    return json.dumps(payload, indent=2, ensure_ascii=False)


class PartnerCatalogPipeline:
    """Scrape both listings and join them.

    The page session is injected through ``session_factory`` so the
    pipeline can run against a fake session in tests.

    Usage:
        pipeline = PartnerCatalogPipeline(ScrapeConfig(settle_delay=1.0))
        records = await pipeline.run()
    """

    def __init__(
        self,
        config: ScrapeConfig | None = None,
        session_factory: SessionFactory | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: Scrape configuration. Uses defaults if not provided.
            session_factory: Builds the page session from the config.
                Defaults to a Playwright Chromium session.
        """
        self.config = config or ScrapeConfig()
        self._session_factory = session_factory or PlaywrightSession
        self.partner_extractor = PartnerExtractor(self.config)
        self.solution_extractor = SolutionExtractor(self.config)

    async def run(self) -> list[OutputRecord]:
        """Run extraction and join.

        The session is released right after the join, whether or not the
        run succeeds, so the browser is already closed when the records
        are serialized by ``run_pipeline``. Any error aborts the run; no
        partial result is returned.

        Returns:
            Joined output records.
        """
        async with self._session_factory(self.config) as session:
            console.print("[yellow]Scraping partner directory...[/]")
            partners = await self.partner_extractor.extract(session)
            console.print(f"  Found {len(partners)} partners")

            console.print("[yellow]Scraping partner solutions catalog...[/]")
            solutions = await self.solution_extractor.extract(session)
            console.print(f"  Found {len(solutions)} solutions")

            engine = JoinEngine()
            records = engine.join(partners, solutions)

        console.print(f"[bold green]✓ Joined {len(records)} partners with solutions[/]")
        if engine.stats["unattributed_skipped"]:
            console.print(
                f"  [yellow]{engine.stats['unattributed_skipped']} solutions "
                "had no partner and were skipped[/]"
            )
        return records


async def run_pipeline(
    config: ScrapeConfig | None = None,
    session_factory: SessionFactory | None = None,
) -> str:
    """Run the pipeline and return the serialized JSON document.

    Args:
        config: Scrape configuration. Uses defaults if not provided.
        session_factory: Optional page session factory.

    Returns:
        JSON document ready to be written to stdout.
    """
    pipeline = PartnerCatalogPipeline(config, session_factory)
    records = await pipeline.run()
    return serialize_output(records)
