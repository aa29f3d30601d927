"""OpenText Partner Catalog Scraper.

Scrapes the OpenText partner directory and partner solutions catalog,
joins them by normalized partner name, and emits one JSON listing of
partners with the solutions attributed to them.

Usage:
    from partner_catalog import PartnerCatalogPipeline, serialize_output
    import asyncio

    # Quick run (returns the JSON document)
    document = asyncio.run(run_pipeline())

    # Or with more control
    pipeline = PartnerCatalogPipeline(ScrapeConfig(settle_delay=1.0))
    records = asyncio.run(pipeline.run())
    print(serialize_output(records))

    # Join already-scraped records without a browser
    records = join_partner_solutions(partners, solutions)
"""

# =============================================================================
# CONFIGURATION
# =============================================================================
from .attribution import AttributionResolver
from .config import ScrapeConfig

# =============================================================================
# EXCEPTIONS
# =============================================================================
from .exceptions import (
    BrowserNotInstalledError,
    NavigationError,
    PlaywrightNotAvailableError,
    ScraperError,
    SelectorTimeoutError,
    StabilizationTimeoutError,
)

# =============================================================================
# EXTRACTION
# =============================================================================
from .extractors import (
    ListingExtractor,
    PartnerExtractor,
    SolutionExtractor,
    extract_partners,
    extract_solutions,
)

# =============================================================================
# JOIN
# =============================================================================
from .join import JoinEngine, PartnerGroup, join_partner_solutions
from .models import OutputRecord, PartnerRecord, SolutionRecord
from .normalizer import normalize_partner_name
from .parser import ListingParser

# =============================================================================
# PIPELINE
# =============================================================================
from .pipeline import PartnerCatalogPipeline, run_pipeline, serialize_output
from .scroll import ScrollLoader, ScrollOutcome
from .session import PageSession, PlaywrightSession

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ScrapeConfig",
    # Models
    "OutputRecord",
    "PartnerRecord",
    "SolutionRecord",
    # Session
    "PageSession",
    "PlaywrightSession",
    # Extraction
    "AttributionResolver",
    "ListingExtractor",
    "ListingParser",
    "PartnerExtractor",
    "ScrollLoader",
    "ScrollOutcome",
    "SolutionExtractor",
    "extract_partners",
    "extract_solutions",
    # Join
    "JoinEngine",
    "PartnerGroup",
    "join_partner_solutions",
    "normalize_partner_name",
    # Pipeline
    "PartnerCatalogPipeline",
    "run_pipeline",
    "serialize_output",
    # Exceptions
    "BrowserNotInstalledError",
    "NavigationError",
    "PlaywrightNotAvailableError",
    "ScraperError",
    "SelectorTimeoutError",
    "StabilizationTimeoutError",
]
