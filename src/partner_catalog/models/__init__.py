"""Pydantic models for the partner catalog pipeline.

This package contains:
- Scraped records (partner directory entries, catalog entries)
- Join output records
"""

from partner_catalog.models.records import (
    OutputRecord,
    PartnerRecord,
    SolutionRecord,
)

__all__ = [
    "OutputRecord",
    "PartnerRecord",
    "SolutionRecord",
]
