"""Test suite for partner-catalog-scraper.

This package contains tests for all modules:
- test_normalizer: Partner name join keys
- test_join: Grouping, ordering and drop policies
- test_parser: Listing parsing and partner attribution
- test_scroll: Lazy-load scroll settling
- test_extractors / test_pipeline: Extraction flow with a fake page session
- test_session: Playwright session error translation and retry
"""
