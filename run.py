#!/usr/bin/env python3
"""Quick-run script for the Partner Catalog Scraper.

This runs the complete pipeline:
1. Scrape the partner directory
2. Scrape the partner solutions catalog
3. Join solutions to partners by normalized name
4. Print the JSON listing to stdout

Usage:
    python run.py > partners.json

    # Slower scrolling for slow connections:
    PARTNER_CATALOG_SETTLE_DELAY=1.5 python run.py
"""

from pathlib import Path

# Add src to path for development
import sys

sys.path.insert(0, str(Path(__file__).parent / "src"))

from partner_catalog.cli import main

if __name__ == "__main__":
    main()
