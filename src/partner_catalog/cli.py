"""Command-line interface for the partner catalog scraper.

Scrapes the partner directory and the partner solutions catalog, joins
them by normalized partner name and prints the result as JSON.

Only the JSON document goes to stdout. Progress, logs and errors go to
stderr. On any failure nothing is printed to stdout and the exit status
is 1.
"""

import argparse
import asyncio
import logging
from pathlib import Path
import sys

from dotenv import load_dotenv
from rich.console import Console
import structlog

from .config import ScrapeConfig
from .exceptions import BrowserNotInstalledError, PlaywrightNotAvailableError, ScraperError
from .pipeline import run_pipeline

console = Console(stderr=True)


def _configure_logging(verbosity: int) -> None:
    """Route structlog and stdlib logging to stderr.

    Args:
        verbosity: 0 for warnings only, 1 for info, 2 or more for debug.
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(level=level, stream=sys.stderr, format="%(name)s: %(message)s")
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="partner-catalog",
        description="Scrape the partner directory and solutions catalog into one JSON listing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  partner-catalog                         # Print JSON to stdout
  partner-catalog -o partners.json        # Write JSON to a file
  partner-catalog --strict-scroll -v      # Fail if a listing never settles

Optional environment variables (also read from .env):
  PARTNER_CATALOG_PARTNER_DIRECTORY_URL   - Partner directory page
  PARTNER_CATALOG_SOLUTIONS_CATALOG_URL   - Solutions catalog page
  PARTNER_CATALOG_SETTLE_DELAY            - Seconds between scroll steps
  PARTNER_CATALOG_MAX_SCROLL_ITERATIONS   - Scroll step limit per page
  PARTNER_CATALOG_MAX_RETRIES             - Attempts for navigation and waits
        """,
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the JSON document to this file instead of stdout",
    )
    parser.add_argument(
        "--settle-delay",
        type=float,
        help="Seconds to wait after each scroll step (default: 0.5)",
    )
    parser.add_argument(
        "--max-scrolls",
        type=int,
        help="Maximum scroll steps per listing page (default: 200)",
    )
    parser.add_argument(
        "--strict-scroll",
        action="store_true",
        default=None,
        help="Abort when a listing does not stop growing within the scroll limits",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )
    return parser


def _write_output(document: str, output: Path | None) -> None:
    """Write the JSON document to a file or stdout."""
    if output is None:
        sys.stdout.write(document + "\n")
        sys.stdout.flush()
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document + "\n", encoding="utf-8")
    console.print(f"[green]Saved JSON to: {output}[/]")


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    load_dotenv()

    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    config = ScrapeConfig.from_env(
        settle_delay=args.settle_delay,
        max_scroll_iterations=args.max_scrolls,
        strict_scroll=args.strict_scroll,
        headless=False if args.headed else None,
    )

    try:
        document = asyncio.run(run_pipeline(config))
    except (PlaywrightNotAvailableError, BrowserNotInstalledError) as e:
        console.print(f"\n[red]Error: {e}[/]")
        raise SystemExit(1) from None
    except ScraperError as e:
        console.print(f"\n[red]Scrape failed: {e}[/]")
        raise SystemExit(1) from None
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/]")
        raise SystemExit(1) from None

    _write_output(document, args.output)


if __name__ == "__main__":
    main()
