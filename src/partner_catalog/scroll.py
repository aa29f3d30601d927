"""Scroll a page until its lazily rendered listing stops growing.

The listing pages append entries as the viewport nears the bottom. The
loader scrolls, waits for the new entries to render, and stops once the
document height is unchanged between two measurements. Pages that keep
growing are cut off after a bounded number of steps or a wall-clock
timeout, and the partial outcome is reported instead of looping forever.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import time
from typing import TYPE_CHECKING

import structlog

from .config import MAX_SCROLL_ITERATIONS, SCROLL_TIMEOUT_SECONDS, SETTLE_DELAY_SECONDS

if TYPE_CHECKING:
    from .session import PageSession

logger = structlog.get_logger(__name__)

SCROLL_HEIGHT_SCRIPT = "() => document.body.scrollHeight"
SCROLL_TO_BOTTOM_SCRIPT = "() => window.scrollTo(0, document.body.scrollHeight)"


@dataclass(frozen=True)
class ScrollOutcome:
    """Result of settling a page.

    Attributes:
        stabilized: True if two consecutive heights matched.
        iterations: Scroll steps performed.
        final_height: Last measured document height.
        elapsed: Seconds spent settling.
    """

    stabilized: bool
    iterations: int
    final_height: int
    elapsed: float

    @property
    def timed_out(self) -> bool:
        """Whether settling stopped before the content stabilized."""
        return not self.stabilized


class ScrollLoader:
    """Drive an already-navigated page until its content height is stable.

    Example:
        loader = ScrollLoader(settle_delay=0.5)
        outcome = await loader.settle(session)
        if outcome.timed_out:
            ...
    """

    def __init__(
        self,
        settle_delay: float = SETTLE_DELAY_SECONDS,
        max_iterations: int = MAX_SCROLL_ITERATIONS,
        timeout: float = SCROLL_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the loader.

        Args:
            settle_delay: Seconds to wait after each scroll for new content.
            max_iterations: Maximum scroll steps before giving up.
            timeout: Maximum seconds to spend before giving up.
        """
        if max_iterations < 1:
            msg = "max_iterations must be at least 1"
            raise ValueError(msg)
        self.settle_delay = settle_delay
        self.max_iterations = max_iterations
        self.timeout = timeout

    async def settle(self, session: PageSession) -> ScrollOutcome:
        """Scroll to the bottom repeatedly until the height stops changing.

        Args:
            session: Page session positioned on a rendered listing.

        Returns:
            Outcome telling whether the page stabilized.
        """
        started = time.monotonic()
        last_height = await self._measure(session)
        iterations = 0

        while iterations < self.max_iterations:
            await session.evaluate(SCROLL_TO_BOTTOM_SCRIPT)
            await asyncio.sleep(self.settle_delay)
            iterations += 1

            height = await self._measure(session)
            logger.debug("Scrolled", iteration=iterations, height=height)
            if height == last_height:
                return self._outcome(True, iterations, height, started)
            last_height = height

            if time.monotonic() - started >= self.timeout:
                break

        outcome = self._outcome(False, iterations, last_height, started)
        logger.warning(
            "Page content did not stabilize",
            iterations=outcome.iterations,
            height=outcome.final_height,
            elapsed=round(outcome.elapsed, 2),
        )
        return outcome

    @staticmethod
    async def _measure(session: PageSession) -> int:
        """Return the current document height in pixels."""
        return int(await session.evaluate(SCROLL_HEIGHT_SCRIPT))

    @staticmethod
    def _outcome(stabilized: bool, iterations: int, height: int, started: float) -> ScrollOutcome:
        return ScrollOutcome(
            stabilized=stabilized,
            iterations=iterations,
            final_height=height,
            elapsed=time.monotonic() - started,
        )
