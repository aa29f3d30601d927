"""Tests for scroll settling on lazily loaded listings."""

from __future__ import annotations

import pytest

from partner_catalog.scroll import ScrollLoader, ScrollOutcome
from tests.conftest import FakePage, FakePageSession

URL = "https://example.test/listing"


async def _session(heights: list[int]) -> FakePageSession:
    session = FakePageSession(pages={URL: FakePage(heights=heights)})
    await session.navigate(URL)
    return session


class TestScrollLoader:
    """Tests for ScrollLoader.settle()."""

    @pytest.mark.asyncio
    async def test_static_page_settles_after_one_scroll(self) -> None:
        session = await _session([1000, 1000])
        outcome = await ScrollLoader(settle_delay=0).settle(session)

        assert outcome.stabilized
        assert not outcome.timed_out
        assert outcome.iterations == 1
        assert outcome.final_height == 1000
        assert session.scrolls == 1

    @pytest.mark.asyncio
    async def test_scrolls_until_height_repeats(self) -> None:
        session = await _session([500, 1000, 1500, 1500])
        outcome = await ScrollLoader(settle_delay=0).settle(session)

        assert outcome.stabilized
        assert outcome.iterations == 3
        assert outcome.final_height == 1500
        assert session.scrolls == 3

    @pytest.mark.asyncio
    async def test_growing_page_stops_at_iteration_limit(self) -> None:
        """Verify a page that never stops growing does not loop forever."""
        session = await _session(list(range(100, 10_000, 100)))
        outcome = await ScrollLoader(settle_delay=0, max_iterations=4).settle(session)

        assert outcome.timed_out
        assert outcome.iterations == 4
        assert outcome.final_height == 500
        assert session.scrolls == 4

    @pytest.mark.asyncio
    async def test_growing_page_stops_at_timeout(self) -> None:
        session = await _session(list(range(100, 10_000, 100)))
        outcome = await ScrollLoader(settle_delay=0, max_iterations=50, timeout=0).settle(
            session
        )

        assert outcome.timed_out
        assert outcome.iterations == 1

    def test_rejects_zero_iterations(self) -> None:
        with pytest.raises(ValueError, match="max_iterations"):
            ScrollLoader(max_iterations=0)


class TestScrollOutcome:
    """Tests for the ScrollOutcome value."""

    def test_timed_out_is_inverse_of_stabilized(self) -> None:
        assert ScrollOutcome(True, 1, 10, 0.1).timed_out is False
        assert ScrollOutcome(False, 9, 10, 5.0).timed_out is True
