"""Join partner directory entries with catalog solutions.

Groups are keyed by the normalized partner name and kept in insertion
order: directory partners first, in scrape order, followed by partners
that only appear in the catalog.

Two kinds of records are dropped, each by a named policy:
- ``skip_unattributed``: a solution whose partner name normalizes to an
  empty key belongs to no group.
- ``drop_empty_groups``: a partner without any solution is not emitted,
  even when it is listed in the directory.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from .models import OutputRecord, PartnerRecord, SolutionRecord
from .normalizer import normalize_partner_name

logger = structlog.get_logger(__name__)


@dataclass
class PartnerGroup:
    """Join unit for one normalized partner key.

    Attributes:
        display_name: Name of the first record seen for this key. Never
            rewritten by later records.
        solutions: Solution titles in processing order, duplicates kept.
    """

    display_name: str
    solutions: list[str] = field(default_factory=list)

    def to_output(self) -> OutputRecord:
        """Convert to the serialized output shape."""
        return OutputRecord(partner_name=self.display_name, solutions=list(self.solutions))


def skip_unattributed(key: str) -> bool:
    """Policy: a solution with an empty join key is dropped."""
    return key == ""


def drop_empty_groups(group: PartnerGroup) -> bool:
    """Policy: a group with no solutions is not emitted."""
    return not group.solutions


class JoinEngine:
    """Merge partner and solution records by normalized partner name.

    Example:
        >>> engine = JoinEngine()
        >>> engine.join(
        ...     [PartnerRecord(partner_name="Acme Inc.")],
        ...     [SolutionRecord(solution_title="Suite X", partner_name="ACME")],
        ... )
        [OutputRecord(partner_name='Acme Inc.', solutions=['Suite X'])]
    """

    def __init__(self) -> None:
        """Initialize an engine with an empty group mapping."""
        self._groups: dict[str, PartnerGroup] = {}
        self.stats = {
            "partners": 0,
            "solutions": 0,
            "unattributed_skipped": 0,
            "empty_groups_dropped": 0,
        }

    def add_partners(self, partners: Iterable[PartnerRecord]) -> None:
        """Register directory partners; the first display name per key wins."""
        for partner in partners:
            self.stats["partners"] += 1
            key = normalize_partner_name(partner.partner_name)
            self._groups.setdefault(key, PartnerGroup(display_name=partner.partner_name))

    def add_solutions(self, solutions: Iterable[SolutionRecord]) -> None:
        """Attach solutions to their partner group, creating groups as needed."""
        for solution in solutions:
            self.stats["solutions"] += 1
            key = normalize_partner_name(solution.partner_name)
            if skip_unattributed(key):
                self.stats["unattributed_skipped"] += 1
                logger.debug("Skipping unattributed solution", title=solution.solution_title)
                continue
            group = self._groups.setdefault(
                key, PartnerGroup(display_name=solution.partner_name)
            )
            group.solutions.append(solution.solution_title)

    def results(self) -> list[OutputRecord]:
        """Return groups with solutions, in insertion order."""
        output = []
        for group in self._groups.values():
            if drop_empty_groups(group):
                continue
            output.append(group.to_output())
        self.stats["empty_groups_dropped"] = len(self._groups) - len(output)
        return output

    def join(
        self,
        partners: Iterable[PartnerRecord],
        solutions: Iterable[SolutionRecord],
    ) -> list[OutputRecord]:
        """Run the full join over both record sequences.

        Args:
            partners: Directory records in scrape order.
            solutions: Catalog records in scrape order.

        Returns:
            One record per partner key with at least one solution.
        """
        self.add_partners(partners)
        self.add_solutions(solutions)
        output = self.results()

        logger.info(
            "Joined partner catalog",
            groups=len(self._groups),
            output=len(output),
            **self.stats,
        )
        return output


def join_partner_solutions(
    partners: Iterable[PartnerRecord],
    solutions: Iterable[SolutionRecord],
) -> list[OutputRecord]:
    """Join both listings with a fresh engine.

    Args:
        partners: Directory records in scrape order.
        solutions: Catalog records in scrape order.

    Returns:
        Joined output records.
    """
    return JoinEngine().join(partners, solutions)
