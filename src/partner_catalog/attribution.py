"""Recover the owning partner of a catalog entry from its markup.

A catalog card shows the solution title as the listing anchor and the
partner as a small label somewhere else in the card. The label class
varies between cards, so the resolver searches the entry's nearest
enclosing container for any of a group of candidate selectors.

Lookup rules:
- Containers are tried in order; the first one that encloses the entry
  is searched (``.card``, then any ``div``).
- Candidates form one selector group. The first element in document
  order that matches any of them wins, regardless of which selector
  matched it.
- The matched element's trimmed text is returned as is, including an
  empty string. No match returns an empty string.
"""

from __future__ import annotations

from collections.abc import Sequence

from bs4 import Tag

from .config import ATTRIBUTION_CANDIDATES, ATTRIBUTION_CONTAINERS


class AttributionResolver:
    """Selector-group lookup of a partner label around a listing entry.

    Example:
        resolver = AttributionResolver(candidates=(".partner", ".eyebrow"))
        partner_name = resolver.resolve(anchor)
    """

    def __init__(
        self,
        containers: Sequence[str] = ATTRIBUTION_CONTAINERS,
        candidates: Sequence[str] = ATTRIBUTION_CANDIDATES,
    ) -> None:
        """Initialize the resolver.

        Args:
            containers: Selectors for the enclosing container, most specific first.
            candidates: Selectors for the partner label, matched as one group.
        """
        if not containers or not candidates:
            msg = "containers and candidates must not be empty"
            raise ValueError(msg)
        self.containers = tuple(containers)
        self.candidates = tuple(candidates)

    def find_container(self, entry: Tag) -> Tag | None:
        """Return the nearest enclosing container of ``entry``, or None."""
        for selector in self.containers:
            container = entry.css.closest(selector)
            if container is not None:
                return container
        return None

    def resolve(self, entry: Tag) -> str:
        """Return the partner name for a listing entry.

        Args:
            entry: The listing marker element of a catalog entry.

        Returns:
            Trimmed label text, or an empty string when nothing matches.
        """
        container = self.find_container(entry)
        if container is None:
            return ""
        label = container.select_one(", ".join(self.candidates))
        if label is None:
            return ""
        return label.get_text().strip()
