"""Partner name normalization.

The two listings spell the same company differently ("Acme Inc." in the
directory, "ACME" in the catalog). ``normalize_partner_name`` maps both to
one lowercase join key.

The mapping is lossy and many-to-one: legal suffixes, punctuation and case
are discarded, so two genuinely different partners can share a key
(for example "Acme Ltd" and "Acme GmbH" both become "acme"). Such partners are
merged by the join under whichever display name was seen first.
"""

import re

LEGAL_SUFFIXES = ("inc", "ltd", "llc", "llp", "corp", "co", "gmbh")

_WHITESPACE = re.compile(r"\s+")
_LEGAL_SUFFIX = re.compile(
    r"\b(?:" + "|".join(LEGAL_SUFFIXES) + r")\b\.?",
    re.IGNORECASE,
)
_STRIPPED_PUNCTUATION = re.compile(r"[.,']")


def _normalize_once(name: str) -> str:
    """Apply one pass of the normalization steps, in order."""
    normalized = name.replace("\xa0", " ")
    normalized = _WHITESPACE.sub(" ", normalized).strip()
    normalized = _LEGAL_SUFFIX.sub("", normalized)
    normalized = _STRIPPED_PUNCTUATION.sub("", normalized)
    normalized = normalized.replace("&", "and")
    return normalized.lower().strip()


def normalize_partner_name(name: str | None) -> str:
    """Normalize a partner display name to its join key.

    Steps, in order:
    - Non-breaking spaces become spaces, whitespace runs collapse, ends trimmed
    - Whole-word legal suffixes (inc, ltd, llc, llp, corp, co, gmbh) removed,
      with an optional trailing period
    - Periods, commas and apostrophes removed
    - ``&`` replaced by ``and``
    - Lowercased and trimmed

    Removing a suffix can leave a double space behind, and removing
    punctuation can join letters into a new suffix token. The steps are
    therefore repeated until the key no longer changes, which keeps the
    function idempotent.

    Args:
        name: Raw display name. ``None`` is treated as empty.

    Returns:
        Normalized key, possibly empty.

    Example:
        >>> normalize_partner_name("Acme Inc.")
        'acme'
        >>> normalize_partner_name("Smith & Wesson, LLC")
        'smith and wesson'
    """
    if not name:
        return ""

    normalized = _normalize_once(name)
    while True:
        again = _normalize_once(normalized)
        if again == normalized:
            return normalized
        normalized = again

