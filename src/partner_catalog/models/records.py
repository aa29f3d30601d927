"""Record models for scraped listings and the joined output.

Field names follow Python conventions; the camelCase aliases are the
wire names used in the JSON output (``partnerName``, ``solutionTitle``).
"""

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    """Immutable record accepting both field names and wire aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class PartnerRecord(_Record):
    """One entry of the partner directory.

    Attributes:
        partner_name: Trimmed display text of the entry.
    """

    partner_name: str = Field(alias="partnerName", description="Raw partner display name")


class SolutionRecord(_Record):
    """One entry of the partner solutions catalog.

    Attributes:
        solution_title: Trimmed display text of the entry.
        partner_name: Owning partner recovered from the surrounding markup,
            or an empty string when no attribution label was found.
    """

    solution_title: str = Field(alias="solutionTitle", description="Solution display title")
    partner_name: str = Field(
        default="", alias="partnerName", description="Recovered partner name, may be empty"
    )


class OutputRecord(_Record):
    """A partner together with the solutions attributed to it.

    Attributes:
        partner_name: First-seen display name of the partner.
        solutions: Solution titles in the order they were scraped.
    """

    partner_name: str = Field(alias="partnerName", description="Partner display name")
    solutions: list[str] = Field(min_length=1, description="Attributed solution titles")
