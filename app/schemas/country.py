# app/schemas/country.py
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CountrySummary(BaseModel):
    """
    Per-country result: the chosen start date and who can attend it.

    Serialized with camelCase aliases to match the result endpoint contract.
    `startDate` is always present and is `null` when no run of consecutive
    dates could be found.
    """

    model_config = ConfigDict(populate_by_name=True)

    attendee_count: int = Field(
        ...,
        alias="attendeeCount",
        description="Number of entries in `attendees`.",
        examples=[2],
    )
    attendees: list[str] = Field(
        default_factory=list,
        description="Emails of partners available on `startDate`.",
        examples=[["x@example.com", "y@example.com"]],
    )
    name: str = Field(
        ...,
        description="Country name.",
        examples=["Ireland"],
    )
    start_date: str | None = Field(
        None,
        alias="startDate",
        description="First date of the selected run, or null if none exists.",
        examples=["2017-04-28"],
    )


class CountriesPayload(BaseModel):
    """
    Body posted to the result endpoint.
    """

    countries: list[CountrySummary] = Field(
        default_factory=list,
        description="One summary per country present in the dataset.",
    )

    def to_wire(self) -> dict[str, Any]:
        """
        JSON-ready dict using the camelCase field names; `startDate` is kept
        as None rather than dropped.
        """
        return self.model_dump(mode="json", by_alias=True)


class PartnerSyncSummary(BaseModel):
    """
    Outcome of a single fetch -> schedule -> post cycle.
    """

    model_config = ConfigDict(populate_by_name=True)

    partners_received: int = Field(
        ...,
        description="Number of partner records in the fetched dataset.",
        examples=[120],
    )
    countries: list[CountrySummary] = Field(
        default_factory=list,
        description="Summaries computed for this run.",
    )
    posted: bool = Field(
        ...,
        description="True if the countries payload was sent to the result endpoint.",
        examples=[True],
    )
    result_status: int | None = Field(
        None,
        description="HTTP status returned by the result endpoint, if posted.",
        examples=[200],
    )
    result_body: Any = Field(
        None,
        description="Parsed (or raw text) response of the result endpoint, if posted.",
    )
