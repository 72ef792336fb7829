# app/schemas/partner.py
from pydantic import BaseModel, ConfigDict, Field


class PartnerRecord(BaseModel):
    """
    A single partner (attendee) as delivered by the dataset endpoint.

    `email` is the identity used for attendance; `available_dates` holds the
    raw date strings exactly as received so they can be used as grouping keys.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    first_name: str = Field(
        "",
        alias="firstName",
        description="Partner's first name.",
        examples=["Darin"],
    )
    last_name: str = Field(
        "",
        alias="lastName",
        description="Partner's last name.",
        examples=["Daignault"],
    )
    email: str = Field(
        ...,
        description="Partner email, used as the attendee identifier.",
        examples=["ddaignault@example.com"],
    )
    country: str = Field(
        ...,
        description="Country the partner belongs to.",
        examples=["United States"],
    )
    available_dates: list[str] = Field(
        default_factory=list,
        alias="availableDates",
        description="Preferred dates (ISO-8601 strings). May be empty.",
        examples=[["2017-05-03", "2017-05-06"]],
    )


class PartnersPayload(BaseModel):
    """
    Envelope returned by the dataset endpoint.
    """

    partners: list[PartnerRecord] = Field(
        default_factory=list,
        description="All partners to schedule.",
    )
