# app/services/country_summary.py
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from app.schemas.country import CountrySummary
from app.schemas.partner import PartnerRecord, PartnersPayload
from app.services.aggregator import aggregate_partners
from app.services.sequence_selector import SequenceSelector

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """
    Raised when there are no partners to schedule, either because the list
    is empty or because the dataset payload has no usable `partners` array.
    """


def parse_partners_payload(data: Any) -> List[PartnerRecord]:
    """
    Validate the dataset document and return its partner records.

    Raises
    ------
    EmptyInputError
        If the document is empty, lacks `partners`, or `partners` is empty.
    pydantic.ValidationError
        If partner records are present but malformed.
    """
    if not isinstance(data, dict) or not isinstance(data.get("partners"), list):
        raise EmptyInputError("`partners` array in data object is empty or missing.")

    payload = PartnersPayload.model_validate(data)
    if not payload.partners:
        raise EmptyInputError("`partners` array in data object is empty or missing.")
    return payload.partners


def build_country_summaries(
    partners: Optional[Sequence[PartnerRecord]],
    lookback: int = 2,
) -> List[CountrySummary]:
    """
    Build one CountrySummary per country present in `partners`.

    Countries are emitted in the order they are first seen. `attendeeCount`
    is derived from the final attendee list for the chosen start date.
    """
    if not partners:
        raise EmptyInputError("No partners supplied.")

    by_country = aggregate_partners(partners)

    summaries: List[CountrySummary] = []
    for country, date_attendance in by_country.items():
        selection = SequenceSelector.select_best(date_attendance, lookback=lookback)
        logger.debug(
            "Country %s: %d candidate dates, start=%s, attendees=%d",
            country,
            len(date_attendance),
            selection.start_date,
            len(selection.attendees),
        )
        summaries.append(
            CountrySummary(
                attendee_count=len(selection.attendees),
                attendees=selection.attendees,
                name=country,
                start_date=selection.start_date,
            )
        )

    return summaries
