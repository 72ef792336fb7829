# app/services/partner_sync.py
from __future__ import annotations

import logging

from pydantic import ValidationError

from app.schemas.country import CountriesPayload, PartnerSyncSummary
from app.services.country_summary import build_country_summaries, parse_partners_payload
from app.services.partners_client import PartnersClient, PartnersClientError

logger = logging.getLogger(__name__)


async def run_partner_sync(
    client: PartnersClient,
    lookback: int = 2,
    dry_run: bool = False,
) -> PartnerSyncSummary:
    """
    Execute one fetch -> schedule -> post cycle.

    Behavior
    --------
    1) GET the partner dataset.
    2) Validate it; an empty or missing `partners` array raises
       EmptyInputError and nothing is posted.
    3) Build one CountrySummary per country.
    4) Unless `dry_run` is set, POST `{countries: [...]}` to the result
       endpoint.

    Raises
    ------
    EmptyInputError
        No partners to schedule.
    PartnersClientError
        Transport, status or payload problems on either endpoint.
    """
    data = await client.fetch_dataset()

    try:
        partners = parse_partners_payload(data)
    except ValidationError as exc:
        raise PartnersClientError(f"Malformed partner records in dataset: {exc}") from exc

    logger.info("Fetched %d partners", len(partners))

    countries = build_country_summaries(partners, lookback=lookback)
    logger.info("Computed start dates for %d countries", len(countries))

    if dry_run:
        return PartnerSyncSummary(
            partners_received=len(partners),
            countries=countries,
            posted=False,
        )

    payload = CountriesPayload(countries=countries)
    result = await client.post_countries(payload.to_wire())
    logger.info("Posted countries payload (status=%s)", result.status_code)

    return PartnerSyncSummary(
        partners_received=len(partners),
        countries=countries,
        posted=True,
        result_status=result.status_code,
        result_body=result.body,
    )
