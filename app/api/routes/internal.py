# app/api/routes/internal.py
import logging
from http import HTTPStatus

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.config import get_settings
from app.schemas.country import PartnerSyncSummary
from app.services.country_summary import EmptyInputError
from app.services.partner_sync import run_partner_sync
from app.services.partners_client import (
    PartnersClient,
    PartnersClientError,
    PartnersClientNotConfigured,
    get_partners_client,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/internal",
    tags=["Internal"],
)


def partners_client_dependency() -> PartnersClient:
    """
    Resolve the shared PartnersClient, turning missing configuration into 503.
    """
    try:
        return get_partners_client()
    except PartnersClientNotConfigured as exc:
        raise HTTPException(status_code=HTTPStatus.SERVICE_UNAVAILABLE, detail=str(exc))


@router.post(
    "/run-partner-sync",
    response_model=PartnerSyncSummary,
    status_code=HTTPStatus.OK,
    summary="Fetch partners, choose a start date per country and post the result",
    description=(
        "Runs one full cycle against the partners API:\n\n"
        "1. GET the partner dataset.\n"
        "2. Group partners by country and available date.\n"
        "3. Pick the earliest run of consecutive, well-attended dates per country.\n"
        "4. POST `{countries: [...]}` to the result endpoint (skipped with `dry_run`).\n\n"
        "Intended to be called from a scheduler or cron job on a private network; "
        "the only credential involved is the outbound `userKey`."
    ),
    responses={
        200: {"description": "Cycle completed. A summary is returned."},
        422: {"description": "The dataset contained no partners; nothing was posted."},
        502: {"description": "The partners API failed or returned an unusable payload."},
        503: {"description": "Partners API endpoints are not configured."},
    },
)
async def trigger_partner_sync(
    dry_run: bool = Query(
        default=False,
        description="Compute the countries payload without posting it.",
    ),
    client: PartnersClient = Depends(partners_client_dependency),
) -> PartnerSyncSummary:
    settings = get_settings()
    try:
        return await run_partner_sync(
            client,
            lookback=settings.SEQUENCE_LOOKBACK,
            dry_run=dry_run,
        )
    except EmptyInputError as exc:
        logger.error("Partner sync aborted: %s", exc)
        raise HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, detail=str(exc))
    except PartnersClientError as exc:
        logger.error("Partner sync failed: %s", exc)
        raise HTTPException(status_code=HTTPStatus.BAD_GATEWAY, detail=str(exc))
