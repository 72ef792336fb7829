# app/api/routes/health.py
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.core.config import get_settings


router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str = Field(..., examples=["ok"])
    app_name: str = Field(..., examples=["Partner Scheduler"])
    environment: str = Field(..., examples=["local"])
    partners_api_configured: bool = Field(
        ...,
        description=(
            "True when API_HOSTNAME, DATASET_ENDPOINT, RESULT_ENDPOINT and USERKEY "
            "are all set, i.e. /internal/run-partner-sync can reach the partners API."
        ),
    )
    sequence_lookback: int = Field(
        ...,
        description="Lookback in effect; the top 2 x lookback dates are searched for a run.",
        examples=[2],
    )
    timestamp_utc: datetime


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description=(
        "Reports whether the scheduler is up and whether the partners API "
        "endpoints are configured. Never calls the partners API itself."
    ),
)
async def health_check() -> HealthResponse:
    settings = get_settings()
    configured = all(
        (
            settings.API_HOSTNAME,
            settings.DATASET_ENDPOINT,
            settings.RESULT_ENDPOINT,
            settings.USERKEY,
        )
    )
    return HealthResponse(
        status="ok",
        app_name=settings.APP_NAME,
        environment=settings.APP_ENV,
        partners_api_configured=configured,
        sequence_lookback=settings.SEQUENCE_LOOKBACK,
        timestamp_utc=datetime.now(tz=timezone.utc),
    )
