# app/main.py
from fastapi import FastAPI

from app.api.routes import health, internal
from app.core.config import get_settings
from app.core.logging import setup_logging


def create_app() -> FastAPI:
    """
    Application factory for the Partner Scheduler service.
    """
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description=(
            "Fetches event partners, groups them by country and picks the\n"
            "best-attended run of consecutive dates for each country, then\n"
            "posts the per-country results to the configured endpoint."
        ),
        version="0.1.0",
    )

    app.include_router(health.router)
    app.include_router(internal.router)

    return app


app = create_app()
