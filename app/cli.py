# app/cli.py
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List

from rich.console import Console
from rich.table import Table

from app.core.config import get_settings
from app.core.logging import setup_logging
from app.schemas.country import CountriesPayload, CountrySummary
from app.services.country_summary import EmptyInputError
from app.services.partner_sync import run_partner_sync
from app.services.partners_client import PartnersClientError, get_partners_client

console = Console()
logger = logging.getLogger("app.cli")


def parse_args(argv: List[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Pick a start date per country from the partner dataset and post the result"
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute the countries payload and print it instead of posting",
    )
    p.add_argument("--log-level", default=None, help="Override LOG_LEVEL from settings")
    return p.parse_args(argv)


def render_preview(countries: List[CountrySummary]) -> None:
    t = Table(title=f"Countries ({len(countries)})")
    t.add_column("name")
    t.add_column("startDate")
    t.add_column("attendeeCount", justify="right")
    for c in countries:
        t.add_row(c.name, c.start_date or "-", str(c.attendee_count))
    console.print(t)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.LOG_LEVEL)

    try:
        client = get_partners_client()
        summary = asyncio.run(
            run_partner_sync(
                client,
                lookback=settings.SEQUENCE_LOOKBACK,
                dry_run=args.dry_run,
            )
        )
    except (EmptyInputError, PartnersClientError) as exc:
        logger.error("Partner sync failed: %s", exc)
        return 1

    render_preview(summary.countries)
    if args.dry_run:
        payload = CountriesPayload(countries=summary.countries)
        console.print_json(json.dumps(payload.to_wire()))
    else:
        logger.info("Result endpoint response: %s", summary.result_body)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
