# app/services/aggregator.py
from __future__ import annotations

from typing import Dict, Iterable, List

from app.schemas.partner import PartnerRecord

DateAttendance = Dict[str, List[str]]


def aggregate_partners(partners: Iterable[PartnerRecord]) -> Dict[str, DateAttendance]:
    """
    Group partner emails by country and then by available date.

    Rules
    -----
    - Each (partner, date) pair appends the partner's email to
      ``result[country][date]``.
    - Partners without available dates contribute nothing, so a country only
      appears if at least one of its partners offered a date.
    - No deduplication or sorting: repeated dates for the same partner are
      appended again, and order follows the input.

    A new mapping is built on every call; nothing is retained between calls.
    """
    result: Dict[str, DateAttendance] = {}

    for partner in partners:
        for date in partner.available_dates:
            by_date = result.setdefault(partner.country, {})
            by_date.setdefault(date, []).append(partner.email)

    return result
