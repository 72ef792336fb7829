# app/services/sequence_selector.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)

DAY_MS = 1000 * 60 * 60 * 24


@dataclass(frozen=True)
class SequenceSelection:
    start_date: Optional[str]
    attendees: List[str] = field(default_factory=list)


def parse_date_ms(value: str) -> Optional[int]:
    """
    Convert an ISO-8601 date or datetime string into epoch milliseconds.

    Naive values are taken as UTC. Returns None if parsing fails.
    """
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp() * 1000)


class SequenceSelector:
    """
    Picks the start date for a country from its date -> attendees mapping.

    Algorithm
    ---------
    1) Rank dates by attendee count, largest first. Equal counts are ordered
       by date string so the ranking is deterministic.
    2) Keep the top ``lookback * 2`` dates.
    3) Sort those chronologically and split them into runs where each date
       is at most one day after the previous one.
    4) Runs of a single date are discarded.
    5) The earliest run wins; its first date is the start date, and the
       attendees are that date's full list from the input mapping.
    6) No qualifying run => start date None and no attendees.

    Note
    ----
    - Only the candidate window is searched, so the winner is not
      necessarily the run with the highest total attendance.
    - Dates that cannot be parsed never join a run.
    """

    @staticmethod
    def rank_dates(date_attendance: Dict[str, List[str]]) -> List[str]:
        return sorted(date_attendance, key=lambda d: (-len(date_attendance[d]), d))

    @staticmethod
    def find_sequences(dates: Sequence[str], days: int = 1) -> List[List[str]]:
        """
        Split ``dates`` into maximal runs of consecutive days.

        Returns only runs with at least two dates, in chronological order.
        """
        day_gap = DAY_MS * days

        parsed = []
        for date in dates:
            ms = parse_date_ms(date)
            if ms is None:
                logger.warning("Ignoring unparseable date %r in sequence search", date)
            parsed.append((ms, date))

        # Unparseable dates sort last and always break a run
        parsed.sort(key=lambda item: (item[0] is None, item[0] or 0, item[1]))

        sequences: List[List[str]] = []
        current: List[str] = []
        previous_ms: Optional[int] = None

        for ms, date in parsed:
            if (
                current
                and ms is not None
                and previous_ms is not None
                and ms - previous_ms <= day_gap
            ):
                current.append(date)
            else:
                if len(current) > 1:
                    sequences.append(current)
                current = [date]
            previous_ms = ms

        if len(current) > 1:
            sequences.append(current)

        return sequences

    @classmethod
    def select_best(
        cls,
        date_attendance: Dict[str, List[str]],
        lookback: int = 2,
    ) -> SequenceSelection:
        """
        Find the earliest run of consecutive dates among the most attended
        ones and return its start date with that date's attendees.
        """
        if lookback < 1:
            raise ValueError("lookback must be at least 1")

        candidates = cls.rank_dates(date_attendance)[: lookback * 2]
        sequences = cls.find_sequences(candidates)

        if not sequences:
            return SequenceSelection(start_date=None, attendees=[])

        start_date = sequences[0][0]
        attendees = list(date_attendance.get(start_date, []))
        return SequenceSelection(start_date=start_date, attendees=attendees)
