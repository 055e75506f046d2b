"""Date and station filtering of the normalized snapshot."""

from collections.abc import Sequence
from typing import Any

from src.utils.config import ALL
from src.validation.normalizer import NormalizedResponse, StationId, parse_station


def filter_responses(
    responses: Sequence[NormalizedResponse],
    date_filter: str = ALL,
    station_filter: Any = ALL,
) -> tuple[NormalizedResponse, ...]:
    """Select the responses matching a date and a station.

    Either filter may be the ``ALL`` sentinel to disable it. A station filter
    given as text goes through the same coercion as the records, so ``"3"``
    matches station 3.

    Args:
        responses: Normalized snapshot
        date_filter: Exact date to keep, or ALL
        station_filter: Station to keep (StationId, number or text), or ALL

    Returns:
        Matching responses in their original order
    """
    match_all_dates = date_filter == ALL
    match_all_stations = isinstance(station_filter, str) and station_filter == ALL
    station = None if match_all_stations else parse_station(station_filter)

    return tuple(
        r
        for r in responses
        if (match_all_dates or r.date == date_filter)
        and (match_all_stations or r.station == station)
    )


def distinct_dates(responses: Sequence[NormalizedResponse]) -> list[str]:
    """Selector options for the date filter, in first-seen order."""
    seen = dict.fromkeys(r.date for r in responses)
    return [ALL, *seen]


def distinct_stations(responses: Sequence[NormalizedResponse]) -> list[StationId | str]:
    """Selector options for the station filter, numbers ascending first."""
    stations = sorted(set(r.station for r in responses))
    return [ALL, *stations]
