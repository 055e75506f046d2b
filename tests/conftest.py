"""Shared pytest fixtures for the examiner feedback dashboard tests."""

import pytest

from src.validation.normalizer import NormalizedResponse, normalize_responses


@pytest.fixture
def raw_two_stations() -> list[dict]:
    """Two submissions on the same day with mixed score encodings."""
    return [
        {
            "date": "D1",
            "station": "1",
            "examiner": "Dr. Lin",
            "q1": 5, "q2": 1, "q3": 4, "q4": 4, "q5": 2, "q6": 5, "q7": 4, "q8": 3,
            "q9": "clear process",
            "q10": "",
        },
        {
            "date": "D1",
            "station": 2,
            "examiner": "Dr. Wang",
            "q1": "3分", "q2": 5, "q3": 2, "q4": 3, "q5": 4, "q6": 5, "q7": 3, "q8": 1,
            "q9": None,
            "q10": "more time per station",
        },
    ]


@pytest.fixture
def raw_mixed_dates() -> list[dict]:
    """Submissions across two dates and three stations, including a label."""
    return [
        {"date": "2024-05-01", "station": 3, "examiner": "A", "q1": 5, "q9": "clear process"},
        {"date": "2024-05-01", "station": "10", "examiner": "B", "q1": "4"},
        {"date": "2024-05-02", "station": 3, "examiner": "C", "q1": 2, "q10": "bell too quiet"},
        {"date": "2024-05-02", "station": "Rest area", "examiner": "D", "q1": 1},
        {"date": "2024-05-01", "station": "2", "examiner": "E", "q1": "3.5"},
    ]


@pytest.fixture
def raw_payload_wrapped(raw_two_stations: list[dict]) -> dict:
    """Current source payload shape."""
    return {"examiner": raw_two_stations}


@pytest.fixture
def two_stations(raw_two_stations: list[dict]) -> tuple[NormalizedResponse, ...]:
    return normalize_responses(raw_two_stations)


@pytest.fixture
def mixed_dates(raw_mixed_dates: list[dict]) -> tuple[NormalizedResponse, ...]:
    return normalize_responses(raw_mixed_dates)


@pytest.fixture
def uniform_fives() -> tuple[NormalizedResponse, ...]:
    """Three perfect submissions."""
    raw = {f"q{i}": 5 for i in range(1, 9)}
    return normalize_responses(
        [{**raw, "date": "D1", "station": n, "examiner": f"E{n}"} for n in (1, 2, 3)]
    )
