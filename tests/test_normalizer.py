"""Tests for score, station and record normalization."""

import math

import pytest

from src.validation.normalizer import (
    StationId,
    StationKind,
    normalize_response,
    normalize_responses,
    normalize_score,
    parse_station,
)
from src.validation.schema_validator import RawResponse


class TestNormalizeScore:
    """Tests for normalize_score function."""

    def test_number_passes_through(self) -> None:
        """Numbers are returned unchanged."""
        assert normalize_score(3.7) == 3.7
        assert normalize_score(4) == 4

    def test_missing_values_are_zero(self) -> None:
        """None and empty text normalize to 0."""
        assert normalize_score(None) == 0
        assert normalize_score("") == 0

    def test_text_with_unit_suffix(self) -> None:
        """Non-numeric characters are stripped before parsing."""
        assert normalize_score("4分") == 4
        assert normalize_score(" 3.5 points") == 3.5

    def test_unparseable_text_is_zero(self) -> None:
        """Text without digits normalizes to 0."""
        assert normalize_score("abc") == 0
        assert normalize_score(".") == 0

    def test_leading_literal_only(self) -> None:
        """Only the leading decimal literal is parsed."""
        assert normalize_score("3.5.1") == 3.5
        assert normalize_score(".5") == 0.5

    def test_minus_sign_is_stripped(self) -> None:
        """Text scores are never negative."""
        assert normalize_score("-2") == 2

    def test_booleans_are_not_numbers(self) -> None:
        """Booleans do not count as numeric scores."""
        assert normalize_score(True) == 0
        assert normalize_score(False) == 0

    @pytest.mark.parametrize("value", [[], {}, [4], {"a": 1}, object()])
    def test_never_raises(self, value: object) -> None:
        """Arbitrary objects degrade to a non-negative number."""
        assert normalize_score(value) >= 0


class TestParseStation:
    """Tests for parse_station function."""

    def test_integer_is_numeric(self) -> None:
        """Integers become numeric stations."""
        assert parse_station(3) == StationId.numeric(3)

    def test_numeric_text_is_numeric(self) -> None:
        """Integer text is coerced, surrounding whitespace ignored."""
        assert parse_station("3") == StationId.numeric(3)
        assert parse_station(" 12 ") == StationId.numeric(12)

    def test_leading_integer_is_used(self) -> None:
        """Text starting with an integer keeps that integer."""
        assert parse_station("7號") == StationId.numeric(7)

    def test_float_is_truncated(self) -> None:
        """Floats are truncated toward zero."""
        assert parse_station(4.9) == StationId.numeric(4)

    def test_label_kept_as_text(self) -> None:
        """Non-numeric identifiers are kept as labels."""
        station = parse_station("Rest area")
        assert station.kind is StationKind.LABEL
        assert station.value == "Rest area"

    def test_missing_station_is_empty_label(self) -> None:
        """None becomes an empty label."""
        assert parse_station(None) == StationId.label("")

    def test_numeric_and_label_never_equal(self) -> None:
        """A number and a label holding the same text differ."""
        assert StationId.numeric(3) != StationId.label("3")

    def test_ordering_numbers_before_labels(self) -> None:
        """Numbers sort ascending, then labels in text order."""
        stations = [
            StationId.label("b"),
            StationId.numeric(10),
            StationId.label("a"),
            StationId.numeric(2),
        ]
        assert sorted(stations) == [
            StationId.numeric(2),
            StationId.numeric(10),
            StationId.label("a"),
            StationId.label("b"),
        ]

    def test_str_renders_value(self) -> None:
        """String form is the bare identifier."""
        assert str(StationId.numeric(5)) == "5"
        assert str(StationId.label("Rest area")) == "Rest area"


class TestNormalizeResponse:
    """Tests for normalize_response function."""

    def test_scores_are_normalized(self) -> None:
        """Every question score goes through normalize_score."""
        record = normalize_response({"q1": "3分", "q2": 5, "q3": None, "q8": "4.5"})
        assert record.scores == (3.0, 5, 0, 0, 0, 0, 0, 4.5)
        assert record.score("q1") == 3.0
        assert record.score("q8") == 4.5

    def test_text_fields_pass_through(self) -> None:
        """Date, examiner and comments are kept as text."""
        record = normalize_response(
            {"date": "2024-05-01", "examiner": "Dr. Lin", "q9": "ok", "q10": "fine"}
        )
        assert record.date == "2024-05-01"
        assert record.examiner == "Dr. Lin"
        assert record.q9 == "ok"
        assert record.q10 == "fine"

    def test_falsy_comments_become_empty(self) -> None:
        """None, 0 and empty comments all normalize to an empty string."""
        record = normalize_response({"q9": 0, "q10": None})
        assert record.q9 == ""
        assert record.q10 == ""

    def test_accepts_raw_response_model(self) -> None:
        """A validated RawResponse is accepted as well as a dict."""
        record = normalize_response(RawResponse(station="4", q1=2))
        assert record.station == StationId.numeric(4)
        assert record.score("q1") == 2

    def test_non_object_record_degrades(self) -> None:
        """Records that are not objects yield an all-default record."""
        record = normalize_response("garbage")  # type: ignore[arg-type]
        assert record.scores == (0,) * 8
        assert record.station == StationId.label("")


class TestNormalizeResponses:
    """Tests for normalize_responses function."""

    def test_order_and_count_preserved(self, raw_mixed_dates: list[dict]) -> None:
        """One record out per record in, same order, duplicates kept."""
        raws = raw_mixed_dates + raw_mixed_dates[:1]
        records = normalize_responses(raws)
        assert len(records) == len(raws)
        assert [r.examiner for r in records] == ["A", "B", "C", "D", "E", "A"]

    def test_is_pure(self, raw_mixed_dates: list[dict]) -> None:
        """Normalizing twice gives equal results and leaves the input alone."""
        before = [dict(r) for r in raw_mixed_dates]
        assert normalize_responses(raw_mixed_dates) == normalize_responses(raw_mixed_dates)
        assert raw_mixed_dates == before

    def test_nan_score_is_kept(self) -> None:
        """NaN is a number and passes through normalization."""
        record = normalize_response({"q1": float("nan")})
        assert math.isnan(record.score("q1"))
