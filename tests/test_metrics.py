"""Tests for summary KPIs."""

import math

import pytest

from src.analytics.metrics import (
    SummaryMetrics,
    calculate_summary_metrics,
    question_means,
    score_matrix,
)
from src.validation.normalizer import NormalizedResponse, normalize_responses


class TestCalculateSummaryMetrics:
    """Tests for calculate_summary_metrics function."""

    def test_empty_collection_is_zero(self) -> None:
        """No responses gives all-zero metrics."""
        assert calculate_summary_metrics(()) == SummaryMetrics(0, 0.0, 0)

    def test_perfect_scores(self, uniform_fives: tuple[NormalizedResponse, ...]) -> None:
        """All fives average 5.0 with nothing to improve."""
        metrics = calculate_summary_metrics(uniform_fives)
        assert metrics.total_count == 3
        assert metrics.avg_satisfaction == 5.0
        assert metrics.items_to_improve == 0

    def test_two_record_example(self, two_stations: tuple[NormalizedResponse, ...]) -> None:
        """Means of the two records decide which questions need work.

        Per-question means: q1 4.0, q2 3.0, q3 3.0, q4 3.5, q5 3.0,
        q6 5.0, q7 3.5, q8 2.0 -> q2, q3, q5, q8 are below 3.5.
        """
        metrics = calculate_summary_metrics(two_stations)
        assert metrics.total_count == 2
        assert metrics.items_to_improve == 4
        # (28 + 26) / 16 = 3.375
        assert metrics.avg_satisfaction == 3.4

    def test_threshold_is_strict(self) -> None:
        """A mean of exactly 3.5 does not need improvement."""
        records = normalize_responses([{f"q{i}": 3.5 for i in range(1, 9)}])
        assert calculate_summary_metrics(records).items_to_improve == 0

    def test_missing_scores_count_as_zero(self) -> None:
        """Missing answers pull the average down."""
        records = normalize_responses([{"q1": 5}])
        metrics = calculate_summary_metrics(records)
        # 5 / 8 = 0.625
        assert metrics.avg_satisfaction == 0.6
        assert metrics.items_to_improve == 7

    def test_average_rounds_half_up(self) -> None:
        """Ties round up to one decimal."""
        # sum 26 over 8 answers = 3.25
        records = normalize_responses(
            [{"q1": 5, "q2": 5, "q3": 4, "q4": 4, "q5": 2, "q6": 2, "q7": 2, "q8": 2}]
        )
        assert calculate_summary_metrics(records).avg_satisfaction == 3.3

    def test_custom_threshold(self, two_stations: tuple[NormalizedResponse, ...]) -> None:
        """A lower threshold flags fewer questions."""
        assert calculate_summary_metrics(two_stations, threshold=3.0).items_to_improve == 1

    def test_is_idempotent(self, two_stations: tuple[NormalizedResponse, ...]) -> None:
        """Recomputing gives identical output."""
        assert calculate_summary_metrics(two_stations) == calculate_summary_metrics(
            two_stations
        )


class TestScoreHelpers:
    """Tests for score_matrix and question_means functions."""

    def test_matrix_shape(self, two_stations: tuple[NormalizedResponse, ...]) -> None:
        """One row per response, one column per question."""
        assert score_matrix(two_stations).shape == (2, 8)
        assert score_matrix(()).shape == (0, 8)

    def test_nan_read_as_zero(self) -> None:
        """NaN scores contribute 0."""
        records = normalize_responses([{"q1": float("nan")}, {"q1": 4}])
        assert question_means(records)[0] == pytest.approx(2.0)

    def test_means_empty(self) -> None:
        """No responses, no means."""
        assert question_means(()) == []

    def test_huge_integer_is_infinite(self) -> None:
        """Integers beyond float range become inf instead of overflowing."""
        records = normalize_responses([{"q1": 10**400}, {"q1": 4}])

        matrix = score_matrix(records)

        assert matrix[0, 0] == math.inf
        assert matrix[1, 0] == 4.0
        assert question_means(records)[0] == math.inf

    def test_huge_integer_summary(self) -> None:
        """Summary metrics are computed rather than raising."""
        records = normalize_responses([{"q1": 10**400}, {"q1": 4}])

        metrics = calculate_summary_metrics(records)

        assert metrics.total_count == 2
        assert metrics.avg_satisfaction == math.inf
        assert metrics.items_to_improve == 7
