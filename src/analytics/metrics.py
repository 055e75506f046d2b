"""Summary KPIs for a filtered set of responses."""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from src.utils.config import IMPROVEMENT_THRESHOLD, SCORE_FIELDS
from src.utils.rounding import round_half_up, to_float
from src.validation.normalizer import NormalizedResponse


@dataclass(frozen=True)
class SummaryMetrics:
    """Headline numbers shown above the charts."""

    total_count: int
    avg_satisfaction: float  # 0-5, one decimal
    items_to_improve: int  # questions with mean below IMPROVEMENT_THRESHOLD


def score_matrix(responses: Sequence[NormalizedResponse]) -> np.ndarray:
    """Scores as an (n_responses, n_questions) float array.

    NaN is read as 0; integers too large for a float become +/-inf.
    """
    if not responses:
        return np.zeros((0, len(SCORE_FIELDS)))
    matrix = np.array([[to_float(s) for s in r.scores] for r in responses], dtype=float)
    matrix[np.isnan(matrix)] = 0.0
    return matrix


def question_means(responses: Sequence[NormalizedResponse]) -> list[float]:
    """Per-question mean score, in question order. Empty input gives []."""
    if not responses:
        return []
    return [float(m) for m in score_matrix(responses).mean(axis=0)]


def calculate_summary_metrics(
    responses: Sequence[NormalizedResponse],
    threshold: float = IMPROVEMENT_THRESHOLD,
) -> SummaryMetrics:
    """Calculate response count, overall satisfaction and weak questions.

    Args:
        responses: Filtered responses
        threshold: Mean score below which a question needs improvement

    Returns:
        SummaryMetrics; all zero for an empty collection
    """
    total = len(responses)
    if total == 0:
        return SummaryMetrics(total_count=0, avg_satisfaction=0.0, items_to_improve=0)

    matrix = score_matrix(responses)
    overall = float(matrix.sum()) / (total * len(SCORE_FIELDS))
    items_to_improve = sum(1 for mean in question_means(responses) if mean < threshold)

    return SummaryMetrics(
        total_count=total,
        avg_satisfaction=round_half_up(overall, 1),
        items_to_improve=items_to_improve,
    )
