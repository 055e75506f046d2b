"""Per-question score histograms."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from src.utils.config import QUESTION_LABELS, SCORE_FIELDS, SCORE_RANGE
from src.utils.rounding import round_to_int
from src.validation.normalizer import NormalizedResponse


@dataclass(frozen=True)
class QuestionDistribution:
    """How many respondents gave each score to one question."""

    question_id: str  # "Q1" .. "Q8"
    label: str
    counts: dict[int, int] = field(default_factory=dict)
    total: int = 0

    def percentage(self, score: int) -> float:
        """Share of respondents giving ``score``, in percent of ``total``."""
        if self.total == 0:
            return 0.0
        return self.counts.get(score, 0) / self.total * 100

    @property
    def counted(self) -> int:
        """Respondents whose answer landed in one of the buckets."""
        return sum(self.counts.values())


def build_question_distribution(
    responses: Sequence[NormalizedResponse],
    field_name: str,
) -> QuestionDistribution:
    """Histogram of one question's scores over the 1-5 scale.

    Scores are rounded half-up first; anything outside the scale after
    rounding (including the 0 given to missing answers) is left out of the
    buckets but still counts towards ``total``.
    """
    low, high = SCORE_RANGE
    counts = {score: 0 for score in range(low, high + 1)}

    for response in responses:
        rounded = round_to_int(response.score(field_name))
        if rounded in counts:
            counts[rounded] += 1

    question_id = field_name.upper()
    return QuestionDistribution(
        question_id=question_id,
        label=QUESTION_LABELS.get(question_id, question_id),
        counts=counts,
        total=len(responses),
    )


def build_distributions(
    responses: Sequence[NormalizedResponse],
) -> list[QuestionDistribution]:
    """Build the histogram of every Likert question.

    Args:
        responses: Filtered responses

    Returns:
        One QuestionDistribution per question, or [] when there is no data
    """
    if not responses:
        return []
    return [build_question_distribution(responses, f) for f in SCORE_FIELDS]
