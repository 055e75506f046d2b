"""Average-score profile for the radar chart."""

from collections.abc import Sequence
from dataclasses import dataclass

from src.analytics.metrics import question_means
from src.utils.config import PROFILE_DOMAIN_MAX, SCORE_FIELDS
from src.utils.rounding import round_half_up
from src.validation.normalizer import NormalizedResponse


@dataclass(frozen=True)
class ProfileAxis:
    """One spoke of the radar chart."""

    axis_label: str
    value: float
    domain_max: int = PROFILE_DOMAIN_MAX


def build_profile(responses: Sequence[NormalizedResponse]) -> list[ProfileAxis]:
    """Mean score per question, rounded to two decimals.

    An empty collection gives an empty profile rather than eight zeros, so
    "no data" stays distinguishable from "all answers were 0".
    """
    means = question_means(responses)
    return [
        ProfileAxis(axis_label=field.upper(), value=round_half_up(mean, 2))
        for field, mean in zip(SCORE_FIELDS, means)
    ]
