"""Tabular and text reports of a dashboard view."""

from collections.abc import Sequence

import pandas as pd

from src.analytics.distribution import QuestionDistribution
from src.analytics.feedback import FeedbackEntry
from src.analytics.profile import ProfileAxis
from src.analytics.state import DashboardView
from src.utils.config import (
    FEEDBACK_CHANNEL_TITLES,
    IMPROVEMENT_THRESHOLD,
    SCORE_LEGEND,
    SCORE_RANGE,
)


def distributions_to_dataframe(distributions: Sequence[QuestionDistribution]) -> pd.DataFrame:
    """One row per question with the count and share of every score.

    Args:
        distributions: Output of build_distributions

    Returns:
        DataFrame with question, label, total, ``count_<n>`` and ``pct_<n>`` columns
    """
    low, high = SCORE_RANGE
    rows = []
    for d in distributions:
        row = {"question": d.question_id, "label": d.label, "total": d.total}
        for score in range(high, low - 1, -1):
            row[f"count_{score}"] = d.counts.get(score, 0)
            row[f"pct_{score}"] = round(d.percentage(score), 1)
        rows.append(row)

    return pd.DataFrame(rows)


def distributions_to_long_dataframe(
    distributions: Sequence[QuestionDistribution],
) -> pd.DataFrame:
    """Long format (question, score, count, percent) for stacked bar charts."""
    low, high = SCORE_RANGE
    rows = [
        {
            "question": d.question_id,
            "label": d.label,
            "score": score,
            "answer": SCORE_LEGEND.get(score, str(score)),
            "count": d.counts.get(score, 0),
            "percent": d.percentage(score),
            "total": d.total,
        }
        for d in distributions
        for score in range(high, low - 1, -1)
    ]
    return pd.DataFrame(
        rows,
        columns=["question", "label", "score", "answer", "count", "percent", "total"],
    )


def profile_to_dataframe(profile: Sequence[ProfileAxis]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"axis": a.axis_label, "value": a.value, "max": a.domain_max} for a in profile],
        columns=["axis", "value", "max"],
    )


def feedback_to_dataframe(entries: Sequence[FeedbackEntry]) -> pd.DataFrame:
    """Comments with their attribution, in display order."""
    return pd.DataFrame(
        [
            {
                "text": e.text,
                "examiner": e.examiner,
                "station": str(e.station),
                "date": e.date,
            }
            for e in entries
        ],
        columns=["text", "examiner", "station", "date"],
    )


def format_view_summary(view: DashboardView) -> str:
    """Format a view as a human-readable text summary.

    Args:
        view: DashboardView to summarize

    Returns:
        Multi-line summary
    """
    metrics = view.metrics
    lines = [
        "Examiner Feedback Summary",
        f"Responses: {metrics.total_count}",
        f"Average Satisfaction: {metrics.avg_satisfaction:.1f} / 5",
        f"Items to Improve (below {IMPROVEMENT_THRESHOLD}): {metrics.items_to_improve}",
    ]

    weak = [a for a in view.profile if a.value < IMPROVEMENT_THRESHOLD]
    if weak:
        lines.append("")
        lines.append("Questions Below Threshold:")
        labels = {d.question_id: d.label for d in view.distributions}
        for axis in weak:
            lines.append(f"  - {labels.get(axis.axis_label, axis.axis_label)}: {axis.value:.2f}")

    lines.append("")
    lines.append("Written Feedback:")
    for field_name, title in FEEDBACK_CHANNEL_TITLES.items():
        lines.append(f"  {title}: {len(view.feedback.channel(field_name))}")

    return "\n".join(lines)
