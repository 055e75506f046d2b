"""Aggregation of examiner feedback into dashboard views."""

from src.analytics.distribution import QuestionDistribution, build_distributions
from src.analytics.feedback import FeedbackChannels, FeedbackEntry, extract_feedback
from src.analytics.filters import distinct_dates, distinct_stations, filter_responses
from src.analytics.metrics import SummaryMetrics, calculate_summary_metrics
from src.analytics.profile import ProfileAxis, build_profile
from src.analytics.report import (
    distributions_to_dataframe,
    distributions_to_long_dataframe,
    feedback_to_dataframe,
    format_view_summary,
    profile_to_dataframe,
)
from src.analytics.state import (
    DashboardState,
    DashboardView,
    LoadStatus,
    build_view,
    load_snapshot,
)

__all__ = [
    # Filtering
    "filter_responses",
    "distinct_dates",
    "distinct_stations",
    # Aggregation
    "SummaryMetrics",
    "calculate_summary_metrics",
    "QuestionDistribution",
    "build_distributions",
    "ProfileAxis",
    "build_profile",
    "FeedbackEntry",
    "FeedbackChannels",
    "extract_feedback",
    # State
    "DashboardState",
    "DashboardView",
    "LoadStatus",
    "build_view",
    "load_snapshot",
    # Reporting
    "distributions_to_dataframe",
    "distributions_to_long_dataframe",
    "profile_to_dataframe",
    "feedback_to_dataframe",
    "format_view_summary",
]
