"""Dashboard state and the views derived from it."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from src.analytics.distribution import QuestionDistribution, build_distributions
from src.analytics.feedback import FeedbackChannels, extract_feedback
from src.analytics.filters import distinct_dates, distinct_stations, filter_responses
from src.analytics.metrics import SummaryMetrics, calculate_summary_metrics
from src.analytics.profile import ProfileAxis, build_profile
from src.api.base_client import APIError
from src.api.feedback_client import FeedbackClient
from src.utils.config import ALL
from src.utils.logging_config import get_logger
from src.validation.normalizer import NormalizedResponse, StationId, normalize_responses

logger = get_logger(__name__)

LOAD_ERROR_MESSAGE = "無法讀取資料，請確認權限設定。"


class LoadStatus(str, Enum):
    """Where the dashboard is in its fetch lifecycle."""

    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class DashboardState:
    """Snapshot plus active filters. Transitions return new states."""

    snapshot: tuple[NormalizedResponse, ...] = ()
    date_filter: str = ALL
    station_filter: StationId | str = ALL
    status: LoadStatus = LoadStatus.LOADING
    error: str | None = None

    def replace_snapshot(self, raws: Iterable[Any]) -> "DashboardState":
        """Normalize a freshly fetched batch and swap it in whole."""
        return replace(
            self,
            snapshot=normalize_responses(raws),
            status=LoadStatus.READY,
            error=None,
        )

    def with_filters(
        self,
        date_filter: str | None = None,
        station_filter: StationId | str | int | None = None,
    ) -> "DashboardState":
        """Change one or both filters; None leaves a filter as it is."""
        return replace(
            self,
            date_filter=self.date_filter if date_filter is None else date_filter,
            station_filter=self.station_filter if station_filter is None else station_filter,
        )

    def fail(self, message: str = LOAD_ERROR_MESSAGE) -> "DashboardState":
        """Enter the error state, dropping any data."""
        return replace(self, snapshot=(), status=LoadStatus.ERROR, error=message)

    @property
    def has_data(self) -> bool:
        return bool(self.snapshot)


@dataclass(frozen=True)
class DashboardView:
    """Everything the page renders for one state."""

    responses: tuple[NormalizedResponse, ...]
    dates: list[str]
    stations: list[StationId | str]
    metrics: SummaryMetrics
    distributions: list[QuestionDistribution]
    profile: list[ProfileAxis]
    feedback: FeedbackChannels


def build_view(state: DashboardState) -> DashboardView:
    """Recompute every derived view from the snapshot and filters.

    Args:
        state: Current dashboard state

    Returns:
        DashboardView for the filtered responses
    """
    filtered = filter_responses(state.snapshot, state.date_filter, state.station_filter)
    logger.debug(
        "Building dashboard view",
        snapshot_size=len(state.snapshot),
        filtered_size=len(filtered),
        date_filter=state.date_filter,
        station_filter=str(state.station_filter),
    )
    return DashboardView(
        responses=filtered,
        dates=distinct_dates(state.snapshot),
        stations=distinct_stations(state.snapshot),
        metrics=calculate_summary_metrics(filtered),
        distributions=build_distributions(filtered),
        profile=build_profile(filtered),
        feedback=extract_feedback(filtered),
    )


def load_snapshot(
    client: FeedbackClient,
    state: DashboardState | None = None,
) -> DashboardState:
    """Fetch the feedback source once and move to READY or ERROR.

    Args:
        client: Client for the feedback source
        state: State to transition from (a fresh one if omitted)

    Returns:
        READY state holding the new snapshot, or ERROR state without data
    """
    state = state or DashboardState()
    try:
        raws = client.fetch_raw_responses()
    except APIError as e:
        logger.error("Failed to load feedback", error=str(e), status_code=e.status_code)
        return state.fail()

    new_state = state.replace_snapshot(raws)
    logger.info("Loaded feedback snapshot", count=len(new_state.snapshot))
    return new_state
