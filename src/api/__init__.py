"""HTTP client for the examiner feedback source."""

from src.api.base_client import APIError, BaseClient, RateLimitError
from src.api.feedback_client import FeedbackClient

__all__ = [
    "APIError",
    "BaseClient",
    "RateLimitError",
    "FeedbackClient",
]
