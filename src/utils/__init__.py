"""Utility modules for configuration, logging and rounding."""

from src.utils.config import (
    ALL,
    FEEDBACK_SOURCE_URL,
    IMPROVEMENT_THRESHOLD,
    PROFILE_DOMAIN_MAX,
    QUESTION_LABELS,
    SCORE_FIELDS,
    TEXT_FIELDS,
)
from src.utils.logging_config import configure_logging, get_logger
from src.utils.rounding import round_half_up, round_to_int

__all__ = [
    "ALL",
    "FEEDBACK_SOURCE_URL",
    "IMPROVEMENT_THRESHOLD",
    "PROFILE_DOMAIN_MAX",
    "QUESTION_LABELS",
    "SCORE_FIELDS",
    "TEXT_FIELDS",
    "configure_logging",
    "get_logger",
    "round_half_up",
    "round_to_int",
]
