"""Ingestion boundary: payload parsing and record normalization."""

from src.validation.normalizer import (
    NormalizedResponse,
    StationId,
    StationKind,
    normalize_response,
    normalize_responses,
    normalize_score,
    parse_station,
)
from src.validation.schema_validator import (
    FeedbackPayload,
    RawResponse,
    extract_raw_responses,
    parse_raw_response,
)

__all__ = [
    # Payload
    "RawResponse",
    "FeedbackPayload",
    "extract_raw_responses",
    "parse_raw_response",
    # Normalization
    "StationKind",
    "StationId",
    "NormalizedResponse",
    "normalize_score",
    "parse_station",
    "normalize_response",
    "normalize_responses",
]
