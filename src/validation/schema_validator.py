"""Pydantic models for the feedback source payload."""

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from src.utils.logging_config import get_logger

logger = get_logger(__name__)


class RawResponse(BaseModel):
    """A single survey submission as received from the feedback source.

    Every field is untyped: the sheet behind the source hands out numbers,
    numeric-looking text or nothing at all for the same column.
    """

    date: Any = Field(default=None, description="Exam date as entered in the sheet")
    station: Any = Field(default=None, description="Station number or label")
    examiner: Any = Field(default=None, description="Examiner name")
    q1: Any = None
    q2: Any = None
    q3: Any = None
    q4: Any = None
    q5: Any = None
    q6: Any = None
    q7: Any = None
    q8: Any = None
    q9: Any = Field(default=None, description="Exam content suggestions (free text)")
    q10: Any = Field(default=None, description="Overall suggestions (free text)")

    model_config = {"extra": "allow"}


class FeedbackPayload(BaseModel):
    """Current payload shape: ``{"examiner": [...]}``."""

    examiner: list[Any] = Field(default_factory=list)

    model_config = {"extra": "allow"}


def extract_raw_responses(payload: Any) -> list[Any]:
    """Pull the list of raw records out of a decoded JSON payload.

    Two shapes are accepted: an object whose ``examiner`` field holds the
    records, and a bare top-level array. Anything else yields no records.

    Args:
        payload: Decoded JSON body

    Returns:
        List of raw record objects (not yet validated)
    """
    if isinstance(payload, list):
        return list(payload)

    if isinstance(payload, dict) and payload.get("examiner"):
        try:
            return FeedbackPayload.model_validate(payload).examiner
        except ValidationError:
            logger.warning(
                "Unexpected 'examiner' field shape",
                field_type=type(payload["examiner"]).__name__,
            )
            return []

    logger.warning(
        "Unrecognised payload shape, treating as empty",
        payload_type=type(payload).__name__,
    )
    return []


def parse_raw_response(item: Any) -> RawResponse:
    """Validate one raw record, degrading non-objects to an empty record."""
    if isinstance(item, RawResponse):
        return item
    if not isinstance(item, dict):
        logger.debug("Skipping fields of non-object record", item_type=type(item).__name__)
        return RawResponse()
    return RawResponse.model_validate(item)
