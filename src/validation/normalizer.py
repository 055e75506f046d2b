"""Normalization of raw survey submissions into canonical records."""

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.utils.config import SCORE_FIELDS
from src.utils.logging_config import get_logger
from src.validation.schema_validator import RawResponse, parse_raw_response

logger = get_logger(__name__)

_NON_NUMERIC = re.compile(r"[^0-9.]")
_DECIMAL_PREFIX = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")


class StationKind(str, Enum):
    """Whether a station identifier is a number or a free-form label."""

    NUMERIC = "numeric"
    LABEL = "label"


@dataclass(frozen=True)
class StationId:
    """Station identifier: either a station number or a text label."""

    kind: StationKind
    value: int | str

    @classmethod
    def numeric(cls, value: int) -> "StationId":
        return cls(StationKind.NUMERIC, value)

    @classmethod
    def label(cls, value: str) -> "StationId":
        return cls(StationKind.LABEL, value)

    @property
    def is_numeric(self) -> bool:
        return self.kind is StationKind.NUMERIC

    def sort_key(self) -> tuple[int, int | str]:
        """Numbers first in ascending order, then labels in text order."""
        return (0, self.value) if self.is_numeric else (1, self.value)

    def __lt__(self, other: "StationId") -> bool:
        if not isinstance(other, StationId):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class NormalizedResponse:
    """A survey submission with canonical types."""

    date: str
    station: StationId
    examiner: str
    scores: tuple[float, ...]
    q9: str = ""
    q10: str = ""

    def score(self, field: str) -> float:
        """Score of a Likert question by field name (``"q1"`` .. ``"q8"``)."""
        return self.scores[SCORE_FIELDS.index(field)]


def normalize_score(value: Any) -> float:
    """Coerce a Likert answer into a number.

    Numbers pass through untouched. Missing values become 0. Anything else
    is stripped down to digits and dots and the leading decimal literal is
    parsed, so ``"4分"`` gives 4.0 and ``"abc"`` gives 0.

    Args:
        value: Raw answer from the sheet

    Returns:
        Numeric score (0 when nothing parsable is found)
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    if not value:
        return 0

    cleaned = _NON_NUMERIC.sub("", str(value))
    match = _DECIMAL_PREFIX.match(cleaned)
    if match is None:
        return 0
    return float(match.group())


def parse_station(value: Any) -> StationId:
    """Canonicalize a station identifier.

    Integers and strings that start with an integer become numeric stations
    (``"3"``, ``" 12 "``, ``"7號"``); everything else is kept as a label.
    """
    if isinstance(value, StationId):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return StationId.numeric(value)
    if isinstance(value, float) and math.isfinite(value):
        return StationId.numeric(int(value))
    if value is None:
        return StationId.label("")

    text = str(value)
    match = _INTEGER_PREFIX.match(text)
    if match is None:
        return StationId.label(text)
    return StationId.numeric(int(match.group(1)))


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _free_text(value: Any) -> str:
    return str(value) if value else ""


def normalize_response(raw: RawResponse | dict[str, Any]) -> NormalizedResponse:
    """Normalize a single raw submission. Never raises."""
    record = parse_raw_response(raw)
    return NormalizedResponse(
        date=_text(record.date),
        station=parse_station(record.station),
        examiner=_text(record.examiner),
        scores=tuple(normalize_score(getattr(record, field)) for field in SCORE_FIELDS),
        q9=_free_text(record.q9),
        q10=_free_text(record.q10),
    )


def normalize_responses(raws: Iterable[Any]) -> tuple[NormalizedResponse, ...]:
    """Normalize a batch of raw submissions, preserving order and count."""
    normalized = tuple(normalize_response(raw) for raw in raws)
    logger.debug("Normalized responses", count=len(normalized))
    return normalized
