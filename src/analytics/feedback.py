"""Free-text feedback channels (Q9 and Q10)."""

from collections.abc import Sequence
from dataclasses import dataclass

from src.validation.normalizer import NormalizedResponse, StationId


@dataclass(frozen=True)
class FeedbackEntry:
    """A comment together with who wrote it, where and when."""

    text: str
    examiner: str
    station: StationId
    date: str


@dataclass(frozen=True)
class FeedbackChannels:
    """The two independent comment lists."""

    suggestions: tuple[FeedbackEntry, ...]  # q9: exam content suggestions
    overall: tuple[FeedbackEntry, ...]  # q10: overall suggestions

    def channel(self, field_name: str) -> tuple[FeedbackEntry, ...]:
        """Comments of one channel by question field (``"q9"`` or ``"q10"``)."""
        channels = {"q9": self.suggestions, "q10": self.overall}
        if field_name not in channels:
            raise KeyError(f"Unknown feedback field: {field_name}")
        return channels[field_name]


def extract_channel(
    responses: Sequence[NormalizedResponse],
    field_name: str,
) -> tuple[FeedbackEntry, ...]:
    """Collect the non-empty answers to one open question, in order."""
    entries = []
    for response in responses:
        text = getattr(response, field_name)
        if not text:
            continue
        entries.append(
            FeedbackEntry(
                text=text,
                examiner=response.examiner,
                station=response.station,
                date=response.date,
            )
        )
    return tuple(entries)


def extract_feedback(responses: Sequence[NormalizedResponse]) -> FeedbackChannels:
    """Split the free-text answers into the Q9 and Q10 channels."""
    return FeedbackChannels(
        suggestions=extract_channel(responses, "q9"),
        overall=extract_channel(responses, "q10"),
    )
