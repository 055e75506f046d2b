"""Client for the examiner feedback source."""

from typing import Any

from src.api.base_client import BaseClient
from src.utils.config import FEEDBACK_SOURCE_URL
from src.validation.schema_validator import extract_raw_responses


class FeedbackClient(BaseClient):
    """Client for the web app that publishes the feedback sheet as JSON.

    The endpoint takes no parameters: a GET on the URL returns every
    submission, either as ``{"examiner": [...]}`` or as a bare array.
    """

    def __init__(self, url: str = FEEDBACK_SOURCE_URL, **kwargs: Any) -> None:
        super().__init__(base_url=url, **kwargs)

    def fetch_raw_responses(self) -> list[Any]:
        """Download the current set of submissions.

        Returns:
            Raw record objects in source order

        Raises:
            APIError: On transport failure, non-2xx status or non-JSON body
        """
        payload = self.get()
        records = extract_raw_responses(payload)
        self.logger.info("Fetched feedback records", count=len(records))
        return records
