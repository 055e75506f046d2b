"""Base HTTP client with optional retry logic and structured logging."""

import time
from typing import Any

import requests

from src.utils.config import (
    DEFAULT_RETRY_AFTER,
    DEFAULT_TIMEOUT,
    MAX_RETRIES,
    RETRY_BACKOFF_FACTOR,
)
from src.utils.logging_config import get_logger


class APIError(Exception):
    """Base exception for API-related errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(APIError):
    """Raised when API rate limit is exceeded."""

    pass


class BaseClient:
    """Base HTTP client for JSON endpoints.

    This client provides:
    - A single attempt by default, with opt-in retries and exponential backoff
    - Configurable timeouts
    - Structured logging of requests/responses
    - One error type (APIError) for transport, HTTP and JSON decoding failures
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = DEFAULT_TIMEOUT,
        max_retries: int = MAX_RETRIES,
    ) -> None:
        """Initialize the base client.

        Args:
            base_url: Base URL for API requests
            timeout: Request timeout in seconds
            max_retries: Number of extra attempts after the first one fails
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.logger = get_logger(__name__)
        self._session = requests.Session()
        self._session.headers.update({
            "Accept": "application/json",
            "User-Agent": "OSCE-Feedback-Dashboard/1.0",
        })

    def _calculate_backoff(self, attempt: int) -> float:
        """Delay in seconds before retry number ``attempt`` (0-based)."""
        return float(RETRY_BACKOFF_FACTOR ** attempt)

    @staticmethod
    def _parse_retry_after(value: str | None) -> int:
        """Seconds to wait from a Retry-After header.

        Only the delay-seconds form is read; HTTP-date values and missing or
        malformed headers fall back to DEFAULT_RETRY_AFTER.
        """
        try:
            return int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return DEFAULT_RETRY_AFTER

    def _build_url(self, endpoint: str) -> str:
        endpoint = endpoint.lstrip("/")
        return f"{self.base_url}/{endpoint}" if endpoint else self.base_url

    def _make_request(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        """Make an HTTP request and decode its JSON body.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint appended to base_url ("" for base_url itself)
            **kwargs: Additional arguments passed to requests

        Returns:
            Decoded JSON body

        Raises:
            APIError: If the request fails after all attempts or the body is not JSON
            RateLimitError: If rate limit is exceeded
        """
        url = self._build_url(endpoint)
        kwargs.setdefault("timeout", self.timeout)

        last_exception: Exception | None = None
        last_status: int | None = None

        for attempt in range(self.max_retries + 1):
            try:
                self.logger.debug(
                    "Making API request",
                    method=method,
                    url=url,
                    attempt=attempt + 1,
                )

                response = self._session.request(method, url, **kwargs)

                if response.status_code == 429:
                    retry_after = self._parse_retry_after(response.headers.get("Retry-After"))
                    self.logger.warning(
                        "Rate limit exceeded",
                        retry_after=retry_after,
                    )
                    raise RateLimitError(
                        f"Rate limit exceeded. Retry after {retry_after}s",
                        status_code=429,
                    )

                response.raise_for_status()

                self.logger.debug(
                    "Request successful",
                    status_code=response.status_code,
                    content_length=len(response.content),
                )

                try:
                    return response.json()
                except ValueError as e:
                    self.logger.error(
                        "Response body is not valid JSON",
                        url=url,
                        content_type=response.headers.get("Content-Type"),
                    )
                    raise APIError(
                        "Response body is not valid JSON",
                        status_code=response.status_code,
                    ) from e

            except requests.exceptions.Timeout as e:
                last_exception = e
                self.logger.warning(
                    "Request timeout",
                    attempt=attempt + 1,
                    max_retries=self.max_retries,
                )

            except requests.exceptions.ConnectionError as e:
                last_exception = e
                self.logger.warning(
                    "Connection error",
                    attempt=attempt + 1,
                    error=str(e),
                )

            except requests.exceptions.HTTPError as e:
                status = e.response.status_code if e.response is not None else None
                # Client errors are not retried
                if status is not None and 400 <= status < 500:
                    raise APIError(f"Client error: {status}", status_code=status) from e
                last_exception = e
                last_status = status
                self.logger.warning(
                    "HTTP error",
                    attempt=attempt + 1,
                    status_code=status,
                )

            except requests.exceptions.RequestException as e:
                self.logger.error(
                    "Request could not be completed",
                    url=url,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                raise APIError(f"Request failed: {e}") from e

            if attempt < self.max_retries:
                delay = self._calculate_backoff(attempt)
                self.logger.info(
                    "Retrying request",
                    delay_seconds=delay,
                    next_attempt=attempt + 2,
                )
                time.sleep(delay)

        raise APIError(
            f"Request failed after {self.max_retries + 1} attempt(s): {last_exception}",
            status_code=last_status,
        ) from last_exception

    def get(self, endpoint: str = "", **kwargs: Any) -> Any:
        """Make a GET request and return the decoded JSON body."""
        return self._make_request("GET", endpoint, **kwargs)

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> "BaseClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
