"""
WaniKani API client.

Wraps the two upstream calls the aggregator needs behind typed methods:
review statistics below a correctness threshold, and subjects by ID.
Every call makes exactly one request, with no retries, and turns any
failure into an UpstreamError.
"""

import logging
from typing import Any, Dict, Iterable, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..models.statistics import ReviewStatistics
from ..models.subject import Subjects
from .errors import (
    UpstreamDecodeError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)

STATISTICS_ENDPOINT = "/review_statistics"
SUBJECTS_ENDPOINT = "/subjects"

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_ids(ids: Iterable[int], delimiter: str = ",") -> str:
    """Join subject IDs for the `ids` query parameter"""
    return delimiter.join(str(subject_id) for subject_id in ids)


class WaniKaniClient:
    """
    Typed access to the WaniKani v2 API.

    The underlying httpx.Client is shared by all requests and owned by
    the application; this class never closes it.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        base_url: str = "https://api.wanikani.com/v2",
        critical_percentage: int = 75,
        api_revision: str = "20170710"
    ):
        """
        Initialize client

        Args:
            http_client: Shared HTTP client (timeouts are configured on it)
            base_url: WaniKani API root
            critical_percentage: Statistics below this percentage are critical
            api_revision: Value for the API-Revision header
        """
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")
        self.critical_percentage = critical_percentage
        self.api_revision = api_revision

    def fetch_critical_review_statistics(self, token: str) -> ReviewStatistics:
        """
        Get review statistics with percentage correct below the threshold

        Args:
            token: User's WaniKani API token

        Returns:
            ReviewStatistics in upstream order
        """
        params = {"percentages_less_than": str(self.critical_percentage)}
        return self._get(STATISTICS_ENDPOINT, token, params, ReviewStatistics)

    def fetch_subjects(self, token: str, ids: Iterable[int]) -> Subjects:
        """
        Get subject details for the given IDs in a single request

        Args:
            token: User's WaniKani API token
            ids: Subject IDs, serialized in the given order

        Returns:
            Subjects as returned by upstream
        """
        params = {"ids": format_ids(ids)}
        return self._get(SUBJECTS_ENDPOINT, token, params, Subjects)

    def _headers(self, token: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Wanikani-Revision": self.api_revision,
        }

    def _get(
        self,
        endpoint: str,
        token: str,
        params: Dict[str, Any],
        model: Type[ModelT]
    ) -> ModelT:
        url = self.base_url + endpoint
        try:
            # .get() reads the whole body and releases the connection
            response = self.http_client.get(url, params=params, headers=self._headers(token))
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout calling {endpoint}: {e}")
            raise UpstreamTimeoutError(f"Timed out calling {endpoint}", endpoint=endpoint) from e
        except httpx.TransportError as e:
            logger.warning(f"Transport error calling {endpoint}: {e}")
            raise UpstreamTransportError(f"Could not reach {endpoint}: {e}", endpoint=endpoint) from e
        except httpx.DecodingError as e:
            logger.error(f"Undecodable body from {endpoint}: {e}")
            raise UpstreamDecodeError(f"Malformed response from {endpoint}", endpoint=endpoint) from e
        except httpx.HTTPError as e:
            logger.warning(f"HTTP error calling {endpoint}: {e}")
            raise UpstreamTransportError(f"Request to {endpoint} failed: {e}", endpoint=endpoint) from e

        if response.is_error:
            logger.warning(f"{endpoint} returned HTTP {response.status_code}")
            raise UpstreamStatusError(
                f"{endpoint} returned HTTP {response.status_code}",
                status_code=response.status_code,
                endpoint=endpoint
            )

        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Unexpected body from {endpoint}: {e.error_count()} validation error(s)")
            raise UpstreamDecodeError(f"Malformed response from {endpoint}", endpoint=endpoint) from e
