"""
Shared fixtures: a fake WaniKani API served through httpx.MockTransport.
"""

from typing import List, Optional

import httpx
import pytest

from maikani.caching import SubjectCache
from maikani.services.aggregator import CriticalSubjectsAggregator
from maikani.services.wanikani_client import WaniKaniClient
from payloads import BASE_URL, make_statistics_payload, make_subject_payload, requested_ids


class FakeWaniKani:
    """
    In-memory stand-in for the WaniKani API.

    Records every request. Set `statistics_error` / `subjects_error` to an
    httpx exception to simulate a transport failure on that endpoint.
    """

    def __init__(self, critical_ids: Optional[List[int]] = None):
        self.critical_ids: List[int] = list(critical_ids or [])
        self.requests: List[httpx.Request] = []
        self.statistics_error: Optional[Exception] = None
        self.subjects_error: Optional[Exception] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path.endswith("/review_statistics"):
            if self.statistics_error:
                raise self.statistics_error
            return httpx.Response(200, json=make_statistics_payload(self.critical_ids))

        if request.url.path.endswith("/subjects"):
            if self.subjects_error:
                raise self.subjects_error
            # Upstream answers each ID once, whatever the query repeats
            ids = list(dict.fromkeys(requested_ids(request)))
            return httpx.Response(200, json={
                "object": "collection",
                "total_count": len(ids),
                "data": [make_subject_payload(subject_id) for subject_id in ids]
            })

        return httpx.Response(404, json={"error": "Not found", "code": 404})

    @property
    def statistics_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/review_statistics")]

    @property
    def subject_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/subjects")]


@pytest.fixture
def fake_wanikani():
    """Fake upstream with no critical items; tests set critical_ids."""
    return FakeWaniKani()


@pytest.fixture
def http_client(fake_wanikani):
    """HTTP client wired to the fake upstream."""
    client = httpx.Client(transport=httpx.MockTransport(fake_wanikani.handler))
    yield client
    client.close()


@pytest.fixture
def wanikani_client(http_client):
    return WaniKaniClient(http_client, base_url=BASE_URL)


@pytest.fixture
def cache():
    return SubjectCache()


@pytest.fixture
def aggregator(wanikani_client, cache):
    return CriticalSubjectsAggregator(client=wanikani_client, cache=cache)
