"""
Critical subjects aggregator.

Flow for one request:
1. Fetch review statistics below the critical percentage
2. Split their subject IDs into cached subjects and uncached IDs
3. Fetch the uncached IDs in one batch and cache the results
4. Return cached subjects followed by freshly fetched ones
"""

import logging
from typing import Iterable, List, Tuple

from ..interfaces.cache import ISubjectCache
from ..models.subject import SubjectData, Subjects
from .wanikani_client import WaniKaniClient

logger = logging.getLogger(__name__)


def partition_subject_ids(
    ids: Iterable[int],
    cache: ISubjectCache
) -> Tuple[List[SubjectData], List[int]]:
    """
    Split subject IDs by cache membership, keeping traversal order.

    Duplicates are not removed, so len(cached) + len(uncached) always
    equals the number of IDs given.

    Args:
        ids: Subject IDs in statistics order
        cache: Subject cache to consult

    Returns:
        (cached subjects, uncached IDs)
    """
    cached: List[SubjectData] = []
    uncached: List[int] = []
    for subject_id in ids:
        subject, found = cache.get(subject_id)
        if found:
            cached.append(subject)
        else:
            uncached.append(subject_id)
    return cached, uncached


class CriticalSubjectsAggregator:
    """
    Orchestrates the fetch-filter-cache-merge flow.

    Both collaborators are shared process-wide and injected at startup.
    Upstream errors propagate unchanged; nothing partial is returned.
    """

    def __init__(self, client: WaniKaniClient, cache: ISubjectCache):
        self.client = client
        self.cache = cache

    def get_critical_subjects(self, token: str) -> Subjects:
        """
        Get subject details for every critical item of a user

        Args:
            token: User's WaniKani API token

        Returns:
            Subjects with cached items first, then newly fetched items
        """
        statistics = self.client.fetch_critical_review_statistics(token)
        ids = statistics.subject_ids()

        cached, uncached_ids = partition_subject_ids(ids, self.cache)

        fetched: List[SubjectData] = []
        if uncached_ids:
            fetched = self.client.fetch_subjects(token, uncached_ids).data
            for subject in fetched:
                self.cache.set(subject.id, subject)

        logger.info(
            f"Critical subjects: {len(ids)} critical, "
            f"{len(cached)} cached, {len(fetched)} fetched"
        )
        return Subjects(data=cached + fetched)
