"""
Subject cache with no expiration and no eviction.

A plain dict guarded by a single lock.
"""

import logging
import threading
from typing import Dict, Optional, Tuple
from ..interfaces.cache import ISubjectCache, CacheStats
from ..models.subject import SubjectData

logger = logging.getLogger(__name__)


class SubjectCache(ISubjectCache):
    """
    Mapping of subject ID to SubjectData, kept for the process lifetime.

    Features:
    - O(1) get/set
    - First write wins: once an ID is present its value never changes
    - Hit/miss tracking
    - Thread-safe (FastAPI runs sync endpoints on a threadpool)
    """

    def __init__(self):
        self._subjects: Dict[int, SubjectData] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, subject_id: int) -> Tuple[Optional[SubjectData], bool]:
        """
        Retrieve a subject.

        Args:
            subject_id: WaniKani subject ID

        Returns:
            (subject, True) if cached, otherwise (None, False)
        """
        with self._lock:
            subject = self._subjects.get(subject_id)
            if subject is None:
                self._misses += 1
                return None, False
            self._hits += 1
            return subject, True

    def set(self, subject_id: int, subject: SubjectData) -> None:
        """
        Store a subject unless the ID is already cached.

        Args:
            subject_id: WaniKani subject ID
            subject: Subject to cache
        """
        with self._lock:
            if subject_id in self._subjects:
                return
            self._subjects[subject_id] = subject
        logger.debug(f"Cached subject {subject_id}")

    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats with hits, misses and size
        """
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                size=len(self._subjects)
            )

    def __contains__(self, subject_id: int) -> bool:
        with self._lock:
            return subject_id in self._subjects

    def __len__(self) -> int:
        with self._lock:
            return len(self._subjects)
