"""
Cache interface - contract between the aggregator and subject storage.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple
from pydantic import BaseModel
from ..models.subject import SubjectData


class CacheStats(BaseModel):
    """Statistics about cache performance"""
    hits: int = 0
    misses: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate"""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class ISubjectCache(ABC):
    """
    Subject cache interface.

    Implementations must be safe to call from several request threads
    at once and must never raise from get/set.
    """

    @abstractmethod
    def get(self, subject_id: int) -> Tuple[Optional[SubjectData], bool]:
        """
        Look up a subject.

        Args:
            subject_id: WaniKani subject ID

        Returns:
            (subject, True) on a hit, (None, False) on a miss
        """
        pass

    @abstractmethod
    def set(self, subject_id: int, subject: SubjectData) -> None:
        """
        Store a subject.

        Args:
            subject_id: WaniKani subject ID
            subject: Subject fetched from upstream
        """
        pass

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """Get cache performance statistics."""
        pass
