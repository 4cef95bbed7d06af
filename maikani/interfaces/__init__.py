from .cache import ISubjectCache, CacheStats

__all__ = [
    "ISubjectCache",
    "CacheStats",
]
