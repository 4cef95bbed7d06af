"""
In-process caching for subject details.

Subjects are immutable upstream content, so entries never expire.
"""

from .subject_cache import SubjectCache

__all__ = [
    "SubjectCache",
]
