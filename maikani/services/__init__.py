from .aggregator import CriticalSubjectsAggregator, partition_subject_ids
from .wanikani_client import WaniKaniClient
from .errors import (
    UpstreamError,
    UpstreamTransportError,
    UpstreamTimeoutError,
    UpstreamStatusError,
    UpstreamDecodeError,
)

__all__ = [
    "CriticalSubjectsAggregator",
    "partition_subject_ids",
    "WaniKaniClient",
    "UpstreamError",
    "UpstreamTransportError",
    "UpstreamTimeoutError",
    "UpstreamStatusError",
    "UpstreamDecodeError",
]
