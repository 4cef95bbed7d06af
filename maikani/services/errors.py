"""Errors raised when talking to the upstream WaniKani API."""

from typing import Optional


class UpstreamError(Exception):
    """Base class for any failed upstream call; aborts the current request only."""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        super().__init__(message)
        self.endpoint = endpoint


class UpstreamTransportError(UpstreamError):
    """Upstream unreachable, TLS failure or broken connection."""


class UpstreamTimeoutError(UpstreamTransportError):
    """Upstream did not answer within the configured timeout."""


class UpstreamStatusError(UpstreamError):
    """Upstream answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int, endpoint: Optional[str] = None):
        super().__init__(message, endpoint=endpoint)
        self.status_code = status_code


class UpstreamDecodeError(UpstreamError):
    """Upstream body was not JSON or did not match the expected shape."""
