import logging
from fastapi import APIRouter, HTTPException, Depends, Query, Request
from ..interfaces.cache import ISubjectCache
from ..models.subject import Subjects
from ..services.aggregator import CriticalSubjectsAggregator
from ..services.errors import (
    UpstreamError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["maikani"])


# Dependencies (set up by the lifespan in main.py)
def get_aggregator(request: Request) -> CriticalSubjectsAggregator:
    return request.app.state.aggregator


def get_cache(request: Request) -> ISubjectCache:
    return request.app.state.cache


def upstream_http_exception(error: UpstreamError) -> HTTPException:
    """Translate an upstream failure into the response for the caller"""
    if isinstance(error, UpstreamTimeoutError):
        return HTTPException(status_code=504, detail=str(error))
    if isinstance(error, UpstreamStatusError) and error.status_code == 401:
        return HTTPException(status_code=401, detail="Invalid WaniKani API token")
    return HTTPException(status_code=502, detail=str(error))


@router.get("/criticalSubjects", response_model=Subjects)
def get_critical_subjects(
    api_token: str = Query(..., alias="APIToken", min_length=1),
    aggregator: CriticalSubjectsAggregator = Depends(get_aggregator)
) -> Subjects:
    """
    Get details for every subject the user answers correctly less than
    the critical percentage of the time

    Args:
        api_token: User's WaniKani API token, passed through upstream

    Returns:
        Subjects with cached items first, then newly fetched ones
    """
    try:
        return aggregator.get_critical_subjects(api_token)
    except UpstreamError as e:
        logger.error(f"Critical subjects request failed: {e}")
        raise upstream_http_exception(e) from e


@router.get("/cache/stats")
def get_cache_stats(cache: ISubjectCache = Depends(get_cache)):
    """Get subject cache statistics"""
    stats = cache.get_stats()
    return {**stats.model_dump(), "hit_rate": stats.hit_rate}
