import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI

from .config import settings
from .caching import SubjectCache
from .services.wanikani_client import WaniKaniClient
from .services.aggregator import CriticalSubjectsAggregator
from .routers.api import router

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info(f"Starting {settings.app_name} {settings.app_version}")

    # One HTTP client and one cache for the whole process
    http_client = httpx.Client(timeout=settings.upstream_timeout)
    cache = SubjectCache()

    client = WaniKaniClient(
        http_client,
        base_url=settings.wanikani_api_url,
        critical_percentage=settings.critical_percentage,
        api_revision=settings.wanikani_api_revision
    )
    aggregator = CriticalSubjectsAggregator(client=client, cache=cache)

    # Store in app state
    app.state.cache = cache
    app.state.aggregator = aggregator

    logger.info(f"Using {settings.wanikani_api_url}, critical below {settings.critical_percentage}%")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    http_client.close()


def create_app() -> FastAPI:
    """Build the FastAPI application"""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Critical WaniKani review items, enriched with cached subject details",
        lifespan=lifespan
    )
    app.include_router(router)

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "cache_ready": getattr(app.state, "cache", None) is not None
        }

    return app


app = create_app()


def run():
    uvicorn.run(
        "maikani.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
