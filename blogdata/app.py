import logging
import time
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Config
from .core.middleware import log_requests, global_exception_handler
from .services.global_data import get_global_data

logger = logging.getLogger(__name__)


# Initialize FastAPI
app = FastAPI(title="Blog Global Data API")

# CORS setup
ALLOWED_ORIGINS = Config.allowed_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

@app.middleware("http")
async def _log_requests(request, call_next):
    return await log_requests(request, call_next)

@app.exception_handler(Exception)
async def _global_exception_handler(request, exc):
    return await global_exception_handler(request, exc)


@app.get("/global-data")
def global_data():
    """Return the blog's site-wide display strings.

    Values are read from the environment on every request. A malformed
    percent-encoded value is not caught here and ends up as a 500.
    """
    return get_global_data(variant=Config.site_variant()).to_dict()


@app.get("/health")
async def health_check():
    """Configuration check for the API."""
    health_start_time = time.time()

    try:
        Config.validate()

        health_duration = time.time() - health_start_time

        return {
            "status": "healthy",
            "service": "blog-global-data-api",
            "environment": Config.ENVIRONMENT,
            "variant": Config.BLOG_VARIANT,
            "timestamp": datetime.now().isoformat(),
            "response_time_ms": round(health_duration * 1000, 2)
        }
    except Exception as e:
        health_duration = time.time() - health_start_time
        logger.error(f"Health check failed: {str(e)} - Duration: {health_duration:.1f}s")

        return {
            "status": "unhealthy",
            "service": "blog-global-data-api",
            "environment": Config.ENVIRONMENT,
            "variant": Config.BLOG_VARIANT,
            "timestamp": datetime.now().isoformat(),
            "error": str(e),
            "response_time_ms": round(health_duration * 1000, 2)
        }


@app.get("/")
async def root():
    """Return basic API information."""

    return {
        "service": "Blog Global Data API",
        "version": "1.0",
        "endpoints": {
            "global_data": "/global-data",
            "health": "/health"
        },
        "timestamp": datetime.now().isoformat(),
        "description": "Site-wide display strings for the blog, read from environment variables"
    }
